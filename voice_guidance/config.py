"""
Central Configuration Module for Voice Guidance

Handles environment-specific settings:
- Default locale and localization strings directory
- Locale typography (locales without inter-word spaces, full-stop glyphs)
- Contract checking mode
- Logging level
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


DEFAULT_STRINGS_DIR = Path(__file__).parent / "sound_strings"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("true", "1", "yes")


@dataclass
class LocaleConfig:
    """Typographic properties of the supported locales."""

    # Locales whose sentence components are concatenated without a space
    no_space_locales: frozenset[str] = frozenset({"ja"})

    # Sentence-terminal glyphs: period, East Asian full stop, Devanagari danda
    full_stops: tuple[str, ...] = (".", "。", "।")

    def uses_spaces(self, locale: str) -> bool:
        """Check if words of the locale are separated by spaces."""
        return locale not in self.no_space_locales

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LocaleConfig":
        """Create locale config from a configuration mapping."""
        config = cls()
        if "no_space_locales" in data:
            config.no_space_locales = frozenset(data["no_space_locales"] or ())
        if "full_stops" in data:
            config.full_stops = tuple(data["full_stops"] or ())
        return config


@dataclass
class AppConfig:
    """Main application configuration."""

    locale: str = "en"
    strings_dir: str = str(DEFAULT_STRINGS_DIR)

    # Raise ContractViolation instead of logging it (debug builds, tests)
    strict_contracts: bool = False

    typography: LocaleConfig = field(default_factory=LocaleConfig)

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Create application config from environment variables.

        Environment variables:
            VOICE_GUIDANCE_LOCALE: Locale bound at startup (default: en)
            VOICE_GUIDANCE_STRINGS_DIR: Directory holding <locale>.json files
            VOICE_GUIDANCE_STRICT: Raise on contract violations
            LOG_LEVEL: Logging level
        """
        config = cls(
            locale=os.getenv("VOICE_GUIDANCE_LOCALE", "en"),
            strings_dir=os.getenv("VOICE_GUIDANCE_STRINGS_DIR", str(DEFAULT_STRINGS_DIR)),
            strict_contracts=_env_flag("VOICE_GUIDANCE_STRICT"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

        if config.strict_contracts:
            logger.warning("Strict contract mode enabled - violations will raise")

        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppConfig":
        """
        Create application config from a loaded YAML mapping.

        Keys missing from the mapping fall back to the environment.
        """
        config = cls.from_env()
        guidance = data.get("voice_guidance", {})

        config.locale = guidance.get("locale", config.locale)
        config.strings_dir = str(guidance.get("strings_dir", config.strings_dir))
        config.strict_contracts = bool(guidance.get("strict_contracts", config.strict_contracts))
        config.typography = LocaleConfig.from_dict(data.get("typography", {}))
        config.log_level = data.get("logging", {}).get("level", config.log_level)

        return config

    def log_configuration(self) -> None:
        """Log current configuration summary."""
        logger.info("=" * 60)
        logger.info("Voice Guidance Configuration")
        logger.info("=" * 60)
        logger.info(f"Locale: {self.locale}")
        logger.info(f"Strings: {self.strings_dir}")
        logger.info(f"Strict contracts: {self.strict_contracts}")
        logger.info(f"No-space locales: {', '.join(sorted(self.typography.no_space_locales))}")
        logger.info("=" * 60)


# Global config instance (lazy loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create global application config."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def set_config(config: AppConfig) -> None:
    """Install an explicit global config."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset global config (useful for testing)."""
    global _config
    _config = None
