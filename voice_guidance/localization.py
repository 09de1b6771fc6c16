"""
Localization Module

Resolves localization keys to locale-specific spoken text.

The text generator never reads an ambient "current language": it holds a
LocaleBinding (locale + resolver) that is replaced as a whole whenever the
locale changes.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .contracts import contract_violation


logger = logging.getLogger(__name__)


class TextResolver(Protocol):
    """Key to localized text lookup service."""

    def get_text(self, locale: str, key: str) -> str:
        """Return localized text for key, or an empty string if absent."""
        ...


class DictTextResolver:
    """
    In-memory resolver over {locale: {key: text}}.

    Used for tests and for strings already loaded by the caller.
    """

    def __init__(self, strings: dict[str, dict[str, str]] | None = None):
        self.strings = {locale: dict(table) for locale, table in (strings or {}).items()}

    @classmethod
    def from_json(cls, json_buffer: str, locale: str) -> "DictTextResolver":
        """
        Create a resolver for one locale from a JSON object buffer.

        Args:
            json_buffer: JSON object mapping keys to texts
            locale: Locale the texts belong to
        """
        table = json.loads(json_buffer)
        if not isinstance(table, dict):
            raise ValueError("Localization JSON must be an object of key/text pairs")
        return cls({locale: table})

    def get_text(self, locale: str, key: str) -> str:
        return self.strings.get(locale, {}).get(key, "")


class DirectoryTextResolver:
    """
    Resolver reading <directory>/<locale>.json files.

    Each locale file is read on first use and kept in memory afterwards.
    Missing or corrupt files leave the locale without texts.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self._tables: dict[str, dict[str, str]] = {}

    def available_locales(self) -> list[str]:
        """List locales that have a strings file."""
        if not self.directory.is_dir():
            return []
        return sorted(path.stem for path in self.directory.glob("*.json"))

    def _load(self, locale: str) -> dict[str, str]:
        path = self.directory / f"{locale}.json"

        if not path.exists():
            logger.warning(f"No localization strings for locale {locale!r} in {self.directory}")
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                table = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Unreadable localization strings {path}: {e}")
            return {}

        if not isinstance(table, dict):
            logger.error(f"Localization strings {path} must be an object of key/text pairs")
            return {}

        logger.debug(f"Loaded {len(table)} strings for locale {locale!r}")
        return table

    def get_text(self, locale: str, key: str) -> str:
        if locale not in self._tables:
            self._tables[locale] = self._load(locale)
        return self._tables[locale].get(key, "")


@dataclass(frozen=True)
class LocaleBinding:
    """The current locale together with the resolver serving it."""

    locale: str
    resolver: TextResolver

    def text(self, key: str) -> str:
        """
        Resolve a localization key for the bound locale.

        Args:
            key: Non-empty localization key

        Returns:
            Localized text, empty if the key is unknown
        """
        if not key:
            contract_violation("Empty localization key", locale=self.locale)
            return ""
        return self.resolver.get_text(self.locale, key)
