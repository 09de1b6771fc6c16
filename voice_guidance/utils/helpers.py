"""
Helper functions for the Voice Guidance package.
"""

import json
import logging
from pathlib import Path
from typing import Any

import structlog
import yaml

from ..config import get_config


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load voice guidance settings from a YAML file.

    Args:
        config_path: Path to config file. If None, uses the packaged config.yaml

    Returns:
        Mapping with optional voice_guidance, typography and logging sections
    """
    path = Path(config_path) if config_path else Path(__file__).parent.parent / "config.yaml"

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must hold a mapping: {path}")

    return data


def load_json_file(file_path: str | Path) -> Any:
    """
    Load a JSON document from disk.

    Args:
        file_path: Path to a .json file

    Returns:
        Decoded JSON value
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if path.suffix.lower() != ".json":
        raise ValueError(f"Expected JSON file, got: {path.suffix}")

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
) -> structlog.BoundLogger:
    """
    Set up structured logging for voice guidance.

    Records from stdlib loggers and structlog loggers are rendered by the
    same structlog console renderer.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR); default from AppConfig.log_level
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    level = level or get_config().log_level
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    timestamper = structlog.processors.TimeStamper(fmt="iso")
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        log_dir = Path(log_file).parent
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=numeric_level, handlers=handlers)
    logging.getLogger("voice_guidance").setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("voice_guidance")
