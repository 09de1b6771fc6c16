"""
Utility functions and helpers for the Voice Guidance package.
"""

from .helpers import (
    load_config,
    load_json_file,
    setup_logging,
)

__all__ = [
    "load_config",
    "load_json_file",
    "setup_logging",
]
