#!/usr/bin/env python3
"""
Voice Guidance CLI

Command-line interface printing the text spoken for a turn notification.

Usage:
    python -m voice_guidance.main <notification.json> [options]
    voice-guidance <notification.json> [options]

Examples:
    # English text from the packaged strings
    python -m voice_guidance.main turn.json

    # Hungarian, custom strings directory
    python -m voice_guidance.main turn.json --locale hu --strings ./sound_strings

    # Canonical road shields
    python -m voice_guidance.main turn.json --shields shields.json

    # Speed camera warning
    python -m voice_guidance.main --speed-camera --locale hu
"""

import argparse
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from . import __version__
from .announcer import TurnNotificationTexts
from .config import AppConfig, get_config, set_config
from .contracts import ContractViolation
from .localization import DirectoryTextResolver
from .models import Notification
from .road_names import MappingShieldResolver
from .utils.helpers import load_config, load_json_file, setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="voice-guidance",
        description="Print the voice guidance text for a turn notification",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s turn.json
  %(prog)s turn.json --locale hu
  %(prog)s turn.json --strings ./sound_strings --shields shields.json
  %(prog)s --speed-camera --locale ja
        """
    )

    parser.add_argument(
        "notification_file",
        type=str,
        nargs="?",
        default=None,
        help="Path to notification JSON file"
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to configuration YAML file"
    )

    parser.add_argument(
        "-l", "--locale",
        type=str,
        default=None,
        help="Locale to speak (default: from config)"
    )

    parser.add_argument(
        "--strings",
        type=str,
        default=None,
        help="Directory with <locale>.json localization strings"
    )

    parser.add_argument(
        "--shields",
        type=str,
        default=None,
        help="JSON file mapping road references to canonical shield names"
    )

    parser.add_argument(
        "--speed-camera",
        action="store_true",
        help="Print the speed camera warning instead of a turn notification"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on contract violations instead of staying silent"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging to console"
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Print only the spoken text"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def build_config(args: argparse.Namespace) -> AppConfig:
    """Merge config file and command-line overrides."""
    if args.config:
        config = AppConfig.from_dict(load_config(args.config))
    else:
        config = get_config()

    if args.locale:
        config.locale = args.locale
    if args.strings:
        config.strings_dir = args.strings
    if args.strict:
        config.strict_contracts = True

    set_config(config)
    return config


def speak(args: argparse.Namespace, config: AppConfig) -> str:
    """Generate the requested text."""
    shield_resolver = None
    if args.shields:
        shield_resolver = MappingShieldResolver(load_json_file(args.shields))

    texts = TurnNotificationTexts(
        resolver=DirectoryTextResolver(config.strings_dir),
        shield_resolver=shield_resolver,
        config=config,
    )
    texts.set_locale(config.locale)

    if args.speed_camera:
        return texts.speed_camera_notification()

    notification = Notification.model_validate(load_json_file(args.notification_file))
    return texts.turn_notification(notification)


def main() -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.notification_file and not args.speed_camera:
        parser.error("a notification file is required unless --speed-camera is given")

    # Command-line verbosity wins over the configured level
    if args.quiet:
        log_level = "ERROR"
    elif args.verbose:
        log_level = "DEBUG"
    else:
        log_level = None

    console = Console()
    error_console = Console(stderr=True)

    try:
        config = build_config(args)
        log = setup_logging(level=log_level or config.log_level)
        if args.verbose:
            config.log_configuration()

        text = speak(args, config)
        log.debug("voice_guidance_text", locale=config.locale, text=text)

        if args.quiet:
            print(text)
        else:
            console.print(Panel(
                text or "[dim](silence)[/dim]",
                title=f"[bold green]Voice guidance ({config.locale})[/bold green]",
                border_style="green"
            ))

        return 0

    except (FileNotFoundError, ValueError) as e:
        if isinstance(e, ValidationError):
            error_console.print(f"[red]Invalid notification:[/red] {e}")
            return 2
        error_console.print(f"[red]Error:[/red] {e}")
        return 1

    except ContractViolation as e:
        error_console.print(f"[red]Contract violation:[/red] {e}")
        return 2

    except Exception as e:
        error_console.print(f"[red]Unexpected Error:[/red] {e}")
        if args.verbose:
            error_console.print_exception()
        return 3


if __name__ == "__main__":
    sys.exit(main())
