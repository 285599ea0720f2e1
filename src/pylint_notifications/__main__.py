"""CLI entry point for Pylint Notifications.

Sends a single notification through the configured renderer, which is
useful for checking a rendering host end to end.

Usage:
    python -m pylint_notifications [options] [body]
"""

from __future__ import annotations

import argparse
import logging
import logging.config
import sys
from typing import NoReturn

from pydantic import ValidationError

from pylint_notifications import __version__
from pylint_notifications.config import Settings, clear_settings_cache, get_settings
from pylint_notifications.notifier import (
    HttpRenderer,
    LogRenderer,
    NotificationRenderer,
    Notifier,
    NotifierError,
)

APP_NAME = "Pylint Notifications"
APP_VERSION = __version__

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

SEVERITIES = ("info", "warning", "error")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="pylint-notifications",
        description="Send a Pylint plugin notification to the rendering host.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m pylint_notifications "Inspection finished"        Send an info notification
  python -m pylint_notifications --severity error "Failed"    Send an error notification
  python -m pylint_notifications --tool-unavailable           Send the Pylint not found alert
  python -m pylint_notifications --config-check               Validate config and exit
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    parser.add_argument(
        "--config-check",
        action="store_true",
        help="Validate configuration and exit without sending anything",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level (default: from settings)",
    )

    parser.add_argument(
        "--severity",
        choices=SEVERITIES,
        default="info",
        help="Severity of the notification (default: info)",
    )

    parser.add_argument(
        "--title",
        default=None,
        help="Notification title (default: plugin name)",
    )

    parser.add_argument(
        "--context",
        default="cli",
        help="Display context handed to the renderer (default: cli)",
    )

    parser.add_argument(
        "--tool-unavailable",
        action="store_true",
        help="Send the Pylint not found notification instead of a body",
    )

    parser.add_argument(
        "body",
        nargs="?",
        default=None,
        help="Notification body",
    )

    return parser


def configure_logging(level: str) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level string (DEBUG, INFO, etc.)
    """
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": (
                    "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "detailed" if level == "DEBUG" else "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
        "loggers": {
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
    }
    logging.config.dictConfig(config)


def validate_config() -> Settings | None:
    """Validate and load configuration.

    Returns:
        Settings instance if valid, None if invalid.
    """
    try:
        clear_settings_cache()
        return get_settings()
    except ValidationError as e:
        print("Configuration validation failed:", file=sys.stderr)
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            msg = error["msg"]
            print(f"  {field}: {msg}", file=sys.stderr)
        return None


def print_config_summary(settings: Settings) -> None:
    """Print a summary of the configuration.

    Args:
        settings: Application settings.
    """
    summary = settings.redacted_summary()
    print("Configuration:")
    print(f"  Install Docs: {summary['install_docs_url']}")
    print(f"  Renderer: {summary['renderer_url']}")
    print(f"  Renderer Timeout: {summary['renderer_timeout']}s")
    print(f"  Log Level: {summary['log_level']}")
    print(f"  Max Cause Depth: {summary['max_cause_depth']}")
    print()


def run_config_check(settings: Settings) -> int:
    """Run configuration check and exit.

    Args:
        settings: Validated settings.

    Returns:
        Exit code (0 for success).
    """
    print(f"{APP_NAME} v{APP_VERSION}")
    print("Configuration is valid!")
    print()
    print_config_summary(settings)

    if settings.renderer.enabled:
        print("  Renderer: HTTP host configured")
    else:
        print("  Renderer: not configured, notifications go to the log")

    print()
    print("All checks passed. Ready to run.")
    return EXIT_SUCCESS


def create_renderer(settings: Settings) -> NotificationRenderer:
    """Create the renderer selected by the settings."""
    if settings.renderer.url is not None:
        return HttpRenderer(settings.renderer.url, timeout=settings.renderer.timeout)
    return LogRenderer()


def send_notification(settings: Settings, args: argparse.Namespace) -> int:
    """Send the notification described by the parsed arguments.

    Args:
        settings: Application settings.
        args: Parsed command line arguments.

    Returns:
        Exit code.
    """
    logger = logging.getLogger(__name__)
    notifier = Notifier(create_renderer(settings), settings=settings)

    try:
        if args.tool_unavailable:
            notifier.tool_unavailable(args.context)
        else:
            show = getattr(notifier, args.severity)
            show(args.context, args.body or "", title=args.title)
    except NotifierError as e:
        logger.error(f"Notification not sent: {e}")
        return EXIT_ERROR

    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = validate_config()
    if settings is None:
        sys.exit(EXIT_CONFIG_ERROR)

    log_level = args.log_level or settings.log_level
    configure_logging(log_level)

    if args.config_check:
        sys.exit(run_config_check(settings))

    sys.exit(send_notification(settings, args))


if __name__ == "__main__":
    main()
