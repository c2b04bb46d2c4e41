"""
Playbot CLI entry point.

Provides command-line interface for running the bot and inspecting its
configuration. Bot settings themselves come from the environment.
"""

import argparse
import signal
import sys
from pathlib import Path

from playbot import __version__
from playbot.config.logging import get_logger, setup_logging
from playbot.config.settings import ConfigError, Settings, load_settings


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="playbot",
        description="Prefix-command Discord bot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment:\n"
            "  DISCORD_BOT_TOKEN  bot token (required for 'run')\n"
            "  BOT_PREFIX         command prefix (default: !)\n"
            "  LOG_LEVEL          logging level (default: INFO)\n"
            "  LOG_FILE           optional log file path"
        ),
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Playbot {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "run",
        help="Connect to Discord and answer commands until interrupted (default)",
    )

    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )

    return parser


def cmd_config(settings: Settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("\n=== Playbot Configuration ===\n")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"Bot Token: {'Set' if settings.token else 'Not set'}")
    logger.info(f"Command Prefix: {settings.prefix}")

    return 0


def _interrupt_on_sigterm(signum, frame) -> None:
    """Turn SIGTERM into the KeyboardInterrupt that bot.run() shuts down on."""
    raise KeyboardInterrupt


def cmd_run(settings: Settings) -> int:
    """Start the Discord bot."""
    logger = get_logger(__name__)

    try:
        config = settings.bot_config()
    except ConfigError as e:
        logger.error(f"{e}. Set it in the environment or your .env file.")
        return 1

    from playbot.bot import PlaybotBot

    bot = PlaybotBot(config)
    logger.info(f"Starting Playbot (prefix: {config.prefix!r})...")
    signal.signal(signal.SIGTERM, _interrupt_on_sigterm)
    # log_handler=None: disable discord.py's default logging setup and use ours
    bot.run(config.token, log_handler=None)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load settings
    try:
        settings = load_settings(env_file=args.env_file)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Override log level if specified
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})

    setup_logging(settings)

    if args.command == "config":
        return cmd_config(settings)
    # No subcommand behaves like "run"
    return cmd_run(settings)


if __name__ == "__main__":
    sys.exit(main())
