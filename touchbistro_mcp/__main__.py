"""
touchbistro-mcp CLI entry point.

Runs the MCP server on stdio (the default command) and provides a couple of
utility commands for inspecting the tool catalog and configuration.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from touchbistro_mcp import __version__
from touchbistro_mcp.client import TouchBistroClient
from touchbistro_mcp.config.logging import get_logger, setup_logging
from touchbistro_mcp.config.settings import Settings, load_settings
from touchbistro_mcp.errors import ConfigurationError
from touchbistro_mcp.tools.catalog import CATALOG
from touchbistro_mcp.tools.dispatcher import TouchBistroTools


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="touchbistro-mcp",
        description="MCP server exposing the TouchBistro POS API as tools",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"touchbistro-mcp {__version__}",
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
        "serve",
        help="Run the MCP server on stdio (default)",
    )

    subparsers.add_parser(
        "tools",
        help="Print the tool catalog as JSON",
    )

    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )

    return parser


def _mask(secret: str) -> str:
    if not secret:
        return "Not set"
    if len(secret) <= 4:
        return "Set"
    return f"Set (...{secret[-4:]})"


def cmd_config(settings: Settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("=== touchbistro-mcp Configuration ===")
    logger.info(f"Base URL: {settings.base_url}")
    logger.info(f"API Key: {_mask(settings.api_key)}")
    logger.info(f"Venue ID: {settings.venue_id or 'Not set'}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")

    for name in settings.missing_credentials():
        logger.warning(f"{name} is not set; 'serve' will refuse to start")

    return 0


def cmd_tools() -> int:
    """Print the tool catalog to stdout."""
    print(json.dumps([descriptor.to_dict() for descriptor in CATALOG], indent=2))
    return 0


def cmd_serve(settings: Settings) -> int:
    """Start the MCP server. Fails before serving anything if credentials are missing."""
    logger = get_logger(__name__)

    try:
        client = TouchBistroClient(
            api_key=settings.api_key,
            venue_id=settings.venue_id,
            base_url=settings.base_url,
        )
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        return 1

    # Imported here so the utility commands do not pull in the MCP runtime
    from touchbistro_mcp.server import serve

    asyncio.run(serve(TouchBistroTools(client)))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        settings = load_settings(env_file=args.env_file, **overrides)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    setup_logging(settings)

    if args.command == "tools":
        return cmd_tools()
    elif args.command == "config":
        return cmd_config(settings)
    else:
        return cmd_serve(settings)


if __name__ == "__main__":
    sys.exit(main())
