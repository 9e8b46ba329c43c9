"""
cli/main.py - Command line entry point

Usage:
    closurecost estimate [--preset ID | --input FILE] [--format text|json|csv]
                         [--output FILE] [--variation PCT]
    closurecost presets [--json]
    closurecost defaults [--output FILE]
"""

from __future__ import annotations
from typing import List, Optional, TextIO
import argparse
import logging
import sys

from ..bootstrap.config import EngineConfig
from ..bootstrap.logging_setup import configure_from_config
from ..errors import ClosureCostError
from .commands import ALL_COMMANDS
from .core import CLIContext, CommandRegistry

logger = logging.getLogger("cli")

EXIT_OK = 0
EXIT_ERROR = 2


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    for command_class in ALL_COMMANDS:
        registry.register(command_class())
    return registry


def build_parser(registry: CommandRegistry) -> argparse.ArgumentParser:
    """Top-level parser with one subparser per registered command."""
    parser = argparse.ArgumentParser(
        description="Mine closure cost estimation",
        prog="closurecost",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides CLOSURECOST_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    for name, command in registry.get_all().items():
        sub = subparsers.add_parser(
            name,
            aliases=command.aliases,
            help=command.description,
            description=command.description,
        )
        command.configure_parser(sub)
    return parser


def main(
    argv: Optional[List[str]] = None,
    config: Optional[EngineConfig] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv)
        config: Configuration (defaults to EngineConfig.from_env())
        stdout: Stream for command output (defaults to sys.stdout)

    Returns:
        Exit code: 0 on success, 2 on a closurecost error
    """
    stdout = stdout or sys.stdout
    config = config or EngineConfig.from_env()

    registry = build_registry()
    parsed = build_parser(registry).parse_args(argv)

    level = "DEBUG" if parsed.verbose else parsed.log_level
    configure_from_config(config.logging, level=level)

    command = registry.get(parsed.command)
    ctx = CLIContext(config=config)

    try:
        result = command.execute(ctx, parsed)
    except ClosureCostError as e:
        logger.error(f"{command.name} failed: {e.message}")
        for detail in getattr(e, "errors", [])[1:]:
            logger.error(f"  {detail}")
        return EXIT_ERROR

    if result.output:
        stdout.write(result.output)
    if result.message:
        logger.info(result.message)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
