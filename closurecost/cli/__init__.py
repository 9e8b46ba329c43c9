"""
cli/ - Command Line Interface

Commands:
- estimate: run the cost engine on a preset, scenario file or the defaults
- presets: list the built-in scenario presets
- defaults: dump the default scenario as JSON
"""

from .core import (
    CLIContext,
    CommandResult,
    CommandRegistry,
    CLICommand,
)

from .commands import (
    EstimateCommand,
    PresetsCommand,
    DefaultsCommand,
)

from .main import main, build_parser, build_registry


__all__ = [
    # Core
    "CLIContext",
    "CommandResult",
    "CommandRegistry",
    "CLICommand",
    # Commands
    "EstimateCommand",
    "PresetsCommand",
    "DefaultsCommand",
    # Entry point
    "main",
    "build_parser",
    "build_registry",
]
