"""
cli/commands.py - CLI command implementations
"""

from __future__ import annotations
from typing import Optional
import argparse
import json
import logging

from ..cost.estimator import calculate_closure_costs
from ..errors import ExportError, InputValidationError
from ..inputs.defaults import create_default_input_state
from ..inputs.loader import load_input_state
from ..inputs.presets import SCENARIO_PRESETS, get_preset_inputs
from ..inputs.schema import InputState
from ..reporting.enums import CSVSection, ExportFormat
from ..reporting.exporters import CSVExporter, JSONExporter, TextExporter
from ..reporting.exporters.base import BaseExporter
from .core import CLICommand, CLIContext, CommandResult

logger = logging.getLogger("cli")


def _resolve_inputs(args: argparse.Namespace) -> InputState:
    """Scenario from --preset, --input, or the default scenario."""
    if getattr(args, "preset", None):
        return get_preset_inputs(args.preset)
    if getattr(args, "input", None):
        return load_input_state(args.input)
    return create_default_input_state()


def _check_variation(value: float) -> float:
    if not 0 <= value < 100:
        raise InputValidationError(
            [f"variation: must be >= 0 and < 100 (got {value})"],
            source="cli",
        )
    return value


def _build_exporter(ctx: CLIContext, args: argparse.Namespace) -> BaseExporter:
    export_format = ExportFormat(args.format)
    if export_format == ExportFormat.JSON:
        return JSONExporter()
    if export_format == ExportFormat.CSV:
        return CSVExporter(
            delimiter=ctx.config.csv_delimiter,
            currency=ctx.config.currency,
            section=CSVSection(args.csv_section),
        )
    return TextExporter(currency=ctx.config.currency)


class EstimateCommand(CLICommand):
    """Run the closure cost estimate for a scenario."""

    name = "estimate"
    description = "Estimate closure costs for a scenario"
    aliases = ["run"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        source = parser.add_mutually_exclusive_group()
        source.add_argument("--preset", "-p", help="Scenario preset id")
        source.add_argument("--input", "-i", help="Scenario file (.json, .yaml, .yml)")
        parser.add_argument(
            "--format", "-f",
            choices=[f.value for f in ExportFormat],
            default=ExportFormat.TEXT.value,
            help="Output format",
        )
        parser.add_argument(
            "--csv-section",
            choices=[s.value for s in CSVSection],
            default=CSVSection.REPORT.value,
            help="Table(s) written by CSV output",
        )
        parser.add_argument("--output", "-o", help="Write output to file instead of stdout")
        parser.add_argument(
            "--variation",
            type=float,
            default=None,
            help="Sensitivity variation in percent",
        )

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        inputs = _resolve_inputs(args)
        variation = args.variation
        if variation is None:
            variation = ctx.config.variation_percent
        variation = _check_variation(variation)

        results = calculate_closure_costs(inputs, variation_percent=variation)
        exporter = _build_exporter(ctx, args)

        if args.output:
            exporter.export_to_file(results, args.output, inputs)
            logger.info(f"Wrote {exporter.format.value} results to {args.output}")
            return CommandResult(
                message=f"Results written to {args.output}",
                data=results.summary(),
            )

        return CommandResult(
            output=exporter.export(results, inputs),
            data=results.summary(),
        )


class PresetsCommand(CLICommand):
    """List the built-in scenario presets."""

    name = "presets"
    description = "List scenario presets"
    aliases = ["list"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--json", action="store_true", help="Output as JSON")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        if args.json:
            data = [
                {
                    "id": preset.preset_id,
                    "name": preset.name,
                    "description": preset.description,
                }
                for preset in SCENARIO_PRESETS
            ]
            return CommandResult(output=json.dumps(data, indent=2) + "\n", data=data)

        width = max(len(preset.preset_id) for preset in SCENARIO_PRESETS)
        lines = [
            f"{preset.preset_id:<{width}}  {preset.name} - {preset.description}"
            for preset in SCENARIO_PRESETS
        ]
        return CommandResult(output="\n".join(lines) + "\n")


class DefaultsCommand(CLICommand):
    """Print the default scenario as JSON."""

    name = "defaults"
    description = "Dump the default scenario as JSON"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--output", "-o", help="Write to file instead of stdout")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        text = JSONExporter().export_inputs(create_default_input_state()) + "\n"
        output: Optional[str] = args.output
        if output:
            try:
                with open(output, "w", encoding="utf-8") as f:
                    f.write(text)
            except OSError as e:
                raise ExportError(f"Cannot write defaults to {output}: {e}", source="cli") from e
            return CommandResult(message=f"Default scenario written to {output}")
        return CommandResult(output=text)


ALL_COMMANDS = [
    EstimateCommand,
    PresetsCommand,
    DefaultsCommand,
]
