"""
reporting/exporters/text_exporter.py - Plain text summary exporter.

Terminal-oriented rendering used by the CLI's default output format.
"""

from __future__ import annotations
from typing import List, Optional

from ...bootstrap.config import CurrencyConfig
from ...core.enums import PHASE_NAMES
from ...cost.enums import CATEGORY_NAMES
from ...cost.schema import Results
from ...inputs.schema import InputState
from .base import BaseExporter
from ..enums import ExportFormat
from ..formatting import (
    format_currency,
    format_duration,
    format_number,
    format_percent,
    format_volume,
)


class TextExporter(BaseExporter):
    """Exports a human-readable results summary."""

    format = ExportFormat.TEXT

    def __init__(self, currency: Optional[CurrencyConfig] = None, width: int = 40):
        self.currency = currency or CurrencyConfig()
        self.width = width

    def export(self, results: Results, inputs: Optional[InputState] = None) -> str:
        lines: List[str] = []

        title = "Mine Closure Cost Estimate"
        if inputs is not None:
            title += f": {inputs.scenario_name}"
        lines.append(title)
        lines.append("=" * len(title))
        lines.append("")

        lines.extend(self._summary(results))
        lines.extend(self._phases(results))
        lines.extend(self._categories(results))
        lines.extend(self._sensitivity(results))

        return "\n".join(lines).rstrip() + "\n"

    def _money(self, value: float) -> str:
        return format_currency(value, self.currency)

    def _row(self, label: str, value: str) -> str:
        return f"  {label:<{self.width}}{value}"

    def _summary(self, results: Results) -> List[str]:
        dq = results.derived_quantities
        return [
            "Summary",
            self._row("Direct works", self._money(results.direct_works_cost)),
            self._row("Indirect costs", self._money(results.indirect_costs)),
            self._row("Total nominal cost", self._money(results.total_nominal_cost)),
            self._row("Total discounted (NPV)", self._money(results.total_discounted_cost)),
            self._row(
                "Peak annual cashflow",
                f"{self._money(results.peak_annual_cashflow)} ({results.peak_cashflow_year})",
            ),
            self._row("Total duration", format_duration(results.total_duration_years)),
            self._row("Monitoring share", format_percent(results.monitoring_cost_share)),
            self._row("Earthworks volume", format_volume(dq.total_earthworks_volume_m3)),
            self._row(
                "Risk score / uplift",
                f"{format_number(dq.risk_score, 1)} / {format_percent(dq.risk_uplift_percent, 2)}",
            ),
            "",
        ]

    def _phases(self, results: Results) -> List[str]:
        lines = ["Cost by phase"]
        for summary in results.phase_breakdown:
            lines.append(self._row(
                PHASE_NAMES[summary.phase],
                f"{self._money(summary.total_cost)} ({format_percent(summary.percent_of_total)})",
            ))
        lines.append("")
        return lines

    def _categories(self, results: Results) -> List[str]:
        lines = ["Cost by category"]
        for summary in results.category_breakdown:
            lines.append(self._row(
                CATEGORY_NAMES[summary.category],
                f"{self._money(summary.total_cost)} ({format_percent(summary.percent_of_total)})",
            ))
        lines.append("")
        return lines

    def _sensitivity(self, results: Results) -> List[str]:
        if not results.sensitivity_results:
            return []
        lines = ["Sensitivity (total cost delta, low to high)"]
        for result in results.sensitivity_results:
            lines.append(self._row(
                result.driver_name,
                format_currency(result.delta_cost, self.currency, compact=True),
            ))
        lines.append("")
        return lines
