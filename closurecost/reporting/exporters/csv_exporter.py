"""
reporting/exporters/csv_exporter.py - CSV exporter.

Line items and annual cashflows export as standalone tables; the full
report stacks a summary block and both tables, separated by section
banners. Every cell is quoted.
"""

from __future__ import annotations
import csv
import io
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ...bootstrap.config import CurrencyConfig
from ...core.enums import PHASE_NAMES
from ...cost.enums import CATEGORY_NAMES
from ...cost.schema import AnnualCashflow, LineItemCost, Results
from ...inputs.schema import InputState
from .base import BaseExporter
from ..enums import CSVSection, ExportFormat
from ..formatting import format_currency

LINE_ITEM_HEADERS = [
    "Category", "Description", "Quantity", "Unit", "Unit Rate", "Subtotal", "Phase",
]

CASHFLOW_HEADERS = [
    "Year",
    "Nominal Cost",
    "Escalated Cost",
    "Discounted Cost",
    "Cumulative Nominal",
    "Cumulative Discounted",
]


class CSVExporter(BaseExporter):
    """Exports results tables to CSV format."""

    format = ExportFormat.CSV

    def __init__(
        self,
        delimiter: str = ",",
        currency: Optional[CurrencyConfig] = None,
        section: CSVSection = CSVSection.REPORT,
    ):
        """
        Initialize CSV exporter.

        Args:
            delimiter: Field delimiter character
            currency: Currency used for money columns
            section: Which table(s) export() writes
        """
        self.delimiter = delimiter
        self.currency = currency or CurrencyConfig()
        self.section = section

    def export(self, results: Results, inputs: Optional[InputState] = None) -> str:
        if self.section == CSVSection.LINE_ITEMS:
            return self.export_line_items(results.line_items)
        if self.section == CSVSection.CASHFLOWS:
            return self.export_cashflows(results.annual_cashflows)
        return self.export_report(results, inputs)

    def export_line_items(self, line_items: Iterable[LineItemCost]) -> str:
        """Export line items as a single table."""
        rows = [
            [
                CATEGORY_NAMES[item.category],
                item.description,
                self._plain_number(item.quantity),
                item.unit,
                self._money(item.unit_rate),
                self._money(item.subtotal),
                PHASE_NAMES[item.phase],
            ]
            for item in line_items
        ]
        return self._write([LINE_ITEM_HEADERS] + rows)

    def export_cashflows(self, cashflows: Iterable[AnnualCashflow]) -> str:
        """Export annual cashflows as a single table."""
        rows = [
            [
                str(cf.year),
                self._money(cf.nominal_cost),
                self._money(cf.escalated_cost),
                self._money(cf.discounted_cost),
                self._money(cf.cumulative_nominal),
                self._money(cf.cumulative_discounted),
            ]
            for cf in cashflows
        ]
        return self._write([CASHFLOW_HEADERS] + rows)

    def export_report(
        self,
        results: Results,
        inputs: Optional[InputState] = None,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """Export summary, line items and cashflows as one document."""
        generated_at = generated_at or datetime.now(timezone.utc)
        scenario_name = inputs.scenario_name if inputs is not None else ""

        header = self._write([
            ["=== MINE CLOSURE COST ESTIMATE ==="],
            [],
            ["Scenario:", scenario_name],
            ["Generated:", generated_at.isoformat()],
            [],
            ["=== SUMMARY ==="],
            ["Total Nominal Cost", self._money(results.total_nominal_cost)],
            ["Total Discounted (NPV)", self._money(results.total_discounted_cost)],
            ["Peak Annual Cashflow", self._money(results.peak_annual_cashflow)],
            ["Peak Year", str(results.peak_cashflow_year)],
            ["Total Duration", f"{results.total_duration_years} years"],
            [],
            ["=== LINE ITEMS ==="],
        ])
        line_items = self.export_line_items(results.line_items)
        banner = self._write([[], ["=== ANNUAL CASHFLOWS ==="]])
        cashflows = self.export_cashflows(results.annual_cashflows)
        return header + line_items + banner + cashflows

    def _write(self, rows: List[List[str]]) -> str:
        output = io.StringIO()
        writer = csv.writer(
            output,
            delimiter=self.delimiter,
            quoting=csv.QUOTE_ALL,
            lineterminator="\n",
        )
        writer.writerows(rows)
        return output.getvalue()

    def _money(self, value: float) -> str:
        return format_currency(value, self.currency)

    def _plain_number(self, value: float) -> str:
        """Quantity as written, without a trailing .0 for whole numbers."""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
