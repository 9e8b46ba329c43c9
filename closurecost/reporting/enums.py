"""
reporting/enums.py - Reporting enumerations.
"""

from enum import Enum


class ExportFormat(Enum):
    """Export format options."""
    TEXT = "text"
    JSON = "json"
    CSV = "csv"


class CSVSection(Enum):
    """Which tables the CSV exporter writes."""
    LINE_ITEMS = "line_items"
    CASHFLOWS = "cashflows"
    REPORT = "report"
