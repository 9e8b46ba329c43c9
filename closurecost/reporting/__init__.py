"""
reporting/ - Formatting and export of calculation results.
"""

from .enums import ExportFormat, CSVSection

from .formatting import (
    format_currency,
    format_number,
    format_percent,
    format_area,
    format_volume,
    format_distance,
    format_duration,
    format_rate,
)

from .exporters import (
    BaseExporter,
    TextExporter,
    JSONExporter,
    CSVExporter,
    get_exporter,
)


__all__ = [
    "ExportFormat",
    "CSVSection",
    "format_currency",
    "format_number",
    "format_percent",
    "format_area",
    "format_volume",
    "format_distance",
    "format_duration",
    "format_rate",
    "BaseExporter",
    "TextExporter",
    "JSONExporter",
    "CSVExporter",
    "get_exporter",
]
