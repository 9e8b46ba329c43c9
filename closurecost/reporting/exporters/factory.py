"""
reporting/exporters/factory.py - Exporter factory.
"""

from __future__ import annotations
from typing import Dict, Type, Union

from ...errors import ExportError
from .base import BaseExporter
from .csv_exporter import CSVExporter
from .json_exporter import JSONExporter
from .text_exporter import TextExporter
from ..enums import ExportFormat


# Registry of exporters by format
_EXPORTER_REGISTRY: Dict[ExportFormat, Type[BaseExporter]] = {
    ExportFormat.TEXT: TextExporter,
    ExportFormat.JSON: JSONExporter,
    ExportFormat.CSV: CSVExporter,
}


def get_exporter(format: Union[ExportFormat, str], **kwargs) -> BaseExporter:
    """
    Get exporter instance for format.

    Args:
        format: Export format or its name ("text", "json", "csv")
        **kwargs: Exporter-specific options

    Returns:
        BaseExporter instance

    Raises:
        ExportError: Unknown export format
    """
    try:
        export_format = ExportFormat(format)
    except ValueError as e:
        raise ExportError(
            f"Unknown export format: {format}",
            source="reporting/exporters",
        ) from e

    exporter_class = _EXPORTER_REGISTRY[export_format]
    return exporter_class(**kwargs)
