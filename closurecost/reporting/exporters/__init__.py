"""
reporting/exporters/__init__.py - Results exporter exports.
"""

from .base import BaseExporter
from .text_exporter import TextExporter
from .json_exporter import JSONExporter
from .csv_exporter import CSVExporter
from .factory import get_exporter

__all__ = [
    "BaseExporter",
    "TextExporter",
    "JSONExporter",
    "CSVExporter",
    "get_exporter",
]
