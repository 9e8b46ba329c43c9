"""
reporting/exporters/json_exporter.py - JSON exporter.
"""

from __future__ import annotations
import json
from typing import Any, Dict, Optional

from ...cost.schema import Results
from ...inputs.schema import InputState
from .base import BaseExporter
from ..enums import ExportFormat


class JSONExporter(BaseExporter):
    """Exports results (and optionally their inputs) to JSON format."""

    format = ExportFormat.JSON

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        """
        Initialize JSON exporter.

        Args:
            indent: JSON indentation level
            ensure_ascii: Force ASCII encoding
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def export(self, results: Results, inputs: Optional[InputState] = None) -> str:
        """Export results to JSON string."""
        data: Dict[str, Any] = {}
        if inputs is not None:
            data["scenario_name"] = inputs.scenario_name
            data["inputs"] = inputs.to_dict()
        data["results"] = results.to_dict()
        return self._dumps(data)

    def export_inputs(self, inputs: InputState) -> str:
        """Export a scenario's inputs alone, in the layout load_input_state reads."""
        return self._dumps(inputs.to_dict())

    def _dumps(self, data: Dict[str, Any]) -> str:
        return json.dumps(
            data,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str,
        )
