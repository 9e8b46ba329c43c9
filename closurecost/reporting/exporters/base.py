"""
reporting/exporters/base.py - Base exporter class.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from ...cost.schema import Results
from ...errors import ExportError
from ...inputs.schema import InputState
from ..enums import ExportFormat


class BaseExporter(ABC):
    """Abstract base class for results exporters."""

    format: ExportFormat

    @abstractmethod
    def export(self, results: Results, inputs: Optional[InputState] = None) -> str:
        """
        Export results to string format.

        Args:
            results: Calculation results to export
            inputs: Input state the results were computed from, if available

        Returns:
            String representation in target format
        """
        pass

    def export_to_file(
        self,
        results: Results,
        file_path: Union[str, Path],
        inputs: Optional[InputState] = None,
    ) -> None:
        """
        Export results directly to file.

        Raises:
            ExportError: If the file cannot be written
        """
        content = self.export(results, inputs)
        try:
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise ExportError(
                f"Cannot write {self.format.value} export to {file_path}: {e}",
                source="reporting/exporters",
            ) from e
