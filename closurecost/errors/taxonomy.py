"""
errors/taxonomy.py - Error classification for the boundary layers.

The calculation engine itself raises nothing for validated input; these
exceptions belong to input loading, validation, presets and export.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCategory(Enum):
    """Error categories."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    CONVERSION = "conversion"
    EXPORT = "export"


class ClosureCostError(Exception):
    """Base class for all closurecost errors."""

    category: ErrorCategory = ErrorCategory.VALIDATION

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.message = message
        self.source = source

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "category": self.category.value,
            "message": self.message,
            "source": self.source,
        }


class InputValidationError(ClosureCostError):
    """Raised when a raw input record fails schema validation."""

    category = ErrorCategory.VALIDATION

    def __init__(
        self,
        errors: List[str],
        source: str = "inputs/validation",
    ):
        self.errors = list(errors)
        summary = f"{len(self.errors)} invalid input field(s)"
        if self.errors:
            summary += f": {self.errors[0]}"
        super().__init__(summary, source)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = list(self.errors)
        return data


class UnknownPresetError(ClosureCostError):
    """Raised when a scenario preset id is not registered."""

    category = ErrorCategory.CONFIGURATION

    def __init__(self, preset_id: str, available: Optional[List[str]] = None):
        self.preset_id = preset_id
        self.available = list(available or [])
        message = f"Unknown preset: {preset_id}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message, "inputs/presets")


class UnitConversionError(ClosureCostError):
    """Raised when a unit conversion is not supported."""

    category = ErrorCategory.CONVERSION


class ExportError(ClosureCostError):
    """Raised when results cannot be exported."""

    category = ErrorCategory.EXPORT
