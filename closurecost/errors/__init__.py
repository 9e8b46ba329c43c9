"""
errors/ - Error taxonomy.
"""

from .taxonomy import (
    ErrorCategory,
    ClosureCostError,
    InputValidationError,
    UnknownPresetError,
    UnitConversionError,
    ExportError,
)

__all__ = [
    "ErrorCategory",
    "ClosureCostError",
    "InputValidationError",
    "UnknownPresetError",
    "UnitConversionError",
    "ExportError",
]
