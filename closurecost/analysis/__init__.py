"""
analysis/ - Cost breakdowns and sensitivity analysis.
"""

from .breakdown import (
    calculate_phase_breakdown,
    calculate_category_breakdown,
)

from .sensitivity import (
    DEFAULT_VARIATION_PERCENT,
    SensitivityDriver,
    SENSITIVITY_DRIVERS,
    SensitivityAnalyzer,
    evaluate_totals,
    analyze_driver,
    calculate_sensitivity,
)


__all__ = [
    "calculate_phase_breakdown",
    "calculate_category_breakdown",
    "DEFAULT_VARIATION_PERCENT",
    "SensitivityDriver",
    "SENSITIVITY_DRIVERS",
    "SensitivityAnalyzer",
    "evaluate_totals",
    "analyze_driver",
    "calculate_sensitivity",
]
