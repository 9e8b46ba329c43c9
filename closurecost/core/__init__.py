"""
core/ - Shared enumerations and unit conversion.
"""

from .enums import (
    ClosurePhase,
    CLOSURE_PHASES,
    PHASE_NAMES,
    MonitoringIntensity,
    DiscountRateMode,
)
from .unit_converter import (
    UnitConverter,
    ha_to_m2,
    m2_to_ha,
    M2_PER_HA,
    DAYS_PER_YEAR,
)

__all__ = [
    "ClosurePhase",
    "CLOSURE_PHASES",
    "PHASE_NAMES",
    "MonitoringIntensity",
    "DiscountRateMode",
    "UnitConverter",
    "ha_to_m2",
    "m2_to_ha",
    "M2_PER_HA",
    "DAYS_PER_YEAR",
]
