"""
closurecost Core Enumerations

Closure phases and the small input enumerations shared by every layer.
"""

from enum import Enum
from typing import Dict, Tuple


class ClosurePhase(str, Enum):
    """
    The 8 ordered closure phases.

    Flow: planning -> decommissioning -> earthworks | tsf/wrd | water ->
          revegetation -> monitoring -> relinquishment
    """
    PLANNING_APPROVALS = "planning_approvals"
    DECOMMISSIONING_DEMOLITION = "decommissioning_demolition"
    EARTHWORKS_LANDFORM = "earthworks_landform"
    TAILINGS_WRD_REHABILITATION = "tailings_wrd_rehabilitation"
    WATER_MANAGEMENT = "water_management"
    REVEGETATION_ECOSYSTEM = "revegetation_ecosystem"
    MONITORING_MAINTENANCE = "monitoring_maintenance"
    RELINQUISHMENT_POSTCLOSURE = "relinquishment_postclosure"


CLOSURE_PHASES: Tuple[ClosurePhase, ...] = tuple(ClosurePhase)


PHASE_NAMES: Dict[ClosurePhase, str] = {
    ClosurePhase.PLANNING_APPROVALS: "Planning & Approvals",
    ClosurePhase.DECOMMISSIONING_DEMOLITION: "Decommissioning & Demolition",
    ClosurePhase.EARTHWORKS_LANDFORM: "Earthworks & Landform",
    ClosurePhase.TAILINGS_WRD_REHABILITATION: "Tailings/WRD Rehabilitation",
    ClosurePhase.WATER_MANAGEMENT: "Water Management & Treatment",
    ClosurePhase.REVEGETATION_ECOSYSTEM: "Revegetation & Ecosystem",
    ClosurePhase.MONITORING_MAINTENANCE: "Monitoring & Maintenance",
    ClosurePhase.RELINQUISHMENT_POSTCLOSURE: "Relinquishment & Post-closure",
}


class MonitoringIntensity(str, Enum):
    """Post-closure monitoring intensity."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DiscountRateMode(str, Enum):
    """
    How the discount rate is quoted.

    Accepted and carried through, but both modes discount with the
    configured rate unchanged.
    """
    REAL = "real"
    NOMINAL = "nominal"
