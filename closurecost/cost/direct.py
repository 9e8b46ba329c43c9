"""
cost/direct.py - Direct works cost lines.

Each direct cost item is declared once in DIRECT_WORKS_RULES as a
condition plus a builder. An item appears only when its condition holds;
Mobilisation and Monitoring always apply.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Tuple

from ..core.enums import ClosurePhase, MonitoringIntensity
from ..core.unit_converter import DAYS_PER_YEAR
from ..inputs.schema import InputState
from .enums import CostCategory
from .schema import DerivedQuantities, LineItemCost

Condition = Callable[[InputState, DerivedQuantities], bool]
Builder = Callable[[InputState, DerivedQuantities], LineItemCost]

# WRD reshaping is costed at half the TSF capping intensity per metre.
WRD_CAPPING_INTENSITY = 0.5


@dataclass(frozen=True)
class CostRule:
    """One conditionally included direct cost item."""
    name: str
    applies: Condition
    build: Builder


def _line(
    category: CostCategory,
    description: str,
    quantity: float,
    unit: str,
    unit_rate: float,
    phase: ClosurePhase,
) -> LineItemCost:
    return LineItemCost(
        category=category,
        description=description,
        quantity=quantity,
        unit=unit,
        unit_rate=unit_rate,
        subtotal=quantity * unit_rate,
        phase=phase,
    )


def _always(inputs: InputState, derived: DerivedQuantities) -> bool:
    return True


# =============================================================================
# Builders
# =============================================================================


def _mobilisation(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    return _line(
        CostCategory.MOBILISATION,
        "Site mobilisation and demobilisation",
        1, "lump sum",
        inputs.unit_rates.mobilisation_lump_sum,
        ClosurePhase.DECOMMISSIONING_DEMOLITION,
    )


def _demolition(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    return _line(
        CostCategory.DEMOLITION,
        "Building and structure demolition",
        inputs.quantities.number_of_buildings, "buildings",
        inputs.unit_rates.demolition_per_building,
        ClosurePhase.DECOMMISSIONING_DEMOLITION,
    )


def _earthworks(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    return _line(
        CostCategory.EARTHWORKS,
        "General earthworks (recontouring, reshaping)",
        derived.total_earthworks_volume_m3, "m³",
        inputs.unit_rates.earthworks_per_m3,
        ClosurePhase.EARTHWORKS_LANDFORM,
    )


def _topsoil(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    return _line(
        CostCategory.EARTHWORKS,
        "Topsoil placement",
        derived.topsoil_volume_m3, "m³",
        inputs.unit_rates.topsoil_per_m3,
        ClosurePhase.EARTHWORKS_LANDFORM,
    )


def _tsf_closure(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    rates = inputs.unit_rates
    capping_cost_per_m2 = rates.capping_base_per_m2 * (
        inputs.quantities.tsf_cover_thickness_m * rates.capping_thickness_factor
    )
    return _line(
        CostCategory.TSF_CLOSURE,
        "TSF capping and closure",
        derived.tsf_area_m2, "m²",
        capping_cost_per_m2,
        ClosurePhase.TAILINGS_WRD_REHABILITATION,
    )


def _wrd_rehabilitation(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    rates = inputs.unit_rates
    wrd_cost_per_m2 = rates.capping_base_per_m2 * (
        inputs.quantities.wrd_reshaping_depth_m
        * rates.capping_thickness_factor
        * WRD_CAPPING_INTENSITY
    )
    return _line(
        CostCategory.WRD_REHABILITATION,
        "WRD reshaping and cover",
        derived.wrd_area_m2, "m²",
        wrd_cost_per_m2,
        ClosurePhase.TAILINGS_WRD_REHABILITATION,
    )


def _water_treatment_required(inputs: InputState, derived: DerivedQuantities) -> bool:
    q = inputs.quantities
    return q.water_treatment_duration_years > 0 and q.water_treatment_flow_ml_per_day > 0


def _water_treatment_capex(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    capex_adjusted = (
        inputs.unit_rates.water_treatment_capex
        * inputs.quantities.water_treatment_intensity_factor
    )
    return _line(
        CostCategory.WATER_TREATMENT_CAPEX,
        "Water treatment plant (capex)",
        1, "plant",
        capex_adjusted,
        ClosurePhase.WATER_MANAGEMENT,
    )


def _water_treatment_opex(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    q = inputs.quantities
    annual_opex = (
        q.water_treatment_flow_ml_per_day
        * DAYS_PER_YEAR
        * inputs.unit_rates.water_treatment_opex_per_ml
        * q.water_treatment_intensity_factor
    )
    return _line(
        CostCategory.WATER_TREATMENT_OPEX,
        "Water treatment operations (opex)",
        q.water_treatment_duration_years, "years",
        annual_opex,
        ClosurePhase.WATER_MANAGEMENT,
    )


def _revegetation(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    rates = inputs.unit_rates
    return _line(
        CostCategory.REVEGETATION,
        "Revegetation and ecosystem establishment",
        inputs.quantities.disturbed_area_ha, "ha",
        rates.revegetation_per_ha * rates.revegetation_complexity_factor,
        ClosurePhase.REVEGETATION_ECOSYSTEM,
    )


def _erosion_controls(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    return _line(
        CostCategory.EROSION_CONTROLS,
        "Erosion and sediment controls",
        inputs.quantities.disturbed_area_ha, "ha",
        inputs.unit_rates.erosion_controls_per_ha,
        ClosurePhase.EARTHWORKS_LANDFORM,
    )


def _road_rehabilitation(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    return _line(
        CostCategory.ROAD_REHABILITATION,
        "Road and access rehabilitation",
        inputs.quantities.road_length_km, "km",
        inputs.unit_rates.road_rehab_per_km,
        ClosurePhase.EARTHWORKS_LANDFORM,
    )


def _hazardous_materials(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    return _line(
        CostCategory.HAZARDOUS_MATERIALS,
        "Hazardous materials handling and disposal",
        inputs.quantities.hazardous_materials_area_ha, "ha",
        inputs.unit_rates.hazardous_materials_per_ha,
        ClosurePhase.DECOMMISSIONING_DEMOLITION,
    )


def _monitoring(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    q = inputs.quantities
    intensity = MonitoringIntensity(q.monitoring_intensity)
    return _line(
        CostCategory.MONITORING,
        f"Environmental monitoring ({intensity.value} intensity)",
        q.monitoring_duration_years, "years",
        inputs.unit_rates.monitoring_rate(intensity),
        ClosurePhase.MONITORING_MAINTENANCE,
    )


def _community_heritage(inputs: InputState, derived: DerivedQuantities) -> LineItemCost:
    return _line(
        CostCategory.COMMUNITY_HERITAGE,
        "Community and heritage management",
        1, "lump sum",
        inputs.unit_rates.community_heritage_lump_sum,
        ClosurePhase.PLANNING_APPROVALS,
    )


# =============================================================================
# Rule Table
# =============================================================================


DIRECT_WORKS_RULES: Tuple[CostRule, ...] = (
    CostRule("mobilisation", _always, _mobilisation),
    CostRule(
        "demolition",
        lambda i, d: i.quantities.number_of_buildings > 0,
        _demolition,
    ),
    CostRule(
        "earthworks",
        lambda i, d: d.total_earthworks_volume_m3 > 0,
        _earthworks,
    ),
    CostRule(
        "topsoil",
        lambda i, d: d.topsoil_volume_m3 > 0,
        _topsoil,
    ),
    CostRule(
        "tsf_closure",
        lambda i, d: i.quantities.tsf_area_ha > 0,
        _tsf_closure,
    ),
    CostRule(
        "wrd_rehabilitation",
        lambda i, d: i.quantities.wrd_footprint_ha > 0,
        _wrd_rehabilitation,
    ),
    CostRule("water_treatment_capex", _water_treatment_required, _water_treatment_capex),
    CostRule("water_treatment_opex", _water_treatment_required, _water_treatment_opex),
    CostRule(
        "revegetation",
        lambda i, d: i.quantities.disturbed_area_ha > 0,
        _revegetation,
    ),
    CostRule(
        "erosion_controls",
        lambda i, d: i.quantities.disturbed_area_ha > 0,
        _erosion_controls,
    ),
    CostRule(
        "road_rehabilitation",
        lambda i, d: i.quantities.road_length_km > 0,
        _road_rehabilitation,
    ),
    CostRule(
        "hazardous_materials",
        lambda i, d: (
            i.quantities.hazardous_materials_enabled
            and i.quantities.hazardous_materials_area_ha > 0
        ),
        _hazardous_materials,
    ),
    CostRule("monitoring", _always, _monitoring),
    CostRule(
        "community_heritage",
        lambda i, d: i.quantities.community_heritage_enabled,
        _community_heritage,
    ),
)


def applicable_rules(inputs: InputState, derived: DerivedQuantities) -> List[str]:
    """Names of the rules whose conditions hold for these inputs."""
    return [rule.name for rule in DIRECT_WORKS_RULES if rule.applies(inputs, derived)]


def calculate_direct_works_costs(
    inputs: InputState,
    derived: DerivedQuantities,
) -> List[LineItemCost]:
    """
    Build all direct works line items.

    Args:
        inputs: Complete input state
        derived: Derived quantities for the same inputs

    Returns:
        Line items in rule-table order
    """
    return [
        rule.build(inputs, derived)
        for rule in DIRECT_WORKS_RULES
        if rule.applies(inputs, derived)
    ]
