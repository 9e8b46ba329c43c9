"""
cost/schema.py - Cost data structures.

Output records of the calculation engine. All are plain data with a
to_dict() for presentation and export; none carries behaviour beyond
simple derived properties.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..core.enums import CLOSURE_PHASES, ClosurePhase
from .enums import CostCategory


@dataclass(frozen=True)
class DerivedQuantities:
    """Physical quantities derived from the inputs."""
    tsf_area_m2: float
    wrd_area_m2: float
    tsf_capping_volume_m3: float
    wrd_earthworks_volume_m3: float
    total_earthworks_volume_m3: float
    topsoil_volume_m3: float
    disturbed_area_m2: float
    recontouring_area_m2: float
    total_water_treatment_ml: float
    risk_score: float
    risk_uplift_percent: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tsf_area_m2": round(self.tsf_area_m2, 2),
            "wrd_area_m2": round(self.wrd_area_m2, 2),
            "tsf_capping_volume_m3": round(self.tsf_capping_volume_m3, 2),
            "wrd_earthworks_volume_m3": round(self.wrd_earthworks_volume_m3, 2),
            "total_earthworks_volume_m3": round(self.total_earthworks_volume_m3, 2),
            "topsoil_volume_m3": round(self.topsoil_volume_m3, 2),
            "disturbed_area_m2": round(self.disturbed_area_m2, 2),
            "recontouring_area_m2": round(self.recontouring_area_m2, 2),
            "total_water_treatment_ml": round(self.total_water_treatment_ml, 2),
            "risk_score": self.risk_score,
            "risk_uplift_percent": round(self.risk_uplift_percent, 4),
        }


@dataclass(frozen=True)
class LineItemCost:
    """Individual cost line item. subtotal is quantity x unit_rate."""
    category: CostCategory
    description: str
    quantity: float
    unit: str
    unit_rate: float
    subtotal: float
    phase: ClosurePhase

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "description": self.description,
            "quantity": round(self.quantity, 4),
            "unit": self.unit,
            "unit_rate": round(self.unit_rate, 4),
            "subtotal": round(self.subtotal, 2),
            "phase": self.phase.value,
        }


def empty_phase_map() -> Dict[ClosurePhase, float]:
    """Phase-keyed map with every phase present at zero."""
    return {phase: 0.0 for phase in CLOSURE_PHASES}


@dataclass(frozen=True)
class AnnualCashflow:
    """One project year of cashflow."""
    year: int
    nominal_cost: float = 0.0
    escalated_cost: float = 0.0
    discounted_cost: float = 0.0
    cumulative_nominal: float = 0.0
    cumulative_discounted: float = 0.0
    phase_breakdown: Dict[ClosurePhase, float] = field(default_factory=empty_phase_map)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "nominal_cost": round(self.nominal_cost, 2),
            "escalated_cost": round(self.escalated_cost, 2),
            "discounted_cost": round(self.discounted_cost, 2),
            "cumulative_nominal": round(self.cumulative_nominal, 2),
            "cumulative_discounted": round(self.cumulative_discounted, 2),
            "phase_breakdown": {
                phase.value: round(cost, 2)
                for phase, cost in self.phase_breakdown.items()
            },
        }


@dataclass(frozen=True)
class PhaseCostSummary:
    """Total cost of one phase."""
    phase: ClosurePhase
    total_cost: float
    percent_of_total: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "total_cost": round(self.total_cost, 2),
            "percent_of_total": round(self.percent_of_total, 4),
        }


@dataclass(frozen=True)
class CategoryCostSummary:
    """Total cost of one category."""
    category: CostCategory
    total_cost: float
    percent_of_total: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "total_cost": round(self.total_cost, 2),
            "percent_of_total": round(self.percent_of_total, 4),
        }


@dataclass(frozen=True)
class SensitivityResult:
    """Low/high outcome of perturbing one driver."""
    driver_name: str
    driver_key: str
    base_value: float
    unit: str
    low_value: float
    high_value: float
    low_total_cost: float
    high_total_cost: float
    low_npv: float
    high_npv: float
    delta_cost: float
    delta_npv: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "driver_name": self.driver_name,
            "driver_key": self.driver_key,
            "base_value": self.base_value,
            "unit": self.unit,
            "low_value": round(self.low_value, 6),
            "high_value": round(self.high_value, 6),
            "low_total_cost": round(self.low_total_cost, 2),
            "high_total_cost": round(self.high_total_cost, 2),
            "low_npv": round(self.low_npv, 2),
            "high_npv": round(self.high_npv, 2),
            "delta_cost": round(self.delta_cost, 2),
            "delta_npv": round(self.delta_npv, 2),
        }


@dataclass(frozen=True)
class Results:
    """Complete calculation results for one InputState."""
    derived_quantities: DerivedQuantities
    line_items: List[LineItemCost]

    direct_works_cost: float
    indirect_costs: float
    total_nominal_cost: float
    total_discounted_cost: float

    peak_annual_cashflow: float
    peak_cashflow_year: int

    annual_cashflows: List[AnnualCashflow]
    phase_breakdown: List[PhaseCostSummary]
    category_breakdown: List[CategoryCostSummary]
    sensitivity_results: List[SensitivityResult]

    monitoring_cost_share: float
    total_duration_years: int

    @property
    def npv(self) -> float:
        """Alias for total discounted cost."""
        return self.total_discounted_cost

    def items_in_category(self, category: CostCategory) -> List[LineItemCost]:
        return [item for item in self.line_items if item.category == category]

    def summary(self) -> Dict[str, Any]:
        """Headline figures only."""
        return {
            "direct_works_cost": round(self.direct_works_cost, 2),
            "indirect_costs": round(self.indirect_costs, 2),
            "total_nominal_cost": round(self.total_nominal_cost, 2),
            "total_discounted_cost": round(self.total_discounted_cost, 2),
            "peak_annual_cashflow": round(self.peak_annual_cashflow, 2),
            "peak_cashflow_year": self.peak_cashflow_year,
            "monitoring_cost_share": round(self.monitoring_cost_share, 4),
            "total_duration_years": self.total_duration_years,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = self.summary()
        data.update({
            "derived_quantities": self.derived_quantities.to_dict(),
            "line_items": [item.to_dict() for item in self.line_items],
            "annual_cashflows": [cf.to_dict() for cf in self.annual_cashflows],
            "phase_breakdown": [p.to_dict() for p in self.phase_breakdown],
            "category_breakdown": [c.to_dict() for c in self.category_breakdown],
            "sensitivity_results": [s.to_dict() for s in self.sensitivity_results],
        })
        return data
