"""
inputs/schema.py - Input data structures.

Immutable input records consumed by the calculation engine. Field defaults
are the illustrative default scenario (AUD, 2024 rate basis); they should
be adjusted for specific sites.

The engine assumes these records have already passed
inputs/validation.py and never re-checks bounds.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, Optional

from ..core.enums import ClosurePhase, DiscountRateMode, MonitoringIntensity


@dataclass(frozen=True)
class Quantities:
    """Direct works quantities - primary site inputs."""
    disturbed_area_ha: float = 500.0
    tsf_area_ha: float = 100.0
    tsf_cover_thickness_m: float = 0.5
    wrd_footprint_ha: float = 200.0
    wrd_reshaping_depth_m: float = 1.0

    # Site survey volume; replaces the parametric TSF + WRD volume when set
    earthworks_volume_m3_override: Optional[float] = None

    topsoil_thickness_m: float = 0.15
    recontouring_area_ha: float = 300.0
    road_length_km: float = 20.0
    number_of_buildings: int = 15

    water_treatment_flow_ml_per_day: float = 2.0
    water_treatment_duration_years: float = 10.0
    water_treatment_intensity_factor: float = 1.0  # 0.5 simple .. 2.0 complex

    monitoring_duration_years: int = 15
    monitoring_intensity: MonitoringIntensity = MonitoringIntensity.MEDIUM

    hazardous_materials_enabled: bool = False
    hazardous_materials_area_ha: float = 0.0
    community_heritage_enabled: bool = True


@dataclass(frozen=True)
class UnitRates:
    """Unit rates and dimensionless adjustment factors."""
    # Earthworks
    earthworks_per_m3: float = 8.0
    capping_base_per_m2: float = 25.0
    capping_thickness_factor: float = 1.5
    topsoil_per_m3: float = 15.0

    # Revegetation
    revegetation_per_ha: float = 8000.0
    revegetation_complexity_factor: float = 1.0

    # Demolition and roads
    demolition_per_building: float = 150000.0
    road_rehab_per_km: float = 50000.0

    # Water treatment
    water_treatment_capex: float = 5000000.0
    water_treatment_opex_per_ml: float = 500.0

    # Monitoring ($/year by intensity)
    monitoring_per_year_low: float = 200000.0
    monitoring_per_year_medium: float = 500000.0
    monitoring_per_year_high: float = 1000000.0

    hazardous_materials_per_ha: float = 100000.0
    community_heritage_lump_sum: float = 500000.0

    # Other
    bulking_factor: float = 1.2
    erosion_controls_per_ha: float = 3000.0
    mobilisation_lump_sum: float = 2000000.0

    def monitoring_rate(self, intensity: MonitoringIntensity) -> float:
        """Annual monitoring rate for an intensity level."""
        return {
            MonitoringIntensity.LOW: self.monitoring_per_year_low,
            MonitoringIntensity.MEDIUM: self.monitoring_per_year_medium,
            MonitoringIntensity.HIGH: self.monitoring_per_year_high,
        }[MonitoringIntensity(intensity)]


@dataclass(frozen=True)
class IndirectRates:
    """Indirect cost percentages."""
    site_establishment_percent: float = 12.0
    contractor_margin_percent: float = 10.0
    contingency_percent: float = 15.0
    owners_costs_percent: float = 5.0


@dataclass(frozen=True)
class RiskFactors:
    """Independent risk scores, 0-100 each."""
    contamination_uncertainty: float = 30.0
    geotech_uncertainty: float = 25.0
    water_quality_uncertainty: float = 35.0
    regulatory_uncertainty: float = 20.0
    logistics_complexity: float = 25.0


@dataclass(frozen=True)
class FinancialParams:
    """Financial parameters."""
    closure_start_year: int = 2026
    escalation_rate_percent: float = 3.0
    discount_rate_percent: float = 7.0
    discount_rate_mode: DiscountRateMode = DiscountRateMode.REAL


@dataclass(frozen=True)
class PhaseDurations:
    """Duration in whole years per closure phase."""
    planning_approvals: int = 2
    decommissioning_demolition: int = 2
    earthworks_landform: int = 3
    tailings_wrd_rehabilitation: int = 3
    water_management: int = 10
    revegetation_ecosystem: int = 3
    monitoring_maintenance: int = 15
    relinquishment_postclosure: int = 2

    def __getitem__(self, phase: ClosurePhase) -> int:
        return getattr(self, ClosurePhase(phase).value)

    def as_dict(self) -> Dict[ClosurePhase, int]:
        return {phase: self[phase] for phase in ClosurePhase}


_SECTIONS = {
    "quantities": Quantities,
    "unit_rates": UnitRates,
    "indirect_rates": IndirectRates,
    "risk_factors": RiskFactors,
    "financial_params": FinancialParams,
    "phase_durations": PhaseDurations,
}

_ENUM_FIELDS = {
    ("quantities", "monitoring_intensity"): MonitoringIntensity,
    ("financial_params", "discount_rate_mode"): DiscountRateMode,
}


def _plain(items) -> Dict[str, Any]:
    """asdict() factory that stores enum members as their values."""
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in items}


@dataclass(frozen=True)
class InputState:
    """
    Complete, externally validated input record.

    One InputState fully determines one Results; nothing else is read.
    """
    quantities: Quantities = field(default_factory=Quantities)
    unit_rates: UnitRates = field(default_factory=UnitRates)
    indirect_rates: IndirectRates = field(default_factory=IndirectRates)
    risk_factors: RiskFactors = field(default_factory=RiskFactors)
    financial_params: FinancialParams = field(default_factory=FinancialParams)
    phase_durations: PhaseDurations = field(default_factory=PhaseDurations)
    scenario_name: str = "Default Scenario"

    def get(self, path: str) -> Any:
        """
        Read a field by dotted path.

        Args:
            path: "section.field" (e.g. "quantities.tsf_area_ha") or
                a top-level field name

        Returns:
            Field value
        """
        value: Any = self
        for part in path.split("."):
            value = getattr(value, part)
        return value

    def replace(self, path: str, value: Any) -> "InputState":
        """
        Return a copy with one field replaced by dotted path.

        The receiver is never modified.
        """
        parts = path.split(".")
        if len(parts) == 1:
            return replace(self, **{parts[0]: value})
        if len(parts) != 2:
            raise AttributeError(f"Unsupported input path: {path}")

        section_name, field_name = parts
        section = getattr(self, section_name)
        if field_name not in {f.name for f in fields(section)}:
            raise AttributeError(f"Unknown input field: {path}")
        return replace(self, **{section_name: replace(section, **{field_name: value})})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self, dict_factory=_plain)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InputState":
        """
        Build an InputState from plain data.

        Missing sections or fields fall back to defaults; enum fields are
        coerced from their string values. No bounds checking happens here.
        """
        kwargs: Dict[str, Any] = {}
        for name, section_cls in _SECTIONS.items():
            raw = dict(data.get(name) or {})
            for (section, field_name), enum_cls in _ENUM_FIELDS.items():
                if section == name and field_name in raw:
                    raw[field_name] = enum_cls(raw[field_name])
            kwargs[name] = section_cls(**raw)
        if "scenario_name" in data:
            kwargs["scenario_name"] = data["scenario_name"]
        return cls(**kwargs)
