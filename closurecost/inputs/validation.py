"""
inputs/validation.py - Pydantic input schema.

Boundary validation for raw scenario data (dicts parsed from JSON or YAML).
A record that passes is converted to an immutable InputState; the engine
downstream relies on these bounds and does not re-check them.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.enums import DiscountRateMode, MonitoringIntensity
from ..errors import InputValidationError
from .schema import InputState


class _Section(BaseModel):
    """Common settings: no unknown keys, no NaN/Infinity."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)


# =============================================================================
# Section Schemas
# =============================================================================


class QuantitiesModel(_Section):
    disturbed_area_ha: float = Field(500.0, ge=0, le=100000, description="Maximum 100,000 ha")
    tsf_area_ha: float = Field(100.0, ge=0, le=10000, description="Maximum 10,000 ha")
    tsf_cover_thickness_m: float = Field(0.5, ge=0, le=5)
    wrd_footprint_ha: float = Field(200.0, ge=0, le=50000)
    wrd_reshaping_depth_m: float = Field(1.0, ge=0, le=20)
    earthworks_volume_m3_override: Optional[float] = Field(None, ge=0)
    topsoil_thickness_m: float = Field(0.15, ge=0, le=2)
    recontouring_area_ha: float = Field(300.0, ge=0, le=100000)
    road_length_km: float = Field(20.0, ge=0, le=500)
    number_of_buildings: int = Field(15, ge=0, le=500)
    water_treatment_flow_ml_per_day: float = Field(2.0, ge=0, le=100)
    water_treatment_duration_years: float = Field(10.0, ge=0, le=100)
    water_treatment_intensity_factor: float = Field(1.0, ge=0.5, le=3)
    monitoring_duration_years: int = Field(15, ge=1, le=100)
    monitoring_intensity: MonitoringIntensity = MonitoringIntensity.MEDIUM
    hazardous_materials_enabled: bool = False
    hazardous_materials_area_ha: float = Field(0.0, ge=0, le=1000)
    community_heritage_enabled: bool = True


class UnitRatesModel(_Section):
    earthworks_per_m3: float = Field(8.0, ge=0, le=100)
    capping_base_per_m2: float = Field(25.0, ge=0, le=500)
    capping_thickness_factor: float = Field(1.5, ge=0.5, le=3)
    topsoil_per_m3: float = Field(15.0, ge=0, le=100)
    revegetation_per_ha: float = Field(8000.0, ge=0, le=100000)
    revegetation_complexity_factor: float = Field(1.0, ge=0.5, le=3)
    demolition_per_building: float = Field(150000.0, ge=0, le=5000000)
    road_rehab_per_km: float = Field(50000.0, ge=0, le=1000000)
    water_treatment_capex: float = Field(5000000.0, ge=0, le=500000000)
    water_treatment_opex_per_ml: float = Field(500.0, ge=0, le=10000)
    monitoring_per_year_low: float = Field(200000.0, ge=0, le=5000000)
    monitoring_per_year_medium: float = Field(500000.0, ge=0, le=10000000)
    monitoring_per_year_high: float = Field(1000000.0, ge=0, le=20000000)
    hazardous_materials_per_ha: float = Field(100000.0, ge=0, le=1000000)
    community_heritage_lump_sum: float = Field(500000.0, ge=0, le=50000000)
    bulking_factor: float = Field(1.2, ge=1, le=2)
    erosion_controls_per_ha: float = Field(3000.0, ge=0, le=50000)
    mobilisation_lump_sum: float = Field(2000000.0, ge=0, le=50000000)


class IndirectRatesModel(_Section):
    site_establishment_percent: float = Field(12.0, ge=0, le=100)
    contractor_margin_percent: float = Field(10.0, ge=0, le=100)
    contingency_percent: float = Field(15.0, ge=0, le=100)
    owners_costs_percent: float = Field(5.0, ge=0, le=100)


class RiskFactorsModel(_Section):
    contamination_uncertainty: float = Field(30.0, ge=0, le=100)
    geotech_uncertainty: float = Field(25.0, ge=0, le=100)
    water_quality_uncertainty: float = Field(35.0, ge=0, le=100)
    regulatory_uncertainty: float = Field(20.0, ge=0, le=100)
    logistics_complexity: float = Field(25.0, ge=0, le=100)


class FinancialParamsModel(_Section):
    closure_start_year: int = Field(2026, ge=2020, le=2100)
    escalation_rate_percent: float = Field(3.0, ge=0, le=20)
    discount_rate_percent: float = Field(7.0, ge=0, le=30)
    discount_rate_mode: DiscountRateMode = DiscountRateMode.REAL


class PhaseDurationsModel(_Section):
    planning_approvals: int = Field(2, ge=0, le=10)
    decommissioning_demolition: int = Field(2, ge=0, le=10)
    earthworks_landform: int = Field(3, ge=0, le=20)
    tailings_wrd_rehabilitation: int = Field(3, ge=0, le=20)
    water_management: int = Field(10, ge=0, le=50)
    revegetation_ecosystem: int = Field(3, ge=0, le=20)
    monitoring_maintenance: int = Field(15, ge=0, le=100)
    relinquishment_postclosure: int = Field(2, ge=0, le=10)


class InputStateModel(_Section):
    """Complete input record schema."""

    quantities: QuantitiesModel = Field(default_factory=QuantitiesModel)
    unit_rates: UnitRatesModel = Field(default_factory=UnitRatesModel)
    indirect_rates: IndirectRatesModel = Field(default_factory=IndirectRatesModel)
    risk_factors: RiskFactorsModel = Field(default_factory=RiskFactorsModel)
    financial_params: FinancialParamsModel = Field(default_factory=FinancialParamsModel)
    phase_durations: PhaseDurationsModel = Field(default_factory=PhaseDurationsModel)
    scenario_name: str = Field("Default Scenario", min_length=1, max_length=100)

    def to_input_state(self) -> InputState:
        return InputState.from_dict(self.model_dump())


# =============================================================================
# Entry Points
# =============================================================================


def format_validation_errors(exc: ValidationError) -> List[str]:
    """Flatten pydantic errors into "path: message" strings."""
    messages = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        messages.append(f"{path}: {error['msg']}")
    return messages


def validate_input_state(data: Dict[str, Any]) -> InputState:
    """
    Validate raw scenario data and build an InputState.

    Args:
        data: Nested dict with the InputState sections; omitted sections
            or fields take their defaults

    Returns:
        Validated, immutable InputState

    Raises:
        InputValidationError: With one "path: message" entry per failure
    """
    try:
        model = InputStateModel.model_validate(data)
    except ValidationError as exc:
        raise InputValidationError(format_validation_errors(exc)) from exc
    return model.to_input_state()


def check_input_state(inputs: InputState) -> List[str]:
    """
    Re-validate an already-built InputState.

    Returns:
        List of error strings (empty when valid)
    """
    try:
        InputStateModel.model_validate(inputs.to_dict())
    except ValidationError as exc:
        return format_validation_errors(exc)
    return []
