"""
inputs/presets.py - Scenario presets.

Pre-configured scenarios for common mine closure situations. These are
illustrative defaults and should be adjusted for specific sites.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from ..core.enums import MonitoringIntensity
from ..errors import UnknownPresetError
from .defaults import DEFAULT_INPUT_STATE
from .schema import InputState, PhaseDurations, RiskFactors


@dataclass(frozen=True)
class ScenarioPreset:
    """Named, described input state."""
    preset_id: str
    name: str
    description: str
    inputs: InputState

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.preset_id,
            "name": self.name,
            "description": self.description,
            "inputs": self.inputs.to_dict(),
        }


def _preset(
    preset_id: str,
    name: str,
    description: str,
    quantities: Dict[str, Any],
    risk_factors: RiskFactors,
    phase_durations: PhaseDurations,
    unit_rates: Optional[Dict[str, Any]] = None,
) -> ScenarioPreset:
    base = DEFAULT_INPUT_STATE
    inputs = replace(
        base,
        scenario_name=name,
        quantities=replace(base.quantities, **quantities),
        unit_rates=replace(base.unit_rates, **(unit_rates or {})),
        risk_factors=risk_factors,
        phase_durations=phase_durations,
    )
    return ScenarioPreset(preset_id, name, description, inputs)


PRESET_SMALL_OPEN_PIT = _preset(
    "small-open-pit",
    "Small Open Pit, Low Water Risk",
    "A smaller open pit operation with limited tailings and minimal water "
    "treatment requirements. Suitable for sites with benign geology and low "
    "environmental risk.",
    quantities=dict(
        disturbed_area_ha=150.0,
        tsf_area_ha=30.0,
        tsf_cover_thickness_m=0.3,
        wrd_footprint_ha=50.0,
        wrd_reshaping_depth_m=0.5,
        topsoil_thickness_m=0.15,
        recontouring_area_ha=80.0,
        road_length_km=8.0,
        number_of_buildings=8,
        water_treatment_flow_ml_per_day=0.5,
        water_treatment_duration_years=5.0,
        water_treatment_intensity_factor=0.8,
        monitoring_duration_years=10,
        monitoring_intensity=MonitoringIntensity.LOW,
        hazardous_materials_enabled=False,
        hazardous_materials_area_ha=0.0,
        community_heritage_enabled=False,
    ),
    risk_factors=RiskFactors(15, 20, 15, 15, 20),
    phase_durations=PhaseDurations(1, 1, 2, 2, 5, 2, 10, 1),
)

PRESET_LARGE_OPEN_PIT_WRD = _preset(
    "large-open-pit-wrd",
    "Large Open Pit + WRD",
    "A large-scale open pit operation with significant waste rock dump "
    "requiring extensive reshaping. Moderate water treatment needs and "
    "standard monitoring.",
    quantities=dict(
        disturbed_area_ha=800.0,
        tsf_area_ha=150.0,
        tsf_cover_thickness_m=0.5,
        wrd_footprint_ha=400.0,
        wrd_reshaping_depth_m=1.5,
        topsoil_thickness_m=0.2,
        recontouring_area_ha=500.0,
        road_length_km=35.0,
        number_of_buildings=25,
        water_treatment_flow_ml_per_day=3.0,
        water_treatment_duration_years=12.0,
        water_treatment_intensity_factor=1.0,
        monitoring_duration_years=20,
        monitoring_intensity=MonitoringIntensity.MEDIUM,
        hazardous_materials_enabled=True,
        hazardous_materials_area_ha=5.0,
        community_heritage_enabled=True,
    ),
    unit_rates=dict(
        mobilisation_lump_sum=3500000.0,
        demolition_per_building=180000.0,
    ),
    risk_factors=RiskFactors(30, 35, 30, 25, 30),
    phase_durations=PhaseDurations(2, 3, 4, 4, 12, 4, 20, 2),
)

PRESET_TSF_DOMINANT = _preset(
    "tsf-dominant",
    "TSF-Dominant Site",
    "A site where the Tailings Storage Facility is the primary closure "
    "challenge. Large TSF requiring extensive capping and long-term seepage "
    "management.",
    quantities=dict(
        disturbed_area_ha=600.0,
        tsf_area_ha=350.0,
        tsf_cover_thickness_m=0.8,
        wrd_footprint_ha=100.0,
        wrd_reshaping_depth_m=0.8,
        topsoil_thickness_m=0.15,
        recontouring_area_ha=400.0,
        road_length_km=25.0,
        number_of_buildings=18,
        water_treatment_flow_ml_per_day=2.0,
        water_treatment_duration_years=15.0,
        water_treatment_intensity_factor=1.2,
        monitoring_duration_years=25,
        monitoring_intensity=MonitoringIntensity.MEDIUM,
        hazardous_materials_enabled=True,
        hazardous_materials_area_ha=10.0,
        community_heritage_enabled=True,
    ),
    unit_rates=dict(
        capping_base_per_m2=30.0,
        capping_thickness_factor=1.6,
        water_treatment_capex=8000000.0,
    ),
    risk_factors=RiskFactors(40, 45, 50, 35, 25),
    phase_durations=PhaseDurations(2, 2, 3, 5, 15, 4, 25, 2),
)

PRESET_HIGH_WATER = _preset(
    "high-water",
    "High Water Treatment, Long Monitoring",
    "A site with significant water quality challenges requiring intensive, "
    "long-term treatment (e.g., AMD). Extended monitoring period before "
    "relinquishment.",
    quantities=dict(
        disturbed_area_ha=450.0,
        tsf_area_ha=120.0,
        tsf_cover_thickness_m=0.6,
        wrd_footprint_ha=180.0,
        wrd_reshaping_depth_m=1.0,
        topsoil_thickness_m=0.2,
        recontouring_area_ha=300.0,
        road_length_km=20.0,
        number_of_buildings=15,
        water_treatment_flow_ml_per_day=8.0,
        water_treatment_duration_years=30.0,
        water_treatment_intensity_factor=1.8,
        monitoring_duration_years=40,
        monitoring_intensity=MonitoringIntensity.HIGH,
        hazardous_materials_enabled=True,
        hazardous_materials_area_ha=8.0,
        community_heritage_enabled=True,
    ),
    unit_rates=dict(
        water_treatment_capex=15000000.0,
        water_treatment_opex_per_ml=800.0,
        monitoring_per_year_high=1500000.0,
    ),
    risk_factors=RiskFactors(50, 30, 70, 45, 30),
    phase_durations=PhaseDurations(2, 2, 3, 3, 30, 3, 40, 3),
)


SCENARIO_PRESETS: Tuple[ScenarioPreset, ...] = (
    PRESET_SMALL_OPEN_PIT,
    PRESET_LARGE_OPEN_PIT_WRD,
    PRESET_TSF_DOMINANT,
    PRESET_HIGH_WATER,
)


def list_preset_ids() -> List[str]:
    return [p.preset_id for p in SCENARIO_PRESETS]


def get_preset(preset_id: str) -> ScenarioPreset:
    """
    Look up a preset by id.

    Raises:
        UnknownPresetError: If no preset has this id
    """
    for preset in SCENARIO_PRESETS:
        if preset.preset_id == preset_id:
            return preset
    raise UnknownPresetError(preset_id, list_preset_ids())


def get_preset_inputs(preset_id: str) -> InputState:
    """Input state of a preset."""
    return get_preset(preset_id).inputs
