"""
cost/quantities.py - Derived quantity calculation.

Converts raw site inputs into areas (m2), volumes (m3), water volume (ML)
and risk metrics.
"""

from __future__ import annotations

from ..core.unit_converter import DAYS_PER_YEAR, ha_to_m2
from ..inputs.schema import InputState
from .risk import calculate_risk_score, risk_score_to_uplift
from .schema import DerivedQuantities


def calculate_derived_quantities(inputs: InputState) -> DerivedQuantities:
    """
    Calculate all derived quantities from the inputs.

    Total earthworks volume is the explicit override when one is given.
    The override lets site survey data bypass the parametric TSF + WRD
    volume model entirely.
    """
    q = inputs.quantities
    rates = inputs.unit_rates

    tsf_area_m2 = ha_to_m2(q.tsf_area_ha)
    wrd_area_m2 = ha_to_m2(q.wrd_footprint_ha)
    disturbed_area_m2 = ha_to_m2(q.disturbed_area_ha)
    recontouring_area_m2 = ha_to_m2(q.recontouring_area_ha)

    tsf_capping_volume_m3 = tsf_area_m2 * q.tsf_cover_thickness_m
    wrd_earthworks_volume_m3 = (
        wrd_area_m2 * q.wrd_reshaping_depth_m * rates.bulking_factor
    )

    if q.earthworks_volume_m3_override is not None:
        total_earthworks_volume_m3 = q.earthworks_volume_m3_override
    else:
        total_earthworks_volume_m3 = tsf_capping_volume_m3 + wrd_earthworks_volume_m3

    topsoil_volume_m3 = disturbed_area_m2 * q.topsoil_thickness_m

    total_water_treatment_ml = (
        q.water_treatment_flow_ml_per_day
        * DAYS_PER_YEAR
        * q.water_treatment_duration_years
    )

    risk_score = calculate_risk_score(inputs.risk_factors)

    return DerivedQuantities(
        tsf_area_m2=tsf_area_m2,
        wrd_area_m2=wrd_area_m2,
        tsf_capping_volume_m3=tsf_capping_volume_m3,
        wrd_earthworks_volume_m3=wrd_earthworks_volume_m3,
        total_earthworks_volume_m3=total_earthworks_volume_m3,
        topsoil_volume_m3=topsoil_volume_m3,
        disturbed_area_m2=disturbed_area_m2,
        recontouring_area_m2=recontouring_area_m2,
        total_water_treatment_ml=total_water_treatment_ml,
        risk_score=risk_score,
        risk_uplift_percent=risk_score_to_uplift(risk_score),
    )
