"""
tests/unit/test_cost_quantities.py - Tests for derived quantity calculation.
"""

import pytest
from closurecost.cost.quantities import calculate_derived_quantities


class TestDerivedQuantities:
    """Tests for calculate_derived_quantities on the default scenario."""

    def test_areas(self, default_inputs):
        """Hectare inputs are converted to m2."""
        dq = calculate_derived_quantities(default_inputs)
        assert dq.tsf_area_m2 == 1_000_000
        assert dq.wrd_area_m2 == 2_000_000
        assert dq.disturbed_area_m2 == 5_000_000
        assert dq.recontouring_area_m2 == 3_000_000

    def test_tsf_capping_volume(self, default_inputs):
        """TSF capping volume = area x cover thickness."""
        dq = calculate_derived_quantities(default_inputs)
        assert dq.tsf_capping_volume_m3 == pytest.approx(500_000)

    def test_wrd_volume_includes_bulking(self, default_inputs):
        """WRD volume = area x depth x bulking factor."""
        dq = calculate_derived_quantities(default_inputs)
        assert dq.wrd_earthworks_volume_m3 == pytest.approx(2_400_000)

    def test_total_earthworks_is_sum(self, default_inputs):
        """Without override, total = TSF capping + WRD volume."""
        dq = calculate_derived_quantities(default_inputs)
        assert dq.total_earthworks_volume_m3 == pytest.approx(2_900_000)

    def test_topsoil_volume(self, default_inputs):
        """Topsoil = disturbed area x topsoil thickness."""
        dq = calculate_derived_quantities(default_inputs)
        assert dq.topsoil_volume_m3 == pytest.approx(750_000)

    def test_water_volume(self, default_inputs):
        """Water = flow x 365 x duration."""
        dq = calculate_derived_quantities(default_inputs)
        assert dq.total_water_treatment_ml == pytest.approx(7300)

    def test_risk_metrics(self, default_inputs):
        """Risk score and uplift come from the risk factors."""
        dq = calculate_derived_quantities(default_inputs)
        assert dq.risk_score == 28.0
        assert dq.risk_uplift_percent == pytest.approx(7.0)


class TestEarthworksOverride:
    """Tests for the earthworks volume override."""

    def test_override_replaces_parametric_volume(self, default_inputs):
        """An override is used verbatim."""
        inputs = default_inputs.replace("quantities.earthworks_volume_m3_override", 1_234_567.0)
        dq = calculate_derived_quantities(inputs)
        assert dq.total_earthworks_volume_m3 == 1_234_567.0

    def test_override_does_not_touch_components(self, default_inputs):
        """Component volumes are still reported."""
        inputs = default_inputs.replace("quantities.earthworks_volume_m3_override", 1.0)
        dq = calculate_derived_quantities(inputs)
        assert dq.tsf_capping_volume_m3 == pytest.approx(500_000)
        assert dq.wrd_earthworks_volume_m3 == pytest.approx(2_400_000)

    def test_zero_override_is_honoured(self, default_inputs):
        """Zero is a real override, not 'unset'."""
        inputs = default_inputs.replace("quantities.earthworks_volume_m3_override", 0.0)
        dq = calculate_derived_quantities(inputs)
        assert dq.total_earthworks_volume_m3 == 0.0
