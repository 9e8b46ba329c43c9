"""
Unit tests for UnitConverter.

Tests deterministic unit conversions.
"""

import pytest
from closurecost.core.unit_converter import (
    UnitConverter,
    ha_to_m2,
    m2_to_ha,
    M2_PER_HA,
)
from closurecost.errors import UnitConversionError


class TestHectareConversion:
    """Tests for ha <-> m2 helpers."""

    def test_one_hectare(self):
        """1 ha = 10,000 m2."""
        assert ha_to_m2(1) == 10000.0

    def test_m2_to_ha(self):
        """25,000 m2 = 2.5 ha."""
        assert m2_to_ha(25000) == 2.5

    def test_zero(self):
        """Zero converts to zero both ways."""
        assert ha_to_m2(0) == 0.0
        assert m2_to_ha(0) == 0.0

    @pytest.mark.parametrize("ha", [0.0, 0.15, 1.0, 123.456, 100000.0])
    def test_round_trip(self, ha):
        """m2_to_ha(ha_to_m2(x)) returns x."""
        assert m2_to_ha(ha_to_m2(ha)) == pytest.approx(ha)

    def test_constant(self):
        """Factor is exactly 10,000."""
        assert M2_PER_HA == 10000.0


class TestUnitConverter:
    """Tests for UnitConverter class."""

    def test_ha_to_m2(self):
        """1 ha = 10,000 m2."""
        assert UnitConverter.normalize(1, "ha", "m2") == 10000.0

    def test_km2_to_ha(self):
        """1 km2 = 100 ha."""
        assert UnitConverter.normalize(1, "km2", "ha") == 100.0

    def test_km_to_m(self):
        """1 km = 1000 m."""
        assert UnitConverter.normalize(1, "km", "m") == 1000.0

    def test_ml_to_m3(self):
        """1 ML = 1000 m3."""
        assert UnitConverter.normalize(1, "ML", "m3") == 1000.0

    def test_daily_to_annual_flow(self):
        """2 ML/day = 730 ML/year."""
        assert UnitConverter.normalize(2, "ML/day", "ML/year") == 730.0

    def test_same_unit_returns_value(self):
        """Converting to same unit returns original value."""
        assert UnitConverter.normalize(42.5, "ha", "ha") == 42.5

    def test_whitespace_ignored(self):
        """Surrounding whitespace in unit names is ignored."""
        assert UnitConverter.normalize(1, " ha ", "m2") == 10000.0

    def test_unknown_conversion_raises(self):
        """Unknown conversion raises UnitConversionError."""
        with pytest.raises(UnitConversionError, match="Unknown conversion"):
            UnitConverter.normalize(1, "acres", "hectares")


class TestCanConvert:
    """Tests for can_convert method."""

    def test_supported_conversion(self):
        """Returns True for supported conversions."""
        assert UnitConverter.can_convert("ha", "m2") is True
        assert UnitConverter.can_convert("ML", "kL") is True

    def test_unsupported_conversion(self):
        """Returns False for unsupported conversions."""
        assert UnitConverter.can_convert("acres", "hectares") is False

    def test_same_unit(self):
        """Same unit always converts."""
        assert UnitConverter.can_convert("anything", "anything") is True


class TestGetSupportedUnits:
    """Tests for get_supported_units."""

    def test_contains_site_units(self):
        """Contains the units used by site quantities."""
        units = UnitConverter.get_supported_units()
        assert {"ha", "m2", "km", "ML", "ML/day"} <= units
