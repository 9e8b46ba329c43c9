"""
closurecost Unit Converter

Deterministic unit conversion for site quantities.
All conversions are explicit and reversible.
"""

from ..errors import UnitConversionError


M2_PER_HA = 10000.0
DAYS_PER_YEAR = 365


# Conversion factors: (from_unit, to_unit) -> multiplier
# value_in_to_unit = value_in_from_unit * multiplier
UNIT_CONVERSIONS = {
    # Area
    ("ha", "m2"): M2_PER_HA,
    ("m2", "ha"): 1 / M2_PER_HA,
    ("km2", "ha"): 100.0,
    ("ha", "km2"): 0.01,

    # Length
    ("km", "m"): 1000.0,
    ("m", "km"): 0.001,

    # Volume
    ("ML", "m3"): 1000.0,
    ("m3", "ML"): 0.001,
    ("ML", "kL"): 1000.0,
    ("kL", "ML"): 0.001,

    # Flow
    ("ML/day", "ML/year"): float(DAYS_PER_YEAR),
    ("ML/year", "ML/day"): 1 / DAYS_PER_YEAR,
}


def ha_to_m2(ha: float) -> float:
    """Convert hectares to square metres."""
    return ha * M2_PER_HA


def m2_to_ha(m2: float) -> float:
    """Convert square metres to hectares."""
    return m2 / M2_PER_HA


class UnitConverter:
    """
    Deterministic unit converter.

    All conversions use explicit factors. No implicit conversions.
    """

    @staticmethod
    def normalize(value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert value from one unit to another.

        Args:
            value: The numeric value to convert
            from_unit: Source unit (e.g., "ha")
            to_unit: Target unit (e.g., "m2")

        Returns:
            Converted value

        Raises:
            UnitConversionError: If conversion not supported
        """
        from_key = from_unit.strip()
        to_key = to_unit.strip()

        if from_key == to_key:
            return value

        key = (from_key, to_key)
        if key not in UNIT_CONVERSIONS:
            raise UnitConversionError(
                f"Unknown conversion: {from_unit} -> {to_unit}"
            )

        return value * UNIT_CONVERSIONS[key]

    @staticmethod
    def can_convert(from_unit: str, to_unit: str) -> bool:
        """Check if a conversion is supported."""
        if from_unit.strip() == to_unit.strip():
            return True
        return (from_unit.strip(), to_unit.strip()) in UNIT_CONVERSIONS

    @staticmethod
    def get_supported_units() -> set:
        """Get all units that appear in at least one conversion."""
        units = set()
        for from_unit, to_unit in UNIT_CONVERSIONS:
            units.add(from_unit)
            units.add(to_unit)
        return units
