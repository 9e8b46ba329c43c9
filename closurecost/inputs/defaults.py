"""
inputs/defaults.py - Default scenario.

These are illustrative assumptions and should be adjusted for specific sites.
"""

from __future__ import annotations

from .schema import (
    FinancialParams,
    IndirectRates,
    InputState,
    PhaseDurations,
    Quantities,
    RiskFactors,
    UnitRates,
)


DEFAULT_QUANTITIES = Quantities()
DEFAULT_UNIT_RATES = UnitRates()
DEFAULT_INDIRECT_RATES = IndirectRates()
DEFAULT_RISK_FACTORS = RiskFactors()
DEFAULT_FINANCIAL_PARAMS = FinancialParams()
DEFAULT_PHASE_DURATIONS = PhaseDurations()

DEFAULT_INPUT_STATE = InputState(
    quantities=DEFAULT_QUANTITIES,
    unit_rates=DEFAULT_UNIT_RATES,
    indirect_rates=DEFAULT_INDIRECT_RATES,
    risk_factors=DEFAULT_RISK_FACTORS,
    financial_params=DEFAULT_FINANCIAL_PARAMS,
    phase_durations=DEFAULT_PHASE_DURATIONS,
    scenario_name="Default Scenario",
)


def create_default_input_state() -> InputState:
    """Return the default input state."""
    # Frozen all the way down, so sharing the instance is safe.
    return DEFAULT_INPUT_STATE
