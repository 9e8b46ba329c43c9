"""
inputs/ - Input records, defaults, presets and boundary validation.
"""

from .schema import (
    Quantities,
    UnitRates,
    IndirectRates,
    RiskFactors,
    FinancialParams,
    PhaseDurations,
    InputState,
)

from .defaults import (
    DEFAULT_INPUT_STATE,
    create_default_input_state,
)

from .presets import (
    ScenarioPreset,
    SCENARIO_PRESETS,
    get_preset,
    get_preset_inputs,
    list_preset_ids,
)

from .validation import (
    InputStateModel,
    validate_input_state,
    check_input_state,
)

from .loader import (
    load_input_state,
    dump_input_state,
    read_scenario_data,
)


__all__ = [
    # Schema
    "Quantities",
    "UnitRates",
    "IndirectRates",
    "RiskFactors",
    "FinancialParams",
    "PhaseDurations",
    "InputState",
    # Defaults
    "DEFAULT_INPUT_STATE",
    "create_default_input_state",
    # Presets
    "ScenarioPreset",
    "SCENARIO_PRESETS",
    "get_preset",
    "get_preset_inputs",
    "list_preset_ids",
    # Validation
    "InputStateModel",
    "validate_input_state",
    "check_input_state",
    # Loading
    "load_input_state",
    "dump_input_state",
    "read_scenario_data",
]
