"""
closurecost - Mine closure cost estimation engine.

Estimates lifecycle cost, time-phased cashflow and NPV for closing and
rehabilitating a mine site:

    from closurecost import calculate_closure_costs, create_default_input_state

    results = calculate_closure_costs(create_default_input_state())
    results.total_nominal_cost, results.npv
"""

from .errors import ClosureCostError, InputValidationError
from .inputs import (
    InputState,
    create_default_input_state,
    get_preset_inputs,
    load_input_state,
    validate_input_state,
)
from .cost import CostEstimator, Results, calculate_closure_costs

__version__ = "1.0.0"

__all__ = [
    "ClosureCostError",
    "InputValidationError",
    "InputState",
    "create_default_input_state",
    "get_preset_inputs",
    "load_input_state",
    "validate_input_state",
    "CostEstimator",
    "Results",
    "calculate_closure_costs",
    "__version__",
]
