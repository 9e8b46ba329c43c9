"""
closurecost Test Configuration and Fixtures
"""

import pytest

from closurecost.cost.estimator import calculate_closure_costs
from closurecost.inputs.defaults import create_default_input_state
from closurecost.inputs.schema import InputState


@pytest.fixture
def default_inputs() -> InputState:
    """The default scenario."""
    return create_default_input_state()


@pytest.fixture(scope="session")
def default_results():
    """Results for the default scenario (computed once per session)."""
    return calculate_closure_costs(create_default_input_state())


@pytest.fixture
def zero_rate_inputs(default_inputs) -> InputState:
    """Default scenario with no escalation and no discounting."""
    return (
        default_inputs
        .replace("financial_params.discount_rate_percent", 0.0)
        .replace("financial_params.escalation_rate_percent", 0.0)
    )
