"""
analysis/sensitivity.py - One-at-a-time sensitivity analysis.

Each driver is perturbed to base x (1 - v/100) and base x (1 + v/100)
and the full cost pipeline is re-run on an independent copy of the
inputs. Drivers with a zero base value are skipped.
"""

from __future__ import annotations
import logging
from concurrent.futures import Executor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..cost.direct import calculate_direct_works_costs
from ..cost.indirect import calculate_indirect_costs
from ..cost.quantities import calculate_derived_quantities
from ..cost.schema import SensitivityResult
from ..inputs.schema import InputState
from ..schedule.cashflow import calculate_annual_cashflows

logger = logging.getLogger(__name__)

DEFAULT_VARIATION_PERCENT = 10.0


@dataclass(frozen=True)
class SensitivityDriver:
    """A named input field that sensitivity analysis perturbs."""
    name: str
    key: str
    path: str
    unit: str

    def get_value(self, inputs: InputState) -> float:
        return inputs.get(self.path)

    def set_value(self, inputs: InputState, value: float) -> InputState:
        return inputs.replace(self.path, value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "key": self.key,
            "path": self.path,
            "unit": self.unit,
        }


SENSITIVITY_DRIVERS: Tuple[SensitivityDriver, ...] = (
    SensitivityDriver("Disturbed Area", "disturbed_area", "quantities.disturbed_area_ha", "ha"),
    SensitivityDriver("Earthworks Rate", "earthworks_rate", "unit_rates.earthworks_per_m3", "$/m³"),
    SensitivityDriver("TSF Area", "tsf_area", "quantities.tsf_area_ha", "ha"),
    SensitivityDriver("TSF Cover Thickness", "tsf_thickness", "quantities.tsf_cover_thickness_m", "m"),
    SensitivityDriver(
        "Water Treatment Duration", "water_duration",
        "quantities.water_treatment_duration_years", "years",
    ),
    SensitivityDriver("Contingency %", "contingency", "indirect_rates.contingency_percent", "%"),
    SensitivityDriver("Discount Rate", "discount_rate", "financial_params.discount_rate_percent", "%"),
    SensitivityDriver("Revegetation Rate", "reveg_rate", "unit_rates.revegetation_per_ha", "$/ha"),
)


def evaluate_totals(inputs: InputState) -> Tuple[float, float]:
    """
    Run the cost pipeline and return (total nominal cost, NPV).

    NPV is the final cumulative discounted cashflow.
    """
    derived = calculate_derived_quantities(inputs)
    direct_items = calculate_direct_works_costs(inputs, derived)
    direct_total = sum(item.subtotal for item in direct_items)
    indirect_items = calculate_indirect_costs(direct_total, inputs, derived)
    line_items = direct_items + indirect_items

    total = sum(item.subtotal for item in line_items)
    cashflows = calculate_annual_cashflows(line_items, inputs)
    npv = cashflows[-1].cumulative_discounted if cashflows else 0.0
    return total, npv


def analyze_driver(
    inputs: InputState,
    driver: SensitivityDriver,
    variation_percent: float = DEFAULT_VARIATION_PERCENT,
) -> Optional[SensitivityResult]:
    """
    Evaluate one driver at its low and high values.

    Returns:
        SensitivityResult, or None when the driver's base value is zero
    """
    base_value = driver.get_value(inputs)
    if base_value == 0:
        logger.debug("Skipping sensitivity driver %s: base value is zero", driver.key)
        return None

    low_value = base_value * (1 - variation_percent / 100)
    high_value = base_value * (1 + variation_percent / 100)

    low_total, low_npv = evaluate_totals(driver.set_value(inputs, low_value))
    high_total, high_npv = evaluate_totals(driver.set_value(inputs, high_value))

    return SensitivityResult(
        driver_name=driver.name,
        driver_key=driver.key,
        base_value=base_value,
        unit=driver.unit,
        low_value=low_value,
        high_value=high_value,
        low_total_cost=low_total,
        high_total_cost=high_total,
        low_npv=low_npv,
        high_npv=high_npv,
        delta_cost=high_total - low_total,
        delta_npv=high_npv - low_npv,
    )


def _rank(results: List[Optional[SensitivityResult]]) -> List[SensitivityResult]:
    kept = [r for r in results if r is not None]
    return sorted(kept, key=lambda r: abs(r.delta_cost), reverse=True)


def calculate_sensitivity(
    inputs: InputState,
    variation_percent: float = DEFAULT_VARIATION_PERCENT,
) -> List[SensitivityResult]:
    """
    Perform sensitivity analysis on the key cost drivers.

    Args:
        inputs: Base input state (never modified)
        variation_percent: Perturbation size in percent (default 10)

    Returns:
        Results ordered by descending |delta_cost|
    """
    return _rank([
        analyze_driver(inputs, driver, variation_percent)
        for driver in SENSITIVITY_DRIVERS
    ])


class SensitivityAnalyzer:
    """
    Sensitivity analysis over a configurable driver table.

    Every driver branch works on its own copy of the inputs, so branches
    can be evaluated on an executor. The result order does not depend on
    completion order.
    """

    def __init__(
        self,
        drivers: Optional[Tuple[SensitivityDriver, ...]] = None,
        executor: Optional[Executor] = None,
    ):
        """
        Initialize analyzer.

        Args:
            drivers: Driver table (defaults to SENSITIVITY_DRIVERS)
            executor: Optional concurrent.futures executor
        """
        self.drivers = tuple(drivers) if drivers is not None else SENSITIVITY_DRIVERS
        self.executor = executor

    def analyze(
        self,
        inputs: InputState,
        variation_percent: float = DEFAULT_VARIATION_PERCENT,
    ) -> List[SensitivityResult]:
        if self.executor is None:
            results = [
                analyze_driver(inputs, driver, variation_percent)
                for driver in self.drivers
            ]
        else:
            futures = [
                self.executor.submit(analyze_driver, inputs, driver, variation_percent)
                for driver in self.drivers
            ]
            results = [future.result() for future in futures]

        ranked = _rank(results)
        logger.debug(
            "Sensitivity: %d of %d drivers evaluated at +/-%s%%",
            len(ranked), len(self.drivers), variation_percent,
        )
        return ranked
