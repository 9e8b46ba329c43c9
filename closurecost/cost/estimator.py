"""
cost/estimator.py - Main closure cost estimation engine.

Runs the full pipeline for one InputState:

    derived quantities -> direct works -> indirect waterfall ->
    annual cashflows -> breakdowns -> sensitivity

and assembles the Results in one step. Deterministic; no I/O.
"""

from __future__ import annotations
import logging
from concurrent.futures import Executor
from typing import List, Optional, Tuple

from ..analysis.breakdown import calculate_category_breakdown, calculate_phase_breakdown
from ..analysis.sensitivity import DEFAULT_VARIATION_PERCENT, SensitivityAnalyzer
from ..inputs.schema import InputState
from ..schedule.cashflow import calculate_annual_cashflows
from ..schedule.phases import calculate_total_duration
from .direct import calculate_direct_works_costs
from .enums import CostCategory
from .indirect import calculate_indirect_costs
from .quantities import calculate_derived_quantities
from .schema import AnnualCashflow, LineItemCost, Results

logger = logging.getLogger(__name__)


def find_peak_cashflow(
    cashflows: List[AnnualCashflow],
    closure_start_year: int,
) -> Tuple[float, int]:
    """
    Earliest year with the largest nominal cost.

    Returns:
        (peak nominal cost, absolute year); (0.0, closure_start_year)
        when nothing is spent
    """
    peak_cost = 0.0
    peak_year = closure_start_year
    for cf in cashflows:
        if cf.nominal_cost > peak_cost:
            peak_cost = cf.nominal_cost
            peak_year = cf.year
    return peak_cost, peak_year


def calculate_monitoring_share(line_items: List[LineItemCost], total_cost: float) -> float:
    """Monitoring category subtotal as a percentage of total cost."""
    if total_cost <= 0:
        return 0.0
    monitoring = sum(
        item.subtotal for item in line_items
        if item.category == CostCategory.MONITORING
    )
    return (monitoring / total_cost) * 100


class CostEstimator:
    """
    Closure cost estimation engine.

    Holds only analysis settings; every estimate is computed from the
    InputState passed in.
    """

    def __init__(
        self,
        variation_percent: float = DEFAULT_VARIATION_PERCENT,
        executor: Optional[Executor] = None,
    ):
        self.variation_percent = variation_percent
        self.sensitivity = SensitivityAnalyzer(executor=executor)

    def estimate(self, inputs: InputState) -> Results:
        """
        Generate complete closure cost results.

        Args:
            inputs: Complete, validated input state

        Returns:
            Results with totals, cashflows, breakdowns and sensitivity
        """
        derived = calculate_derived_quantities(inputs)
        logger.debug(
            "Derived quantities: earthworks=%.0f m3, risk score=%s, uplift=%.2f%%",
            derived.total_earthworks_volume_m3, derived.risk_score,
            derived.risk_uplift_percent,
        )

        direct_items = calculate_direct_works_costs(inputs, derived)
        direct_works_cost = sum(item.subtotal for item in direct_items)
        logger.debug(
            "Direct works: %d items, %.2f", len(direct_items), direct_works_cost,
        )

        indirect_items = calculate_indirect_costs(direct_works_cost, inputs, derived)
        indirect_costs = sum(item.subtotal for item in indirect_items)
        logger.debug("Indirect costs: %.2f", indirect_costs)

        line_items = direct_items + indirect_items
        total_nominal_cost = direct_works_cost + indirect_costs

        annual_cashflows = calculate_annual_cashflows(line_items, inputs)
        total_discounted_cost = (
            annual_cashflows[-1].cumulative_discounted if annual_cashflows else 0.0
        )
        peak_cost, peak_year = find_peak_cashflow(
            annual_cashflows, inputs.financial_params.closure_start_year,
        )
        logger.debug(
            "Cashflows: %d years, peak %.2f in %d",
            len(annual_cashflows), peak_cost, peak_year,
        )

        sensitivity_results = self.sensitivity.analyze(inputs, self.variation_percent)

        results = Results(
            derived_quantities=derived,
            line_items=line_items,
            direct_works_cost=direct_works_cost,
            indirect_costs=indirect_costs,
            total_nominal_cost=total_nominal_cost,
            total_discounted_cost=total_discounted_cost,
            peak_annual_cashflow=peak_cost,
            peak_cashflow_year=peak_year,
            annual_cashflows=annual_cashflows,
            phase_breakdown=calculate_phase_breakdown(line_items, total_nominal_cost),
            category_breakdown=calculate_category_breakdown(line_items, total_nominal_cost),
            sensitivity_results=sensitivity_results,
            monitoring_cost_share=calculate_monitoring_share(line_items, total_nominal_cost),
            total_duration_years=calculate_total_duration(inputs.phase_durations),
        )

        logger.info(
            "Estimated '%s': total %.0f, NPV %.0f over %d years",
            inputs.scenario_name, results.total_nominal_cost,
            results.total_discounted_cost, results.total_duration_years,
        )
        return results


def calculate_closure_costs(
    inputs: InputState,
    variation_percent: Optional[float] = None,
) -> Results:
    """
    Execute the complete closure cost calculation.

    Args:
        inputs: Complete, validated input state
        variation_percent: Sensitivity perturbation in percent (default 10)

    Returns:
        Complete calculation results
    """
    if variation_percent is None:
        variation_percent = DEFAULT_VARIATION_PERCENT
    return CostEstimator(variation_percent=variation_percent).estimate(inputs)
