"""
cost/ - Closure cost estimation.

Derived quantities, direct works line items, the indirect cost
waterfall, and the top-level estimator that assembles Results.
"""

from .enums import (
    CostCategory,
    CATEGORY_NAMES,
)

from .schema import (
    DerivedQuantities,
    LineItemCost,
    AnnualCashflow,
    PhaseCostSummary,
    CategoryCostSummary,
    SensitivityResult,
    Results,
    empty_phase_map,
)

from .risk import (
    RISK_WEIGHTS,
    UPLIFT_BREAKPOINTS,
    calculate_risk_score,
    risk_score_to_uplift,
)

from .quantities import calculate_derived_quantities

from .direct import (
    CostRule,
    DIRECT_WORKS_RULES,
    applicable_rules,
    calculate_direct_works_costs,
)

from .indirect import calculate_indirect_costs

from .estimator import (
    CostEstimator,
    calculate_closure_costs,
    find_peak_cashflow,
    calculate_monitoring_share,
)


__all__ = [
    # Enums
    "CostCategory",
    "CATEGORY_NAMES",
    # Schema
    "DerivedQuantities",
    "LineItemCost",
    "AnnualCashflow",
    "PhaseCostSummary",
    "CategoryCostSummary",
    "SensitivityResult",
    "Results",
    "empty_phase_map",
    # Risk
    "RISK_WEIGHTS",
    "UPLIFT_BREAKPOINTS",
    "calculate_risk_score",
    "risk_score_to_uplift",
    # Builders
    "calculate_derived_quantities",
    "CostRule",
    "DIRECT_WORKS_RULES",
    "applicable_rules",
    "calculate_direct_works_costs",
    "calculate_indirect_costs",
    # Estimator
    "CostEstimator",
    "calculate_closure_costs",
    "find_peak_cashflow",
    "calculate_monitoring_share",
]
