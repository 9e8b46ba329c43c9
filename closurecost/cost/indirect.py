"""
cost/indirect.py - Indirect cost waterfall.

Indirect items stack commercially: each percentage applies to a running
subtotal that already includes the items before it. Contingency and risk
uplift share one base and do not compound on each other.

    site establishment = direct x site%
    contractor margin  = (direct + site) x margin%
    contingency        = (direct + site + margin) x contingency%
    risk uplift        = (direct + site + margin) x uplift%
    owner's costs      = (direct + site + margin + contingency + uplift) x owners%
"""

from __future__ import annotations
from typing import List

from ..core.enums import ClosurePhase
from ..inputs.schema import InputState
from .enums import CostCategory
from .schema import DerivedQuantities, LineItemCost


def _percent_line(
    category: CostCategory,
    description: str,
    percent: float,
    unit: str,
    base: float,
    phase: ClosurePhase,
) -> LineItemCost:
    return LineItemCost(
        category=category,
        description=description,
        quantity=percent,
        unit=unit,
        unit_rate=base / 100,
        subtotal=base * (percent / 100),
        phase=phase,
    )


def calculate_indirect_costs(
    direct_works_total: float,
    inputs: InputState,
    derived: DerivedQuantities,
) -> List[LineItemCost]:
    """
    Build the five indirect line items in waterfall order.

    Args:
        direct_works_total: Sum of all direct works subtotals
        inputs: Complete input state
        derived: Derived quantities (supplies the risk uplift %)

    Returns:
        [site establishment, contractor margin, contingency,
         risk uplift, owner's costs]
    """
    rates = inputs.indirect_rates

    site_est = _percent_line(
        CostCategory.SITE_ESTABLISHMENT,
        "Site establishment, HSE, and project management",
        rates.site_establishment_percent, "% of direct",
        direct_works_total,
        ClosurePhase.PLANNING_APPROVALS,
    )

    margin_base = direct_works_total + site_est.subtotal
    margin = _percent_line(
        CostCategory.CONTRACTOR_MARGIN,
        "Contractor margin",
        rates.contractor_margin_percent, "% of subtotal",
        margin_base,
        ClosurePhase.DECOMMISSIONING_DEMOLITION,
    )

    contingency_base = margin_base + margin.subtotal
    contingency = _percent_line(
        CostCategory.CONTINGENCY,
        "Base contingency",
        rates.contingency_percent, "% of subtotal",
        contingency_base,
        ClosurePhase.PLANNING_APPROVALS,
    )
    risk_uplift = _percent_line(
        CostCategory.RISK_UPLIFT,
        f"Risk-based uplift (score: {derived.risk_score})",
        derived.risk_uplift_percent, "% of subtotal",
        contingency_base,
        ClosurePhase.PLANNING_APPROVALS,
    )

    owners_base = contingency_base + contingency.subtotal + risk_uplift.subtotal
    owners = _percent_line(
        CostCategory.OWNERS_COSTS,
        "Owner's costs and overheads",
        rates.owners_costs_percent, "% of total",
        owners_base,
        ClosurePhase.PLANNING_APPROVALS,
    )

    return [site_est, margin, contingency, risk_uplift, owners]
