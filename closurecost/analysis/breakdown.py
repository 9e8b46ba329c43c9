"""
analysis/breakdown.py - Phase and category cost breakdowns.

Phase breakdown always lists every phase in phase order, zero-cost
phases included. Category breakdown drops zero-cost categories and
is ordered by descending cost.
"""

from __future__ import annotations
from typing import Dict, Iterable, List

from ..core.enums import CLOSURE_PHASES
from ..cost.enums import CostCategory
from ..cost.schema import (
    CategoryCostSummary,
    LineItemCost,
    PhaseCostSummary,
    empty_phase_map,
)


def _percent_of(value: float, total: float) -> float:
    return (value / total) * 100 if total > 0 else 0.0


def calculate_phase_breakdown(
    line_items: Iterable[LineItemCost],
    total_cost: float,
) -> List[PhaseCostSummary]:
    """Sum line item subtotals per phase."""
    totals = empty_phase_map()
    for item in line_items:
        totals[item.phase] += item.subtotal

    return [
        PhaseCostSummary(
            phase=phase,
            total_cost=totals[phase],
            percent_of_total=_percent_of(totals[phase], total_cost),
        )
        for phase in CLOSURE_PHASES
    ]


def calculate_category_breakdown(
    line_items: Iterable[LineItemCost],
    total_cost: float,
) -> List[CategoryCostSummary]:
    """Sum line item subtotals per category, largest first."""
    totals: Dict[CostCategory, float] = {category: 0.0 for category in CostCategory}
    for item in line_items:
        totals[item.category] += item.subtotal

    summaries = [
        CategoryCostSummary(
            category=category,
            total_cost=cost,
            percent_of_total=_percent_of(cost, total_cost),
        )
        for category, cost in totals.items()
        if cost > 0
    ]
    # sorted() is stable: ties keep enum order
    return sorted(summaries, key=lambda s: s.total_cost, reverse=True)
