"""
schedule/cashflow.py - Annual cashflow distribution.

Spreads each line item evenly over the years of its phase, then applies
escalation and discounting per year:

    escalated  = nominal x (1 + escalation) ^ year
    discounted = escalated / (1 + discount) ^ year

The discount rate is used as given in both real and nominal mode.
"""

from __future__ import annotations
from typing import Iterable, List

from ..core.enums import CLOSURE_PHASES
from ..cost.schema import AnnualCashflow, LineItemCost, empty_phase_map
from ..inputs.schema import InputState
from .phases import PhaseSchedule, build_phase_schedule


def distribute_line_items(
    line_items: Iterable[LineItemCost],
    schedule: PhaseSchedule,
) -> List[dict]:
    """
    Allocate line item subtotals to per-year, per-phase buckets.

    Returns:
        One phase map per year 0..D inclusive. A zero-duration phase gets
        its whole subtotal in its start year; years past D are dropped.
    """
    total = schedule.total_duration_years
    buckets = [empty_phase_map() for _ in range(total + 1)]

    for item in line_items:
        start = schedule.start_year(item.phase)
        duration = schedule.durations[item.phase]

        if duration > 0:
            annual_cost = item.subtotal / duration
            for year in range(start, start + duration):
                if 0 <= year <= total:
                    buckets[year][item.phase] += annual_cost
        elif 0 <= start <= total:
            buckets[start][item.phase] += item.subtotal

    return buckets


def calculate_annual_cashflows(
    line_items: Iterable[LineItemCost],
    inputs: InputState,
) -> List[AnnualCashflow]:
    """
    Build the annual cashflow profile.

    Args:
        line_items: All direct and indirect line items
        inputs: Complete input state (durations and financial params)

    Returns:
        One AnnualCashflow per year from closure start to
        closure start + total duration, inclusive
    """
    params = inputs.financial_params
    schedule = build_phase_schedule(inputs.phase_durations)
    buckets = distribute_line_items(line_items, schedule)

    escalation_rate = params.escalation_rate_percent / 100
    discount_rate = params.discount_rate_percent / 100

    cashflows = []
    cumulative_nominal = 0.0
    cumulative_discounted = 0.0

    for year, phase_breakdown in enumerate(buckets):
        nominal_cost = sum(phase_breakdown[phase] for phase in CLOSURE_PHASES)
        escalated_cost = nominal_cost * (1 + escalation_rate) ** year
        discounted_cost = escalated_cost / (1 + discount_rate) ** year

        cumulative_nominal += nominal_cost
        cumulative_discounted += discounted_cost

        cashflows.append(AnnualCashflow(
            year=params.closure_start_year + year,
            nominal_cost=nominal_cost,
            escalated_cost=escalated_cost,
            discounted_cost=discounted_cost,
            cumulative_nominal=cumulative_nominal,
            cumulative_discounted=cumulative_discounted,
            phase_breakdown=phase_breakdown,
        ))

    return cashflows
