"""
schedule/ - Phase scheduling and annual cashflow distribution.
"""

from .phases import (
    PhaseSchedule,
    get_phase_start_year,
    calculate_total_duration,
    build_phase_schedule,
)

from .cashflow import (
    distribute_line_items,
    calculate_annual_cashflows,
)


__all__ = [
    "PhaseSchedule",
    "get_phase_start_year",
    "calculate_total_duration",
    "build_phase_schedule",
    "distribute_line_items",
    "calculate_annual_cashflows",
]
