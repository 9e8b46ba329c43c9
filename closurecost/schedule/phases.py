"""
schedule/phases.py - Closure phase scheduling.

Phases are not purely sequential:

    planning -> decommissioning -> +- earthworks --+-> revegetation -> monitoring -+
                                   +- tsf/wrd -----+                               |
                                   +- water -----------------------------------+   |
                                                                               v   v
                                            relinquishment after max(water, monitoring)

Earthworks and TSF/WRD run in parallel, so together they occupy
max(E, T) years. Water starts with them but is reconciled against
monitoring: the timeline allows max(W, M) years after revegetation
before relinquishment.

Start years are relative to closure start (year 0).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

from ..core.enums import CLOSURE_PHASES, ClosurePhase
from ..inputs.schema import PhaseDurations


def _works_offsets(d: PhaseDurations) -> Dict[str, int]:
    """Offsets of the sequencing milestones."""
    after_planning = d[ClosurePhase.PLANNING_APPROVALS]
    after_decomm = after_planning + d[ClosurePhase.DECOMMISSIONING_DEMOLITION]
    after_landform = after_decomm + max(
        d[ClosurePhase.EARTHWORKS_LANDFORM],
        d[ClosurePhase.TAILINGS_WRD_REHABILITATION],
    )
    after_reveg = after_landform + d[ClosurePhase.REVEGETATION_ECOSYSTEM]
    after_long_tail = after_reveg + max(
        d[ClosurePhase.WATER_MANAGEMENT],
        d[ClosurePhase.MONITORING_MAINTENANCE],
    )
    return {
        "after_planning": after_planning,
        "after_decomm": after_decomm,
        "after_landform": after_landform,
        "after_reveg": after_reveg,
        "after_long_tail": after_long_tail,
    }


def get_phase_start_year(phase: ClosurePhase, durations: PhaseDurations) -> int:
    """
    Start year of a phase relative to closure start.

    Args:
        phase: Closure phase
        durations: Configured phase durations

    Returns:
        Start offset in years
    """
    offsets = _works_offsets(durations)
    starts = {
        ClosurePhase.PLANNING_APPROVALS: 0,
        ClosurePhase.DECOMMISSIONING_DEMOLITION: offsets["after_planning"],
        ClosurePhase.EARTHWORKS_LANDFORM: offsets["after_decomm"],
        ClosurePhase.TAILINGS_WRD_REHABILITATION: offsets["after_decomm"],
        ClosurePhase.WATER_MANAGEMENT: offsets["after_decomm"],
        ClosurePhase.REVEGETATION_ECOSYSTEM: offsets["after_landform"],
        ClosurePhase.MONITORING_MAINTENANCE: offsets["after_reveg"],
        ClosurePhase.RELINQUISHMENT_POSTCLOSURE: offsets["after_long_tail"],
    }
    return starts[ClosurePhase(phase)]


def calculate_total_duration(durations: PhaseDurations) -> int:
    """
    Total project duration in years.

    planning + decomm + max(earthworks, tsf/wrd) + reveg
        + max(water, monitoring) + relinquishment
    """
    return (
        _works_offsets(durations)["after_long_tail"]
        + durations[ClosurePhase.RELINQUISHMENT_POSTCLOSURE]
    )


@dataclass
class PhaseSchedule:
    """Start year and duration of every phase."""
    start_years: Dict[ClosurePhase, int] = field(default_factory=dict)
    durations: Dict[ClosurePhase, int] = field(default_factory=dict)
    total_duration_years: int = 0

    def start_year(self, phase: ClosurePhase) -> int:
        return self.start_years[phase]

    def end_year(self, phase: ClosurePhase) -> int:
        """Exclusive end offset (start + duration)."""
        return self.start_years[phase] + self.durations[phase]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_duration_years": self.total_duration_years,
            "phases": [
                {
                    "phase": phase.value,
                    "start_year": self.start_years[phase],
                    "duration_years": self.durations[phase],
                    "end_year": self.end_year(phase),
                }
                for phase in CLOSURE_PHASES
            ],
        }


def build_phase_schedule(durations: PhaseDurations) -> PhaseSchedule:
    """Compute the full schedule for a set of phase durations."""
    return PhaseSchedule(
        start_years={
            phase: get_phase_start_year(phase, durations)
            for phase in CLOSURE_PHASES
        },
        durations=durations.as_dict(),
        total_duration_years=calculate_total_duration(durations),
    )
