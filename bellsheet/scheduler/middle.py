from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..errors import ScheduleConfigError
from ..models.period import LUNCH, Period, RawPeriodSpec, build_periods
from ..models.timesheet import ScheduleMatrix, TimeSheet
from .common import seal_sheet


@dataclass(frozen=True)
class MiddleScheduleSpec:
    periods: List[RawPeriodSpec]
    lunch_start: int
    lunch_end: int
    lunches: List[int]
    # period id -> display name, e.g. {-1: "Eagle Time"}
    replace: Dict[int, str] = field(default_factory=dict)
    label: str = ""

    def in_lunch_range(self, period_id: object) -> bool:
        return isinstance(period_id, int) and self.lunch_start <= period_id <= self.lunch_end


def _check_lunch(spec: MiddleScheduleSpec, periods: List[Period], lunch: int) -> None:
    in_range = [p.id for p in periods if spec.in_lunch_range(p.id)]
    if lunch not in in_range:
        raise ScheduleConfigError(
            f"Lunch {lunch} is not a period between {spec.lunch_start} and {spec.lunch_end}"
        )
    # Everything except the lunch slot must pair up
    if (len(in_range) - 1) % 2:
        raise ScheduleConfigError(
            f"Lunch {lunch} leaves {len(in_range) - 1} periods in {spec.lunch_start}-{spec.lunch_end}; expected an even count"
        )


def build_middle_sheet(spec: MiddleScheduleSpec, lunch: int) -> TimeSheet:
    """Lay out one grade track: ``lunch`` becomes Lunch, the rest of the
    lunch range is merged pairwise (``"4-5"``)."""
    periods = build_periods(spec.periods)
    _check_lunch(spec, periods, lunch)
    out: List[Period] = []
    i = 0
    while i < len(periods):
        p = periods[i]
        name = spec.replace.get(p.id, str(p.id))
        if not spec.in_lunch_range(p.id):
            out.append(Period(name, p.start, p.end, p.id))
            i += 1
        elif p.id == lunch:
            out.append(Period(LUNCH, p.start, p.end, p.id))
            i += 1
        else:
            nxt = periods[i + 1] if i + 1 < len(periods) else None
            if nxt is None or not spec.in_lunch_range(nxt.id) or nxt.id == lunch:
                raise ScheduleConfigError(f"Period {p.id} has no partner to merge with for lunch {lunch}")
            out.append(Period(f"{name}-{nxt.id}", p.start, nxt.end, p.id))
            i += 2
    return seal_sheet(out, f"middle lunch {lunch}")


def build_middle_schedules(specs: List[MiddleScheduleSpec]) -> ScheduleMatrix:
    logger = logging.getLogger(__name__)
    matrix: ScheduleMatrix = []
    for idx, spec in enumerate(specs):
        grades = [build_middle_sheet(spec, lunch) for lunch in spec.lunches]
        logger.info(f"Middle schedule {idx}: {len(grades)} grade tracks")
        matrix.append(grades)
    return matrix
