from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from ..errors import ScheduleConfigError
from ..models.period import Period, RawPeriodSpec, build_periods
from ..models.timesheet import ScheduleMatrix, TimeSheet
from .common import seal_sheet


@dataclass(frozen=True)
class HighScheduleSpec:
    periods: List[RawPeriodSpec]
    lunches: List[RawPeriodSpec]
    label: str = ""


def lunch_period(lunch: Period) -> Period:
    return Period(f"{lunch.id} Lunch", lunch.start, lunch.end, lunch.id)


def build_high_sheet(periods: List[Period], lunch: Period) -> TimeSheet:
    """Cut ``lunch`` out of whichever class period it overlaps.

    A lunch that starts at or after the last period's end is appended as a
    standalone block.
    """
    if not periods:
        raise ScheduleConfigError("High school schedule has no periods")
    out: List[Period] = []
    placed = False
    for p in periods:
        if p.end <= lunch.start or p.start >= lunch.end:
            out.append(p)
            continue
        if p.start < lunch.start:
            out.append(Period(p.name, p.start, lunch.start, p.id))
        out.append(lunch_period(lunch))
        placed = True
        if p.end > lunch.end:
            out.append(Period(p.name, lunch.end, p.end, p.id))
    if periods[-1].end <= lunch.start:
        out.append(lunch_period(lunch))
        placed = True
    if not placed:
        # A lunch in a gap or before the first bell would vanish from the sheet
        raise ScheduleConfigError(f"Lunch {lunch.id} does not overlap any period")
    return seal_sheet(out, f"high lunch {lunch.id}")


def build_high_schedules(specs: List[HighScheduleSpec]) -> ScheduleMatrix:
    logger = logging.getLogger(__name__)
    matrix: ScheduleMatrix = []
    for idx, spec in enumerate(specs):
        periods = build_periods(spec.periods)
        lunches = build_periods(spec.lunches)
        sheets = [build_high_sheet(periods, lunch) for lunch in lunches]
        logger.info(f"High schedule {idx}: {len(sheets)} lunch variants")
        matrix.append(sheets)
    return matrix
