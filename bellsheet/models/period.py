from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from ..timefmt import parse_range

TRANSITION = "Transition"
LUNCH = "Lunch"


@dataclass(frozen=True)
class RawPeriodSpec:
    id: str | int
    times: str  # "H:MM-H:MM"
    name: str | None = None


@dataclass(frozen=True)
class Period:
    name: str
    start: int  # minutes of day
    end: int
    id: str | int | None = None

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class CurrentPeriod:
    period: Period
    time_left: float


def build_periods(specs: Iterable[RawPeriodSpec]) -> List[Period]:
    """Parse raw ``"H:MM-H:MM"`` specs into periods, keeping input order."""
    out: List[Period] = []
    for s in specs:
        start, end = parse_range(s.times)
        name = s.name if s.name else str(s.id)
        out.append(Period(name=name, start=start, end=end, id=s.id))
    return out
