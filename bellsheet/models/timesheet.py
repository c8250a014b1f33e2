from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..timefmt import current_time
from .period import TRANSITION, CurrentPeriod, Period


def _default_periods() -> Tuple[Period, ...]:
    return (Period("1", 0, 0),)


@dataclass(frozen=True)
class TimeSheet:
    periods: Tuple[Period, ...] = field(default_factory=_default_periods)

    def __post_init__(self) -> None:
        # Accept any sequence but keep the sheet immutable
        object.__setattr__(self, "periods", tuple(self.periods))

    def get_current_period(self, now: float | None = None) -> CurrentPeriod | None:
        """Resolve the period running at ``now`` (minutes of day).

        Returns ``None`` outside school hours. Between two periods a
        ``Transition`` period spanning the gap is returned instead.
        """
        if now is None:
            now = current_time()
        periods = self.periods
        if not periods or now < periods[0].start or now > periods[-1].end:
            return None
        for i, p in enumerate(periods):
            if p.start <= now <= p.end:
                return CurrentPeriod(p, p.end - now)
            if now < p.start:
                # i > 0 here since the bounds check rejects now < periods[0].start
                gap = Period(TRANSITION, periods[i - 1].end, p.start)
                return CurrentPeriod(gap, p.start - now)
        return None

    def names(self) -> List[str]:
        return [p.name for p in self.periods]

    def __len__(self) -> int:
        return len(self.periods)


# [schedule][variant]; variant is the grade track (middle) or lunch letter (high)
ScheduleMatrix = List[List[TimeSheet]]
