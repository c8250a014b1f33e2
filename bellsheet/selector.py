from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, Sequence

from .data.store import KeyValueStore, read_int, write_int
from .daytype import DAY_TYPE_INDEX
from .errors import DayTypeError
from .models.period import CurrentPeriod
from .models.timesheet import ScheduleMatrix, TimeSheet

MIDDLE_SCHEDULE_KEY = "middle-times-schedule"
MIDDLE_GRADE_KEY = "middle-times-grade"
HIGH_SCHEDULE_KEY = "high-times-schedule"
HIGH_DAY_KEY = "high-times-day"
HIGH_LUNCH_KEYS = ("high-times-lunch-0", "high-times-lunch-1")


class DayTypeSource(Protocol):
    def fetch(self) -> str: ...


@dataclass(frozen=True)
class DayUpdate:
    ok: bool
    day: int  # selected day after the update attempt
    error: str | None = None


def _check_index(name: str, value: int, size: int) -> int:
    value = int(value)
    if not 0 <= value < size:
        raise ValueError(f"{name} must be between 0 and {size - 1}, got {value}")
    return value


def _stored_index(store: KeyValueStore, key: str, size: int) -> int:
    """Persisted index, or 0 when it does not fit the built tables."""
    value = read_int(store, key)
    if not 0 <= value < size:
        logging.getLogger(__name__).warning(f"Stored {key}={value} is out of range; using 0")
        return 0
    return value


def _pick_sheet(schedules: ScheduleMatrix, schedule: int, variant: int, what: str) -> TimeSheet:
    variants = schedules[schedule]
    if not 0 <= variant < len(variants):
        # Some day types have fewer variants (e.g. a single grab-and-go lunch)
        logging.getLogger(__name__).warning(
            f"{what} {variant} not available in schedule {schedule}; using {what} 0"
        )
        variant = 0
    return variants[variant]


class _SelectorBase(ABC):
    schedule_key: str

    def __init__(self, schedules: ScheduleMatrix, store: KeyValueStore):
        if not schedules or not all(schedules):
            raise ValueError("Selector needs at least one sheet per schedule")
        self.schedules = schedules
        self.store = store

    @property
    def variant_count(self) -> int:
        return max(len(v) for v in self.schedules)

    @property
    def schedule(self) -> int:
        return _stored_index(self.store, self.schedule_key, len(self.schedules))

    @schedule.setter
    def schedule(self, value: int) -> None:
        write_int(self.store, self.schedule_key, _check_index("schedule", value, len(self.schedules)))

    @abstractmethod
    def sheet(self) -> TimeSheet: ...

    def current_at(self, now: float) -> CurrentPeriod | None:
        return self.sheet().get_current_period(now)

    @property
    def current(self) -> CurrentPeriod | None:
        return self.sheet().get_current_period()


class MiddleSelector(_SelectorBase):
    """Schedule and grade-track selection for the middle school."""

    schedule_key = MIDDLE_SCHEDULE_KEY

    @property
    def grade(self) -> int:
        return read_int(self.store, MIDDLE_GRADE_KEY)

    @grade.setter
    def grade(self, value: int) -> None:
        write_int(self.store, MIDDLE_GRADE_KEY, _check_index("grade", value, self.variant_count))

    def sheet(self) -> TimeSheet:
        return _pick_sheet(self.schedules, self.schedule, self.grade, "grade")


class LunchDays:
    """Two-slot map from A/B day index to lunch variant index."""

    def __init__(self, store: KeyValueStore, size: int):
        self.store = store
        self.size = size

    def __getitem__(self, day: int) -> int:
        return read_int(self.store, HIGH_LUNCH_KEYS[day])

    def __setitem__(self, day: int, value: int) -> None:
        write_int(self.store, HIGH_LUNCH_KEYS[day], _check_index("lunch", value, self.size))

    def __len__(self) -> int:
        return len(HIGH_LUNCH_KEYS)

    def as_tuple(self) -> tuple[int, int]:
        return (self[0], self[1])


class HighSelector(_SelectorBase):
    """Schedule, A/B day and per-day lunch selection for the high school."""

    schedule_key = HIGH_SCHEDULE_KEY

    def __init__(
        self,
        schedules: ScheduleMatrix,
        store: KeyValueStore,
        day_types: DayTypeSource | None = None,
    ):
        super().__init__(schedules, store)
        self.day_types = day_types

    @property
    def day(self) -> int:
        return _stored_index(self.store, HIGH_DAY_KEY, len(DAY_TYPE_INDEX))

    @day.setter
    def day(self, value: int) -> None:
        write_int(self.store, HIGH_DAY_KEY, _check_index("day", value, len(DAY_TYPE_INDEX)))

    @property
    def lunch_days(self) -> LunchDays:
        return LunchDays(self.store, self.variant_count)

    @lunch_days.setter
    def lunch_days(self, values: Sequence[int]) -> None:
        if len(values) != len(HIGH_LUNCH_KEYS):
            raise ValueError(f"lunch_days needs {len(HIGH_LUNCH_KEYS)} entries, got {len(values)}")
        lunch_days = self.lunch_days
        lunch_days[0] = values[0]
        lunch_days[1] = values[1]

    def sheet(self) -> TimeSheet:
        return _pick_sheet(self.schedules, self.schedule, self.lunch_days[self.day], "lunch")

    def update_day(self) -> DayUpdate:
        """Ask the day-type service for today's A/B day.

        Failures are logged and reported in the result; ``day`` is left
        as it was.
        """
        logger = logging.getLogger(__name__)
        if self.day_types is None:
            return DayUpdate(False, self.day, "No day-type source configured")
        try:
            day_type = self.day_types.fetch()
        except DayTypeError as e:
            logger.error(f"Day type lookup failed: {e}")
            return DayUpdate(False, self.day, str(e))
        if day_type not in DAY_TYPE_INDEX:
            logger.warning(f"Unknown day type {day_type!r}; keeping day {self.day}")
            return DayUpdate(False, self.day, f"Unknown day type {day_type!r}")
        self.day = DAY_TYPE_INDEX[day_type]
        logger.info(f"Day type {day_type} -> day {self.day}")
        return DayUpdate(True, self.day)
