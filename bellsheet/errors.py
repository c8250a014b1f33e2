from __future__ import annotations


class ScheduleConfigError(ValueError):
    """Schedule tables that cannot produce a valid TimeSheet."""


class DayTypeError(RuntimeError):
    """The day-type service could not be reached or answered nonsense."""
