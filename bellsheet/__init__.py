from .models import CurrentPeriod, Period, RawPeriodSpec, ScheduleMatrix, TimeSheet, build_periods
from .timefmt import current_time, format_time, parse_time

__all__ = [
    "Period",
    "RawPeriodSpec",
    "CurrentPeriod",
    "TimeSheet",
    "ScheduleMatrix",
    "parse_time",
    "format_time",
    "current_time",
    "build_periods",
]
