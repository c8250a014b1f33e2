# Re-export common types
from .period import CurrentPeriod, Period, RawPeriodSpec, build_periods
from .timesheet import ScheduleMatrix, TimeSheet

__all__ = [
    "Period",
    "RawPeriodSpec",
    "CurrentPeriod",
    "TimeSheet",
    "ScheduleMatrix",
    "build_periods",
]
