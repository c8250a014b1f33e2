from .high import HighScheduleSpec, build_high_schedules, build_high_sheet
from .middle import MiddleScheduleSpec, build_middle_schedules, build_middle_sheet

__all__ = [
    "MiddleScheduleSpec",
    "HighScheduleSpec",
    "build_middle_sheet",
    "build_middle_schedules",
    "build_high_sheet",
    "build_high_schedules",
]
