from __future__ import annotations

from typing import List

from ..errors import ScheduleConfigError
from ..models.period import Period
from ..models.timesheet import TimeSheet
from ..validate.checks import sheet_violations


def seal_sheet(periods: List[Period], label: str) -> TimeSheet:
    """Freeze built periods into a TimeSheet, refusing broken layouts."""
    sheet = TimeSheet(tuple(periods))
    violations = sheet_violations(sheet)
    if violations:
        detail = "; ".join(f"{rule}: {', '.join(items)}" for rule, items in violations.items())
        raise ScheduleConfigError(f"{label}: {detail}")
    return sheet
