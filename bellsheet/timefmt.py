from __future__ import annotations

import math
from datetime import datetime
from typing import List, Tuple

# Bell times are written on a 12-hour clock without AM/PM; any hour below
# this is an afternoon hour.
PM_CUTOFF_HOUR = 5
MINUTES_PER_DAY = 24 * 60


def parse_time(text: str) -> int:
    """Convert ``"H:MM"`` into minutes of day.

    Hours below ``PM_CUTOFF_HOUR`` are read as PM, so ``"1:30"`` is 13:30
    while ``"9:25"`` stays 9:25.
    """
    hh, mm = text.split(":")
    hour = int(hh)
    minute = int(mm)
    if hour < PM_CUTOFF_HOUR:
        hour += 12
    return hour * 60 + minute


def parse_range(text: str) -> Tuple[int, int]:
    parts = text.split("-")
    if len(parts) != 2:
        raise ValueError(f"Expected 'H:MM-H:MM', got {text!r}")
    return parse_time(parts[0]), parse_time(parts[1])


def format_time(
    time: float = 0,
    *,
    hour: bool = True,
    minute: bool = True,
    second: bool = False,
) -> str:
    """Render minutes as ``H:MM``, ``M:SS``, ``H:MM:SS`` and so on.

    Units that are switched off are not split out, so ``minute`` alone
    renders the total number of minutes. A unit is zero padded only when
    the unit above it is shown.
    """
    if hour and not minute and second:
        raise ValueError("Cannot include hours and seconds without minutes")
    h = math.floor(time / 60) if hour else 0
    m = math.floor(time - h * 60) if minute else 0
    s = math.floor((time - h * 60 - m) * 60) if second else 0
    parts: List[str] = []
    if hour:
        parts.append(str(h))
    if minute:
        parts.append(f"{m:02d}" if hour else str(m))
    if second:
        parts.append(f"{s:02d}" if minute else str(s))
    return ":".join(parts)


def current_time(now: datetime | None = None) -> float:
    """Wall-clock minutes of day, with seconds as a fraction."""
    if now is None:
        now = datetime.now()
    return now.hour * 60 + now.minute + now.second / 60
