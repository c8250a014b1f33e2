from __future__ import annotations

import pytest

from bellsheet.models import Period, RawPeriodSpec, TimeSheet, build_periods
from bellsheet.models import timesheet as timesheet_mod


def _sheet() -> TimeSheet:
    return TimeSheet([Period("1", 480, 530), Period("2", 535, 580)])


def test_start_and_end_are_inclusive() -> None:
    sheet = _sheet()
    cur = sheet.get_current_period(480)
    assert cur is not None
    assert cur.period.name == "1"
    assert cur.time_left == 50
    cur = sheet.get_current_period(530)
    assert cur is not None
    assert cur.period.name == "1"
    assert cur.time_left == 0


def test_gap_gives_transition() -> None:
    cur = _sheet().get_current_period(532.5)
    assert cur is not None
    assert cur.period.name == "Transition"
    assert (cur.period.start, cur.period.end) == (530, 535)
    assert cur.time_left == pytest.approx(2.5)


def test_outside_hours_is_none() -> None:
    sheet = _sheet()
    assert sheet.get_current_period(479.9) is None
    assert sheet.get_current_period(581) is None


def test_default_sheet() -> None:
    sheet = TimeSheet()
    assert sheet.periods == (Period("1", 0, 0),)
    cur = sheet.get_current_period(0)
    assert cur is not None and cur.time_left == 0


def test_now_defaults_to_wall_clock(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(timesheet_mod, "current_time", lambda: 570.0)
    cur = _sheet().get_current_period()
    assert cur is not None
    assert cur.period.name == "2"
    assert cur.time_left == 10


def test_periods_are_frozen() -> None:
    sheet = _sheet()
    assert isinstance(sheet.periods, tuple)
    assert sheet.names() == ["1", "2"]
    assert len(sheet) == 2


def test_build_periods_keeps_order_and_ids() -> None:
    periods = build_periods(
        [
            RawPeriodSpec(id=2, times="9:25-10:15"),
            RawPeriodSpec(id=1, times="8:25-9:22", name="Homeroom"),
        ]
    )
    assert [p.id for p in periods] == [2, 1]
    assert [p.name for p in periods] == ["2", "Homeroom"]
    assert (periods[1].start, periods[1].end) == (505, 562)
