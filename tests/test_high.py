from __future__ import annotations

import pytest

from bellsheet.data.loader import load_high_specs
from bellsheet.errors import ScheduleConfigError
from bellsheet.models import Period, RawPeriodSpec, build_periods
from bellsheet.scheduler import HighScheduleSpec, build_high_schedules, build_high_sheet
from bellsheet.timefmt import parse_range


def _lunch(lunch_id: str, times: str) -> Period:
    return build_periods([RawPeriodSpec(id=lunch_id, times=times)])[0]


PERIODS = build_periods(
    [
        RawPeriodSpec(id="3", times="9:45-10:40"),
        RawPeriodSpec(id="4", times="10:45-12:45"),
        RawPeriodSpec(id="5", times="12:50-1:40"),
    ]
)


def test_lunch_splits_period_in_three() -> None:
    sheet = build_high_sheet(PERIODS, _lunch("B", "11:15-11:45"))
    spans = [(p.name, p.start, p.end) for p in sheet.periods]
    assert spans[1:4] == [
        ("4", *parse_range("10:45-11:15")),
        ("B Lunch", *parse_range("11:15-11:45")),
        ("4", *parse_range("11:45-12:45")),
    ]
    assert sheet.names() == ["3", "4", "B Lunch", "4", "5"]


def test_lunch_at_period_start_has_no_leading_fragment() -> None:
    sheet = build_high_sheet(PERIODS, _lunch("A", "10:45-11:15"))
    assert sheet.names() == ["3", "A Lunch", "4", "5"]


def test_lunch_at_period_end_has_no_trailing_fragment() -> None:
    sheet = build_high_sheet(PERIODS, _lunch("D", "12:15-12:45"))
    assert sheet.names() == ["3", "4", "D Lunch", "5"]


def test_trailing_lunch_is_appended() -> None:
    sheet = build_high_sheet(PERIODS, _lunch("Grab n Go", "1:40-1:55"))
    assert sheet.names() == ["3", "4", "5", "Grab n Go Lunch"]


def test_lunch_spanning_two_periods_is_rejected() -> None:
    periods = build_periods(
        [RawPeriodSpec(id="1", times="10:00-11:00"), RawPeriodSpec(id="2", times="11:00-12:00")]
    )
    with pytest.raises(ScheduleConfigError):
        build_high_sheet(periods, _lunch("A", "10:30-11:30"))


def test_no_periods() -> None:
    with pytest.raises(ScheduleConfigError):
        build_high_sheet([], _lunch("A", "10:30-11:00"))


def test_shipped_high_tables() -> None:
    matrix = build_high_schedules(load_high_specs())
    assert [len(v) for v in matrix] == [4, 4, 1, 4]
    assert matrix[0][0].names() == ["1", "2", "3", "A Lunch", "4", "5", "6"]
    assert matrix[1][2].names()[2] == "Lions' Time"
    assert matrix[2][0].names()[-1] == "Grab n Go Lunch"


def test_build_high_schedules_from_specs() -> None:
    spec = HighScheduleSpec(
        periods=[RawPeriodSpec(id="1", times="7:50-8:45"), RawPeriodSpec(id="2", times="8:50-9:40")],
        lunches=[RawPeriodSpec(id="A", times="8:50-9:10"), RawPeriodSpec(id="B", times="9:10-9:40")],
    )
    matrix = build_high_schedules([spec])
    assert matrix[0][0].names() == ["1", "A Lunch", "2"]
    assert matrix[0][1].names() == ["1", "2", "B Lunch"]


@pytest.mark.parametrize("times", ["10:41-10:44", "7:00-7:30"])
def test_lunch_outside_every_period_is_rejected(times: str) -> None:
    with pytest.raises(ScheduleConfigError):
        build_high_sheet(PERIODS, _lunch("A", times))


def test_fragments_match_source_strings() -> None:
    specs = load_high_specs()
    matrix = build_high_schedules(specs)
    for spec, sheets in zip(specs, matrix):
        raw = {str(r.id): parse_range(r.times) for r in spec.periods}
        lunches = {str(r.id): parse_range(r.times) for r in spec.lunches}
        for lunch_spec, sheet in zip(spec.lunches, sheets):
            lunch_span = lunches[str(lunch_spec.id)]
            for p in sheet.periods:
                if p.name == f"{lunch_spec.id} Lunch":
                    assert (p.start, p.end) == lunch_span
                    continue
                start, end = raw[str(p.id)]
                assert start <= p.start < p.end <= end
                assert p.start in (start, lunch_span[1])
                assert p.end in (end, lunch_span[0])
