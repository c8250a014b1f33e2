from __future__ import annotations

from collections import defaultdict
from typing import Dict, List

from ..models.timesheet import ScheduleMatrix, TimeSheet
from ..timefmt import MINUTES_PER_DAY


def sheet_violations(sheet: TimeSheet) -> Dict[str, List[str]]:
    """Rule name -> offending periods for a single sheet."""
    out: Dict[str, List[str]] = defaultdict(list)
    periods = sheet.periods
    for p in periods:
        if not (0 <= p.start <= p.end <= MINUTES_PER_DAY):
            out["bounds"].append(f"{p.name} {p.start}-{p.end}")
    for prev, nxt in zip(periods, periods[1:]):
        if nxt.start < prev.start:
            out["order"].append(f"{prev.name} -> {nxt.name}")
        if prev.end > nxt.start:
            out["overlap"].append(f"{prev.name} ends {prev.end} after {nxt.name} starts {nxt.start}")
    return dict(out)


def validate_matrix(matrix: ScheduleMatrix) -> Dict[str, object]:
    report: Dict[str, object] = {}
    violations_by_rule: Dict[str, List[str]] = defaultdict(list)
    count = 0
    for si, variants in enumerate(matrix):
        for vi, sheet in enumerate(variants):
            count += 1
            for rule, items in sheet_violations(sheet).items():
                violations_by_rule[rule].extend(f"[{si}][{vi}] {x}" for x in items)
    report["sheet_count"] = count
    report["violations_by_rule"] = dict(violations_by_rule)
    return report
