from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from ..errors import ScheduleConfigError
from ..models.period import RawPeriodSpec
from ..scheduler.high import HighScheduleSpec
from ..scheduler.middle import MiddleScheduleSpec

TABLES_DIR = Path(__file__).resolve().parent / "tables"


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _raw_periods(items: List[Dict[str, Any]]) -> List[RawPeriodSpec]:
    out: List[RawPeriodSpec] = []
    for item in items:
        if "id" not in item or "times" not in item:
            raise ScheduleConfigError(f"Period entry needs 'id' and 'times': {item}")
        out.append(RawPeriodSpec(id=item["id"], times=item["times"], name=item.get("name")))
    return out


def parse_middle_specs(data: List[Dict[str, Any]]) -> List[MiddleScheduleSpec]:
    specs: List[MiddleScheduleSpec] = []
    for i, s in enumerate(data):
        try:
            specs.append(
                MiddleScheduleSpec(
                    periods=_raw_periods(s["periods"]),
                    lunch_start=int(s["lunchStart"]),
                    lunch_end=int(s["lunchEnd"]),
                    lunches=[int(x) for x in s["lunches"]],
                    replace={int(r["from"]): str(r["to"]) for r in s.get("replace", [])},
                    label=s.get("label", f"Schedule {i + 1}"),
                )
            )
        except KeyError as e:
            raise ScheduleConfigError(f"Middle schedule {i} is missing {e}") from e
    return specs


def parse_high_specs(data: List[Dict[str, Any]]) -> List[HighScheduleSpec]:
    specs: List[HighScheduleSpec] = []
    for i, s in enumerate(data):
        try:
            specs.append(
                HighScheduleSpec(
                    periods=_raw_periods(s["periods"]),
                    lunches=_raw_periods(s["lunches"]),
                    label=s.get("label", f"Schedule {i + 1}"),
                )
            )
        except KeyError as e:
            raise ScheduleConfigError(f"High schedule {i} is missing {e}") from e
    return specs


def load_middle_specs(tables_dir: Path | None = None) -> List[MiddleScheduleSpec]:
    return parse_middle_specs(load_json((tables_dir or TABLES_DIR) / "middle.json"))


def load_high_specs(tables_dir: Path | None = None) -> List[HighScheduleSpec]:
    return parse_high_specs(load_json((tables_dir or TABLES_DIR) / "high.json"))
