from __future__ import annotations

from pathlib import Path

import pytest

PACKAGE = Path(__file__).resolve().parents[1] / "bellsheet"

# The time arithmetic and the two builders stay small enough to read in one sitting
CORE_MODULES = {
    "timefmt.py": 100,
    "models/period.py": 60,
    "models/timesheet.py": 80,
    "scheduler/common.py": 40,
    "scheduler/middle.py": 100,
    "scheduler/high.py": 100,
}
GLUE_BUDGET = 250


def _lines(path: Path) -> int:
    return len(path.read_text(encoding="utf-8").splitlines())


@pytest.mark.parametrize("module,budget", sorted(CORE_MODULES.items()))
def test_core_module_budget(module: str, budget: int) -> None:
    path = PACKAGE / module
    assert path.exists(), module
    assert _lines(path) <= budget, f"{module} has {_lines(path)} lines, budget {budget}"


def test_glue_modules_stay_thin() -> None:
    core = {PACKAGE / m for m in CORE_MODULES}
    heavy = {
        str(p.relative_to(PACKAGE)): _lines(p)
        for p in PACKAGE.rglob("*.py")
        if p not in core and _lines(p) > GLUE_BUDGET
    }
    assert not heavy, f"Modules over {GLUE_BUDGET} lines: {heavy}"
