from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from ..config import Settings, load_settings
from ..data.loader import load_high_specs, load_middle_specs
from ..data.store import JsonFileStore
from ..daytype import DayTypeClient
from ..errors import ScheduleConfigError
from ..models.timesheet import ScheduleMatrix
from ..scheduler import build_high_schedules, build_middle_schedules
from ..selector import HighSelector, MiddleSelector
from ..timefmt import format_time
from ..validate.checks import validate_matrix
from ..validate.report import format_validation_report, write_validation_report


class School(str, Enum):
    middle = "middle"
    high = "high"


def _setup_logging(log_dir: Path, level: str) -> None:
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_dir / "bellsheet.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def build_matrix(school: School, settings: Settings) -> ScheduleMatrix:
    if school is School.middle:
        return build_middle_schedules(load_middle_specs(settings.tables_dir))
    return build_high_schedules(load_high_specs(settings.tables_dir))


def _checked_matrix(school: School, settings: Settings) -> ScheduleMatrix:
    try:
        return build_matrix(school, settings)
    except ScheduleConfigError as e:
        typer.echo(f"Invalid {school.value} schedule tables: {e}", err=True)
        raise typer.Exit(1)


def make_high_selector(settings: Settings) -> HighSelector:
    client = DayTypeClient(settings.day_type_url, timeout=settings.day_type_timeout)
    matrix = _checked_matrix(School.high, settings)
    return HighSelector(matrix, JsonFileStore(settings.state_path), day_types=client)


def make_selector(school: School, settings: Settings) -> MiddleSelector | HighSelector:
    if school is School.high:
        return make_high_selector(settings)
    return MiddleSelector(_checked_matrix(school, settings), JsonFileStore(settings.state_path))


def _describe(selector: MiddleSelector | HighSelector) -> str:
    if isinstance(selector, MiddleSelector):
        return f"schedule={selector.schedule} grade={selector.grade}"
    a, b = selector.lunch_days.as_tuple()
    return f"schedule={selector.schedule} day={selector.day} lunch_a={a} lunch_b={b}"


app = typer.Typer(add_completion=False, help="School bell schedule: current period and time left")


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, help="Path to bellsheet.toml"),
    log_level: Optional[str] = typer.Option(None, help="Log level"),
) -> None:
    settings = load_settings(config)
    if log_level:
        settings.log_level = log_level.upper()
    _setup_logging(settings.log_dir, settings.log_level)
    ctx.obj = settings


@app.command("now")
def cli_now(ctx: typer.Context, school: School = typer.Option(School.middle, help="middle or high")) -> None:
    selector = make_selector(school, ctx.obj)
    current = selector.current
    if current is None:
        typer.echo("Outside school hours")
        return
    left = format_time(current.time_left, hour=True, minute=True, second=True)
    typer.echo(f"{current.period.name}: {left} left")


@app.command("show")
def cli_show(
    ctx: typer.Context,
    school: School = typer.Option(School.middle, help="middle or high"),
    schedule: int = typer.Option(0, help="Schedule index"),
    variant: int = typer.Option(0, help="Grade track (middle) or lunch (high) index"),
) -> None:
    matrix = _checked_matrix(school, ctx.obj)
    try:
        sheet = matrix[schedule][variant]
    except IndexError:
        typer.echo(f"No sheet at [{schedule}][{variant}]", err=True)
        raise typer.Exit(1)
    typer.echo("Period,Start,End")
    for p in sheet.periods:
        typer.echo(f"{p.name},{format_time(p.start)},{format_time(p.end)}")


@app.command("select")
def cli_select(
    ctx: typer.Context,
    school: School = typer.Option(School.middle, help="middle or high"),
    schedule: Optional[int] = typer.Option(None, help="Schedule index"),
    grade: Optional[int] = typer.Option(None, help="Grade track index (middle)"),
    day: Optional[int] = typer.Option(None, help="0 for an A day, 1 for a B day (high)"),
    lunch_a: Optional[int] = typer.Option(None, help="Lunch index on A days (high)"),
    lunch_b: Optional[int] = typer.Option(None, help="Lunch index on B days (high)"),
) -> None:
    selector = make_selector(school, ctx.obj)
    try:
        if schedule is not None:
            selector.schedule = schedule
        if isinstance(selector, MiddleSelector):
            if grade is not None:
                selector.grade = grade
        else:
            if day is not None:
                selector.day = day
            if lunch_a is not None:
                selector.lunch_days[0] = lunch_a
            if lunch_b is not None:
                selector.lunch_days[1] = lunch_b
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    typer.echo(_describe(selector))


@app.command("update-day")
def cli_update_day(ctx: typer.Context) -> None:
    selector = make_high_selector(ctx.obj)
    result = selector.update_day()
    if not result.ok:
        typer.echo(f"Day not updated ({result.error}); still day {result.day}", err=True)
        raise typer.Exit(1)
    typer.echo(f"day={result.day}")


@app.command("validate")
def cli_validate(
    ctx: typer.Context,
    out: Optional[Path] = typer.Option(None, help="Directory to write validation JSON into"),
) -> None:
    failed = False
    for school in School:
        try:
            report = validate_matrix(build_matrix(school, ctx.obj))
        except ScheduleConfigError as e:
            report = {"sheet_count": 0, "violations_by_rule": {"config": [str(e)]}}
        if report["violations_by_rule"]:
            failed = True
        typer.echo(f"[{school.value}]")
        typer.echo(format_validation_report(report))
        if out is not None:
            write_validation_report(report, out, f"validation_{school.value}.json")
    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
