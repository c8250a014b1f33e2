from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

DEFAULT_DAY_TYPE_URL = "https://hcpss.space/api/calendar/dayType"


@dataclass
class Settings:
    day_type_url: str = DEFAULT_DAY_TYPE_URL
    # None leaves the timeout to requests (no timeout)
    day_type_timeout: float | None = None
    state_path: Path = Path("state") / "selection.json"
    log_dir: Path = Path("logs")
    log_level: str = "INFO"
    tables_dir: Path | None = None


def load_settings(path: Path | str | None = None, project_root: Path | None = None) -> Settings:
    """Load settings from configs/bellsheet.toml if present, else defaults.

    Keys may sit at top level or under a [bellsheet] table. Relative paths
    resolve against the directory of an explicit ``path``, otherwise against
    ``project_root`` (the working directory by default).
    """
    root = Path.cwd() if project_root is None else Path(project_root)
    cfg = Path(path) if path is not None else root / "configs" / "bellsheet.toml"
    base = cfg.absolute().parent if path is not None else root
    s = Settings()
    data: Dict[str, Any] = {}
    if cfg.exists():
        try:
            data = tomllib.loads(cfg.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as e:
            logging.getLogger(__name__).warning(f"Ignoring config {cfg}: {e}")
            data = {}
    section = data.get("bellsheet") if isinstance(data.get("bellsheet"), dict) else data
    known = {f.name for f in fields(Settings)}
    for key, value in section.items():
        if key in known:
            setattr(s, key, value)
    if s.day_type_timeout is not None:
        s.day_type_timeout = float(s.day_type_timeout)
    s.log_level = str(s.log_level).upper()
    s.state_path = _resolve(base, s.state_path)
    s.log_dir = _resolve(base, s.log_dir)
    if s.tables_dir is not None:
        s.tables_dir = _resolve(base, s.tables_dir)
    return s


def _resolve(root: Path, value: Path | str) -> Path:
    p = Path(value)
    return p if p.is_absolute() else root / p
