"""Persistent JSON config helpers.

Stores the puzzle-input directory and the default event year.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "aocsolver"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_YEAR = 2022


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_input_dir() -> Path | None:
    """Return the directory holding ``dayNN.txt`` inputs, if configured."""
    value = load_config().get("input_dir")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value).expanduser()


def save_input_dir(path: Path) -> None:
    config = load_config()
    config["input_dir"] = str(path.expanduser().resolve())
    save_config(config)


def load_default_year() -> int:
    """Return the configured event year, or ``DEFAULT_YEAR``.

    Only plain integers are accepted; booleans and other types fall back.
    """
    value = load_config().get("default_year")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_YEAR
    return value


def save_default_year(year: int) -> None:
    config = load_config()
    config["default_year"] = int(year)
    save_config(config)


def input_path_for_day(day: int) -> Path | None:
    """Configured input file for ``day`` when it exists on disk."""
    input_dir = load_input_dir()
    if input_dir is None:
        return None
    candidate = input_dir / f"day{day:02d}.txt"
    return candidate if candidate.is_file() else None
