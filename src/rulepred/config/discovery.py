"""Locating and reading rulepred.toml.

The config file is found by walking up from the working directory, the
way git finds ``.git/``. ``RULEPRED_CONFIG`` pins an explicit file.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "rulepred.toml"
CONFIG_ENV_VAR = "RULEPRED_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest rulepred.toml at or above *start* (default: cwd).

    A ``RULEPRED_CONFIG`` pointing at a missing file yields None rather
    than falling back to the walk-up.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        candidate = Path(pinned)
        return candidate if candidate.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse the TOML file at *path* into a plain dict of sections.

    Raises:
        click.ClickException: If the file cannot be read or is not TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Cannot read config {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
