"""Locate and read romanctl.toml.

Resolution order for the config file:
  1. An explicit path (``--config``). Missing files are ignored.
  2. The ``ROMANCTL_CONFIG`` env var.
  3. Walk up from the working directory, the way git finds ``.git/``.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "romanctl.toml"
CONFIG_ENV_VAR = "ROMANCTL_CONFIG"


def _ancestors(start: Path) -> Iterator[Path]:
    """Yield *start* and each of its parents up to the filesystem root."""
    current = start.resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None, *, explicit: str | Path | None = None) -> Path | None:
    """Return the config file to use, or None when there is none."""
    if explicit is not None:
        path = Path(explicit)
        return path if path.is_file() else None

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, object]:
    """Parse *path* as TOML. ``tomllib.TOMLDecodeError`` propagates."""
    return tomllib.loads(path.read_text(encoding="utf-8"))

