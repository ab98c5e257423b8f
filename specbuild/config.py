"""Load the layered build configuration.

Reads .env then .env.local from the project root, then overlays the
process environment. Later layers win on key collisions.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

# Lowest to highest priority
ENV_FILES: tuple[str, ...] = (".env", ".env.local")


def read_env_file(path: Path) -> dict[str, str | None]:
    """Parse one KEY=VALUE file. Values are taken literally."""
    return dict(dotenv_values(path, interpolate=False))


def load_config(
    root: Path | None = None,
    environ: Mapping[str, str | None] | None = None,
    files: tuple[str, ...] = ENV_FILES,
) -> dict[str, str | None]:
    """Merge env files under root with the ambient environment.

    Missing files are skipped. Environment entries override file entries;
    None-valued entries in environ are ignored.
    """
    base = root or Path.cwd()
    env = os.environ if environ is None else environ

    merged: dict[str, str | None] = {}
    for name in files:
        path = base / name
        if path.is_file():
            merged.update(read_env_file(path))

    # Allow the real environment to override (useful in CI)
    for key, value in env.items():
        if key and value is not None:
            merged[key] = value
    return merged
