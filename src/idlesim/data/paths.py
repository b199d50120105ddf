"""Locates the JSON combat catalog."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "IDLESIM_DEFINITIONS"


def get_repo_root() -> Path:
    """Return the checkout root that holds ``data/definitions``."""
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Resolve the catalog directory.

    An explicit ``base_path`` wins, then the ``IDLESIM_DEFINITIONS``
    environment variable, then the checkout's bundled catalog.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_repo_root() / "data" / "definitions"
