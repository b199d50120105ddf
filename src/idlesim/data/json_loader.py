"""Reads catalog files from the definitions directory."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError


def load_json(path: Path) -> object:
    """Return the parsed catalog file at ``path``.

    Every read or parse failure surfaces as DataLoadError.
    """
    if not path.is_file():
        raise DataLoadError(f"Catalog file not found: {path}")
    try:
        with path.open("r", encoding="utf-8-sig") as handle:
            return json.load(handle)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Catalog file {path.name} is not valid JSON (line {exc.lineno}): {exc.msg}") from exc
    except OSError as exc:
        raise DataLoadError(f"Catalog file {path} could not be read: {exc}") from exc
