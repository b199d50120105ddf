"""CLI configuration helpers for simulation defaults."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

_DEFAULT_TRIALS = 100
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class SimulationConfig:
    trials: int = _DEFAULT_TRIALS
    seed: int | None = None
    log_level: str = _DEFAULT_LOG_LEVEL
    credit_partial_rewards: bool = False
    definitions_path: str | None = None

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "idlesim"
        return Path.home() / "idlesim"
    return Path.home() / ".config" / "idlesim"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_trials(value: object) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return _DEFAULT_TRIALS


def _normalize_seed(value: object) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_path(value: object) -> str | None:
    return value if isinstance(value, str) and value else None


def _from_mapping(raw: Dict[str, Any]) -> SimulationConfig:
    return SimulationConfig(
        trials=_normalize_trials(raw.get("trials")),
        seed=_normalize_seed(raw.get("seed")),
        log_level=_normalize_log_level(raw.get("log_level")),
        credit_partial_rewards=raw.get("credit_partial_rewards") is True,
        definitions_path=_normalize_path(raw.get("definitions_path")),
    )


def load_config(path: Path | None = None) -> SimulationConfig:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return SimulationConfig()
    except (OSError, ValueError):
        return SimulationConfig()
    if not isinstance(raw, dict):
        return SimulationConfig()
    return _from_mapping(raw)


def save_config(config: SimulationConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = asdict(_from_mapping(asdict(config)))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
