import json
from pathlib import Path

from idlesim.presentation.cli.config import SimulationConfig, load_config, save_config


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.json")

    assert config == SimulationConfig()


def test_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_config(path) == SimulationConfig()


def test_values_are_normalized(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"trials": -4, "seed": "abc", "log_level": "debug", "credit_partial_rewards": "yes"}),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.trials == 100
    assert config.seed is None
    assert config.log_level == "DEBUG"
    assert config.credit_partial_rewards is False


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    config = SimulationConfig(trials=25, seed=9, log_level="INFO", credit_partial_rewards=True)

    save_config(config, path)

    assert load_config(path) == config
