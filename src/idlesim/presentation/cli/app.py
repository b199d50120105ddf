"""Command-line batch runner for route balance checks."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, Sequence, Tuple

from idlesim.data.errors import DataError
from idlesim.data.repositories import WeaponsRepository
from idlesim.domain.armor_effects import ARMOR_EFFECTS
from idlesim.domain.state import ArmorState, HeroState
from idlesim.services import AdventureSettings, BatchSimulator, LoadoutService

from .config import SimulationConfig, load_config
from .render import format_combat_log, format_summary

logger = logging.getLogger(__name__)


def parse_weapon(value: str) -> Tuple[str, int]:
    """Parse ``spear:3`` into ``("spear", 3)``; a bare type means level 1."""
    weapon_type, sep, level_text = value.partition(":")
    if not weapon_type:
        raise argparse.ArgumentTypeError(f"Invalid weapon '{value}'.")
    if not sep:
        return weapon_type, 1
    try:
        level = int(level_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid weapon level in '{value}'.") from exc
    return weapon_type, level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="idlesim",
        description="Run Monte Carlo adventures on a route and summarize the outcomes.",
    )
    parser.add_argument("target", help="Route target, e.g. meadow_path_short")
    parser.add_argument("--level", "-l", type=int, default=1, help="Hero level")
    parser.add_argument(
        "--weapon",
        "-w",
        dest="weapons",
        action="append",
        type=parse_weapon,
        default=[],
        help="Equipped weapon as type:level (repeatable)",
    )
    parser.add_argument("--defense", type=float, default=0, help="Armor defense")
    parser.add_argument(
        "--effect",
        default="none",
        choices=sorted(ARMOR_EFFECTS),
        help="Armor special effect",
    )
    parser.add_argument("--trials", "-n", type=int, help="Number of trials (config default otherwise)")
    parser.add_argument("--seed", "-s", type=int, help="Batch seed")
    parser.add_argument("--log", action="store_true", help="Print the first trial's combat log")
    parser.add_argument("--config", type=Path, help="Path to a JSON config file")
    return parser


def build_hero(args: argparse.Namespace) -> HeroState:
    weapon_levels: Dict[str, int] = dict(args.weapons)
    armor = None
    if args.defense > 0 or args.effect != "none":
        armor = ArmorState(defense=args.defense, effect=args.effect)
    return HeroState(hero_level=args.level, weapon_levels=weapon_levels, armor=armor)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a batch and print its summary."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config: SimulationConfig = load_config(args.config)
    logging.basicConfig(level=config.logging_level, format="%(levelname)s %(name)s: %(message)s")

    trials = args.trials if args.trials is not None else config.trials
    seed = args.seed if args.seed is not None else config.seed
    if trials <= 0:
        parser.error("--trials must be positive")

    settings = AdventureSettings(credit_partial_rewards=config.credit_partial_rewards)
    try:
        simulator = BatchSimulator.from_definitions(config.definitions_path, settings)
        loadout = LoadoutService(WeaponsRepository(config.definitions_path)).build_loadout(build_hero(args))
        summary = simulator.run_batch(args.target, loadout, args.level, trials, seed)
    except DataError as exc:
        logger.error("Could not load definitions: %s", exc)
        print(f"Error: {exc}")
        return 1

    if args.log and summary.results:
        for line in format_combat_log(summary.results[0]):
            print(line)
        print()
    for line in format_summary(args.target, summary):
        print(line)
    return 0
