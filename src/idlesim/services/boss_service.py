"""Boss fights layered on the shared exchange rules."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping

from idlesim.core.rng import RNG
from idlesim.data.repositories import BossesRepository
from idlesim.domain.boss_mechanics import BOSS_MECHANICS, BossOutcome, EncounterState, MechanicHandler, resolve_encounter
from idlesim.domain.combat_math import select_weapon
from idlesim.domain.defs import BossDef
from idlesim.domain.entities import ArmorData, WeaponData

logger = logging.getLogger(__name__)

# Without the weakness weapon, the boss is approached like a neutral target.
NEUTRAL_ENEMY_TYPE = "slimes"


@dataclass(slots=True)
class BossFightResult:
    success: bool
    final_hp: int
    gold: int
    xp: int
    outcome: BossOutcome | None = None


class BossService:
    """Selects a weapon for the boss and records the encounter in the combat log."""

    def __init__(
        self,
        bosses_repo: BossesRepository,
        handlers: Mapping[str, MechanicHandler] | None = None,
    ) -> None:
        self._bosses_repo = bosses_repo
        self._handlers = handlers if handlers is not None else BOSS_MECHANICS

    def get_boss(self, boss_id: str) -> BossDef:
        return self._bosses_repo.get(boss_id)

    def choose_weapon(self, boss: BossDef, weapons: Mapping[str, WeaponData]) -> WeaponData | None:
        if boss.weakness is not None and boss.weakness in weapons:
            return weapons[boss.weakness]
        return select_weapon(weapons, NEUTRAL_ENEMY_TYPE)

    def fight(
        self,
        boss_id: str,
        weapons: Mapping[str, WeaponData],
        armor: ArmorData | None,
        current_hp: int,
        max_hp: int,
        rng: RNG,
        combat_log: List[str],
    ) -> BossFightResult:
        boss = self.get_boss(boss_id)
        combat_log.append(f"{boss.name}: {boss.hp} HP, {boss.damage} DMG")
        combat_log.append(f"Quirk: {boss.quirk}")

        weapon = self.choose_weapon(boss, weapons)
        if weapon is None:
            combat_log.append("No weapons available for boss fight!")
            return BossFightResult(success=False, final_hp=current_hp, gold=0, xp=0)
        if weapon.type == boss.weakness:
            combat_log.append(f"Using {weapon.type} (boss weakness)")
        else:
            combat_log.append(f"Using {weapon.type} (no weakness weapon available)")

        state = EncounterState.begin(boss, weapon, weapons, armor, current_hp, max_hp)
        outcome = resolve_encounter(state, rng, self._handlers)
        combat_log.extend(outcome.messages)
        logger.debug(
            "Boss %s resolved: success=%s hp=%d duration=%.1fs",
            boss.id,
            outcome.success,
            outcome.final_hp,
            outcome.fight_duration,
        )
        if not outcome.success:
            return BossFightResult(success=False, final_hp=0, gold=0, xp=0, outcome=outcome)
        combat_log.append(f"{boss.name} defeated!")
        return BossFightResult(
            success=True,
            final_hp=outcome.final_hp,
            gold=boss.gold_reward,
            xp=boss.xp_reward,
            outcome=outcome,
        )
