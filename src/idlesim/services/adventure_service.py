"""Adventure orchestration: waves, boss, rewards and loot for one run."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from idlesim.core.rng import RNG
from idlesim.core.types import RollOutcome
from idlesim.data.errors import DataError
from idlesim.domain.adventure_models import AdventurePhase, AdventureResult, Wave
from idlesim.domain.armor_effects import apply_between_waves, apply_on_completion, apply_on_kill, describe_effect
from idlesim.domain.combat_math import hero_max_hp, resolve_exchange, select_weapon
from idlesim.domain.defs import RouteConfig
from idlesim.domain.entities import Enemy, Loadout
from idlesim.services.boss_service import BossService
from idlesim.services.enemy_roll_registry import EnemyRollRegistry
from idlesim.services.loot_service import LootService
from idlesim.services.route_service import RouteService
from idlesim.services.wave_service import WaveService

logger = logging.getLogger(__name__)

KILL_GOLD_MIN = 2
KILL_GOLD_MAX = 6
KILL_XP = 2

_SIMULATION_ERRORS = (ArithmeticError, AttributeError, LookupError, TypeError, ValueError, DataError)


@dataclass(slots=True, frozen=True)
class AdventureSettings:
    credit_partial_rewards: bool = False
    clear_roll_on_finish: bool = True


@dataclass(slots=True)
class _RunState:
    """Running totals for one adventure."""

    max_hp: int
    hp: int
    gold: int = 0
    xp: int = 0
    waves_cleared: int = 0
    speed_bonus: float = 1.0
    phase: AdventurePhase = AdventurePhase.IDLE


class AdventureService:
    """Runs a whole adventure and reports it as an AdventureResult.

    ``run`` never raises for bad input or internal simulation errors; those
    come back as failed results with the reason in the combat log.
    """

    def __init__(
        self,
        route_service: RouteService,
        wave_service: WaveService,
        boss_service: BossService,
        loot_service: LootService,
        roll_registry: EnemyRollRegistry,
        settings: AdventureSettings = AdventureSettings(),
    ) -> None:
        self._route_service = route_service
        self._wave_service = wave_service
        self._boss_service = boss_service
        self._loot_service = loot_service
        self._roll_registry = roll_registry
        self._settings = settings

    @property
    def settings(self) -> AdventureSettings:
        return self._settings

    def run(self, target: str, loadout: Loadout, hero_level: int, rng: RNG | None = None) -> AdventureResult:
        rng = rng or RNG()
        try:
            route = self._route_service.parse_target(target)
        except DataError as exc:
            logger.warning("Route catalog could not be loaded: %s", exc)
            return AdventureResult.failure(f"Combat simulation error: {exc}")
        if route is None:
            return AdventureResult.failure(f"Invalid route target: {target}")
        if not loadout.has_weapons:
            return AdventureResult.failure("No weapons equipped - cannot start adventure")

        combat_log: List[str] = []
        try:
            max_hp = hero_max_hp(hero_level)
        except ValueError as exc:
            return AdventureResult.failure(f"Combat simulation error: {exc}", combat_log=combat_log)

        state = _RunState(max_hp=max_hp, hp=max_hp)
        logger.debug("Starting adventure %s at hero level %d", route.target, hero_level)
        combat_log.append(f"Hero Level {hero_level} - Starting HP: {state.hp}")
        combat_log.append(f"Equipped weapons: {', '.join(loadout.weapons)}")
        if loadout.armor is not None:
            armor = loadout.armor
            combat_log.append(
                f"Equipped armor: {armor.defense} defense, {armor.effect} effect ({describe_effect(armor.effect)})"
            )

        try:
            result = self._simulate(route, loadout, state, rng, combat_log)
        except _SIMULATION_ERRORS as exc:
            logger.warning("Adventure %s aborted by simulation error: %s", route.target, exc)
            result = AdventureResult.failure(
                f"Combat simulation error: {exc}",
                combat_log=combat_log,
                final_hp=state.hp,
            )
        self._finish(route, result)
        logger.debug("Adventure %s finished: success=%s phase=%s", route.target, result.success, result.phase.value)
        return result

    def _simulate(
        self,
        route: RouteConfig,
        loadout: Loadout,
        state: _RunState,
        rng: RNG,
        combat_log: List[str],
    ) -> AdventureResult:
        roll = self._roll_registry.get_roll(route.id, route.length)
        waves = self._wave_service.generate(route, rng, roll=roll, combat_log=combat_log)

        state.phase = AdventurePhase.WAVE
        for index, wave in enumerate(waves):
            combat_log.append(f"Wave {wave.wave_number}/{len(waves)}: {len(wave.enemies)} enemies")
            defeated_by = self._fight_wave(wave, loadout, state, rng, combat_log)
            if defeated_by is not None:
                combat_log.append(f"Hero defeated by {defeated_by.type}!")
                return self._defeat(state, f"Defeated in wave {wave.wave_number}", combat_log)
            state.waves_cleared += 1

            if index < len(waves) - 1:
                regen = apply_between_waves(loadout.armor_effect)
                if regen.heal_amount > 0:
                    state.hp = min(state.max_hp, state.hp + regen.heal_amount)
                    combat_log.append(f"{regen.message} ({state.hp}/{state.max_hp})")
                combat_log.append(f"Wave {wave.wave_number} complete - HP: {state.hp}/{state.max_hp}")

        state.phase = AdventurePhase.BOSS
        combat_log.append(f"Boss Fight: {route.boss}")
        boss = self._boss_service.fight(
            route.boss,
            loadout.weapons,
            loadout.armor,
            state.hp,
            state.max_hp,
            rng,
            combat_log,
        )
        if not boss.success:
            combat_log.append(f"Hero defeated by {route.boss}!")
            return self._defeat(state, f"Defeated by boss {route.boss}", combat_log)

        state.hp = boss.final_hp
        state.gold += boss.gold + route.gold_gain
        state.xp += boss.xp + route.xp_gain
        magnet = apply_on_completion(loadout.armor_effect, state.gold)
        if magnet.gold_bonus > 0:
            state.gold += magnet.gold_bonus
            combat_log.append(magnet.message)

        state.phase = AdventurePhase.COMPLETE
        combat_log.append("Adventure Complete!")
        combat_log.append(f"Total Gold: {state.gold}")
        combat_log.append(f"Total XP: {state.xp}")
        combat_log.append(f"Final HP: {state.hp}/{state.max_hp}")
        return AdventureResult(
            success=True,
            final_hp=state.hp,
            total_gold=state.gold,
            total_xp=state.xp,
            events=[f"Completed {route.id} ({route.length})"],
            loot=self._loot_service.roll(route.id, rng),
            combat_log=combat_log,
            phase=state.phase,
            waves_cleared=state.waves_cleared,
        )

    def _fight_wave(
        self,
        wave: Wave,
        loadout: Loadout,
        state: _RunState,
        rng: RNG,
        combat_log: List[str],
    ) -> Enemy | None:
        """Fight every enemy in ``wave``; return the enemy that defeated the hero, if any."""
        kills = 0
        for enemy in wave.enemies:
            combat_log.append(f"Fighting {enemy.display_name} ({enemy.hp} HP, {enemy.damage} DMG)")
            weapon = select_weapon(loadout.weapons, enemy.type)
            if weapon is None:
                combat_log.append("No weapons available!")
                return enemy
            exchange = resolve_exchange(weapon, enemy, loadout.armor, rng, speed_bonus=state.speed_bonus)
            combat_log.append(
                f"Using {weapon.type}: {exchange.dps:.1f} DPS ({exchange.time_to_kill:.1f}s to kill)"
            )
            if exchange.mitigated_damage != exchange.raw_damage:
                combat_log.append(
                    f"Armor reduces damage: {exchange.raw_damage:.1f} -> {exchange.mitigated_damage:.1f}"
                )
            if exchange.effect.triggered:
                combat_log.append(exchange.effect.message)
                if exchange.effect.reflected_damage > 0:
                    combat_log.append(f"Enemy takes {exchange.effect.reflected_damage:.1f} reflected damage")
            # Speed Boost only lasts for the following exchange.
            state.speed_bonus = exchange.effect.speed_bonus

            state.hp -= exchange.hp_lost
            combat_log.append(f"Took {exchange.hp_lost} damage - HP: {max(0, state.hp)}")
            if state.hp <= 0:
                state.hp = 0
                return enemy

            state.gold += rng.randint(KILL_GOLD_MIN, KILL_GOLD_MAX)
            state.xp += KILL_XP
            heal = apply_on_kill(loadout.armor_effect, kills)
            kills += 1
            if heal.heal_amount > 0:
                state.hp = min(state.max_hp, state.hp + heal.heal_amount)
                combat_log.append(f"{heal.message} ({state.hp}/{state.max_hp})")
        return None

    def _defeat(self, state: _RunState, event: str, combat_log: List[str]) -> AdventureResult:
        state.phase = AdventurePhase.FAILED
        gold, xp = state.gold, state.xp
        if not self._settings.credit_partial_rewards:
            if gold or xp:
                combat_log.append(f"Rewards forfeited: {gold} gold, {xp} XP")
            gold, xp = 0, 0
        return AdventureResult(
            success=False,
            final_hp=0,
            total_gold=gold,
            total_xp=xp,
            events=[event],
            combat_log=combat_log,
            phase=state.phase,
            waves_cleared=state.waves_cleared,
        )

    def _finish(self, route: RouteConfig, result: AdventureResult) -> None:
        if not self._settings.clear_roll_on_finish:
            return
        outcome: RollOutcome = "complete" if result.success else "failed"
        self._roll_registry.clear_roll(route.id, route.length, outcome)
