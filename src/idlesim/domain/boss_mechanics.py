"""Boss encounter state machine and the per-mechanic strategy table.

Every boss runs the same closed-form exchange as a wave enemy. Its
mechanic handler layers one quirk on top. A handler may change the hero's
damage output or the active fight time. It may also add downtime (seconds
in which the hero cannot hurt the boss) and extra damage. Bosses pick a
handler by name from ``BOSS_MECHANICS``, so a new boss that reuses a
mechanic only needs a catalog entry.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping

from idlesim.core.rng import RNG
from idlesim.domain.armor_effects import ArmorEffectResult, apply_during_combat
from idlesim.domain.boss_counters import BossPenalties, calculate_penalties, has_counter, recommendation
from idlesim.domain.combat_math import armor_reduction, incoming_damage, mitigate, time_to_kill, weapon_dps
from idlesim.domain.defs import BossDef
from idlesim.domain.entities import ArmorData, Enemy, WeaponData


@dataclass(slots=True)
class EncounterState:
    """Mutable per-fight state shared by the resolver and mechanic handlers."""

    boss: BossDef
    weapon: WeaponData
    weapons: Mapping[str, WeaponData]
    armor: ArmorData | None
    current_hp: int
    max_hp: int
    hero_dps: float
    fight_duration: float
    downtime: float = 0.0

    @classmethod
    def begin(
        cls,
        boss: BossDef,
        weapon: WeaponData,
        weapons: Mapping[str, WeaponData],
        armor: ArmorData | None,
        current_hp: int,
        max_hp: int,
    ) -> "EncounterState":
        dps = weapon_dps(weapon)
        if boss.weakness is not None and weapon.type == boss.weakness:
            dps *= boss.weakness_multiplier
        return cls(
            boss=boss,
            weapon=weapon,
            weapons=weapons,
            armor=armor,
            current_hp=current_hp,
            max_hp=max_hp,
            hero_dps=dps,
            fight_duration=time_to_kill(boss.hp, dps),
        )

    @property
    def uses_weakness(self) -> bool:
        return self.boss.weakness is not None and self.weapon.type == self.boss.weakness

    @property
    def boss_dps(self) -> float:
        return self.boss.damage * self.boss.attack_speed

    @property
    def total_duration(self) -> float:
        return self.fight_duration + self.downtime

    def set_hero_dps(self, dps: float) -> None:
        self.hero_dps = dps
        self.fight_duration = time_to_kill(self.boss.hp, dps)


@dataclass(slots=True)
class MechanicOutcome:
    """Damage a mechanic adds on top of the base exchange.

    ``mitigated_damage`` has already been reduced by armor defense.
    ``guaranteed_damage`` bypasses armor and armor effects.
    """

    mitigated_damage: float = 0.0
    guaranteed_damage: float = 0.0
    spawned: List[Enemy] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)


@dataclass(slots=True)
class BossOutcome:
    success: bool
    final_hp: int
    hero_dps: float
    fight_duration: float
    combat_damage: float
    mechanic: MechanicOutcome
    penalties: BossPenalties
    effect: ArmorEffectResult
    messages: List[str] = field(default_factory=list)


MechanicHandler = Callable[[EncounterState], MechanicOutcome]


def _minion(boss: BossDef, name: str) -> Enemy:
    return Enemy(
        type=f"{boss.id}_minion",
        hp=0,
        damage=boss.param("minion_damage", 3),
        attack_speed=boss.param("minion_attack_speed", 1.0),
        name=name,
    )


def split(state: EncounterState) -> MechanicOutcome:
    boss = state.boss
    threshold = boss.param("threshold", 0.5)
    count = int(boss.param("minion_count", 2))
    remaining = state.fight_duration * threshold
    outcome = MechanicOutcome()
    for index in range(count):
        minion = _minion(boss, f"Mini {boss.name} {index + 1}")
        outcome.spawned.append(minion)
        outcome.mitigated_damage += mitigate(
            incoming_damage(minion.damage, minion.attack_speed, remaining), state.armor
        )
    outcome.messages.append(
        f"{boss.name} splits into {count} minions at {threshold:.0%} HP "
        f"(+{outcome.mitigated_damage:.1f} damage over {remaining:.1f}s)"
    )
    return outcome


def hardened_shell(state: EncounterState) -> MechanicOutcome:
    outcome = MechanicOutcome()
    if state.uses_weakness:
        outcome.messages.append(f"{state.weapon.type} pierces the hardened shell")
        return outcome
    factor = state.boss.param("damage_taken", 0.5)
    state.set_hero_dps(state.hero_dps * factor)
    outcome.messages.append(
        f"Hardened shell: {state.weapon.type} deals {factor:.0%} damage "
        f"({state.hero_dps:.1f} DPS, {state.fight_duration:.1f}s to kill)"
    )
    return outcome


def summon(state: EncounterState) -> MechanicOutcome:
    boss = state.boss
    share = boss.param("active_share", 0.5)
    outcome = MechanicOutcome()
    for key in ("first_threshold", "second_threshold"):
        threshold = boss.param(key, 0.75 if key == "first_threshold" else 0.25)
        active = state.fight_duration * threshold * share
        minion = _minion(boss, f"{boss.name} cub")
        outcome.spawned.append(minion)
        damage = mitigate(incoming_damage(minion.damage, minion.attack_speed, active), state.armor)
        outcome.mitigated_damage += damage
        outcome.messages.append(f"{boss.name} summons a cub at {threshold:.0%} HP (+{damage:.1f} damage)")
    return outcome


def aerial_phase(state: EncounterState) -> MechanicOutcome:
    boss = state.boss
    interval = boss.param("interval", 20)
    window = boss.param("window", 5)
    phases = math.floor(state.fight_duration / interval)
    outcome = MechanicOutcome()
    if phases == 0:
        return outcome
    if "bow" in state.weapons:
        outcome.messages.append(f"{boss.name} takes flight {phases} times; bow keeps up the pressure")
        return outcome
    airborne = phases * window
    state.downtime += airborne
    outcome.guaranteed_damage = incoming_damage(boss.damage, boss.attack_speed, airborne)
    outcome.messages.append(
        f"{boss.name} takes flight {phases} times with no bow to answer "
        f"(+{outcome.guaranteed_damage:.1f} unmitigated damage)"
    )
    return outcome


def web_trap(state: EncounterState) -> MechanicOutcome:
    boss = state.boss
    interval = boss.param("interval", 30)
    window = boss.param("window", 3)
    webs = math.floor(state.fight_duration / interval)
    outcome = MechanicOutcome()
    if webs == 0:
        return outcome
    disabled = webs * window
    state.downtime += disabled
    outcome.mitigated_damage = mitigate(incoming_damage(boss.damage, boss.attack_speed, disabled), state.armor)
    outcome.messages.append(
        f"Web trap disables weapons {webs} times ({disabled:.0f}s, +{outcome.mitigated_damage:.1f} damage)"
    )
    return outcome


def frost_armor(state: EncounterState) -> MechanicOutcome:
    boss = state.boss
    threshold = boss.param("threshold", 0.5)
    bonus_defense = boss.param("bonus_defense", 30)
    post_dps = state.hero_dps * (1 - armor_reduction(bonus_defense))
    before = state.fight_duration
    state.fight_duration = (
        time_to_kill(boss.hp * (1 - threshold), state.hero_dps) + time_to_kill(boss.hp * threshold, post_dps)
    )
    outcome = MechanicOutcome()
    outcome.messages.append(
        f"Frost armor below {threshold:.0%} HP: +{bonus_defense:.0f} defense "
        f"(fight {before:.1f}s -> {state.fight_duration:.1f}s)"
    )
    return outcome


def burn(state: EncounterState) -> MechanicOutcome:
    per_second = state.boss.param("burn_per_second", 2)
    outcome = MechanicOutcome(guaranteed_damage=per_second * state.total_duration)
    outcome.messages.append(f"Molten core burns for {outcome.guaranteed_damage:.1f} damage")
    return outcome


BOSS_MECHANICS: Dict[str, MechanicHandler] = {
    "split": split,
    "hardened_shell": hardened_shell,
    "summon": summon,
    "aerial_phase": aerial_phase,
    "web_trap": web_trap,
    "frost_armor": frost_armor,
    "burn": burn,
}


def resolve_encounter(
    state: EncounterState,
    rng: RNG,
    handlers: Mapping[str, MechanicHandler] = BOSS_MECHANICS,
) -> BossOutcome:
    """Run the base exchange, the boss mechanic and the counter fallback."""
    boss = state.boss
    messages: List[str] = []
    mechanic = handlers[boss.mechanic](state)
    messages.extend(mechanic.messages)

    # Downtime is excluded: mechanics that add it account for that damage themselves.
    combat_damage = mitigate(incoming_damage(boss.damage, boss.attack_speed, state.fight_duration), state.armor)
    combat_damage += mechanic.mitigated_damage

    hp = state.current_hp
    penalties = calculate_penalties(boss, state.weapons, state.armor, state.max_hp)
    effect = ArmorEffectResult()

    def _outcome(success: bool, final_hp: int) -> BossOutcome:
        return BossOutcome(
            success=success,
            final_hp=final_hp,
            hero_dps=state.hero_dps,
            fight_duration=state.total_duration,
            combat_damage=combat_damage,
            mechanic=mechanic,
            penalties=penalties,
            effect=effect,
            messages=messages,
        )

    if penalties.unavoidable_damage > 0:
        hp -= math.ceil(penalties.unavoidable_damage)
        messages.append(f"{boss.name} challenge: {penalties.unavoidable_damage:.1f} unavoidable damage - HP: {hp}")
        if hp <= 0:
            return _outcome(False, 0)
    if penalties.bonus_damage > 0:
        combat_damage += penalties.bonus_damage
        messages.append(f"{boss.name} challenge: +{penalties.bonus_damage:.1f} bonus damage")
    if penalties.duration_multiplier > 1:
        combat_damage *= penalties.duration_multiplier
        messages.append(f"{boss.name} challenge: {penalties.duration_multiplier}x duration penalty")

    if state.armor is not None and state.armor.effect != "none":
        effect = apply_during_combat(state.armor.effect, combat_damage, rng, boss.id)
        if effect.triggered:
            combat_damage = effect.apply_to(combat_damage)
            messages.append(effect.message)

    taken = math.ceil(combat_damage + mechanic.guaranteed_damage)
    hp -= taken
    messages.append(f"Boss combat damage: {taken} - Final HP: {max(0, hp)}")
    if not has_counter(boss, state.weapons, state.armor):
        messages.append(f"Tip: {recommendation(boss)}")
    return _outcome(hp > 0, max(0, hp))
