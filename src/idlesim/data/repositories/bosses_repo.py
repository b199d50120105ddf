"""Bosses repository."""
from __future__ import annotations

from typing import Dict

from idlesim.data.errors import DataValidationError
from idlesim.data.repositories.base import RepositoryBase
from idlesim.domain.defs import BossCounterDef, BossDef


class BossesRepository(RepositoryBase[BossDef]):
    """Loads boss stats, mechanic parameters and counter requirements."""

    def __init__(self, base_path=None) -> None:
        super().__init__("bosses.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, BossDef]:
        bosses: Dict[str, BossDef] = {}
        for raw_id, payload in raw.items():
            context = f"boss '{raw_id}'"
            boss_data = self._require_mapping(payload, context)
            self._assert_required(
                boss_data,
                {"name", "hp", "damage", "attack_speed", "quirk", "mechanic", "counter"},
                context,
            )
            params_raw = self._require_mapping(boss_data.get("mechanic_params", {}), f"{context} mechanic_params")
            params = {
                str(key): self._require_number(value, f"{context} mechanic_params.{key}")
                for key, value in params_raw.items()
            }
            hp = self._require_int(boss_data["hp"], f"{context} hp")
            if hp <= 0:
                raise DataValidationError(f"{context} hp must be positive.")
            bosses[raw_id] = BossDef(
                id=raw_id,
                name=self._require_str(boss_data["name"], f"{context} name"),
                hp=hp,
                damage=self._require_int(boss_data["damage"], f"{context} damage"),
                attack_speed=self._require_number(boss_data["attack_speed"], f"{context} attack_speed"),
                quirk=self._require_str(boss_data["quirk"], f"{context} quirk"),
                mechanic=self._require_str(boss_data["mechanic"], f"{context} mechanic"),
                counter=self._parse_counter(boss_data["counter"], f"{context} counter"),
                weakness=self._optional_str(boss_data.get("weakness"), f"{context} weakness"),
                weakness_multiplier=self._require_number(
                    boss_data.get("weakness_multiplier", 1.5), f"{context} weakness_multiplier"
                ),
                mechanic_params=params,
                gold_reward=self._require_int(boss_data.get("gold_reward", 50), f"{context} gold_reward"),
                xp_reward=self._require_int(boss_data.get("xp_reward", 20), f"{context} xp_reward"),
            )
        return bosses

    def _parse_counter(self, value: object, context: str) -> BossCounterDef:
        counter = self._require_mapping(value, context)
        self._assert_required(counter, {"description", "encourages"}, context)
        min_defense = counter.get("min_defense")
        duration_multiplier = self._require_number(
            counter.get("duration_multiplier", 1.0), f"{context}.duration_multiplier"
        )
        if duration_multiplier < 1.0:
            raise DataValidationError(f"{context}.duration_multiplier must be at least 1.")
        return BossCounterDef(
            description=self._require_str(counter["description"], f"{context}.description"),
            encourages=self._require_str(counter["encourages"], f"{context}.encourages"),
            weapon=self._optional_str(counter.get("weapon"), f"{context}.weapon"),
            armor_effect=self._optional_str(counter.get("armor_effect"), f"{context}.armor_effect"),
            min_defense=None if min_defense is None else self._require_number(min_defense, f"{context}.min_defense"),
            bonus_damage_pct=self._require_number(counter.get("bonus_damage_pct", 0.0), f"{context}.bonus_damage_pct"),
            duration_multiplier=duration_multiplier,
            unavoidable_pct=self._require_number(counter.get("unavoidable_pct", 0.0), f"{context}.unavoidable_pct"),
        )

    def _optional_str(self, value: object, context: str) -> str | None:
        if value is None:
            return None
        return self._require_str(value, context)
