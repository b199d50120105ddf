"""Weapon content definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class WeaponDef:
    """Weapon type with level-scaled damage."""

    id: str
    name: str
    attack_speed: float
    damage_by_level: tuple[int, ...]

    @property
    def max_level(self) -> int:
        return len(self.damage_by_level)

    def damage_at(self, level: int) -> int | None:
        """Return damage for ``level`` (1-based) or None when out of range."""
        if level < 1 or level > self.max_level:
            return None
        return self.damage_by_level[level - 1]
