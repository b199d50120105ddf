"""Runtime entity exports."""

from .enemy import Enemy
from .equipment import ArmorData, Loadout, WeaponData

__all__ = [
    "ArmorData",
    "Enemy",
    "Loadout",
    "WeaponData",
]
