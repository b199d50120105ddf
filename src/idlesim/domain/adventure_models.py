"""Adventure run models."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from idlesim.domain.entities import Enemy


class AdventurePhase(str, Enum):
    IDLE = "idle"
    WAVE = "wave"
    BOSS = "boss"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass(slots=True)
class Wave:
    wave_number: int
    enemies: List[Enemy] = field(default_factory=list)


@dataclass(slots=True)
class AdventureResult:
    """Outcome of one run, handed to the reward-application layer."""

    success: bool
    final_hp: int
    total_gold: int
    total_xp: int
    events: List[str] = field(default_factory=list)
    loot: List[str] = field(default_factory=list)
    combat_log: List[str] = field(default_factory=list)
    phase: AdventurePhase = AdventurePhase.IDLE
    waves_cleared: int = 0

    @classmethod
    def failure(cls, message: str, *, combat_log: List[str] | None = None, final_hp: int = 0) -> "AdventureResult":
        log = list(combat_log or [])
        log.append(message)
        return cls(
            success=False,
            final_hp=final_hp,
            total_gold=0,
            total_xp=0,
            events=[message],
            combat_log=log,
            phase=AdventurePhase.FAILED,
        )
