"""Plain-text rendering of simulation results."""
from __future__ import annotations

from typing import List

from idlesim.domain.adventure_models import AdventureResult
from idlesim.services.batch_service import BatchSummary


def format_summary(target: str, summary: BatchSummary) -> List[str]:
    lines = [
        f"Route: {target}",
        f"Trials: {summary.trials}",
        f"Success rate: {summary.success_rate:.1%} ({summary.successes}/{summary.trials})",
        f"Average final HP: {summary.average_final_hp:.1f}",
        f"Average gold: {summary.average_gold:.1f}",
        f"Average XP: {summary.average_xp:.1f}",
    ]
    if summary.loot_counts:
        lines.append("Loot:")
        for item, count in sorted(summary.loot_counts.items(), key=lambda pair: (-pair[1], pair[0])):
            lines.append(f"  {item}: {count}")
    return lines


def format_combat_log(result: AdventureResult) -> List[str]:
    lines = [f"--- Combat log ({result.phase.value}) ---"]
    lines.extend(result.combat_log)
    if result.loot:
        lines.append(f"Loot: {', '.join(result.loot)}")
    return lines
