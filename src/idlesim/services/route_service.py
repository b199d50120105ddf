"""Resolves route target strings like ``meadow_path_short`` against the catalog."""
from __future__ import annotations

import logging
from typing import Dict, List

from idlesim.core.types import ROUTE_LENGTHS, RouteLength
from idlesim.data.repositories import RoutesRepository
from idlesim.domain.defs import RouteConfig, RouteDef
from idlesim.services.errors import UnknownRouteError

logger = logging.getLogger(__name__)

BASE_ROUTE_XP = 60
LENGTH_XP_BONUS: Dict[str, int] = {"Short": 0, "Medium": 10, "Long": 20}
DEFAULT_WAVE_COUNT = 3
_LENGTH_BY_SUFFIX: Dict[str, RouteLength] = {length.lower(): length for length in ROUTE_LENGTHS}


class RouteService:
    """Builds RouteConfig values from the route catalog."""

    def __init__(self, routes_repo: RoutesRepository) -> None:
        self._routes_repo = routes_repo

    def get_route(self, route_id: str) -> RouteDef:
        try:
            return self._routes_repo.get(route_id)
        except KeyError as exc:
            raise UnknownRouteError(f"Route '{route_id}' not found.") from exc

    def parse_target(self, target: str) -> RouteConfig | None:
        """Return the RouteConfig for ``target`` or None when it cannot be resolved."""
        if not isinstance(target, str):
            return None
        parts = target.split("_")
        if len(parts) < 3:
            logger.debug("Route target '%s' has too few parts", target)
            return None
        length = _LENGTH_BY_SUFFIX.get(parts[-1].lower())
        if length is None:
            return None
        try:
            return self.build_config("_".join(parts[:-1]), length)
        except UnknownRouteError:
            logger.debug("Route target '%s' is not in the catalog", target)
            return None

    def build_config(self, route_id: str, length: RouteLength) -> RouteConfig:
        route = self.get_route(route_id)
        return RouteConfig(
            id=route.id,
            length=length,
            wave_count=route.wave_counts.get(length, DEFAULT_WAVE_COUNT),
            boss=route.boss_id,
            gold_gain=route.gold_gain.get(length, 0),
            xp_gain=BASE_ROUTE_XP + LENGTH_XP_BONUS[length],
        )

    def available_targets(self) -> List[str]:
        return [f"{route.id}_{length.lower()}" for route in self._routes_repo.all() for length in ROUTE_LENGTHS]
