from __future__ import annotations

from functools import lru_cache

from src.adapters.routing import YoursRoutingClient
from src.app.services.routing_service import RoutingService


@lru_cache(maxsize=1)
def get_routing_service() -> RoutingService:
    # One client per process so the route cache is shared across requests.
    return RoutingService(routing_provider=YoursRoutingClient())


def shutdown_routing_service() -> None:
    if get_routing_service.cache_info().currsize:
        get_routing_service().close()
        get_routing_service.cache_clear()
