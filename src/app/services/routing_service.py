from __future__ import annotations

from dataclasses import dataclass

from src.app.ports.output import IRoutingProvider
from src.domain.models import Coordinate, RouteResult


@dataclass(slots=True)
class RoutingService:
    """Application service (use case) for route lookups.

    This layer orchestrates ports. Domain stays pure.
    """

    routing_provider: IRoutingProvider

    def calculate_route(
        self, *, origin: Coordinate, destination: Coordinate, use_cache: bool = True
    ) -> RouteResult:
        return self.routing_provider.fetch_route(
            origin, destination, use_cache=use_cache
        )

    def directions(self, *, origin: Coordinate, destination: Coordinate) -> str:
        return self.routing_provider.fetch_directions(origin, destination)

    def close(self) -> None:
        self.routing_provider.close()
