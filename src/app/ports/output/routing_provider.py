from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Coordinate, RouteResult


class IRoutingProvider(ABC):
    """Port for obtaining walking routes and directions from a routing service."""

    @abstractmethod
    def fetch_route(
        self, start: Coordinate, end: Coordinate, *, use_cache: bool = True
    ) -> RouteResult:
        """Return the waypoints of a route from start to end."""

    @abstractmethod
    def fetch_directions(self, start: Coordinate, end: Coordinate) -> str:
        """Return human-readable directions from start to end."""

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the provider."""
