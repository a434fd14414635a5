from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .geo import Coordinate


@dataclass(frozen=True, slots=True)
class EndpointKey:
    """Directional (start, end) pair identifying a route request.

    (A, B) and (B, A) are different keys: the service may route differently
    depending on the direction of travel.
    """

    start: Coordinate
    end: Coordinate


@dataclass(frozen=True, slots=True)
class RouteResult:
    waypoints: tuple[Coordinate, ...] = ()

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.waypoints)
