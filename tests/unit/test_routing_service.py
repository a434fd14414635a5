from __future__ import annotations

from dataclasses import dataclass, field

from src.app.services.routing_service import RoutingService
from src.domain.models import Coordinate, RouteResult


@dataclass(slots=True)
class FakeRoutingProvider:
    calls: list[tuple[str, Coordinate, Coordinate, bool | None]] = field(
        default_factory=list
    )
    closed: bool = False

    def fetch_route(
        self, start: Coordinate, end: Coordinate, *, use_cache: bool = True
    ) -> RouteResult:
        self.calls.append(("route", start, end, use_cache))
        return RouteResult(waypoints=(start, end))

    def fetch_directions(self, start: Coordinate, end: Coordinate) -> str:
        self.calls.append(("directions", start, end, None))
        return "Head north."

    def close(self) -> None:
        self.closed = True


def test_calculate_route_passes_cache_flag_through() -> None:
    provider = FakeRoutingProvider()
    svc = RoutingService(routing_provider=provider)
    a = Coordinate(lat=0.0, lon=0.0)
    b = Coordinate(lat=0.0, lon=1.0)

    route = svc.calculate_route(origin=a, destination=b, use_cache=False)

    assert route.waypoints == (a, b)
    assert provider.calls == [("route", a, b, False)]


def test_directions_and_close_delegate_to_provider() -> None:
    provider = FakeRoutingProvider()
    svc = RoutingService(routing_provider=provider)
    a = Coordinate(lat=0.0, lon=0.0)
    b = Coordinate(lat=1.0, lon=0.0)

    assert svc.directions(origin=a, destination=b) == "Head north."

    svc.close()
    assert provider.closed
