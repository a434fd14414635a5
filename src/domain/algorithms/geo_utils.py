from __future__ import annotations

import math
from typing import Sequence

from src.domain.models import Coordinate

EARTH_RADIUS_M = 6_371_008.8


def haversine_distance_m(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in meters on a spherical Earth (mean radius)."""

    phi_a, phi_b = math.radians(a.lat), math.radians(b.lat)
    half_dphi = (phi_b - phi_a) / 2.0
    half_dlambda = math.radians(b.lon - a.lon) / 2.0

    h = math.sin(half_dphi) ** 2 + math.cos(phi_a) * math.cos(phi_b) * math.sin(
        half_dlambda
    ) ** 2
    return 2.0 * EARTH_RADIUS_M * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))


def path_length_m(waypoints: Sequence[Coordinate]) -> float:
    """Walking length of a route: the sum of its consecutive legs."""

    return float(
        sum(haversine_distance_m(a, b) for a, b in zip(waypoints, waypoints[1:]))
    )
