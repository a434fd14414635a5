from .geo import Coordinate
from .route import EndpointKey, RouteResult

__all__ = [
    "Coordinate",
    "EndpointKey",
    "RouteResult",
]
