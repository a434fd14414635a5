from .routing import ParseError, RoutingError, TransportError

__all__ = [
    "ParseError",
    "RoutingError",
    "TransportError",
]
