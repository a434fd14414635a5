from .routing_provider import IRoutingProvider

__all__ = [
    "IRoutingProvider",
]
