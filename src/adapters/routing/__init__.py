from .yours_routing_client import YoursRoutingClient

__all__ = [
    "YoursRoutingClient",
]
