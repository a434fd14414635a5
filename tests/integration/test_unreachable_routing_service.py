from __future__ import annotations

import pytest

from src.adapters.routing import YoursRoutingClient
from src.domain.exceptions import TransportError
from src.domain.models import Coordinate


@pytest.mark.integration
def test_unreachable_host_raises_transport_error() -> None:
    # Nothing listens on the discard port of the loopback interface.
    start = Coordinate(lat=49.2606, lon=-123.246)
    end = Coordinate(lat=49.2827, lon=-123.1207)

    with YoursRoutingClient(base_url="http://127.0.0.1:9", timeout_s=2.0) as client:
        with pytest.raises(TransportError):
            client.fetch_route(start, end)

        assert client.cached_route(start, end) is None
