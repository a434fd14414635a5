from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Annotated, Any, Mapping, TypeVar

import httpx
from pydantic import BaseModel, Field, FiniteFloat, Strict, ValidationError

from src.app.ports.output import IRoutingProvider
from src.domain.exceptions import ParseError, TransportError
from src.domain.models import Coordinate, EndpointKey, RouteResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://yours.cs.ubc.ca/yours"
ROUTE_PATH = "/api/1.0/gosmore.php"
DIRECTIONS_PATH = "/gosmore-instructions.php"

# Walking, shortest route. The fastest route type can differ between A->B and B->A.
_TRAVEL_FLAGS: Mapping[str, str] = {"v": "foot", "fast": "0"}

# JSON numbers only: no booleans, numeric strings, NaN or Infinity.
_WireNumber = Annotated[FiniteFloat, Strict()]


class _RouteResponse(BaseModel):
    # GeoJSON order: [lon, lat]
    coordinates: list[Annotated[list[_WireNumber], Field(min_length=2)]]


class _DirectionsProperties(BaseModel):
    description: str


class _DirectionsResponse(BaseModel):
    properties: _DirectionsProperties


_M = TypeVar("_M", bound=BaseModel)


def _endpoint_params(key: EndpointKey) -> dict[str, float]:
    return {
        "flat": key.start.lat,
        "flon": key.start.lon,
        "tlat": key.end.lat,
        "tlon": key.end.lon,
    }


def _to_route(payload: _RouteResponse) -> RouteResult:
    return RouteResult(
        waypoints=tuple(Coordinate(lat=pair[1], lon=pair[0]) for pair in payload.coordinates)
    )


@dataclass(slots=True)
class YoursRoutingClient(IRoutingProvider):
    """Routing client for the YOURS (gosmore) HTTP API.

    Safe to call from multiple threads. Routes are cached in-process per
    directional (start, end) pair; the cache is unbounded and lives as long
    as the client.

    Env vars:
      - YOURS_BASE_URL: service root (default http://yours.cs.ubc.ca/yours)
      - YOURS_TIMEOUT_S: request timeout (default 10)

    Notes:
      - The network call runs outside the cache lock, so concurrent misses on
        the same key may both hit the service. The last result stored wins.
      - A fetch with use_cache=False still stores its result in the cache.
    """

    base_url: str | None = None
    timeout_s: float | None = None
    transport: httpx.BaseTransport | None = field(default=None, repr=False)

    _client: httpx.Client = field(init=False, repr=False)
    _closed: bool = field(default=False, init=False, repr=False)
    _state_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )
    _cache: dict[EndpointKey, RouteResult] = field(
        default_factory=dict, init=False, repr=False
    )
    _cache_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv("YOURS_BASE_URL") or DEFAULT_BASE_URL
        self.base_url = self.base_url.rstrip("/")
        if self.timeout_s is None:
            raw = os.getenv("YOURS_TIMEOUT_S")
            self.timeout_s = float(raw) if raw else 10.0
        self._client = httpx.Client(
            timeout=self.timeout_s, transport=self.transport, follow_redirects=True
        )

    def __enter__(self) -> "YoursRoutingClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch_route(
        self, start: Coordinate, end: Coordinate, *, use_cache: bool = True
    ) -> RouteResult:
        """Return the walking route from start to end.

        If use_cache is set and a route for (start, end) was fetched before,
        the cached result is returned without contacting the service.

        Raises:
            TransportError: the service could not be reached or answered with
                a non-success status.
            ParseError: the response lacked a valid ``coordinates`` array.
        """

        key = EndpointKey(start=start, end=end)
        if use_cache:
            cached = self._get_cached(key)
            if cached is not None:
                logger.debug("Route cache hit for %s", key)
                return cached

        route = self._route_from_service(key)
        # Stored regardless of use_cache.
        self._put_cached(key, route)
        return route

    def fetch_directions(self, start: Coordinate, end: Coordinate) -> str:
        """Return written directions from start to end. Never cached."""

        key = EndpointKey(start=start, end=end)
        params: dict[str, Any] = {
            **_endpoint_params(key),
            **_TRAVEL_FLAGS,
            "instructions": "1",
            "format": "geojson",
        }
        resp = self._get(DIRECTIONS_PATH, params)
        payload = self._parse(_DirectionsResponse, resp)
        return payload.properties.description

    def cached_route(self, start: Coordinate, end: Coordinate) -> RouteResult | None:
        return self._get_cached(EndpointKey(start=start, end=end))

    def close(self) -> None:
        with self._state_lock:
            if self._closed:
                return
            self._closed = True
        self._client.close()

    def _route_from_service(self, key: EndpointKey) -> RouteResult:
        params: dict[str, Any] = {
            "format": "geojson",
            **_endpoint_params(key),
            **_TRAVEL_FLAGS,
        }
        resp = self._get(ROUTE_PATH, params)
        return _to_route(self._parse(_RouteResponse, resp))

    def _get(self, path: str, params: Mapping[str, Any]) -> httpx.Response:
        if self._closed:
            raise TransportError("Routing client is closed")

        url = f"{self.base_url}{path}"
        try:
            resp = self._client.get(url, params=params)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Routing request to %s failed: %s", url, exc)
            raise TransportError(
                f"Routing request to {url} failed: {exc}", cause=exc
            ) from exc
        except RuntimeError as exc:
            # close() ran between the check above and the send.
            if not self._client.is_closed:
                raise
            raise TransportError("Routing client is closed", cause=exc) from exc

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Routing response from %s: %s", resp.url, resp.text)
        return resp

    def _parse(self, model: type[_M], resp: httpx.Response) -> _M:
        try:
            return model.model_validate_json(resp.content)
        except ValidationError as exc:
            logger.warning("Unexpected routing response from %s: %s", resp.url, exc)
            raise ParseError(
                f"Unexpected routing response from {resp.url}: "
                f"{exc.error_count()} validation error(s)",
                cause=exc,
            ) from exc

    def _get_cached(self, key: EndpointKey) -> RouteResult | None:
        with self._cache_lock:
            return self._cache.get(key)

    def _put_cached(self, key: EndpointKey, route: RouteResult) -> None:
        with self._cache_lock:
            self._cache[key] = route
