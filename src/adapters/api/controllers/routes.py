from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_routing_service
from src.adapters.api.schemas.routes import (
    CoordinateSchema,
    DirectionsRequestSchema,
    DirectionsSchema,
    RouteRequestSchema,
    RouteSchema,
)
from src.app.services.routing_service import RoutingService
from src.domain.algorithms.geo_utils import path_length_m
from src.domain.models import Coordinate, RouteResult

router = APIRouter(tags=["routes"])


def _route_to_schema(
    route: RouteResult, *, origin: Coordinate, destination: Coordinate
) -> RouteSchema:
    return RouteSchema(
        origin=CoordinateSchema(lat=origin.lat, lon=origin.lon),
        destination=CoordinateSchema(lat=destination.lat, lon=destination.lon),
        waypoints=[CoordinateSchema(lat=p.lat, lon=p.lon) for p in route.waypoints],
        distance_m=path_length_m(route.waypoints) if route.waypoints else None,
    )


@router.post("/routes", response_model=RouteSchema)
def calculate_route(
    req: RouteRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> RouteSchema:
    origin = Coordinate(lat=req.origin.lat, lon=req.origin.lon)
    destination = Coordinate(lat=req.destination.lat, lon=req.destination.lon)
    route = service.calculate_route(
        origin=origin, destination=destination, use_cache=req.use_cache
    )
    return _route_to_schema(route, origin=origin, destination=destination)


@router.post("/routes/directions", response_model=DirectionsSchema)
def get_directions(
    req: DirectionsRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> DirectionsSchema:
    origin = Coordinate(lat=req.origin.lat, lon=req.origin.lon)
    destination = Coordinate(lat=req.destination.lat, lon=req.destination.lon)
    description = service.directions(origin=origin, destination=destination)
    return DirectionsSchema(
        origin=req.origin, destination=req.destination, description=description
    )
