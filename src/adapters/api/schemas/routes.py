from __future__ import annotations

from pydantic import BaseModel, Field


class CoordinateSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class RouteRequestSchema(BaseModel):
    origin: CoordinateSchema
    destination: CoordinateSchema
    use_cache: bool = True


class DirectionsRequestSchema(BaseModel):
    origin: CoordinateSchema
    destination: CoordinateSchema


class RouteSchema(BaseModel):
    origin: CoordinateSchema
    destination: CoordinateSchema
    waypoints: list[CoordinateSchema] = []

    distance_m: float | None = None


class DirectionsSchema(BaseModel):
    origin: CoordinateSchema
    destination: CoordinateSchema
    description: str
