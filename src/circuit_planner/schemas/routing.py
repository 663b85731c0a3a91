"""Routing request/response schemas."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class GeoPointModel(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class EventStopModel(BaseModel):
    """Candidate event; any extra field is carried through to the response untouched."""

    model_config = ConfigDict(extra="allow")

    id: Union[str, int] = Field(..., description="Event identifier")
    name: Optional[str] = None
    latitude: float
    longitude: float
    address: Optional[str] = None
    date_debut: Optional[str] = Field(default=None, description="Event start date (ISO 8601).")


class CircuitRequest(BaseModel):
    start: GeoPointModel
    events: List[EventStopModel] = Field(default_factory=list)
    radius_km: Optional[float] = Field(
        default=None,
        gt=0,
        description="Only keep events within this distance of the start point.",
    )
    include_geojson: bool = Field(default=False, description="Attach a GeoJSON overlay to the metadata.")


class CircuitStopModel(BaseModel):
    sequence: int
    distance_from_prev_km: float
    cumulative_distance_km: float
    navigation_url: Optional[str] = None
    event: Dict[str, Any]


class CircuitResponse(BaseModel):
    start: GeoPointModel
    total_distance_km: float
    stop_count: int
    stops: List[CircuitStopModel]
    skipped: List[str]
    navigation_url: Optional[str] = None
    metadata: dict


class DistanceRequest(BaseModel):
    origin: GeoPointModel
    destination: GeoPointModel


class DistanceResponse(BaseModel):
    distance_km: float
