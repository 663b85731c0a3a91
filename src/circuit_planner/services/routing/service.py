"""Circuit planning orchestration for event visits."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ...config import settings
from ...models.domain import Event, GeoPoint
from ...schemas.routing import CircuitRequest, CircuitResponse, EventStopModel
from ..export.geojson import circuit_coordinates, circuit_to_geojson, linestring_to_wkt
from ..geospatial import haversine_km, is_valid_coordinate
from ..outputs.routing_formatter import circuit_to_json
from .models import CircuitPlan, CircuitStop
from .nearest_neighbor import optimize_route

logger = logging.getLogger(__name__)


class CircuitRequestError(ValueError):
    """Raised when a circuit request breaks a service rule."""


def _to_event(model: EventStopModel) -> Event:
    return Event(
        event_id=str(model.id),
        name=model.name or "",
        latitude=model.latitude,
        longitude=model.longitude,
        address=model.address,
        date_debut=model.date_debut,
        raw=model.model_dump(),
    )


def _screen_events(events: Iterable[Event]) -> tuple[list[Event], list[str]]:
    kept: list[Event] = []
    skipped: list[str] = []
    for event in events:
        if is_valid_coordinate(event.latitude, event.longitude):
            kept.append(event)
        else:
            logger.warning(
                "Event %s skipped: invalid coordinates (%s, %s)",
                event.event_id,
                event.latitude,
                event.longitude,
            )
            skipped.append(event.event_id)
    return kept, skipped


def _within_radius(start: GeoPoint, events: Sequence[Event], radius_km: Optional[float]) -> list[Event]:
    if radius_km is None:
        return list(events)
    return [
        event
        for event in events
        if haversine_km(start.latitude, start.longitude, event.latitude, event.longitude) <= radius_km
    ]


def build_stops(start: GeoPoint, ordered: Sequence[Event]) -> list[CircuitStop]:
    """Attach leg and running distances to an ordered list of events."""
    stops: list[CircuitStop] = []
    cumulative = 0.0
    prev_lat, prev_lon = start.latitude, start.longitude
    for sequence, event in enumerate(ordered, start=1):
        leg = haversine_km(prev_lat, prev_lon, event.latitude, event.longitude)
        cumulative += leg
        stops.append(
            CircuitStop(
                event=event,
                sequence=sequence,
                distance_from_prev_km=leg,
                cumulative_distance_km=cumulative,
            )
        )
        prev_lat, prev_lon = event.latitude, event.longitude
    return stops


def build_circuit(payload: CircuitRequest) -> CircuitPlan:
    """Screen the candidate events and order the survivors into a circuit."""
    if len(payload.events) > settings.max_circuit_items:
        raise CircuitRequestError(
            f"Too many events for one circuit: {len(payload.events)} "
            f"(maximum {settings.max_circuit_items})."
        )

    start = GeoPoint(latitude=payload.start.latitude, longitude=payload.start.longitude)
    events = [_to_event(model) for model in payload.events]

    valid_events, skipped = _screen_events(events)
    radius_km = payload.radius_km if payload.radius_km is not None else settings.default_radius_km
    candidates = _within_radius(start, valid_events, radius_km)

    ordered = optimize_route(start, candidates)
    stops = build_stops(start, ordered)
    total_distance = stops[-1].cumulative_distance_km if stops else 0.0

    metadata = {
        "algorithm": "nearest_neighbor",
        "candidate_count": len(events),
        "skipped_count": len(skipped),
        "outside_radius_count": len(valid_events) - len(candidates),
        "radius_km": radius_km,
    }
    logger.info(
        "Circuit built: %d stops, %.1f km, %d skipped",
        len(stops),
        total_distance,
        len(skipped),
    )
    return CircuitPlan(
        start=start,
        stops=stops,
        total_distance_km=total_distance,
        skipped=skipped,
        metadata=metadata,
    )


def optimize_circuit(payload: CircuitRequest) -> CircuitResponse:
    plan = build_circuit(payload)

    if payload.include_geojson:
        overlays: dict = {"geojson": circuit_to_geojson(plan)}
        if plan.stops:
            overlays["wkt"] = linestring_to_wkt(circuit_coordinates(plan))
        plan.metadata["map_overlays"] = overlays

    return CircuitResponse(**circuit_to_json(plan))
