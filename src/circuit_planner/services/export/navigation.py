"""Driving-directions links for circuits and single events."""

from __future__ import annotations

from typing import Any, Optional, Sequence
from urllib.parse import quote

from ...config import settings
from ..geospatial import coordinates_of


def _format_coordinate(point: Any) -> str:
    lat, lon = coordinates_of(point)
    return f"{lat},{lon}"


def _directions_url(origin: str, destination: str, waypoints: Optional[str] = None) -> str:
    url = (
        f"{settings.maps_directions_url}?api=1"
        f"&origin={quote(origin, safe='')}"
        f"&destination={quote(destination, safe='')}"
        f"&travelmode={settings.travel_mode}"
    )
    if waypoints:
        url += f"&waypoints={quote(waypoints, safe='')}"
    return url


def build_circuit_url(start: Any, stops: Sequence[Any]) -> Optional[str]:
    """Directions from ``start`` through every stop, ending at the last one.

    Returns None when there is nothing to visit.
    """
    if start is None or not stops:
        return None

    origin = _format_coordinate(start)
    destination = _format_coordinate(stops[-1])
    waypoints = "|".join(_format_coordinate(stop) for stop in stops[:-1])
    return _directions_url(origin, destination, waypoints)


def build_event_url(start: Any, event: Any) -> Optional[str]:
    """Directions from ``start`` straight to a single event."""
    if start is None:
        return None
    return _directions_url(_format_coordinate(start), _format_coordinate(event))
