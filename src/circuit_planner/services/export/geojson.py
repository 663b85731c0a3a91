"""GeoJSON/WKT export utilities for circuit map overlays."""

from __future__ import annotations

from typing import Any, Dict, List

from shapely.geometry import LineString, Point, mapping

from ..routing.models import CircuitPlan


def linestring_to_wkt(coordinates: List[List[float]]) -> str:
    """Convert linestring coordinates to WKT format.

    Args:
        coordinates: List of [lat, lon] pairs

    Returns:
        WKT LINESTRING string
    """
    if not coordinates or len(coordinates) < 2:
        raise ValueError("LineString must have at least 2 coordinates")

    # WKT uses lon,lat order (x,y)
    return LineString([(lon, lat) for lat, lon in coordinates]).wkt


def circuit_coordinates(plan: CircuitPlan) -> List[List[float]]:
    """Return the [lat, lon] path of a circuit, starting point included."""
    path = [[plan.start.latitude, plan.start.longitude]]
    path.extend([stop.event.latitude, stop.event.longitude] for stop in plan.stops)
    return path


def circuit_to_geojson(plan: CircuitPlan) -> Dict[str, Any]:
    """Render a circuit as a GeoJSON FeatureCollection.

    The collection holds one Point per stop, the start point, and a LineString
    following the visiting order when there is at least one stop.
    """
    features: List[Dict[str, Any]] = [
        {
            "type": "Feature",
            "geometry": mapping(Point(plan.start.longitude, plan.start.latitude)),
            "properties": {"role": "start", "sequence": 0},
        }
    ]

    for stop in plan.stops:
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(Point(stop.event.longitude, stop.event.latitude)),
                "properties": {
                    "role": "stop",
                    "sequence": stop.sequence,
                    "event_id": stop.event.event_id,
                    "name": stop.event.name,
                    "distance_from_prev_km": stop.distance_from_prev_km,
                },
            }
        )

    coordinates = circuit_coordinates(plan)
    if len(coordinates) >= 2:
        line = LineString([(lon, lat) for lat, lon in coordinates])
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(line),
                "properties": {
                    "role": "circuit",
                    "stop_count": len(plan.stops),
                    "total_distance_km": plan.total_distance_km,
                },
            }
        )

    return {"type": "FeatureCollection", "features": features}
