"""Export services."""

from .geojson import circuit_to_geojson, linestring_to_wkt
from .navigation import build_circuit_url, build_event_url

__all__ = [
    "circuit_to_geojson",
    "linestring_to_wkt",
    "build_circuit_url",
    "build_event_url",
]
