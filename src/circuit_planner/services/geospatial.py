"""Geospatial helper functions."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def coordinates_of(point: Any) -> tuple[float, float]:
    """Return ``(latitude, longitude)`` from an object or a mapping carrying them."""

    if isinstance(point, Mapping):
        return point["latitude"], point["longitude"]
    return point.latitude, point.longitude


def distance_km(point_a: Any, point_b: Any) -> float:
    """Great-circle distance in kilometres between two located things."""

    lat1, lon1 = coordinates_of(point_a)
    lat2, lon2 = coordinates_of(point_b)
    return haversine_km(lat1, lon1, lat2, lon2)


def is_valid_coordinate(lat: Any, lon: Any) -> bool:
    """Return True for a finite, in-range, geocoded coordinate pair.

    A zero latitude or longitude marks an event that was never geocoded and is
    rejected as well.
    """

    if isinstance(lat, bool) or isinstance(lon, bool):
        return False
    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        return False
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    if lat == 0 or lon == 0:
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180
