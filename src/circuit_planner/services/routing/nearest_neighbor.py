"""Nearest-neighbour visiting order for a set of located items."""

from __future__ import annotations

import logging
import math
from typing import Any, Sequence, TypeVar

from ..geospatial import coordinates_of, haversine_km

T = TypeVar("T")

logger = logging.getLogger(__name__)


def optimize_route(start_point: Any, items: Sequence[T]) -> list[T]:
    """Order ``items`` by repeatedly travelling to the closest unvisited one.

    The tour starts at ``start_point`` and each visited item becomes the next
    origin. Items are returned as-is, in a new list; ``items`` is left
    untouched. On equal distances the item that comes first in ``items`` wins.

    Coordinates are not validated. An item whose distance is NaN never beats
    another candidate, so it is only taken once nothing with a finite distance
    remains.
    """
    if not items:
        return []

    if len(items) == 1:
        return [items[0]]

    unvisited = list(items)
    route: list[T] = []
    current_lat, current_lon = coordinates_of(start_point)

    while unvisited:
        nearest_index = 0
        nearest_distance = math.inf

        for index, item in enumerate(unvisited):
            lat, lon = coordinates_of(item)
            distance = haversine_km(current_lat, current_lon, lat, lon)
            if distance < nearest_distance:
                nearest_distance = distance
                nearest_index = index

        nearest = unvisited.pop(nearest_index)
        route.append(nearest)
        current_lat, current_lon = coordinates_of(nearest)

    logger.info("Circuit ordered by proximity: %d stops", len(route))
    return route
