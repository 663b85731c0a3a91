"""Serializers for circuit outputs."""

from __future__ import annotations

import csv
import io

from ...config import settings
from ..export.navigation import build_circuit_url, build_event_url
from ..routing.models import CircuitPlan


def _round_km(value: float) -> float:
    return round(value, settings.distance_precision)


def circuit_to_json(plan: CircuitPlan) -> dict:
    return {
        "start": {"latitude": plan.start.latitude, "longitude": plan.start.longitude},
        "total_distance_km": _round_km(plan.total_distance_km),
        "stop_count": len(plan.stops),
        "skipped": list(plan.skipped),
        "navigation_url": build_circuit_url(plan.start, [stop.event for stop in plan.stops]),
        "metadata": plan.metadata,
        "stops": [
            {
                "sequence": stop.sequence,
                "distance_from_prev_km": _round_km(stop.distance_from_prev_km),
                "cumulative_distance_km": _round_km(stop.cumulative_distance_km),
                "navigation_url": build_event_url(plan.start, stop.event),
                "event": stop.event.raw,
            }
            for stop in plan.stops
        ],
    }


def circuit_to_csv(plan: CircuitPlan) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "event_id",
        "name",
        "latitude",
        "longitude",
        "address",
        "date_debut",
        "distance_from_prev_km",
        "cumulative_distance_km",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for stop in plan.stops:
        writer.writerow(
            {
                "sequence": stop.sequence,
                "event_id": stop.event.event_id,
                "name": stop.event.name,
                "latitude": stop.event.latitude,
                "longitude": stop.event.longitude,
                "address": stop.event.address or "",
                "date_debut": stop.event.date_debut or "",
                "distance_from_prev_km": _round_km(stop.distance_from_prev_km),
                "cumulative_distance_km": _round_km(stop.cumulative_distance_km),
            }
        )
    return buffer.getvalue()
