"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ...models.domain import Event, GeoPoint


@dataclass(slots=True)
class CircuitStop:
    event: Event
    sequence: int
    distance_from_prev_km: float
    cumulative_distance_km: float


@dataclass(slots=True)
class CircuitPlan:
    start: GeoPoint
    stops: List[CircuitStop]
    total_distance_km: float
    skipped: List[str] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)
