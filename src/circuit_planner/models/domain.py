"""Domain models for located events and coordinates."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in degrees."""

    latitude: float
    longitude: float


@dataclass(slots=True)
class Event:
    """A flea-market event with its location and the untouched source record."""

    event_id: str
    name: str
    latitude: float
    longitude: float
    address: Optional[str] = None
    date_debut: Optional[str] = None
    raw: dict[str, Any] = field(default_factory=dict)
