import math

import pytest

from src.circuit_planner.models.domain import GeoPoint
from src.circuit_planner.services.geospatial import distance_km, haversine_km, is_valid_coordinate

PARIS = GeoPoint(latitude=48.8566, longitude=2.3522)
MARSEILLE = GeoPoint(latitude=43.2965, longitude=5.3698)

SAMPLE_POINTS = [
    PARIS,
    MARSEILLE,
    GeoPoint(latitude=-33.8688, longitude=151.2093),
    GeoPoint(latitude=64.1466, longitude=-21.9426),
    GeoPoint(latitude=0.0, longitude=179.9),
    GeoPoint(latitude=-89.5, longitude=-179.5),
]


def test_paris_marseille_distance():
    assert distance_km(PARIS, MARSEILLE) == pytest.approx(660, abs=5)


def test_distance_to_self_is_zero():
    for point in SAMPLE_POINTS:
        assert distance_km(point, point) == pytest.approx(0.0, abs=1e-9)


def test_distance_is_non_negative_and_symmetric():
    for a in SAMPLE_POINTS:
        for b in SAMPLE_POINTS:
            forward = distance_km(a, b)
            backward = distance_km(b, a)
            assert forward >= 0
            assert forward == pytest.approx(backward, rel=1e-9, abs=1e-9)


def test_distance_accepts_mappings():
    assert distance_km(
        {"latitude": PARIS.latitude, "longitude": PARIS.longitude},
        {"latitude": MARSEILLE.latitude, "longitude": MARSEILLE.longitude},
    ) == haversine_km(PARIS.latitude, PARIS.longitude, MARSEILLE.latitude, MARSEILLE.longitude)


def test_one_degree_of_longitude_on_equator():
    # 2 * pi * R / 360
    assert haversine_km(0, 0, 0, 1) == pytest.approx(2 * math.pi * 6371 / 360, rel=1e-9)


def test_non_finite_input_yields_nan():
    assert math.isnan(haversine_km(float("nan"), 0, 10, 10))


@pytest.mark.parametrize(
    "lat, lon, expected",
    [
        (48.8566, 2.3522, True),
        (-90, 180, True),
        (0, 2.35, False),
        (48.85, 0, False),
        (91, 2.35, False),
        (48.85, -181, False),
        (float("nan"), 2.35, False),
        (48.85, float("inf"), False),
        ("48.85", 2.35, False),
        (None, 2.35, False),
    ],
)
def test_is_valid_coordinate(lat, lon, expected):
    assert is_valid_coordinate(lat, lon) is expected
