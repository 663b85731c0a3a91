from src.circuit_planner.models.domain import Event, GeoPoint
from src.circuit_planner.services.export.geojson import circuit_to_geojson, linestring_to_wkt
from src.circuit_planner.services.export.navigation import build_circuit_url, build_event_url
from src.circuit_planner.services.outputs.routing_formatter import circuit_to_csv, circuit_to_json
from src.circuit_planner.services.routing.models import CircuitPlan
from src.circuit_planner.services.routing.service import build_stops

START = GeoPoint(latitude=48.8566, longitude=2.3522)


def _event(eid: str, lat: float, lon: float) -> Event:
    return Event(
        event_id=eid,
        name=f"Brocante {eid}",
        latitude=lat,
        longitude=lon,
        address="Place du marché",
        date_debut="2026-11-01",
        raw={"id": eid, "latitude": lat, "longitude": lon},
    )


def _plan(events) -> CircuitPlan:
    stops = build_stops(START, events)
    total = stops[-1].cumulative_distance_km if stops else 0.0
    return CircuitPlan(start=START, stops=stops, total_distance_km=total)


def test_circuit_url_uses_last_stop_as_destination():
    stops = [GeoPoint(48.86, 2.35), GeoPoint(48.87, 2.36), GeoPoint(48.88, 2.37)]

    url = build_circuit_url(START, stops)

    assert url == (
        "https://www.google.com/maps/dir/?api=1"
        "&origin=48.8566%2C2.3522"
        "&destination=48.88%2C2.37"
        "&travelmode=driving"
        "&waypoints=48.86%2C2.35%7C48.87%2C2.36"
    )


def test_circuit_url_without_waypoints():
    url = build_circuit_url(START, [GeoPoint(48.86, 2.35)])

    assert url.endswith("&destination=48.86%2C2.35&travelmode=driving")
    assert "waypoints" not in url


def test_circuit_url_requires_stops():
    assert build_circuit_url(START, []) is None
    assert build_circuit_url(None, [GeoPoint(48.86, 2.35)]) is None


def test_event_url():
    url = build_event_url(START, {"latitude": 48.86, "longitude": 2.35})

    assert url == (
        "https://www.google.com/maps/dir/?api=1"
        "&origin=48.8566%2C2.3522&destination=48.86%2C2.35&travelmode=driving"
    )
    assert build_event_url(None, START) is None


def test_geojson_contains_start_stops_and_line():
    plan = _plan([_event("A", 48.86, 2.355), _event("B", 48.88, 2.40)])

    collection = circuit_to_geojson(plan)

    features = collection["features"]
    assert [feature["properties"]["role"] for feature in features] == ["start", "stop", "stop", "circuit"]
    line = features[-1]["geometry"]
    assert line["type"] == "LineString"
    assert list(line["coordinates"][0]) == [2.3522, 48.8566]
    assert list(line["coordinates"][-1]) == [2.40, 48.88]
    assert features[1]["properties"]["event_id"] == "A"


def test_geojson_without_stops_has_no_line():
    collection = circuit_to_geojson(_plan([]))

    assert len(collection["features"]) == 1
    assert collection["features"][0]["geometry"]["type"] == "Point"


def test_linestring_to_wkt_rejects_single_point():
    try:
        linestring_to_wkt([[48.86, 2.35]])
    except ValueError:
        pass
    else:
        raise AssertionError("Expected ValueError for a single coordinate")


def test_circuit_to_csv_writes_one_row_per_stop():
    plan = _plan([_event("A", 48.86, 2.355), _event("B", 48.88, 2.40)])

    content = circuit_to_csv(plan)

    lines = content.strip().splitlines()
    assert lines[0].startswith("sequence,event_id,name,latitude,longitude")
    assert len(lines) == 3
    assert lines[1].startswith("1,A,Brocante A,48.86,2.355")


def test_circuit_to_json_lists_stops_in_order():
    plan = _plan([_event("A", 48.86, 2.355), _event("B", 48.88, 2.40)])

    payload = circuit_to_json(plan)

    assert payload["stop_count"] == 2
    assert [stop["event"]["id"] for stop in payload["stops"]] == ["A", "B"]
    assert payload["navigation_url"].endswith("&waypoints=48.86%2C2.355")
