import pytest
from fastapi.testclient import TestClient

from santa_route.main import create_app
from santa_route.services.geocoding.nominatim import GeocodingError


class DummyGeocoder:
    known = {
        "North Pole": (90.0, 0.0),
        "Rovaniemi": (66.5039, 25.7294),
        "Reykjavik": (64.1466, -21.9426),
    }

    def geocode(self, address: str):
        if address == "Broken St":
            raise GeocodingError("service down")
        return self.known.get(address.strip())


@pytest.fixture
def api_client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    from santa_route.api.routes import locations as locations_api

    monkeypatch.setattr(locations_api, "NominatimClient", lambda: DummyGeocoder())
    return TestClient(create_app())


def _stop(lid: str, lat: float, lng: float, **extra) -> dict:
    return {"location_id": lid, "address": f"Stop {lid}", "latitude": lat, "longitude": lng, **extra}


def test_health(api_client: TestClient):
    response = api_client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_optimize_endpoint(api_client: TestClient):
    body = {
        "locations": [
            _stop("A", 0.0, 0.0),
            _stop("C", 1.0, 1.0),
            _stop("B", 0.0, 1.0, delivered=True, child_name="Timmy", priority="nice"),
            _stop("D", 1.0, 0.0),
        ]
    }
    response = api_client.post("/api/routes/optimize", json=body)

    assert response.status_code == 200
    payload = response.json()
    ids = [location["location_id"] for location in payload["locations"]]
    assert ids[0] == "A"
    assert sorted(ids) == ["A", "B", "C", "D"]
    assert payload["stats"]["total_stops"] == 4
    assert payload["stats"]["delivered_count"] == 1
    assert len(payload["polyline"]) == 4
    timmy = next(item for item in payload["locations"] if item["location_id"] == "B")
    assert timmy["child_name"] == "Timmy"
    assert timmy["priority"] == "nice"


def test_optimize_empty(api_client: TestClient):
    response = api_client.post("/api/routes/optimize", json={"locations": []})
    assert response.status_code == 200
    assert response.json() == {
        "locations": [],
        "stats": {"total_distance_km": 0.0, "estimated_minutes": 0, "total_stops": 0, "delivered_count": 0},
        "polyline": [],
    }


def test_optimize_rejects_out_of_range_latitude(api_client: TestClient):
    response = api_client.post("/api/routes/optimize", json={"locations": [_stop("A", 91.0, 0.0)]})
    assert response.status_code == 422


def test_export_csv(api_client: TestClient):
    body = {"locations": [_stop("A", 0.0, 0.0), _stop("B", 0.0, 1.0)]}
    response = api_client.post("/api/routes/export", params={"format": "csv"}, json=body)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.text.splitlines()[0].startswith("sequence,location_id,address")


def test_export_geojson(api_client: TestClient):
    body = {"locations": [_stop("A", 0.0, 0.0), _stop("B", 0.0, 1.0)]}
    response = api_client.post("/api/routes/export", json=body)
    assert response.status_code == 200
    payload = response.json()
    assert payload["type"] == "FeatureCollection"
    assert payload["features"][0]["geometry"]["type"] == "LineString"


def test_geocode_endpoint(api_client: TestClient):
    response = api_client.post("/api/locations/geocode", json={"address": "Rovaniemi", "child_name": "Sally"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["latitude"] == 66.5039
    assert payload["child_name"] == "Sally"
    assert payload["delivered"] is False


def test_geocode_not_found(api_client: TestClient):
    response = api_client.post("/api/locations/geocode", json={"address": "Atlantis"})
    assert response.status_code == 404


def test_geocode_service_failure(api_client: TestClient):
    response = api_client.post("/api/locations/geocode", json={"address": "Broken St"})
    assert response.status_code == 502


def test_import_endpoint(api_client: TestClient):
    csv_text = "address,name\nNorth Pole,Rudolph\nAtlantis\nReykjavik,Bjork\n"
    response = api_client.post("/api/locations/import", json={"csv_text": csv_text})
    assert response.status_code == 200
    payload = response.json()
    assert [item["address"] for item in payload["locations"]] == ["North Pole", "Reykjavik"]
    assert payload["failed"] == ["Atlantis"]


def test_import_then_optimize(api_client: TestClient):
    imported = api_client.post(
        "/api/locations/import",
        json={"csv_text": "Rovaniemi\nNorth Pole\nReykjavik\n"},
    ).json()
    response = api_client.post("/api/routes/optimize", json={"locations": imported["locations"]})
    assert response.status_code == 200
    assert response.json()["locations"][0]["address"] == "Rovaniemi"


def test_geocoder_health(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    from santa_route.services.geocoding import nominatim

    monkeypatch.setattr(nominatim, "check_health", lambda: True)
    response = api_client.get("/api/health/geocoder")
    assert response.json() == {"service": "geocoder", "healthy": True}
