import math

import pytest

from santa_route.models.domain import Location
from santa_route.services.geospatial import (
    EARTH_RADIUS_KM,
    distance,
    haversine_km,
    is_self_intersecting,
    route_line,
)


def _location(lat: float, lng: float) -> Location:
    return Location(address=f"{lat},{lng}", latitude=lat, longitude=lng)


def test_one_degree_along_equator():
    expected = EARTH_RADIUS_KM * math.radians(1)
    assert haversine_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(expected)
    assert expected == pytest.approx(111.195, abs=1e-3)


def test_distance_is_symmetric_and_non_negative():
    north_pole = _location(90.0, 0.0)
    rovaniemi = _location(66.5039, 25.7294)
    sydney = _location(-33.8688, 151.2093)

    for a, b in [(north_pole, rovaniemi), (rovaniemi, sydney), (sydney, north_pole)]:
        assert distance(a, b) == distance(b, a)
        assert distance(a, b) >= 0


def test_distance_to_self_is_zero():
    point = _location(48.8566, 2.3522)
    assert distance(point, point) == 0.0


def test_antipodes_are_half_the_circumference():
    assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_out_of_range_coordinates_still_produce_a_number():
    assert haversine_km(120.0, 0.0, 0.0, 400.0) >= 0


def test_route_line_uses_lon_lat_order():
    line = route_line([(10.0, 20.0), (11.0, 21.0)])
    assert list(line.coords) == [(20.0, 10.0), (21.0, 11.0)]


def test_route_line_needs_two_points():
    with pytest.raises(ValueError):
        route_line([(0.0, 0.0)])


def test_self_intersection_detection():
    crossing = [(0.0, 0.0), (1.0, 1.0), (0.0, 1.0), (1.0, 0.0)]
    perimeter = [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]

    assert is_self_intersecting(crossing)
    assert not is_self_intersecting(perimeter)
    assert not is_self_intersecting(perimeter[:3])
