import math

import pytest
from pytest import approx

from geosegments import GeoPoint
from geosegments.distance import *

LONDON = GeoPoint(51.505, -0.09)
NEW_YORK = GeoPoint(40.7128, -74.006)


def test_great_circle_distance():
    # Matches the haversine package, scaled to a 6371km radius
    expected = 0.157253373
    actual = great_circle_distance(GeoPoint(0.0, 0.0), GeoPoint(0.001, 0.001))
    assert actual == approx(expected, abs=1e-9)

    expected = 157.249381271
    actual = great_circle_distance(GeoPoint(0.0, 0.0), GeoPoint(1.0, 1.0))
    assert actual == approx(expected, abs=1e-6)

    # Antimeridian test
    expected = 222.389853289
    actual = great_circle_distance(GeoPoint(0., 179.), GeoPoint(0., -179.))
    assert actual == approx(expected, abs=1e-6)

    # Quarter of the equator
    actual = great_circle_distance(GeoPoint(0., 0.), GeoPoint(0., 90.))
    assert actual == approx(6371.0 * math.pi / 2)
    assert actual == approx(10007.5, abs=0.1)

    actual = great_circle_distance(LONDON, NEW_YORK)
    assert actual == approx(5570, abs=10)


def test_great_circle_distance_identical():
    assert great_circle_distance(LONDON, LONDON) == 0.
    assert great_circle_distance(GeoPoint(90., 0.), GeoPoint(90., 0.)) == 0.


def test_great_circle_distance_acos():
    for p1, p2 in [
        (LONDON, NEW_YORK),
        (GeoPoint(0., 0.), GeoPoint(0., 90.)),
        (GeoPoint(-33.8688, 151.2093), GeoPoint(35.6762, 139.6503)),
        (GeoPoint(0., 179.), GeoPoint(0., -179.)),
    ]:
        assert great_circle_distance(p1, p2, formula='acos') == approx(
            great_circle_distance(p1, p2), abs=1e-6
        )


def test_great_circle_distance_unknown_formula():
    with pytest.raises(ValueError, match='Unknown formula'):
        great_circle_distance(LONDON, NEW_YORK, formula='vincenty')


def test_rhumb_distance():
    # Along the equator the rhumb line is the great circle
    expected = great_circle_distance(GeoPoint(0., 0.), GeoPoint(0., 90.))
    actual = rhumb_distance(GeoPoint(0., 0.), GeoPoint(0., 90.))
    assert actual == approx(expected, abs=1e-6)

    # Along a meridian likewise
    expected = 6371.0 * math.radians(40.)
    actual = rhumb_distance(GeoPoint(10., 20.), GeoPoint(50., 20.))
    assert actual == approx(expected, abs=1e-6)
    assert great_circle_distance(GeoPoint(10., 20.), GeoPoint(50., 20.)) == approx(actual, abs=1e-6)

    actual = rhumb_distance(LONDON, NEW_YORK)
    assert 5750 < actual < 5850
    assert actual > great_circle_distance(LONDON, NEW_YORK)


def test_rhumb_distance_parallel():
    # Off the equator, a parallel is longer than the great circle
    p1, p2 = GeoPoint(60., 0.), GeoPoint(60., 10.)
    expected = 6371.0 * math.cos(math.radians(60.)) * math.radians(10.)
    assert rhumb_distance(p1, p2) == approx(expected, abs=1e-6)
    assert rhumb_distance(p1, p2) > great_circle_distance(p1, p2)


def test_rhumb_distance_antimeridian():
    # Takes the short way around
    expected = 222.389853289
    assert rhumb_distance(GeoPoint(0., 179.), GeoPoint(0., -179.)) == approx(expected, abs=1e-6)
    assert rhumb_distance(GeoPoint(0., -179.), GeoPoint(0., 179.)) == approx(expected, abs=1e-6)

    p1, p2 = GeoPoint(30., 170.), GeoPoint(35., -170.)
    assert rhumb_distance(p1, p2) < 3000


def test_rhumb_distance_identical():
    assert rhumb_distance(LONDON, LONDON) == 0.
    assert rhumb_distance(GeoPoint(0., 0.), GeoPoint(0., 0.)) == 0.
    assert rhumb_distance(GeoPoint(-90., 0.), GeoPoint(-90., 0.)) == 0.


def test_rhumb_distance_poles():
    expected = 6371.0 * math.pi / 2
    assert rhumb_distance(GeoPoint(-90., 0.), GeoPoint(0., 0.)) == approx(expected)
    assert rhumb_distance(GeoPoint(0., 0.), GeoPoint(-90., 0.)) == approx(expected)
    assert rhumb_distance(GeoPoint(0., 0.), GeoPoint(90., 0.)) == approx(expected)


def test_great_circle_never_exceeds_rhumb():
    lats = [-80., -45., -10., 0., 10., 33.3, 60., 89.]
    lngs = [-179., -120., -30., 0., 0.5, 45., 150., 180.]
    points = [GeoPoint(lat, lng) for lat in lats for lng in lngs]
    for p1 in points[::3]:
        for p2 in points:
            assert great_circle_distance(p1, p2) <= rhumb_distance(p1, p2) + 1e-6


def test_distances():
    result = distances(LONDON, NEW_YORK)
    assert isinstance(result, DistanceResult)
    assert result.great_circle_km == great_circle_distance(LONDON, NEW_YORK)
    assert result.rhumb_km == rhumb_distance(LONDON, NEW_YORK)

    gc, rhumb = distances(LONDON, LONDON)
    assert gc == rhumb == 0.
