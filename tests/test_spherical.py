import math

from pytest import approx

from geosegments import GeoPoint
from geosegments.spherical import *


def test_to_radians():
    assert to_radians(180.) == approx(math.pi)
    assert to_radians(-90.) == approx(-math.pi / 2)
    assert to_radians(0.) == 0.


def test_to_degrees():
    assert to_degrees(math.pi) == approx(180.)
    assert to_degrees(to_radians(12.345)) == approx(12.345)


def test_angular_separation():
    assert angular_separation(GeoPoint(0., 0.), GeoPoint(0., 90.)) == approx(math.pi / 2)
    assert angular_separation(GeoPoint(0., 0.), GeoPoint(90., 0.)) == approx(math.pi / 2)

    # Identical points
    p = GeoPoint(51.505, -0.09)
    assert angular_separation(p, p) == 0.

    # Antipodal points
    assert angular_separation(GeoPoint(0., 0.), GeoPoint(0., 180.)) == approx(math.pi)
    assert angular_separation(GeoPoint(45., 10.), GeoPoint(-45., -170.)) == approx(math.pi)

    # Antimeridian
    assert angular_separation(
        GeoPoint(0., 179.), GeoPoint(0., -179.)
    ) == approx(to_radians(2.))


def test_angular_separation_acos():
    assert angular_separation_acos(GeoPoint(0., 0.), GeoPoint(0., 90.)) == approx(math.pi / 2)
    assert angular_separation_acos(GeoPoint(0., 0.), GeoPoint(0., 180.)) == approx(math.pi)

    # Rounding would push the cosine above 1 without clamping
    p = GeoPoint(51.505, -0.09)
    assert angular_separation_acos(p, p) == approx(0., abs=1e-7)

    p1, p2 = GeoPoint(51.505, -0.09), GeoPoint(40.7128, -74.006)
    assert angular_separation_acos(p1, p2) == approx(angular_separation(p1, p2), abs=1e-12)
