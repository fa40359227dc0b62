""" Trigonometric primitives shared by the distance and path calculations """

__all__ = [
    'angular_separation', 'angular_separation_acos', 'to_degrees', 'to_radians'
]

import math

from geosegments.coordinates import GeoPoint


def to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180)


def to_degrees(radians: float) -> float:
    return radians * (180 / math.pi)


def angular_separation(point1: GeoPoint, point2: GeoPoint) -> float:
    """
    Calculate the central angle between two points using the haversine formula.

    Well-conditioned for both near-identical and near-antipodal points.

    Args:
        point1:
            A GeoPoint

        point2:
            A second GeoPoint

    Returns:
        (float) the central angle in radians, within [0, pi]
    """
    lat1, lng1 = to_radians(point1.lat), to_radians(point1.lng)
    lat2, lng2 = to_radians(point2.lat), to_radians(point2.lng)

    d_lat, d_lng = lat2 - lat1, lng2 - lng1
    var1 = (math.sin(d_lat / 2) ** 2) + math.cos(lat1) * math.cos(lat2) * (
        math.sin(d_lng / 2) ** 2
    )
    # Rounding can push var1 a hair outside [0, 1]
    var1 = min(1.0, max(0.0, var1))
    return 2 * math.asin(math.sqrt(var1))


def angular_separation_acos(point1: GeoPoint, point2: GeoPoint) -> float:
    """
    Calculate the central angle between two points using the spherical law of cosines.

    Loses precision for separations below roughly a kilometer; prefer
    angular_separation() unless reproducing results computed this way.

    Args:
        point1:
            A GeoPoint

        point2:
            A second GeoPoint

    Returns:
        (float) the central angle in radians, within [0, pi]
    """
    lat1, lng1 = to_radians(point1.lat), to_radians(point1.lng)
    lat2, lng2 = to_radians(point2.lat), to_radians(point2.lng)

    cos_d = (
        math.sin(lat1) * math.sin(lat2) +
        math.cos(lat1) * math.cos(lat2) * math.cos(lng2 - lng1)
    )
    return math.acos(min(1.0, max(-1.0, cos_d)))
