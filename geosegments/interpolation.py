"""
Discretized paths between two GeoPoints
"""

__all__ = ['bezier_control_point', 'bezier_path', 'great_circle_path']

import math
from typing import List

import numpy as np

from geosegments._const import (
    BEZIER_LATITUDE_OFFSET, BEZIER_PATH_POINTS, DEFAULT_PATH_POINTS, SLERP_TOLERANCE
)
from geosegments.antimeridian import normalize_antimeridian
from geosegments.coordinates import GeoPoint
from geosegments.spherical import angular_separation
from geosegments.utils.functions import check_num_points
from geosegments.utils.logging import warn_once


def great_circle_path(
    point1: GeoPoint,
    point2: GeoPoint,
    num_points: int = DEFAULT_PATH_POINTS,
    normalize: bool = True,
) -> List[GeoPoint]:
    """
    Generate waypoints along the minor great-circle arc between two points using
    spherical linear interpolation (slerp).

    Each endpoint is converted to a unit vector and blended by the weights
        A = sin((1-f)·d) / sin(d),  B = sin(f·d) / sin(d)
    for fractions f = i/num_points, where d is the central angle between the endpoints.

    The weights are undefined when sin(d) is zero. Identical endpoints produce
    num_points+1 copies of the shared point. Antipodal endpoints have no unique great
    circle between them; the endpoints alone are returned.

    Args:
        point1:
            The start point

        point2:
            The end point

        num_points:
            (Default 50) The number of subdivisions along the arc. The returned path
            contains num_points + 1 waypoints, inclusive of both endpoints.

        normalize:
            (Default True) Unwrap longitudes across the antimeridian so that
            consecutive waypoints are never more than 180 degrees apart.

    Returns:
        List[GeoPoint]
    """
    check_num_points(num_points)

    d = angular_separation(point1, point2)
    sin_d = math.sin(d)
    if sin_d < SLERP_TOLERANCE:
        if d < math.pi / 2:
            return [point1] * num_points + [point2]

        warn_once(
            'Great-circle path requested between antipodal points; returning the '
            'endpoints only. (this warning will not repeat)'
        )
        path = [point1, point2]
        return normalize_antimeridian(path) if normalize else path

    fractions = np.linspace(0., 1., num_points + 1)
    weight_a = np.sin((1 - fractions) * d) / sin_d
    weight_b = np.sin(fractions * d) / sin_d

    xyz = np.outer(weight_a, point1.xyz) + np.outer(weight_b, point2.xyz)
    lats = np.degrees(np.arctan2(xyz[:, 2], np.hypot(xyz[:, 0], xyz[:, 1])))
    lngs = np.degrees(np.arctan2(xyz[:, 1], xyz[:, 0]))

    # Endpoints are pinned to the inputs rather than their round-tripped vectors
    path = [
        point1,
        *(GeoPoint(lat, lng) for lat, lng in zip(lats[1:-1], lngs[1:-1])),
        point2
    ]
    return normalize_antimeridian(path) if normalize else path


def bezier_control_point(
    point1: GeoPoint,
    point2: GeoPoint,
    offset: float = BEZIER_LATITUDE_OFFSET,
) -> GeoPoint:
    """The planar midpoint of two points, raised by `offset` degrees of latitude"""
    return GeoPoint(
        (point1.lat + point2.lat) / 2 + offset,
        (point1.lng + point2.lng) / 2,
    )


def bezier_path(
    point1: GeoPoint,
    point2: GeoPoint,
    num_points: int = BEZIER_PATH_POINTS,
    offset: float = BEZIER_LATITUDE_OFFSET,
) -> List[GeoPoint]:
    """
    Generate a quadratic Bézier curve between two points, treating lat/lng as a flat
    plane. The curve bends toward bezier_control_point(point1, point2, offset).

    This is a display curve only; it does not follow any geodesic.

    Args:
        point1:
            The start point

        point2:
            The end point

        num_points:
            (Default 100) The number of subdivisions along the curve. The returned
            path contains num_points + 1 points, inclusive of both endpoints.

        offset:
            (Default 10.0) Degrees of latitude by which the control point is raised

    Returns:
        List[GeoPoint]
    """
    check_num_points(num_points)

    control = bezier_control_point(point1, point2, offset)
    t = np.linspace(0., 1., num_points + 1)
    lats = (1 - t) ** 2 * point1.lat + 2 * (1 - t) * t * control.lat + t ** 2 * point2.lat
    lngs = (1 - t) ** 2 * point1.lng + 2 * (1 - t) * t * control.lng + t ** 2 * point2.lng

    return [GeoPoint(lat, lng) for lat, lng in zip(lats, lngs)]
