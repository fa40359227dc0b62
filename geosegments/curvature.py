""" Deviation of a curved path from its straight chord """

__all__ = ['curvature_angle', 'midpoint_waypoint']

import math
from typing import Sequence

from geosegments.coordinates import GeoPoint
from geosegments.spherical import to_degrees


def curvature_angle(
    point1: GeoPoint,
    point2: GeoPoint,
    control_point: GeoPoint
) -> float:
    """
    Calculate the angle, in degrees, between the chord from point1 to point2 and the
    line from point1 to a control point (usually a path's midpoint waypoint).

    Lat/lng are treated as a flat plane, so this is only meaningful for short
    segments. The result is the raw absolute difference of the two planar angles
    and is not wrapped; it can exceed 180 degrees.

    Args:
        point1:
            The start point

        point2:
            The end point

        control_point:
            The point the curve passes through or bends toward

    Returns:
        (float) the angle in degrees
    """
    angle1 = math.atan2(control_point.lat - point1.lat, control_point.lng - point1.lng)
    angle2 = math.atan2(point2.lat - point1.lat, point2.lng - point1.lng)

    return abs(to_degrees(angle2 - angle1))


def midpoint_waypoint(waypoints: Sequence[GeoPoint]) -> GeoPoint:
    """
    The waypoint at index floor(num_points / 2) of a path of num_points + 1 waypoints.

    Args:
        waypoints:
            An ordered, non-empty sequence of GeoPoints

    Returns:
        GeoPoint
    """
    if not waypoints:
        raise ValueError('Cannot take the midpoint of an empty path.')

    return waypoints[(len(waypoints) - 1) // 2]
