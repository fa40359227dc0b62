"""
Longitude unwrapping for paths which cross the antimeridian
"""

__all__ = ['crosses_antimeridian', 'normalize_antimeridian']

from typing import List, Sequence

from geosegments.coordinates import GeoPoint


def crosses_antimeridian(waypoints: Sequence[GeoPoint]) -> bool:
    """
    Test whether any two consecutive waypoints are more than 180 degrees of
    longitude apart, i.e. the path wraps across the +/-180 meridian.

    Args:
        waypoints:
            An ordered sequence of GeoPoints

    Returns:
        bool
    """
    return any(
        abs(point2.lng - point1.lng) > 180
        for point1, point2 in zip(waypoints, waypoints[1:])
    )


def normalize_antimeridian(waypoints: Sequence[GeoPoint]) -> List[GeoPoint]:
    """
    Unwrap longitudes so that consecutive waypoints are never more than 180 degrees
    apart. Longitudes may leave [-180, 180] as a result, which is what keeps a map
    from drawing a line across its full width. Latitudes are untouched.

    Waypoints are processed in order; each one is compared against the already
    unwrapped previous waypoint. The input sequence is not modified.

    Args:
        waypoints:
            An ordered sequence of GeoPoints

    Returns:
        List[GeoPoint]
    """
    if not waypoints:
        return []

    out = [waypoints[0]]
    for point in waypoints[1:]:
        prev_lng, lng = out[-1].lng, point.lng
        while lng - prev_lng > 180:
            lng -= 360
        while lng - prev_lng < -180:
            lng += 360

        out.append(point if lng == point.lng else GeoPoint(point.lat, lng))

    return out
