
from geosegments._version import __version__  # noqa: F401
from geosegments.utils.logging import LOGGER
from geosegments.coordinates import GeoPoint, Waypoint
from geosegments.distance import (
    DistanceResult, distances, great_circle_distance, rhumb_distance
)
from geosegments.interpolation import bezier_path, great_circle_path
from geosegments.antimeridian import normalize_antimeridian
from geosegments.curvature import curvature_angle, midpoint_waypoint
from geosegments.segment import Segment, SegmentMode
from geosegments.collections import DrawnPath

__all__ = [
    'DistanceResult',
    'DrawnPath',
    'GeoPoint',
    'Segment',
    'SegmentMode',
    'Waypoint',
    'bezier_path',
    'curvature_angle',
    'distances',
    'great_circle_distance',
    'great_circle_path',
    'midpoint_waypoint',
    'normalize_antimeridian',
    'rhumb_distance',
    'LOGGER',
]
