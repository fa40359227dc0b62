"""
A single drawn leg between two consecutive vertices
"""

__all__ = ['DistanceResult', 'Segment', 'SegmentMode']

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import validate_call

from geosegments._const import DEFAULT_PATH_POINTS
from geosegments.coordinates import GeoPoint
from geosegments.curvature import curvature_angle, midpoint_waypoint
from geosegments.distance import DistanceResult, distances
from geosegments.interpolation import great_circle_path
from geosegments.utils.functions import check_num_points, round_half_up
from geosegments.utils.logging import LOGGER


class SegmentMode(str, Enum):
    """How a segment is drawn"""
    RHUMB_LINE = 'rhumb_line'
    GREAT_CIRCLE = 'great_circle'


class Segment:

    """
    A leg between two points, drawn either as a rhumb line (a straight two-point line
    on the map) or as a great-circle arc (a curved path of waypoints).

    Both distances depend only on the endpoints, so they are computed once and kept
    regardless of mode. Toggling to GREAT_CIRCLE populates the waypoints and the
    curvature angle; toggling to RHUMB_LINE clears them.

    Segments are mutable and compare by value, so they are not hashable.

    Args:
        start:
            The first vertex

        end:
            The second vertex

        mode:
            (Default GREAT_CIRCLE) The initial representation

        num_points:
            (Default 50) The number of subdivisions along the great-circle path
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        start: GeoPoint,
        end: GeoPoint,
        mode: SegmentMode = SegmentMode.GREAT_CIRCLE,
        num_points: int = DEFAULT_PATH_POINTS,
    ):
        check_num_points(num_points)

        self.start = start
        self.end = end
        self.num_points = num_points
        self.distances: DistanceResult = distances(start, end)

        self.mode = SegmentMode.RHUMB_LINE
        self.waypoints: List[GeoPoint] = []
        self.curvature = 0.0

        LOGGER.debug(
            'Segment %s -> %s: great circle %.2f km, rhumb line %.2f km',
            start, end, self.distances.great_circle_km, self.distances.rhumb_km
        )
        self.toggle(mode)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Segment):
            return False

        return (
            self.start == other.start and
            self.end == other.end and
            self.mode == other.mode and
            self.num_points == other.num_points and
            self.waypoints == other.waypoints
        )

    __hash__ = None  # type: ignore

    @property
    def __geo_interface__(self):
        return self.to_geo_interface()

    def __repr__(self) -> str:
        return (
            f'<Segment ({self.mode.value}) from {self.start.to_float()} '
            f'to {self.end.to_float()}>'
        )

    @classmethod
    def create(
        cls,
        start: GeoPoint,
        end: GeoPoint,
        mode: Union[SegmentMode, str] = SegmentMode.GREAT_CIRCLE,
        num_points: int = DEFAULT_PATH_POINTS,
    ) -> 'Segment':
        """Creates a Segment for a freshly drawn leg. Alias of the constructor."""
        return cls(start, end, mode=mode, num_points=num_points)

    @property
    def great_circle_km(self) -> float:
        return self.distances.great_circle_km

    @property
    def rhumb_km(self) -> float:
        return self.distances.rhumb_km

    @property
    def vertices(self) -> List[GeoPoint]:
        """The points to draw: the endpoints for a rhumb line, else the waypoints"""
        if self.mode is SegmentMode.RHUMB_LINE:
            return [self.start, self.end]

        return self.waypoints

    def copy(self) -> 'Segment':
        return Segment(self.start, self.end, mode=self.mode, num_points=self.num_points)

    @validate_call
    def toggle(self, mode: SegmentMode) -> None:
        """
        Switch the segment's representation in place.

        Moving to GREAT_CIRCLE computes the (antimeridian-normalized) path and its
        curvature angle if no waypoints are present. Moving to RHUMB_LINE clears the
        waypoints and zeroes the curvature. Distances are never recomputed.

        Args:
            mode:
                The target SegmentMode, or its string value

        Returns:
            None
        """
        if mode is SegmentMode.GREAT_CIRCLE:
            if not self.waypoints:
                self.waypoints = great_circle_path(self.start, self.end, self.num_points)
                if len(self.waypoints) < self.num_points + 1:
                    # Antipodal; no unique arc to deviate from the chord
                    self.curvature = 0.0
                else:
                    # Measured in the unwrapped frame of the path itself
                    self.curvature = curvature_angle(
                        self.waypoints[0],
                        self.waypoints[-1],
                        midpoint_waypoint(self.waypoints)
                    )
        else:
            self.waypoints = []
            self.curvature = 0.0

        self.mode = mode
        LOGGER.debug('Segment mode set to %s; curvature %.2f°', mode.value, self.curvature)

    def summary(self, precision: int = 2) -> Dict[str, Any]:
        """
        The segment's metrics, rounded for display.

        Args:
            precision:
                (Default 2) The decimal precision for distances and the curvature
                angle. Waypoints are always rounded to 5 decimal places.

        Returns:
            dict
        """
        return {
            'mode': self.mode.value,
            'rhumb_km': round_half_up(self.rhumb_km, precision),
            'great_circle_km': round_half_up(self.great_circle_km, precision),
            'curvature_degrees': round_half_up(self.curvature, precision),
            'waypoints': [
                (round_half_up(x.lat, 5), round_half_up(x.lng, 5))
                for x in self.waypoints
            ],
        }

    def to_geo_interface(self) -> Dict[str, Any]:
        """GeoJSON LineString geometry of the drawn vertices"""
        return {
            'type': 'LineString',
            'coordinates': [list(x.to_float(reverse=True)) for x in self.vertices],
        }

    def to_geojson(self, properties: Optional[Dict] = None) -> Dict[str, Any]:
        """
        Convert the segment to a GeoJSON Feature.

        Args:
            properties: (dict)
                Any number of properties to be included in the geojson properties. These
                values will be unioned with the segment's metrics (and override them where
                keys conflict)

        Returns:
            (dict)
        """
        return {
            'type': 'Feature',
            'geometry': self.to_geo_interface(),
            'properties': {
                'mode': self.mode.value,
                'great_circle_km': self.great_circle_km,
                'rhumb_km': self.rhumb_km,
                'curvature_degrees': self.curvature,
                **(properties or {})
            },
        }
