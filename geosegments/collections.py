"""
Module for sequences of Segments
"""

__all__ = ['DrawnPath']

from typing import List, Sequence, Union

from pydantic import validate_call

from geosegments._const import DEFAULT_PATH_POINTS
from geosegments.coordinates import GeoPoint
from geosegments.segment import Segment, SegmentMode


class DrawnPath:

    """
    The segments of a drawn polyline, in draw order. The path exclusively owns its
    segments; removing one discards it.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, segments: List[Segment]):
        self.segments = segments

    def __bool__(self):
        return bool(self.segments)

    def __contains__(self, item):
        return item in self.segments

    def __eq__(self, other):
        if not isinstance(other, DrawnPath):
            return False

        return self.segments == other.segments

    def __getitem__(self, item):
        """Slicing by index"""
        return self.segments.__getitem__(item)

    def __iter__(self):
        """Iterate through the segments"""
        return self.segments.__iter__()

    def __len__(self):
        """The number of segments"""
        return self.segments.__len__()

    def __repr__(self):
        """REPL representation"""
        if not self.segments:
            return '<Empty DrawnPath>'

        return f'<DrawnPath with {len(self.segments)} segments>'

    @classmethod
    def from_vertices(
        cls,
        vertices: Sequence[GeoPoint],
        mode: Union[SegmentMode, str] = SegmentMode.GREAT_CIRCLE,
        num_points: int = DEFAULT_PATH_POINTS,
    ) -> 'DrawnPath':
        """
        Creates one Segment per pair of consecutive vertices of a drawn polyline.

        Args:
            vertices:
                The polyline's vertices, in draw order

            mode:
                (Default GREAT_CIRCLE) The initial mode of every segment

            num_points:
                (Default 50) The number of subdivisions along each great-circle path

        Returns:
            DrawnPath
        """
        if len(vertices) < 2:
            raise ValueError('A drawn path requires at least two vertices.')

        return cls([
            Segment(start, end, mode=mode, num_points=num_points)
            for start, end in zip(vertices, vertices[1:])
        ])

    @property
    def great_circle_km(self) -> float:
        """The summed great-circle distance of all segments"""
        return sum(x.great_circle_km for x in self.segments)

    @property
    def rhumb_km(self) -> float:
        """The summed rhumb line distance of all segments"""
        return sum(x.rhumb_km for x in self.segments)

    def append(self, segment: Segment) -> None:
        if not isinstance(segment, Segment):
            raise ValueError(f'Expected a Segment, not {type(segment)}')

        self.segments.append(segment)

    def remove(self, index: int) -> Segment:
        """Removes and returns the segment at the given draw-order index"""
        return self.segments.pop(index)

    def toggle_all(self, mode: Union[SegmentMode, str]) -> None:
        """Switch every segment to the given mode"""
        for segment in self.segments:
            segment.toggle(mode)

    def copy(self) -> 'DrawnPath':
        """Returns a deep copy of self; segments are not shared"""
        return DrawnPath([x.copy() for x in self.segments])
