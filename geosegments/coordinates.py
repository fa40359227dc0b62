"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint', 'Waypoint']

import math
from typing import List, Tuple, Union


class GeoPoint:
    """
    Representation of a point on the globe (i.e., a lat/lng pair), in decimal degrees.

    GeoPoints are immutable. Values are not range-checked; callers are expected to
    supply latitudes within [-90, 90] and longitudes as produced by their map widget.
    """

    __slots__ = ('_lat', '_lng')

    def __init__(
        self,
        lat: Union[float, int, str],
        lng: Union[float, int, str],
    ):
        object.__setattr__(self, '_lat', float(lat))
        object.__setattr__(self, '_lng', float(lng))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, item):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return self.lat == other.lat and self.lng == other.lng

    def __hash__(self):
        return hash((self.lat, self.lng))

    def __reduce__(self):
        return self.__class__, (self.lat, self.lng)

    def __repr__(self):
        return f'<GeoPoint({self.lat}, {self.lng})>'

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def lng(self) -> float:
        return self._lng

    @property
    def xyz(self) -> List[float]:
        """Converts lat/lng to unit coordinates [x,y,z]"""
        r_lat = math.radians(self.lat)
        r_lng = math.radians(self.lng)
        return [
            math.cos(r_lat) * math.cos(r_lng),
            math.cos(r_lat) * math.sin(r_lng),
            math.sin(r_lat)
        ]

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude),
                as used by GeoJSON

        Returns:
            Tuple of length 2
        """
        if reverse:
            return self.lng, self.lat

        return self.lat, self.lng

    def to_str(self, reverse: bool = False) -> Tuple[str, str]:
        """
        Converts the point to a tuple of strings (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of length 2
        """
        first, second = self.to_float(reverse)
        return str(first), str(second)


# Interpolated path points are plain GeoPoints
Waypoint = GeoPoint
