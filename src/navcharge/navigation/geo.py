"""Great-circle distance between geographic points.

Distances are computed with the haversine formula on a spherical Earth of
radius 6371 km. Coordinates are not range checked: a latitude of 95 degrees
gives a well-defined number that has no geographic meaning.

Typical usage:
    from navcharge.navigation.geo import GeoPoint, haversine_distance_km

    equator = GeoPoint(0.0, 0.0)
    one_east = GeoPoint(0.0, 1.0)
    haversine_distance_km(equator, one_east)  # ~111.19
"""

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude pair in decimal degrees.

    Attributes:
        latitude: Degrees north, nominally in [-90, 90]
        longitude: Degrees east, nominally in [-180, 180]
    """

    latitude: float
    longitude: float

    def distance_to(self, other: "GeoPoint") -> float:
        """Return great-circle distance to another point in kilometres."""
        return haversine_distance_km(self, other)


def haversine_distance_km(p1: GeoPoint, p2: GeoPoint) -> float:
    """Calculate great circle distance between two points.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Distance in kilometres, in [0, ~20015]

    Examples:
        >>> round(haversine_distance_km(GeoPoint(0, 0), GeoPoint(0, 1)), 2)
        111.19
    """
    dlat = math.radians(p2.latitude - p1.latitude)
    dlon = math.radians(p2.longitude - p1.longitude)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(p1.latitude))
        * math.cos(math.radians(p2.latitude))
        * math.sin(dlon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c
