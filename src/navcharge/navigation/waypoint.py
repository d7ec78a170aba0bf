"""Named waypoint definition.

This module provides the Waypoint class, a catalog entry that ties a name to
a geographic position.
"""

from dataclasses import dataclass

from navcharge.navigation.geo import GeoPoint


@dataclass(frozen=True)
class Waypoint:
    """Named navigation waypoint.

    Attributes:
        name: Waypoint identifier, unique within a catalog
        position: Latitude/longitude of the waypoint

    Examples:
        >>> waypoint = Waypoint(name="ALPHA", position=GeoPoint(51.47, -0.4543))
        >>> str(waypoint)
        'ALPHA - (51.47, -0.4543)'
    """

    name: str
    position: GeoPoint

    @property
    def latitude(self) -> float:
        return self.position.latitude

    @property
    def longitude(self) -> float:
        return self.position.longitude

    def __str__(self) -> str:
        """Return the label shown when picking a waypoint."""
        return f"{self.name} - ({self.latitude}, {self.longitude})"
