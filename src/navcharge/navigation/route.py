"""Route distance accumulation.

A route is an ordered sequence of waypoint names. Its total distance is the
sum of the great-circle distances between consecutive names, folded left to
right. Names are resolved through a caller-supplied lookup; a pair whose
start or end cannot be resolved contributes nothing and the walk carries on.

Typical usage:
    from navcharge.navigation.route import total_distance

    distance_km = total_distance(["ALPHA", "BRAVO", "CHARLIE"], catalog.find_waypoint)
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from navcharge.navigation.geo import GeoPoint, haversine_distance_km
from navcharge.navigation.waypoint import Waypoint

logger = logging.getLogger(__name__)

Resolver = Callable[[str], GeoPoint | Waypoint | None]


@dataclass(frozen=True)
class RouteLeg:
    """One consecutive pair of route points.

    Attributes:
        start: Name of the leg's first waypoint
        end: Name of the leg's second waypoint
        distance_km: Great-circle length, or None if either end is unknown
    """

    start: str
    end: str
    distance_km: float | None

    @property
    def resolved(self) -> bool:
        return self.distance_km is not None


def _as_point(location: GeoPoint | Waypoint) -> GeoPoint:
    if isinstance(location, Waypoint):
        return location.position
    return location


def route_legs(names: Sequence[str], resolve: Resolver) -> list[RouteLeg]:
    """Split a route into legs and measure each one.

    Args:
        names: Ordered waypoint names (duplicates allowed)
        resolve: Lookup from name to position; returns None when unknown

    Returns:
        One RouteLeg per consecutive pair, in route order. Empty for routes
        with fewer than two names.
    """
    legs = []
    for start, end in zip(names, names[1:]):
        start_location = resolve(start)
        end_location = resolve(end)

        if start_location is None or end_location is None:
            missing = start if start_location is None else end
            logger.warning("Skipping leg %s -> %s: unknown waypoint %s", start, end, missing)
            legs.append(RouteLeg(start, end, None))
            continue

        distance_km = haversine_distance_km(_as_point(start_location), _as_point(end_location))
        legs.append(RouteLeg(start, end, distance_km))

    return legs


def total_distance(names: Sequence[str], resolve: Resolver) -> float:
    """Calculate total distance along a route.

    Args:
        names: Ordered waypoint names
        resolve: Lookup from name to position; returns None when unknown

    Returns:
        Total distance in kilometres. 0.0 when fewer than two names resolve
        as consecutive pairs.

    Examples:
        >>> points = {"A": GeoPoint(0, 0), "B": GeoPoint(0, 1)}
        >>> round(total_distance(["A", "B"], points.get), 2)
        111.19
    """
    total_km = 0.0
    for leg in route_legs(names, resolve):
        if leg.distance_km is not None:
            total_km += leg.distance_km
    return total_km
