"""Waypoints and route distances.

This module provides the waypoint catalog and the great-circle distance
calculations used to measure a route.

Typical usage:
    from navcharge.navigation import WaypointCatalog

    catalog = WaypointCatalog()
    catalog.load_from_csv("data/waypoints.csv")
    distance_km = catalog.calculate_route_distance(["ALPHA", "BRAVO", "CHARLIE"])
"""

from navcharge.navigation.geo import EARTH_RADIUS_KM, GeoPoint, haversine_distance_km
from navcharge.navigation.navdata import WaypointCatalog
from navcharge.navigation.route import RouteLeg, route_legs, total_distance
from navcharge.navigation.waypoint import Waypoint

__all__ = [
    "EARTH_RADIUS_KM",
    "GeoPoint",
    "RouteLeg",
    "Waypoint",
    "WaypointCatalog",
    "haversine_distance_km",
    "route_legs",
    "total_distance",
]
