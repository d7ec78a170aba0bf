"""Waypoint catalog.

This module provides loading and lookup of the named waypoints a route can
be built from.

Typical usage:
    catalog = WaypointCatalog()
    catalog.load_from_csv("data/waypoints.csv")

    alpha = catalog.find_waypoint("ALPHA")
    distance_km = catalog.calculate_route_distance(["ALPHA", "BRAVO"])
"""

import csv
import logging
import math
from collections.abc import Sequence
from pathlib import Path

from navcharge.navigation.geo import GeoPoint
from navcharge.navigation.route import RouteLeg, route_legs, total_distance
from navcharge.navigation.waypoint import Waypoint

logger = logging.getLogger(__name__)


class WaypointCatalog:
    """Catalog of named waypoints.

    Attributes:
        waypoints: Dictionary mapping name to Waypoint, in load order

    Examples:
        >>> catalog = WaypointCatalog()
        >>> catalog.load_from_csv("data/waypoints.csv")
        >>> catalog.find_waypoint("ALPHA")
    """

    def __init__(self) -> None:
        """Initialize empty waypoint catalog."""
        self.waypoints: dict[str, Waypoint] = {}

    def add_waypoint(self, waypoint: Waypoint) -> None:
        """Add a waypoint to the catalog.

        Note:
            A waypoint with the same name replaces the existing one.
        """
        if waypoint.name in self.waypoints:
            logger.debug("Replacing waypoint %s", waypoint.name)
        self.waypoints[waypoint.name] = waypoint

    def find_waypoint(self, name: str) -> Waypoint | None:
        """Find waypoint by name.

        Args:
            name: Waypoint name (case-sensitive)

        Returns:
            Waypoint if found, None otherwise
        """
        return self.waypoints.get(name)

    def names(self) -> list[str]:
        """Return waypoint names in load order."""
        return list(self.waypoints)

    def calculate_route_distance(self, names: Sequence[str]) -> float:
        """Calculate total distance along a route of waypoint names.

        Unknown names are skipped with a warning; see
        :func:`navcharge.navigation.route.total_distance`.

        Returns:
            Total distance in kilometres
        """
        return total_distance(names, self.find_waypoint)

    def route_legs(self, names: Sequence[str]) -> list[RouteLeg]:
        """Return the per-leg breakdown of a route of waypoint names."""
        return route_legs(names, self.find_waypoint)

    def load_from_csv(self, csv_path: str | Path) -> int:
        """Load waypoints from CSV file.

        Expected CSV format (header row required):
            name,latitude,longitude

        Rows with a missing name, or a coordinate that is not a finite number,
        are skipped.

        Args:
            csv_path: Path to CSV file

        Returns:
            Number of waypoints loaded

        Raises:
            FileNotFoundError: If CSV file doesn't exist
        """
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(f"Waypoint CSV not found: {csv_path}")

        count = 0
        with open(path, encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)

            for line_number, row in enumerate(reader, start=2):
                try:
                    name = (row["name"] or "").strip()
                    if not name:
                        raise ValueError("empty name")

                    position = GeoPoint(
                        latitude=float(row["latitude"]),
                        longitude=float(row["longitude"]),
                    )
                    if not (math.isfinite(position.latitude) and math.isfinite(position.longitude)):
                        raise ValueError(f"non-finite coordinate {position}")
                except (KeyError, TypeError, ValueError) as e:
                    logger.warning("Skipping invalid waypoint row %d: %s", line_number, e)
                    continue

                self.add_waypoint(Waypoint(name=name, position=position))
                count += 1

        logger.info("Loaded %d waypoints from %s", count, csv_path)
        return count

    def count(self) -> int:
        """Return total number of waypoints in catalog."""
        return len(self.waypoints)

    def clear(self) -> None:
        """Remove all waypoints from catalog."""
        self.waypoints.clear()
        logger.info("Cleared waypoint catalog")
