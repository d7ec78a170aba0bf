"""Tests for the waypoint catalog."""

import csv

import pytest

from navcharge.navigation.geo import GeoPoint
from navcharge.navigation.navdata import WaypointCatalog
from navcharge.navigation.waypoint import Waypoint


class TestWaypointCatalog:
    """Test WaypointCatalog class."""

    def test_create_empty_catalog(self):
        catalog = WaypointCatalog()

        assert catalog.count() == 0
        assert catalog.names() == []

    def test_add_and_find_waypoint(self):
        catalog = WaypointCatalog()
        alpha = Waypoint("ALPHA", GeoPoint(51.47, -0.4543))

        catalog.add_waypoint(alpha)

        assert catalog.count() == 1
        assert catalog.find_waypoint("ALPHA") == alpha

    def test_find_is_case_sensitive(self):
        catalog = WaypointCatalog()
        catalog.add_waypoint(Waypoint("ALPHA", GeoPoint(0, 0)))

        assert catalog.find_waypoint("alpha") is None

    def test_find_missing_waypoint(self):
        assert WaypointCatalog().find_waypoint("NOPE") is None

    def test_add_duplicate_replaces(self):
        catalog = WaypointCatalog()
        catalog.add_waypoint(Waypoint("ALPHA", GeoPoint(0, 0)))
        catalog.add_waypoint(Waypoint("ALPHA", GeoPoint(1, 1)))

        assert catalog.count() == 1
        assert catalog.find_waypoint("ALPHA").position == GeoPoint(1, 1)

    def test_clear_catalog(self):
        catalog = WaypointCatalog()
        catalog.add_waypoint(Waypoint("ALPHA", GeoPoint(0, 0)))

        catalog.clear()

        assert catalog.count() == 0

    def test_load_from_csv(self, waypoints_csv):
        catalog = WaypointCatalog()

        count = catalog.load_from_csv(waypoints_csv)

        # BROKEN (bad latitude) and the unnamed row are skipped
        assert count == 5
        assert catalog.names() == ["A", "B", "C", "NORTH", "SOUTH"]
        assert catalog.find_waypoint("B").position == GeoPoint(0.0, 1.0)
        assert catalog.find_waypoint("BROKEN") is None

    def test_load_from_csv_with_writer(self, tmp_path):
        csv_file = tmp_path / "waypoints.csv"
        with open(csv_file, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["name", "latitude", "longitude"])
            writer.writerow(["ALPHA", "51.4700", "-0.4543"])
            writer.writerow(["BRAVO", "50.0379", "8.5622"])
            writer.writerow(["SHORT", "50.0"])

        catalog = WaypointCatalog()

        assert catalog.load_from_csv(str(csv_file)) == 2
        assert catalog.find_waypoint("ALPHA").latitude == 51.47

    def test_load_from_csv_skips_non_finite_coordinates(self, tmp_path):
        csv_file = tmp_path / "waypoints.csv"
        csv_file.write_text(
            "name,latitude,longitude\nA,0,0\nB,nan,0\nC,0,inf\nD,0,2\n", encoding="utf-8"
        )

        catalog = WaypointCatalog()

        assert catalog.load_from_csv(csv_file) == 2
        assert catalog.names() == ["A", "D"]
        assert catalog.calculate_route_distance(["A", "B", "D"]) == 0.0

    def test_load_from_csv_missing_column(self, tmp_path):
        csv_file = tmp_path / "waypoints.csv"
        csv_file.write_text("name,lat,lon\nALPHA,1,2\n", encoding="utf-8")

        assert WaypointCatalog().load_from_csv(csv_file) == 0

    def test_load_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Waypoint CSV not found"):
            WaypointCatalog().load_from_csv(tmp_path / "missing.csv")

    def test_calculate_route_distance(self, waypoint_catalog):
        distance = waypoint_catalog.calculate_route_distance(["A", "B", "C"])

        assert distance == pytest.approx(2 * 111.19, abs=0.02)

    def test_calculate_route_distance_short_routes(self, waypoint_catalog):
        assert waypoint_catalog.calculate_route_distance([]) == 0.0
        assert waypoint_catalog.calculate_route_distance(["A"]) == 0.0

    def test_calculate_route_distance_skips_unknown(self, waypoint_catalog):
        distance = waypoint_catalog.calculate_route_distance(["A", "B", "BROKEN", "C"])

        assert distance == pytest.approx(111.19, abs=0.01)

    def test_route_legs(self, waypoint_catalog):
        legs = waypoint_catalog.route_legs(["NORTH", "SOUTH", "GONE"])

        assert legs[0].distance_km == pytest.approx(20015.09, abs=0.01)
        assert legs[1].distance_km is None
