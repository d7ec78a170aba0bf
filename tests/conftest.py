"""Pytest configuration and fixtures for all tests."""

from pathlib import Path
from unittest.mock import patch

import pytest

from navcharge.aircraft.catalog import AircraftCatalog
from navcharge.core.logging_system import shutdown_logging
from navcharge.navigation.navdata import WaypointCatalog

WAYPOINTS_CSV = """name,latitude,longitude
A,0,0
B,0,1
C,0,2
NORTH,90,0
SOUTH,-90,0
BROKEN,north,0
,10,10
"""

AIRCRAFT_CSV = """manufacturer,model,weight
Airbus,A320neo,79
Airbus,A350-900,283
Boeing,737-800,79
Testair,Reference,50
Testair,Heavy,200
Boeing,,12
Cessna,172S,heavy
Embraer,E190,-3
"""


@pytest.fixture
def waypoints_csv(tmp_path: Path) -> Path:
    """Waypoint CSV with three equator points one degree apart and two bad rows."""
    path = tmp_path / "waypoints.csv"
    path.write_text(WAYPOINTS_CSV, encoding="utf-8")
    return path


@pytest.fixture
def aircraft_csv(tmp_path: Path) -> Path:
    """Aircraft CSV with five valid rows and three bad rows."""
    path = tmp_path / "aircraft-data.csv"
    path.write_text(AIRCRAFT_CSV, encoding="utf-8")
    return path


@pytest.fixture
def waypoint_catalog(waypoints_csv: Path) -> WaypointCatalog:
    catalog = WaypointCatalog()
    catalog.load_from_csv(waypoints_csv)
    return catalog


@pytest.fixture
def aircraft_catalog(aircraft_csv: Path) -> AircraftCatalog:
    catalog = AircraftCatalog()
    catalog.load_from_csv(aircraft_csv)
    return catalog


@pytest.fixture
def log_dir(tmp_path: Path):
    """Send platform-directory logs to a temporary directory.

    Shuts logging down afterwards so file handlers don't leak between tests.
    """
    directory = tmp_path / "logs"
    with patch(
        "navcharge.core.logging_system.get_platform_log_dir", return_value=directory
    ):
        yield directory
    shutdown_logging()
