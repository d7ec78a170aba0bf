"""Command line entry point for the air navigation charges calculator.

Builds the charges form from command line options, the same way the form
would be filled in interactively: pick a manufacturer and aircraft (or
enter a weight), add waypoints to the route, then calculate.

Example:
    navcharge --manufacturer Airbus --aircraft A320neo --route ALPHA BRAVO CHARLIE --details
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from navcharge.aircraft.catalog import AircraftCatalog
from navcharge.charges.classifier import ChargeScheduleError, InvalidInputError
from navcharge.core.config import ConfigError, ConfigLoader, load_charge_bands
from navcharge.core.logging_system import (
    LoggingError,
    get_logger,
    initialize_logging,
    shutdown_logging,
)
from navcharge.core.resource_path import get_config_path, get_data_path, get_resource_path
from navcharge.form.controller import FormController
from navcharge.form.events import ChargesCalculated, FormStateChanged
from navcharge.form.state import (
    OTHER_AIRCRAFT,
    AddWaypoint,
    EnterOtherAircraft,
    SelectAircraft,
    SelectManufacturer,
    SetWeight,
)
from navcharge.navigation.navdata import WaypointCatalog

DEFAULT_SETTINGS = "settings.yaml"
DEFAULT_AIRCRAFT_CSV = "aircraft-data.csv"
DEFAULT_WAYPOINTS_CSV = "waypoints.csv"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(description="Air Navigation Charges Calculator")

    parser.add_argument("--config", type=Path, help="Settings YAML file")
    parser.add_argument("--aircraft-data", type=Path, help="Aircraft catalog CSV")
    parser.add_argument("--waypoints", type=Path, help="Waypoint catalog CSV")

    parser.add_argument("--manufacturer", default="", help="Aircraft manufacturer (e.g., Airbus)")
    parser.add_argument("--aircraft", default="", help="Aircraft model, or 'Other'")
    parser.add_argument("--other-aircraft", default="", help="Model name when --aircraft is Other")
    parser.add_argument("--weight", type=float, help="Weight in tonnes, overrides the catalog")
    parser.add_argument("--route", nargs="*", default=[], metavar="WAYPOINT", help="Route points")

    parser.add_argument("--details", action="store_true", help="Show weight and distance")
    parser.add_argument("--list-manufacturers", action="store_true")
    parser.add_argument("--list-aircraft", action="store_true", help="Models for --manufacturer")
    parser.add_argument("--list-waypoints", action="store_true")

    return parser.parse_args(argv)


def _load_settings(config_path: Path | None) -> ConfigLoader:
    if config_path is not None:
        return ConfigLoader.load(config_path)

    default_path = get_config_path(DEFAULT_SETTINGS)
    if default_path.exists():
        return ConfigLoader.load(default_path)
    return ConfigLoader()


def _resolve_data_file(cli_value: Path | None, configured: str | None, default_name: str) -> Path:
    if cli_value is not None:
        return cli_value
    if configured:
        path = Path(configured)
        return path if path.is_absolute() else get_resource_path(configured)
    return get_data_path(default_name)


def _print_listings(args: argparse.Namespace, controller: FormController) -> None:
    if args.list_manufacturers:
        for manufacturer in controller.aircraft_catalog.manufacturers():
            print(manufacturer)
    if args.list_aircraft:
        for aircraft in controller.aircraft_options():
            print(f"{aircraft.model}\t{aircraft.weight_t:g} t")
    if args.list_waypoints:
        for name in controller.waypoint_catalog.names():
            print(controller.waypoint_catalog.waypoints[name])


def run(args: argparse.Namespace) -> int:
    """Fill in the form from the arguments and print the charge.

    Returns:
        Exit code (0 for success).
    """
    logger = get_logger("navcharge.main")

    settings = _load_settings(args.config)
    bands = load_charge_bands(settings)

    aircraft_catalog = AircraftCatalog()
    aircraft_catalog.load_from_csv(
        _resolve_data_file(args.aircraft_data, settings.get("data.aircraft"), DEFAULT_AIRCRAFT_CSV)
    )
    waypoint_catalog = WaypointCatalog()
    waypoint_catalog.load_from_csv(
        _resolve_data_file(args.waypoints, settings.get("data.waypoints"), DEFAULT_WAYPOINTS_CSV)
    )

    controller = FormController(aircraft_catalog, waypoint_catalog, bands=bands)
    controller.event_bus.subscribe(
        FormStateChanged, lambda event: logger.debug("Form now %s", event.state)
    )
    controller.event_bus.subscribe(
        ChargesCalculated, lambda event: print(event.quote.result_text)
    )

    if args.manufacturer:
        controller.dispatch(SelectManufacturer(args.manufacturer))

    if args.list_manufacturers or args.list_aircraft or args.list_waypoints:
        _print_listings(args, controller)
        return 0

    if args.aircraft:
        controller.dispatch(SelectAircraft(args.aircraft))
        known = aircraft_catalog.find_aircraft(args.manufacturer, args.aircraft)
        if args.aircraft != OTHER_AIRCRAFT and known is None and args.weight is None:
            logger.warning(
                "Aircraft %r not found for manufacturer %r; weight is 0",
                args.aircraft,
                args.manufacturer,
            )
    if args.other_aircraft:
        controller.dispatch(EnterOtherAircraft(args.other_aircraft))
    if args.weight is not None:
        controller.dispatch(SetWeight(args.weight))

    for name in args.route:
        controller.dispatch(AddWaypoint(name))

    quote = controller.calculate()

    if args.details:
        print(quote.details_text)
        for leg in quote.legs:
            if leg.resolved:
                print(f"  {leg.start} -> {leg.end}: {leg.distance_km:.2f} km")
            else:
                print(f"  {leg.start} -> {leg.end}: unknown waypoint, not counted")

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 on a data or configuration error).
    """
    args = parse_args(argv)

    try:
        logging_config = get_config_path("logging.yaml")
        if logging_config.exists():
            initialize_logging(logging_config)
        else:
            initialize_logging()
    except LoggingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger = get_logger("navcharge.main")

    try:
        return run(args)
    except (FileNotFoundError, ConfigError, InvalidInputError, ChargeScheduleError) as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
