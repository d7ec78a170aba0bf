"""Tests for the form controller."""

import logging

import pytest

from navcharge.aircraft.catalog import AircraftCatalog
from navcharge.charges.classifier import ChargeBand, ChargeScheduleError, InvalidInputError
from navcharge.core.event_bus import EventBus
from navcharge.form.controller import FormController
from navcharge.form.events import ChargesCalculated, FormStateChanged
from navcharge.form.state import (
    RESULT_PLACEHOLDER,
    AddWaypoint,
    Clear,
    FormState,
    RemoveWaypoint,
    SelectAircraft,
    SelectManufacturer,
    SetWeight,
)
from navcharge.navigation.geo import GeoPoint
from navcharge.navigation.navdata import WaypointCatalog
from navcharge.navigation.waypoint import Waypoint


@pytest.fixture
def controller(aircraft_catalog, waypoint_catalog):
    return FormController(aircraft_catalog, waypoint_catalog)


def fill_reference_flight(controller):
    """Weight 50 t from A(0,0) to B(0,1)."""
    controller.dispatch(SelectManufacturer("Testair"))
    controller.dispatch(SelectAircraft("Reference"))
    controller.dispatch(AddWaypoint("A"))
    controller.dispatch(AddWaypoint("B"))


class TestDispatch:
    """Test action dispatch."""

    def test_dispatch_updates_state(self, controller):
        state = controller.dispatch(AddWaypoint("A"))

        assert state.route == ("A",)
        assert controller.state is state

    def test_dispatch_publishes_state_change(self, controller):
        received = []
        controller.event_bus.subscribe(FormStateChanged, received.append)

        controller.dispatch(AddWaypoint("A"))

        assert len(received) == 1
        assert received[0].action == AddWaypoint("A")
        assert received[0].state.route == ("A",)

    def test_invalid_weight_leaves_state(self, controller):
        before = controller.state

        with pytest.raises(InvalidInputError):
            controller.dispatch(SetWeight(-10))

        assert controller.state is before

    def test_uses_given_bus_and_state(self, aircraft_catalog, waypoint_catalog):
        bus = EventBus()
        initial = FormState(route=("A", "B"))

        controller = FormController(
            aircraft_catalog, waypoint_catalog, event_bus=bus, state=initial
        )

        assert controller.event_bus is bus
        assert controller.state is initial

    def test_aircraft_options_follow_manufacturer(self, controller):
        controller.dispatch(SelectManufacturer("Airbus"))
        assert [a.model for a in controller.aircraft_options()] == ["A320neo", "A350-900"]

        controller.dispatch(SelectManufacturer("Boeing"))
        assert [a.model for a in controller.aircraft_options()] == ["737-800"]


class TestQuote:
    """Test charge calculation through the controller."""

    def test_reference_flight(self, controller):
        """A(0,0) to B(0,1) at 50 t: ~111.19 km, route factor ~1.11, charge 90."""
        fill_reference_flight(controller)

        quote = controller.quote()

        assert quote.weight_t == 50.0
        assert quote.total_distance_km == pytest.approx(111.19, abs=0.01)
        assert quote.route_factor == pytest.approx(1.1119, abs=0.0001)
        assert quote.charge == 90

    def test_empty_form(self, controller):
        quote = controller.quote()

        assert quote.total_distance_km == 0.0
        assert quote.charge == 60

    def test_distance_recomputed_after_route_change(self, controller):
        fill_reference_flight(controller)
        controller.dispatch(AddWaypoint("C"))
        assert controller.total_distance() == pytest.approx(222.39, abs=0.01)

        controller.dispatch(RemoveWaypoint(2))
        assert controller.total_distance() == pytest.approx(111.19, abs=0.01)

    def test_distance_follows_catalog_changes(self):
        waypoints = WaypointCatalog()
        controller = FormController(AircraftCatalog(), waypoints)
        controller.dispatch(AddWaypoint("P"))
        controller.dispatch(AddWaypoint("Q"))
        assert controller.total_distance() == 0.0

        waypoints.add_waypoint(Waypoint("P", GeoPoint(0, 0)))
        waypoints.add_waypoint(Waypoint("Q", GeoPoint(1, 0)))

        assert controller.total_distance() == pytest.approx(111.19, abs=0.01)

    def test_unknown_waypoint_contributes_nothing(self, controller):
        fill_reference_flight(controller)
        controller.dispatch(AddWaypoint("NOWHERE"))

        assert controller.quote().total_distance_km == pytest.approx(111.19, abs=0.01)

    def test_custom_bands(self, aircraft_catalog, waypoint_catalog):
        bands = (ChargeBand(1.5, 10), ChargeBand(float("inf"), 20))
        controller = FormController(aircraft_catalog, waypoint_catalog, bands=bands)
        fill_reference_flight(controller)

        assert controller.quote().charge == 10

    def test_bounded_bands_rejected_at_construction(self, aircraft_catalog, waypoint_catalog):
        with pytest.raises(ChargeScheduleError, match="no upper bound"):
            FormController(aircraft_catalog, waypoint_catalog, bands=[ChargeBand(10, 5)])

    def test_quote_carries_legs(self, controller):
        fill_reference_flight(controller)
        controller.dispatch(AddWaypoint("NOWHERE"))

        quote = controller.quote()

        assert [(leg.start, leg.end) for leg in quote.legs] == [("A", "B"), ("B", "NOWHERE")]
        assert quote.legs[1].distance_km is None

    def test_unknown_waypoint_warned_once_per_quote(self, controller, caplog):
        fill_reference_flight(controller)
        controller.dispatch(AddWaypoint("NOWHERE"))

        with caplog.at_level(logging.WARNING, logger="navcharge.navigation.route"):
            controller.quote()

        assert len([r for r in caplog.records if "NOWHERE" in r.getMessage()]) == 1

    def test_quote_does_not_change_state(self, controller):
        fill_reference_flight(controller)
        before = controller.state

        controller.quote()

        assert controller.state is before


class TestCalculate:
    """Test calculate, details and the result text."""

    def test_calculate_sets_result(self, controller):
        fill_reference_flight(controller)

        quote = controller.calculate()

        assert quote.result_text == "Air Navigation Charges: $90.00"
        assert controller.state.result == "Air Navigation Charges: $90.00"

    def test_calculate_publishes_event(self, controller):
        received = []
        controller.event_bus.subscribe(ChargesCalculated, received.append)
        fill_reference_flight(controller)

        quote = controller.calculate()

        assert [event.quote for event in received] == [quote]

    def test_details(self, controller):
        fill_reference_flight(controller)

        assert controller.details() == "Weight: 50 Tonnes\nTotal Distance: 111.19 km"

    def test_clear_after_calculate(self, controller):
        fill_reference_flight(controller)
        controller.calculate()

        state = controller.dispatch(Clear())

        assert state.route == ()
        assert state.weight_t == 0.0
        assert state.result == RESULT_PLACEHOLDER

    def test_route_legs(self, controller):
        fill_reference_flight(controller)

        legs = controller.route_legs()

        assert [(leg.start, leg.end) for leg in legs] == [("A", "B")]
