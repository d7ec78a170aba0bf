"""Form controller tying the form state to the charge engine.

The controller owns the current FormState and the two catalogs. Front ends
dispatch actions to it and listen for its events; they never mutate the
state themselves.

Typical usage:
    controller = FormController(aircraft_catalog, waypoint_catalog)
    controller.event_bus.subscribe(ChargesCalculated, on_charges)

    controller.dispatch(SelectManufacturer("Airbus"))
    controller.dispatch(SelectAircraft("A320neo"))
    controller.dispatch(AddWaypoint("ALPHA"))
    controller.dispatch(AddWaypoint("BRAVO"))
    quote = controller.calculate()
"""

import logging
from collections.abc import Iterable

from navcharge.aircraft.catalog import AircraftCatalog, AircraftType
from navcharge.charges.classifier import (
    DEFAULT_CHARGE_BANDS,
    ChargeBand,
    classify,
    route_factor,
    validate_bands,
)
from navcharge.core.event_bus import EventBus
from navcharge.form.events import ChargesCalculated, FormStateChanged
from navcharge.form.quote import ChargeQuote
from navcharge.form.state import Action, FormState, ShowResult, aircraft_options, reduce
from navcharge.navigation.navdata import WaypointCatalog
from navcharge.navigation.route import RouteLeg

logger = logging.getLogger(__name__)


class FormController:
    """Holds the charges form and computes quotes for it.

    Attributes:
        aircraft_catalog: Aircraft offered on the form
        waypoint_catalog: Waypoints a route can use
        bands: Charge band table
        event_bus: Bus receiving FormStateChanged and ChargesCalculated
    """

    def __init__(
        self,
        aircraft_catalog: AircraftCatalog,
        waypoint_catalog: WaypointCatalog,
        bands: Iterable[ChargeBand] = DEFAULT_CHARGE_BANDS,
        event_bus: EventBus | None = None,
        state: FormState | None = None,
    ) -> None:
        """Set up the form.

        Raises:
            ChargeScheduleError: If the band table is not a complete ascending
                step function.
        """
        self.aircraft_catalog = aircraft_catalog
        self.waypoint_catalog = waypoint_catalog
        self.bands = validate_bands(bands)
        self.event_bus = event_bus or EventBus()
        self._state = state or FormState()

    @property
    def state(self) -> FormState:
        return self._state

    def dispatch(self, action: Action) -> FormState:
        """Apply an action and publish the resulting state.

        Args:
            action: Form action

        Returns:
            The new form state

        Raises:
            InvalidInputError: If the action carries an invalid weight.
        """
        self._state = reduce(self._state, action, self.aircraft_catalog)
        logger.debug("Applied %s", action)
        self.event_bus.publish(FormStateChanged(action=action, state=self._state))
        return self._state

    def aircraft_options(self) -> list[AircraftType]:
        """Aircraft offered for the currently selected manufacturer."""
        return aircraft_options(self.aircraft_catalog, self._state.manufacturer)

    def total_distance(self) -> float:
        """Distance of the current route in kilometres, recomputed every call."""
        return self.waypoint_catalog.calculate_route_distance(self._state.route)

    def route_legs(self) -> list[RouteLeg]:
        return self.waypoint_catalog.route_legs(self._state.route)

    def quote(self) -> ChargeQuote:
        """Compute the charge for the current form without changing it.

        Each leg is measured once; the total is summed from those legs.

        Raises:
            InvalidInputError: If the weight is negative or not finite.
        """
        legs = tuple(self.route_legs())
        distance_km = sum((leg.distance_km for leg in legs if leg.distance_km is not None), 0.0)
        factor = route_factor(self._state.weight_t, distance_km)
        return ChargeQuote(
            weight_t=self._state.weight_t,
            total_distance_km=distance_km,
            route_factor=factor,
            charge=classify(factor, self.bands),
            legs=legs,
        )

    def calculate(self) -> ChargeQuote:
        """Compute the charge, show it on the form and announce it."""
        quote = self.quote()
        logger.info(
            "Charge %.2f for %g t over %.2f km (route factor %.4f)",
            quote.charge,
            quote.weight_t,
            quote.total_distance_km,
            quote.route_factor,
        )
        self.dispatch(ShowResult(quote.result_text))
        self.event_bus.publish(ChargesCalculated(quote=quote))
        return quote

    def details(self) -> str:
        """Weight and total distance of the current form."""
        return self.quote().details_text
