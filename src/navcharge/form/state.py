"""Form state and the actions that change it.

The charges form is an immutable FormState value. Every user interaction is
an action, and ``reduce`` returns a new state for it without touching the old
one. Values derived from the state, such as the aircraft offered for the
chosen manufacturer, are computed on demand by selector functions.

Typical usage:
    state = FormState()
    state = reduce(state, SelectManufacturer("Airbus"), catalog)
    state = reduce(state, SelectAircraft("A320neo"), catalog)
    state = reduce(state, AddWaypoint("ALPHA"), catalog)
"""

import logging
import math
from dataclasses import dataclass, replace

from navcharge.aircraft.catalog import AircraftCatalog, AircraftType
from navcharge.charges.classifier import InvalidInputError

logger = logging.getLogger(__name__)

OTHER_AIRCRAFT = "Other"
RESULT_PLACEHOLDER = "Charges will be displayed here."


@dataclass(frozen=True)
class FormState:
    """Snapshot of the charges form.

    Attributes:
        manufacturer: Selected manufacturer, "" when none
        aircraft: Selected model, OTHER_AIRCRAFT for a free-text entry, "" when none
        other_aircraft: Free-text model when aircraft is OTHER_AIRCRAFT
        weight_t: Weight in tonnes used for charging
        route: Waypoint names in the order they were added
        result: Last result line shown to the user
    """

    manufacturer: str = ""
    aircraft: str = ""
    other_aircraft: str = ""
    weight_t: float = 0.0
    route: tuple[str, ...] = ()
    result: str = ""


@dataclass(frozen=True)
class SelectManufacturer:
    manufacturer: str


@dataclass(frozen=True)
class SelectAircraft:
    model: str


@dataclass(frozen=True)
class EnterOtherAircraft:
    model: str


@dataclass(frozen=True)
class SetWeight:
    weight_t: float


@dataclass(frozen=True)
class AddWaypoint:
    name: str


@dataclass(frozen=True)
class RemoveWaypoint:
    index: int


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class ShowResult:
    """Record the text of the latest calculation."""

    text: str


Action = (
    SelectManufacturer
    | SelectAircraft
    | EnterOtherAircraft
    | SetWeight
    | AddWaypoint
    | RemoveWaypoint
    | Clear
    | ShowResult
)


def aircraft_options(catalog: AircraftCatalog, manufacturer: str) -> list[AircraftType]:
    """Aircraft offered for the selected manufacturer.

    Recomputed on every call; never cache the result across catalog or
    state changes.
    """
    return catalog.aircraft_for(manufacturer)


def reduce(state: FormState, action: Action, catalog: AircraftCatalog) -> FormState:
    """Apply an action to the form.

    Args:
        state: Current form state (left unchanged)
        action: Action to apply
        catalog: Aircraft catalog used to look up weights

    Returns:
        The new form state

    Raises:
        InvalidInputError: If SetWeight carries a negative, NaN or infinite weight.
        TypeError: If the action type is unknown.
    """
    if isinstance(action, SelectManufacturer):
        return replace(state, manufacturer=action.manufacturer, aircraft="", other_aircraft="")

    if isinstance(action, SelectAircraft):
        selected = None
        if action.model != OTHER_AIRCRAFT:
            for option in aircraft_options(catalog, state.manufacturer):
                if option.model == action.model:
                    selected = option
                    break
        weight_t = selected.weight_t if selected else 0.0
        return replace(state, aircraft=action.model, other_aircraft="", weight_t=weight_t)

    if isinstance(action, EnterOtherAircraft):
        if state.aircraft != OTHER_AIRCRAFT:
            logger.debug("Ignoring free-text aircraft %r: 'Other' not selected", action.model)
            return state
        return replace(state, other_aircraft=action.model)

    if isinstance(action, SetWeight):
        if not (math.isfinite(action.weight_t) and action.weight_t >= 0):
            raise InvalidInputError(
                f"weight must be a non-negative finite number of tonnes, got {action.weight_t}"
            )
        return replace(state, weight_t=float(action.weight_t))

    if isinstance(action, AddWaypoint):
        if not action.name.strip():
            return state
        return replace(state, route=state.route + (action.name,))

    if isinstance(action, RemoveWaypoint):
        if not 0 <= action.index < len(state.route):
            logger.warning("No route point at index %d", action.index)
            return state
        route = state.route[: action.index] + state.route[action.index + 1 :]
        return replace(state, route=route)

    if isinstance(action, Clear):
        return FormState(result=RESULT_PLACEHOLDER)

    if isinstance(action, ShowResult):
        return replace(state, result=action.text)

    raise TypeError(f"Unknown form action: {action!r}")
