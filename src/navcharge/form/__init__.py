"""Charges form: immutable state, actions, and the controller that runs them.

Typical usage:
    from navcharge.form import AddWaypoint, FormController, SelectAircraft

    controller = FormController(aircraft_catalog, waypoint_catalog)
    controller.dispatch(AddWaypoint("ALPHA"))
    print(controller.calculate().result_text)
"""

from navcharge.form.controller import FormController
from navcharge.form.events import ChargesCalculated, FormStateChanged
from navcharge.form.quote import ChargeQuote
from navcharge.form.state import (
    OTHER_AIRCRAFT,
    RESULT_PLACEHOLDER,
    AddWaypoint,
    Clear,
    EnterOtherAircraft,
    FormState,
    RemoveWaypoint,
    SelectAircraft,
    SelectManufacturer,
    SetWeight,
    ShowResult,
    aircraft_options,
    reduce,
)

__all__ = [
    "OTHER_AIRCRAFT",
    "RESULT_PLACEHOLDER",
    "AddWaypoint",
    "ChargeQuote",
    "ChargesCalculated",
    "Clear",
    "EnterOtherAircraft",
    "FormController",
    "FormState",
    "FormStateChanged",
    "RemoveWaypoint",
    "SelectAircraft",
    "SelectManufacturer",
    "SetWeight",
    "ShowResult",
    "aircraft_options",
    "reduce",
]
