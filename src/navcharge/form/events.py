"""Events published by the form controller."""

from dataclasses import dataclass

from navcharge.core.event_bus import Event
from navcharge.form.quote import ChargeQuote
from navcharge.form.state import Action, FormState


@dataclass(frozen=True)
class FormStateChanged(Event):
    """An action was applied to the form.

    Attributes:
        action: The action that was dispatched
        state: The form state after the action
    """

    action: Action
    state: FormState


@dataclass(frozen=True)
class ChargesCalculated(Event):
    """A charge was calculated for the current form."""

    quote: ChargeQuote
