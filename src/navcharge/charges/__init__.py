"""Air navigation charge bands and classification."""

from navcharge.charges.classifier import (
    DEFAULT_CHARGE_BANDS,
    ChargeBand,
    ChargeScheduleError,
    InvalidInputError,
    calculate_charge,
    classify,
    route_factor,
    validate_bands,
)

__all__ = [
    "DEFAULT_CHARGE_BANDS",
    "ChargeBand",
    "ChargeScheduleError",
    "InvalidInputError",
    "calculate_charge",
    "classify",
    "route_factor",
    "validate_bands",
]
