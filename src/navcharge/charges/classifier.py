"""Air navigation charge classification.

The charge for a flight is read off a step function of the route factor,
the product of a weight factor and a distance factor:

    weight_factor   = sqrt(weight_t / 50)
    distance_factor = distance_km / 100
    route_factor    = weight_factor * distance_factor

Bands are checked in ascending order and the first band whose exclusive
upper bound exceeds the route factor sets the charge. A route factor that
sits exactly on a threshold therefore falls in the next band up.

Typical usage:
    from navcharge.charges import calculate_charge

    calculate_charge(weight_t=50, distance_km=100)  # 90.0
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass

REFERENCE_WEIGHT_T = 50.0
REFERENCE_DISTANCE_KM = 100.0


class InvalidInputError(ValueError):
    """Raised when a weight or distance cannot be charged."""


class ChargeScheduleError(ValueError):
    """Raised when a charge band table does not cover [0, inf) in order."""


@dataclass(frozen=True)
class ChargeBand:
    """A half-open route factor interval mapped to a fixed charge.

    Attributes:
        upper_bound: Exclusive upper route factor (math.inf for the last band)
        charge: Charge in currency units
    """

    upper_bound: float
    charge: float

    def __str__(self) -> str:
        if math.isinf(self.upper_bound):
            return f"else -> {self.charge:g}"
        return f"<{self.upper_bound:g} -> {self.charge:g}"


DEFAULT_CHARGE_BANDS: tuple[ChargeBand, ...] = (
    ChargeBand(1, 60),
    ChargeBand(2, 90),
    ChargeBand(4, 140),
    ChargeBand(8, 200),
    ChargeBand(12, 235),
    ChargeBand(15, 280),
    ChargeBand(20, 320),
    ChargeBand(25, 365),
    ChargeBand(math.inf, 400),
)


def validate_bands(bands: Iterable[ChargeBand]) -> tuple[ChargeBand, ...]:
    """Check that a band table is a complete ascending step function.

    Args:
        bands: Candidate bands, lowest first

    Returns:
        The bands as a tuple

    Raises:
        ChargeScheduleError: If the table is empty, not strictly ascending,
            has a non-positive or NaN threshold, or does not end unbounded.
    """
    bands = tuple(bands)
    if not bands:
        raise ChargeScheduleError("charge schedule has no bands")

    previous = 0.0
    for band in bands:
        if math.isnan(band.upper_bound) or band.upper_bound <= previous:
            raise ChargeScheduleError(
                f"band thresholds must be positive and strictly ascending: {band}"
            )
        previous = band.upper_bound

    if not math.isinf(bands[-1].upper_bound):
        raise ChargeScheduleError("last band must have no upper bound")

    return bands


def route_factor(weight_t: float, distance_km: float) -> float:
    """Combine weight and distance into the dimensionless route factor.

    Args:
        weight_t: Aircraft weight in tonnes, >= 0
        distance_km: Route distance in kilometres, >= 0

    Returns:
        sqrt(weight_t / 50) * distance_km / 100

    Raises:
        InvalidInputError: If weight or distance is negative, NaN or infinite.
    """
    if not (math.isfinite(weight_t) and weight_t >= 0):
        raise InvalidInputError(
            f"weight must be a non-negative finite number of tonnes, got {weight_t}"
        )
    if not (math.isfinite(distance_km) and distance_km >= 0):
        raise InvalidInputError(
            f"distance must be a non-negative finite number of km, got {distance_km}"
        )

    weight_factor = math.sqrt(weight_t / REFERENCE_WEIGHT_T)
    distance_factor = distance_km / REFERENCE_DISTANCE_KM
    return weight_factor * distance_factor


def classify(factor: float, bands: Iterable[ChargeBand] = DEFAULT_CHARGE_BANDS) -> float:
    """Look up the charge for a route factor.

    Args:
        factor: Route factor
        bands: Band table, ascending by upper bound

    Returns:
        Charge of the first band with factor < upper_bound

    Raises:
        ChargeScheduleError: If no band matches (table not unbounded).
    """
    for band in bands:
        if factor < band.upper_bound:
            return band.charge
    raise ChargeScheduleError(f"no charge band covers route factor {factor}")


def calculate_charge(
    weight_t: float,
    distance_km: float,
    bands: Iterable[ChargeBand] = DEFAULT_CHARGE_BANDS,
) -> float:
    """Calculate the air navigation charge for a flight.

    A zero weight gives a zero route factor and so the lowest band's charge,
    whatever the distance.

    Args:
        weight_t: Aircraft weight in tonnes
        distance_km: Total route distance in kilometres
        bands: Band table, ascending by upper bound

    Returns:
        Charge in currency units

    Raises:
        InvalidInputError: If weight or distance is negative, NaN or infinite.

    Examples:
        >>> calculate_charge(50, 100)
        90
        >>> calculate_charge(200, 1000)
        365
    """
    return classify(route_factor(weight_t, distance_km), bands)
