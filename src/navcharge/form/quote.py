"""Charge quote for a completed form."""

from dataclasses import dataclass

from navcharge.navigation.route import RouteLeg


@dataclass(frozen=True)
class ChargeQuote:
    """Result of a charge calculation.

    Attributes:
        weight_t: Weight charged, in tonnes
        total_distance_km: Route distance, in kilometres
        route_factor: Combined weight/distance factor
        charge: Charge in currency units
        legs: Route legs the distance was summed from
    """

    weight_t: float
    total_distance_km: float
    route_factor: float
    charge: float
    legs: tuple[RouteLeg, ...] = ()

    @property
    def result_text(self) -> str:
        return f"Air Navigation Charges: ${self.charge:.2f}"

    @property
    def details_text(self) -> str:
        return f"Weight: {self.weight_t:g} Tonnes\nTotal Distance: {self.total_distance_km:.2f} km"
