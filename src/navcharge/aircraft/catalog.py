"""Aircraft type catalog.

This module loads the aircraft types a user can pick from and answers the
two questions the form asks of it: which manufacturers exist, and which
models (with their weights) belong to a manufacturer.

Typical usage:
    catalog = AircraftCatalog()
    catalog.load_from_csv("data/aircraft-data.csv")

    for manufacturer in catalog.manufacturers():
        models = catalog.aircraft_for(manufacturer)
"""

import csv
import logging
import math
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AircraftType:
    """Aircraft model with its chargeable weight.

    Attributes:
        manufacturer: Manufacturer name (e.g., "Airbus")
        model: Model designation (e.g., "A320neo")
        weight_t: Weight in tonnes used for charging

    Examples:
        >>> AircraftType(manufacturer="Airbus", model="A320neo", weight_t=79.0)
    """

    manufacturer: str
    model: str
    weight_t: float

    def __str__(self) -> str:
        return f"{self.manufacturer} {self.model} ({self.weight_t:g} t)"


class AircraftCatalog:
    """Catalog of aircraft types, kept in load order.

    Duplicate (manufacturer, model) pairs are all kept; lookups return the
    first match.
    """

    def __init__(self) -> None:
        self.aircraft: list[AircraftType] = []

    def add_aircraft(self, aircraft: AircraftType) -> None:
        self.aircraft.append(aircraft)

    def manufacturers(self) -> list[str]:
        """Return unique manufacturer names in first-seen order."""
        return list(dict.fromkeys(a.manufacturer for a in self.aircraft))

    def aircraft_for(self, manufacturer: str) -> list[AircraftType]:
        """Return the aircraft built by a manufacturer.

        The list is rebuilt on every call so it always reflects the current
        catalog.

        Args:
            manufacturer: Exact manufacturer name

        Returns:
            Matching aircraft in load order (empty if none)
        """
        return [a for a in self.aircraft if a.manufacturer == manufacturer]

    def find_aircraft(self, manufacturer: str, model: str) -> AircraftType | None:
        """Find an aircraft by manufacturer and model.

        Returns:
            AircraftType if found, None otherwise
        """
        for aircraft in self.aircraft:
            if aircraft.manufacturer == manufacturer and aircraft.model == model:
                return aircraft
        return None

    def load_from_csv(self, csv_path: str | Path) -> int:
        """Load aircraft types from CSV file.

        Expected CSV format (header row required):
            manufacturer,model,weight

        Weight is in tonnes. Rows with a missing field, a negative weight, or
        a weight that is not a finite number are skipped.

        Args:
            csv_path: Path to CSV file

        Returns:
            Number of aircraft loaded

        Raises:
            FileNotFoundError: If CSV file doesn't exist
        """
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(f"Aircraft CSV not found: {csv_path}")

        count = 0
        with open(path, encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)

            for line_number, row in enumerate(reader, start=2):
                try:
                    manufacturer = (row["manufacturer"] or "").strip()
                    model = (row["model"] or "").strip()
                    if not manufacturer or not model:
                        raise ValueError("empty manufacturer or model")

                    weight_t = float(row["weight"])
                    if not (math.isfinite(weight_t) and weight_t >= 0):
                        raise ValueError(f"invalid weight {weight_t}")
                except (KeyError, TypeError, ValueError) as e:
                    logger.warning("Skipping invalid aircraft row %d: %s", line_number, e)
                    continue

                self.add_aircraft(AircraftType(manufacturer, model, weight_t))
                count += 1

        logger.info("Loaded %d aircraft from %s", count, csv_path)
        return count

    def count(self) -> int:
        """Return total number of aircraft in catalog."""
        return len(self.aircraft)

    def clear(self) -> None:
        """Remove all aircraft from catalog."""
        self.aircraft.clear()
