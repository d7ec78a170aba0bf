"""Aircraft types and their chargeable weights.

Typical usage:
    from navcharge.aircraft import AircraftCatalog

    catalog = AircraftCatalog()
    catalog.load_from_csv("data/aircraft-data.csv")
    boeing_models = catalog.aircraft_for("Boeing")
"""

from navcharge.aircraft.catalog import AircraftCatalog, AircraftType

__all__ = [
    "AircraftCatalog",
    "AircraftType",
]
