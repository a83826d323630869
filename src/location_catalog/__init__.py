from .location import Coordinates, Location
from .location_catalog import LocationCatalog

__all__ = [
    "Coordinates",
    "Location",
    "LocationCatalog",
]
