"""Fleet data model.

Aircraft variants with their empty weights, the two plane kinds with their
takeoff weight formulas, and the Fleet collection.
"""

from airline.fleet.exceptions import (
    FleetError,
    FleetIOError,
    InvalidPlaneError,
    MalformedDataError,
    UnresolvedVariantError,
)
from airline.fleet.fleet import Fleet
from airline.fleet.plane import (
    PASSENGER_MASS_KG,
    CargoAircraft,
    PassengerPlane,
    Plane,
    PlaneKind,
    create_plane,
)
from airline.fleet.variants import EMPTY_WEIGHTS, AircraftVariant, get_empty_weight

__all__ = [
    "EMPTY_WEIGHTS",
    "PASSENGER_MASS_KG",
    "AircraftVariant",
    "CargoAircraft",
    "Fleet",
    "FleetError",
    "FleetIOError",
    "InvalidPlaneError",
    "MalformedDataError",
    "PassengerPlane",
    "Plane",
    "PlaneKind",
    "UnresolvedVariantError",
    "create_plane",
    "get_empty_weight",
]
