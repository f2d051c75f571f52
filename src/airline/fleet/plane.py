"""Plane entities and the takeoff weight computation.

A plane is either a PassengerPlane or a CargoAircraft. The set is closed:
PlaneKind names both kinds and Plane refuses any other subclass, so code that
dispatches on `plane.kind` can handle every case.

Typical usage:
    from airline.fleet.plane import CargoAircraft, PassengerPlane
    from airline.fleet.variants import AircraftVariant

    plane = PassengerPlane(AircraftVariant.AIRBUS_A320, "X1", 150)
    print(plane.takeoff_weight)  # 46050.0
"""

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar

from airline.fleet.exceptions import InvalidPlaneError, UnresolvedVariantError
from airline.fleet.variants import AircraftVariant, get_empty_weight

# Mass accounted per passenger (kg)
PASSENGER_MASS_KG = 62.0


class PlaneKind(Enum):
    """Concrete plane kind. Values are the discriminators written to files."""

    PASSENGER = "PassengerPlane"
    CARGO = "CargoAircraft"

    @classmethod
    def from_name(cls, name: str) -> "PlaneKind":
        """Resolve a kind from its discriminator or member name.

        Raises:
            ValueError: If the name matches no kind.
        """
        wanted = name.strip().lower()
        for kind in cls:
            if wanted in (kind.value.lower(), kind.name.lower()):
                return kind
        raise ValueError(f"Unknown plane kind: {name!r}")


class Plane(ABC):
    """Common identity of every plane.

    Attributes:
        kind: Discriminator of the concrete class.
        number: Tail/registration number.
        variant: Aircraft model. Setting it refreshes `empty_weight`.

    Note:
        Construction does not validate anything. Fleet.add() checks that the
        variant is specified and the number is not empty.
    """

    kind: ClassVar[PlaneKind]
    _implemented_kinds: ClassVar[set[PlaneKind]] = set()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        kind = cls.__dict__.get("kind")
        if not isinstance(kind, PlaneKind):
            raise TypeError(f"{cls.__name__} must declare a PlaneKind 'kind'")
        if kind in Plane._implemented_kinds:
            raise TypeError(f"Plane kind {kind.value} is already implemented")
        Plane._implemented_kinds.add(kind)

    def __init__(self, variant: AircraftVariant, number: str) -> None:
        self._empty_weight: float | None = None
        self.variant = variant
        self.number = number

    @property
    def variant(self) -> AircraftVariant:
        """Aircraft model."""
        return self._variant

    @variant.setter
    def variant(self, value: AircraftVariant) -> None:
        self._variant = value
        self._empty_weight = get_empty_weight(value) if value.is_specified else None

    @property
    def empty_weight(self) -> float:
        """Empty weight of the current variant in kilograms.

        Raises:
            UnresolvedVariantError: If the variant is UNSPECIFIED.
        """
        if self._empty_weight is None:
            raise UnresolvedVariantError(f"Plane {self.number!r} has no aircraft variant")
        return self._empty_weight

    @property
    @abstractmethod
    def payload(self) -> float:
        """Kind-specific payload value (passenger count or cargo weight)."""

    @property
    @abstractmethod
    def takeoff_weight(self) -> float:
        """Takeoff weight in kilograms.

        Raises:
            UnresolvedVariantError: If the variant is UNSPECIFIED.
        """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return (self.kind, self.variant, self.number, self.payload) == (
            other.kind,
            other.variant,
            other.number,
            other.payload,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(variant={self.variant.name}, number={self.number!r}, payload={self.payload!r})"


class PassengerPlane(Plane):
    """Plane carrying passengers.

    takeoff_weight = PASSENGER_MASS_KG * passenger_count + empty_weight

    Examples:
        >>> PassengerPlane(AircraftVariant.BOEING_737, "P1", 120).takeoff_weight
        33840.0
    """

    kind = PlaneKind.PASSENGER

    def __init__(self, variant: AircraftVariant, number: str, passenger_count: int = 0) -> None:
        super().__init__(variant, number)
        self.passenger_count = passenger_count

    @property
    def payload(self) -> int:
        return self.passenger_count

    @property
    def takeoff_weight(self) -> float:
        return PASSENGER_MASS_KG * self.passenger_count + self.empty_weight


class CargoAircraft(Plane):
    """Plane carrying freight.

    takeoff_weight = cargo_weight + empty_weight
    """

    kind = PlaneKind.CARGO

    def __init__(self, variant: AircraftVariant, number: str, cargo_weight: float = 0.0) -> None:
        super().__init__(variant, number)
        self.cargo_weight = cargo_weight

    @property
    def payload(self) -> float:
        return self.cargo_weight

    @property
    def takeoff_weight(self) -> float:
        return self.cargo_weight + self.empty_weight


def create_plane(kind: PlaneKind, variant: AircraftVariant, number: str, payload: float) -> Plane:
    """Build the concrete plane matching a kind.

    Args:
        kind: Plane kind discriminator.
        variant: Aircraft model.
        number: Tail/registration number.
        payload: Passenger count for PASSENGER, cargo weight (kg) for CARGO.

    Returns:
        New PassengerPlane or CargoAircraft.

    Raises:
        ValueError: If a passenger count is not a whole number.
        InvalidPlaneError: If the payload is infinite or NaN.

    Examples:
        >>> create_plane(PlaneKind.CARGO, AircraftVariant.BOEING_747, "C1", 50000)
        CargoAircraft(variant=BOEING_747, number='C1', payload=50000.0)
    """
    if kind is PlaneKind.PASSENGER:
        # float() would round counts above 2**53
        if isinstance(payload, int):
            return PassengerPlane(variant, number, int(payload))
        count = float(payload)
        if not math.isfinite(count):
            raise InvalidPlaneError(f"Passenger count must be finite, got {payload!r}")
        if not count.is_integer():
            raise ValueError(f"Passenger count must be a whole number, got {payload!r}")
        return PassengerPlane(variant, number, int(count))

    weight = float(payload)
    if not math.isfinite(weight):
        raise InvalidPlaneError(f"Cargo weight must be finite, got {payload!r}")
    return CargoAircraft(variant, number, weight)
