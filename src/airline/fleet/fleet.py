"""Ordered collection of the planes owned by an airline.

Typical usage:
    fleet = Fleet()
    fleet.add(CargoAircraft(AircraftVariant.BOEING_747, "C1", 50000))
    fleet.add(PassengerPlane(AircraftVariant.BOEING_737, "P1", 120))
    fleet.sort_by_weight()
    print(fleet.total_weight)  # 269840.0
"""

import math
from collections.abc import Iterable, Iterator

from airline.core.logging_system import get_logger
from airline.fleet.exceptions import InvalidPlaneError
from airline.fleet.plane import Plane

logger = get_logger(__name__)


class Fleet:
    """Ordered sequence of planes.

    Planes keep insertion order until sort_by_weight() reorders them. Only
    planes passing check_admission() are admitted through add().

    Examples:
        >>> fleet = Fleet()
        >>> fleet.add(PassengerPlane(AircraftVariant.AIRBUS_A320, "X1", 150))
        >>> fleet.total_weight
        46050.0
    """

    def __init__(self) -> None:
        """Initialize an empty fleet."""
        self._planes: list[Plane] = []

    @classmethod
    def from_trusted(cls, planes: Iterable[Plane]) -> "Fleet":
        """Build a fleet without running the admission checks.

        Used when rebuilding a fleet from a persisted file, whose contents are
        taken as they are. Call validate() on the result to check them.

        Args:
            planes: Planes in the order they should be kept.

        Returns:
            New Fleet holding the given planes.
        """
        fleet = cls()
        fleet._planes.extend(planes)
        return fleet

    @staticmethod
    def check_admission(plane: Plane | None) -> None:
        """Check that a plane may enter a fleet.

        Args:
            plane: Candidate plane.

        Raises:
            InvalidPlaneError: If the plane is None or has no variant, if its
                number is empty or holds control characters, or if its
                payload is infinite or NaN.
        """
        if plane is None:
            raise InvalidPlaneError("Plane is missing")
        if not plane.variant.is_specified:
            raise InvalidPlaneError(f"Plane {plane.number!r} has no aircraft variant")
        if not plane.number:
            raise InvalidPlaneError("Plane number is empty")
        # Control characters cannot be stored in XML attributes
        if not plane.number.isprintable():
            raise InvalidPlaneError(f"Plane number {plane.number!r} contains control characters")
        if isinstance(plane.payload, float) and not math.isfinite(plane.payload):
            raise InvalidPlaneError(f"Plane {plane.number!r} has a non-finite payload {plane.payload!r}")

    def add(self, plane: Plane | None) -> None:
        """Append a plane to the fleet.

        Args:
            plane: Plane to add.

        Raises:
            InvalidPlaneError: If the plane fails the admission checks. The
                fleet is left unchanged.
        """
        self.check_admission(plane)
        self._planes.append(plane)  # type: ignore[arg-type]
        logger.debug("Added %r, fleet size %d", plane, len(self._planes))

    def validate(self) -> None:
        """Run the admission checks over every plane in the fleet.

        Raises:
            InvalidPlaneError: On the first plane that fails them.
        """
        for plane in self._planes:
            self.check_admission(plane)

    @property
    def total_weight(self) -> float:
        """Sum of takeoff weights in kilograms (0.0 for an empty fleet)."""
        return float(sum(plane.takeoff_weight for plane in self._planes))

    @property
    def average_weight(self) -> float:
        """Mean takeoff weight in kilograms (0.0 for an empty fleet)."""
        if not self._planes:
            return 0.0
        return self.total_weight / len(self._planes)

    def sort_by_weight(self) -> None:
        """Reorder the fleet by ascending takeoff weight.

        The sort is stable: planes of equal weight keep their relative order.
        """
        self._planes.sort(key=lambda plane: plane.takeoff_weight)
        logger.debug("Sorted fleet of %d planes by takeoff weight", len(self._planes))

    def planes(self) -> tuple[Plane, ...]:
        """Get the planes in their current order.

        Returns:
            Snapshot of the contents. Later changes to the fleet (add, sort,
            load) are not reflected in it.
        """
        return tuple(self._planes)

    def __len__(self) -> int:
        return len(self._planes)

    def __iter__(self) -> Iterator[Plane]:
        return iter(self.planes())

    def __repr__(self) -> str:
        return f"Fleet(planes={len(self._planes)})"
