"""Airline service: the commands the operator interface issues to the core.

The Airline owns the live Fleet. Loading swaps the fleet only after the file
has been decoded completely, so a failed load leaves the current fleet as it
was.

Typical usage:
    airline = Airline()
    airline.add_plane(PlaneKind.PASSENGER, AircraftVariant.AIRBUS_A320, "X1", 150)
    airline.save("fleet.xml")
    airline.load("fleet.xml")
"""

from pathlib import Path

from airline.core.config import StorageSettings
from airline.core.logging_system import get_logger
from airline.fleet.fleet import Fleet
from airline.fleet.plane import Plane, PlaneKind, create_plane
from airline.fleet.variants import AircraftVariant
from airline.serialization import FleetFormat, get_codec

logger = get_logger(__name__)


class Airline:
    """Owner of a fleet, exposing the operator commands.

    Examples:
        >>> airline = Airline()
        >>> airline.add_plane(PlaneKind.CARGO, AircraftVariant.BOEING_747, "C1", 50000)
        >>> airline.average_weight()
        236000.0
    """

    def __init__(self, settings: StorageSettings | None = None, fleet: Fleet | None = None) -> None:
        """Initialize the airline.

        Args:
            settings: Storage settings (defaults if None).
            fleet: Starting fleet (empty if None).
        """
        self.settings = settings or StorageSettings()
        self._fleet = fleet if fleet is not None else Fleet()

    @property
    def fleet(self) -> Fleet:
        """The live fleet."""
        return self._fleet

    def add_plane(self, kind: PlaneKind, variant: AircraftVariant, number: str, payload: float) -> Plane:
        """Create a plane and add it to the fleet.

        Args:
            kind: Passenger or cargo.
            variant: Aircraft model.
            number: Tail/registration number.
            payload: Passenger count or cargo weight (kg).

        Returns:
            The added plane.

        Raises:
            InvalidPlaneError: If the plane fails the admission checks.
            ValueError: If a passenger count is not a whole number.
        """
        plane = create_plane(kind, variant, number, payload)
        self._fleet.add(plane)
        logger.info("Added %s %s (%s)", kind.value, number, variant.value)
        return plane

    def list_planes(self) -> tuple[Plane, ...]:
        """Planes in their current order."""
        return self._fleet.planes()

    def sort_by_weight(self) -> None:
        """Sort the fleet by ascending takeoff weight."""
        self._fleet.sort_by_weight()

    def total_weight(self) -> float:
        """Total takeoff weight of the fleet in kilograms."""
        return self._fleet.total_weight

    def average_weight(self) -> float:
        """Average takeoff weight in kilograms (0.0 when the fleet is empty)."""
        return self._fleet.average_weight

    def resolve_format(self, path: str | Path, fmt: FleetFormat | str | None = None) -> FleetFormat:
        """Pick the file format for a path.

        An explicit fmt wins; otherwise the path suffix decides, falling back
        to the configured default format.
        """
        if isinstance(fmt, FleetFormat):
            return fmt
        if fmt is not None:
            return FleetFormat.from_name(fmt)
        return FleetFormat.from_path(path, default=FleetFormat.from_name(self.settings.default_format))

    def save(self, path: str | Path, fmt: FleetFormat | str | None = None) -> None:
        """Write the fleet to a file.

        Raises:
            FleetIOError: If the file cannot be written.
        """
        fleet_format = self.resolve_format(path, fmt)
        get_codec(fleet_format).save(self._fleet, path)

    def load(self, path: str | Path, fmt: FleetFormat | str | None = None) -> None:
        """Replace the fleet with the contents of a file.

        Raises:
            FleetIOError: If the file cannot be read.
            MalformedDataError: If the contents are invalid. The current
                fleet is kept.
        """
        fleet_format = self.resolve_format(path, fmt)
        loaded = get_codec(fleet_format, strict=self.settings.strict_load).load(path)

        previous = len(self._fleet)
        self._fleet = loaded
        logger.info("Replaced fleet of %d planes with %d loaded planes", previous, len(loaded))
