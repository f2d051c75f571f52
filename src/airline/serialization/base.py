"""Common contract of the fleet codecs.

A codec turns a Fleet into bytes and back, and reads/writes those bytes from
exactly one file per call. Each persisted plane record carries:

    - the kind discriminator ("PassengerPlane" or "CargoAircraft")
    - Type: the variant name (e.g. "Boeing737")
    - Number: the tail/registration number
    - Count or CargoWeight: the kind-specific payload
    - EmptyWeight: informational only, re-derived from Type on decode

Decoding trusts the file by default: planes are rebuilt in file order without
the Fleet.add() admission checks, so a hand-edited file can yield a plane with
an unspecified variant or an empty number. Codecs built with strict=True run
Fleet.validate() on the decoded fleet and report such planes as
MalformedDataError instead.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

from airline.core.logging_system import get_logger
from airline.fleet.exceptions import FleetIOError, InvalidPlaneError, MalformedDataError
from airline.fleet.fleet import Fleet
from airline.fleet.plane import Plane, PlaneKind, create_plane
from airline.fleet.variants import AircraftVariant

logger = get_logger(__name__)

TYPE_FIELD = "Type"
NUMBER_FIELD = "Number"
EMPTY_WEIGHT_FIELD = "EmptyWeight"

# Name of the kind-specific payload field in persisted records
PAYLOAD_FIELDS: dict[PlaneKind, str] = {
    PlaneKind.PASSENGER: "Count",
    PlaneKind.CARGO: "CargoWeight",
}


class FleetFormat(Enum):
    """Persisted fleet file format."""

    XML = "xml"
    JSON = "json"

    @classmethod
    def from_name(cls, name: str) -> "FleetFormat":
        """Resolve a format from its name ("xml", "json"; case-insensitive).

        Raises:
            ValueError: If the name is not a known format.
        """
        try:
            return cls(name.strip().lower().lstrip("."))
        except ValueError:
            raise ValueError(f"Unknown fleet format: {name!r}") from None

    @classmethod
    def from_path(cls, path: str | Path, default: "FleetFormat | None" = None) -> "FleetFormat":
        """Infer the format from a file suffix.

        Args:
            path: File path.
            default: Format used when the suffix is not recognised.

        Returns:
            Matching FleetFormat.

        Raises:
            ValueError: If the suffix is unknown and no default is given.
        """
        suffix = Path(path).suffix
        try:
            return cls.from_name(suffix)
        except ValueError:
            if default is None:
                raise
            return default


class FleetCodec(ABC):
    """Encode/decode pair for one fleet file format.

    Attributes:
        format: Format handled by the codec.
        strict: Whether decoded fleets are checked against the admission rules.
    """

    format: ClassVar[FleetFormat]

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    @abstractmethod
    def encode(self, fleet: Fleet) -> bytes:
        """Serialize every plane of the fleet, in order.

        Raises:
            InvalidPlaneError: If a plane cannot be represented in the format
                (e.g. a number with control characters, a NaN payload).
        """

    @abstractmethod
    def decode_planes(self, data: bytes) -> list[Plane]:
        """Rebuild the persisted planes, in file order.

        Raises:
            MalformedDataError: If the data does not match the schema.
        """

    def decode(self, data: bytes) -> Fleet:
        """Rebuild a fleet from serialized data.

        Args:
            data: Bytes produced by encode() (or a compatible writer).

        Returns:
            New Fleet holding the decoded planes.

        Raises:
            MalformedDataError: If the data does not match the schema, or, in
                strict mode, if a decoded plane fails the admission checks.
        """
        fleet = Fleet.from_trusted(self.decode_planes(data))

        if self.strict:
            try:
                fleet.validate()
            except InvalidPlaneError as e:
                raise MalformedDataError(f"Invalid plane in fleet data: {e}") from e

        return fleet

    def save(self, fleet: Fleet, path: str | Path) -> None:
        """Write the fleet to a file, replacing any previous contents.

        Raises:
            FleetIOError: If the file cannot be written.
            InvalidPlaneError: If a plane cannot be encoded. Nothing is written.
        """
        path = Path(path)
        data = self.encode(fleet)

        try:
            with path.open("wb") as f:
                f.write(data)
        except OSError as e:
            raise FleetIOError(f"Cannot write fleet file {path}: {e}") from e

        logger.info("Saved %d planes to %s (%s)", len(fleet), path, self.format.value)

    def load(self, path: str | Path) -> Fleet:
        """Read a fleet from a file.

        Raises:
            FleetIOError: If the file is missing or cannot be read.
            MalformedDataError: If the contents do not match the schema.
        """
        path = Path(path)

        try:
            with path.open("rb") as f:
                data = f.read()
        except OSError as e:
            raise FleetIOError(f"Cannot read fleet file {path}: {e}") from e

        fleet = self.decode(data)
        logger.info("Loaded %d planes from %s (%s)", len(fleet), path, self.format.value)
        return fleet


def resolve_kind(discriminator: Any) -> PlaneKind:
    """Map a persisted discriminator to its plane kind.

    Raises:
        MalformedDataError: If the discriminator names no known kind.
    """
    try:
        return PlaneKind(discriminator)
    except ValueError:
        raise MalformedDataError(f"Unknown plane type: {discriminator!r}") from None


def build_plane(kind: PlaneKind, variant_name: Any, number: Any, payload: float) -> Plane:
    """Rebuild one plane from persisted values.

    Args:
        kind: Plane kind, from resolve_kind().
        variant_name: Variant name as persisted.
        number: Tail number as persisted.
        payload: Already parsed payload value.

    Returns:
        The concrete plane.

    Raises:
        MalformedDataError: If the variant is unknown, the number is missing,
            or the payload is not acceptable for the kind.
    """
    if not isinstance(variant_name, str):
        raise MalformedDataError(f"{kind.value}: missing or invalid {TYPE_FIELD!r}")
    try:
        variant = AircraftVariant(variant_name)
    except ValueError:
        raise MalformedDataError(f"{kind.value}: unknown aircraft variant {variant_name!r}") from None

    if not isinstance(number, str):
        raise MalformedDataError(f"{kind.value}: missing or invalid {NUMBER_FIELD!r}")

    try:
        return create_plane(kind, variant, number, payload)
    except ValueError as e:
        raise MalformedDataError(f"{kind.value} {number!r}: {e}") from e
