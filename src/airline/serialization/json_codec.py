"""Tagged JSON fleet format.

The document is an array with one object per plane. The "$type" member is the
kind discriminator:

    [
      {
        "$type": "PassengerPlane",
        "Type": "Boeing737",
        "Number": "P1",
        "Count": 120,
        "EmptyWeight": 26400.0
      }
    ]

A document consisting of `null` decodes to an empty fleet.
"""

import json
from typing import Any

from airline.core.logging_system import get_logger
from airline.fleet.exceptions import InvalidPlaneError, MalformedDataError
from airline.fleet.fleet import Fleet
from airline.fleet.plane import Plane
from airline.serialization.base import (
    EMPTY_WEIGHT_FIELD,
    NUMBER_FIELD,
    PAYLOAD_FIELDS,
    TYPE_FIELD,
    FleetCodec,
    FleetFormat,
    build_plane,
    resolve_kind,
)

logger = get_logger(__name__)

DISCRIMINATOR_FIELD = "$type"


class JsonFleetCodec(FleetCodec):
    """Fleet codec for the tagged JSON format."""

    format = FleetFormat.JSON

    def __init__(self, strict: bool = False, indent: int = 2) -> None:
        super().__init__(strict)
        self.indent = indent

    def encode(self, fleet: Fleet) -> bytes:
        records = [self._plane_to_record(plane) for plane in fleet.planes()]
        try:
            text = json.dumps(records, indent=self.indent, ensure_ascii=False, allow_nan=False)
        except ValueError as e:
            raise InvalidPlaneError(f"Cannot encode fleet as JSON: {e}") from e
        return (text + "\n").encode("utf-8")

    def decode_planes(self, data: bytes) -> list[Plane]:
        try:
            document = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedDataError(f"Invalid JSON fleet data: {e}") from e

        if document is None:
            return []
        if not isinstance(document, list):
            raise MalformedDataError("JSON fleet data must be an array of planes")

        planes = []
        for index, record in enumerate(document):
            if not isinstance(record, dict):
                raise MalformedDataError(f"Plane #{index} is not a JSON object")
            planes.append(self._record_to_plane(record))

        logger.debug("Decoded %d planes from JSON", len(planes))
        return planes

    @staticmethod
    def _plane_to_record(plane: Plane) -> dict[str, Any]:
        record: dict[str, Any] = {
            DISCRIMINATOR_FIELD: plane.kind.value,
            TYPE_FIELD: plane.variant.value,
            NUMBER_FIELD: plane.number,
            PAYLOAD_FIELDS[plane.kind]: plane.payload,
        }
        if plane.variant.is_specified:
            record[EMPTY_WEIGHT_FIELD] = plane.empty_weight
        return record

    @staticmethod
    def _record_to_plane(record: dict[str, Any]) -> Plane:
        discriminator = record.get(DISCRIMINATOR_FIELD)
        if not isinstance(discriminator, str):
            raise MalformedDataError(f"Plane record without {DISCRIMINATOR_FIELD!r}: {record!r}")

        kind = resolve_kind(discriminator)

        field = PAYLOAD_FIELDS[kind]
        payload = record.get(field)
        # bool is an int subclass; reject true/false
        if isinstance(payload, bool) or not isinstance(payload, (int, float)):
            raise MalformedDataError(f"{kind.value}: missing or non-numeric {field!r}")

        return build_plane(kind, record.get(TYPE_FIELD), record.get(NUMBER_FIELD), payload)
