"""Structured XML fleet format.

The root element holds one child per plane; the child's tag is the kind
discriminator and its attributes carry the plane fields:

    <?xml version='1.0' encoding='utf-8'?>
    <ArrayOfPlane>
      <PassengerPlane Type="Boeing737" Number="P1" Count="120" EmptyWeight="26400.0"/>
      <CargoAircraft Type="Boeing747" Number="C1" CargoWeight="50000.0" EmptyWeight="186000.0"/>
    </ArrayOfPlane>
"""

import math
from typing import cast

from lxml import etree

from airline.core.logging_system import get_logger
from airline.fleet.exceptions import InvalidPlaneError, MalformedDataError
from airline.fleet.fleet import Fleet
from airline.fleet.plane import Plane, PlaneKind
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

ROOT_TAG = "ArrayOfPlane"


class XmlFleetCodec(FleetCodec):
    """Fleet codec for the structured XML format."""

    format = FleetFormat.XML

    def encode(self, fleet: Fleet) -> bytes:
        root = etree.Element(ROOT_TAG)

        for plane in fleet.planes():
            element = etree.SubElement(root, plane.kind.value)
            element.set(TYPE_FIELD, plane.variant.value)
            try:
                element.set(NUMBER_FIELD, plane.number)
            except (TypeError, ValueError) as e:
                raise InvalidPlaneError(f"Plane number {plane.number!r} cannot be stored in XML: {e}") from e
            element.set(PAYLOAD_FIELDS[plane.kind], _format_payload(plane))
            if plane.variant.is_specified:
                element.set(EMPTY_WEIGHT_FIELD, repr(plane.empty_weight))

        return cast(bytes, etree.tostring(root, xml_declaration=True, encoding="utf-8", pretty_print=True))

    def decode_planes(self, data: bytes) -> list[Plane]:
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            root = cast(etree._Element, etree.fromstring(data, parser))
        except (etree.XMLSyntaxError, ValueError) as e:
            raise MalformedDataError(f"Invalid XML fleet data: {e}") from e

        if root is None:
            raise MalformedDataError("XML fleet data is empty")
        if root.tag != ROOT_TAG:
            raise MalformedDataError(f"Expected <{ROOT_TAG}> root element, got <{root.tag}>")

        planes = []
        for element in root:
            # Comments and processing instructions have non-string tags
            if not isinstance(element.tag, str):
                continue
            planes.append(_element_to_plane(element))

        logger.debug("Decoded %d planes from XML", len(planes))
        return planes


def _format_payload(plane: Plane) -> str:
    payload = plane.payload
    if isinstance(payload, float) and not math.isfinite(payload):
        raise InvalidPlaneError(f"Plane {plane.number!r} has a non-finite payload {payload!r}")
    if plane.kind is PlaneKind.PASSENGER:
        return str(int(payload))
    return repr(float(payload))


def _element_to_plane(element: etree._Element) -> Plane:
    kind = resolve_kind(element.tag)

    field = PAYLOAD_FIELDS[kind]
    raw = element.get(field)
    if raw is None:
        raise MalformedDataError(f"{kind.value}: missing {field!r} attribute (line {element.sourceline})")

    try:
        payload: float = int(raw) if kind is PlaneKind.PASSENGER else float(raw)
    except ValueError:
        raise MalformedDataError(f"{kind.value}: non-numeric {field!r} value {raw!r}") from None

    return build_plane(kind, element.get(TYPE_FIELD), element.get(NUMBER_FIELD), payload)
