"""Fleet persistence.

Two independent codecs share the FleetCodec contract: XmlFleetCodec
(structured XML) and JsonFleetCodec (tagged JSON). Pick one by format with
get_codec().

Typical usage:
    from airline.serialization import FleetFormat, get_codec

    codec = get_codec(FleetFormat.from_path("fleet.xml"))
    codec.save(fleet, "fleet.xml")
    restored = codec.load("fleet.xml")
"""

from airline.serialization.base import FleetCodec, FleetFormat
from airline.serialization.json_codec import JsonFleetCodec
from airline.serialization.xml_codec import XmlFleetCodec

_CODECS: dict[FleetFormat, type[FleetCodec]] = {
    FleetFormat.XML: XmlFleetCodec,
    FleetFormat.JSON: JsonFleetCodec,
}


def get_codec(fmt: FleetFormat | str, strict: bool = False) -> FleetCodec:
    """Create the codec for a format.

    Args:
        fmt: FleetFormat or its name ("xml", "json").
        strict: Check decoded planes against the fleet admission rules.

    Returns:
        New codec instance.

    Raises:
        ValueError: If the format name is unknown.
    """
    if isinstance(fmt, str):
        fmt = FleetFormat.from_name(fmt)
    return _CODECS[fmt](strict=strict)


__all__ = ["FleetCodec", "FleetFormat", "JsonFleetCodec", "XmlFleetCodec", "get_codec"]
