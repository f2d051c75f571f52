"""Aircraft variants and their empty weights.

The variant set is closed. Each variant except UNSPECIFIED has an entry in
the read-only EMPTY_WEIGHTS table, built once at import time.

Typical usage:
    from airline.fleet.variants import AircraftVariant, get_empty_weight

    variant = AircraftVariant.from_name("Boeing737")
    weight = get_empty_weight(variant)  # 26400.0
"""

from enum import Enum
from types import MappingProxyType

from airline.fleet.exceptions import UnresolvedVariantError


class AircraftVariant(Enum):
    """Aircraft model kind.

    Values are the names used in persisted fleet files.

    Attributes:
        UNSPECIFIED: No model chosen; never valid inside a fleet
        AIRBUS_A310: Airbus A310
        AIRBUS_A320: Airbus A320
        BOEING_737: Boeing 737
        BOEING_747: Boeing 747
    """

    UNSPECIFIED = "None"
    AIRBUS_A310 = "AirbusA310"
    AIRBUS_A320 = "AirbusA320"
    BOEING_737 = "Boeing737"
    BOEING_747 = "Boeing747"

    @classmethod
    def from_name(cls, name: str) -> "AircraftVariant":
        """Resolve a variant from its persisted value or member name.

        Matching is case-insensitive, so "Boeing737", "boeing737" and
        "BOEING_737" all resolve to BOEING_737.

        Args:
            name: Variant name.

        Returns:
            Matching AircraftVariant.

        Raises:
            ValueError: If no variant matches.
        """
        wanted = name.strip().lower()
        for variant in cls:
            if wanted in (variant.value.lower(), variant.name.lower()):
                return variant
        raise ValueError(f"Unknown aircraft variant: {name!r}")

    @property
    def is_specified(self) -> bool:
        """Whether the variant has an empty weight."""
        return self is not AircraftVariant.UNSPECIFIED


# Empty weights in kilograms
EMPTY_WEIGHTS = MappingProxyType(
    {
        AircraftVariant.AIRBUS_A310: 82000.0,
        AircraftVariant.AIRBUS_A320: 36750.0,
        AircraftVariant.BOEING_737: 26400.0,
        AircraftVariant.BOEING_747: 186000.0,
    }
)


def get_empty_weight(variant: AircraftVariant) -> float:
    """Look up the empty weight of a variant.

    Args:
        variant: Aircraft variant.

    Returns:
        Empty weight in kilograms.

    Raises:
        UnresolvedVariantError: If the variant has no table entry (UNSPECIFIED).

    Examples:
        >>> get_empty_weight(AircraftVariant.AIRBUS_A320)
        36750.0
    """
    try:
        return EMPTY_WEIGHTS[variant]
    except KeyError as e:
        raise UnresolvedVariantError(f"No empty weight for variant: {variant.value}") from e
