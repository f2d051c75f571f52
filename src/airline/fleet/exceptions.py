"""Error kinds raised by the fleet model and its serializers.

Every error derives from FleetError so the operator interface can catch the
whole family in one place. Each kind also derives from the closest builtin
exception, so callers that only know about ValueError or OSError still work.
"""


class FleetError(Exception):
    """Base class for all fleet errors."""


class InvalidPlaneError(FleetError, ValueError):
    """Raised when a plane does not satisfy the fleet admission rules."""


class UnresolvedVariantError(FleetError, LookupError):
    """Raised when a weight is requested for a plane without a known variant."""


class MalformedDataError(FleetError, ValueError):
    """Raised when persisted fleet data does not match the expected schema."""


class FleetIOError(FleetError, OSError):
    """Raised when a fleet file cannot be read or written."""
