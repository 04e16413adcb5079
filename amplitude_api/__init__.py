"""Public entrypoint for the Amplitude API event SDK."""

from ._internal.config_lib import DEFAULT_CONFIG, Config
from ._internal.const import USER_WITH_NO_ACCOUNT, ErrorCode, EventField
from ._internal.errors import (
    Error,
    EventInvalidError,
    OutputUnserializableError,
    PriceMissingForProductIDError,
    PriceMissingForRevenueTypeError,
)
from ._internal.event_lib import (
    Created,
    CreateResult,
    Event,
    Rejected,
    create,
)
from ._internal.types import HasID

__all__ = [
    "DEFAULT_CONFIG",
    "Config",
    "CreateResult",
    "Created",
    "Error",
    "ErrorCode",
    "Event",
    "EventField",
    "EventInvalidError",
    "HasID",
    "OutputUnserializableError",
    "PriceMissingForProductIDError",
    "PriceMissingForRevenueTypeError",
    "Rejected",
    "USER_WITH_NO_ACCOUNT",
    "create",
]
