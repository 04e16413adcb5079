from __future__ import annotations

import typing

import pydantic

from . import const


class Error(Exception):
    """
    Base error for all our custom errors
    """

    code: const.ErrorCode = const.ErrorCode.UNKNOWN

    @property
    def message(self) -> str:
        return str(self)

    @property
    def name(self) -> str:
        return type(self).__name__


class EventInvalidError(Error):
    code = const.ErrorCode.EVENT_INVALID

    @classmethod
    def from_validation_error(
        cls,
        err: pydantic.ValidationError,
    ) -> EventInvalidError:
        """
        Extract info from Pydantic's ValidationError and return our
        EventInvalidError, naming the first offending field.
        """
        default = cls(str(err))

        errors = err.errors()
        if len(errors) == 0:
            return default
        loc = errors[0].get("loc")
        if loc is None or len(loc) == 0:
            return default

        msg = errors[0].get("msg")
        if msg is None:
            return default

        return cls(f"{loc[0]}: {msg}")


class PriceMissingForProductIDError(EventInvalidError):
    code = const.ErrorCode.PRICE_MISSING_FOR_PRODUCT_ID

    def __init__(
        self,
        message: typing.Optional[str] = None,
    ) -> None:
        super().__init__(
            message or "You must provide a price in order to use the product_id"
        )


class PriceMissingForRevenueTypeError(EventInvalidError):
    code = const.ErrorCode.PRICE_MISSING_FOR_REVENUE_TYPE

    def __init__(
        self,
        message: typing.Optional[str] = None,
    ) -> None:
        super().__init__(
            message
            or "You must provide a price in order to use the revenue_type"
        )


class OutputUnserializableError(Error):
    code = const.ErrorCode.OUTPUT_UNSERIALIZABLE
