from __future__ import annotations

import dataclasses
import datetime
import typing

import pydantic

from . import config_lib, const, errors, transforms, types


def _normalize_attributes(
    attributes: typing.Mapping[object, object],
) -> dict[str, object]:
    """
    Flatten an attribute bag into plain string keys. EventField keys win over
    string keys for the same field. Keys we don't know about are dropped.
    """

    normalized: dict[str, object] = {}
    for key, value in attributes.items():
        if isinstance(key, str) and key not in normalized:
            normalized[key] = value

    for key, value in attributes.items():
        if isinstance(key, const.EventField):
            normalized[key.value] = value

    return {k: v for k, v in normalized.items() if k in Event.model_fields}


class Event(types.BaseModel):
    user_id: typing.Union[str, int] = const.USER_WITH_NO_ACCOUNT
    device_id: typing.Optional[str] = None
    event_type: str = ""
    event_properties: typing.Mapping[str, object] = {}
    user_properties: typing.Mapping[str, object] = {}
    time: typing.Optional[datetime.datetime] = None
    ip: typing.Optional[str] = ""
    insert_id: typing.Optional[str] = None

    # Epoch milliseconds or the session start time
    session_id: typing.Union[int, datetime.datetime, None] = None

    # Revenue. Everything besides price requires price
    price: typing.Optional[float] = None
    quantity: typing.Optional[int] = None
    product_id: typing.Optional[str] = None
    revenue_type: typing.Optional[str] = None

    app_version: typing.Optional[str] = None
    platform: typing.Optional[str] = None
    os_name: typing.Optional[str] = None
    os_version: typing.Optional[str] = None
    device_brand: typing.Optional[str] = None
    device_manufacturer: typing.Optional[str] = None
    device_model: typing.Optional[str] = None
    device_type: typing.Optional[str] = None
    carrier: typing.Optional[str] = None

    @classmethod
    def from_attributes(
        cls,
        attributes: typing.Mapping[typing.Any, object],
    ) -> Event:
        """
        Create an event from a loosely-keyed attribute bag. Keys may be strings
        or EventField members.
        """

        return cls(**_normalize_attributes(attributes))

    @classmethod
    def convert_validation_error(
        cls,
        err: pydantic.ValidationError,
    ) -> BaseException:
        return errors.EventInvalidError.from_validation_error(err)

    @classmethod
    def prepare_input(cls, obj: object) -> object:
        if isinstance(obj, typing.Mapping):
            return _normalize_attributes(obj)
        return obj

    @pydantic.field_validator("user_id", mode="before")
    @classmethod
    def _resolve_user_id(cls, v: object) -> object:
        if isinstance(v, types.HasID):
            ident = v.id
            v = ident() if callable(ident) else ident

        if v is None:
            return const.USER_WITH_NO_ACCOUNT
        return v

    @pydantic.field_validator(
        "event_properties",
        "user_properties",
        mode="before",
    )
    @classmethod
    def _ensure_dict(
        cls,
        v: typing.Optional[typing.Mapping[str, object]],
    ) -> typing.Mapping[str, object]:
        """
        Properties may be explicitly sent as null, but we always render a dict
        """

        return v or {}

    @pydantic.model_validator(mode="after")
    def _validate_revenue(self) -> Event:
        if self.price is None:
            if self.product_id is not None:
                raise errors.PriceMissingForProductIDError()
            if self.revenue_type is not None:
                raise errors.PriceMissingForRevenueTypeError()

            # Quantity means nothing without a price
            self.quantity = None
        elif self.quantity is None:
            self.quantity = 1

        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, typing.Mapping):
            return self.to_mapping() == dict(other)

        to_mapping = getattr(other, "to_mapping", None)
        if not callable(to_mapping):
            return False
        return bool(self.to_mapping() == to_mapping())

    def to_mapping(
        self,
        config: typing.Optional[config_lib.Config] = None,
    ) -> dict[str, object]:
        """
        Render the event as sent to Amplitude. Key order is stable.
        """

        config = config or config_lib.DEFAULT_CONFIG

        out: dict[str, object] = {
            "event_type": self.event_type,
            "user_id": self.user_id,
            "event_properties": config.event_properties_formatter(
                self.event_properties
            ),
            "user_properties": config.user_properties_formatter(
                self.user_properties
            ),
        }

        if self.device_id is not None:
            out["device_id"] = self.device_id
        if self.time is not None:
            out["time"] = config.time_formatter(self.time)
        if self.ip is not None:
            out["ip"] = self.ip
        if self.insert_id is not None:
            out["insert_id"] = self.insert_id
        if self.session_id is not None:
            out["session_id"] = self._format_session_id(config)

        out.update(self._revenue_mapping())

        for field in const.DEVICE_FIELDS:
            out[field.value] = getattr(self, field.value)

        return out

    def to_json(
        self,
        config: typing.Optional[config_lib.Config] = None,
    ) -> types.MaybeError[str]:
        return transforms.dump_json(self.to_mapping(config))

    def _format_session_id(self, config: config_lib.Config) -> object:
        if isinstance(self.session_id, datetime.datetime):
            return config.time_formatter(self.session_id)
        return self.session_id

    def _revenue_mapping(self) -> dict[str, object]:
        out: dict[str, object] = {}
        if self.product_id is not None:
            out[const.RevenueKey.PRODUCT_ID.value] = self.product_id
        if self.revenue_type is not None:
            out[const.RevenueKey.REVENUE_TYPE.value] = self.revenue_type
        if self.quantity is not None:
            out[const.RevenueKey.QUANTITY.value] = self.quantity
        if self.price is not None:
            out[const.RevenueKey.PRICE.value] = self.price
        return out


@dataclasses.dataclass(frozen=True)
class Created:
    event: Event

    def is_err(self) -> typing.Literal[False]:
        return False

    def is_ok(self) -> typing.Literal[True]:
        return True


@dataclasses.dataclass(frozen=True)
class Rejected:
    error: errors.EventInvalidError

    @property
    def code(self) -> const.ErrorCode:
        return self.error.code

    def is_err(self) -> typing.Literal[True]:
        return True

    def is_ok(self) -> typing.Literal[False]:
        return False


CreateResult: typing.TypeAlias = typing.Union[Created, Rejected]


def create(
    attributes: typing.Mapping[typing.Any, object],
    *,
    logger: typing.Optional[types.Logger] = None,
) -> CreateResult:
    """
    Like Event.from_attributes, but returns the error instead of raising it.
    """

    try:
        return Created(Event.from_attributes(attributes))
    except errors.EventInvalidError as err:
        logger = logger or config_lib.DEFAULT_CONFIG.logger
        logger.debug(
            "Rejected event attributes (%s): %s", err.code.value, err
        )
        return Rejected(err)
