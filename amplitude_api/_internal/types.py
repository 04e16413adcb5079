from __future__ import annotations

import logging
import typing

import pydantic

if typing.TYPE_CHECKING:
    # LoggerAdapter is only subscriptable in stubs
    Logger = typing.Union[logging.Logger, logging.LoggerAdapter[logging.Logger]]
else:
    Logger = object

T = typing.TypeVar("T")

MaybeError: typing.TypeAlias = typing.Union[T, Exception]


@typing.runtime_checkable
class HasID(typing.Protocol):
    """
    Anything with an identifier, like an ORM user record. The id may be a
    plain attribute or a zero-argument method.
    """

    @property
    def id(self) -> object: ...


class BaseModel(pydantic.BaseModel):
    """
    Strict model whose entrypoints (constructor, model_validate,
    model_validate_json) all report failures through
    convert_validation_error.
    """

    model_config = pydantic.ConfigDict(strict=True)

    def __init__(
        __pydantic_self__,  # noqa: N805
        *args: object,
        **kwargs: object,
    ) -> None:
        try:
            super().__init__(*args, **kwargs)
        except pydantic.ValidationError as err:
            raise __pydantic_self__.convert_validation_error(err) from None

    @classmethod
    def convert_validation_error(
        cls,
        err: pydantic.ValidationError,
    ) -> BaseException:
        """
        Override in subclasses to raise something other than Pydantic's
        ValidationError.
        """
        return err

    @classmethod
    def prepare_input(cls, obj: object) -> object:
        """
        Override in subclasses to reshape Python input before Pydantic sees
        it.
        """
        return obj

    @classmethod
    def model_validate(
        cls: type[BaseModelT],
        obj: typing.Any,
        *args: typing.Any,
        **kwargs: typing.Any,
    ) -> BaseModelT:
        try:
            return super().model_validate(  # type: ignore[misc]
                cls.prepare_input(obj), *args, **kwargs
            )
        except pydantic.ValidationError as err:
            raise cls.convert_validation_error(err) from None

    @classmethod
    def model_validate_json(
        cls: type[BaseModelT],
        json_data: typing.Union[str, bytes, bytearray],
        *args: typing.Any,
        **kwargs: typing.Any,
    ) -> BaseModelT:
        try:
            return super().model_validate_json(  # type: ignore[misc]
                json_data, *args, **kwargs
            )
        except pydantic.ValidationError as err:
            raise cls.convert_validation_error(err) from None

    @classmethod
    def from_raw(
        cls: type[BaseModelT],
        raw: object,
    ) -> typing.Union[BaseModelT, Exception]:
        """
        Parse a JSON string/bytes or a Python object. Errors are returned, not
        raised.
        """
        try:
            if isinstance(raw, (str, bytes)):
                return cls.model_validate_json(raw)

            return cls.model_validate(raw)
        except Exception as err:
            return err


BaseModelT = typing.TypeVar("BaseModelT", bound=BaseModel)
