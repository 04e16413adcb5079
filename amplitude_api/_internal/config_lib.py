from __future__ import annotations

import datetime
import logging
import typing

from . import const, transforms, types

PropertiesFormatter = typing.Callable[
    [typing.Optional[typing.Mapping[str, object]]],
    typing.Mapping[str, object],
]
TimeFormatter = typing.Callable[[datetime.datetime], int]


def _format_properties(
    props: typing.Optional[typing.Mapping[str, object]],
) -> dict[str, object]:
    return dict(props or {})


class Config:
    """
    Controls how events are rendered. Everything is passed in code; there are
    no env vars.
    """

    def __init__(
        self,
        *,
        event_properties_formatter: typing.Optional[PropertiesFormatter] = None,
        logger: typing.Optional[types.Logger] = None,
        time_formatter: typing.Optional[TimeFormatter] = None,
        user_properties_formatter: typing.Optional[PropertiesFormatter] = None,
    ) -> None:
        """
        Args:
        ----
            event_properties_formatter: Applied to event_properties when
                rendering. Defaults to a shallow dict copy.
            logger: Logger to use.
            time_formatter: Converts time (and session_id, when it's a
                datetime) to epoch milliseconds.
            user_properties_formatter: Applied to user_properties when
                rendering. Defaults to a shallow dict copy.
        """

        self.event_properties_formatter = (
            event_properties_formatter or _format_properties
        )
        self.logger = logger or logging.getLogger(const.DEFAULT_LOGGER_NAME)
        self.time_formatter = time_formatter or transforms.to_epoch_ms
        self.user_properties_formatter = (
            user_properties_formatter or _format_properties
        )


# Used when rendering without an explicit config
DEFAULT_CONFIG: typing.Final = Config()
