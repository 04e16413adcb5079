import datetime
import json

from . import errors, types

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def to_epoch_ms(value: datetime.datetime) -> int:
    """
    Milliseconds since the Unix epoch, truncated toward zero. Naive datetimes
    are treated as UTC.

    Uses integer math on the timedelta since float seconds can land just
    below a whole millisecond (e.g. 1451606400.001 * 1000).
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)

    delta = value - _EPOCH
    micros = (
        delta.days * 86_400 + delta.seconds
    ) * 1_000_000 + delta.microseconds

    if micros < 0:
        return -(-micros // 1000)
    return micros // 1000


def dump_json(obj: object) -> types.MaybeError[str]:
    try:
        return json.dumps(obj)
    except Exception as err:
        return errors.OutputUnserializableError(str(err))
