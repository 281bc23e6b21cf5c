import datetime

from consumer_offsets.constants import UNSET_TIMESTAMP
from consumer_offsets.exc import InvalidTimestamp


EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def to_datetime(millis):
    """
    Converts a milliseconds-since-epoch timestamp to a UTC ``datetime``.

    Timestamps in ``__consumer_offsets`` are written by the group coordinator
    as JVM millisecond timestamps.  ``None`` and the ``-1`` "unset" value
    both result in ``None``.  Any 64-bit value is a valid timestamp on the
    wire, but those past the year 9999 (or before year 1) raise
    `InvalidTimestamp`.
    """
    if millis is None or millis == UNSET_TIMESTAMP:
        return None

    try:
        return EPOCH + datetime.timedelta(milliseconds=millis)
    except OverflowError:
        raise InvalidTimestamp(millis)


def timestamp_property(field_name):
    """
    Creates a read-only property converting the given integer timestamp
    field via `to_datetime()`.
    """
    def getter(self):
        return to_datetime(getattr(self, field_name))

    getter.__doc__ = "``%s`` as a UTC ``datetime``, if set." % field_name

    return property(getter)
