from consumer_offsets.exc import UnknownValueVersion
from consumer_offsets.timestamps import timestamp_property

from .record import Record
from .primitives import String, Int32, Int64


__all__ = [
    "OffsetCommitValue",
    "decode_offset_commit_value",
]


class OffsetCommitValue(Record):
    """
    The offset a consumer group committed for a single topic partition.

    Written by the group coordinator whenever it handles an offset commit.
    The topic partition and group are in the record's `OffsetCommitKey`.
    ::

      OffsetCommitValueV0 =>
        version => Int16
        offset => Int64
        metadata => String
        commit_timestamp => Int64

      OffsetCommitValueV1 =>
        version => Int16
        offset => Int64
        metadata => String
        commit_timestamp => Int64
        expire_timestamp => Int64

      OffsetCommitValueV2 =>
        version => Int16
        offset => Int64
        metadata => String
        commit_timestamp => Int64

      OffsetCommitValueV3 =>
        version => Int16
        offset => Int64
        leader_epoch => Int32
        metadata => String
        commit_timestamp => Int64

    The ``leader_epoch`` is ``None`` before version 3, and the
    ``expire_timestamp`` is ``None`` for anything but version 1.
    """
    tombstones = True
    unknown_version_error = UnknownValueVersion
    kind = "offset commit value"

    versions = {
        0: (
            ("offset", Int64),
            ("metadata", String),
            ("commit_timestamp", Int64),
        ),
        1: (
            ("offset", Int64),
            ("metadata", String),
            ("commit_timestamp", Int64),
            ("expire_timestamp", Int64),
        ),
        2: (
            ("offset", Int64),
            ("metadata", String),
            ("commit_timestamp", Int64),
        ),
        3: (
            ("offset", Int64),
            ("leader_epoch", Int32),
            ("metadata", String),
            ("commit_timestamp", Int64),
        ),
    }

    commit_time = timestamp_property("commit_timestamp")
    expire_time = timestamp_property("expire_timestamp")


def decode_offset_commit_value(raw_bytes):
    """
    Decodes the value bytes of an offset commit record.

    Returns `TOMBSTONE` for an empty value.
    """
    return OffsetCommitValue.deserialize(raw_bytes)
