import collections
import logging

from consumer_offsets.exc import MissingKey
from consumer_offsets.protocol.record import TOMBSTONE
from consumer_offsets.protocol.keys import decode_record_key, OffsetCommitKey
from consumer_offsets.protocol.offset_commit import decode_offset_commit_value
from consumer_offsets.protocol.group_metadata import (
    decode_group_metadata_value
)


log = logging.getLogger(__name__)


class ConsumerOffsetsRecord(collections.namedtuple("Record", "key value")):
    """
    Base class for a whole ``__consumer_offsets`` record, key and value.

    The ``value`` is `TOMBSTONE` if the record marks the removal of its key.
    """
    __slots__ = ()

    @property
    def is_tombstone(self):
        """
        Whether this record marks the deletion of its key.
        """
        return self.value is TOMBSTONE

    @property
    def group(self):
        """
        The id of the consumer group the record is about.
        """
        return self.key.group

    def __repr__(self):
        return "%r => %r" % (self.key, self.value)


class OffsetCommit(ConsumerOffsetsRecord):
    """
    A record of the offset a group committed for a topic partition.
    """
    __slots__ = ()

    decode_value = staticmethod(decode_offset_commit_value)

    @property
    def topic(self):
        """
        The topic of the committed partition.
        """
        return self.key.topic

    @property
    def partition(self):
        """
        The committed partition.
        """
        return self.key.partition


class GroupMetadata(ConsumerOffsetsRecord):
    """
    A record of the membership and assignment state of a group.
    """
    __slots__ = ()

    decode_value = staticmethod(decode_group_metadata_value)


def decode_record(key_bytes, value_bytes):
    """
    Decodes a whole ``__consumer_offsets`` record.

    The key determines the kind of the record and so how the value is
    decoded.  Returns an `OffsetCommit` or `GroupMetadata` instance, whose
    value is `TOMBSTONE` if there are no value bytes.

    Records with no key can't be from ``__consumer_offsets`` and raise
    `MissingKey`.
    """
    if not key_bytes:
        raise MissingKey()

    key = decode_record_key(key_bytes)

    if isinstance(key, OffsetCommitKey):
        record_class = OffsetCommit
    else:
        record_class = GroupMetadata

    record = record_class(key, record_class.decode_value(value_bytes))
    if record.is_tombstone:
        log.debug("Tombstone for %r", key)

    return record
