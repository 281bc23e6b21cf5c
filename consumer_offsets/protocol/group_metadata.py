import logging

from consumer_offsets.constants import CONSUMER_PROTOCOL_TYPE
from consumer_offsets.exc import DecodeError, UnknownValueVersion
from consumer_offsets.timestamps import timestamp_property

from .part import Part
from .record import Record
from .primitives import Array, String, Bytes, Int32, Int64
from .consumer_protocol import (
    ConsumerProtocolSubscription, ConsumerProtocolAssignment
)


log = logging.getLogger(__name__)


__all__ = [
    "GroupMetadataValue",
    "MemberMetadata",
    "decode_group_metadata_value",
]


def member_layout(version):
    """
    Returns the member layout for the given group metadata version.

    Version 1 added the rebalance timeout, version 3 the group instance id
    used for static membership.
    """
    layout = [("member_id", String)]
    if version >= 3:
        layout.append(("group_instance_id", String))
    layout.extend([
        ("client_id", String),
        ("client_host", String),
    ])
    if version >= 1:
        layout.append(("rebalance_timeout", Int32))
    layout.extend([
        ("session_timeout", Int32),
        ("raw_subscription", Bytes),
        ("raw_assignment", Bytes),
    ])

    return tuple(layout)


class MemberMetadata(Part):
    """
    A single member of a consumer group, as stored in `GroupMetadataValue`.

    The layout depends on the version of the enclosing group metadata, as
    the member carries no version of its own.
    ::

      MemberMetadata =>
        member_id => String
        group_instance_id => String  (version 3+)
        client_id => String
        client_host => String
        rebalance_timeout => Int32  (version 1+)
        session_timeout => Int32
        raw_subscription => Bytes
        raw_assignment => Bytes

    The raw subscription and assignment blobs are additionally decoded as
    the standard consumer protocol structures.  Groups using other protocols
    or custom assignors may have blobs that don't decode, in which case the
    ``subscription``/``assignment`` is ``None`` and the error raised is kept
    as ``subscription_error``/``assignment_error``.  The raw bytes are kept
    either way.
    """
    versions = dict(
        (version, member_layout(version)) for version in range(4)
    )
    derived = (
        "subscription",
        "subscription_error",
        "assignment",
        "assignment_error",
    )

    embedded = (
        ("subscription", ConsumerProtocolSubscription),
        ("assignment", ConsumerProtocolAssignment),
    )

    @classmethod
    def parse(cls, buff, offset, version=None):
        """
        Parses the member's fields, then attempts to decode the embedded
        subscription and assignment blobs.

        Failing to decode a blob never fails the member as a whole.
        """
        values, offset = cls.parse_values(buff, offset, version)

        for name, record_class in cls.embedded:
            values[name], values[name + "_error"] = cls.decode_embedded(
                values["member_id"], name, record_class,
                values["raw_" + name]
            )

        return cls(**values), offset

    @classmethod
    def decode_embedded(cls, member_id, name, record_class, raw_bytes):
        """
        Returns a two-element tuple of the decoded blob and the error raised
        while decoding it, one or both of which is ``None``.

        Null and empty blobs aren't decoded at all; members that haven't
        been assigned anything yet have an empty assignment.
        """
        if not raw_bytes:
            return None, None

        try:
            return record_class.deserialize(raw_bytes), None
        except DecodeError as e:
            log.debug(
                "Could not interpret %s of member %s: %s", name, member_id, e
            )
            return None, e


class GroupMetadataValue(Record):
    """
    The state of a consumer group: its protocol, generation and members.

    Written by the group coordinator whenever the group's membership changes
    and a rebalance completes.  The group id is in the record's
    `GroupMetadataKey`.
    ::

      GroupMetadataValue =>
        version => Int16
        protocol_type => String
        generation => Int32
        protocol => String
        leader => String
        current_state_timestamp => Int64  (version 2+)
        members => [MemberMetadata]

    The ``protocol`` and ``leader`` are ``None`` for groups without an
    active protocol (e.g. all members have left).
    """
    tombstones = True
    unknown_version_error = UnknownValueVersion
    kind = "group metadata value"

    versions = {
        0: (
            ("protocol_type", String),
            ("generation", Int32),
            ("protocol", String),
            ("leader", String),
            ("members", Array.of(MemberMetadata)),
        ),
        1: (
            ("protocol_type", String),
            ("generation", Int32),
            ("protocol", String),
            ("leader", String),
            ("members", Array.of(MemberMetadata)),
        ),
        2: (
            ("protocol_type", String),
            ("generation", Int32),
            ("protocol", String),
            ("leader", String),
            ("current_state_timestamp", Int64),
            ("members", Array.of(MemberMetadata)),
        ),
        3: (
            ("protocol_type", String),
            ("generation", Int32),
            ("protocol", String),
            ("leader", String),
            ("current_state_timestamp", Int64),
            ("members", Array.of(MemberMetadata)),
        ),
    }

    current_state_time = timestamp_property("current_state_timestamp")

    @property
    def is_consumer_group(self):
        """
        Whether the group uses the standard consumer protocol, and so whether
        its members' blobs are expected to decode.
        """
        return self.protocol_type == CONSUMER_PROTOCOL_TYPE


def decode_group_metadata_value(raw_bytes):
    """
    Decodes the value bytes of a group metadata record.

    Returns `TOMBSTONE` for an empty value.
    """
    return GroupMetadataValue.deserialize(raw_bytes)
