import collections

from consumer_offsets.constants import (
    MAX_SUBSCRIPTION_VERSION, MAX_ASSIGNMENT_VERSION, NULL_LENGTH
)
from consumer_offsets.exc import InvalidLength, UnknownEmbeddedVersion

from .part import Part
from .record import Record
from .primitives import Array, String, Bytes, Int32


__all__ = [
    "ConsumerProtocolSubscription",
    "ConsumerProtocolAssignment",
    "TopicPartitions",
    "decode_consumer_protocol_subscription",
    "decode_consumer_protocol_assignment",
]


class TopicPartitions(Part):
    """
    ::

      TopicPartitions =>
        topic => String
        partitions => [Int32]

    The partition array is never null, a ``-1`` count raises
    `InvalidLength`.
    """
    parts = (
        ("topic", String),
        ("partitions", Array.of(Int32)),
    )

    @classmethod
    def parse_values(cls, buff, offset, version=None):
        """
        Parses the topic and its partitions, rejecting a null partition
        array.
        """
        values, offset = super(TopicPartitions, cls).parse_values(
            buff, offset, version
        )
        if values["partitions"] is None:
            raise InvalidLength(NULL_LENGTH, len(buff) - offset)

        return values, offset


def subscription_layout(version):
    """
    Returns the subscription layout for the given version.

    Each version appends to the one before: owned partitions came with
    version 1, the generation id with 2 and the rack id with 3.
    """
    layout = [
        ("topics", Array.of(String)),
        ("user_data", Bytes),
    ]
    if version >= 1:
        layout.append(("owned_partitions", Array.of(TopicPartitions)))
    if version >= 2:
        layout.append(("generation_id", Int32))
    if version >= 3:
        layout.append(("rack_id", String))

    return tuple(layout)


class ConsumerProtocolSubscription(Record):
    """
    The subscription metadata a consumer sends when joining its group.

    Stored by the group coordinator as an opaque blob in each member's
    `MemberMetadata`, with a version of its own.
    ::

      ConsumerProtocolSubscription =>
        version => Int16
        topics => [String]
        user_data => Bytes
        owned_partitions => [TopicPartitions]  (version 1+)
        generation_id => Int32  (version 2+)
        rack_id => String  (version 3+)
    """
    unknown_version_error = UnknownEmbeddedVersion
    kind = "consumer protocol subscription"

    versions = dict(
        (version, subscription_layout(version))
        for version in range(MAX_SUBSCRIPTION_VERSION + 1)
    )


class ConsumerProtocolAssignment(Record):
    """
    The partitions the group leader assigned to a consumer.

    Stored by the group coordinator as an opaque blob in each member's
    `MemberMetadata`.  The layout is the same for all known versions.
    ::

      ConsumerProtocolAssignment =>
        version => Int16
        partitions => [TopicPartitions]
        user_data => Bytes

    The ``partitions`` are turned into an ordered mapping of topic name to
    partition list, in the order the topics were written.  A topic listed
    more than once has its partitions merged under the one key.
    """
    unknown_version_error = UnknownEmbeddedVersion
    kind = "consumer protocol assignment"

    versions = dict(
        (version, (
            ("partitions", Array.of(TopicPartitions)),
            ("user_data", Bytes),
        ))
        for version in range(MAX_ASSIGNMENT_VERSION + 1)
    )

    @classmethod
    def parse_values(cls, buff, offset, version=None):
        """
        Parses as any other part, then maps the assigned partitions by topic.
        """
        values, offset = super(ConsumerProtocolAssignment, cls).parse_values(
            buff, offset, version
        )

        assigned = values["partitions"]
        if assigned is None:
            return values, offset

        partitions = collections.OrderedDict()
        for topic_partitions in assigned:
            partitions.setdefault(topic_partitions.topic, []).extend(
                topic_partitions.partitions
            )
        values["partitions"] = partitions

        return values, offset


def decode_consumer_protocol_subscription(raw_bytes):
    """
    Decodes an embedded consumer protocol subscription blob.

    Empty bytes raise `UnexpectedEOF`, ``None`` raises ``TypeError``.
    """
    return ConsumerProtocolSubscription.deserialize(raw_bytes)


def decode_consumer_protocol_assignment(raw_bytes):
    """
    Decodes an embedded consumer protocol assignment blob.

    Empty bytes raise `UnexpectedEOF`, ``None`` raises ``TypeError``.
    """
    return ConsumerProtocolAssignment.deserialize(raw_bytes)
