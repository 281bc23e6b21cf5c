from .exc import (
    DecodeError,
    UnexpectedEOF,
    InvalidLength,
    LengthOverrun,
    UnknownVersion,
    UnknownKeyVersion,
    UnknownValueVersion,
    UnknownEmbeddedVersion,
    InvalidUtf8,
    InvalidTimestamp,
    MissingKey,
)
from .protocol.record import TOMBSTONE
from .protocol.keys import (
    RecordKey, OffsetCommitKey, GroupMetadataKey, decode_record_key
)
from .protocol.offset_commit import (
    OffsetCommitValue, decode_offset_commit_value
)
from .protocol.group_metadata import (
    GroupMetadataValue, MemberMetadata, decode_group_metadata_value
)
from .protocol.consumer_protocol import (
    ConsumerProtocolSubscription,
    ConsumerProtocolAssignment,
    TopicPartitions,
    decode_consumer_protocol_subscription,
    decode_consumer_protocol_assignment,
)
from .records import OffsetCommit, GroupMetadata, decode_record


version_info = (0, 3, 0)

__version__ = ".".join(str(point) for point in version_info)

__all__ = [
    "decode_record",
    "decode_record_key",
    "decode_offset_commit_value",
    "decode_group_metadata_value",
    "decode_consumer_protocol_subscription",
    "decode_consumer_protocol_assignment",
    "TOMBSTONE",
    "OffsetCommit",
    "GroupMetadata",
    "RecordKey",
    "OffsetCommitKey",
    "GroupMetadataKey",
    "OffsetCommitValue",
    "GroupMetadataValue",
    "MemberMetadata",
    "ConsumerProtocolSubscription",
    "ConsumerProtocolAssignment",
    "TopicPartitions",
    "DecodeError",
    "UnexpectedEOF",
    "InvalidLength",
    "LengthOverrun",
    "UnknownVersion",
    "UnknownKeyVersion",
    "UnknownValueVersion",
    "UnknownEmbeddedVersion",
    "InvalidUtf8",
    "InvalidTimestamp",
    "MissingKey",
]
