from consumer_offsets.constants import (
    OFFSET_COMMIT_KEY_VERSIONS, GROUP_METADATA_KEY_VERSION
)
from consumer_offsets.exc import UnknownKeyVersion

from .record import Record
from .primitives import String, Int16, Int32


__all__ = [
    "RecordKey",
    "OffsetCommitKey",
    "GroupMetadataKey",
    "decode_record_key",
]


class RecordKey(Record):
    """
    Base class for the two kinds of ``__consumer_offsets`` record keys.

    The leading 16-bit version tells the kinds apart, so parsing a
    `RecordKey` reads the version and hands off to the subclass it belongs
    to.  A version belonging to neither raises `UnknownKeyVersion`.
    """
    unknown_version_error = UnknownKeyVersion
    kind = "record key"

    @classmethod
    def key_classes(cls):
        """
        Returns a mapping of key version to the key class it denotes.
        """
        mapping = {}
        for key_class in (OffsetCommitKey, GroupMetadataKey):
            for version in key_class.versions:
                mapping[version] = key_class

        return mapping

    @classmethod
    def parse(cls, buff, offset, version=None):
        """
        Parses the key version, then the fields of the matching key class.
        """
        version, offset = Int16.parse(buff, offset)

        key_class = cls.key_classes().get(version)
        if key_class is None or not issubclass(key_class, cls):
            raise UnknownKeyVersion(version)

        return key_class.parse_version(buff, offset, version)


class OffsetCommitKey(RecordKey):
    """
    ::

      OffsetCommitKey =>
        version => Int16 (0 or 1)
        group => String
        topic => String
        partition => Int32
    """
    versions = dict(
        (version, (
            ("group", String),
            ("topic", String),
            ("partition", Int32),
        ))
        for version in OFFSET_COMMIT_KEY_VERSIONS
    )


class GroupMetadataKey(RecordKey):
    """
    ::

      GroupMetadataKey =>
        version => Int16 (2)
        group => String
    """
    versions = {
        GROUP_METADATA_KEY_VERSION: (
            ("group", String),
        ),
    }


def decode_record_key(raw_bytes):
    """
    Decodes the key bytes of a record into an `OffsetCommitKey` or a
    `GroupMetadataKey`.

    Keys have no tombstone form: empty bytes raise `UnexpectedEOF` and
    ``None`` raises ``TypeError``.  Use `decode_record()` for records that
    may lack a key, it raises `MissingKey` for those.
    """
    return RecordKey.deserialize(raw_bytes)
