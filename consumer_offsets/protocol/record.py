from .cursor import Cursor
from .part import VersionedPart


class Tombstone(object):
    """
    Marker for a record value that is empty.

    ``__consumer_offsets`` is a compacted topic, and a record with a key but
    no value marks the key's removal.  This is not an error, so value
    decoders hand back the `TOMBSTONE` instance instead of raising.
    """
    def __bool__(self):
        """
        Tombstones are falsy, as befits the absence of a value.
        """
        return False

    def __repr__(self):
        return "TOMBSTONE"


TOMBSTONE = Tombstone()


class Record(VersionedPart):
    """
    Base class for the top-level structures of ``__consumer_offsets``
    records: the key and value payloads, as well as the consumer protocol
    blobs nested in group metadata.

    Has a `deserialize()` classmethod for turning raw bytes into an instance,
    and a ``tombstones`` attribute denoting whether empty input is a
    tombstone rather than an error.
    """
    tombstones = False

    @classmethod
    def deserialize(cls, raw_bytes):
        """
        Deserializes the given raw bytes into an instance.

        Since this is a top-level structure this merely has to read itself
        off of a fresh `Cursor`.  Any trailing bytes are left unread, as
        Kafka's own readers do.

        Anything other than ``bytes``, ``bytearray`` or ``memoryview`` input
        is a caller error and raises ``TypeError``, not a `DecodeError`.
        ``None`` only stands for a tombstone where ``tombstones`` is set.
        """
        if cls.tombstones and not raw_bytes:
            return TOMBSTONE

        return Cursor(raw_bytes).read(cls)
