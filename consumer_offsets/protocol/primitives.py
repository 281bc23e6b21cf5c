import struct

from consumer_offsets.constants import NULL_LENGTH
from consumer_offsets.exc import (
    UnexpectedEOF, InvalidLength, LengthOverrun, InvalidUtf8
)


def ensure_available(buff, offset, size):
    """
    Raises `UnexpectedEOF` if fewer than ``size`` bytes remain at ``offset``.
    """
    remaining = len(buff) - offset
    if size > remaining:
        raise UnexpectedEOF(size, max(remaining, 0))


def check_length(length, buff, offset, item_size=1):
    """
    Validates a length or count prefix against the remaining buffer.

    Any negative length other than the null marker is invalid, as is a
    length whose items couldn't possibly fit in what's left of the buffer.
    """
    remaining = len(buff) - offset
    if length < NULL_LENGTH:
        raise InvalidLength(length, remaining)
    if length * item_size > remaining:
        raise LengthOverrun(length, remaining)


class Primitive(object):
    """
The most basic structure of the protocol.  Subclassed, never used directly.

Used as a building block for the various primitives Kafka's group coordinator
uses when writing to the ``__consumer_offsets`` topic.  All numbers are
big-endian, as written by the JVM.
    """
    fmt = None

    @classmethod
    def min_size(cls, version=None):
        """
        Returns the fewest number of bytes a value of this primitive takes.
        """
        return struct.calcsize("!" + cls.fmt)

    @classmethod
    def parse(cls, buff, offset, version=None):
        """
        Given a buffer and offset, returns the parsed value and new offset.

        Uses the ``fmt`` class attribute to unpack the data from the buffer
        and determine the used up number of bytes.  The ``version`` is
        accepted so that primitives and parts parse alike, it has no bearing
        on a primitive.
        """
        primitive_struct = struct.Struct("!" + cls.fmt)

        ensure_available(buff, offset, primitive_struct.size)

        value = primitive_struct.unpack_from(buff, offset)[0]
        offset += primitive_struct.size

        return value, offset


class Int8(Primitive):
    """
    Represents an 8-bit signed integer.
    """
    fmt = "b"


class Int16(Primitive):
    """
    Represents an 16-bit signed integer.
    """
    fmt = "h"


class Int32(Primitive):
    """
    Represents an 32-bit signed integer.
    """
    fmt = "i"


class Int64(Primitive):
    """
    Represents an 64-bit signed integer.
    """
    fmt = "q"


class UnsignedVarint(Primitive):
    """
    Represents an unsigned 32-bit integer in base 128 "varint" encoding.

    Each byte carries seven bits of the value, least significant group
    first, with the high bit set on every byte but the last.
    """
    max_bytes = 5
    max_value = 0xffffffff

    @classmethod
    def min_size(cls, version=None):
        """
        A varint takes a single byte at the very least.
        """
        return 1

    @classmethod
    def parse(cls, buff, offset, version=None):
        """
        Given a buffer and offset, returns the parsed value and new offset.

        Reads one byte at a time until one without the continuation bit
        turns up.  Encodings longer than a 32-bit value needs, or carrying
        bits past the 32nd, are rejected.
        """
        value = 0
        for i in range(cls.max_bytes):
            ensure_available(buff, offset, 1)
            byte = buff[offset]
            offset += 1

            value |= (byte & 0x7f) << (7 * i)
            if not byte & 0x80:
                break
        else:
            raise InvalidLength(value, len(buff) - offset)

        if value > cls.max_value:
            raise InvalidLength(value, len(buff) - offset)

        return value, offset


class VariablePrimitive(Primitive):
    """
    Base primitive for variable-length scalar primitives (strings and bytes).
    """
    size_primitive = None

    @classmethod
    def min_size(cls, version=None):
        """
        Variable primitives take at least the size of their length prefix.
        """
        return cls.size_primitive.min_size()

    @classmethod
    def parse(cls, buff, offset, version=None):
        """
        Given a buffer and offset, returns the parsed value and new offset.

        Parses the ``size_primitive`` first to determine how many more bytes to
        consume to extract the value.  A size of ``-1`` denotes a null value.

        The raw bytes are always copied out of the buffer and handed to
        `decode()`.
        """
        size, offset = cls.size_primitive.parse(buff, offset)
        if size == NULL_LENGTH:
            return None, offset

        check_length(size, buff, offset)

        value = bytes(buff[offset:offset + size])
        offset += size

        return cls.decode(value), offset

    @classmethod
    def decode(cls, raw):
        """
        Turns the raw bytes of a value into the final value, a no-op here.
        """
        return raw


class String(VariablePrimitive):
    """
    Represents a string value, length denoted by a 16-bit signed integer.
    """
    size_primitive = Int16

    @classmethod
    def decode(cls, raw):
        """
        Decodes the raw bytes as UTF-8, raising `InvalidUtf8` on failure.
        """
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidUtf8(raw)


class Bytes(VariablePrimitive):
    """
    Represents a bytestring value, length denoted by a 32-bit signed integer.
    """
    size_primitive = Int32


class Array(Primitive):
    """
    Represents an array of any arbitrary `Primitive` or ``Part``.

    Not used directly but rather by its ``of()`` classmethod to denote an
    ``Array.of(<something>)``.
    """
    item_class = None

    @classmethod
    def of(cls, part_class):
        """
        Creates a new class with the ``item_class`` attribute properly set.
        """
        copy = type(
            "ArrayOf%s" % part_class.__name__,
            cls.__bases__, dict(cls.__dict__)
        )
        copy.item_class = part_class

        return copy

    @classmethod
    def min_size(cls, version=None):
        """
        An array takes at least its 32-bit element count.
        """
        return Int32.min_size()

    @classmethod
    def parse(cls, buff, offset, version=None):
        """
        Parses a raw buffer at offset and returns the resulting array value.

        Starts off by `parse()`-ing the 32-bit element count, followed by
        parsing items out of the buffer "count" times.  A count of ``-1``
        denotes a null array and results in ``None`` rather than an empty
        list.

        The ``version`` is passed along to the items, as is needed by parts
        whose layout depends on the enclosing record's version.
        """
        count, offset = Int32.parse(buff, offset)
        if count == NULL_LENGTH:
            return None, offset

        check_length(
            count, buff, offset,
            item_size=cls.item_class.min_size(version)
        )

        values = []
        for _ in range(count):
            value, offset = cls.item_class.parse(buff, offset, version)

            values.append(value)

        return values, offset
