class DecodeError(Exception):
    """
    Base exception for all errors raised while decoding record bytes.
    """
    pass


class UnexpectedEOF(DecodeError):
    """
    Error raised when fewer bytes remain than a field requires.
    """
    def __init__(self, needed, remaining):
        self.needed = needed
        self.remaining = remaining

    def __str__(self):
        return "Needed %d bytes but only %d remain" % (
            self.needed, self.remaining
        )


class InvalidLength(DecodeError):
    """
    Error raised when a length or count prefix can't possibly be right.

    The only negative length Kafka writes is ``-1``, denoting a null value.
    """
    def __init__(self, length, remaining):
        self.length = length
        self.remaining = remaining

    def __str__(self):
        return "Invalid length prefix %d with %d bytes remaining" % (
            self.length, self.remaining
        )


class LengthOverrun(InvalidLength, UnexpectedEOF):
    """
    Error raised when a length or count prefix runs past the buffer end.

    This is both an invalid length and a premature end of data, so callers
    catching either of those will see it.
    """
    def __init__(self, length, remaining):
        self.length = length
        self.needed = length
        self.remaining = remaining

    def __str__(self):
        return "Length prefix %d overruns the %d remaining bytes" % (
            self.length, self.remaining
        )


class UnknownVersion(DecodeError):
    """
    Base error for version discriminators outside the known range.
    """
    kind = "payload"

    def __init__(self, version, kind=None):
        self.version = version
        if kind is not None:
            self.kind = kind

    def __str__(self):
        return "Unknown %s version: %s" % (self.kind, self.version)


class UnknownKeyVersion(UnknownVersion):
    """
    Error raised when a record key's version is neither an offset commit nor
    a group metadata key version.
    """
    kind = "record key"


class UnknownValueVersion(UnknownVersion):
    """
    Error raised when a record value's schema version is not supported.
    """
    kind = "record value"


class UnknownEmbeddedVersion(UnknownVersion):
    """
    Error raised when an embedded consumer protocol blob has an unknown
    version.
    """
    kind = "consumer protocol"


class InvalidUtf8(DecodeError):
    """
    Error raised when the bytes of a string field aren't valid UTF-8.
    """
    def __init__(self, raw):
        self.raw = raw

    def __str__(self):
        return "Invalid UTF-8 string bytes: %r" % self.raw


class InvalidTimestamp(DecodeError):
    """
    Error raised when a millisecond timestamp is outside what ``datetime``
    can represent.
    """
    def __init__(self, millis):
        self.millis = millis

    def __str__(self):
        return "Timestamp %d ms is out of datetime's range" % self.millis


class MissingKey(DecodeError):
    """
    Error raised when a record has no key to determine its kind from.
    """
    def __str__(self):
        return "Record has no key, can't determine its kind"
