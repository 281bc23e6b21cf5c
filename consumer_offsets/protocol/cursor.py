class Cursor(object):
    """
    A forward-only reader over a buffer of record bytes.

    Wraps the buffer and the current read offset; each `read()` parses one
    primitive or part at the offset and moves past it.  Owned (``bytes``,
    ``bytearray``) and borrowed (``memoryview``) buffers are read the same
    way, any string or byte values read are copies.

    Cursors keep no state beyond their own offset, so separate cursors can
    be used from separate threads freely.
    """
    def __init__(self, raw_bytes):
        if isinstance(raw_bytes, memoryview):
            raw_bytes = raw_bytes.cast("B")
        elif not isinstance(raw_bytes, (bytes, bytearray)):
            raise TypeError(
                "Expected bytes-like record data, got %s" %
                type(raw_bytes).__name__
            )

        self.buff = raw_bytes
        self.offset = 0

    @property
    def remaining(self):
        """
        The number of bytes not yet read.
        """
        return len(self.buff) - self.offset

    def read(self, part_class, version=None):
        """
        Parses a ``part_class`` value at the current offset and returns it.

        The offset is only moved forward if the parse succeeds.
        """
        value, self.offset = part_class.parse(self.buff, self.offset, version)

        return value

    def __repr__(self):
        return "Cursor(offset=%d, remaining=%d)" % (
            self.offset, self.remaining
        )
