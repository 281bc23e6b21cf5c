from .primitives import Int16


class Part(object):
    """
    Base class for the composite structures found in ``__consumer_offsets``.

    Subclasses describe their wire layout declaratively, as a sequence of
    (name, primitive or part) tuples in the order they're written.  A
    structure whose layout never changes lists it in ``parts``, one whose
    layout changes with its version lists each in the ``versions`` mapping.

    Fields not present in the layout of the decoded version are set to
    ``None``.  Instances are immutable once created.
    """
    parts = ()
    versions = None
    derived = ()

    def __init__(self, **kwargs):
        names = self.field_names()

        unknown = sorted(set(kwargs) - set(names))
        if unknown:
            raise TypeError(
                "%s has no field(s) %s" % (
                    self.__class__.__name__, ", ".join(unknown)
                )
            )

        for name in names:
            object.__setattr__(self, name, kwargs.get(name))

    @classmethod
    def field_names(cls):
        """
        Returns the names of all fields across every known layout.

        Names are ordered as they first appear, latest version first, with
        any ``derived`` fields (computed after parsing rather than read
        directly) last.
        """
        layouts = [cls.parts]
        if cls.versions:
            layouts.extend(
                cls.versions[version]
                for version in sorted(cls.versions, reverse=True)
            )

        names = []
        for layout in layouts:
            for name, _ in layout:
                if name not in names:
                    names.append(name)

        names.extend(name for name in cls.derived if name not in names)

        return names

    @classmethod
    def layout(cls, version=None):
        """
        Returns the sequence of (name, part) tuples for the given version.
        """
        if cls.versions is None:
            return cls.parts

        return cls.versions[version]

    @classmethod
    def min_size(cls, version=None):
        """
        Returns the fewest number of bytes an instance's layout can take.
        """
        return sum(
            part_class.min_size(version)
            for _, part_class in cls.layout(version)
        )

    @classmethod
    def parse_values(cls, buff, offset, version=None):
        """
        Parses the fields of the layout, returning a dict of values and the
        new offset.
        """
        values = {}
        for name, part_class in cls.layout(version):
            values[name], offset = part_class.parse(buff, offset, version)

        return values, offset

    @classmethod
    def parse(cls, buff, offset, version=None):
        """
        Given a buffer and offset, returns the parsed instance and new offset.

        Each of the parts is parsed in order, with the resulting values used
        to construct the instance.
        """
        values, offset = cls.parse_values(buff, offset, version)

        return cls(**values), offset

    def __setattr__(self, name, value):
        """
        Disallows setting attributes, decoded structures are immutable.
        """
        raise AttributeError(
            "%s instances are immutable" % self.__class__.__name__
        )

    def __eq__(self, other):
        """
        Tests equivalence of two parts, the class and all fields must match.
        """
        if self.__class__ != other.__class__:
            return NotImplemented

        return all(
            getattr(self, name) == getattr(other, name)
            for name in self.field_names()
        )

    def __hash__(self):
        """
        Hashes the class and field values, consistent with ``__eq__``.

        Parts with list or mapping fields are unhashable, as a tuple holding
        a list would be.
        """
        return hash(
            (self.__class__,) +
            tuple(getattr(self, name) for name in self.field_names())
        )

    def __repr__(self):
        return "%s(%s)" % (
            self.__class__.__name__,
            ", ".join(
                "%s=%r" % (name, getattr(self, name))
                for name in self.field_names()
            )
        )


class VersionedPart(Part):
    """
    A ``Part`` prefixed with its own 16-bit schema version.

    The version determines which layout from ``versions`` is used to parse
    the rest of the structure.  Unknown versions raise the exception class
    set as ``unknown_version_error``.
    """
    unknown_version_error = None
    kind = None

    @classmethod
    def field_names(cls):
        """
        The version is always the first field of a versioned part.
        """
        return ["version"] + super(VersionedPart, cls).field_names()

    @classmethod
    def parse(cls, buff, offset, version=None):
        """
        Parses the leading version, then the matching layout.

        Any ``version`` given by an enclosing structure is ignored, the
        part carries its own.
        """
        version, offset = Int16.parse(buff, offset)

        return cls.parse_version(buff, offset, version)

    @classmethod
    def parse_version(cls, buff, offset, version):
        """
        Parses the layout for an already-read ``version``.

        Raises ``unknown_version_error`` if the version has no known layout.
        """
        if version not in cls.versions:
            raise cls.unknown_version_error(version, cls.kind)

        values, offset = cls.parse_values(buff, offset, version)

        return cls(version=version, **values), offset
