"""
argloom utilities shared by the registries, the accessor and the parser facade.

- Unset: "no argument given" marker for parameters where None would be ambiguous
  (the optional kind of a typed read, the optional argv of load_arguments).
- coalesce(value, default): resolve Unset to a default.
- mirror("attr"): read-only property over self._attr that hands out copies of
  mutable containers, so registry state is only changed through the registries.

    >>> coalesce(Unset, "string")
    'string'
"""
from typing import final


@final
class UnsetType:
    """
    type of the Unset marker; a single instance exists, it is falsy and cannot
    be subclassed.
    """
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __reduce__(self):
        return UnsetType, ()

    def __init_subclass__(cls, **options):
        raise TypeError("UnsetType cannot be subclassed")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """`default` when `object` is Unset, else `object` (None, 0 and "" included)."""
    return default if object is Unset else object


def _copied(value):
    # option keys and other tuples are immutable and handed out as they are
    match value:
        case tuple() | str():
            return value
        case list():
            return [_copied(item) for item in value]
        case dict():
            return {key: _copied(item) for key, item in value.items()}
        case set():
            return set(value)
    return value


def mirror(name, /):
    """
    read-only property returning a copy of `self._<name>`.

    used as `members = mirror("members")` on classes keeping their state in
    private attributes.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")
    attribute = "_" + name

    def getter(self):
        return _copied(getattr(self, attribute))

    getter.__name__ = getter.__qualname__ = name
    return property(getter, doc="read-only view of %s" % attribute)


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "mirror",
)
