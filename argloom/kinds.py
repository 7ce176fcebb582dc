"""
Option identity and value kinds.

- OptionKey: (short, long) pair identifying an option; ordered and hashable.
- OptionKind: closed set of value kinds, each owning its converter, zero value
  and usage metavar.
- Requirement: how an option takes part in mandatory validation.
- Default: optional default text of an option (present or absent).
"""
from enum import Enum, IntEnum
from typing import NamedTuple

from .utils import Unset


class OptionKey(NamedTuple):
    """
    identity of an option: short and long name, without their dashes.

    either name may be empty but not both (see `empty`). equality and ordering
    are lexicographic on (short, long), as for any tuple.
    """
    short: str = ""
    long: str = ""

    @property
    def empty(self):
        return not self.short and not self.long

    @property
    def names(self):
        """the non-empty names of this key, short first."""
        return tuple(name for name in self if name)

    def label(self):
        """help form: '-s, --long', '-s' or '--long'."""
        return ", ".join(self._dashed())

    def synopsis(self):
        """usage form: '-s | --long', '-s' or '--long'."""
        return " | ".join(self._dashed())

    def _dashed(self):
        if self.short:
            yield "-" + self.short
        if self.long:
            yield "--" + self.long

    def __str__(self):
        # message form, a dash stands in for a missing side
        return "%s/%s" % ("-" + self.short if self.short else "-", "--" + self.long if self.long else "-")

    @classmethod
    def of(cls, object, /):
        """
        coerce an OptionKey or a (short, long) pair into an OptionKey.
        """
        if isinstance(object, cls):
            return object
        if isinstance(object, str):
            raise TypeError("option key must be a (short, long) pair, not a string")
        try:
            short, long = object
        except (TypeError, ValueError):
            raise TypeError("option key must be a (short, long) pair") from None
        if not isinstance(short, str) or not isinstance(long, str):
            raise TypeError("option key names must be strings")
        return cls(short, long)


HELP_KEY = OptionKey("h", "help")


class Requirement(Enum):
    OPTIONAL = "optional"
    REQUIRED = "required"
    INHERIT_GROUP = "inherit-group"


def _boolean(text):
    match text.strip().lower():
        case "1" | "true" | "yes" | "on":
            return True
        case "0" | "false" | "no" | "off":
            return False
    raise ValueError("invalid literal for a boolean: %r" % text)


class OptionKind(IntEnum):
    """
    value kind of an option (or the kind requested when reading a positional).

    each kind carries
    - convert(text): parse raw text, raising ValueError when it cannot be parsed.
    - zero: value returned for an option that was never set.
    - metavar: placeholder shown after the option in the usage line.
    """
    BOOL = 0
    INT = 1
    HEX = 2
    FLOAT = 3
    STRING = 4

    @property
    def zero(self):
        return _ZEROS[self]

    @property
    def metavar(self):
        return _METAVARS[self]

    def convert(self, text, /):
        if not isinstance(text, str):
            raise TypeError("convert() argument must be a string")
        return _CONVERTERS[self](text)


_CONVERTERS = {
    OptionKind.BOOL: _boolean,
    OptionKind.INT: lambda text: int(text, 10),
    # int(..., 16) accepts an optional 0x prefix
    OptionKind.HEX: lambda text: int(text, 16),
    OptionKind.FLOAT: float,
    OptionKind.STRING: str,
}

_ZEROS = {
    OptionKind.BOOL: False,
    OptionKind.INT: 0,
    OptionKind.HEX: 0,
    OptionKind.FLOAT: 0.0,
    OptionKind.STRING: "",
}

_METAVARS = {
    OptionKind.BOOL: "",
    OptionKind.INT: "<INT>",
    OptionKind.HEX: "[0x]<HEX>",
    OptionKind.FLOAT: "<FLOAT>",
    OptionKind.STRING: "<STRING>",
}


class Default(tuple):
    """
    default text of an option: Default() is absent, Default("8") is present.

    behaves as the pair (present, text).
    """
    __slots__ = ()

    def __new__(cls, text=Unset, /):
        if text is Unset:
            return super().__new__(cls, (False, ""))
        if not isinstance(text, str):
            raise TypeError("default value must be a string")
        return super().__new__(cls, (True, text))

    @property
    def present(self):
        return self[0]

    @property
    def text(self):
        return self[1]

    @classmethod
    def of(cls, object, /):
        """accept a Default, a plain string or None (absent)."""
        if isinstance(object, cls):
            return object
        if object is None:
            return cls()
        return cls(object)

    def __repr__(self):
        return "Default(%r)" % self.text if self.present else "Default()"


__all__ = (
    "OptionKey",
    "HELP_KEY",
    "Requirement",
    "OptionKind",
    "Default",
)
