"""
Read-back of loaded values.

raw() hands out the stored text untouched; typed() converts it with one of the
closed set of OptionKind converters. Options are addressed by short or long
name, positionals by their 0-based index.
"""
from .faults import ConversionError, FaultCode
from .kinds import OptionKind
from .utils import Unset, coalesce

# numeric results of one kind read back as another
_CASTS = {
    OptionKind.BOOL: bool,
    OptionKind.INT: int,
    OptionKind.HEX: int,
    OptionKind.FLOAT: float,
}


class ValueAccessor:

    def __init__(self, options, positionals):
        self._options = options
        self._positionals = positionals

    def raw(self, key, /):
        """
        stored text of an option (by name) or of a positional (by index).

        an unknown option name yields ""; an index outside the declared
        positionals raises PositionalIndexError.
        """
        if isinstance(key, int) and not isinstance(key, bool):
            return self._positionals[key].value
        if (spec := self._options.find(key)) is None:
            return ""
        return spec.value

    def typed(self, key, /, kind=Unset):
        """
        converted value of an option (by name) or of a positional (by index).

        options
        - the stored text is always parsed with the declared kind (a HEX option
          reads "ff" as 255); an explicit `kind` then casts that result, so
          integer() of a HEX option is base 16 and string() is the raw text.
        - a STRING option has no numeric reading of its own: its text is parsed
          with the requested kind.
        - BOOL reads the "is set" flag itself.
        - an unknown or unset option yields the zero value of the kind.

        positionals
        - kind defaults to OptionKind.STRING; an out-of-range index raises
          PositionalIndexError.

        raises ConversionError when the text cannot be parsed as the kind.
        """
        if isinstance(key, int) and not isinstance(key, bool):
            kind = OptionKind(coalesce(kind, OptionKind.STRING))
            return self._convert(kind, self._positionals[key].value, "positional %d" % key)

        spec = self._options.find(key)
        if spec is None:
            return OptionKind(coalesce(kind, OptionKind.STRING)).zero

        kind = OptionKind(coalesce(kind, spec.kind))
        if not spec.is_set:
            return kind.zero
        if spec.kind is OptionKind.BOOL:
            return kind.convert("1")
        if spec.kind is OptionKind.STRING or kind is OptionKind.STRING:
            return self._convert(kind, spec.value, "option %r" % key)
        return _CASTS[kind](self._convert(spec.kind, spec.value, "option %r" % key))

    def _convert(self, kind, text, subject):
        try:
            return kind.convert(text)
        except ValueError:
            raise ConversionError(
                "cannot convert %s value %r to %s" % (subject, text, kind.name.lower()),
                title="conversion failed",
                code=FaultCode.CONVERSION_FAILED,
                subject=subject,
                value=text,
                kind=kind,
                hint="expected %s" % (kind.metavar or "a boolean"),
            ) from None

    def flag(self, key, /):
        return self.typed(key, OptionKind.BOOL)

    def integer(self, key, /):
        return self.typed(key, OptionKind.INT)

    def hexadecimal(self, key, /):
        return self.typed(key, OptionKind.HEX)

    def real(self, key, /):
        return self.typed(key, OptionKind.FLOAT)

    def string(self, key, /):
        return self.typed(key, OptionKind.STRING)


__all__ = (
    "ValueAccessor",
)
