"""
Argument loading: tokenize argv, bind tokens to options and positionals, validate.

Scan (single left-to-right pass)
- option token: starts with '-' while no positional has been filled yet. The
  name is the token without its leading dashes and must match a short or long
  name exactly. The option becomes set and, unless it is a BOOL, waits for its
  value (the pending cursor).
- value token: anything else. It is the pending option's value when one waits
  for it, otherwise it fills the next free positional slot.
- an option token after the first positional is malformed input.

Validation (after the scan, skipped entirely when the help option is set)
- missing mandatory options (members of a group are reported through the group),
- mandatory groups with no member set,
- groups with more than one member set,
- missing positionals.
Missing options and groups are reported together; conflicts only when nothing
is missing; positionals last.

Faults leave through trigger(): raised for library hosts, printed (with the
usage line first) and turned into exit status 1 in shell mode.
"""
import difflib
import functools

from .faults import *
from .kinds import HELP_KEY, OptionKind


@functools.cache
def _ordinal(number):
    """
    human-friendly ordinal for a 1-based token position ("first", ..., "11th", "22nd").
    """
    try:
        return {
            1: "first",
            2: "second",
            3: "third",
            4: "fourth",
            5: "fifth",
            6: "sixth",
            7: "seventh",
            8: "eighth",
            9: "ninth",
            10: "tenth",
        }[number]
    except KeyError:
        pass

    if 10 < number % 100 < 20:
        return f"{number}th"

    return f"{number}%s" % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


class ArgumentLoader:
    """
    binds raw tokens to the registries and enforces mandatory/conflict rules.

    parameters
    - options, groups, positionals: the registries to fill (mutated in place).
    - usage: optional callable printing the usage line; called before a fault
      is rendered in shell mode.
    - runtime: shell/fancy/colorful/prog flags merged into every fault.
    """

    def __init__(self, options, groups, positionals, *, usage=None, **runtime):
        self._options = options
        self._groups = groups
        self._positionals = positionals
        self._usage = usage
        self._runtime = runtime

    def trigger(self, fault, /, **options):
        if self._runtime.get("shell", False) and self._usage is not None and isinstance(fault, ParserException):
            self._usage()
        return trigger(fault, **options, **self._runtime)

    def load(self, args):
        """
        scan `args` (the tokens after the program name) and validate the result.

        raises
        - MalformedInputError: option token after a positional, or a dash-only token.
        - UnknownOptionError: option token matching no registered name.
        - MissingArgumentsError / ConflictingGroupsError / MissingPositionalsError.
        """
        args = list(args)
        if not all(isinstance(token, str) for token in args):
            raise TypeError("load() argument must be an iterable of strings")

        pending = None
        seen = set()
        self._positionals.filled = 0

        for index, token in enumerate(args, 1):
            if token.startswith("-"):
                if self._positionals.filled:
                    return self.trigger(MalformedInputError(
                        "option %r at %s position follows positional arguments" % (token, _ordinal(index)),
                        title="option after positional",
                        code=FaultCode.OPTION_AFTER_POSITIONAL,
                        token=token,
                        index=index,
                        hint="move every option before the first positional argument",
                    ))

                if not (name := token.lstrip("-")):
                    return self.trigger(MalformedInputError(
                        "bad form of option %r at %s position" % (token, _ordinal(index)),
                        title="malformed option",
                        code=FaultCode.MALFORMED_TOKEN,
                        token=token,
                        index=index,
                        hint="options are written as -name or --name",
                    ))

                if (key := self._options.key_of(name)) is None:
                    suggestions = difflib.get_close_matches(name, self._options.names, 5)
                    try:
                        hint = "did you mean %r? use --help to see all options" % suggestions[0]
                    except IndexError:
                        hint = "use --help to see all options"
                    return self.trigger(UnknownOptionError(
                        "unknown option %r at %s position" % (token, _ordinal(index)),
                        title="unknown option",
                        code=FaultCode.UNKNOWN_OPTION,
                        token=token,
                        index=index,
                        suggestions=suggestions,
                        hint=hint,
                    ))

                if key in seen:
                    self.trigger(DuplicatedOptionWarning(
                        "option %s at %s position was already provided" % (key, _ordinal(index)),
                        title="duplicated option",
                        code=FaultCode.DUPLICATED_OPTION,
                        key=key,
                        index=index,
                        hint="keep a single occurrence; the last value wins",
                    ))
                seen.add(key)

                spec = self._options.spec(key)
                spec.is_set = True
                pending = None if spec.kind is OptionKind.BOOL else spec
            elif pending is not None:
                pending.value = token
                pending = None
            elif not self._positionals.fill(token):
                self.trigger(UnexpectedPositionalWarning(
                    "unexpected positional argument %r at %s position was ignored" % (token, _ordinal(index)),
                    title="unexpected positional",
                    code=FaultCode.UNEXPECTED_POSITIONAL,
                    token=token,
                    index=index,
                    hint="%d positional argument(s) expected" % len(self._positionals),
                ))

        if self._options.is_set(HELP_KEY):
            return

        self.validate()

    def validate(self):
        """
        run the mandatory/group/positional checks on the current registry state.
        """
        is_set = self._options.is_set

        missing = [
            key for key in self._options.mandatory
            if not self._groups.is_key_in_any_group(key) and not is_set(key)
        ]
        groups = self._groups.missing(is_set)
        conflicts = self._groups.conflicts(is_set)

        if missing or groups:
            lines = []
            if missing:
                lines.append("missing required options:")
                lines.extend(map(str, missing))
            if groups:
                lines.append("at least one option from these groups must be set:")
                for group in groups:
                    lines.append(group.name)
                    lines.extend("\t%s" % (key,) for key in group)
            return self.trigger(MissingArgumentsError(
                "\n".join(lines),
                title="missing arguments",
                code=FaultCode.MISSING_ARGUMENTS,
                keys=tuple(missing),
                groups=tuple(group.name for group in groups),
                hint="add the missing options; use --help to see the expected usage",
            ))

        if conflicts:
            lines = ["conflicting options used in these groups:"]
            for group in conflicts:
                lines.append(group.name)
                lines.extend("\t%s" % (key,) for key in group if is_set(key))
            return self.trigger(ConflictingGroupsError(
                "\n".join(lines),
                title="conflicting options",
                code=FaultCode.CONFLICTING_GROUPS,
                groups=tuple(group.name for group in conflicts),
                hint="keep a single option from each group",
            ))

        if self._positionals.filled < len(self._positionals):
            names = self._positionals.names[self._positionals.filled:]
            return self.trigger(MissingPositionalsError(
                "missing positional arguments (%d of %d given): %s" % (
                    self._positionals.filled, len(self._positionals), " ".join(names)
                ),
                title="missing positionals",
                code=FaultCode.MISSING_POSITIONALS,
                expected=len(self._positionals),
                got=self._positionals.filled,
                names=names,
                hint="check the program usage for the expected order",
            ))


__all__ = (
    "ArgumentLoader",
)
