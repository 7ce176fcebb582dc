"""
argloom faults (errors and warnings) and rendering.

Scope
- FaultCode: stable numeric identifiers for every user-facing issue, grouped by
  domain (tokens, validation, read-back, warnings).
- ParserException / ParserWarning: base types carrying a message plus read-only
  context options; they know how to render themselves with rich.
- trigger(): single entry point to surface a fault, either by raising it
  (library mode) or by printing it to stderr and exiting (shell mode).

Message tone
- Lowercased, one violation per line, followed by a single hint.
- Validation messages enumerate every offending option or group, not only the first.

Integration
- The loader raises faults through trigger(); the parser facade passes its
  shell/fancy/colorful flags so the same fault can be shown to a user or caught
  by the host.
- Registration problems are not faults: the registries report them by returning False.
"""
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - tokens (2111x): MALFORMED_TOKEN, UNKNOWN_OPTION, OPTION_AFTER_POSITIONAL
    - validation (2121x): MISSING_ARGUMENTS, CONFLICTING_GROUPS, MISSING_POSITIONALS
    - read-back (2131x): CONVERSION_FAILED, POSITIONAL_OUT_OF_RANGE
    - warnings (2211x): DUPLICATED_OPTION, UNEXPECTED_POSITIONAL

    the host may remap codes to its own labels through a __codes__ mapping in __main__.
    """
    # --- token errors ---
    MALFORMED_TOKEN             = 21111
    UNKNOWN_OPTION              = 21112
    OPTION_AFTER_POSITIONAL     = 21113

    # --- validation errors ---
    MISSING_ARGUMENTS           = 21211
    CONFLICTING_GROUPS          = 21212
    MISSING_POSITIONALS         = 21213

    # --- read-back errors ---
    CONVERSION_FAILED           = 21311
    POSITIONAL_OUT_OF_RANGE     = 21312

    # --- warnings ---
    DUPLICATED_OPTION           = 22111
    UNEXPECTED_POSITIONAL       = 22112

    def normalize(self):
        """
        return a host-normalized string for this code (numeric id unless remapped).
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette, title_style, message_style):
    """
    build the rich renderable shared by exceptions and warnings.

    layout: "[ prog — code | title ]", the message, then "→ hint".
    fancy=True wraps the body in a Panel; colorful=False drops every style.
    """
    main = __import__("__main__")
    options = fault.options
    colorful = options.get("colorful", True)
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        return Text(str(fragment), styles[style])

    prog = options.get("prog") or getattr(main, "__prog__", "argloom")
    code = options.get("code")

    header = Text.assemble(
        "[ ",
        text(prog, "prog-name"),
        " — ",
        text(code.normalize() if code is not None else "-", "code"),
        " | ",
        text(str(options.get("title", "")).title(), title_style),
        " ]",
    )
    message = text(fault.message, message_style)
    hint = Text.assemble(text(" → ", "hint-arrow"), text(options.get("hint", ""), "hint"))

    if options.get("fancy", False):
        return Panel(Group(message, hint), title=header, title_align="left")
    return Group(header, message, hint)


class ParserException(Exception):
    """
    base class of every fatal argloom fault.

    attributes
    - message: str, multi-line human-readable description.
    - options: read-only mapping of context (title, code, hint, offending items,
      plus the runtime flags shell/fancy/colorful/prog merged in by trigger()).
    """

    def __init__(self, message="", /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        }, "error-title", "error-message")

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MalformedInputError(ParserException): ...
class UnknownOptionError(MalformedInputError): ...


class ValidationError(ParserException): ...
class MissingArgumentsError(ValidationError): ...
class ConflictingGroupsError(ValidationError): ...
class MissingPositionalsError(ValidationError): ...


class ConversionError(ParserException, ValueError): ...
class PositionalIndexError(ParserException, IndexError): ...


class ParserWarning(Warning):
    """
    base class of non-fatal faults; same message/options contract as ParserException.
    """

    def __init__(self, message="", /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",
            "code": "bold #FFB400",
            "warning-title": "bold #FFC2E0",
            "warning-message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        }, "warning-title", "warning-message")

    def __trigger__(self):
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=4)
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicatedOptionWarning(ParserWarning): ...
class UnexpectedPositionalWarning(ParserWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ (see the base classes).
    - options are merged into a copy of the fault before triggering.
    - exceptions are raised unless shell=True, in which case they are printed to
      stderr and the process exits with status 1; warnings are warned or printed.
    """
    if (
        not callable(getattr(fault, "__trigger__", None)) or
        not callable(getattr(fault, "__replace__", None))
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    return fault.__replace__(**options).__trigger__()


def describe(fault, /, *, prog=Unset):
    """
    plain-text rendering of a fault (no styles), handy for logs and tests.
    """
    capture = Console(width=120, color_system=None, highlight=False)
    if prog is not Unset:
        fault = fault.__replace__(prog=prog)
    fault = fault.__replace__(colorful=False)
    with capture.capture() as captured:
        capture.print(fault)
    return captured.get()


__all__ = (
    "FaultCode",
    "ParserException",
    "MalformedInputError",
    "UnknownOptionError",
    "ValidationError",
    "MissingArgumentsError",
    "ConflictingGroupsError",
    "MissingPositionalsError",
    "ConversionError",
    "PositionalIndexError",
    "ParserWarning",
    "DuplicatedOptionWarning",
    "UnexpectedPositionalWarning",
    "trigger",
    "describe",
)
