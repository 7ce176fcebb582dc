"""
argloom parser facade: declare, load and read command-line arguments.

What this module provides
- ArgumentParser: one object owning the option, group and positional registries,
  the loader and the value accessor, plus usage/help rendering.

Quick start
    from argloom import ArgumentParser, OptionKind, Requirement, Default

    parser = ArgumentParser("Copy blocks between devices.", shell=True)
    parser.add_mutually_exclusive_group("source", mandatory=True)
    parser.register_option(("i", "input"), Requirement.INHERIT_GROUP, OptionKind.STRING, "Input file", group="source")
    parser.register_option(("z", "zero"), Requirement.INHERIT_GROUP, OptionKind.BOOL, "Read zeroes", group="source")
    parser.register_option(("b", "block"), Requirement.OPTIONAL, OptionKind.HEX, "Block size", default="200")
    parser.register_positional(1, ["OUTPUT"])

    parser.load_arguments()          # sys.argv; faults print usage + message and exit(1)
    if parser.option_is_set("help"):
        parser.print_help()
    size = parser.parse_option("block")   # 512

Modes
- library (shell=False, default): faults are raised for the host to catch.
- shell (shell=True): faults are printed to stderr after the usage line, then exit(1).
"""
import os.path
import shlex
import sys
from collections.abc import Iterable

from rich.console import Console

from . import helper
from .accessor import ValueAccessor
from .groups import GroupRegistry
from .kinds import HELP_KEY, OptionKey, OptionKind, Requirement, Default
from .loader import ArgumentLoader
from .options import OptionRegistry
from .positionals import PositionalRegistry
from .utils import Unset, mirror


def _basename(path):
    # argv[0] may carry either separator, whatever the host platform
    return os.path.basename(path.replace("\\", "/"))


class ArgumentParser:
    """
    command-line argument parser.

    parameters
    - description: str, shown under the usage line in help.
    - usage: str, explicit usage synopsis replacing the synthesized one.
    - shell: bool, print faults and exit instead of raising them.
    - fancy: bool, draw help and faults inside rich panels.
    - colorful: bool, style output (False renders plain text).

    the help option -h/--help is registered on construction; when it is given,
    loading skips every mandatory, group and positional check.
    """

    description = mirror("description")
    exec_name = mirror("exec_name")
    shell = mirror("shell")
    fancy = mirror("fancy")
    colorful = mirror("colorful")

    def __init__(self, description="", usage="", *, shell=False, fancy=False, colorful=True):
        if not isinstance(description, str) or not isinstance(usage, str):
            raise TypeError("ArgumentParser() description and usage must be strings")

        self._description = description
        self.usage = usage
        self._shell = bool(shell)
        self._fancy = bool(fancy)
        self._colorful = bool(colorful)
        self._exec_name = _basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""

        self.groups = GroupRegistry()
        self.options = OptionRegistry(self.groups)
        self.positionals = PositionalRegistry()
        self.values = ValueAccessor(self.options, self.positionals)

        self.register_option(HELP_KEY, Requirement.OPTIONAL, OptionKind.BOOL, "Show help text and exit")

    # --- declaration -------------------------------------------------------

    def register_option(self, key, requirement, kind, description="", group="", default=Default()):
        """
        declare an option; returns False when the declaration is rejected
        (empty or duplicated key/name, INHERIT_GROUP without group, unknown group).

        `key` is an OptionKey or a (short, long) pair; `default` a Default, a
        string or None.
        """
        return self.options.register(OptionKey.of(key), requirement, kind, description, group, default)

    def add_mutually_exclusive_group(self, name, mandatory=False):
        """declare a group; False when the name is already taken."""
        return self.groups.add_group(name, mandatory)

    def register_positional(self, count, names=()):
        """append `count` positional slots, named from `names` or ARG_<n>."""
        self.positionals.register(count, names)

    def set_usage_text(self, text):
        if not isinstance(text, str):
            raise TypeError("usage text must be a string")
        self.usage = text

    # --- loading -----------------------------------------------------------

    def load_arguments(self, argv=Unset):
        """
        load the process arguments.

        parameters
        - argv:
          • Unset: sys.argv.
          • str: shell-like command line, split with shlex.split.
          • Iterable[str]: argument vector, program path first.

        the program path is reduced to its base name (exec_name); the remaining
        tokens go through the loader, which raises (or, in shell mode, prints and
        exits on) malformed input and validation faults.
        """
        if argv is Unset:
            argv = sys.argv
        elif isinstance(argv, str):
            argv = shlex.split(argv)
        elif not isinstance(argv, Iterable):
            raise TypeError("load_arguments() argument must be a string or an iterable of strings")

        argv = list(argv)
        if not all(isinstance(token, str) for token in argv):
            raise TypeError("load_arguments() argument must be a string or an iterable of strings")

        if argv:
            self._exec_name = _basename(argv[0])

        loader = ArgumentLoader(
            self.options,
            self.groups,
            self.positionals,
            usage=self.print_usage,
            shell=self.shell,
            fancy=self.fancy,
            colorful=self.colorful,
            prog=self.exec_name,
        )
        loader.load(argv[1:])

    # --- lookups -----------------------------------------------------------

    def find_option(self, name):
        return self.options.find(name)

    def has_option(self, name):
        return self.options.has(name)

    def option_is_set(self, name):
        return self.options.is_set(name)

    def __getitem__(self, key):
        """raw text of an option (by name, "" when unknown) or of a positional (by index)."""
        return self.values.raw(key)

    def parse_option(self, name, kind=Unset):
        """converted option value (declared kind unless `kind` is given)."""
        return self.values.typed(name, kind)

    def parse_positional(self, index, kind=OptionKind.STRING):
        """converted positional value; PositionalIndexError when out of range."""
        return self.values.typed(index, kind)

    # --- presentation ------------------------------------------------------

    def _console(self, stderr=False):
        return Console(stderr=stderr, no_color=not self.colorful, highlight=False)

    def usage_text(self, *, width=80):
        """plain-text usage line."""
        return helper.usage(self, width=width).plain

    def help_text(self, *, width=80):
        """plain-text help listing."""
        console = Console(width=width, color_system=None, highlight=False)
        with console.capture() as captured:
            console.print(helper.help(self, console))
        return captured.get()

    def print_usage(self, *, stderr=None):
        # in shell mode usage accompanies faults, so it goes to stderr
        console = self._console(self.shell if stderr is None else stderr)
        console.print(helper.usage(self, width=console.width))

    def print_help(self):
        console = self._console()
        console.print(helper.help(self, console))

    def __repr__(self):
        return "ArgumentParser(exec_name=%r, options=%d, groups=%d, positionals=%d)" % (
            self.exec_name, len(self.options), len(self.groups), len(self.positionals)
        )


__all__ = (
    "ArgumentParser",
)
