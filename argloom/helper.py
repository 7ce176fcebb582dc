"""
Usage and help rendering (read-only over the registries).

Palette keys
- usage-label, program-name, usage-section, description-section
- group-label, required-name, option-name, metavar, argument-description
- default-label, default-value, positional-name
- panel-title

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- colorful=False suppresses styling; fancy=True wraps the help in a Panel.
"""
from collections import defaultdict, deque

from rich.containers import Lines
from rich.panel import Panel
from rich.console import Group
from rich.text import Text

from .kinds import HELP_KEY, OptionKind

# column where descriptions start in the help listing
OPTION_WIDTH = 25


def _styler(colorful):
    styles = defaultdict(str, {
        "usage-label": "bold #00E6FF",
        "program-name": "bold #FF4D94",
        "usage-section": "bold #36C5F0",
        "description-section": "italic #A3A3A3",

        "group-label": "bold #FFFFFF",
        "required-name": "bold #22C55E",
        "option-name": "bold #00E6FF",
        "metavar": "bold #FFD600",
        "argument-description": "#9CA3AF",

        "default-label": "#737373",
        "default-value": "bold #FFD600",
        "positional-name": "bold #FF4D94",

        "panel-title": "bold #FF4D94",
    } | getattr(__import__("__main__"), "__styles__", {}))

    def text(fragment, style=""):
        if not colorful:
            return Text(str(fragment))
        return Text(str(fragment), styles[style])

    return text


def usage(parser, *, width=80):
    """
    one-line synopsis: required options bare, optional ones bracketed, then the
    positional names, in registration order; wrapped with a hanging indent.
    an explicit usage text set on the parser replaces the synthesized part.
    """
    text = _styler(parser.colorful)

    line = Text()
    line.append(text("usage", "usage-label")).append(": ")
    line.append(text(parser.exec_name, "program-name"))

    if parser.usage:
        return line.append(" ").append(text(parser.usage, "usage-section"))

    line.append(" ")
    offset = len(line)

    required = deque()
    optional = deque()
    for key, spec in parser.options:
        if key == HELP_KEY:
            continue
        item = text(key.synopsis(), "required-name" if parser.options.is_mandatory(key) else "option-name")
        if spec.kind is not OptionKind.BOOL:
            item = Text.assemble(item, " ", text(spec.kind.metavar, "metavar"))
        if parser.options.is_mandatory(key):
            required.append(item)
        else:
            optional.append(Text.assemble("[ ", item, " ]"))

    inputs = required + optional
    inputs.extend(text(name, "positional-name") for name in parser.positionals.names)

    try:
        lines = Lines([inputs.popleft()])
    except IndexError:
        lines = Lines()

    while inputs:
        if len(lines[-1]) + 1 + len(input := inputs.popleft()) > width - offset:
            lines.append(input)
        else:
            lines[-1].append(Text(" ") + input)

    try:
        line.append(lines.pop(0))
    except IndexError:
        line.rstrip()
    for wrapped in lines:
        line.append("\n").append(" " * offset).append(wrapped)

    return line


def help(parser, console):
    """
    detailed listing: usage, description, one block per option (label, wrapped
    description, default value) and the positional names.
    """
    text = _styler(parser.colorful)
    width = console.width - 4 * parser.fancy
    renders = [usage(parser, width=width).append("\n")]

    if parser.description:
        renders.append(text(parser.description, "description-section").append("\n"))

    section = Text()
    section.append(text("options", "group-label")).append(":\n")
    for key, spec in parser.options:
        label = text(key.label(), "required-name" if parser.options.is_mandatory(key) else "option-name")
        block = Text("  ").append(label)
        if len(block) >= OPTION_WIDTH:
            block.append("\n").append(" " * OPTION_WIDTH)
        else:
            block.append(" " * (OPTION_WIDTH - len(block)))

        if spec.description:
            wrapped = text(spec.description, "argument-description").wrap(console, max(width - OPTION_WIDTH, 10))
            block.append(wrapped.pop(0))
            for line in wrapped:
                block.append("\n").append(" " * OPTION_WIDTH).append(line)

        if spec.has_default:
            block.append("\n").append(" " * OPTION_WIDTH)
            block.append(text("default value: ", "default-label")).append(text(spec.default, "default-value"))

        block.rstrip()
        section.append(block).append("\n")
    renders.append(section)

    if len(parser.positionals):
        positionals = Text()
        positionals.append(text("positionals", "group-label")).append(":\n")
        for name in parser.positionals.names:
            positionals.append("  ").append(text(name, "positional-name")).append("\n")
        renders.append(positionals)

    renders[-1].rstrip()

    renderable = Group(*renders)
    if parser.fancy:
        renderable = Panel(
            renderable,
            title=text("[ %s HELP ]" % parser.exec_name.upper(), "panel-title"),
            title_align="left",
        )
    return renderable


__all__ = (
    "OPTION_WIDTH",
    "usage",
    "help",
)
