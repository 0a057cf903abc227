"""
shellopts help screen rendering.

Layout
    usage: PROG [options]

    Options:

       -n,--number                Specify some number
       -o                         Option with default
       -h,--help                  Show this help message

- Identifiers ("-x,--long", "-x", "--long") are indented by three spaces
  and padded to a 30-column field; help text starts in column 30.
- An identifier field of 30 columns or more gets its own line, and every
  help line goes below it.
- Help text is wrapped at 50 columns; continuation lines are indented by 30
  spaces. Lines are filled up to the full 50 columns (textwrap), whereas
  `fmt -w 50` aims a few columns shorter, so break points in long help
  texts can differ from a fmt-wrapped screen.
- Hidden options are skipped; option 0 (the help option) is listed last.

Palette keys (override through a __styles__ mapping in __main__)
- usage-label, program-name, section-label, option-name, help-text
"""
from collections import defaultdict

from rich.text import Text

from .utils import *

COLUMN = 30
WIDTH = 50
INDENT = "   "


def _palette(colorful):
    styles = defaultdict(str, {
        "usage-label": "bold #00E6FF",  # CYAN → signature info color
        "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
        "section-label": "bold #FFFFFF",  # Pure white headers
        "option-name": "bold #00E6FF",  # CYAN for options
        "help-text": "#9CA3AF",  # Muted gray
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    return styler


def render_option(option, *, colorful=False):
    """
    Render the help lines of one option as a list of rich Text lines.
    """
    styler = _palette(colorful)
    field = INDENT + option.identifier
    name = Text.assemble(INDENT, (option.identifier, styler("option-name")))
    lines = wrap(option.help, WIDTH)

    if len(field) < COLUMN:
        rendered = [Text.assemble(name, " " * (COLUMN - len(field)), (lines[0], styler("help-text")))]
        lines = lines[1:]
    else:
        rendered = [name]

    rendered.extend(Text.assemble(" " * COLUMN, (line, styler("help-text"))) for line in lines)
    return rendered


def render_help(table, *, prog, usage=Unset, colorful=False):
    """
    Render the full help screen of an option table as one rich Text.

    parameters
    - table: OptionTable to describe.
    - prog: program name shown in the default usage line.
    - usage: replaces the default "usage: PROG [options]" line when given.
    - colorful: apply the palette (plain text otherwise).
    """
    styler = _palette(colorful)

    if usage is Unset:
        header = Text.assemble(
            ("usage:", styler("usage-label")),
            " ",
            (prog, styler("program-name")),
            " [options]"
        )
    else:
        header = Text(usage)

    lines = [header, Text(""), Text("Options:", styler("section-label")), Text("")]

    options = list(table)
    # The help option is registered first but listed last.
    if table.helper is not None:
        options.remove(table.helper)
        options.append(table.helper)

    for option in options:
        if option.hidden:
            continue
        lines.extend(render_option(option, colorful=colorful))

    return Text("\n").join(lines)


def format_help(table, *, prog, usage=Unset):
    """Plain-text help screen (no styles)."""
    return render_help(table, prog=prog, usage=usage).plain


__all__ = (
    "render_option",
    "render_help",
    "format_help",
)
