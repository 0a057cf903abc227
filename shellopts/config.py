"""
shellopts config files: strict name=value readers.

Format
- one assignment per line: name=value, no whitespace around "=".
- blank lines and lines starting with "#" are skipped.
- a value wrapped in matching single or double quotes is unquoted.
- name must be the destination of an option in the table.
- flag destinations accept "true" or "false" only and become booleans.

Nothing in the file is executed; I/O errors (missing file, permissions)
propagate as OSError.
"""
import re

from .faults import *
from .logs import logger

_ASSIGNMENT = re.compile(r"(?P<name>[^\s=#][^\s=]*)=(?P<value>.*)")


def _unquote(value):
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def parse_config(text, table, *, source="<config>"):
    """
    Parse config text into a {dest: value} mapping against an option table.

    Later assignments to the same name win. Raises ConfigSyntaxError for
    malformed lines or bad flag values, UnknownDestinationError for names
    that no option binds.
    """
    flags = {option.dest: option for option in table if option.dest and option.isflag}
    dests = set(table.dests)

    values = {}
    for number, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        match = _ASSIGNMENT.fullmatch(line)
        if not match:
            raise ConfigSyntaxError(
                "bad assignment %r in %s at line %d" % (line, source, number),
                source=source,
                line=number,
                text=line
            )

        name = match["name"]
        value = _unquote(match["value"])

        if name not in dests:
            raise UnknownDestinationError(
                "unknown option destination %r in %s at line %d" % (name, source, number),
                source=source,
                line=number,
                name=name
            )

        if name in flags:
            if value not in ("true", "false"):
                raise ConfigSyntaxError(
                    "flag %r expects true or false in %s at line %d, got %r" % (name, source, number, value),
                    source=source,
                    line=number,
                    text=line
                )
            value = value == "true"

        values[name] = value
    return values


def read_config(path, table):
    """Read and parse the config file at path (UTF-8) against table."""
    with open(path, encoding="utf-8") as file:
        text = file.read()
    values = parse_config(text, table, source=str(path))
    logger.debug("read %d assignment(s) from config file %s", len(values), path)
    return values


__all__ = (
    "parse_config",
    "read_config",
)
