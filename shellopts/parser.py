"""
shellopts parser: apply an option table to an argument vector.

Phases of Parser.parse(argv)
1. defaults: every option with a default binds it; flags without a default
   bind their resting value (flag=True rests at False, flag=False at True).
2. config file: argv is pre-scanned (up to "--") for the config-file option;
   the first occurrence's value names a file whose assignments are applied.
3. tokens: left to right.
   • "--" ends option scanning; everything after it is positional.
   • a matched option binds its flag value, or consumes the next token as
     its value (verbatim), then runs its action with an ActionEvent.
   • an unmatched "-token" is an UnknownOptionError.
   • any other token is positional.
4. validation: every required option left unset (or "") is reported in one
   MissingRequiredOptionsError.

Later phases win: command line > config file > defaults.

Faults go through Parser.trigger(): with shell=True they print
"Error: <message>" on stderr and exit 1, otherwise they are raised.

Quick example
    >>> table = OptionTable()
    >>> table.add("-n", "--number", "required", "help=Specify some number")
    >>> table.add("-a", "--aux", "flagTrue")
    >>> namespace = Parser(table).parse(["-n", "3", "-a", "file"])
    >>> namespace.number, namespace.aux, namespace.arguments
    ('3', True, ['file'])
"""
import os.path
import sys
from collections import deque
from collections.abc import Mapping
from typing import NamedTuple, Any

from rich.console import Console

from .config import read_config
from .faults import *
from .logs import logger
from .options import Option, OptionTable
from .rendering import render_help
from .utils import *


class Namespace(Mapping):
    """
    Destination bindings and positional arguments of one parse.

    - mapping access: namespace["dest"], "dest" in namespace, len(), iteration
      (only destinations bound during the parse are visible).
    - attribute access: namespace.dest (AttributeError when unbound). Names
      the class already defines (arguments, count, get, items, keys, values)
      resolve to those members, so use namespace["dest"] for such dests.
    - arguments: positional arguments in order; count: their number.

    When built over a host mapping (e.g. a module's globals()), every binding
    is also written into that mapping.
    """

    def __init__(self, bindings=Unset):
        self._bindings = {} if bindings is Unset else bindings
        self._names = {}
        self._arguments = []

    arguments = mirror("arguments")

    @property
    def count(self):
        return len(self._arguments)

    def __getitem__(self, name):
        if name not in self._names:
            raise KeyError(name)
        return self._bindings[name]

    def __setitem__(self, name, value):
        self._names[name] = None
        self._bindings[name] = value

    def __iter__(self):
        return iter(self._names)

    def __len__(self):
        return len(self._names)

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError("namespace has no binding %r" % name) from None

    def __repr__(self):
        return "namespace(%s)" % ", ".join(
            ["%s=%r" % (name, self[name]) for name in self] + ["arguments=%r" % self._arguments]
        )


class ActionEvent(NamedTuple):
    """What an option action receives when its option is matched."""
    parser: Any
    option: Option
    token: str
    value: Any  # Unset when the option consumed no value
    namespace: Namespace


class Parser:
    """
    Parse argument vectors against an OptionTable.

    Parameters
    - table: the OptionTable to apply.
    - shell: print faults and exit 1 instead of raising them.
    - colorful: style the help screen and faults (terminals only).
    - prog: program name for the usage line (defaults to argv[0]'s basename).
    - usage: replaces the whole default usage line.
    """

    def __init__(self, table, /, *, shell=False, colorful=True, prog=Unset, usage=Unset):
        if not isinstance(table, OptionTable):
            raise TypeError("Parser() argument must be an option table")
        if not isinstance(usage, str | Unset):
            raise TypeError("Parser() 'usage' must be a string")

        self._table = table
        self._shell = bool(shell)
        self._colorful = bool(colorful)
        self._prog = coalesce(prog, os.path.basename(sys.argv[0]))
        self._usage = usage

    table = mirror("table")
    shell = mirror("shell")
    colorful = mirror("colorful")
    prog = mirror("prog")
    usage = mirror("usage")

    def trigger(self, fault, /, **options):
        """Surface a fault with this parser's shell/colorful settings."""
        trigger(fault, **options, parser=self, shell=self._shell, colorful=self._colorful)

    def parse(self, argv=Unset, bindings=Unset):
        """
        Parse argv (default: sys.argv[1:]) and return the Namespace.

        bindings: optional host mapping that receives every destination.
        """
        argv = list(coalesce(argv, sys.argv[1:]))
        if not all(isinstance(token, str) for token in argv):
            raise TypeError("parse() arguments must be strings")

        namespace = Namespace(bindings)

        self._defaults(namespace)
        self._configure(argv, namespace)

        tokens = deque(argv)
        passthrough = False
        while tokens:
            token = tokens.popleft()

            if passthrough:
                namespace._arguments.append(token)
                continue

            if token == "--":
                logger.debug("'--' seen, remaining tokens are positional")
                passthrough = True
                continue

            option = self._table.search(token)
            if option is None:
                if token.startswith("-"):
                    self.trigger(UnknownOptionError(
                        "unknown option %s" % token,
                        input=token
                    ))
                    continue
                namespace._arguments.append(token)
                continue

            value = Unset
            if option.dest:
                if option.isflag:
                    namespace[option.dest] = option.flag
                elif tokens:
                    namespace[option.dest] = value = tokens.popleft()
                else:
                    self.trigger(MissingValueError(
                        "option %s requires a value" % token,
                        input=token,
                        option=option
                    ))
                    continue

            if option.action is not None:
                logger.debug("running action of option #%d", option.index)
                option.action(ActionEvent(self, option, token, value, namespace))

        self.validate(namespace)
        logger.debug("parsed %r", namespace)
        return namespace

    def _defaults(self, namespace):
        for option in self._table:
            if not option.dest:
                continue
            if option.default is not Unset:
                namespace[option.dest] = option.default
            elif option.isflag:
                namespace[option.dest] = not option.flag

    def _configure(self, argv, namespace):
        if (option := self._table.config) is None:
            return

        for index, token in enumerate(argv):
            if token == "--":
                break
            if token not in option.names:
                continue
            if index + 1 < len(argv):
                try:
                    values = read_config(argv[index + 1], self._table)
                except ConfigError as fault:
                    self.trigger(fault)
                    return
                for name, value in values.items():
                    namespace[name] = value
            break

    def validate(self, namespace):
        """
        Report every required option whose destination is unset or "".
        """
        missing = [
            option
            for option in self._table
            if option.required and namespace.get(option.dest, "") == ""
        ]
        if missing:
            self.trigger(MissingRequiredOptionsError(
                "following mandatory options are missing: %s" % ",".join(option.display for option in missing),
                missing=tuple(missing)
            ))

    def render_help(self):
        """The help screen as a rich Text."""
        return render_help(self._table, prog=self._prog, usage=self._usage, colorful=self._colorful)

    def format_help(self):
        """The help screen as plain text."""
        return self.render_help().plain

    def help(self):
        """Print the help screen on stdout and exit with status 0."""
        Console(highlight=False).print(self.render_help(), soft_wrap=True)
        sys.exit(0)


__all__ = (
    "Namespace",
    "ActionEvent",
    "Parser",
)
