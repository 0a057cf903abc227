r"""
shellopts option records, the option table, and registration.

Overview
- Option: one registered switch (short/long names, destination, default,
  required-ness, flag polarity, action, config-file marker, help, visibility).
- OptionTable: ordered, append-only collection of Options. It is the single
  source of truth the parser, validator and help renderer read from.

Registration
- OptionTable.option(*names, **fields): typed registrar.
    >>> table = OptionTable()
    >>> table.option("-n", "--number", required=True, help="Specify some number")
- OptionTable.add(*tokens): free-form token registrar, same grammar as the
  shell library this package mirrors:
    >>> table.add("-o", "default=a b", "dest=otherO", "help=Option with default")
    >>> table.add("-a", "--aux", "flagTrue")

  Tokens are checked by prefix in this order:
    "--x" long name, "-x" short name, "dest=", "action=", "default=",
    "required", "help=", "flagTrue", "flagFalse", "configFile", "dontShow".
  Anything else is an UnknownParameterError.

Matching
- OptionTable.search(token): "--name" scans long names, "-x" scans short
  names; exact, case-sensitive, first match in table order.

Invariants
- "-h/--help" is option 0 unless the table was built with help=False.
- Names are unique across the table; at most one config-file option.
- dest defaults to the long name when not given (or given as "");
  dest=None registers an option that binds nothing.
"""
import builtins

from .faults import *
from .logs import logger
from .utils import *


def _helper(event):
    """Built-in action of -h/--help: render the help screen and exit."""
    event.parser.help()


class Option:
    """
    One registered command-line option (read-only after registration).

    Fields
    - short / long: names without dashes (None when absent).
    - dest: destination name, None when the option binds nothing.
    - action: callable invoked with an ActionEvent when matched, or None.
    - default: Unset when not given; otherwise a string ("" included).
    - required: the destination must be non-empty after parsing.
    - flag: Unset for value options; True (false until seen) or False
      (true until seen) for boolean flags.
    - config: the value names a config file read before argv is applied.
    - hidden: parseable but left out of the help screen.
    - help: help message ("" when none).
    - index: position in the owning table.
    """
    short = mirror("short")
    long = mirror("long")
    dest = mirror("dest")
    action = mirror("action")
    default = mirror("default")
    required = mirror("required")
    flag = mirror("flag")
    config = mirror("config")
    hidden = mirror("hidden")
    help = mirror("help")
    index = mirror("index")

    def __init__(
            self,
            short=None,
            long=None,
            *,
            dest=Unset,
            action=None,
            default=Unset,
            required=False,
            flag=Unset,
            config=False,
            hidden=False,
            help="",
            index=0
    ):
        for label, name in (("short", short), ("long", long)):
            if name is None:
                continue
            if not isinstance(name, str):
                raise TypeError("option %s name must be a string" % label)
            if not name or name.startswith("-") or any(char.isspace() for char in name):
                raise ValueError("bad option %s name %r" % (label, name))

        if short is None and long is None:
            raise NamelessOptionError("option needs a short or a long name")

        if not isinstance(dest, str | Unset) and dest is not None:
            raise TypeError("option 'dest' must be a string")
        if action is not None and not builtins.callable(action):
            raise TypeError("option 'action' must be callable")
        if not isinstance(default, str | Unset):
            raise TypeError("option 'default' must be a string")
        if not isinstance(flag, bool | Unset):
            raise TypeError("option 'flag' must be a boolean")
        if not isinstance(help, str):
            raise TypeError("option 'help' must be a string")

        # Unset or "" falls back to the long name; None keeps the option unbound.
        self._dest = long if dest is Unset or dest == "" else dest
        self._short = short
        self._long = long
        self._action = action
        self._default = default
        self._required = builtins.bool(required)
        self._flag = flag
        self._config = builtins.bool(config)
        self._hidden = builtins.bool(hidden)
        self._help = help
        self._index = index

        if self._required and not self._dest:
            raise RequiredWithoutDestError(
                "required option %s has no destination" % self.display,
                option=self
            )

    @property
    def names(self):
        """Dashed names, short first: ('-n', '--number')."""
        return tuple(
            prefix + name
            for prefix, name in (("-", self._short), ("--", self._long))
            if name is not None
        )

    @property
    def display(self):
        """Preferred name in messages: the short form when present."""
        return self.names[0]

    @property
    def identifier(self):
        """Help-screen identifier: '-n,--number', '-n' or '--number'."""
        return ",".join(self.names)

    @property
    def isflag(self):
        return self._flag is not Unset

    def __repr__(self):
        fields = [("names", self.names), ("dest", self._dest)]
        if self._default is not Unset:
            fields.append(("default", self._default))
        if self.isflag:
            fields.append(("flag", self._flag))
        for name in ("required", "config", "hidden"):
            if getattr(self, name):
                fields.append((name, True))
        return "option(%s)" % ", ".join("%s=%r" % field for field in fields)


class OptionTable:
    """
    Ordered registration table shared by the parser, validator and renderer.

    Parameters
    - actions: mapping of names usable in "action=NAME" tokens to callables.
    - help: auto-register -h/--help as option 0 (default True).
    """

    def __init__(self, *, actions=None, help=True):
        self._options = []
        self._shorts = {}
        self._longs = {}
        self._config = None
        self._actions = dict(actions or {})

        self._helper = None
        if help:
            self._helper = self.option("-h", "--help", dest=None, action=_helper, help="Show this help message")

    config = mirror("config")
    helper = mirror("helper")

    def __len__(self):
        return len(self._options)

    def __iter__(self):
        return iter(self._options)

    def __getitem__(self, index):
        return self._options[index]

    def __contains__(self, name):
        return self.search(name) is not None

    def __repr__(self):
        return "option-table(%s)" % ", ".join(map(repr, self._options))

    @property
    def dests(self):
        """Destination names in table order (each listed once)."""
        return list(dict.fromkeys(option.dest for option in self._options if option.dest))

    def option(self, *names, **fields):
        """
        Register an option from dashed names and typed fields.

        names
        - "-x" sets the short name, "--name" the long name; a later name of
          the same kind overwrites an earlier one.

        fields
        - dest, action, default, required, flag, config, hidden, help
          (see Option).

        Returns the new Option, whose index is the prior table length.

        Raises
        - NamelessOptionError, DuplicatedOptionError,
          DuplicatedConfigFileError, RequiredWithoutDestError.
        """
        short = long = None
        for name in names:
            if not isinstance(name, str):
                raise TypeError("option names must be strings")
            if name.startswith("--"):
                long = name[2:]
            elif name.startswith("-"):
                short = name[1:]
            else:
                raise ValueError("option name %r must start with '-' or '--'" % name)

        option = Option(short, long, index=len(self._options), **fields)

        for prefix, name, registry in (("-", option.short, self._shorts), ("--", option.long, self._longs)):
            if name is not None and name in registry:
                raise DuplicatedOptionError(
                    "option %s%s is already registered" % (prefix, name),
                    option=option,
                    previous=registry[name]
                )

        if option.config and self._config is not None:
            raise DuplicatedConfigFileError(
                "option %s is already the config file option" % self._config.display,
                option=option,
                previous=self._config
            )

        self._options.append(option)
        if option.short is not None:
            self._shorts[option.short] = option
        if option.long is not None:
            self._longs[option.long] = option
        if option.config:
            self._config = option

        logger.debug("registered option #%d: %r", option.index, option)
        return option

    def add(self, *tokens, action=None):
        """
        Register an option from free-form tokens (see module docstring).

        A callable can be given through the action keyword; "action=NAME"
        tokens are looked up in the table's actions mapping.
        """
        names = []
        fields = {}
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("option tokens must be strings")

            if token.startswith("-"):
                # "--long" or "-x", told apart by option()
                names.append(token)
            elif token.startswith("dest="):
                fields["dest"] = token[5:]
            elif token.startswith("action="):
                try:
                    fields["action"] = self._actions[token[7:]]
                except KeyError:
                    raise UnknownActionError(
                        "unknown action %r in %r" % (token[7:], token),
                        input=token
                    ) from None
            elif token.startswith("default="):
                fields["default"] = token[8:]
            elif token == "required":
                fields["required"] = True
            elif token.startswith("help="):
                fields["help"] = token[5:]
            elif token == "flagTrue":
                fields["flag"] = True
            elif token == "flagFalse":
                fields["flag"] = False
            elif token == "configFile":
                fields["config"] = True
            elif token == "dontShow":
                fields["hidden"] = True
            else:
                raise UnknownParameterError(
                    "unknown parameter to registerOption: %s" % token,
                    input=token
                )

        if action is not None:
            fields["action"] = action

        return self.option(*names, **fields)

    def search(self, token):
        """
        Resolve a token to its Option, or None when nothing matches.

        "--name" is looked up among long names, "-x" among short names.
        Bare "-" and "--" and tokens without a leading dash never match.
        """
        if not isinstance(token, str):
            raise TypeError("search() argument must be a string")

        if token.startswith("--"):
            name, column = token[2:], "long"
        elif token.startswith("-"):
            name, column = token[1:], "short"
        else:
            return None

        for option in self._options:
            if name and getattr(option, column) == name:
                logger.debug("token %r matched option #%d", token, option.index)
                return option
        return None


__all__ = (
    "Option",
    "OptionTable",
)
