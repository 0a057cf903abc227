"""
shellopts faults (errors) and rendering.

Scope
- FaultCode: stable numeric identifiers for every fault, grouped by domain
  (registration, parsing, validation, config).
- OptionException: base type that carries a message plus keyword options and
  knows how to render and surface itself.
- trigger(): central entry point to surface any fault (shell mode prints and
  exits with status 1, otherwise the fault is raised).

Rendering
- Every fault renders as a single line "Error: <message>" on stderr, styled
  when colorful. Styles can be overridden with a __styles__ mapping in
  __main__ (keys: "error-label", "error-message").

Integration
- The registrar raises registration faults directly: they are host bugs.
- The parser calls trigger(fault, shell=..., colorful=...) so the host picks
  between fail-fast exits and catchable exceptions.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - registration (2110x): bad tokens or inconsistent option metadata.
    - parsing (2120x): unknown options and missing values in argv.
    - validation (2130x): required options left unset.
    - config (2140x): malformed or unknown assignments in a config file.
    """
    # --- registration errors (211xx) ---
    UNKNOWN_PARAMETER           = 21101
    UNKNOWN_ACTION              = 21102
    NAMELESS_OPTION             = 21103
    DUPLICATED_OPTION           = 21104
    DUPLICATED_CONFIG_FILE      = 21105
    REQUIRED_WITHOUT_DEST       = 21106

    # --- parsing errors (212xx) ---
    UNKNOWN_OPTION              = 21201
    MISSING_VALUE               = 21202

    # --- validation errors (213xx) ---
    MISSING_REQUIRED_OPTIONS    = 21301

    # --- config errors (214xx) ---
    CONFIG_SYNTAX               = 21401
    UNKNOWN_DESTINATION         = 21402


class OptionException(Exception):
    """
    base fault: a message plus read-only keyword options.

    common options
    - shell: print and exit instead of raising (see __trigger__).
    - colorful: style the rendered line.
    - any context the raiser wants to attach (input, option, missing, ...).
    """
    code = Unset

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        styles = defaultdict(str, {
            "error-label": "bold #FF4DA6",  # friendly pinky label
            "error-message": "#C8C8D0",  # soft light gray message
        } | getattr(__import__("__main__"), "__styles__", {}))

        def styler(style):
            return styles[style] if self.options.get("colorful", False) else ""

        return Text.assemble(
            ("Error:", styler("error-label")),
            " ",
            (str(self.message), styler("error-message"))
        )

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        Console(stderr=True, highlight=False).print(self, soft_wrap=True)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class RegistrationError(OptionException): ...
class UnknownParameterError(RegistrationError):
    code = FaultCode.UNKNOWN_PARAMETER
class UnknownActionError(RegistrationError):
    code = FaultCode.UNKNOWN_ACTION
class NamelessOptionError(RegistrationError):
    code = FaultCode.NAMELESS_OPTION
class DuplicatedOptionError(RegistrationError):
    code = FaultCode.DUPLICATED_OPTION
class DuplicatedConfigFileError(RegistrationError):
    code = FaultCode.DUPLICATED_CONFIG_FILE
class RequiredWithoutDestError(RegistrationError):
    code = FaultCode.REQUIRED_WITHOUT_DEST

class UnknownOptionError(OptionException):
    code = FaultCode.UNKNOWN_OPTION
class MissingValueError(OptionException):
    code = FaultCode.MISSING_VALUE
class MissingRequiredOptionsError(OptionException):
    code = FaultCode.MISSING_REQUIRED_OPTIONS

class ConfigError(OptionException): ...
class ConfigSyntaxError(ConfigError):
    code = FaultCode.CONFIG_SYNTAX
class UnknownDestinationError(ConfigError):
    code = FaultCode.UNKNOWN_DESTINATION


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see OptionException).
    - options are merged into a copy of the fault before triggering.
    - with shell=True the fault is printed to stderr and the process exits 1;
      otherwise the fault is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "OptionException",
    "RegistrationError",
    "UnknownParameterError",
    "UnknownActionError",
    "NamelessOptionError",
    "DuplicatedOptionError",
    "DuplicatedConfigFileError",
    "RequiredWithoutDestError",
    "UnknownOptionError",
    "MissingValueError",
    "MissingRequiredOptionsError",
    "ConfigError",
    "ConfigSyntaxError",
    "UnknownDestinationError",
    "FaultCode",
    "trigger",
)
