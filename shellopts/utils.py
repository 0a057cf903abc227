"""
shellopts utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the options, parser and rendering layers.

Overview
- UnsetType / Unset
  • Singleton sentinel for “value not provided”, distinct from None and "".
  • A default of "" is a real default; a default of Unset means there is none.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, preserving None/""/False.

- rename(callable, name)
  • Assign stable __name__/__qualname__ to generated callables (help action, getters).

- mirror("attr")
  • Read-only property exposing a private backing field (self._attr).

- wrap(text, width)
  • Word-wrap a help message the way `fmt -w` does: paragraphs kept, words never split.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce("", "fallback")
    ''
"""
import builtins
import functools
import textwrap
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and "".
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and singleton per process.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in isinstance checks (e.g., str | Unset).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Returns object unless it is Unset, in which case default is returned.
    Falsey values like None, "", or False are preserved as-is.
    """
    return object if object is not Unset else default


def rename(callable, name, /):
    """
    Set a stable __name__/__qualname__ on a callable and return it.

    Raises
    - TypeError: when the target is not callable, the name is not a string, or
      the callable does not accept attribute updates (built-ins).
    """
    if not builtins.callable(callable):
        raise TypeError("rename() first argument must be callable")
    if not isinstance(name, str):
        raise TypeError("rename() second argument must be a string")
    try:
        callable.__qualname__ = name
        callable.__name__ = name
    except (AttributeError, TypeError):
        raise TypeError("rename() first argument must be a updatable callable") from None
    return callable


def mirror(name, /):
    """
    Define a read-only property that mirrors the private attribute "_{name}".
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    def getter(self):
        return getattr(self, "_" + name)

    return property(rename(getter, name))


def wrap(text, width, /):
    """
    Word-wrap text into lines no longer than width (when words allow it).

    Behavior
    - Explicit newlines start new paragraphs; empty paragraphs are kept as
      empty lines.
    - Runs of whitespace inside a paragraph collapse into single spaces.
    - Words longer than width stay whole on their own line.
    - An empty text yields a single empty line, so callers always get at
      least one line to place next to an option identifier.
    """
    if not isinstance(text, str):
        raise TypeError("wrap() first argument must be a string")
    if not isinstance(width, int) or width < 1:
        raise ValueError("wrap() second argument must be a positive integer")

    lines = []
    for paragraph in text.splitlines() or [""]:
        lines.extend(textwrap.wrap(
            paragraph,
            width,
            break_long_words=False,
            break_on_hyphens=False
        ) or [""])
    return lines


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None or "" is a meaningful value but “no input”
must still be told apart.
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "wrap",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
