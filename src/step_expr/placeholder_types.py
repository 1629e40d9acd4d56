"""Placeholder type definitions.

A ``PlaceholderType`` names one kind of value that can appear in step text
(``{int}``, ``{word}``, …) and lists the regex fragments that match it.
The fragments are tried as alternatives inside a single capture group, so a
type always occupies exactly one capture slot in a compiled pattern.

Exports
-------
PlaceholderType
    Frozen dataclass: ``name``, ``alternatives``, ``transformer``.

check_placeholder_name
    Reject names that would be ambiguous inside an expression.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple, Union

import regex

from .errors import NamingViolation

# Characters the Escaper prefixes with a backslash.  A name arrives here
# already escaped, so undo that before checking.
_UNESCAPE_RE = regex.compile(r"\\([\[$.|?*+\]])")
_ILLEGAL_NAME_RE = regex.compile(r"([\[\]()$.|?*+])")


def check_placeholder_name(name: str) -> None:
    """Raise ``NamingViolation`` if *name* contains a regex metacharacter.

    ::

        check_placeholder_name("int")     # ok
        check_placeholder_name("")        # ok – the anonymous type
        check_placeholder_name("a.b")     # NamingViolation('.')
    """
    unescaped = _UNESCAPE_RE.sub(r"\1", name)
    m = _ILLEGAL_NAME_RE.search(unescaped)
    if m is not None:
        raise NamingViolation(unescaped, m.group(1))


def _identity(*values: Any) -> Any:
    return values[0] if values else None


def _pattern_sources(alternatives: Union[str, Any, Iterable[Union[str, Any]]]) -> Tuple[str, ...]:
    """Normalise a fragment or list of fragments into a tuple of pattern strings.

    Compiled patterns (``regex`` or ``re``) contribute their ``.pattern``.
    """
    if isinstance(alternatives, str) or hasattr(alternatives, "pattern"):
        alternatives = [alternatives]
    return tuple(a if isinstance(a, str) else a.pattern for a in alternatives)


@dataclass(frozen=True)
class PlaceholderType:
    """Named set of regex fragments plus a converter for the captured text.

    Attributes:
        name:         Identifier used inside ``{…}``.  ``""`` is the
                      anonymous type matched by ``{}``.
        alternatives: Non-empty tuple of regex fragments.  A single string or
                      compiled pattern is accepted and wrapped.
        transformer:  Called with the decoded group values (one value per
                      inner capture group of the fragment, or the whole match
                      when the fragment has none).  ``None`` → identity.
    """

    name: str
    alternatives: Sequence[str]
    transformer: Optional[Callable[..., Any]] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        check_placeholder_name(self.name)
        sources = _pattern_sources(self.alternatives)
        if not sources:
            raise ValueError(f"Placeholder type {self.name!r} needs at least one pattern")
        object.__setattr__(self, "alternatives", sources)
        if self.transformer is None:
            object.__setattr__(self, "transformer", _identity)

    def transform(self, group_values: Sequence[Optional[str]]) -> Any:
        """Convert captured group values into the typed argument."""
        return self.transformer(*group_values)
