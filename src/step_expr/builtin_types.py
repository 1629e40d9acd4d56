"""Built-in placeholder types.

Defines the standard types every default registry starts with:

* ``int``    – optionally signed integer → ``int``
* ``float``  – decimal with optional exponent → ``float``
* ``word``   – a run of non-whitespace → ``str``
* ``string`` – ``"…"`` or ``'…'`` → unquoted ``str``
* ``""``     – anonymous ``{}``, anything → ``str``

Custom types are added with
``PlaceholderTypeRegistry.define_placeholder_type`` or
``build_default_compiler(placeholder_types=...)``.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .placeholder_types import PlaceholderType

INTEGER_PATTERNS = (r"-?\d+", r"\d+")
FLOAT_PATTERN = r"(?=.*\d.*)[-+]?\d*(?:\.(?=\d.*))?\d*(?:\d+[E][+-]?\d+)?"
WORD_PATTERN = r"[^\s]+"
STRING_PATTERN = r""""([^"\\]*(\\.[^"\\]*)*)"|'([^'\\]*(\\.[^'\\]*)*)'"""
ANONYMOUS_PATTERN = r".*"


def _to_int(s: Optional[str] = None) -> Optional[int]:
    return int(s) if s is not None else None


def _to_float(s: Optional[str] = None) -> Optional[float]:
    return float(s) if s is not None else None


def _unquote(double: Optional[str], single: Optional[str]) -> str:
    # Exactly one branch of STRING_PATTERN participates in a match.
    arg = double if double is not None else single
    return arg.replace('\\"', '"').replace("\\'", "'")


def builtin_placeholder_types() -> Tuple[PlaceholderType, ...]:
    """Return fresh instances of the built-in types, in definition order."""
    return (
        PlaceholderType("int", INTEGER_PATTERNS, _to_int),
        PlaceholderType("float", FLOAT_PATTERN, _to_float),
        PlaceholderType("word", WORD_PATTERN),
        PlaceholderType("string", STRING_PATTERN, _unquote),
        PlaceholderType("", ANONYMOUS_PATTERN),
    )
