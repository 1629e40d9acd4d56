"""Compile-time error taxonomy.

Every failure raised while compiling an expression is an ``ExpressionError``
tagged with an ``ErrorKind``.  Callers can branch on the exception class or
on ``exc.kind``; the message text is for humans only.

Exports
-------
ErrorKind
    Enum tag for the four compile-time failure kinds.

ExpressionError
    Base class (a ``ValueError``).

OptionalPlaceholderRestriction / AlternativePlaceholderRestriction
    A placeholder was found inside an optional group / alternation.

UndefinedPlaceholderType
    The registry has no type for a referenced name.

NamingViolation
    A placeholder name contains an illegal character.

InvalidPattern
    The rewritten text is rejected by the regex engine (untagged).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    OPTIONAL_PLACEHOLDER_RESTRICTION = "optional_placeholder_restriction"
    ALTERNATIVE_PLACEHOLDER_RESTRICTION = "alternative_placeholder_restriction"
    UNDEFINED_PLACEHOLDER_TYPE = "undefined_placeholder_type"
    NAMING_VIOLATION = "naming_violation"


PLACEHOLDER_TYPES_CANNOT_BE_OPTIONAL = "Placeholder types cannot be optional: "
PLACEHOLDER_TYPES_CANNOT_BE_ALTERNATIVE = "Placeholder types cannot be alternative: "


class ExpressionError(ValueError):
    """Base class for errors raised while compiling an expression."""

    kind: Optional[ErrorKind] = None


class OptionalPlaceholderRestriction(ExpressionError):
    """``(...)`` optional text contains a ``{placeholder}``."""

    kind = ErrorKind.OPTIONAL_PLACEHOLDER_RESTRICTION

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"{PLACEHOLDER_TYPES_CANNOT_BE_OPTIONAL}{source}")


class AlternativePlaceholderRestriction(ExpressionError):
    """A ``a/b`` alternative fragment contains a ``{placeholder}``."""

    kind = ErrorKind.ALTERNATIVE_PLACEHOLDER_RESTRICTION

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"{PLACEHOLDER_TYPES_CANNOT_BE_ALTERNATIVE}{source}")


class UndefinedPlaceholderType(ExpressionError):
    kind = ErrorKind.UNDEFINED_PLACEHOLDER_TYPE

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Undefined placeholder type {{{type_name}}}")


class NamingViolation(ExpressionError):
    kind = ErrorKind.NAMING_VIOLATION

    def __init__(self, name: str, character: str) -> None:
        self.name = name
        self.character = character
        super().__init__(f"Illegal character {character!r} in placeholder name {{{name}}}")


class InvalidPattern(ExpressionError):
    """The rewritten expression is not a valid regex, e.g. ``a (b``.

    Not one of the four tagged kinds: ``kind`` stays ``None``.
    """

    def __init__(self, source: str, pattern: str, reason: str) -> None:
        self.source = source
        self.pattern = pattern
        super().__init__(f"Expression {source!r} compiles to invalid pattern /{pattern}/: {reason}")
