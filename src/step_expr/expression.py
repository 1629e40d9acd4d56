from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import regex

from .arguments import Argument, build_arguments
from .placeholder_types import PlaceholderType
from .tree import TreeRegexp


@dataclass(frozen=True)
class CompiledExpression:
    """The immutable result of compiling an expression.

    Attributes:
        source:            The expression as authored.
        pattern:           Anchored pattern string fed to the regex engine.
        placeholder_types: One entry per placeholder, in source order; lines
                           up with the top-level capture groups of *pattern*.
        match_timeout:     Seconds allowed per ``match`` (``None`` = no limit).

    Equality ignores the compiled engine object, so compiling the same source
    twice against the same registry yields equal expressions.
    """

    source: str
    pattern: str
    placeholder_types: Tuple[PlaceholderType, ...]
    match_timeout: Optional[float] = field(default=None, compare=False)
    tree: TreeRegexp = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tree", TreeRegexp(self.pattern))

    @property
    def regexp(self) -> regex.Pattern:
        return self.tree.regexp

    def match(self, text: str) -> Optional[List[Argument]]:
        """Return the decoded arguments for *text*, or ``None`` if it does not match."""
        return build_arguments(self.tree, text, self.placeholder_types, timeout=self.match_timeout)

    def __str__(self) -> str:
        return repr(self.source)
