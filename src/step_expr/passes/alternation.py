"""Alternation: ``cuke/cucumber`` → ``(?:cuke|cucumber)``.

Alternatives are whitespace-bounded runs of text containing ``/``.  An
escaped slash (``\\/`` as authored, a double backslash plus ``/`` once the
Escaper has run) is literal and does not split the run.  A run whose only
slashes were escaped is emitted with the slashes unescaped and no group.
"""

from __future__ import annotations

from typing import List

import regex

from ..core import CompileContext, RewritePass
from ..errors import AlternativePlaceholderRestriction
from .placeholders import PLACEHOLDER_RE

ALTERNATIVE_RUN_RE = regex.compile(r"[^\s/]+(?:/[^\s/]+)+")
_SEPARATOR_RE = regex.compile(r"(?<!\\)/")
_ESCAPED_SLASH = "\\\\/"


def split_alternatives(run: str) -> List[str]:
    """Split *run* on unescaped slashes and unescape the literal ones."""
    return [part.replace(_ESCAPED_SLASH, "/") for part in _SEPARATOR_RE.split(run)]


class AlternationRewriter(RewritePass):

    def apply(self, expression: str, ctx: CompileContext) -> str:
        def replace(m: regex.Match) -> str:
            parts = split_alternatives(m.group(0))
            if len(parts) == 1:
                return parts[0]
            for part in parts:
                if PLACEHOLDER_RE.search(part):
                    raise AlternativePlaceholderRestriction(ctx.source)
            return f"(?:{'|'.join(parts)})"

        return ALTERNATIVE_RUN_RE.sub(replace, expression)
