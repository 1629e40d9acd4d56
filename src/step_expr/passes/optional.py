"""Optional text: ``cuke(s)`` → ``cuke(?:s)?``.

A placeholder can not be optional: decoding needs a capture for every
tracked type.  ``({int})`` therefore fails.  An author who wants literal
parentheses escapes the opening one, ``\\(3)``, which after the Escaper
reaches this pass as a double backslash and is emitted as ``\\(3\\)``.
"""

from __future__ import annotations

import regex

from ..core import CompileContext, RewritePass
from ..errors import OptionalPlaceholderRestriction
from .placeholders import DOUBLE_ESCAPE, PLACEHOLDER_RE

OPTIONAL_RE = regex.compile(r"(\\\\)?\(([^)]+)\)")


class OptionalGroupRewriter(RewritePass):

    def apply(self, expression: str, ctx: CompileContext) -> str:
        def replace(m: regex.Match) -> str:
            inner = m.group(2)
            if m.group(1) == DOUBLE_ESCAPE:
                return f"\\({inner}\\)"
            if PLACEHOLDER_RE.search(inner):
                raise OptionalPlaceholderRestriction(ctx.source)
            return f"(?:{inner})?"

        return OPTIONAL_RE.sub(replace, expression)
