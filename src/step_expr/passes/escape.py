"""Escaping and anchoring: the first and last passes."""

from __future__ import annotations

import regex

from ..core import CompileContext, RewritePass

# Does not include ( ) { } – they have meaning for the later passes.
ESCAPE_RE = regex.compile(r"([\\^\[$.|?*+\]])")


class Escaper(RewritePass):
    """Backslash-escape ``\\ ^ [ $ . | ? * + ]`` so they match literally."""

    def apply(self, expression: str, ctx: CompileContext) -> str:
        return ESCAPE_RE.sub(r"\\\1", expression)


class Anchorer(RewritePass):
    """Anchor the pattern so it must match the whole step text."""

    def apply(self, expression: str, ctx: CompileContext) -> str:
        return f"^{expression}$"
