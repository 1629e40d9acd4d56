"""Core abstractions: compile context, rewrite passes, pass registry, Compiler.

This module owns the *interfaces* of the compilation pipeline.  The concrete
passes live in the ``passes`` sub-package and are wired together by
``factory.build_default_compiler``.

Compilation flow (``Compiler.compile`` entry point)::

    source (as authored)
      │
      ▼
    ctx = CompileContext(source, lookup)          ← fresh per call
      │
      ▼
    PassRegistry.run_all(source, ctx)             ← every pass, priority desc
      │   escape → optional → alternation → placeholders → anchor
      │   (placeholders appends to ctx.placeholder_types)
      ▼
    CompiledExpression(source, pattern, tuple(ctx.placeholder_types))

Any exception raised by a pass propagates out of ``compile``; no compiled
object exists until every pass has succeeded.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

import regex

from .errors import InvalidPattern
from .expression import CompiledExpression
from .placeholder_types import PlaceholderType

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Optional[PlaceholderType]]


# ─────────────────────────────────────────────────────────────────────────────
# CompileContext
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class CompileContext:
    """State threaded through one ``compile`` call.

    Attributes:
        source:            The expression exactly as authored (for messages).
        lookup:            ``name → PlaceholderType | None``.
        placeholder_types: Append-only; filled by the placeholder pass in
                           left-to-right source order.
        metadata:          Free side-channel for custom passes.
    """

    source: str
    lookup: Lookup
    placeholder_types: List[PlaceholderType] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


# ─────────────────────────────────────────────────────────────────────────────
# Rewrite passes
# ─────────────────────────────────────────────────────────────────────────────


class RewritePass(ABC):
    """One string → string step of the compilation pipeline."""

    @abstractmethod
    def apply(self, expression: str, ctx: CompileContext) -> str:
        """Return the rewritten expression.  Raise to abort compilation."""


@dataclass
class PassNode:
    """A named, prioritised pass.  Higher priority runs earlier."""

    name: str
    priority: int
    rewrite: RewritePass


class PassRegistry:
    """Ordered container of rewrite passes with *run-all* semantics.

    ``run_all`` feeds the expression through every pass by descending
    priority; each pass receives the previous pass's output.

    ::

        expression = registry.run_all(ctx.source, ctx)
    """

    def __init__(self) -> None:
        self._nodes: List[PassNode] = []

    # -- registration -------------------------------------------------------

    def register(self, node: PassNode) -> None:
        """Add a pass.  Names must be unique."""
        if any(n.name == node.name for n in self._nodes):
            raise ValueError(f"Pass {node.name!r} is already registered")
        self._nodes.append(node)

    # -- execution ----------------------------------------------------------

    def run_all(self, expression: str, ctx: CompileContext) -> str:
        for node in self.nodes():
            expression = node.rewrite.apply(expression, ctx)
        return expression

    # -- introspection ------------------------------------------------------

    def nodes(self) -> List[PassNode]:
        """Return nodes sorted by descending priority."""
        return sorted(self._nodes, key=lambda n: n.priority, reverse=True)


# ─────────────────────────────────────────────────────────────────────────────
# Compiler
# ─────────────────────────────────────────────────────────────────────────────


class Compiler:
    """Turns expression sources into ``CompiledExpression`` objects.

    A Compiler holds no per-compilation state, so one instance can compile
    many expressions (from many threads) as long as *lookup* is side-effect
    free.

    Args:
        lookup:        ``name → PlaceholderType | None``; usually
                       ``PlaceholderTypeRegistry.lookup_by_type_name``.
        passes:        The pass pipeline.
        match_timeout: Seconds allowed per match call (``None`` = unlimited),
                       handed to every compiled expression.
    """

    def __init__(
            self,
            *,
            lookup: Lookup,
            passes: PassRegistry,
            match_timeout: Optional[float] = None,
    ) -> None:
        self.lookup = lookup
        self.passes = passes
        self.match_timeout = match_timeout

    def compile(self, source: str) -> CompiledExpression:
        """Compile *source*.  Raises an ``ExpressionError`` subclass on failure."""
        ctx = CompileContext(source=source, lookup=self.lookup)
        pattern = self.passes.run_all(source, ctx)
        try:
            compiled = CompiledExpression(
                source=source,
                pattern=pattern,
                placeholder_types=tuple(ctx.placeholder_types),
                match_timeout=self.match_timeout,
            )
        except regex.error as err:
            raise InvalidPattern(source, pattern, str(err)) from err
        logger.debug("compiled %s -> /%s/", compiled, pattern)
        return compiled
