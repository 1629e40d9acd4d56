"""Compiler factory: the single place where all pieces are assembled.

``build_default_compiler`` is the recommended entry point for users who want
a working Compiler without hand-wiring the registry and passes.

Customisation points:

* **registry**          – ``PlaceholderTypeRegistry`` to resolve names.
                          ``None`` → a fresh registry with the built-ins.
* **placeholder_types** – extra types defined on that registry.
* **passes**            – replacement ``PassRegistry``.
                          ``None`` → ``build_default_passes()``.
* **match_timeout**     – seconds per regex match (default 2.0, ``None``
                          disables the limit).
"""

from __future__ import annotations

from typing import Iterable, Optional

from .core import Compiler, PassRegistry
from .passes import build_default_passes
from .placeholder_types import PlaceholderType
from .registry import PlaceholderTypeRegistry

DEFAULT_MATCH_TIMEOUT = 2.0


def build_default_compiler(
        *,
        registry: Optional[PlaceholderTypeRegistry] = None,
        placeholder_types: Optional[Iterable[PlaceholderType]] = None,
        passes: Optional[PassRegistry] = None,
        match_timeout: Optional[float] = DEFAULT_MATCH_TIMEOUT,
) -> Compiler:
    """Build a fully wired ``Compiler``.

    ::

        compiler = build_default_compiler()
        expr = compiler.compile("I have {int} cuke(s)")
        [arg.value for arg in expr.match("I have 3 cukes")]   # [3]
    """
    if registry is None:
        registry = PlaceholderTypeRegistry()
    for ptype in placeholder_types or ():
        registry.define_placeholder_type(ptype)

    return Compiler(
        lookup=registry.lookup_by_type_name,
        passes=passes if passes is not None else build_default_passes(),
        match_timeout=match_timeout,
    )
