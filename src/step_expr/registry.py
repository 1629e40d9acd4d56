from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .builtin_types import builtin_placeholder_types
from .placeholder_types import PlaceholderType

logger = logging.getLogger(__name__)


class PlaceholderTypeRegistry:
    """Name → ``PlaceholderType`` lookup used by the compiler.

    ::

        registry = PlaceholderTypeRegistry()
        registry.define_placeholder_type(PlaceholderType("color", "red|blue"))
        registry.lookup_by_type_name("color")     # PlaceholderType(name='color', …)
        registry.lookup_by_type_name("missing")   # None
    """

    def __init__(self, *, include_builtins: bool = True) -> None:
        self._types: Dict[str, PlaceholderType] = {}
        if include_builtins:
            for ptype in builtin_placeholder_types():
                self.define_placeholder_type(ptype)

    def define_placeholder_type(self, ptype: PlaceholderType) -> PlaceholderType:
        """Register *ptype*.  Raises ``ValueError`` if the name is taken."""
        if ptype.name in self._types:
            raise ValueError(f"Placeholder type {{{ptype.name}}} is already registered")
        self._types[ptype.name] = ptype
        logger.debug("registered placeholder type {%s} -> %r", ptype.name, ptype.alternatives)
        return ptype

    def lookup_by_type_name(self, name: str) -> Optional[PlaceholderType]:
        """Return the type registered under *name*, or ``None``."""
        return self._types.get(name)

    def placeholder_types(self) -> List[PlaceholderType]:
        """Return registered types in definition order."""
        return list(self._types.values())

    def __contains__(self, name: object) -> bool:
        return name in self._types
