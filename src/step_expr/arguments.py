from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .placeholder_types import PlaceholderType
from .tree import Group, TreeRegexp


class Argument:
    """A matched placeholder: the capture group and the type that decodes it."""

    def __init__(self, group: Group, placeholder_type: PlaceholderType) -> None:
        self.group = group
        self.placeholder_type = placeholder_type

    @property
    def value(self) -> Any:
        return self.placeholder_type.transform(self.group.values)

    def __repr__(self) -> str:
        return f"Argument({self.placeholder_type.name!r}, {self.group.value!r})"


def build_arguments(
        tree: TreeRegexp,
        text: str,
        placeholder_types: Sequence[PlaceholderType],
        timeout: Optional[float] = None,
) -> Optional[List[Argument]]:
    """Match *text* and pair each top-level capture with its placeholder type.

    Returns ``None`` when *text* does not match, otherwise one ``Argument``
    per placeholder (an empty list for expressions without placeholders).
    """
    group = tree.match(text, timeout=timeout)
    if group is None:
        return None

    arg_groups = group.children
    if len(arg_groups) != len(placeholder_types):
        raise ValueError(
            f"Expression /{tree.pattern}/ has {len(arg_groups)} capture groups "
            f"({[g.value for g in arg_groups]}), but there were "
            f"{len(placeholder_types)} placeholder types "
            f"({[p.name for p in placeholder_types]})"
        )
    return [Argument(g, p) for g, p in zip(arg_groups, placeholder_types)]
