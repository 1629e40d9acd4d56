"""Placeholder substitution: everything that touches ``{…}`` syntax.

Exports
-------
PLACEHOLDER_RE
    Matches ``{name}`` with an optional leading double backslash.  Also used
    by the optional and alternation passes to reject placeholders.

DOUBLE_ESCAPE
    The two-backslash marker the Escaper leaves where the author wrote one.

build_capture_pattern
    Turn a type's fragments into a single capture group.

PlaceholderSubstitutor
    The pass itself.  Must run after optional/alternation rewriting, which
    only touch parentheses and slashes.
"""

from __future__ import annotations

from typing import Sequence

import regex

from ..core import CompileContext, RewritePass
from ..errors import UndefinedPlaceholderType
from ..placeholder_types import check_placeholder_name

PLACEHOLDER_RE = regex.compile(r"(\\\\)?\{([^}]*)\}")
DOUBLE_ESCAPE = "\\\\"


def build_capture_pattern(alternatives: Sequence[str]) -> str:
    """Wrap fragments so that they occupy exactly one capture slot.

    ::

        build_capture_pattern([r"\\d+"])           # '(\\d+)'
        build_capture_pattern([r"-?\\d+", r"\\d+"])  # '((?:-?\\d+)|(?:\\d+))'
    """
    if len(alternatives) == 1:
        return f"({alternatives[0]})"
    return "(" + "|".join(f"(?:{a})" for a in alternatives) + ")"


class PlaceholderSubstitutor(RewritePass):
    """Replace ``{name}`` with a capture group and record the resolved type.

    ``\\{name}`` as authored stays literal braces: no lookup, no group.
    """

    def apply(self, expression: str, ctx: CompileContext) -> str:
        def replace(m: regex.Match) -> str:
            name = m.group(2)
            if m.group(1) == DOUBLE_ESCAPE:
                return f"\\{{{name}\\}}"

            check_placeholder_name(name)
            placeholder_type = ctx.lookup(name)
            if placeholder_type is None:
                raise UndefinedPlaceholderType(name)

            ctx.placeholder_types.append(placeholder_type)
            return build_capture_pattern(placeholder_type.alternatives)

        return PLACEHOLDER_RE.sub(replace, expression)
