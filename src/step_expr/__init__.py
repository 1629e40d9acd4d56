"""step_expr: compile step expressions such as ``I have {int} cuke(s)``
into anchored regular expressions with typed placeholders.
"""

from .arguments import Argument, build_arguments
from .builtin_types import builtin_placeholder_types
from .core import CompileContext, Compiler, PassNode, PassRegistry, RewritePass
from .errors import (
    AlternativePlaceholderRestriction,
    ErrorKind,
    ExpressionError,
    InvalidPattern,
    NamingViolation,
    OptionalPlaceholderRestriction,
    UndefinedPlaceholderType,
)
from .expression import CompiledExpression
from .factory import build_default_compiler
from .passes import (
    AlternationRewriter,
    Anchorer,
    Escaper,
    OptionalGroupRewriter,
    PlaceholderSubstitutor,
    build_default_passes,
)
from .placeholder_types import PlaceholderType, check_placeholder_name
from .registry import PlaceholderTypeRegistry
from .tree import Group, GroupBuilder, TreeRegexp

__all__ = [
    # Core
    "CompileContext",
    "Compiler",
    "PassNode",
    "PassRegistry",
    "RewritePass",
    "CompiledExpression",
    # Factory
    "build_default_compiler",
    "build_default_passes",
    # Passes
    "Escaper",
    "OptionalGroupRewriter",
    "AlternationRewriter",
    "PlaceholderSubstitutor",
    "Anchorer",
    # Types
    "PlaceholderType",
    "PlaceholderTypeRegistry",
    "builtin_placeholder_types",
    "check_placeholder_name",
    # Matching
    "Argument",
    "build_arguments",
    "Group",
    "GroupBuilder",
    "TreeRegexp",
    # Errors
    "ErrorKind",
    "ExpressionError",
    "InvalidPattern",
    "OptionalPlaceholderRestriction",
    "AlternativePlaceholderRestriction",
    "UndefinedPlaceholderType",
    "NamingViolation",
]
