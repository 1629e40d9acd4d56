"""Pass sub-package: the concrete RewritePass implementations."""

from ..core import PassNode, PassRegistry
from .alternation import AlternationRewriter
from .escape import Anchorer, Escaper
from .optional import OptionalGroupRewriter
from .placeholders import PlaceholderSubstitutor


def build_default_passes() -> PassRegistry:
    """Return a registry with the five standard passes in their fixed order.

    Priorities: escape 400 → optional 300 → alternation 200 →
    placeholders 100 → anchor 0.
    """
    registry = PassRegistry()
    registry.register(PassNode(name="escape", priority=400, rewrite=Escaper()))
    registry.register(PassNode(name="optional", priority=300, rewrite=OptionalGroupRewriter()))
    registry.register(PassNode(name="alternation", priority=200, rewrite=AlternationRewriter()))
    registry.register(PassNode(name="placeholders", priority=100, rewrite=PlaceholderSubstitutor()))
    registry.register(PassNode(name="anchor", priority=0, rewrite=Anchorer()))
    return registry


__all__ = [
    "Escaper",
    "OptionalGroupRewriter",
    "AlternationRewriter",
    "PlaceholderSubstitutor",
    "Anchorer",
    "build_default_passes",
]
