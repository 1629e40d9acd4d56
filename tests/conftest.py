"""pytest configuration and shared fixtures."""

import pytest

from step_expr import CompileContext, PlaceholderType, PlaceholderTypeRegistry, build_default_compiler


@pytest.fixture
def registry():
    """Default registry with the built-in placeholder types."""
    return PlaceholderTypeRegistry()


@pytest.fixture
def compiler(registry):
    """Compiler wired to the default registry."""
    return build_default_compiler(registry=registry)


@pytest.fixture
def digits_type():
    """An ``int`` type with a single decimal-digit fragment."""
    return PlaceholderType("int", r"\d+", int)


@pytest.fixture
def digits_compiler(digits_type):
    """Compiler whose only type is the single-fragment ``int``."""
    registry = PlaceholderTypeRegistry(include_builtins=False)
    registry.define_placeholder_type(digits_type)
    return build_default_compiler(registry=registry)


@pytest.fixture
def make_ctx(registry):
    """Factory for a fresh CompileContext over *source*."""

    def _make(source=""):
        return CompileContext(source=source, lookup=registry.lookup_by_type_name)

    return _make
