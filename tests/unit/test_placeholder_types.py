"""Tests for PlaceholderType, name validation, built-ins and the registry."""

import pytest
import regex

from step_expr import (
    ErrorKind,
    NamingViolation,
    PlaceholderType,
    PlaceholderTypeRegistry,
    builtin_placeholder_types,
    check_placeholder_name,
)


class TestCheckPlaceholderName:
    """Test check_placeholder_name."""

    def test_accepts_plain_names(self):
        check_placeholder_name("int")
        check_placeholder_name("my-type_2")
        check_placeholder_name("")

    @pytest.mark.parametrize("name, char", [
        ("a(b", "("),
        ("a)b", ")"),
        ("a.b", "."),
        ("a|b", "|"),
        ("a?", "?"),
        ("a*", "*"),
        ("a+", "+"),
        ("$a", "$"),
        ("[a]", "["),
    ])
    def test_rejects_illegal_characters(self, name, char):
        with pytest.raises(NamingViolation) as exc_info:
            check_placeholder_name(name)

        assert exc_info.value.character == char
        assert exc_info.value.kind is ErrorKind.NAMING_VIOLATION

    def test_unescapes_before_checking(self):
        """Names reach the check already escaped; the message shows the original."""
        with pytest.raises(NamingViolation) as exc_info:
            check_placeholder_name(r"a\.b")

        assert exc_info.value.name == "a.b"


class TestPlaceholderType:
    """Test PlaceholderType."""

    def test_single_string_wrapped(self):
        ptype = PlaceholderType("color", "red|blue")

        assert ptype.alternatives == ("red|blue",)

    def test_compiled_pattern_source_kept(self):
        ptype = PlaceholderType("color", [regex.compile("red|blue"), "green"])

        assert ptype.alternatives == ("red|blue", "green")

    def test_empty_alternatives_rejected(self):
        with pytest.raises(ValueError):
            PlaceholderType("nothing", [])

    def test_illegal_name_rejected(self):
        with pytest.raises(NamingViolation):
            PlaceholderType("bad.name", r"\w+")

    def test_default_transformer_is_identity(self):
        assert PlaceholderType("word", r"\w+").transform(["abc"]) == "abc"

    def test_custom_transformer(self):
        ptype = PlaceholderType("upper", r"\w+", str.upper)

        assert ptype.transform(["abc"]) == "ABC"


class TestBuiltinTypes:
    """Test the built-in type set."""

    def test_names(self):
        assert [p.name for p in builtin_placeholder_types()] == ["int", "float", "word", "string", ""]

    def test_int_fragments(self):
        int_type = builtin_placeholder_types()[0]

        assert int_type.alternatives == (r"-?\d+", r"\d+")
        assert int_type.transform(["-12"]) == -12

    def test_string_unquotes(self):
        string_type = builtin_placeholder_types()[3]

        assert string_type.transform(['say \\"hi\\"', None]) == 'say "hi"'
        assert string_type.transform([None, "it\\'s"]) == "it's"


class TestPlaceholderTypeRegistry:
    """Test PlaceholderTypeRegistry."""

    def test_builtins_registered(self, registry):
        for name in ("int", "float", "word", "string", ""):
            assert registry.lookup_by_type_name(name) is not None

    def test_lookup_missing_returns_none(self, registry):
        assert registry.lookup_by_type_name("missing") is None

    def test_without_builtins(self):
        registry = PlaceholderTypeRegistry(include_builtins=False)

        assert registry.placeholder_types() == []
        assert "int" not in registry

    def test_define_and_lookup(self, registry):
        color = PlaceholderType("color", "red|blue")
        registry.define_placeholder_type(color)

        assert registry.lookup_by_type_name("color") is color
        assert registry.placeholder_types()[-1] is color

    def test_duplicate_rejected(self, registry):
        with pytest.raises(ValueError, match="already registered"):
            registry.define_placeholder_type(PlaceholderType("int", r"\d+"))
