"""Tests for inline GraphQL literal rendering."""

from gridkit.core.literals import (
    ListLiteral,
    NullLiteral,
    ObjectLiteral,
    StringLiteral,
    render_literal,
    to_literal,
)
from gridkit.core.models import FilterOption


class TestRenderLiteral:
    def test_in_list(self):
        assert render_literal({"_in": ["1", "2"]}) == '{ _in: ["1", "2"] }'

    def test_null(self):
        assert render_literal(None) == "null"

    def test_scalars(self):
        assert render_literal("sol") == '"sol"'
        assert render_literal(42) == "42"
        assert render_literal(1.5) == "1.5"
        assert render_literal(2.0) == "2"
        assert render_literal(True) == "true"
        assert render_literal(False) == "false"

    def test_string_escaping(self):
        assert render_literal('say "hi"\n') == '"say \\"hi\\"\\n"'

    def test_empty_containers(self):
        assert render_literal({}) == "{}"
        assert render_literal([]) == "[]"

    def test_nested_object_keeps_key_order(self):
        value = {"profileTags": {"tagId": {"_eq": "7"}}, "name": {"_contains": "a"}}
        assert render_literal(value) == (
            '{ profileTags: { tagId: { _eq: "7" } }, name: { _contains: "a" } }'
        )

    def test_sets_render_deterministically(self):
        assert render_literal({"b", "a"}) == render_literal({"a", "b"}) == '["a", "b"]'

    def test_models_render_by_alias(self):
        assert render_literal(FilterOption(id="1", name="A")) == '{ id: "1", name: "A" }'

    def test_unknown_values_fall_back_to_strings(self):
        class Opaque:
            def __str__(self):
                return "opaque"

        assert render_literal(Opaque()) == '"opaque"'


class TestToLiteral:
    def test_tagged_variants(self):
        assert to_literal(None) == NullLiteral()
        assert to_literal("x") == StringLiteral("x")
        assert to_literal(["x"]) == ListLiteral((StringLiteral("x"),))
        assert to_literal({"k": None}) == ObjectLiteral((("k", NullLiteral()),))
