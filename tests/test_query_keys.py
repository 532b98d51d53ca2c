"""Tests for cache keys and operation-name extraction."""

from gridkit.core.queries import FILTER_METADATA_QUERY, PROFILE_SEARCH_QUERY
from gridkit.core.query_keys import extract_operation_name, grid_keys


def test_extract_operation_name():
    assert extract_operation_name(FILTER_METADATA_QUERY) == "GetFilterMetadata"
    assert extract_operation_name(PROFILE_SEARCH_QUERY) == "SearchProfiles"
    assert extract_operation_name("mutation DoThing { x }") == "DoThing"
    assert extract_operation_name("subscription OnThing { x }") == "OnThing"
    assert extract_operation_name("{ profileTypes { id } }") is None


def test_key_hierarchy():
    assert grid_keys.all() == ("grid",)
    assert grid_keys.companies() == ("grid", "company")
    assert grid_keys.company("42") == ("grid", "company", "42")
    assert grid_keys.searches() == ("grid", "search")


def test_variables_are_canonical():
    a = grid_keys.graphql("SearchProfiles", {"limit": 25, "where": {"b": 1, "a": 2}})
    b = grid_keys.graphql("SearchProfiles", {"where": {"a": 2, "b": 1}, "limit": 25})
    assert a == b
    assert grid_keys.graphql("Q") == ("grid", "graphql", "Q", None)


def test_for_query_uses_operation_name():
    assert grid_keys.for_query("{ x }")[:3] == ("grid", "graphql", "anonymous")
    assert grid_keys.for_query(PROFILE_SEARCH_QUERY, {"limit": 1})[2] == "SearchProfiles"
