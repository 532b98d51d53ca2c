"""Tests for selection, catalog and count-table models."""

import pytest
from pydantic import ValidationError

from gridkit.core.filters import ProfileWhereBuilder
from gridkit.core.models import (
    Dimension,
    FacetCountTable,
    FilterMetadata,
    FilterOption,
    FilterSelection,
)


class TestFilterSelection:
    def test_is_frozen(self):
        selection = FilterSelection(types=["1"])
        with pytest.raises(ValidationError):
            selection.types = ["2"]

    def test_without_returns_copy(self):
        selection = FilterSelection(types=["1"], sectors=["2"])
        reduced = selection.without(Dimension.TYPES)
        assert reduced.types is None
        assert reduced.sectors == ["2"]
        assert selection.types == ["1"]

    def test_builder_exclude_matches_without(self):
        selection = FilterSelection(types=["1"], sectors=["2"], search="x")
        builder = ProfileWhereBuilder()
        assert builder.build(selection, exclude=Dimension.SECTORS) == builder.build(
            selection.without(Dimension.SECTORS)
        )

    def test_malformed_containers_become_none(self):
        selection = FilterSelection.model_validate(
            {"types": "2", "tags": ("7",), "search": 5}
        )
        assert selection.types is None
        assert selection.tags == ["7"]
        assert selection.search is None

    def test_has_filters(self):
        assert not FilterSelection().has_filters
        assert not FilterSelection(types=[], search=" ").has_filters
        assert FilterSelection(tags=["7"]).has_filters
        assert FilterSelection(search="x").has_filters

    def test_coerce(self):
        assert FilterSelection.coerce(None) == FilterSelection()
        assert FilterSelection.coerce({"types": ["1"]}).types == ["1"]
        assert FilterSelection.coerce(42) == FilterSelection()


class TestFilterMetadata:
    def test_placeholder_detection(self):
        assert FilterOption(id="1", name=" ").is_placeholder
        assert FilterOption(id="1", name="").is_placeholder
        assert FilterOption(id="1").is_placeholder
        assert not FilterOption(id="1", name="0").is_placeholder

    def test_numeric_ids_become_strings(self):
        assert FilterOption(id=3, name="x").id == "3"

    def test_options_for_each_dimension(self, full_catalog):
        assert [o.id for o in full_catalog.options_for(Dimension.TYPES)] == ["1", "2"]
        assert [o.id for o in full_catalog.options_for(Dimension.SECTORS)] == ["5"]
        assert [o.id for o in full_catalog.options_for(Dimension.STATUSES)] == ["3"]
        assert [o.id for o in full_catalog.options_for(Dimension.TAGS)] == ["7", "8"]

    def test_tag_type_is_optional(self, full_catalog):
        assert full_catalog.tags[0].tag_type.id == "t"
        assert full_catalog.tags[1].tag_type is None

    def test_populate_by_field_name(self):
        metadata = FilterMetadata(profile_types=[FilterOption(id="1", name="A")])
        assert metadata.options_for(Dimension.TYPES)[0].name == "A"


class TestDimension:
    def test_aliases_and_paths(self):
        assert [d.alias(0) for d in Dimension] == ["type_0", "sector_0", "status_0", "tag_0"]
        assert Dimension.TAGS.field_path == "profileTags.tagId"


def test_empty_count_table_frame_has_columns():
    frame = FacetCountTable().to_frame()
    assert list(frame.columns) == ["dimension", "option_id", "count"]
    assert frame.empty
