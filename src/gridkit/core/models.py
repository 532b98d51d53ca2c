"""
Pydantic models for Grid filter selections, filter metadata and facet counts.

Defines FilterSelection (the user's current choice per dimension),
FilterMetadata (the option catalog returned by the metadata query), and
FacetCountTable (the decoded result of a facet-count query).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Dimensions
# ---------------------------------------------------------------------------


class Dimension(str, Enum):
    """Filterable axes, in the fixed order used for predicates and aliases."""

    TYPES = "types"
    SECTORS = "sectors"
    STATUSES = "statuses"
    TAGS = "tags"

    @property
    def alias_prefix(self) -> str:
        return _ALIAS_PREFIXES[self]

    @property
    def field_path(self) -> str:
        """Dotted field path on profileInfos; tags go through the join relation."""
        return _FIELD_PATHS[self]

    def alias(self, index: int) -> str:
        return f"{self.alias_prefix}_{index}"


_ALIAS_PREFIXES = {
    Dimension.TYPES: "type",
    Dimension.SECTORS: "sector",
    Dimension.STATUSES: "status",
    Dimension.TAGS: "tag",
}

_FIELD_PATHS = {
    Dimension.TYPES: "profileTypeId",
    Dimension.SECTORS: "profileSectorId",
    Dimension.STATUSES: "profileStatusId",
    Dimension.TAGS: "profileTags.tagId",
}


# ---------------------------------------------------------------------------
# Filter selection
# ---------------------------------------------------------------------------


class FilterSelection(BaseModel):
    """Current filter choice. Identifiers are opaque and passed through as-is."""

    model_config = ConfigDict(frozen=True)

    types: Optional[List[Any]] = None
    sectors: Optional[List[Any]] = None
    statuses: Optional[List[Any]] = None
    tags: Optional[List[Any]] = None
    search: Optional[str] = None

    @field_validator("types", "sectors", "statuses", "tags", mode="before")
    @classmethod
    def _drop_non_sequences(cls, value: Any) -> Any:
        # Entries stay opaque; only the container itself is checked.
        if isinstance(value, (list, tuple)):
            return list(value)
        return None

    @field_validator("search", mode="before")
    @classmethod
    def _drop_non_string_search(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None

    @classmethod
    def coerce(cls, value: Any) -> "FilterSelection":
        """Accept None, a mapping, or an existing selection."""
        if value is None:
            return cls()
        if isinstance(value, FilterSelection):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        return cls()

    @property
    def normalized_search(self) -> Optional[str]:
        if not isinstance(self.search, str):
            return None
        trimmed = self.search.strip()
        return trimmed or None

    def values_for(self, dimension: Dimension) -> List[Any]:
        return list(getattr(self, dimension.value) or [])

    def without(self, dimension: Dimension) -> "FilterSelection":
        return self.model_copy(update={dimension.value: None})

    @property
    def has_filters(self) -> bool:
        if self.normalized_search is not None:
            return True
        return any(self.values_for(dimension) for dimension in Dimension)


# ---------------------------------------------------------------------------
# Filter metadata (option catalog)
# ---------------------------------------------------------------------------


class FilterOption(BaseModel):
    """A single option from one of the dimension tables."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: Optional[str] = None

    @property
    def is_placeholder(self) -> bool:
        return not (self.name or "").strip()


class TagOption(FilterOption):
    """A tag option with its category."""

    model_config = ConfigDict(populate_by_name=True)

    tag_type: Optional[FilterOption] = Field(default=None, alias="tagType")


def _is_scalar_id(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def _is_valid_option(row: Any) -> bool:
    """True for rows that validate as a FilterOption; bad rows are skipped."""
    if isinstance(row, FilterOption):
        return True
    if not isinstance(row, Mapping):
        return False
    name = row.get("name")
    return _is_scalar_id(row.get("id")) and (name is None or _is_scalar_id(name))


class FilterMetadata(BaseModel):
    """All available filter dimensions, as returned by the metadata query."""

    model_config = ConfigDict(populate_by_name=True)

    profile_types: List[FilterOption] = Field(default_factory=list, alias="profileTypes")
    profile_sectors: List[FilterOption] = Field(
        default_factory=list, alias="profileSectors"
    )
    profile_statuses: List[FilterOption] = Field(
        default_factory=list, alias="profileStatuses"
    )
    product_types: List[FilterOption] = Field(default_factory=list, alias="productTypes")
    product_statuses: List[FilterOption] = Field(
        default_factory=list, alias="productStatuses"
    )
    asset_types: List[FilterOption] = Field(default_factory=list, alias="assetTypes")
    asset_statuses: List[FilterOption] = Field(
        default_factory=list, alias="assetStatuses"
    )
    tag_types: List[FilterOption] = Field(default_factory=list, alias="tagTypes")
    tags: List[TagOption] = Field(default_factory=list)

    @field_validator(
        "profile_types",
        "profile_sectors",
        "profile_statuses",
        "product_types",
        "product_statuses",
        "asset_types",
        "asset_statuses",
        "tag_types",
        mode="before",
    )
    @classmethod
    def _drop_invalid_options(cls, value: Any) -> List[Any]:
        if not isinstance(value, (list, tuple)):
            return []
        return [row for row in value if _is_valid_option(row)]

    @field_validator("tags", mode="before")
    @classmethod
    def _drop_invalid_tags(cls, value: Any) -> List[Any]:
        if not isinstance(value, (list, tuple)):
            return []
        rows: List[Any] = []
        for row in value:
            if not _is_valid_option(row):
                continue
            if isinstance(row, Mapping) and not _is_valid_option(row.get("tagType")):
                row = {**row, "tagType": None}
            rows.append(row)
        return rows

    @classmethod
    def coerce(cls, value: Any) -> "FilterMetadata":
        """Accept None, a raw metadata payload, or an existing catalog."""
        if isinstance(value, FilterMetadata):
            return value
        if not isinstance(value, Mapping):
            return cls()
        return cls.model_validate(dict(value))

    def options_for(self, dimension: Dimension) -> List[FilterOption]:
        if dimension is Dimension.TYPES:
            return list(self.profile_types)
        if dimension is Dimension.SECTORS:
            return list(self.profile_sectors)
        if dimension is Dimension.STATUSES:
            return list(self.profile_statuses)
        return list(self.tags)


# ---------------------------------------------------------------------------
# Facet counts
# ---------------------------------------------------------------------------


class FacetCountTable(BaseModel):
    """Per-option facet counts for each dimension plus the grand total."""

    types: Dict[str, int] = Field(default_factory=dict)
    sectors: Dict[str, int] = Field(default_factory=dict)
    statuses: Dict[str, int] = Field(default_factory=dict)
    tags: Dict[str, int] = Field(default_factory=dict)
    total: int = 0

    def counts_for(self, dimension: Dimension) -> Dict[str, int]:
        return getattr(self, dimension.value)

    def to_frame(self) -> pd.DataFrame:
        """Long-format frame with one row per (dimension, option)."""
        records = [
            {"dimension": dimension.value, "option_id": option_id, "count": count}
            for dimension in Dimension
            for option_id, count in self.counts_for(dimension).items()
        ]
        return pd.DataFrame(records, columns=["dimension", "option_id", "count"])
