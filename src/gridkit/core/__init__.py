"""Pure query-building core: where clauses, facet queries, literals, keys."""

from .expressions import And, BooleanExpression, Empty, FieldMatch, combine
from .facets import (
    TOTAL_ALIAS,
    CompiledFacetQuery,
    FacetCompiler,
    compile_facets,
    decode_facet_counts,
    facet_options,
)
from .filters import ProfileWhereBuilder, build_profile_where
from .literals import render_literal, render_where, to_literal
from .models import (
    Dimension,
    FacetCountTable,
    FilterMetadata,
    FilterOption,
    FilterSelection,
    TagOption,
)
from .queries import FILTER_METADATA_QUERY, PROFILE_SEARCH_QUERY
from .query_keys import GridKeys, extract_operation_name, grid_keys

__all__ = [
    "And",
    "BooleanExpression",
    "CompiledFacetQuery",
    "Dimension",
    "Empty",
    "FILTER_METADATA_QUERY",
    "FacetCompiler",
    "FacetCountTable",
    "FieldMatch",
    "FilterMetadata",
    "FilterOption",
    "FilterSelection",
    "GridKeys",
    "PROFILE_SEARCH_QUERY",
    "ProfileWhereBuilder",
    "TOTAL_ALIAS",
    "TagOption",
    "build_profile_where",
    "combine",
    "compile_facets",
    "decode_facet_counts",
    "extract_operation_name",
    "facet_options",
    "grid_keys",
    "render_literal",
    "render_where",
    "to_literal",
]
