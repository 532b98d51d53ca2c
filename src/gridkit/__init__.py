"""
gridkit — client-side data access toolkit for the Grid GraphQL API.

Builds Hasura-style where clauses from filter selections, compiles
cross-filtered facet-count queries, and runs them over httpx.
"""

from .capabilities.transport import (
    GraphQLTransport,
    GridConfig,
    GridTransportError,
)
from .core import (
    FILTER_METADATA_QUERY,
    PROFILE_SEARCH_QUERY,
    BooleanExpression,
    CompiledFacetQuery,
    Dimension,
    FacetCompiler,
    FacetCountTable,
    FilterMetadata,
    FilterOption,
    FilterSelection,
    TagOption,
    build_profile_where,
    compile_facets,
    extract_operation_name,
    grid_keys,
    render_literal,
)
from .integrations.http import HttpxGraphQLTransport
from .services import ProfileSearchPage, ProfileSearchService

__all__ = [
    "BooleanExpression",
    "CompiledFacetQuery",
    "Dimension",
    "FILTER_METADATA_QUERY",
    "FacetCompiler",
    "FacetCountTable",
    "FilterMetadata",
    "FilterOption",
    "FilterSelection",
    "GraphQLTransport",
    "GridConfig",
    "GridTransportError",
    "HttpxGraphQLTransport",
    "PROFILE_SEARCH_QUERY",
    "ProfileSearchPage",
    "ProfileSearchService",
    "TagOption",
    "build_profile_where",
    "compile_facets",
    "extract_operation_name",
    "grid_keys",
    "render_literal",
]
