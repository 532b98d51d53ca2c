"""Profile search: filter metadata, paged listing and facet counts."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import BaseModel, Field

from gridkit.capabilities.transport import GraphQLTransport, GridTransportError
from gridkit.core.facets import FacetCompiler
from gridkit.core.filters import ProfileWhereBuilder
from gridkit.core.models import FacetCountTable, FilterMetadata, FilterSelection
from gridkit.core.queries import FILTER_METADATA_QUERY, PROFILE_SEARCH_QUERY

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 25


class ProfileSearchPage(BaseModel):
    profiles: List[Dict[str, Any]] = Field(default_factory=list)
    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def has_next(self) -> bool:
        return len(self.profiles) >= self.page_size

    @property
    def first_index(self) -> int:
        """1-based index of the first profile on this page."""
        return self.page * self.page_size + 1

    @property
    def last_index(self) -> int:
        return self.page * self.page_size + len(self.profiles)

    def to_frame(self) -> pd.DataFrame:
        """Flatten profiles (profileType.name etc.) into a DataFrame."""
        if not self.profiles:
            return pd.DataFrame()
        return pd.json_normalize(self.profiles)


class ProfileSearchService:
    """Runs profile listing and facet queries through a GraphQL transport.

    Transport errors are logged and re-raised unchanged.
    """

    def __init__(
        self,
        transport: GraphQLTransport,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        builder: Optional[ProfileWhereBuilder] = None,
        compiler: Optional[FacetCompiler] = None,
    ):
        if page_size < 1:
            raise ValueError("page_size must be a positive integer")
        self.transport = transport
        self.page_size = page_size
        self.builder = builder or ProfileWhereBuilder()
        self.compiler = compiler or FacetCompiler(builder=self.builder)

    async def load_filter_metadata(self) -> FilterMetadata:
        data = await self._execute(FILTER_METADATA_QUERY)
        return FilterMetadata.model_validate(data)

    async def search(self, selection: Any, page: int = 0) -> ProfileSearchPage:
        """Fetch one page of profiles. No request is sent without active filters."""
        selection = FilterSelection.coerce(selection)
        page = max(0, page)
        if not selection.has_filters:
            return ProfileSearchPage(page=page, page_size=self.page_size)

        where = self.builder.build(selection)
        variables = {
            "where": where.to_where(),
            "limit": self.page_size,
            "offset": page * self.page_size,
        }
        data = await self._execute(PROFILE_SEARCH_QUERY, variables)
        profiles = data.get("profileInfos") or []
        return ProfileSearchPage(profiles=profiles, page=page, page_size=self.page_size)

    async def facet_counts(self, selection: Any, catalog: Any) -> FacetCountTable:
        compiled = self.compiler.compile(selection, catalog)
        data = await self._execute(compiled.query_text)
        return compiled.decode(data)

    async def _execute(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        try:
            return await self.transport.execute(query, variables)
        except GridTransportError as e:
            logger.warning("Grid query failed: %s", e)
            raise
