"""Smoke tests against a live Grid endpoint.

Skipped unless GRID_ENDPOINT is set (GRID_API_KEY is optional).
"""

import pytest

from gridkit.core.models import FilterSelection
from gridkit.integrations.http import HttpxGraphQLTransport
from gridkit.services import ProfileSearchService


@pytest.mark.network
class TestLiveEndpoint:
    @pytest.mark.asyncio
    async def test_metadata_and_facet_totals_agree(self):
        async with HttpxGraphQLTransport() as transport:
            service = ProfileSearchService(transport)
            catalog = await service.load_filter_metadata()
            assert catalog.profile_types

            counts = await service.facet_counts(FilterSelection(), catalog)
            real_types = [o for o in catalog.profile_types if not o.is_placeholder]
            assert set(counts.types) == {o.id for o in real_types}
            assert all(count <= counts.total for count in counts.types.values())
