"""Profile search against a live Grid endpoint.

Loads the filter catalog, runs one filtered search page, and prints the
cross-filtered facet counts for every dimension.

Run:
  python examples/profile_search_demo.py

Required env:
  - GRID_ENDPOINT

Optional env:
  - GRID_API_KEY
  - GRID_DEMO_SEARCH (defaults to "sol")
"""

import asyncio
import os
import sys

from gridkit import FilterSelection, HttpxGraphQLTransport, ProfileSearchService


async def main() -> None:
    if not os.getenv("GRID_ENDPOINT"):
        print("[error] GRID_ENDPOINT is not set.")
        sys.exit(1)

    async with HttpxGraphQLTransport() as transport:
        service = ProfileSearchService(transport)
        catalog = await service.load_filter_metadata()

        selection = FilterSelection(search=os.getenv("GRID_DEMO_SEARCH", "sol"))
        page = await service.search(selection)
        print(f"Showing {page.first_index}-{page.last_index}")
        print(page.to_frame())

        counts = await service.facet_counts(selection, catalog)
        print(f"Total matches: {counts.total}")
        print(counts.to_frame())


if __name__ == "__main__":
    asyncio.run(main())
