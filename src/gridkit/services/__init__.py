"""Service-layer utilities."""

from .profile_search import DEFAULT_PAGE_SIZE, ProfileSearchPage, ProfileSearchService

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "ProfileSearchPage",
    "ProfileSearchService",
]
