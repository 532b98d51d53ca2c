"""
Pytest configuration and shared fixtures for the gridkit test suite.
"""

import os

import pytest

from gridkit.core.models import FilterMetadata


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "network: marks tests requiring a live Grid endpoint"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically skip live-endpoint tests if GRID_ENDPOINT is missing."""
    for item in items:
        if "network" in item.keywords:
            if not os.getenv("GRID_ENDPOINT"):
                item.add_marker(
                    pytest.mark.skip(
                        reason="GRID_ENDPOINT environment variable not set"
                    )
                )


@pytest.fixture
def catalog():
    """Two real types plus a placeholder, one real sector, no statuses or tags."""
    return FilterMetadata.model_validate(
        {
            "profileTypes": [
                {"id": "1", "name": "Company"},
                {"id": "9", "name": " "},
                {"id": "2", "name": "Project"},
            ],
            "profileSectors": [
                {"id": "0", "name": ""},
                {"id": "5", "name": "DeFi"},
            ],
            "profileStatuses": [],
            "tags": [],
        }
    )


@pytest.fixture
def full_catalog():
    return FilterMetadata.model_validate(
        {
            "profileTypes": [
                {"id": "1", "name": "Company"},
                {"id": "2", "name": "Project"},
            ],
            "profileSectors": [{"id": "5", "name": "DeFi"}],
            "profileStatuses": [{"id": "3", "name": "Active"}],
            "tagTypes": [{"id": "t", "name": "Chain"}],
            "tags": [
                {"id": "7", "name": "Solana", "tagType": {"id": "t", "name": "Chain"}},
                {"id": "8", "name": "  ", "tagType": None},
            ],
        }
    )
