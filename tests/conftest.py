"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from memberwise import MetadataSettings, TypeMetadataCache


@pytest.fixture
def cache():
    """Fresh metadata cache with default settings."""
    return TypeMetadataCache(MetadataSettings())
