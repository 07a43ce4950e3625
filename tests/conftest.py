"""
Pytest configuration and fixtures for paginator tests.
Provides a base URL and a Chapter factory with the common inputs preset.
"""

from collections.abc import Callable
from typing import Any

import pytest

from paginator.models.chapter import Chapter

BASE_URL = "http://x/api"


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def make_chapter() -> Callable[..., Chapter]:
    """
    Factory for Chapter records with BaseURL already set.

    Usage:
        chapter = make_chapter(total_results=100, limit=10, current_page=5)
    """

    def _make(**fields: Any) -> Chapter:
        fields.setdefault("base_url", BASE_URL)
        return Chapter(**fields)

    return _make


@pytest.fixture
def paginated(make_chapter) -> Callable[..., Chapter]:
    """Factory returning a Chapter that has already been paginated."""

    def _paginate(**fields: Any) -> Chapter:
        return make_chapter(**fields).paginate()

    return _paginate
