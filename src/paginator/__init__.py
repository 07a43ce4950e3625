"""Chapter Paginator Package."""

from paginator.models.chapter import Chapter
from paginator.models.errors import (
    InvalidPageRequestError,
    MissingBaseURLError,
    MissingTotalResultsError,
    PaginationError,
)

__version__ = "1.0.0"
__description__ = (
    "Page resolution and navigation links for REST collection endpoints"
)

__all__ = [
    "Chapter",
    "InvalidPageRequestError",
    "MissingBaseURLError",
    "MissingTotalResultsError",
    "PaginationError",
]
