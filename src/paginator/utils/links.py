"""
Navigation link rendering.

Links are plain query-string URIs of the form
``<base_url>?page=<n>&page_size=<limit>``. The base URL is used verbatim:
no parsing, normalization or escaping is applied to it.
"""

from urllib.parse import parse_qs

from paginator.utils.constants import PAGE_QUERY_PARAM, PAGE_SIZE_QUERY_PARAM


def build_page_uri(base_url: str, page: int, page_size: int) -> str:
    """Render the link to a single page.

    Example:
        build_page_uri("http://x/api", 2, 10)
        → "http://x/api?page=2&page_size=10"
    """
    return f"{base_url}?{PAGE_QUERY_PARAM}={page:d}&{PAGE_SIZE_QUERY_PARAM}={page_size:d}"


def parse_page_number(uri: str) -> int | None:
    """Read the page number back out of a rendered link.

    Returns None for an empty URI or one without a ``page`` parameter.
    """
    if not uri:
        return None

    # Base URLs are not escaped, so only the last query string is ours.
    values = parse_qs(uri.rpartition("?")[2]).get(PAGE_QUERY_PARAM)
    if not values:
        return None

    return int(values[-1])
