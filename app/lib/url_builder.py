"""
URL builder utility for pagination responses.

This module provides functions to generate page URLs and the RFC 8288
``Link`` header that accompanies a paginated response.
"""

from typing import Callable, List, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def build_page_url(url: str, page: int, page_param: str = "page") -> str:
    """
    Return ``url`` with its page query parameter set to ``page``.

    Other query parameters are kept in their original order.

    Examples:
        >>> build_page_url("https://example.org/items?sort=name&page=2", 3)
        'https://example.org/items?sort=name&page=3'
    """
    parts = urlsplit(url)
    query = [(key, value) for key, value in parse_qsl(parts.query, keep_blank_values=True) if key != page_param]
    query.append((page_param, str(page)))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))


def build_link_header(
    url_for_page: Callable[[int], str],
    page_number: int,
    total_pages: int
) -> Optional[str]:
    """
    Build a ``Link`` header value with first, prev, next and last relations.

    Args:
        url_for_page: Callable returning the URL of a given page
        page_number: Current page
        total_pages: Number of pages in the collection

    Returns:
        Header value, or None if there is nothing to link to
    """
    links: List[str] = []

    if total_pages > 0:
        links.append(f'<{url_for_page(1)}>; rel="first"')

    # Mirrors the previous/next controls of the pagination links
    if page_number != 1:
        links.append(f'<{url_for_page(page_number - 1)}>; rel="prev"')

    if page_number < total_pages:
        links.append(f'<{url_for_page(page_number + 1)}>; rel="next"')

    if total_pages > 0:
        links.append(f'<{url_for_page(total_pages)}>; rel="last"')

    return ", ".join(links) if links else None
