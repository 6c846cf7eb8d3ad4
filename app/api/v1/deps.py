"""
FastAPI dependencies for the Pagination Links Service.

This module provides dependency injection for settings, the link service,
and the pagination state and option overrides read from the query string.
"""

from typing import Any, Dict, Optional

from fastapi import Depends, Query

from app.core.config import Settings, get_settings
from app.core.constants import FALSY_QUERY_VALUES, TRUE_QUERY_VALUE
from app.core.logging import get_logger
from app.core.pagination import PaginationState
from app.services.links import LinkService

logger = get_logger(__name__)


# ============================================================================
# Core Dependencies
# ============================================================================

def get_link_service(settings: Settings = Depends(get_settings)) -> LinkService:
    """Get link service dependency."""
    return LinkService(settings)


# ============================================================================
# Pagination Dependencies
# ============================================================================

def get_pagination_state(
    page: int = Query(
        default=1,
        ge=1,
        description="The page being viewed.\n\nThis is a 1-based index. It may be larger than `total_pages`; the returned window stays bounded."
    ),
    total_pages: int = Query(
        ...,
        ge=0,
        description="The number of pages in the collection. May be 0 for an empty collection."
    )
) -> PaginationState:
    """Get the current pagination state."""
    return PaginationState(page_number=page, total_pages=total_pages)


def parse_label_option(value: str) -> Any:
    """
    Interpret a label option from the query string.

    Returns False for values that switch the option off, the raw string
    otherwise.
    """
    if value.strip().lower() in FALSY_QUERY_VALUES:
        return False
    return value


def parse_edge_option(value: str) -> Any:
    """
    Interpret a first/last option from the query string.

    "true" selects the plain page number, falsy values switch the link off
    and any other string becomes a custom label.
    """
    if value.strip().lower() == TRUE_QUERY_VALUE:
        return True
    return parse_label_option(value)


def get_link_overrides(
    distance: Optional[int] = Query(
        None,
        description="Half-width of the numeric page window. Must be at least 1."
    ),
    next: Optional[str] = Query(
        None,
        description="Label of the next-page link. `false` removes the link."
    ),
    previous: Optional[str] = Query(
        None,
        description="Label of the previous-page link. `false` removes the link."
    ),
    first: Optional[str] = Query(
        None,
        description="`true` links to page 1 by number, any other text is used as the label, `false` removes the link."
    ),
    last: Optional[str] = Query(
        None,
        description="`true` links to the last page by number, any other text is used as the label, `false` removes the link."
    ),
    ellipsis: Optional[str] = Query(
        None,
        description="Label of the truncation marker. `false` removes the marker."
    )
) -> Dict[str, Any]:
    """Get the link options supplied by the caller; omitted ones are left out."""
    overrides: Dict[str, Any] = {}

    if distance is not None:
        overrides["distance"] = distance
    if next is not None:
        overrides["next"] = parse_label_option(next)
    if previous is not None:
        overrides["previous"] = parse_label_option(previous)
    if first is not None:
        overrides["first"] = parse_edge_option(first)
    if last is not None:
        overrides["last"] = parse_edge_option(last)
    if ellipsis is not None:
        overrides["ellipsis"] = parse_label_option(ellipsis)

    if overrides:
        logger.debug("Link option overrides", overrides=overrides)

    return overrides
