"""
Pagination links API routes for the Pagination Links Service.

This module exposes the pagination core over HTTP. The response lists the
links a client should render, and a ``Link`` header carries first, prev,
next and last URLs.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response

from app.api.v1.deps import get_link_overrides, get_link_service, get_pagination_state
from app.core.logging import get_logger
from app.core.pagination import PaginationState
from app.lib.url_builder import build_link_header, build_page_url
from app.models.dto import PageLink, PaginationLinksResponse
from app.models.errors import ErrorsResponse
from app.services.links import LinkService

logger = get_logger(__name__)

router = APIRouter(prefix="/pagination", tags=["Pagination"])


# ============================================================================
# Link Building
# ============================================================================

@router.get(
    "/links",
    response_model=PaginationLinksResponse,
    summary="Gets the links of a pagination control.",
    description="""Gets the links a pagination control should display for a page.

### Options

Omitted options fall back to the server defaults. Label options accept
`false` to remove the link. `first` and `last` accept `true` to show the
bare page number, or any other text to use as the label.

### Untrusted input

`page` may be larger than `total_pages`. The numeric window never grows
beyond `2 * distance + 1` entries, and `distance` is capped by the server.
""",
    responses={
        400: {"model": ErrorsResponse, "description": "Invalid parameters or options."}
    }
)
def get_pagination_links(
    request: Request,
    response: Response,
    state: PaginationState = Depends(get_pagination_state),
    overrides: Dict[str, Any] = Depends(get_link_overrides),
    service: LinkService = Depends(get_link_service)
):
    """Build pagination links for the requested page."""
    logger.info(
        "Pagination links request",
        page=state.page_number,
        total_pages=state.total_pages,
        path=request.url.path
    )

    links = service.build_links(state, overrides)

    # Add Link header for pagination
    url = str(request.url)
    link_header = build_link_header(
        lambda page: build_page_url(url, page),
        state.page_number,
        state.total_pages
    )
    if link_header:
        response.headers["Link"] = link_header

    return PaginationLinksResponse(
        page=state.page_number,
        total_pages=state.total_pages,
        links=[PageLink.from_descriptor(link, state.page_number) for link in links]
    )
