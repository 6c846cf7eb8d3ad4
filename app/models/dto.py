"""
Response models for the Pagination Links Service API.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.core.pagination import LinkDescriptor


class PageLink(BaseModel):
    """One link of a pagination control, ready for a client to display."""

    label: Union[int, str] = Field(..., description="Visible text of the link.")
    page: Optional[int] = Field(
        None,
        description="Target page. Null for ellipsis markers, which are not navigable."
    )
    ellipsis: bool = Field(False, description="True when this entry is a truncation marker.")
    current: bool = Field(False, description="True when the link points at the page being viewed.")

    @classmethod
    def from_descriptor(cls, link: LinkDescriptor, page_number: int) -> "PageLink":
        """Build a PageLink from a rendered descriptor."""
        if link.is_ellipsis:
            return cls(label=str(link.target), page=None, ellipsis=True)
        label = link.label if isinstance(link.label, int) else str(link.label)
        # Only numeric page links count as "current"; "<<" never does
        current = isinstance(link.label, int) and link.target == page_number
        return cls(label=label, page=link.target, current=current)


class PaginationLinksResponse(BaseModel):
    """Pagination links for a page of a collection."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "page": 2,
                "total_pages": 3,
                "links": [
                    {"label": "<<", "page": 1, "ellipsis": False, "current": False},
                    {"label": 1, "page": 1, "ellipsis": False, "current": False},
                    {"label": 2, "page": 2, "ellipsis": False, "current": True},
                    {"label": 3, "page": 3, "ellipsis": False, "current": False},
                    {"label": ">>", "page": 3, "ellipsis": False, "current": False}
                ]
            }
        }
    )

    page: int
    total_pages: int
    links: List[PageLink]
