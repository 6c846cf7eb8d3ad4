"""
Pagination link planning for the Pagination Links Service.

This module decides which links a pagination control shows, in what order
and pointing at which page. It produces plain data only; turning the result
into markup or JSON is left to the caller.

The work happens in two passes:

- ``plan`` walks the page window left to right and emits abstract tokens
  (previous, first, first ellipsis, page numbers, last ellipsis, last, next).
- ``render`` maps each token to a ``LinkDescriptor`` using the options and
  drops tokens whose option is switched off.

Page numbers and totals may come straight from a query string, so every
boundary case resolves to a bounded window instead of trusting the inputs.
"""

from typing import Any, List, Mapping, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import (
    DEFAULT_DISTANCE,
    DEFAULT_ELLIPSIS_LABEL,
    DEFAULT_NEXT_LABEL,
    DEFAULT_PREVIOUS_LABEL,
    RECOGNIZED_OPTIONS,
    EdgeMode,
    Marker,
    TokenKind,
)
from app.core.exceptions import create_distance_error


class PaginationState(BaseModel):
    """Current position within a paginated collection."""

    model_config = ConfigDict(frozen=True)

    page_number: int = Field(ge=1, description="1-based page being viewed; may exceed total_pages.")
    total_pages: int = Field(ge=0, description="Number of pages in the collection.")


class Token(NamedTuple):
    """One link slot before rendering. Only PAGE tokens carry a page."""
    kind: TokenKind
    page: Optional[int] = None

    @classmethod
    def page_number(cls, page: int) -> "Token":
        return cls(TokenKind.PAGE, page)


class LinkDescriptor(NamedTuple):
    """
    A rendered link as ``(label, target)``.

    Page numbers render as ``(n, n)`` and controls as ``(label, page)``.
    Ellipses render as ``(Marker.ELLIPSIS, ellipsis_label)`` so callers can
    show them as plain text.
    """
    label: Any
    target: Any

    @property
    def is_ellipsis(self) -> bool:
        return self.label is Marker.ELLIPSIS


class EdgeLink(NamedTuple):
    """First/last shortcut choice: disabled, the bare page number, or a custom label."""
    mode: EdgeMode
    label: Any = None

    @classmethod
    def from_option(cls, value: Any) -> "EdgeLink":
        # Only the literal True means "show the page number"; 1 is a label
        if value is True:
            return cls(EdgeMode.PAGE_NUMBER, True)
        if value:
            return cls(EdgeMode.CUSTOM_LABEL, value)
        return cls(EdgeMode.DISABLED)

    @property
    def enabled(self) -> bool:
        return self.mode is not EdgeMode.DISABLED


class LinkOptions(BaseModel):
    """
    Options controlling which links appear and how they are labelled.

    Label values are kept as given (strings, lists, markup objects...), so
    fields are untyped. Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    distance: Any = DEFAULT_DISTANCE
    next: Any = DEFAULT_NEXT_LABEL
    previous: Any = DEFAULT_PREVIOUS_LABEL
    first: Any = True
    last: Any = True
    ellipsis: Any = DEFAULT_ELLIPSIS_LABEL

    @property
    def first_link(self) -> EdgeLink:
        return EdgeLink.from_option(self.first)

    @property
    def last_link(self) -> EdgeLink:
        return EdgeLink.from_option(self.last)

    def merge(self, overrides: Optional[Mapping[str, Any]]) -> "LinkOptions":
        """Return a copy with recognized keys from ``overrides`` applied."""
        if not overrides:
            return self
        update = {key: value for key, value in overrides.items() if key in RECOGNIZED_OPTIONS}
        return self.model_copy(update=update)


OptionsInput = Union[LinkOptions, Mapping[str, Any], None]


def check_distance(distance: Any) -> int:
    """
    Validate the window half-width.

    Raises:
        ConfigurationError: If distance is not an integer of at least one
    """
    if isinstance(distance, bool) or not isinstance(distance, int) or distance < 1:
        raise create_distance_error(distance)
    return distance


# ============================================================================
# Window bounds
# ============================================================================

def beginning_distance(page: int, total: int, distance: int) -> int:
    """First page number of the numeric window."""
    # Low page numbers
    if page - distance < 1:
        return page - (distance + (page - distance - 1))
    # Medium to high page numbers
    elif page <= total:
        return page - distance
    # Past the last page: anchor on total so a huge page number cannot widen the window
    else:
        return total - distance


def end_distance(page: int, total: int, distance: int) -> int:
    """Last page number of the numeric window."""
    # High page numbers, capped at the last page
    if total != 0 and page + distance >= total:
        return total
    # No pages at all: page may be user supplied, so do not use it
    elif total == 0:
        return 1
    # Low to mid range page numbers
    else:
        return page + distance


def page_window(page: int, total: int, distance: int) -> range:
    """Ascending page numbers around ``page``; empty when the bounds cross."""
    return range(beginning_distance(page, total, distance), end_distance(page, total, distance) + 1)


# ============================================================================
# Token planner
# ============================================================================

def _first_token(page: int, distance: int, first: EdgeLink) -> Optional[Token]:
    if page - distance > 1:
        if first.mode is EdgeMode.PAGE_NUMBER:
            return Token.page_number(1)
        elif first.mode is EdgeMode.CUSTOM_LABEL:
            return Token(TokenKind.FIRST)
    return None


def _has_first_ellipsis(page: int, distance: int, first: EdgeLink) -> bool:
    # Keep at least one hidden page between the shortcut and the window
    if first.enabled:
        distance += 1
    return page - distance > 1 and page > 1


def _has_last_ellipsis(page: int, total: int, distance: int, last: EdgeLink) -> bool:
    if last.enabled:
        distance += 1
    return page + distance < total and page != total


def _last_token(page: int, total: int, distance: int, last: EdgeLink) -> Optional[Token]:
    if page + distance < total:
        if last.mode is EdgeMode.PAGE_NUMBER:
            return Token.page_number(total)
        elif last.mode is EdgeMode.CUSTOM_LABEL:
            return Token(TokenKind.LAST)
    return None


def _as_edge(value: Any) -> EdgeLink:
    return value if isinstance(value, EdgeLink) else EdgeLink.from_option(value)


def plan(
    page_number: int,
    total_pages: int,
    distance: int = DEFAULT_DISTANCE,
    include_first: Any = True,
    include_last: Any = True
) -> List[Token]:
    """
    Plan the ordered link tokens for a page.

    Args:
        page_number: Current page (1-based, may exceed total_pages)
        total_pages: Number of pages in the collection (may be 0)
        distance: Half-width of the numeric window
        include_first: True, a custom label, or a falsy value (or an EdgeLink)
        include_last: Same as include_first, for the last page

    Returns:
        Tokens in left-to-right render order

    Raises:
        ConfigurationError: If distance is not a positive integer
    """
    check_distance(distance)
    first = _as_edge(include_first)
    last = _as_edge(include_last)

    tokens: List[Token] = []

    first_token = _first_token(page_number, distance, first)
    if first_token is not None:
        tokens.append(first_token)

    if _has_first_ellipsis(page_number, distance, first):
        tokens.append(Token(TokenKind.FIRST_ELLIPSIS))

    # Previous always leads, ahead of the first shortcut
    if page_number != 1:
        tokens.insert(0, Token(TokenKind.PREVIOUS))

    tokens.extend(Token.page_number(n) for n in page_window(page_number, total_pages, distance))

    if _has_last_ellipsis(page_number, total_pages, distance, last):
        tokens.append(Token(TokenKind.LAST_ELLIPSIS))

    last_token = _last_token(page_number, total_pages, distance, last)
    if last_token is not None:
        tokens.append(last_token)

    if page_number != total_pages and page_number < total_pages:
        tokens.append(Token(TokenKind.NEXT))

    return tokens


# ============================================================================
# Token renderer
# ============================================================================

def _render_token(
    token: Token,
    page_number: int,
    total_pages: int,
    options: LinkOptions
) -> Optional[LinkDescriptor]:
    kind = token.kind
    if kind is TokenKind.PAGE:
        return LinkDescriptor(token.page, token.page)
    elif kind is TokenKind.PREVIOUS:
        if options.previous:
            return LinkDescriptor(options.previous, page_number - 1)
    elif kind is TokenKind.NEXT:
        if options.next:
            return LinkDescriptor(options.next, page_number + 1)
    elif kind is TokenKind.FIRST:
        if options.first:
            return LinkDescriptor(options.first, 1)
    elif kind is TokenKind.LAST:
        if options.last:
            return LinkDescriptor(options.last, total_pages)
    elif kind is TokenKind.FIRST_ELLIPSIS:
        if options.ellipsis and options.first:
            return LinkDescriptor(Marker.ELLIPSIS, options.ellipsis)
    elif kind is TokenKind.LAST_ELLIPSIS:
        if options.ellipsis and options.last:
            return LinkDescriptor(Marker.ELLIPSIS, options.ellipsis)
    return None


def render(
    tokens: List[Token],
    page_number: int,
    total_pages: int,
    options: LinkOptions
) -> List[LinkDescriptor]:
    """Map planned tokens to link descriptors, dropping disabled ones."""
    links = []
    for token in tokens:
        link = _render_token(token, page_number, total_pages, options)
        if link is not None:
            links.append(link)
    return links


# ============================================================================
# Public entry point
# ============================================================================

def coerce_options(options: OptionsInput) -> LinkOptions:
    """Turn None, a mapping or a LinkOptions into a LinkOptions."""
    if options is None:
        return LinkOptions()
    if isinstance(options, LinkOptions):
        return options
    return LinkOptions().merge(options)


def _unpack_state(state: Any) -> Tuple[int, int]:
    if isinstance(state, Mapping):
        return state["page_number"], state["total_pages"]
    return state.page_number, state.total_pages


def build_pagination_links(state: Any, options: OptionsInput = None) -> List[LinkDescriptor]:
    """
    Build the ordered link descriptors for a pagination control.

    ``state`` is a PaginationState, any object with ``page_number`` and
    ``total_pages`` attributes, or a mapping with those keys. ``options``
    overrides the defaults (distance 5, ">>", "<<", first/last True and
    an ellipsis glyph); unknown keys are ignored.

    Example:
        build_pagination_links({"page_number": 5, "total_pages": 10})
        # [("<<", 4), (1, 1), (2, 2), ..., (9, 9), (10, 10), (">>", 6)]

    Raises:
        ConfigurationError: If the distance option is not a positive integer
    """
    link_options = coerce_options(options)
    page_number, total_pages = _unpack_state(state)
    tokens = plan(
        page_number,
        total_pages,
        link_options.distance,
        link_options.first_link,
        link_options.last_link
    )
    return render(tokens, page_number, total_pages, link_options)
