"""
Constants and enumerations for pagination link planning.

This module contains the token kinds, edge-link modes and default option
values used throughout the application.
"""

from enum import Enum


class TokenKind(str, Enum):
    """
    Kinds of abstract link slots produced by the token planner.

    Every kind except PAGE is a control or marker; PAGE tokens carry the
    concrete page number they point to.
    """
    PREVIOUS = "previous"
    NEXT = "next"
    FIRST = "first"
    LAST = "last"
    FIRST_ELLIPSIS = "first_ellipsis"
    LAST_ELLIPSIS = "last_ellipsis"
    PAGE = "page"


class EdgeMode(str, Enum):
    """How the first/last shortcut link is rendered."""
    DISABLED = "disabled"
    PAGE_NUMBER = "page_number"
    CUSTOM_LABEL = "custom_label"


class Marker(Enum):
    """
    Sentinel labels that are never page numbers.

    Members never compare equal to a caller-supplied label, including the
    string "ellipsis". Renderers show them as non-interactive text.
    """
    ELLIPSIS = "ellipsis"


# Default option values
DEFAULT_DISTANCE = 5
DEFAULT_NEXT_LABEL = ">>"
DEFAULT_PREVIOUS_LABEL = "<<"
DEFAULT_ELLIPSIS_LABEL = "…"

# Option names recognized by build_pagination_links; anything else is ignored
RECOGNIZED_OPTIONS = frozenset({"distance", "next", "previous", "first", "last", "ellipsis"})

# Query string values that switch a label option off
FALSY_QUERY_VALUES = frozenset({"", "false", "0"})
TRUE_QUERY_VALUE = "true"
