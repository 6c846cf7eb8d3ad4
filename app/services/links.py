"""
Link service for the Pagination Links Service.

This module applies the deployment's default options and limits on top of
the pagination core, and logs what it builds.
"""

from typing import Any, Dict, List, Optional

from app.core.config import Settings
from app.core.logging import get_logger
from app.core.pagination import (
    LinkDescriptor,
    LinkOptions,
    PaginationState,
    build_pagination_links,
    check_distance,
)
from app.core.exceptions import ConfigurationError
from app.models.errors import InvalidConfigurationError, create_distance_limit_error

logger = get_logger(__name__)


class LinkService:
    """Service for building pagination links with configured defaults."""

    def __init__(self, settings: Settings):
        """Initialize service with settings."""
        self.settings = settings

    def default_options(self) -> LinkOptions:
        """Link options taken from the pagination settings."""
        pagination = self.settings.pagination
        return LinkOptions(
            distance=pagination.default_distance,
            next=pagination.next_label,
            previous=pagination.previous_label,
            ellipsis=pagination.ellipsis_label,
        )

    def resolve_options(self, overrides: Optional[Dict[str, Any]] = None) -> LinkOptions:
        """
        Merge caller overrides onto the configured defaults.

        Args:
            overrides: Option values supplied by the caller; unknown keys are ignored

        Returns:
            The effective LinkOptions

        Raises:
            InvalidConfigurationError: If distance is not a positive integer
            InvalidParametersError: If distance exceeds the configured maximum
        """
        options = self.default_options().merge(overrides)

        try:
            distance = check_distance(options.distance)
        except ConfigurationError as exc:
            logger.warning("Rejected pagination distance", distance=options.distance)
            raise InvalidConfigurationError.from_configuration_error(exc) from exc

        max_distance = self.settings.pagination.max_distance
        if distance > max_distance:
            logger.warning(
                "Pagination distance over limit",
                distance=distance,
                max_distance=max_distance
            )
            raise create_distance_limit_error(distance, max_distance)

        return options

    def build_links(
        self,
        state: PaginationState,
        overrides: Optional[Dict[str, Any]] = None
    ) -> List[LinkDescriptor]:
        """
        Build pagination links for a page.

        Args:
            state: Current page and total page count
            overrides: Option values supplied by the caller

        Returns:
            Ordered list of LinkDescriptor
        """
        options = self.resolve_options(overrides)

        logger.debug(
            "Building pagination links",
            page=state.page_number,
            total_pages=state.total_pages,
            distance=options.distance
        )

        links = build_pagination_links(state, options)

        logger.info(
            "Built pagination links",
            page=state.page_number,
            total_pages=state.total_pages,
            count=len(links)
        )

        return links
