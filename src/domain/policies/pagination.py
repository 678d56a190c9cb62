"""Normalization of list arguments into pagination and sorting."""

from dataclasses import dataclass

from src.domain.constants import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
    SORT_DIRECTIONS,
)
from src.domain.errors import ValidationError
from src.domain.models.listing import Pagination, Sorting


@dataclass(frozen=True)
class PaginationOptions:
    """Bounds applied to requested page sizes."""

    default: int = DEFAULT_PAGE_SIZE
    min: int = MIN_PAGE_SIZE
    max: int = MAX_PAGE_SIZE


def paginate(
    page: int | None = None,
    per_page: int | None = None,
    since_id: int | None = None,
    options: PaginationOptions | None = None,
) -> Pagination:
    """Build a pagination window from page arguments.

    ``since_id`` takes precedence over page numbers and reads at most the
    default page size after that id. Otherwise ``per_page`` falls back to
    the default and is clamped to ``[min, max]``, and pages start at 1.

    Args:
        page: 1-based page number.
        per_page: Requested page size.
        since_id: Optional id to read rows after.
        options: Page size bounds.

    Returns:
        Pagination: Normalized window.
    """
    resolved = options or PaginationOptions()
    if since_id:
        return Pagination(limit=resolved.default, offset=0, since_id=since_id)

    size = per_page or resolved.default
    size = max(size, resolved.min)
    size = min(size, resolved.max)
    current_page = max(page or 1, 1)
    return Pagination(limit=size, offset=(current_page - 1) * size)


def sort_by(
    key: str | None = None,
    direction: str | None = None,
    default_key: str = "id",
    default_direction: str = "ASC",
) -> Sorting:
    """Build a sorting from optional key and direction arguments.

    Raises:
        ValidationError: If the direction is not ASC or DESC.
    """
    resolved_direction = (direction or default_direction).upper()
    if resolved_direction not in SORT_DIRECTIONS:
        raise ValidationError(
            f"Invalid sort direction: {direction}. Expected ASC or DESC.",
            ["direction"],
        )
    return Sorting(key=key or default_key, direction=resolved_direction)


__all__ = ["PaginationOptions", "paginate", "sort_by"]
