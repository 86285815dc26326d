"""Pagination schemas."""

import math

from src.schemas.common import CamelModel


class PaginationMeta(CamelModel):
    """Position of a page within a result set."""

    page: int
    per_page: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def build(cls, page: int, per_page: int, total: int) -> "PaginationMeta":
        """Compute page counts and navigation flags for ``total`` matching rows."""
        total_pages = math.ceil(total / per_page)
        return cls(
            page=page,
            per_page=per_page,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1,
        )
