"""
Cursor pagination over storage sequence ids.

A cursor asks for up to ``page_size`` rows whose sequence id is strictly
greater than ``last_seen_id``, ordered ascending. A page shorter than
``page_size`` marks the end of the data.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Cursor:
    """Pagination position.

    Attributes:
        last_seen_id: Sequence id of the last row of the previous page,
            or None to start from the beginning.
        page_size: Maximum number of rows to return. Must be positive.
    """

    last_seen_id: Optional[int] = None
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")

    def clamped(self, max_page_size: int = MAX_PAGE_SIZE) -> "Cursor":
        """Return a cursor whose page size does not exceed ``max_page_size``."""
        if self.page_size <= max_page_size:
            return self
        return Cursor(last_seen_id=self.last_seen_id, page_size=max_page_size)

    def after(self, last_seen_id: int) -> "Cursor":
        """Return the cursor for the page following ``last_seen_id``."""
        return Cursor(last_seen_id=last_seen_id, page_size=self.page_size)


def resolve_cursor(cursor: Optional[Cursor]) -> Cursor:
    """Treat an absent cursor as the first default-sized page."""
    return cursor if cursor is not None else Cursor()
