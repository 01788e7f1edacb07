"""
Paginator Module

Holds the in-memory post collection and a page cursor, and derives
the current page plus page-count metadata from them.
"""

import logging
from typing import Generic, Optional, Sequence, Tuple, TypeVar

from ..config import config


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Paginator(Generic[T]):
    """
    Fixed-size page view over an in-memory collection.

    The cursor always satisfies 0 <= index < max(total_pages, 1).
    Navigation past either end is a silent no-op.
    """

    def __init__(self, page_size: Optional[int] = None):
        """
        Initialize an empty paginator.

        Args:
            page_size: Items per page (uses config default if None).

        Raises:
            ValueError: If page_size is not a positive integer.
        """
        page_size = page_size if page_size is not None else config.pagination.page_size
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}")

        self.page_size = page_size
        self._items: Tuple[T, ...] = ()
        self._index = 0

    @property
    def current_page_index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def set_collection(self, items: Sequence[T]) -> None:
        """Replace the backing collection and go back to the first page."""
        self._items = tuple(items)
        self._index = 0
        logger.debug(f"Collection set: {len(self._items)} items, {self.total_pages()} pages")

    def total_pages(self) -> int:
        # Ceiling division; 0 for an empty collection
        return -(-len(self._items) // self.page_size)

    def current_page(self) -> Tuple[T, ...]:
        start = self._index * self.page_size
        return self._items[start:start + self.page_size]

    def has_next(self) -> bool:
        return self._index + 1 < self.total_pages()

    def has_previous(self) -> bool:
        return self._index > 0

    def go_next(self) -> bool:
        """
        Move to the next page if there is one.

        Returns:
            True if the cursor moved.
        """
        if not self.has_next():
            return False
        self._index += 1
        return True

    def go_previous(self) -> bool:
        """
        Move to the previous page if there is one.

        Returns:
            True if the cursor moved.
        """
        if not self.has_previous():
            return False
        self._index -= 1
        return True

    def page_label(self) -> str:
        """Human-readable position, e.g. 'Page 3 of 17'."""
        if self.is_empty():
            return "Page 0 of 0"
        return f"Page {self._index + 1} of {self.total_pages()}"
