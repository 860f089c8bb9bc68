"""
Pagination utilities for laying the filtered emoji list out as pages of grid rows.
"""
from typing import Generic, List, Sequence, Tuple, TypeVar

T = TypeVar('T')


class PaginatedResult(Generic[T]):
    """One page of a sequence. Pages are zero-based."""

    def __init__(self, items: List[T], total_count: int, page: int, page_size: int):
        self.items = items
        self.total_count = total_count
        self.page = page
        self.page_size = page_size
        self.start = page * page_size
        self.total_pages = (total_count + page_size - 1) // page_size if page_size > 0 else 0


def page_for_index(index: int, page_size: int) -> int:
    """Page holding ``index``. Negative indices map to page 0."""
    if page_size <= 0 or index <= 0:
        return 0
    return index // page_size


def paginate(items: Sequence[T], page: int, page_size: int) -> PaginatedResult[T]:
    """
    Slice ``items[page*page_size : min((page+1)*page_size, len(items))]``.

    A page past the end yields an empty slice rather than an error.
    """
    start = max(page, 0) * page_size
    end = min(start + page_size, len(items))
    page_items = list(items[start:end]) if start < end else []
    return PaginatedResult(page_items, len(items), max(page, 0), page_size)


def chunk_rows(items: Sequence[T], width: int) -> List[List[T]]:
    """Split ``items`` into rows of ``width``; the last row may be short."""
    if width <= 0:
        raise ValueError(f"row width must be positive, got {width}")
    return [list(items[i:i + width]) for i in range(0, len(items), width)]


def indexed_rows(page: PaginatedResult[T], width: int) -> List[List[Tuple[int, T]]]:
    """Rows of (absolute index, item) pairs for one page."""
    numbered = [(page.start + offset, item) for offset, item in enumerate(page.items)]
    return chunk_rows(numbered, width)
