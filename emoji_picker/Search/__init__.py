"""Emoji search."""

from .search_index import SearchIndex, filter_emojis

__all__ = [
    'SearchIndex',
    'filter_emojis',
]
