"""
Dataset cache: fetches the emoji dataset once and serves it from disk afterwards.
"""

from .emoji_cache import (
    CACHE_VERSION,
    EMOJI_URL,
    CacheIOError,
    CacheMetadata,
    Dataset,
    DatasetCache,
    EmojiCacheError,
    FetchError,
    ParseError,
    get_data_dir,
    parse_dataset,
)

__all__ = [
    'CACHE_VERSION',
    'EMOJI_URL',
    'CacheIOError',
    'CacheMetadata',
    'Dataset',
    'DatasetCache',
    'EmojiCacheError',
    'FetchError',
    'ParseError',
    'get_data_dir',
    'parse_dataset',
]
