"""
Substring search over the loaded emoji dataset.
"""

from typing import Dict, List, Mapping, Sequence


class SearchIndex:
    """
    In-memory view over a dataset.

    The key order is captured once at construction so that the empty query
    always returns the same sequence for the lifetime of the index.
    """

    def __init__(self, dataset: Mapping[str, Sequence[str]]):
        self._keywords: Dict[str, List[str]] = {emoji: list(words) for emoji, words in dataset.items()}
        self._order: List[str] = list(self._keywords)
        # Folded once; queries are folded per call.
        self._folded: Dict[str, List[str]] = {
            emoji: [word.casefold() for word in words] for emoji, words in self._keywords.items()
        }

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, emoji: object) -> bool:
        return emoji in self._keywords

    def keywords_for(self, emoji: str) -> List[str]:
        return list(self._keywords.get(emoji, []))

    def filter(self, query: str) -> List[str]:
        """
        Return the emoji whose keywords contain ``query`` (case-insensitive).

        An empty query returns every emoji. Results keep dataset order; there
        is no ranking.
        """
        if query == "":
            return list(self._order)

        needle = query.casefold()
        return [
            emoji for emoji in self._order
            if any(needle in word for word in self._folded[emoji])
        ]


def filter_emojis(dataset: Mapping[str, Sequence[str]], query: str) -> List[str]:
    """One-shot filter without keeping an index around."""
    return SearchIndex(dataset).filter(query)
