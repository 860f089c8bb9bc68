"""
Session state for one run of the picker.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..Search.search_index import SearchIndex
from ..Utils.pagination import PaginatedResult, indexed_rows, paginate
from ..config import PickerConfig


class AppStatus(Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class Focus(Enum):
    QUERY = "query"
    GRID = "grid"


@dataclass(frozen=True)
class SessionState:
    """
    Everything the picker knows at one point in time.

    ``filtered``, ``selected`` and ``page`` only mean something once the
    status is READY; ``index`` is set exactly then and ``error`` exactly in
    ERROR. Instances are never mutated: transitions return new ones.
    """

    config: PickerConfig
    status: AppStatus = AppStatus.LOADING
    index: Optional[SearchIndex] = None
    query: str = ""
    filtered: Tuple[str, ...] = ()
    selected: int = 0
    page: int = 0
    focus: Focus = Focus.QUERY
    error: Optional[BaseException] = None

    @property
    def is_ready(self) -> bool:
        return self.status is AppStatus.READY

    @property
    def error_message(self) -> Optional[str]:
        if self.error is None:
            return None
        return str(self.error) or type(self.error).__name__

    @property
    def selected_emoji(self) -> Optional[str]:
        if 0 <= self.selected < len(self.filtered):
            return self.filtered[self.selected]
        return None

    def current_page(self) -> PaginatedResult[str]:
        return paginate(self.filtered, self.page, self.config.max_results)

    def page_slice(self) -> List[str]:
        """filtered[page*max_results : min((page+1)*max_results, len(filtered))]"""
        return self.current_page().items

    def grid_rows(self) -> List[List[Tuple[int, str]]]:
        """The current page as rows of (absolute index, emoji), ``grid_columns`` wide."""
        return indexed_rows(self.current_page(), self.config.grid_columns)

    def is_highlighted(self, position: int) -> bool:
        """Whether the cell at ``position`` is drawn as the selection."""
        return self.focus is Focus.GRID and position == self.selected
