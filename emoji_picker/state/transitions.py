"""
Navigation state machine.

``transition(state, event)`` is a pure function returning the next state and
the commands the runtime should execute. It never performs I/O: loading the
dataset and writing the clipboard happen outside, driven by the commands.

    LOADING --DatasetLoaded(ok)--> READY --(any input)--> READY
    LOADING --DatasetLoaded(err)-> ERROR
"""

from dataclasses import replace
from typing import List, Tuple

from loguru import logger

from ..Search.search_index import SearchIndex
from ..Utils.pagination import page_for_index
from ..config import PickerConfig
from .events import Command, CopyToClipboard, DatasetLoaded, Event, KeyEvent, LoadDataset, Quit, TextEdit
from .keymap import KeyAction
from .session_state import AppStatus, Focus, SessionState

Result = Tuple[SessionState, List[Command]]


def initial_state(config: PickerConfig) -> Result:
    """Fresh session in LOADING, plus the command that starts the dataset load."""
    return SessionState(config=config), [LoadDataset()]


def clamp_index(index: int, length: int) -> int:
    """Clamp into [0, length - 1]; 0 for an empty list."""
    if length <= 0:
        return 0
    return max(0, min(length - 1, index))


def move_up(index: int, length: int, columns: int) -> int:
    return clamp_index(max(0, index - columns), length)


def move_down(index: int, length: int, columns: int) -> int:
    return clamp_index(min(length - 1, index + columns), length)


def move_left(index: int, length: int) -> int:
    return clamp_index(max(0, index - 1), length)


def move_right(index: int, length: int) -> int:
    return clamp_index(min(length - 1, index + 1), length)


def transition(state: SessionState, event: Event) -> Result:
    if isinstance(event, DatasetLoaded):
        return _on_dataset_loaded(state, event)
    if isinstance(event, KeyEvent):
        return _on_key(state, event.key)
    if isinstance(event, TextEdit):
        return _on_text_edit(state, event.value)
    raise TypeError(f"Unsupported event: {event!r}")


def _on_dataset_loaded(state: SessionState, event: DatasetLoaded) -> Result:
    if state.status is not AppStatus.LOADING:
        logger.warning(f"Ignoring DatasetLoaded in state {state.status.value}")
        return state, []

    if event.error is not None or event.dataset is None:
        error = event.error if event.error is not None else RuntimeError("no dataset was loaded")
        logger.error(f"Dataset load failed: {error}")
        return replace(state, status=AppStatus.ERROR, error=error), []

    index = SearchIndex(event.dataset)
    filtered = tuple(index.filter(state.query))
    logger.debug(f"Dataset ready: {len(index)} emojis, {len(filtered)} match {state.query!r}")
    return replace(state, status=AppStatus.READY, index=index, filtered=filtered, selected=0, page=0), []


def _select(state: SessionState, index: int) -> SessionState:
    return replace(state, selected=index, page=page_for_index(index, state.config.max_results))


def _on_key(state: SessionState, key: KeyAction) -> Result:
    if key is KeyAction.QUIT:
        return state, [Quit()]
    if not state.is_ready:
        return state, []

    if key is KeyAction.TOGGLE_FOCUS:
        focus = Focus.GRID if state.focus is Focus.QUERY else Focus.QUERY
        return replace(state, focus=focus), []

    # Everything below acts on the grid only.
    if state.focus is not Focus.GRID or not state.filtered:
        return state, []

    n = len(state.filtered)
    i = state.selected
    columns = state.config.grid_columns

    if key is KeyAction.SELECT:
        emoji = state.filtered[clamp_index(i, n)]
        return state, [CopyToClipboard(emoji), Quit()]
    if key is KeyAction.UP:
        return _select(state, move_up(i, n, columns)), []
    if key is KeyAction.DOWN:
        return _select(state, move_down(i, n, columns)), []
    if key is KeyAction.LEFT:
        return _select(state, move_left(i, n)), []
    if key is KeyAction.RIGHT:
        return _select(state, move_right(i, n)), []
    if key is KeyAction.PAGE_UP:
        return _select(state, move_up(i, n, state.config.max_results)), []
    if key is KeyAction.PAGE_DOWN:
        return _select(state, move_down(i, n, state.config.max_results)), []
    return state, []


def _on_text_edit(state: SessionState, value: str) -> Result:
    if state.status is AppStatus.ERROR or state.focus is not Focus.QUERY:
        return state, []
    if value == state.query:
        return state, []
    if not state.is_ready:
        # Typed while loading; filtered once the dataset arrives.
        return replace(state, query=value), []

    filtered = tuple(state.index.filter(value))
    # The selection is clamped so it never points past the new list.
    selected = clamp_index(state.selected, len(filtered))
    new_state = replace(state, query=value, filtered=filtered)
    return _select(new_state, selected), []
