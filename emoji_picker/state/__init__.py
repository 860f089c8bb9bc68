"""
State management for the emoji picker.
Holds the session state and the pure transition function that drives it.
"""

from .session_state import AppStatus, Focus, SessionState
from .keymap import KEYMAP, KeyAction, KeyBinding, resolve_key, short_help
from .events import (
    Command,
    CopyToClipboard,
    DatasetLoaded,
    Event,
    KeyEvent,
    LoadDataset,
    Quit,
    TextEdit,
)
from .transitions import initial_state, transition

__all__ = [
    'AppStatus',
    'Focus',
    'SessionState',
    'KEYMAP',
    'KeyAction',
    'KeyBinding',
    'resolve_key',
    'short_help',
    'Command',
    'CopyToClipboard',
    'DatasetLoaded',
    'Event',
    'KeyEvent',
    'LoadDataset',
    'Quit',
    'TextEdit',
    'initial_state',
    'transition',
]
