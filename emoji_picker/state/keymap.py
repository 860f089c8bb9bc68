"""
Key bindings: maps Textual key names to the abstract actions the state machine understands.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .session_state import Focus


class KeyAction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    SELECT = "select"
    TOGGLE_FOCUS = "toggle_focus"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyBinding:
    """
    ``keys`` fire regardless of focus. ``grid_keys`` are printable characters
    that only act as shortcuts while the grid has focus; on the query box they
    are ordinary text.
    """
    action: KeyAction
    keys: Tuple[str, ...]
    help_key: str
    help_text: str
    grid_keys: Tuple[str, ...] = ()


KEYMAP: Tuple[KeyBinding, ...] = (
    KeyBinding(KeyAction.UP, ("up", "ctrl+p"), "↑/k", "move up", grid_keys=("k",)),
    KeyBinding(KeyAction.DOWN, ("down", "ctrl+n"), "↓/j", "move down", grid_keys=("j",)),
    KeyBinding(KeyAction.LEFT, ("left",), "←/h", "move left", grid_keys=("h",)),
    KeyBinding(KeyAction.RIGHT, ("right",), "→/l", "move right", grid_keys=("l",)),
    KeyBinding(KeyAction.PAGE_UP, ("pageup",), "pgup", "previous page"),
    KeyBinding(KeyAction.PAGE_DOWN, ("pagedown",), "pgdn", "next page"),
    KeyBinding(KeyAction.SELECT, ("enter",), "enter", "select"),
    KeyBinding(KeyAction.TOGGLE_FOCUS, ("tab",), "tab", "switch focus", grid_keys=("slash",)),
    KeyBinding(KeyAction.QUIT, ("escape", "ctrl+c"), "ctrl+c", "quit", grid_keys=("q",)),
)

_BY_ACTION: Dict[KeyAction, KeyBinding] = {binding.action: binding for binding in KEYMAP}

# Keys the runtime intercepts before any widget sees them.
GLOBAL_ACTIONS = (KeyAction.TOGGLE_FOCUS, KeyAction.QUIT)


def binding_for(action: KeyAction) -> KeyBinding:
    return _BY_ACTION[action]


def resolve_key(key: str, focus: Focus) -> Optional[KeyAction]:
    """Map a Textual key name to an action, or None if the key is not bound for this focus."""
    for binding in KEYMAP:
        if key in binding.keys:
            return binding.action
        if focus is Focus.GRID and key in binding.grid_keys:
            return binding.action
    return None


def short_help(focus: Focus) -> List[Tuple[str, str]]:
    """(key, description) pairs for the one-line help."""
    actions = [KeyAction.TOGGLE_FOCUS, KeyAction.QUIT]
    if focus is Focus.GRID:
        actions = [KeyAction.SELECT] + actions
    return [(binding_for(a).help_key, binding_for(a).help_text) for a in actions]

