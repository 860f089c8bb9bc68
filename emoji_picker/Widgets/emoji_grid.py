# emoji_grid.py
#
# Imports
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
#
# 3rd-party Libraries
from loguru import logger
from rich.color import Color, ColorParseError
from rich.style import Style
from rich.text import Text
from textual.events import Key
from textual.message import Message
from textual.widgets import Static
#
# Local Imports
from ..state.keymap import KeyAction, resolve_key, short_help
from ..state.session_state import AppStatus, Focus, SessionState
#
########################################################################################################################
#
# Classes:


@dataclass(frozen=True)
class Theme:
    """Colours used by the renderer. Passed in, never global."""
    accent: str = "#FF75B7"
    selected_foreground: str = "#FFFFFF"
    error: str = "#FF0000"

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "Theme":
        section = (config or {}).get("theme", {})
        if not isinstance(section, dict):
            return cls()
        defaults = cls()
        return cls(
            accent=_colour(section, "accent", defaults.accent),
            selected_foreground=_colour(section, "selected_foreground", defaults.selected_foreground),
            error=_colour(section, "error", defaults.error),
        )

    @property
    def title_style(self) -> Style:
        return Style(bold=True, color=self.accent)

    @property
    def selected_style(self) -> Style:
        return Style(bgcolor=self.accent, color=self.selected_foreground)

    @property
    def error_style(self) -> Style:
        return Style(color=self.error)

    @property
    def muted_style(self) -> Style:
        return Style(dim=True)


def _colour(section: Dict[str, Any], key: str, default: str) -> str:
    value = section.get(key, default)
    try:
        Color.parse(str(value))
    except ColorParseError:
        logger.warning(f"Invalid colour {value!r} for [theme] {key}, using {default}")
        return default
    return str(value)


def render_cell(emoji: str) -> str:
    return f" {emoji} "


def render_title(title: str, theme: Theme) -> Text:
    return Text(title, style=theme.title_style)


def render_help(focus: Focus, theme: Theme) -> Text:
    line = Text()
    for i, (key, description) in enumerate(short_help(focus)):
        if i:
            line.append(" • ", style=theme.muted_style)
        line.append(key)
        line.append(f" {description}", style=theme.muted_style)
    return line


def render(state: SessionState, theme: Theme) -> List[Text]:
    """
    Project the session state into display lines.

    The query itself is shown by the input box; these lines cover the
    grid (or the loading/error message), a status line, the keywords of the
    highlighted emoji and the key help.
    """
    if state.status is AppStatus.LOADING:
        return [Text("Loading emojis..."), Text(), render_help(state.focus, theme)]

    if state.status is AppStatus.ERROR:
        return [
            Text(f"Error: {state.error_message}", style=theme.error_style),
            Text(),
            Text("press esc to quit", style=theme.muted_style),
        ]

    lines: List[Text] = []
    rows = state.grid_rows()
    if not rows:
        lines.append(Text("No emojis found.", style=theme.muted_style))
    for row in rows:
        line = Text()
        for position, emoji in row:
            if state.is_highlighted(position):
                line.append(render_cell(emoji), style=theme.selected_style)
            else:
                line.append(render_cell(emoji))
        lines.append(line)

    page = state.current_page()
    lines.append(Text())
    lines.append(Text(
        f"page {page.page + 1}/{max(page.total_pages, 1)} · {len(state.filtered)} results",
        style=theme.muted_style,
    ))

    selected = state.selected_emoji if state.focus is Focus.GRID else None
    if selected is not None and state.index is not None:
        lines.append(Text(", ".join(state.index.keywords_for(selected)), style=theme.title_style))
    else:
        lines.append(Text())

    lines.append(render_help(state.focus, theme))
    return lines


class EmojiGridView(Static, can_focus=True):
    """Shows the rendered state and turns key presses into picker actions while focused."""

    class ActionRequested(Message):
        """Posted when a bound key is pressed on the grid."""
        def __init__(self, action: KeyAction) -> None:
            super().__init__()
            self.action: KeyAction = action

    def __init__(self, theme: Theme, **kwargs):
        super().__init__(**kwargs)
        self.picker_theme = theme

    def show_state(self, state: SessionState) -> None:
        self.update(Text("\n").join(render(state, self.picker_theme)))

    def on_key(self, event: Key) -> None:
        action = resolve_key(event.key, Focus.GRID)
        if action is None:
            return
        event.stop()
        event.prevent_default()
        self.post_message(self.ActionRequested(action))

#
# End of emoji_grid.py
########################################################################################################################
