# emoji_picker/app.py
# Description: Textual runtime for the emoji picker.
#
# The app owns no picker logic of its own: it turns Textual input into state
# machine events, executes the commands that come back and redraws.
#
# Imports
import sys
from typing import Iterable, Optional
#
# 3rd-Party Imports
from loguru import logger
from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input, Label
#
# Local Imports
from .Cache.emoji_cache import DatasetCache, EmojiCacheError
from .Logging_Config import configure_logging
from .Utils.clipboard import ClipboardSink, copy_to_clipboard
from .Widgets.emoji_grid import EmojiGridView, Theme, render_title
from .config import PickerConfig, get_cache_settings, load_cli_config_and_ensure_existence, load_picker_config
from .state.events import Command, CopyToClipboard, DatasetLoaded, Event, KeyEvent, LoadDataset, Quit, TextEdit
from .state.keymap import GLOBAL_ACTIONS, KeyAction, binding_for
from .state.session_state import AppStatus, Focus, SessionState
from .state.transitions import initial_state, transition
#
#######################################################################################################################
#
# Classes:


def _global_bindings() -> list:
    # Priority bindings fire before the focused widget sees the key, so tab
    # and quit work from both the query box and the grid.
    return [
        Binding(
            ",".join(binding_for(action).keys),
            f"picker_key('{action.value}')",
            binding_for(action).help_text,
            show=False,
            priority=True,
        )
        for action in GLOBAL_ACTIONS
    ]


class EmojiPickerApp(App[Optional[str]]):
    """Search emojis by keyword and copy the chosen one to the clipboard."""

    CSS = """
    Screen {
        padding: 0 1;
    }
    #title {
        margin-bottom: 1;
    }
    #search-input {
        width: 60;
        margin-bottom: 1;
    }
    #emoji-grid {
        height: auto;
    }
    """

    TITLE = "Emoji Picker"
    # ctrl+p moves the selection up.
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = _global_bindings()

    def __init__(
        self,
        config: Optional[PickerConfig] = None,
        cache: Optional[DatasetCache] = None,
        theme: Optional[Theme] = None,
        clipboard: Optional[ClipboardSink] = None,
    ):
        super().__init__()
        self.picker_config = config or PickerConfig()
        self.dataset_cache = cache or DatasetCache()
        self.picker_theme = theme or Theme()
        self._clipboard = clipboard
        self.copied: Optional[str] = None
        self.session: SessionState = SessionState(config=self.picker_config)

    def compose(self) -> ComposeResult:
        yield Label(render_title(self.TITLE, self.picker_theme), id="title")
        yield Input(placeholder="Type to search emojis...", id="search-input")
        yield EmojiGridView(self.picker_theme, id="emoji-grid")

    def on_mount(self) -> None:
        self.session, commands = initial_state(self.picker_config)
        self._sync_view()
        self._execute(commands)

    # --- Event plumbing ---

    def apply_event(self, event: Event) -> None:
        """Feed one event through the state machine and run its commands."""
        previous = self.session
        self.session, commands = transition(self.session, event)
        if self.session is not previous:
            logger.debug(
                f"{type(event).__name__}: status={self.session.status.value} focus={self.session.focus.value} "
                f"selected={self.session.selected} page={self.session.page} results={len(self.session.filtered)}"
            )
        self._sync_view()
        self._execute(commands)

    def action_picker_key(self, name: str) -> None:
        self.apply_event(KeyEvent(KeyAction(name)))

    def on_emoji_grid_view_action_requested(self, message: EmojiGridView.ActionRequested) -> None:
        self.apply_event(KeyEvent(message.action))

    def on_input_changed(self, event: Input.Changed) -> None:
        self.apply_event(TextEdit(event.value))
        if event.value != self.session.query:
            # Edit was dropped; keep the box showing the query being searched.
            event.input.value = self.session.query

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        # A mouse click can move focus without tab.
        target = Focus.GRID if isinstance(event.widget, EmojiGridView) else Focus.QUERY
        if target is not self.session.focus:
            self.apply_event(KeyEvent(KeyAction.TOGGLE_FOCUS))

    # --- Commands ---

    def _execute(self, commands: Iterable[Command]) -> None:
        for command in commands:
            if isinstance(command, LoadDataset):
                self.load_dataset()
            elif isinstance(command, CopyToClipboard):
                self._copy(command.text)
            elif isinstance(command, Quit):
                self._quit()
            else:
                raise TypeError(f"Unsupported command: {command!r}")

    def _copy(self, text: str) -> None:
        self.copied = text
        if self._clipboard is not None:
            ok = self._clipboard(text)
        else:
            ok = copy_to_clipboard(text, fallback=self.copy_to_clipboard)
        if not ok:
            logger.warning(f"Could not copy {text!r} to the clipboard")

    def _quit(self) -> None:
        if self.session.status is AppStatus.ERROR:
            self.exit(result=None, return_code=1, message=f"Error: {self.session.error_message}")
        else:
            self.exit(result=self.copied, return_code=0)

    @work(thread=True, exclusive=True, group="dataset")
    def load_dataset(self) -> None:
        """Load the dataset off the event loop and report back with DatasetLoaded."""
        try:
            event = DatasetLoaded(dataset=self.dataset_cache.load())
        except EmojiCacheError as e:
            event = DatasetLoaded(error=e)
        except Exception as e:
            logger.exception(f"Unexpected error loading the emoji dataset: {e}")
            event = DatasetLoaded(error=e)
        if not self.is_running:
            return
        self.call_from_thread(self.apply_event, event)

    # --- View ---

    def _sync_view(self) -> None:
        self.query_one(EmojiGridView).show_state(self.session)
        search_input = self.query_one(Input)
        if self.session.focus is Focus.QUERY:
            if not search_input.has_focus:
                search_input.focus()
        else:
            grid = self.query_one(EmojiGridView)
            if not grid.has_focus:
                grid.focus()

#
# End of Classes
#######################################################################################################################
#
# Functions:


def main_cli_runner() -> None:
    """Entry point for the emoji-picker command."""
    # Log to the default file before the config is read, then re-apply with it.
    configure_logging()
    config_data = load_cli_config_and_ensure_existence()
    configure_logging(config_data)

    app = EmojiPickerApp(
        config=load_picker_config(config_data),
        cache=DatasetCache(**get_cache_settings(config_data)),
        theme=Theme.from_config(config_data),
    )
    app.run()
    logger.info(f"Exiting with code {app.return_code or 0}, copied={app.copied!r}")
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main_cli_runner()
