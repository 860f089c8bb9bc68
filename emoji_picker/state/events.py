"""
Inputs consumed by the navigation state machine and the commands it emits.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..Cache.emoji_cache import Dataset
from .keymap import KeyAction


# --- Events ---

@dataclass(frozen=True)
class DatasetLoaded:
    """Completion of the dataset load. Exactly one of the fields is set."""
    dataset: Optional[Dataset] = None
    error: Optional[BaseException] = None


@dataclass(frozen=True)
class KeyEvent:
    key: KeyAction


@dataclass(frozen=True)
class TextEdit:
    """The query box now holds ``value``."""
    value: str


Event = Union[DatasetLoaded, KeyEvent, TextEdit]


# --- Commands ---

@dataclass(frozen=True)
class LoadDataset:
    """Fetch or read the dataset and report back with DatasetLoaded."""


@dataclass(frozen=True)
class CopyToClipboard:
    text: str


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[LoadDataset, CopyToClipboard, Quit]
