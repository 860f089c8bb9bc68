"""
emoji_picker - A Textual TUI for finding emojis by keyword

Type to filter a keyword-indexed emoji dataset, move through the result grid
with the arrow keys and press enter to copy the highlighted emoji to the
clipboard. The dataset is downloaded once and cached under
$XDG_DATA_HOME/emoji-picker so later runs work offline.
"""

__version__ = "0.1.0"
__license__ = "AGPLv3+"
