# emoji_picker/Utils/clipboard.py
# Description: Best-effort clipboard writes.
#
# Imports
from typing import Callable, Optional
#
# Third-Party Imports
import pyperclip
from loguru import logger
#
#######################################################################################################################
#
# Functions:

ClipboardSink = Callable[[str], bool]


def copy_to_clipboard(text: str, fallback: Optional[Callable[[str], None]] = None) -> bool:
    """
    Write ``text`` to the system clipboard.

    Failures never raise. When pyperclip has no usable backend (e.g. no
    xclip/wl-copy on a headless box) ``fallback`` is tried, typically
    Textual's OSC 52 ``App.copy_to_clipboard``.

    Returns:
        True if some sink accepted the text.
    """
    try:
        pyperclip.copy(text)
        logger.debug(f"Copied {text!r} with pyperclip")
        return True
    except (pyperclip.PyperclipException, OSError) as e:
        logger.warning(f"pyperclip could not copy to clipboard: {e}")

    if fallback is None:
        return False
    try:
        fallback(text)
        logger.debug(f"Copied {text!r} with fallback clipboard")
        return True
    except Exception as e:
        logger.warning(f"Fallback clipboard copy failed: {e}")
        return False

#
# End of clipboard.py
#######################################################################################################################
