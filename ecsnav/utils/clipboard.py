"""Best-effort clipboard access."""

from __future__ import annotations

import logging

import pyperclip

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """Copy ``text`` to the system clipboard.

    Failures (no clipboard mechanism, headless session) are logged and
    ignored.

    Returns:
        True if the text was handed to the clipboard.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.debug(f"Clipboard unavailable: {e}")
        return False
    return True
