# vtcli/ui/cursor.py
"""
vt — Terminal Control
Cursor positioning and visibility, plus the output seams the banner
animation relies on (interactivity check, failure-tolerant flush).
"""

import logging
from contextlib import contextmanager
from typing import Iterator, TextIO

logger = logging.getLogger(__name__)

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"


def move_to(row: int, col: int) -> str:
    """Absolute cursor placement; both coordinates are 1-indexed."""
    return f"\033[{row};{col}H"


def is_interactive(stream: TextIO) -> bool:
    """True only if the stream is attached to a terminal."""
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        return False


def safe_flush(stream: TextIO) -> None:
    """Flush the stream; a flaky terminal must never abort a reveal."""
    try:
        stream.flush()
    except (OSError, ValueError) as e:
        logger.debug(f"Ignoring flush failure: {e}")


@contextmanager
def hidden_cursor(stream: TextIO) -> Iterator[None]:
    """
    Hide the cursor for the duration of the block.

    The cursor is shown again exactly once on every exit path,
    including exceptions and KeyboardInterrupt.
    """
    stream.write(HIDE_CURSOR)
    safe_flush(stream)
    try:
        yield
    finally:
        stream.write(SHOW_CURSOR)
        safe_flush(stream)
