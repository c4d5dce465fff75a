"""
ANSI Display-Width Utilities

ANSI escape sequence removal and terminal column accounting.
Handles SGR color codes as well as cursor movement/visibility sequences.
"""

import re

# CSI sequences: ESC [ then optional private marker, params, and a final letter
# Covers \033[0m, \033[38;2;1;2;3m, \033[4;5H, \033[?25l
ANSI_RE = re.compile(r"\x1b\[[?0-9;]*[a-zA-Z]")

# Katakana block; the reticle alphabet's two-column glyph family
WIDE_START = 0x30A0
WIDE_END = 0x30FF


def strip_ansi(text: str) -> str:
    """
    Remove ANSI escape sequences from text.

    Args:
        text: Input text that may contain ANSI codes

    Returns:
        Text with all ANSI codes removed
    """
    if not text:
        return text
    return ANSI_RE.sub("", text)


def is_wide(char: str) -> bool:
    """True if the glyph occupies two terminal columns."""
    return WIDE_START <= ord(char) <= WIDE_END


def char_width(char: str) -> int:
    return 2 if is_wide(char) else 1


def visible_width(text: str) -> int:
    """
    Get the number of terminal columns text occupies.

    Control sequences count as zero columns and wide glyphs as two.

    Args:
        text: Input text that may contain ANSI codes

    Returns:
        Display width in columns
    """
    return sum(char_width(c) for c in strip_ansi(text))
