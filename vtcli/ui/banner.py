# vtcli/ui/banner.py
"""
vt — Banner and Lock-On Startup Sequence
Composes the reticle grid with the title overlay, and replays it as a
timed cursor-positioned reveal on interactive terminals.
"""

import logging
import secrets
import sys
import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, TextIO

from vtcli import APP_VERSION
from .colors import GRAY, ITALIC, RESET, WHITE, colorize
from .cursor import hidden_cursor, is_interactive, move_to, safe_flush
from .reticle import (
    RETICLE_CHARS,
    RETICLE_HEIGHT,
    RETICLE_WIDTH,
    TEXT_ZONE_END,
    PlacedChar,
)
from vtcli.utils.ansi_utils import visible_width

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════
# TEXT OVERLAY
# ═══════════════════════════════════════════════════════════════

TEXT_INDENT = "  "
TEXT_COLUMN = len(TEXT_INDENT) + 1  # 1-indexed column where overlay text starts


@dataclass(frozen=True)
class TextOverlay:
    """Literal text drawn at the left of a banner row."""
    text: str
    color: str

    def styled(self) -> str:
        return colorize(TEXT_INDENT + self.text, self.color)


TITLE_ROW = 3
SUBTITLE_ROW = 5
TAGLINE_ROWS = (7, 8)

TEXT_ROWS: Dict[int, TextOverlay] = {
    TITLE_ROW: TextOverlay("VT", WHITE),
    SUBTITLE_ROW: TextOverlay(f"vulnerable target {APP_VERSION}", GRAY),
    TAGLINE_ROWS[0]: TextOverlay("// spin up vulnerable targets", GRAY),
    TAGLINE_ROWS[1]: TextOverlay("from your terminal //", GRAY),
}

RULE_CHAR = "─"

# ═══════════════════════════════════════════════════════════════
# QUOTES
# ═══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Quote:
    text: str
    author: str

    def styled(self) -> str:
        return f"{ITALIC}{self.text}{RESET} — {self.author}"


QUOTES = (
    Quote("Pirêze Hayat, Doxrî Yașanmaz.", "Pișo Meheme"),
    Quote("Talk is cheap. Show me the code.", "Linus Torvalds"),
    Quote("Given enough eyeballs, all bugs are shallow.", "Eric S. Raymond"),
    Quote("The quieter you become, the more you are able to hear.", "Anonymous"),
    Quote("Hack the planet!", "Hackers (1995)"),
    Quote("Code is poetry.", "WP Community"),
    Quote("Think like a hacker, act like an engineer.", "Security Community"),
    Quote("Open source is power.", "Open Source Advocates"),
    Quote("Information wants to be free.", "Stewart Brand"),
)


def random_quote() -> str:
    """Styled quote picked with the OS CSPRNG; empty string if that fails."""
    if not QUOTES:
        return ""
    try:
        index = secrets.randbelow(len(QUOTES))
    except Exception as e:
        logger.debug(f"Quote selection failed, omitting quote: {e}")
        return ""
    return QUOTES[index].styled()

# ═══════════════════════════════════════════════════════════════
# ANIMATION TIMING (seconds)
# ═══════════════════════════════════════════════════════════════

GLYPH_DELAY = 0.001


@dataclass(frozen=True)
class RevealSection:
    """Overlay rows typed out together after a lead-in pause."""
    rows: tuple
    pause: float
    char_delay: float


TEXT_SECTIONS = (
    RevealSection((TITLE_ROW,), 0.2, 0.04),
    RevealSection((SUBTITLE_ROW,), 0.08, 0.015),
    RevealSection(TAGLINE_ROWS, 0.06, 0.01),
)

QUOTE_PAUSE = 0.1
QUOTE_CHAR_DELAY = 0.006
RULE_PAUSE = 0.08
RULE_CELL_DELAY = 0.001

# ═══════════════════════════════════════════════════════════════
# STATIC COMPOSER
# ═══════════════════════════════════════════════════════════════

def _rows_by_line(chars: Iterable[PlacedChar]) -> Dict[int, List[PlacedChar]]:
    by_line: Dict[int, List[PlacedChar]] = defaultdict(list)
    for c in chars:
        if c.col >= TEXT_ZONE_END:
            by_line[c.row].append(c)
    for line in by_line.values():
        line.sort(key=lambda c: c.col)
    return by_line


def compose_banner(chars: Iterable[PlacedChar] = RETICLE_CHARS, quote: str = "") -> str:
    """
    Merge the reticle with the text overlay into one printable block.

    Glyphs inside the text zone are suppressed; every glyph carries its own
    color and a reset. The block ends with a blank line, the quote and a
    full-width rule.
    """
    by_line = _rows_by_line(chars)
    out: List[str] = []

    for y in range(RETICLE_HEIGHT):
        col = 0
        overlay = TEXT_ROWS.get(y)
        if overlay is not None:
            styled = overlay.styled()
            out.append(styled)
            col = visible_width(styled)

        for c in by_line.get(y, ()):
            if col < c.col:
                out.append(" " * (c.col - col))
                col = c.col
            out.append(f"{c.ansi}{c.glyph}{RESET}")
            col += c.width
        out.append("\n")

    out.append("\n")
    out.append(f"{TEXT_INDENT}{quote}\n")
    out.append(f"{GRAY}{RULE_CHAR * RETICLE_WIDTH}{RESET}\n")
    return "".join(out)


def render_banner() -> str:
    """Return the static banner with a freshly drawn quote."""
    return compose_banner(RETICLE_CHARS, random_quote())


def print_banner(stream: Optional[TextIO] = None) -> None:
    """Write the static banner to stdout (or the given stream)."""
    if stream is None:
        stream = sys.stdout
    stream.write(render_banner())
    safe_flush(stream)

# ═══════════════════════════════════════════════════════════════
# ANIMATED RENDERER
# ═══════════════════════════════════════════════════════════════

def reveal_order(chars: Iterable[PlacedChar]) -> List[PlacedChar]:
    """Glyphs outside the text zone, outermost first."""
    visible = [c for c in chars if c.col >= TEXT_ZONE_END]
    return sorted(visible, key=lambda c: c.dist, reverse=True)


class LockOnAnimation:
    """
    Timed reveal of the banner on an interactive terminal.

    Order: reticle from the outer ring inward, title, subtitle, tagline,
    quote, rule. Rows are 1-indexed and start at ``start_row``.
    """

    def __init__(self,
                 stream: TextIO,
                 chars: Iterable[PlacedChar] = RETICLE_CHARS,
                 quote: str = "",
                 sleep: Callable[[float], None] = time.sleep,
                 start_row: int = 1):
        self.stream = stream
        self.chars = tuple(chars)
        self.quote = quote
        self.sleep = sleep
        self.start_row = start_row

    def _emit(self, text: str, delay: float) -> None:
        self.stream.write(text)
        safe_flush(self.stream)
        self.sleep(delay)

    def _type_out(self, row: int, col: int, text: str, color: str, delay: float) -> None:
        self.stream.write(move_to(self.start_row + row, col))
        for ch in text:
            self._emit(colorize(ch, color), delay)

    def _reveal_reticle(self) -> None:
        for c in reveal_order(self.chars):
            self.stream.write(move_to(self.start_row + c.row, c.col + 1))
            self._emit(f"{c.ansi}{c.glyph}{RESET}", GLYPH_DELAY)

    def _reveal_text(self) -> None:
        for section in TEXT_SECTIONS:
            self.sleep(section.pause)
            for row in section.rows:
                overlay = TEXT_ROWS[row]
                self._type_out(row, TEXT_COLUMN, overlay.text, overlay.color, section.char_delay)

    def _reveal_quote(self) -> None:
        self.sleep(QUOTE_PAUSE)
        self.stream.write(move_to(self.start_row + RETICLE_HEIGHT + 1, TEXT_COLUMN))
        for ch in self.quote:
            self._emit(ch, QUOTE_CHAR_DELAY)

    def _draw_rule(self) -> None:
        self.sleep(RULE_PAUSE)
        self.stream.write(move_to(self.start_row + RETICLE_HEIGHT + 2, 1))
        for _ in range(RETICLE_WIDTH):
            self._emit(colorize(RULE_CHAR, GRAY), RULE_CELL_DELAY)

    def run(self) -> None:
        with hidden_cursor(self.stream):
            self._reveal_reticle()
            self._reveal_text()
            self._reveal_quote()
            self._draw_rule()
            self.stream.write(move_to(self.start_row + RETICLE_HEIGHT + 4, 1))
            self.stream.write("\n")


def print_animated(stream: Optional[TextIO] = None,
                   sleep: Callable[[float], None] = time.sleep) -> None:
    """
    Display the banner with the lock-on animation.

    Non-interactive output (pipes, files) gets the static block instead,
    with no cursor control sequences.
    """
    if stream is None:
        stream = sys.stdout
    if not is_interactive(stream):
        logger.debug("Output is not a terminal, printing static banner")
        stream.write(render_banner())
        safe_flush(stream)
        return

    LockOnAnimation(stream, RETICLE_CHARS, random_quote(), sleep).run()
