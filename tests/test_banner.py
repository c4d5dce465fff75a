import io
import re

import pytest

from vtcli.ui import banner
from vtcli.ui.banner import (
    GLYPH_DELAY,
    QUOTES,
    RULE_CELL_DELAY,
    TEXT_ROWS,
    LockOnAnimation,
    compose_banner,
    print_animated,
    random_quote,
    reveal_order,
)
from vtcli.ui.cursor import HIDE_CURSOR, SHOW_CURSOR, move_to
from vtcli.ui.reticle import RETICLE_CHARS, RETICLE_HEIGHT, TEXT_ZONE_END, PlacedChar
from vtcli.utils.ansi_utils import char_width, strip_ansi, visible_width

MOVE_RE = re.compile(r"\x1b\[(\d+);(\d+)H")


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


class BrokenFlushTTY(FakeTTY):
    def flush(self):
        raise OSError("terminal went away")


def _char(row, col, glyph="A", dist=1.0):
    return PlacedChar(row, col, glyph, (10, 20, 30), dist)


@pytest.fixture
def fixed_quote(monkeypatch):
    monkeypatch.setattr(banner.secrets, "randbelow", lambda n: 1)
    return QUOTES[1].styled()


def test_compose_places_glyphs_by_column():
    chars = [
        _char(0, 40, "A"),
        _char(0, 10, "B"),          # inside the text zone
        _char(3, 38, "ア"),
        _char(3, 41, "C"),
    ]
    lines = compose_banner(chars, quote="Q").split("\n")

    assert len(lines) == RETICLE_HEIGHT + 4
    assert lines[0] == " " * 40 + "\033[38;2;10;20;30mA\033[0m"
    assert strip_ansi(lines[3]) == "  VT" + " " * 34 + "ア" + " " + "C"
    assert lines[RETICLE_HEIGHT] == ""
    assert lines[RETICLE_HEIGHT + 1] == "  Q"
    assert strip_ansi(lines[RETICLE_HEIGHT + 2]) == "─" * 80
    assert "B" not in strip_ansi(lines[0])


def test_overlay_rows_are_verbatim():
    lines = compose_banner((), quote="").split("\n")
    for row, overlay in TEXT_ROWS.items():
        assert lines[row] == overlay.styled()
    assert strip_ansi(lines[5]) == "  vulnerable target v0.0.1"


def test_no_reticle_glyph_in_text_zone():
    lines = compose_banner(RETICLE_CHARS, quote="").split("\n")
    for y in range(RETICLE_HEIGHT):
        overlay = TEXT_ROWS.get(y)
        overlay_width = visible_width(overlay.styled()) if overlay else 0
        col = 0
        for ch in strip_ansi(lines[y]):
            if ch != " " and col >= overlay_width:
                assert col >= TEXT_ZONE_END
            col += char_width(ch)


def test_reveal_order_outermost_first():
    chars = [_char(20, 40 + i, "A", d) for i, d in enumerate([1, 3, 2, 5, 4])]
    assert [c.dist for c in reveal_order(chars)] == [5, 4, 3, 2, 1]


def test_reveal_order_skips_text_zone():
    chars = [_char(1, TEXT_ZONE_END - 1, dist=9), _char(1, TEXT_ZONE_END, dist=1)]
    assert [c.col for c in reveal_order(chars)] == [TEXT_ZONE_END]
    assert all(c.col >= TEXT_ZONE_END for c in reveal_order(RETICLE_CHARS))


def test_random_quote_formats_entry(fixed_quote):
    assert random_quote() == "\033[3mTalk is cheap. Show me the code.\033[0m — Linus Torvalds"


def test_random_quote_degrades_to_empty(monkeypatch):
    def boom(n):
        raise OSError("no entropy")
    monkeypatch.setattr(banner.secrets, "randbelow", boom)
    assert random_quote() == ""


def test_non_interactive_falls_back_to_static_block(fixed_quote):
    out = io.StringIO()

    def no_sleep(_):
        raise AssertionError("static path must not pause")

    print_animated(out, sleep=no_sleep)
    text = out.getvalue()
    assert text == compose_banner(RETICLE_CHARS, fixed_quote)
    assert "\033[?25" not in text
    assert not MOVE_RE.search(text)


def test_animation_sequence_and_timing():
    chars = [_char(20, 40 + i, "A", d) for i, d in enumerate([1, 3, 2, 5, 4])]
    out = FakeTTY()
    sleeps = []
    LockOnAnimation(out, chars, quote="Q!", sleep=sleeps.append).run()
    text = out.getvalue()

    assert text.startswith(HIDE_CURSOR)
    assert text.endswith("\n" + SHOW_CURSOR)
    assert text.count(SHOW_CURSOR) == 1

    moves = [(int(r), int(c)) for r, c in MOVE_RE.findall(text)]
    # Outer ring first: distances 5, 4, 3, 2, 1 sit at columns 43, 44, 41, 42, 40
    assert moves[:5] == [(21, 44), (21, 45), (21, 42), (21, 43), (21, 41)]

    title = text.index(move_to(4, 3))
    subtitle = text.index(move_to(6, 3))
    tagline = text.index(move_to(8, 3))
    tagline2 = text.index(move_to(9, 3))
    quote = text.index(move_to(RETICLE_HEIGHT + 2, 3))
    rule = text.index(move_to(RETICLE_HEIGHT + 3, 1))
    final = text.index(move_to(RETICLE_HEIGHT + 5, 1))
    assert title < subtitle < tagline < tagline2 < quote < rule < final

    assert sleeps[:5] == [GLYPH_DELAY] * 5
    assert sleeps[5:8] == [0.2, 0.04, 0.04]
    assert sleeps[8] == 0.08
    assert sleeps[-80:] == [RULE_CELL_DELAY] * 80
    assert strip_ansi(text).count("─") == 80

    typed = sum(len(o.text) for o in TEXT_ROWS.values())
    assert len(sleeps) == 5 + 3 + typed + (1 + 2) + (1 + 80)


def test_cursor_restored_once_when_reveal_fails():
    out = FakeTTY()
    calls = []

    def flaky_sleep(delay):
        calls.append(delay)
        if len(calls) == 3:
            raise RuntimeError("write failed")

    with pytest.raises(RuntimeError):
        LockOnAnimation(out, RETICLE_CHARS, quote="", sleep=flaky_sleep).run()

    text = out.getvalue()
    assert text.count(SHOW_CURSOR) == 1
    assert text.endswith(SHOW_CURSOR)


def test_cursor_restored_on_interrupt():
    out = FakeTTY()

    def interrupt(_):
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        LockOnAnimation(out, RETICLE_CHARS, sleep=interrupt).run()
    assert out.getvalue().count(SHOW_CURSOR) == 1


def test_flush_failures_do_not_abort_reveal():
    out = BrokenFlushTTY()
    chars = [_char(2, 50), _char(4, 60, dist=2.0)]
    LockOnAnimation(out, chars, quote="", sleep=lambda _: None).run()
    assert out.getvalue().endswith(SHOW_CURSOR)


def test_interactive_output_is_animated(fixed_quote):
    out = FakeTTY()
    print_animated(out, sleep=lambda _: None)
    text = out.getvalue()
    assert text.startswith(HIDE_CURSOR)
    glyph_moves = [m for m in MOVE_RE.findall(text)]
    assert len(glyph_moves) >= len(reveal_order(RETICLE_CHARS))
    assert "Linus Torvalds" in text
