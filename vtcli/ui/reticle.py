# vtcli/ui/reticle.py
"""
vt — Targeting Reticle Generator
Procedural glyph-grid for the startup banner: a concentric-ring field
function and a seeded sampler that turns it into placed characters.
"""

import math
import random
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional, Tuple

from .colors import BACKGROUND_RGB, DANGER_RGB, clamp_rgb, rgb_to_ansi
from vtcli.utils.ansi_utils import char_width

# ═══════════════════════════════════════════════════════════════
# GRID GEOMETRY
# ═══════════════════════════════════════════════════════════════

RETICLE_WIDTH = 80
RETICLE_HEIGHT = 26
CENTER_X = 58
CENTER_Y = 13
MAX_RADIUS = 12.0

# Columns left of this belong to the title text
TEXT_ZONE_END = 36

# Terminal cells are roughly twice as tall as wide
ASPECT_CORRECTION = 2.0

TAU = math.pi * 2

# 20 katakana (wide) + 16 hex digits (narrow)
RETICLE_GLYPHS = "アイウエオカキクケコサシスセソタチツテト0123456789ABCDEF"

# ═══════════════════════════════════════════════════════════════
# SAMPLING CONSTANTS
# ═══════════════════════════════════════════════════════════════

LAYOUT_SEED = 42
DRAW_SEED = 77

BULLSEYE_RADIUS = 0.08
BULLSEYE_GLOW = (40.0, 50.0, 40.0)
BACKGROUND_CHANCE = 0.05

# (brightness floor, inclusion chance or None for always, alpha base, alpha spread)
DENSITY_TIERS = (
    (180, None, 200, 55),
    (120, 0.8, 120, 90),
    (60, 0.5, 60, 80),
    (25, 0.2, 25, 45),
)

# ═══════════════════════════════════════════════════════════════
# FIELD SHAPES
# ═══════════════════════════════════════════════════════════════

class RingBand(NamedTuple):
    inner: float
    outer: float
    brightness: float

    def contains(self, nd: float) -> bool:
        return self.inner <= nd <= self.outer


RING_BANDS = (
    RingBand(0.20, 0.26, 220),  # innermost
    RingBand(0.44, 0.50, 190),
    RingBand(0.68, 0.74, 150),
    RingBand(0.90, 1.00, 100),  # outermost, twice as thick
)

TICK_RADII = (0.23, 0.47, 0.71, 0.95)
TICK_BAND = 0.045
TICK_TOLERANCE = 0.06
# Every 10°, cardinal directions left to the crosshair
TICK_ANGLES = tuple(t / 36 * TAU for t in range(36) if t % 9 != 0)

CROSSHAIR_THICKNESS = 0.02
CROSSHAIR_GAP = 0.10
CROSSHAIR_REACH = 1.05

BRACKET_OFFSET = 1.08
BRACKET_LENGTH = 0.12
BRACKET_THICKNESS = 0.025

NOTCH_INNER = 0.94
NOTCH_OUTER = 1.06
NOTCH_TOLERANCE = 0.05
NOTCH_ANGLES = (math.pi / 4, 3 * math.pi / 4, -3 * math.pi / 4, -math.pi / 4)


class FieldPoint(NamedTuple):
    """Geometry of one grid cell relative to the reticle center."""
    dx: float
    dy: float
    dist: float
    angle: float

    @property
    def nd(self) -> float:
        return self.dist / MAX_RADIUS

    @property
    def nx(self) -> float:
        return self.dx / MAX_RADIUS

    @property
    def ny(self) -> float:
        return self.dy / MAX_RADIUS


def field_point(x: int, y: int) -> FieldPoint:
    dx = (x - CENTER_X) / ASPECT_CORRECTION
    dy = y - CENTER_Y
    return FieldPoint(dx, dy, math.hypot(dx, dy), math.atan2(dy, dx))


def angular_distance(a: float, b: float) -> float:
    """Smallest absolute difference between two angles, in [0, pi]."""
    d = abs(a - b) % TAU
    return TAU - d if d > math.pi else d

# ═══════════════════════════════════════════════════════════════
# MASK RULES (checked in order, first match wins)
# ═══════════════════════════════════════════════════════════════

def _in_band(band: RingBand) -> Callable[[FieldPoint], bool]:
    def predicate(p: FieldPoint) -> bool:
        return band.contains(p.nd)
    return predicate


def _is_bullseye(p: FieldPoint) -> bool:
    return p.nd < BULLSEYE_RADIUS


def _on_crosshair(p: FieldPoint) -> bool:
    adx = abs(p.nx)
    ady = abs(p.ny)
    if ady < CROSSHAIR_THICKNESS and CROSSHAIR_GAP < adx < CROSSHAIR_REACH:
        return True
    return adx < CROSSHAIR_THICKNESS and CROSSHAIR_GAP < ady < CROSSHAIR_REACH


def _on_tick(p: FieldPoint) -> bool:
    nd = p.nd
    for radius in TICK_RADII:
        if abs(nd - radius) >= TICK_BAND:
            continue
        for tick in TICK_ANGLES:
            if angular_distance(p.angle, tick) < TICK_TOLERANCE:
                return True
    return False


def _on_corner_bracket(p: FieldPoint) -> bool:
    nx, ny = p.nx, p.ny
    for sx in (-1, 1):
        for sy in (-1, 1):
            bx = sx * BRACKET_OFFSET
            by = sy * BRACKET_OFFSET
            # Horizontal arm, running inward from the corner
            if (abs(ny - by) < BRACKET_THICKNESS
                    and (bx - sx * BRACKET_LENGTH) * sx <= nx * sx <= bx * sx):
                return True
            # Vertical arm
            if (abs(nx - bx) < BRACKET_THICKNESS
                    and (by - sy * BRACKET_LENGTH) * sy <= ny * sy <= by * sy):
                return True
    return False


def _on_diagonal_notch(p: FieldPoint) -> bool:
    if not NOTCH_INNER < p.nd < NOTCH_OUTER:
        return False
    return any(angular_distance(p.angle, a) < NOTCH_TOLERANCE for a in NOTCH_ANGLES)


class MaskRule(NamedTuple):
    name: str
    predicate: Callable[[FieldPoint], bool]
    brightness: float


MASK_RULES: Tuple[MaskRule, ...] = (
    *(MaskRule(f"ring_{i}", _in_band(band), band.brightness)
      for i, band in enumerate(RING_BANDS)),
    MaskRule("bullseye", _is_bullseye, 255),
    MaskRule("crosshair", _on_crosshair, 110),
    MaskRule("tick", _on_tick, 80),
    MaskRule("corner_bracket", _on_corner_bracket, 90),
    MaskRule("diagonal_notch", _on_diagonal_notch, 100),
)


def brightness_for(point: FieldPoint) -> float:
    """Brightness of the first rule the point satisfies, 0 if none."""
    for rule in MASK_RULES:
        if rule.predicate(point):
            return rule.brightness
    return 0


def reticle_mask(x: int, y: int) -> float:
    """Brightness (0-255) at a grid position; 0 means no foreground glyph."""
    return brightness_for(field_point(x, y))

# ═══════════════════════════════════════════════════════════════
# GRID GENERATOR
# ═══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class PlacedChar:
    """A committed glyph in the reticle grid."""
    row: int
    col: int
    glyph: str
    rgb: Tuple[int, int, int]
    dist: float

    @property
    def width(self) -> int:
        return char_width(self.glyph)

    @property
    def ansi(self) -> str:
        return rgb_to_ansi(*self.rgb)


def _density_alpha(brightness: float, draw_rng: random.Random) -> float:
    """Opacity for a lit cell, or 0 when the tier rejects it."""
    for floor, chance, base, spread in DENSITY_TIERS:
        if brightness > floor:
            if chance is not None and draw_rng.random() >= chance:
                return 0.0
            return (base + draw_rng.random() * spread) / 255
    return 0.0


def _danger_color(alpha: float, draw_rng: random.Random) -> Tuple[float, float, float]:
    """Jittered danger red blended over black."""
    base_r, base_g, base_b = DANGER_RGB
    r = min(255.0, base_r + (draw_rng.random() - 0.5) * 30)
    g = min(255.0, base_g + (draw_rng.random() - 0.5) * 12)
    return r * alpha, g * alpha, base_b * alpha


def generate_reticle(layout_rng: Optional[random.Random] = None,
                     draw_rng: Optional[random.Random] = None) -> Tuple[PlacedChar, ...]:
    """
    Walk the grid once in row-major order and return the placed characters.

    The layout stream picks glyphs and background scatter; the draw stream
    drives inclusion, opacity and color jitter. Fresh seeded streams are
    created when none are supplied, so repeated calls are identical.
    """
    if layout_rng is None:
        layout_rng = random.Random(LAYOUT_SEED)
    if draw_rng is None:
        draw_rng = random.Random(DRAW_SEED)

    placed: List[PlacedChar] = []
    # One padding column for wide-glyph lookahead
    occupied = [[False] * (RETICLE_WIDTH + 1) for _ in range(RETICLE_HEIGHT)]

    def place(x: int, y: int, glyph: str, rgb: Tuple[float, float, float], dist: float) -> None:
        width = char_width(glyph)
        if x + width > RETICLE_WIDTH:
            return
        if width == 2 and occupied[y][x + 1]:
            return
        placed.append(PlacedChar(y, x, glyph, clamp_rgb(*rgb), dist))
        for i in range(width):
            occupied[y][x + i] = True

    for y in range(RETICLE_HEIGHT):
        for x in range(RETICLE_WIDTH):
            if occupied[y][x]:
                continue

            point = field_point(x, y)
            brightness = brightness_for(point)
            glyph = RETICLE_GLYPHS[layout_rng.randrange(len(RETICLE_GLYPHS))]

            if brightness <= 0:
                # Ambient noise texture
                if layout_rng.random() < BACKGROUND_CHANCE:
                    place(x, y, glyph, BACKGROUND_RGB, point.dist)
                continue

            alpha = _density_alpha(brightness, draw_rng)
            if alpha <= 0:
                continue

            r, g, b = _danger_color(alpha, draw_rng)
            if point.nd < BULLSEYE_RADIUS:
                glow_r, glow_g, glow_b = BULLSEYE_GLOW
                r, g, b = r + glow_r, g + glow_g, b + glow_b

            place(x, y, glyph, (r, g, b), point.dist)

    return tuple(placed)


# Computed once; read-only for the rest of the process
RETICLE_CHARS: Tuple[PlacedChar, ...] = generate_reticle()
