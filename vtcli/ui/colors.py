# vtcli/ui/colors.py
"""
vt — Danger Palette
ANSI color codes and truecolor encoding for terminal styling
"""

from typing import Tuple

# ═══════════════════════════════════════════════════════════════
# DANGER PALETTE
# ═══════════════════════════════════════════════════════════════

# DANGER (#FF3355) base RGB for reticle glyphs
DANGER_RGB: Tuple[int, int, int] = (255, 51, 85)

# Ambient scatter behind the reticle
BACKGROUND_RGB: Tuple[int, int, int] = (24, 24, 24)

WHITE = "\033[38;2;255;255;255m"   # Title text
GRAY = "\033[90m"                  # Subtitle / tagline / rule

# ═══════════════════════════════════════════════════════════════
# TEXT STYLES
# ═══════════════════════════════════════════════════════════════

BOLD = "\033[1m"
ITALIC = "\033[3m"

RESET = "\033[0m"

# ═══════════════════════════════════════════════════════════════
# COLOR UTILITIES
# ═══════════════════════════════════════════════════════════════

def colorize(text: str, color: str, style: str = "") -> str:
    """Apply color and optional style to text"""
    return f"{style}{color}{text}{RESET}"

def clamp_rgb(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """Clamp each channel to [0, 255] and truncate to int."""
    return tuple(int(max(0.0, min(255.0, c))) for c in (r, g, b))

# ═══════════════════════════════════════════════════════════════
# RGB TO ANSI CONVERTER
# ═══════════════════════════════════════════════════════════════

def rgb_to_ansi(r: float, g: float, b: float) -> str:
    """Convert RGB to a 24-bit truecolor foreground escape"""
    ri, gi, bi = clamp_rgb(r, g, b)
    return f"\033[38;2;{ri};{gi};{bi}m"

__all__ = [
    "DANGER_RGB",
    "BACKGROUND_RGB",
    "WHITE",
    "GRAY",
    "BOLD",
    "ITALIC",
    "RESET",
    "colorize",
    "clamp_rgb",
    "rgb_to_ansi",
]
