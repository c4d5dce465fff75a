# vtcli/ui/__init__.py
"""
vt UI Module
Exports for the targeting-reticle startup banner.
"""

from .banner import (
    compose_banner,
    render_banner,
    print_banner,
    print_animated,
    random_quote,
    reveal_order,
    LockOnAnimation,
)
from .reticle import (
    RETICLE_CHARS,
    PlacedChar,
    generate_reticle,
    reticle_mask,
)

from . import colors
from .colors import *


# Define what is exported when a user imports `from vtcli.ui import *`
__all__ = [
    # Banner/startup
    "compose_banner",
    "render_banner",
    "print_banner",
    "print_animated",
    "random_quote",
    "reveal_order",
    "LockOnAnimation",

    # Reticle
    "RETICLE_CHARS",
    "PlacedChar",
    "generate_reticle",
    "reticle_mask",
]

__all__.extend(colors.__all__)
