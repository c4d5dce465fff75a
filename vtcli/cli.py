"""
vt — Entry Point
Vulnerable Target CLI: shows the lock-on banner and wires logging/config.
"""

import argparse
import logging
import sys
from typing import List, Optional

from vtcli import APP_NAME, APP_VERSION
from vtcli.config.settings import get_setting, load_config
from vtcli.ui import print_animated, print_banner
from vtcli.ui.colors import BOLD, RESET
from vtcli.ui.reticle import RETICLE_CHARS

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# =====================================================================
#  SETUP
# =====================================================================

def _configure_logging(verbose: bool) -> None:
    """Log to stderr so stdout stays clean for the banner."""
    if verbose:
        level = logging.DEBUG
    else:
        configured = str(get_setting("log_level", "WARNING")).upper()
        level = getattr(logging, configured, logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _load_config() -> None:
    try:
        load_config()
    except ValueError as e:
        # Defaults stay in effect
        print(f"{BOLD}config error:{RESET} {e}", file=sys.stderr)

# =====================================================================
#  COMMANDS
# =====================================================================

def cmd_banner(args: argparse.Namespace) -> int:
    """Show the startup banner, animated unless disabled."""
    static = getattr(args, "static", False) or not get_setting("banner.animate", True)
    logger.debug(f"Rendering banner ({len(RETICLE_CHARS)} reticle glyphs, static={static})")
    try:
        if static:
            print_banner()
        else:
            print_animated()
    except KeyboardInterrupt:
        # Cursor visibility is restored by the animation itself
        return 130
    return 0

# =====================================================================
#  CLI ENTRY WITH SUBCOMMANDS
# =====================================================================

def _create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="vt — spin up intentionally vulnerable targets from your terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vt                    # Show the animated banner
  vt banner --static    # Print the banner without animation
        """
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr"
    )

    # Subcommands
    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands"
    )

    # banner
    parser_banner = subparsers.add_parser(
        "banner",
        help="Show the startup banner"
    )
    parser_banner.add_argument(
        "--static",
        action="store_true",
        help="Skip the lock-on animation"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with subcommand routing."""
    parser = _create_parser()
    args = parser.parse_args(argv)

    _load_config()
    _configure_logging(args.verbose)

    command_handlers = {
        None: cmd_banner,
        "banner": cmd_banner,
    }
    return command_handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
