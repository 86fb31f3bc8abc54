#!/usr/bin/env python3
"""Ad hoc runner for the sample pizza menu.

Usage:
    python query.py            # Plain text descriptions
    python query.py --json     # Pizzas as JSON
    python query.py --debug    # Also show the missing-toppings check

Output format defaults to OUTPUT_FORMAT from the environment / .env file.
"""

import sys
from typing import List, Optional

from rich.console import Console

from src.menu import render
from src.utils.logger import logger

console = Console()

USAGE = "Usage: python query.py [--json] [--debug]"


def run_menu(output_format: Optional[str] = None, debug: bool = False) -> None:
    """Render the sample menu, exiting with status 1 on failure.

    Args:
        output_format: "text" or "json"; None uses the configured default.
        debug: Also show how a pizza without toppings is rejected.
    """
    try:
        render(console, output_format=output_format, show_missing_toppings=debug)
    except KeyboardInterrupt:
        logger.info("\nInterrupted by user.")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Menu rendering failed: {e}", exc_info=True)
        sys.exit(1)


def parse_args(argv: List[str]) -> tuple[Optional[str], bool]:
    """Parse command line flags into (output_format, debug)."""
    output_format = None
    debug_mode = False

    for arg in argv:
        if arg == "--json":
            output_format = "json"
        elif arg == "--debug":
            debug_mode = True
        else:
            print(f"Unknown flag: {arg}")
            print(USAGE)
            sys.exit(1)

    return output_format, debug_mode


if __name__ == "__main__":
    console.print("Optional data demo using pizza!")
    console.print()
    fmt, debug = parse_args(sys.argv[1:])
    run_menu(fmt, debug=debug)
