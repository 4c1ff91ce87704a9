"""``routelist [path]`` — scan a routes directory and print the table.

Resolves the routes root, validates it, and prints either the route
table or ``No routes found.``.  Problems with the root (and any other
filesystem error during the walk) exit with status 1.
"""

import argparse
import sys
from pathlib import Path

from routelist.config import DEFAULT_ROUTES_DIR
from routelist.discovery import scan_routes, validate_root
from routelist.errors import RootNotADirectory, RootNotFound
from routelist.table import render_table

USAGE_HINT = "Usage: routelist [path/to/routes]"


def run_routes(args: argparse.Namespace) -> None:
    """Print the route inventory for ``args.routes_dir``.

    Falls back to ``<cwd>/src/routes`` when no directory was given.
    Raises ``SystemExit(1)`` on failure.
    """
    routes_dir = args.routes_dir or str(Path.cwd() / DEFAULT_ROUTES_DIR)

    try:
        root = validate_root(routes_dir)
        print(f"Scanning routes in: {routes_dir}\n")
        records = scan_routes(root)
    except RootNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(USAGE_HINT, file=sys.stderr)
        raise SystemExit(1) from exc
    except (RootNotADirectory, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not records:
        print("No routes found.")
        return

    print(render_table(records))
