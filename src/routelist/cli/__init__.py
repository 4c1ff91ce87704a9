"""routelist CLI — print the route inventory of a routes directory.

Entry point registered as ``routelist`` in ``pyproject.toml``::

    [project.scripts]
    routelist = "routelist.cli:main"
"""

import argparse
import locale
import logging

logger = logging.getLogger("routelist.cli")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routelist`` command."""
    parser = argparse.ArgumentParser(
        prog="routelist",
        description="List the pages, endpoints, and layouts of a SvelteKit routes directory.",
    )
    parser.add_argument(
        "routes_dir",
        nargs="?",
        default=None,
        help="Routes directory (default: ./src/routes)",
    )

    args = parser.parse_args(argv)

    # Path ordering follows the user's collation locale
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.debug("Keeping default collation: %s", exc)

    from routelist.cli._routes import run_routes

    run_routes(args)
