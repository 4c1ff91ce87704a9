"""routelist — inventory of a SvelteKit-style ``src/routes`` tree.

Reads file names (and greps server files for exported HTTP handlers)
without importing or running the scanned project.

Basic usage::

    from routelist import scan_routes, render_table

    records = scan_routes("src/routes")
    print(render_table(records))

From the shell::

    routelist path/to/routes
"""

from routelist.config import DEFAULT_ROUTES_DIR, ScanConfig
from routelist.discovery import scan_routes, validate_root
from routelist.errors import (
    ConfigurationError,
    RootNotADirectory,
    RootNotFound,
    RouteListError,
)
from routelist.methods import extract_methods
from routelist.paths import route_path
from routelist.table import render_summary, render_table, sort_records
from routelist.types import DEFAULT_METHODS, RouteRecord, RouteType

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_METHODS",
    "DEFAULT_ROUTES_DIR",
    "ConfigurationError",
    "RootNotADirectory",
    "RootNotFound",
    "RouteListError",
    "RouteRecord",
    "RouteType",
    "ScanConfig",
    "extract_methods",
    "render_summary",
    "render_table",
    "route_path",
    "scan_routes",
    "sort_records",
    "validate_root",
]
