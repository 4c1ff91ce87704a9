"""Filesystem route discovery for a ``src/routes`` directory.

Walks the routes tree and discovers:
- ``+page.svelte`` / ``+page.server.{ts,js}`` as page routes
- ``+server.{ts,js}`` as API endpoints
- ``+layout.svelte`` / ``+layout.server.{ts,js}`` as layouts

Files in one directory that describe the same thing collapse into a
single record; a layout next to a page gets its own record.  Directory
names starting with ``_`` or ``.`` are skipped along with everything
beneath them.
"""

import logging
from pathlib import Path
from typing import TypeAlias

from routelist.config import ScanConfig
from routelist.errors import RootNotADirectory, RootNotFound
from routelist.methods import extract_methods
from routelist.paths import route_path
from routelist.types import DEFAULT_METHODS, RouteRecord, RouteType

logger = logging.getLogger("routelist.discovery")

_Records: TypeAlias = dict[tuple[str, RouteType], RouteRecord]


def validate_root(routes_dir: str | Path) -> Path:
    """Check that *routes_dir* exists and is a directory.

    Raises:
        RootNotFound: Nothing exists at the path.
        RootNotADirectory: The path is a file (or other non-directory).
    """
    root = Path(routes_dir)
    if not root.exists():
        raise RootNotFound(routes_dir)
    if not root.is_dir():
        raise RootNotADirectory(routes_dir)
    return root


def scan_routes(routes_dir: str | Path, *, config: ScanConfig | None = None) -> list[RouteRecord]:
    """Walk a routes directory and collect its route records.

    Args:
        routes_dir: Path to the routes root.
        config: Filename conventions; defaults to :class:`ScanConfig`.

    Returns:
        Records in creation order.  Use
        :func:`routelist.table.sort_records` for display order.

    Raises:
        RootNotFound: *routes_dir* does not exist.
        RootNotADirectory: *routes_dir* is not a directory.
        OSError: A directory could not be listed during the walk.
    """
    root = validate_root(routes_dir)
    config = config or ScanConfig()

    records: _Records = {}
    _walk_directory(root, root, config=config, records=records)
    return list(records.values())


def _walk_directory(
    directory: Path,
    root: Path,
    *,
    config: ScanConfig,
    records: _Records,
) -> None:
    """Depth-first walk in sorted name order, filling *records*.

    Symlinks are ignored, so each directory is visited once.
    """
    for item in sorted(directory.iterdir()):
        if item.is_symlink():
            continue
        if item.is_dir():
            if config.is_skipped(item.name):
                logger.debug("Skipping %s", item)
                continue
            _walk_directory(item, root, config=config, records=records)
        elif item.is_file():
            relative = item.relative_to(root)
            if item.name in config.route_files:
                _process_route_file(item, relative, config=config, records=records)
            elif item.name in config.layout_files:
                _process_layout_file(item, relative, config=config, records=records)


def _process_route_file(
    file: Path,
    relative: Path,
    *,
    config: ScanConfig,
    records: _Records,
) -> None:
    """Record a page or endpoint file.

    ``+server.*`` files are endpoints, everything else is a page.  Only
    server files are inspected for methods; ``+page.svelte`` means GET.
    """
    route_type = RouteType.ENDPOINT if file.name.startswith("+server") else RouteType.PAGE
    if "server" in file.name:
        methods = extract_methods(file, config=config)
    else:
        methods = list(DEFAULT_METHODS)

    key = (route_path(relative), route_type)
    existing = records.get(key)
    if existing is None:
        _create(key, methods, file.name, relative, records)
        return

    # A bare GET fallback must not add to methods found in a sibling file
    if methods != list(DEFAULT_METHODS):
        existing.merge_methods(methods)
    existing.add_file(file.name)
    logger.debug("Merged %s into %s %s", relative, route_type, existing.path)


def _process_layout_file(
    file: Path,
    relative: Path,
    *,
    config: ScanConfig,
    records: _Records,
) -> None:
    """Record a layout file.  Layouts without server logic have no methods."""
    methods = extract_methods(file, config=config) if "server" in file.name else []

    key = (route_path(relative), RouteType.LAYOUT)
    existing = records.get(key)
    if existing is None:
        _create(key, methods, file.name, relative, records)
        return

    if methods:
        existing.merge_methods(methods)
    existing.add_file(file.name)
    logger.debug("Merged %s into layout %s", relative, existing.path)


def _create(
    key: tuple[str, RouteType],
    methods: list[str],
    filename: str,
    relative: Path,
    records: _Records,
) -> None:
    path, route_type = key
    record = RouteRecord(path=path, type=route_type, files=[filename], location=str(relative))
    record.merge_methods(methods)
    records[record.key] = record
    logger.debug("Found %s %s (%s)", route_type, path, relative)
