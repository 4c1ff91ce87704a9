"""Scanner configuration.

ScanConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.  The defaults describe the SvelteKit routing
convention; override a field only to experiment with a variant.
"""

from dataclasses import dataclass
from pathlib import Path

from routelist.errors import ConfigurationError

# Relative to the current working directory when no root is given
DEFAULT_ROUTES_DIR = Path("src") / "routes"


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Filename conventions recognised by the scanner.

    ::

        config = ScanConfig(skip_prefixes=("_",))
    """

    # Files defining a page or an API endpoint at their directory's path
    route_files: frozenset[str] = frozenset(
        {"+page.svelte", "+page.server.ts", "+page.server.js", "+server.ts", "+server.js"}
    )

    # Files defining a layout wrapping child routes
    layout_files: frozenset[str] = frozenset(
        {"+layout.svelte", "+layout.server.ts", "+layout.server.js"}
    )

    # Export names treated as HTTP handlers, in declaration order
    http_methods: tuple[str, ...] = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")

    # Directory names starting with one of these prune the whole branch
    skip_prefixes: tuple[str, ...] = ("_", ".")

    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        overlap = self.route_files & self.layout_files
        if overlap:
            names = ", ".join(sorted(overlap))
            msg = f"route_files and layout_files must be disjoint (both contain: {names})"
            raise ConfigurationError(msg)
        if not self.http_methods:
            raise ConfigurationError("http_methods must not be empty")

    def is_skipped(self, directory_name: str) -> bool:
        return directory_name.startswith(self.skip_prefixes)
