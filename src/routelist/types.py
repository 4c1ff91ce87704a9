"""Data model for a scanned routes tree.

A :class:`RouteRecord` is created the first time a qualifying file maps
to a new ``(path, type)`` pair and is updated in place by later files in
the same directory.  Nothing mutates records once the scan returns.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

# Methods assumed when a server file exports none we recognise
DEFAULT_METHODS: tuple[str, ...] = ("GET",)


class RouteType(StrEnum):
    """Structural kind of a record.  Fixed once the record exists."""

    PAGE = "page"
    ENDPOINT = "endpoint"
    LAYOUT = "layout"

    @property
    def sort_rank(self) -> int:
        """Display precedence: pages, then endpoints, then layouts."""
        return _SORT_RANK[self]


_SORT_RANK = {RouteType.PAGE: 0, RouteType.ENDPOINT: 1, RouteType.LAYOUT: 2}


@dataclass(slots=True)
class RouteRecord:
    """One logical route (or layout) and the files backing it.

    Attributes:
        path: Canonical URL path (e.g., ``/blog/:slug``).
        type: Page, endpoint, or layout.
        methods: HTTP methods in first-seen order, no duplicates.
            Empty only for layouts without server logic.
        files: Contributing filenames in discovery order.
        location: Relative path of the file that created the record.
    """

    path: str
    type: RouteType
    methods: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    location: str = ""

    @property
    def key(self) -> tuple[str, RouteType]:
        return (self.path, self.type)

    def add_file(self, name: str) -> None:
        self.files.append(name)

    def merge_methods(self, methods: Iterable[str]) -> None:
        """Union *methods* into this record, keeping first-seen order."""
        for method in methods:
            if method not in self.methods:
                self.methods.append(method)
