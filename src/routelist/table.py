"""Text report for scanned routes.

Renders records as a box-drawn table followed by route and layout
counts.  Sorting is pages, then endpoints, then layouts, each group
ordered by path under the active collation locale.
"""

import locale
from collections.abc import Iterable, Sequence

from routelist.types import RouteRecord, RouteType

# (header, minimum width) per column
_COLUMNS: tuple[tuple[str, int], ...] = (
    ("Methods", 10),
    ("Path", 10),
    ("Type", 8),
    ("Files", 15),
)


def sort_records(records: Iterable[RouteRecord]) -> list[RouteRecord]:
    """Return *records* in display order (stable)."""
    return sorted(records, key=lambda r: (r.type.sort_rank, locale.strxfrm(r.path)))


def _cells(record: RouteRecord) -> tuple[str, str, str, str]:
    methods = "|".join(record.methods) if record.methods else "-"
    return (methods, record.path, str(record.type), ", ".join(record.files))


def _border(left: str, middle: str, right: str, widths: Sequence[int]) -> str:
    return left + "─" + f"─{middle}─".join("─" * w for w in widths) + "─" + right


def _row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return "│ " + " │ ".join(c.ljust(w) for c, w in zip(cells, widths, strict=True)) + " │"


def render_summary(records: Sequence[RouteRecord]) -> str:
    """Two count lines: non-layout records and layouts."""
    layouts = sum(1 for r in records if r.type is RouteType.LAYOUT)
    return f"Total routes: {len(records) - layouts}\nTotal layouts: {layouts}"


def render_table(records: Iterable[RouteRecord]) -> str:
    """Render records as an aligned table plus summary.

    Each column is as wide as its longest cell, but never narrower than
    its minimum (10, 10, 8 and 15 characters).
    """
    ordered = sort_records(records)
    rows = [_cells(r) for r in ordered]
    widths = [
        max([minimum, *(len(row[i]) for row in rows)])
        for i, (_, minimum) in enumerate(_COLUMNS)
    ]

    lines = [
        "",
        _border("┌", "┬", "┐", widths),
        _row([header for header, _ in _COLUMNS], widths),
        _border("├", "┼", "┤", widths),
    ]
    lines.extend(_row(row, widths) for row in rows)
    lines.append(_border("└", "┴", "┘", widths))
    lines.append("")
    lines.append(render_summary(ordered))
    lines.append("")
    return "\n".join(lines)
