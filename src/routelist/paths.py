"""File path to route path translation.

Only the directory a route file lives in determines its URL; the
filename itself is discarded.  Bracketed directory names become
parameters::

    blog/[slug]/+page.svelte        -> /blog/:slug
    [[lang]]/about/+page.svelte     -> /:lang?/about
    docs/[...rest]/+page.svelte     -> /docs/:rest*
"""

import posixpath
import re
from pathlib import PurePath

# Applied in this order: the rest and optional forms also contain ``[name]``
_SEGMENT_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\[\.\.\.([A-Za-z0-9_]+)\]"), r":\1*"),
    (re.compile(r"\[\[([A-Za-z0-9_]+)\]\]"), r":\1?"),
    (re.compile(r"\[([A-Za-z0-9_]+)\]"), r":\1"),
)


def route_path(relative_path: str | PurePath) -> str:
    """Convert a path relative to the routes root into a route path.

    Args:
        relative_path: Path including the filename, e.g.
            ``"blog/[slug]/+page.svelte"``.  Either separator is accepted.

    Returns:
        The canonical route path; ``"/"`` for files at the root.
    """
    normalized = str(relative_path).replace("\\", "/")
    directory = posixpath.dirname(normalized)
    if directory in ("", "."):
        return "/"

    for pattern, replacement in _SEGMENT_REWRITES:
        directory = pattern.sub(replacement, directory)
    return "/" + directory
