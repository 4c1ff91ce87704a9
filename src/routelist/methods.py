"""HTTP method detection for server route files.

Greps the file for ``export [async] function|const NAME`` declarations.
The file is only read as text, never executed.
"""

import logging
import re
from functools import cache
from pathlib import Path

from routelist.config import ScanConfig
from routelist.types import DEFAULT_METHODS

logger = logging.getLogger("routelist.methods")

_DEFAULT_CONFIG = ScanConfig()


@cache
def _export_pattern(http_methods: tuple[str, ...]) -> re.Pattern[str]:
    names = "|".join(re.escape(name) for name in http_methods)
    return re.compile(rf"export\s+(?:async\s+)?(?:function|const)\s+({names})\b")


def extract_methods(file: str | Path, *, config: ScanConfig | None = None) -> list[str]:
    """Return the HTTP methods exported by a server file.

    Methods are listed in order of first appearance.  A file with no
    recognised exports, or one that cannot be read or decoded, yields
    ``["GET"]``.
    """
    config = config or _DEFAULT_CONFIG
    try:
        content = Path(file).read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s, assuming GET: %s", file, exc)
        return list(DEFAULT_METHODS)

    found = _export_pattern(config.http_methods).findall(content)
    if not found:
        return list(DEFAULT_METHODS)
    return list(dict.fromkeys(found))
