"""Shared fixtures for building routes trees on disk."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Create ``routes/`` under tmp_path from a ``{relative path: content}`` map."""

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "routes"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make
