from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_lines(tmp_path: Path):
    """Write lines to a file under tmp_path and return its path."""

    def _write(lines: list[str], name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
