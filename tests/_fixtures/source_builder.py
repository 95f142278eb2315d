"""Helper utilities for laying out source files in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping


class SourceTreeBuilder:
    """Writes throwaway source files so base-class lookups hit the disk."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "src"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries below the source root."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")

    def source(self, name: str) -> str:
        """Return the absolute path of a source file, creating it if needed."""
        path = self.root / name
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("// source\n", encoding="utf-8")
        return str(path)

    def path(self, relative: str = "") -> Path:
        return self.root / relative if relative else self.root


__all__ = ["SourceTreeBuilder"]
