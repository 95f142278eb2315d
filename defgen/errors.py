"""User-facing errors raised by strict-mode generation."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence


class DefinitionError(RuntimeError):
    """Raised when a definition file cannot be generated."""


class MissingBaseClassError(DefinitionError):
    """The source file expected for a base class does not exist."""

    def __init__(self, base_name: str, expected_path: Path) -> None:
        super().__init__(
            f"Base class '{base_name}' cannot be resolved: expected source file does not exist: {expected_path}"
        )
        self.base_name = base_name
        self.expected_path = expected_path


class MissingImportError(DefinitionError):
    """Referenced types have no known source file and are not declared here."""

    def __init__(self, names: Sequence[str]) -> None:
        super().__init__(
            f"Needed imports missing: {', '.join(names)}. "
            "Make sure file names match contained class/enum name."
        )
        self.names: List[str] = list(names)


__all__ = ["DefinitionError", "MissingBaseClassError", "MissingImportError"]
