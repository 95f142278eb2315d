from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from defgen.config import EmitterConfig
from tests._fixtures.source_builder import SourceTreeBuilder


@pytest.fixture
def source_tree(tmp_path: Path) -> SourceTreeBuilder:
    """Provide a source directory rooted at the pytest tmp_path."""
    return SourceTreeBuilder(tmp_path)


@pytest.fixture
def export_config() -> EmitterConfig:
    """Export-style output with LF endings and four-space indentation."""
    return EmitterConfig(declare_module=False, eol="lf")


@pytest.fixture
def module_config() -> EmitterConfig:
    return EmitterConfig(declare_module=True, eol="lf")


@pytest.fixture(autouse=True)
def _reset_defgen_logger() -> Iterator[None]:
    # CLI runs install handlers and disable propagation; undo that for caplog.
    yield
    logger = logging.getLogger("defgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
