"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate each CLI run from real TEMPCONV_* settings and logging config.

    The root command reconfigures the root logger against the runner's
    stderr, so the previous handlers and level are put back afterwards.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("TEMPCONV_SOURCE_UNIT", "TEMPCONV_TARGET_UNIT", "TEMPCONV_OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
