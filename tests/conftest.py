"""Pytest fixtures for Ellipsize tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

from ellipsize.debug_log import clear_log_buffer, teardown_debug_logging
from tests.helpers.measurers import CharMeasurer

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="ellipsize-tests-"))
os.environ["ELLIPSIZE_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

if TYPE_CHECKING:
    from collections.abc import Generator


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def measurer() -> CharMeasurer:
    """One unit per character, ellipsis one unit wide."""
    return CharMeasurer()


@pytest.fixture
def config_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the config directory at a fresh temporary folder."""
    path = tmp_path / "config"
    monkeypatch.setenv("ELLIPSIZE_CONFIG_DIR", str(path))
    return path


@pytest.fixture(autouse=True)
def _reset_debug_log() -> Generator[None, None, None]:
    """Keep the debug buffer and handler from leaking between tests."""
    clear_log_buffer()
    yield
    teardown_debug_logging()
    clear_log_buffer()
