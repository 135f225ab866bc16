"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from diff_numerics.api.compare.NumericDiffConfig import NumericDiffConfig
from diff_numerics.utils.configure_logging import reset_logging


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests running the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def diff_numerics_home(tmp_path, monkeypatch) -> Path:
    """Point DIFF_NUMERICS_HOME at a temp dir so logs never land in the real home."""
    home = tmp_path / "diff-numerics-home"
    monkeypatch.setenv("DIFF_NUMERICS_HOME", str(home))
    reset_logging()
    yield home
    reset_logging()


# =============================================================================
# Data File Helpers
# =============================================================================


@pytest.fixture
def write_data(tmp_path) -> Callable[[str, str], Path]:
    """Write a data file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def data_pair(write_data) -> Callable[..., NumericDiffConfig]:
    """Write two data files and build a NumericDiffConfig comparing them."""

    def _pair(content1: str, content2: str, **options) -> NumericDiffConfig:
        file1 = write_data("a.dat", content1)
        file2 = write_data("b.dat", content2)
        return NumericDiffConfig(file1=str(file1), file2=str(file2), **options)

    return _pair
