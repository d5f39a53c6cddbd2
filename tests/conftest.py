"""Shared pytest configuration and fixtures for all tests."""

import pytest

from linediff.api.diff.LineRecord import LineRecord


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single api module")
    config.addinivalue_line("markers", "integration: tests that run the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def linediff_home(tmp_path, monkeypatch):
    """Point LINEDIFF_HOME at a per-test directory so no test touches ~/.linediff."""
    home = tmp_path / "linediff_home"
    home.mkdir()
    monkeypatch.setenv("LINEDIFF_HOME", str(home))
    return home


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run


@pytest.fixture
def make_records():
    """Build line records whose key is the text itself."""

    def _make(*texts: str) -> list[LineRecord]:
        return [LineRecord(raw=text, key=text) for text in texts]

    return _make
