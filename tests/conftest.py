from pathlib import Path

import pytest


class FakeEnvironment:
    """Stands in for HostEnvironment with fixed directories."""

    def __init__(self, current_dir=None, search_path=(), temp_dir=None):
        self._current_dir = current_dir
        self._search_path = [Path(p) for p in search_path]
        self._temp_dir = temp_dir

    def current_dir(self):
        return self._current_dir

    def search_path(self):
        return self._search_path

    def temp_dir(self):
        return self._temp_dir


@pytest.fixture
def fake_env():
    """Returns the FakeEnvironment class so tests can build one per scenario."""
    return FakeEnvironment
