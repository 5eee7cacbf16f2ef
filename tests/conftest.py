import itertools

import pytest


class CountingSource:
    """Deterministic stand-in for the system RNG: yields 0, 1, 2, ... forever."""

    def __init__(self, start=0):
        self._counter = itertools.count(start)
        self.calls = 0

    def randbits32(self):
        self.calls += 1
        return next(self._counter) & 0xFFFFFFFF


class FixedSource:
    """Always returns the same word."""

    def __init__(self, value):
        self.value = value

    def randbits32(self):
        return self.value


@pytest.fixture
def counting_source():
    return CountingSource()


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    # keep tests away from the real preferences file
    d = tmp_path / "strongpass-config"
    monkeypatch.setenv("STRONGPASS_CONFIG_DIR", str(d))
    return d


@pytest.fixture
def fixed_source():
    return FixedSource
