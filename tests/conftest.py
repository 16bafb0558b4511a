import json
from pathlib import Path

import pytest

from fukn_weather.corpus import build_corpus, load_corpus
from fukn_weather.config import DEFAULT_DESCRIPTIONS_PATH


class FixedRandom:
    """Always returns the same offset from the low end of the range."""

    def __init__(self, offset: int = 0):
        self.offset = offset
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return min(a + self.offset, b)


@pytest.fixture
def make_random():
    """Build a stub random source that always picks the given offset."""
    return FixedRandom


@pytest.fixture
def fixed_random(make_random):
    return make_random()


@pytest.fixture(scope="session")
def bundled_corpus():
    return load_corpus(DEFAULT_DESCRIPTIONS_PATH)


@pytest.fixture
def small_corpus():
    return build_corpus({
        "PG": {"70_74": ["nice one", "nice two", "nice three"]},
        "PG-13": {"70_74": ["damn nice"], "-5_-1": ["cold as heck"]},
        "X": {"-5_-1": ["negative bucket"], "0_4": ["zero bucket"]},
        "G": {"70_74": []},
    })


@pytest.fixture
def write_corpus(tmp_path: Path):
    """Write a descriptions file and return its path."""
    def _write(data, name: str = "descriptions.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
