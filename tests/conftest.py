"""Ensure the monty_sim package is importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from monty_sim.prng import Prng  # noqa: E402


class ScriptedRng(Prng):
    """Engine stand-in that replays fixed 64-bit words."""

    def __init__(self, words):
        self.words = list(words)
        self.calls = 0

    def next_u64(self) -> int:
        word = self.words[self.calls]
        self.calls += 1
        return word


@pytest.fixture
def rand32_script():
    """Build an engine whose successive ``rand32()`` draws are the given words."""

    def factory(*draws):
        return ScriptedRng(x << 32 for x in draws)

    return factory


@pytest.fixture
def word_script():
    """Build an engine that returns the given raw 64-bit words in order."""

    return ScriptedRng
