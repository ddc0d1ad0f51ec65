import os

# the shared loggers are built at import time, keep them quiet under test
os.environ["ENV"] = "test"

import pytest

from card_components.card_utils.card import Card


@pytest.fixture
def deck_path(tmp_path):
    return tmp_path / "cards.json"


@pytest.fixture
def sample_cards():
    return [
        Card(title="Warmup", text="%PLAYER% drinks once", turns=0),
        Card(text="Everyone left of %SELF% swaps seats"),
        Card(
            title="Rain",
            text="Nobody may speak for %TURNS% turns",
            background="https://example.com/rain.webp",
            turns=3,
        ),
    ]


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of lines."""
    def _feed(*lines):
        it = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return _feed
