import pytest

from memory_game.game import Memory_Game
from memory_game.surface import Recording_Surface


class No_Shuffle:
    """Keeps faces in dealing order: 1, 1, 2, 2, ..."""
    def shuffle(self, items):
        pass


class Scripted_Pointer:
    def __init__(self):
        self.taps = []

    def tap(self, x, y):
        self.taps.append((x, y))

    def poll_taps(self):
        taps, self.taps = self.taps, []
        return taps


@pytest.fixture
def game():
    return Memory_Game(rng=No_Shuffle())


@pytest.fixture
def surface():
    return Recording_Surface()


@pytest.fixture
def pointer():
    return Scripted_Pointer()


def tap_cell(game, row, col):
    cx, cy = game.card_at_cell(row, col).center()
    return game.handle_tap(cx, cy)


def reveal(game, row, col):
    """Tap a cell and run its flip to completion."""
    assert tap_cell(game, row, col)
    game.update(game.tweak["flip_duration"])
