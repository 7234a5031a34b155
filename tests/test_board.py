import random
from collections import Counter

import pytest

from memory_game.board import (
    cell_position, create_cards, create_face_ids, layout_cards, shuffle_faces, surface_size,
)
from memory_game.config import tweak


def test_every_face_appears_twice():
    cards = create_cards(3, 4, random.Random(7))
    counts = Counter(card.face_id for card in cards)
    assert len(cards) == 12
    assert sorted(counts) == [1, 2, 3, 4, 5, 6]
    assert set(counts.values()) == {2}


def test_odd_grid_is_rejected():
    with pytest.raises(ValueError):
        create_cards(3, 3)
    with pytest.raises(ValueError):
        create_cards(0, 4)


def test_layout_rejects_unpaired_faces():
    with pytest.raises(ValueError):
        layout_cards([1, 1, 2, 3], 2, 2)
    with pytest.raises(ValueError):
        layout_cards([1, 1], 2, 2)


def test_layout_is_row_major():
    cards = layout_cards(create_face_ids(6), 3, 4)
    assert [c.face_id for c in cards] == [1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6]
    assert (cards[0].x, cards[0].y) == (10, 10)
    assert (cards[1].x, cards[1].y) == (120, 10)
    assert (cards[3].x, cards[3].y) == (10, 170)
    assert (cards[11].x, cards[11].y) == cell_position(3, 2)
    assert all(not c.revealed and c.flip_progress == 0 for c in cards)


def test_surface_size_follows_grid():
    assert surface_size(3, 4) == (340, 650)
    narrow = {**tweak, "card_width": 50, "spacing": 5}
    assert surface_size(2, 2, narrow)[0] == 2 * 55 + 5


def test_shuffle_uses_injected_source():
    faces = create_face_ids(6)
    first = shuffle_faces(faces, random.Random(42))
    second = shuffle_faces(faces, random.Random(42))
    assert first == second
    assert sorted(first) == faces
    # Input list is left alone
    assert faces == [1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6]
