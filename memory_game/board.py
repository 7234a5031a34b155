from __future__ import annotations
import random
from collections import Counter
from memory_game.models import Card
from memory_game.config import tweak as default_tweak


def create_face_ids(pair_count: int) -> list[int]:
    """Two of each face identity, numbered from 1."""
    face_ids = []
    for face_id in range(1, pair_count + 1):
        face_ids += [face_id, face_id]
    return face_ids


def check_face_ids(face_ids: list[int]) -> None:
    counts = Counter(face_ids)
    for face_id, count in counts.items():
        if count != 2:
            raise ValueError(f"face {face_id} appears {count} times, expected 2")


def check_grid(columns: int, rows: int) -> None:
    if columns <= 0 or rows <= 0:
        raise ValueError("columns/rows must be positive")
    if (columns * rows) % 2 != 0:
        raise ValueError(f"a {columns}x{rows} grid has an odd number of cells")


def shuffle_faces(face_ids: list[int], rng=None) -> list[int]:
    """Return a shuffled copy. rng only needs a shuffle() method."""
    shuffled = list(face_ids)
    (rng or random).shuffle(shuffled)
    return shuffled


def cell_position(row: int, col: int, tweak: dict = default_tweak) -> tuple[float, float]:
    spacing = tweak["spacing"]
    x = col * (tweak["card_width"] + spacing) + spacing
    y = row * (tweak["card_height"] + spacing) + spacing
    return (x, y)


def surface_size(columns: int, rows: int, tweak: dict = default_tweak) -> tuple[int, int]:
    spacing = tweak["spacing"]
    width = columns * (tweak["card_width"] + spacing) + spacing
    height = rows * (tweak["card_height"] + spacing) + spacing
    return (width, height)


def layout_cards(face_ids: list[int], columns: int, rows: int, tweak: dict = default_tweak) -> list[Card]:
    """Place one card per face id on the grid in row-major order."""
    check_grid(columns, rows)
    if len(face_ids) != columns * rows:
        raise ValueError("face_ids length must equal columns*rows")
    check_face_ids(face_ids)

    cards = []
    for row in range(rows):
        for col in range(columns):
            x, y = cell_position(row, col, tweak)
            cards.append(Card(
                x=x,
                y=y,
                width=tweak["card_width"],
                height=tweak["card_height"],
                face_id=face_ids[row * columns + col],
            ))
    return cards


def create_cards(columns: int, rows: int, rng=None, tweak: dict = default_tweak) -> list[Card]:
    """Deal a freshly shuffled round."""
    check_grid(columns, rows)
    face_ids = shuffle_faces(create_face_ids(columns * rows // 2), rng)
    return layout_cards(face_ids, columns, rows, tweak)
