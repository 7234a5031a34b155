from __future__ import annotations
import math
from memory_game.models import Card, Board_State
from memory_game.config import tweak as default_tweak
from memory_game.surface import Draw_Surface, Point, Bezier_Segment


def heart_path(x: float, y: float, size: float) -> tuple[Point, list[Bezier_Segment]]:
    """Closed heart outline with its top notch at (x, y + size / 4) and tip at (x, y + size)."""
    half = size / 2
    start = (x, y + size / 4)
    segments = [
        ((x, y), (x - half, y), (x - half, y + size / 4)),
        ((x - half, y + half), (x, y + size * 3 / 4), (x, y + size)),
        ((x, y + size * 3 / 4), (x + half, y + half), (x + half, y + size / 4)),
        ((x + half, y), (x, y), (x, y + size / 4)),
    ]
    return start, segments


def flatten_curve(start: Point, segments: list[Bezier_Segment], steps: int = 12) -> list[Point]:
    """Sample cubic Bezier segments into a polygon (start point excluded at the end)."""
    points = [start]
    p0 = start
    for c1, c2, p3 in segments:
        for i in range(1, steps + 1):
            t = i / steps
            u = 1 - t
            px = u**3 * p0[0] + 3 * u**2 * t * c1[0] + 3 * u * t**2 * c2[0] + t**3 * p3[0]
            py = u**3 * p0[1] + 3 * u**2 * t * c1[1] + 3 * u * t**2 * c2[1] + t**3 * p3[1]
            points.append((px, py))
        p0 = p3
    if points[-1] == points[0]:
        points.pop()
    return points


def face_scale(flip_progress: float) -> float:
    """Horizontal scale of the visible face; never negative."""
    if flip_progress <= math.pi / 2:
        return math.cos(flip_progress)
    # Past edge-on the front shows; flipping the sign keeps it from being mirrored
    return -math.cos(flip_progress)


def draw_card_back(surface: Draw_Surface, card: Card, tweak: dict = default_tweak) -> None:
    surface.fill_rounded_rect(
        card.x, card.y, card.width, card.height,
        tweak["card_corner_radius"], tweak["card_back"]
    )
    start, segments = heart_path(card.x + card.width / 2, card.y + card.height / 3, card.width / 2)
    surface.fill_curve(start, segments, tweak["glyph_color"])


def draw_card_front(surface: Draw_Surface, card: Card, image=None, tweak: dict = default_tweak) -> None:
    if image is None:
        # Blank card rather than aborting the round
        surface.fill_rounded_rect(
            card.x, card.y, card.width, card.height,
            tweak["card_corner_radius"], tweak["card_front"]
        )
        return
    surface.draw_image(image, card.x, card.y, card.width, card.height)


def draw_card(surface: Draw_Surface, card: Card, image=None, flip_progress: float | None = None,
              tweak: dict = default_tweak) -> None:
    """Draw a card squeezed around its centre. Does not modify the card."""
    angle = card.flip_progress if flip_progress is None else flip_progress
    cx, cy = card.center()

    surface.push_transform()
    surface.translate(cx, cy)
    surface.scale(face_scale(angle), 1)
    surface.translate(-cx, -cy)
    if angle <= math.pi / 2:
        draw_card_back(surface, card, tweak)
    else:
        draw_card_front(surface, card, image, tweak)
    surface.pop_transform()


def draw_board(surface: Draw_Surface, state: Board_State, images=None, tweak: dict = default_tweak) -> None:
    surface.clear(tweak["background_color"])
    for card in state.cards:
        image = None
        if images is not None and card.flip_progress > math.pi / 2:
            image = images(card.face_id)
        draw_card(surface, card, image, tweak=tweak)
