import math

import pytest

from memory_game.models import Card
from memory_game.rendering import draw_card, face_scale, flatten_curve, heart_path
from memory_game.surface import Recording_Surface


def make_card(**kwargs):
    return Card(x=10, y=10, width=100, height=150, face_id=1, **kwargs)


def test_boundary_counts_as_inside():
    card = make_card()
    assert card.contains(10, 10)
    assert card.contains(110, 160)
    assert card.contains(10, 160)
    assert card.contains(60, 85)


@pytest.mark.parametrize("point", [(9, 50), (111, 50), (50, 9), (50, 161)])
def test_one_unit_outside_is_outside(point):
    assert not make_card().contains(*point)


def test_hit_test_ignores_flip_progress():
    card = make_card(flip_progress=math.pi / 2)
    assert card.contains(12, 12)


def test_face_scale():
    assert face_scale(0) == 1
    assert face_scale(math.pi) == pytest.approx(1)
    assert face_scale(math.pi / 3) == pytest.approx(0.5)
    assert face_scale(2 * math.pi / 3) == pytest.approx(0.5)
    assert face_scale(math.pi / 2) == pytest.approx(0, abs=1e-9)


def test_back_face_at_rest():
    surface = Recording_Surface()
    card = make_card()
    draw_card(surface, card)

    names = [c.name for c in surface.commands]
    assert names == [
        "push_transform", "translate", "scale", "translate",
        "fill_rounded_rect", "fill_curve", "pop_transform",
    ]
    assert surface.named("translate")[0].args == (60, 85)
    assert surface.named("scale")[0].args == (1, 1)
    assert surface.named("fill_rounded_rect")[0].args[:4] == (10, 10, 100, 150)
    assert surface.depth == 0


def test_front_face_uses_image():
    surface = Recording_Surface()
    card = make_card(revealed=True, flip_progress=math.pi)
    draw_card(surface, card, image="face-1")

    blit = surface.named("draw_image")
    assert len(blit) == 1
    assert blit[0].args == ("face-1", 10, 10, 100, 150)
    assert surface.named("scale")[0].args[0] == pytest.approx(1)
    assert not surface.named("fill_curve")


def test_missing_image_draws_blank_front():
    surface = Recording_Surface()
    draw_card(surface, make_card(flip_progress=math.pi))
    assert not surface.named("draw_image")
    assert len(surface.named("fill_rounded_rect")) == 1


def test_render_does_not_touch_card():
    surface = Recording_Surface()
    card = make_card()
    draw_card(surface, card, flip_progress=2.0)
    assert card.flip_progress == 0
    assert not card.revealed
    assert surface.named("scale")[0].args[0] == pytest.approx(-math.cos(2.0))


def test_heart_is_closed_and_centered():
    start, segments = heart_path(60, 60, 50)
    assert segments[-1][-1] == start
    points = flatten_curve(start, segments)
    xs = [p[0] for p in points]
    assert min(xs) == pytest.approx(35, abs=1)
    assert max(xs) == pytest.approx(85, abs=1)
    assert max(p[1] for p in points) == pytest.approx(110)
