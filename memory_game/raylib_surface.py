from __future__ import annotations
import math
import os
from pyray import *
from memory_game.config import tweak as default_tweak
from memory_game.rendering import flatten_curve

# Texture cache to avoid reloading images
_texture_cache: dict[str, Texture2D] = {}


def color_from_tuple(c: tuple) -> Color:
    """Convert RGBA tuple to raylib Color."""
    return Color(c[0], c[1], c[2], c[3])


def get_texture(image_path: str) -> Texture2D | None:
    """Load and cache a texture from disk."""
    if image_path in _texture_cache:
        return _texture_cache[image_path]

    if not file_exists(image_path.encode()):
        return None

    texture = load_texture(image_path.encode())
    _texture_cache[image_path] = texture
    return texture


def unload_textures() -> None:
    for texture in _texture_cache.values():
        unload_texture(texture)
    _texture_cache.clear()


def image_resolver(assets_dir: str, tweak: dict = default_tweak):
    """Map a face id to assets/<face_id>.jpg, or None when the file is missing."""
    def resolve(face_id: int) -> Texture2D | None:
        return get_texture(os.path.join(assets_dir, f"{face_id}{tweak['image_extension']}"))
    return resolve


class Raylib_Surface:
    """Draw_Surface on top of the rlgl matrix stack. Call between begin_drawing/end_drawing."""

    def clear(self, color) -> None:
        clear_background(color_from_tuple(color))

    def push_transform(self) -> None:
        rl_push_matrix()

    def pop_transform(self) -> None:
        rl_pop_matrix()

    def translate(self, x, y) -> None:
        rl_translatef(x, y, 0)

    def rotate(self, angle) -> None:
        rl_rotatef(math.degrees(angle), 0, 0, 1)

    def scale(self, sx, sy) -> None:
        rl_scalef(sx, sy, 1)

    def fill_rounded_rect(self, x, y, w, h, radius, color) -> None:
        draw_rectangle_rounded(
            Rectangle(x, y, w, h), radius / min(w, h), 8,
            color_from_tuple(color)
        )

    def fill_curve(self, start, segments, color) -> None:
        points = flatten_curve(start, segments)
        cx = sum(p[0] for p in points) / len(points)
        cy = sum(p[1] for p in points) / len(points)
        center = Vector2(cx, cy)
        c = color_from_tuple(color)

        # Fan winding depends on the outline direction
        rl_disable_backface_culling()
        for i in range(len(points)):
            a = points[i]
            b = points[(i + 1) % len(points)]
            draw_triangle(center, Vector2(a[0], a[1]), Vector2(b[0], b[1]), c)
        rl_draw_render_batch_active()
        rl_enable_backface_culling()

    def draw_image(self, image, x, y, w, h) -> None:
        source_rect = Rectangle(0, 0, image.width, image.height)
        dest_rect = Rectangle(x, y, w, h)
        draw_texture_pro(image, source_rect, dest_rect, Vector2(0, 0), 0, WHITE)


class Raylib_Pointer:
    """Mouse clicks and touch taps, in window coordinates."""

    def poll_taps(self) -> list[tuple[float, float]]:
        if is_mouse_button_pressed(MouseButton.MOUSE_BUTTON_LEFT):
            return [(get_mouse_x(), get_mouse_y())]
        if get_touch_point_count() > 0 and is_gesture_detected(Gesture.GESTURE_TAP):
            pos = get_touch_position(0)
            return [(pos.x, pos.y)]
        return []
