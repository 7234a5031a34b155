from __future__ import annotations
from dataclasses import dataclass

from pyray import *

from memory_game.config import tweak as default_tweak
from memory_game.raylib_surface import color_from_tuple


def point_in_rect(mx: float, my: float, x: float, y: float, w: float, h: float) -> bool:
    return x <= mx <= x + w and y <= my <= y + h


@dataclass
class Button:
    x: int
    y: int
    width: int
    height: int
    text: str = ""

    def pressed(self, mx, my, click) -> bool:
        if not click:
            return False
        return point_in_rect(mx, my, self.x, self.y, self.width, self.height)


def play_again_button(screen_width: int, screen_height: int, tweak: dict = default_tweak) -> Button:
    w = tweak["button_width"]
    h = tweak["button_height"]
    return Button(
        x=(screen_width - w) // 2,
        y=screen_height // 2 + tweak["banner_font_size"],
        width=w,
        height=h,
        text="Play again",
    )


def draw_button(button: Button, tweak: dict = default_tweak) -> None:
    mx, my = get_mouse_x(), get_mouse_y()
    hovered = point_in_rect(mx, my, button.x, button.y, button.width, button.height)
    color_key = "button_hover_color" if hovered else "button_color"
    draw_rectangle_rounded(
        Rectangle(button.x, button.y, button.width, button.height), 0.3, 8,
        color_from_tuple(tweak[color_key])
    )
    text_width = measure_text(button.text, 20)
    text_x = button.x + (button.width - text_width) // 2
    text_y = button.y + (button.height - 20) // 2
    draw_text(button.text, text_x, text_y, 20, color_from_tuple(tweak["button_text_color"]))


def draw_victory_banner(button: Button, tweak: dict = default_tweak) -> None:
    w_width = get_screen_width()
    w_height = get_screen_height()

    # Semi-transparent overlay
    draw_rectangle(0, 0, w_width, w_height, color_from_tuple(tweak["banner_color"]))

    size = tweak["banner_font_size"]
    text = "You win!"
    text_w = measure_text(text, size)
    draw_text(text, (w_width - text_w) // 2, w_height // 2 - size, size,
              color_from_tuple(tweak["banner_text_color"]))
    draw_button(button, tweak)


def draw_last_message(messages: list[str], tweak: dict = default_tweak) -> None:
    if not messages:
        return
    size = tweak["message_font_size"]
    draw_text(messages[-1], tweak["spacing"], get_screen_height() - size - 1, size,
              color_from_tuple(tweak["message_color"]))
