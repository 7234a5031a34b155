from __future__ import annotations
import random
from typing import Annotated

import typer
from pyray import *

from memory_game.config import tweak
from memory_game.board import check_grid, surface_size
from memory_game.game import Memory_Game
from memory_game.raylib_surface import Raylib_Surface, Raylib_Pointer, image_resolver, unload_textures
from memory_game.ui import play_again_button, draw_victory_banner, draw_last_message

app = typer.Typer()


def run(game: Memory_Game, width: int, height: int) -> None:
    init_window(width, height, game.tweak["window_title"])
    set_target_fps(game.tweak["target_fps"])
    button = play_again_button(width, height, game.tweak)

    while not window_should_close():
        dt = get_frame_time() * 1000
        click = is_mouse_button_pressed(MouseButton.MOUSE_BUTTON_LEFT)
        mx, my = get_mouse_x(), get_mouse_y()
        restart = (game.victory_shown and button.pressed(mx, my, click)) or is_key_pressed(KeyboardKey.KEY_R)

        begin_drawing()
        if restart:
            # The click that hit the button must not also reveal a card
            game.reset()
            game.draw()
        else:
            game.frame(dt)
        draw_last_message(game.messages, game.tweak)
        if game.victory_shown:
            draw_victory_banner(button, game.tweak)
        end_drawing()

    # Cleanup
    unload_textures()
    close_window()


@app.command()
def play(
    columns: Annotated[int, typer.Option("-c", "--columns", help="Cards per row")] = tweak["grid_columns"],
    rows: Annotated[int, typer.Option("-r", "--rows", help="Number of rows")] = tweak["grid_rows"],
    seed: Annotated[int | None, typer.Option("-s", "--seed", help="Seed for the shuffle")] = None,
    assets: Annotated[str, typer.Option("-a", "--assets", help="Directory holding <face_id>.jpg images")] = tweak["assets_dir"],
):
    try:
        check_grid(columns, rows)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if seed is None:
        seed = random.randint(0, 2**32 - 1)
    settings = {"grid_columns": columns, "grid_rows": rows, "assets_dir": assets}
    width, height = surface_size(columns, rows, tweak)

    game = Memory_Game(
        surface=Raylib_Surface(),
        pointer=Raylib_Pointer(),
        images=image_resolver(assets, tweak),
        on_victory=lambda: typer.echo("Round complete!"),
        rng=random.Random(seed),
        settings=settings,
    )
    typer.echo(f"{columns}x{rows} board ({game.total_pairs} pairs), window {width}x{height}. Seed: {seed}")
    run(game, width, height)


if __name__ == "__main__":
    app()
