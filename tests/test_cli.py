from typer.testing import CliRunner

from memory_game.main import app
from memory_game.ui import Button, play_again_button

runner = CliRunner()


def test_odd_grid_is_a_bad_parameter():
    # Fails before any window is opened
    result = runner.invoke(app, ["--columns", "3", "--rows", "3"])
    assert result.exit_code == 2
    assert "odd" in result.output


def test_non_positive_grid_is_a_bad_parameter():
    result = runner.invoke(app, ["--columns", "0", "--rows", "4"])
    assert result.exit_code == 2


def test_button_edges():
    button = Button(x=10, y=20, width=100, height=40, text="Play again")
    assert button.pressed(10, 20, True)
    assert button.pressed(110, 60, True)
    assert not button.pressed(9, 30, True)
    assert not button.pressed(111, 30, True)
    assert not button.pressed(50, 61, True)
    assert not button.pressed(50, 40, False)


def test_play_again_button_is_centered():
    button = play_again_button(340, 650)
    assert button.x + button.width / 2 == 170
    assert button.y > 650 // 2
