from shooter.state_machine import GameState
from shooter.themes import SPACE_THEME
from shooter.ui import draw_ui, element_at, project_ui

from conftest import RecordingSurface


def test_menu_elements():
    elements = project_ui(GameState.MENU, 0, SPACE_THEME)
    assert [e.id for e in elements] == ["gameTitle", "startBtn"]
    assert elements[0].text == "Space Shooter"
    assert elements[1].action == "start"


def test_playing_shows_nothing():
    assert project_ui(GameState.PLAYING, 40, SPACE_THEME) == []


def test_gameover_elements():
    elements = project_ui(GameState.GAMEOVER, 70, SPACE_THEME)
    by_id = {e.id: e for e in elements}
    assert by_id["gameOverText"].text == "GAME OVER"
    assert by_id["scoreText"].text == "Score: 70"
    assert by_id["restartBtn"].action == "restart"


def test_element_at_hits_buttons_only():
    elements = project_ui(GameState.GAMEOVER, 0, SPACE_THEME)
    button = next(e for e in elements if e.kind == "button")
    assert element_at(elements, button.x, button.y) is button
    assert element_at(elements, button.x + button.width, button.y) is None
    banner = next(e for e in elements if e.kind == "banner")
    assert element_at(elements, banner.x, banner.y) is None


def test_draw_ui():
    surface = RecordingSurface()
    draw_ui(surface, project_ui(GameState.GAMEOVER, 5, SPACE_THEME), SPACE_THEME)
    assert surface.texts() == ["GAME OVER", "Score: 5", "Restart"]
    assert surface.count("rect") == 1
