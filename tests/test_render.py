import copy

from shooter.entities import Bullet
from shooter.game import ShooterGame
from shooter.render import render
from shooter.state_machine import GameState
from shooter.themes import SPACE_THEME, TROPICAL_THEME

from conftest import make_enemy


def snapshot(engine):
    return (copy.deepcopy(engine.player), copy.deepcopy(engine.bullets),
            copy.deepcopy(engine.enemies), engine.score, engine.lives,
            engine.spawn_timer, engine.state)


def test_menu_frame(engine, surface):
    engine.machine.state = GameState.MENU
    render(engine, surface, SPACE_THEME)
    texts = surface.texts()
    assert "SPACE SHOOTER" in texts
    assert "Arrow keys: Move" in texts
    assert "Space/Z: Shoot" in texts
    assert "Click Start to Play!" in texts
    assert surface.calls[0][0] == "clear"


def test_playing_frame_has_hud(engine, surface):
    engine.score = 30
    engine.lives = 2
    engine.bullets = [Bullet(100, 100)]
    engine.enemies = [make_enemy(200, 200)]
    render(engine, surface, SPACE_THEME)
    texts = surface.texts()
    assert "Score: 30" in texts
    assert "Lives: 2" in texts
    assert "SPACE SHOOTER" not in texts
    assert surface.count("polygon") == 2  # player glow + hull


def test_gameover_hides_player(engine, surface):
    engine.machine.state = GameState.GAMEOVER
    render(engine, surface, SPACE_THEME)
    assert surface.count("polygon") == 0


def test_render_does_not_mutate(engine, surface):
    engine.bullets = [Bullet(100, 100)]
    engine.enemies = [make_enemy(200, 200, variant="saucer")]
    before = snapshot(engine)
    render(engine, surface, SPACE_THEME)
    render(engine, surface, TROPICAL_THEME)
    assert snapshot(engine) == before


def test_each_enemy_drawn(engine, surface):
    engine.enemies = [make_enemy(100, 100, variant="crab"),
                      make_enemy(300, 100, variant="coconut")]
    render(engine, surface, TROPICAL_THEME)
    crab_calls = [c for c in surface.calls if c[0] == "ellipse" and c[1][:2] == (100, 100)]
    coconut_calls = [c for c in surface.calls if c[0] == "circle" and c[1][:2] == (300, 100)]
    assert crab_calls and coconut_calls


def test_game_render_uses_its_theme(surface):
    game = ShooterGame(theme=TROPICAL_THEME)
    game.render(surface)
    assert "TROPICAL SHOOTER" in surface.texts()
