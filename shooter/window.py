"""
Arcade host: window, key/mouse wiring and frame scheduling
"""

from __future__ import annotations

import logging
from typing import Sequence

import arcade

from .config import FPS
from .game import ShooterGame
from .loop import FrameLoop
from .render import Color, Point
from .state_machine import GameState
from .ui import draw_ui, element_at

logger = logging.getLogger(__name__)

# Arcade key symbols -> key codes the game understands
ARCADE_KEY_CODES = {
    arcade.key.LEFT: "ArrowLeft",
    arcade.key.RIGHT: "ArrowRight",
    arcade.key.SPACE: "Space",
    arcade.key.Z: "KeyZ",
}

START_KEYS = (arcade.key.ENTER, arcade.key.RETURN)


def arcade_request_frame(callback):
    """Ask Arcade's clock for one call next frame; the wrapper is the handle"""
    def _on_frame(delta_time: float):
        callback()

    arcade.schedule_once(_on_frame, 1 / FPS)
    return _on_frame


def arcade_cancel_frame(handle):
    arcade.unschedule(handle)


def arcade_frame_loop() -> FrameLoop:
    return FrameLoop(arcade_request_frame, arcade_cancel_frame)


class ArcadeSurface:
    """Surface over Arcade's draw calls; flips y so the field origin is top-left"""

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def _y(self, y: float) -> float:
        return self.height - y

    def clear(self, color: Color):
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, color)

    def circle(self, x: float, y: float, radius: float, color: Color):
        arcade.draw_circle_filled(x, self._y(y), radius, color)

    def ellipse(self, x: float, y: float, rx: float, ry: float, color: Color):
        arcade.draw_ellipse_filled(x, self._y(y), rx * 2, ry * 2, color)

    def polygon(self, points: Sequence[Point], color: Color):
        arcade.draw_polygon_filled([(px, self._y(py)) for px, py in points], color)

    def rect(self, x: float, y: float, w: float, h: float, color: Color):
        arcade.draw_lrbt_rectangle_filled(x, x + w, self._y(y + h), self._y(y), color)

    def text(self, text: str, x: float, y: float, color: Color,
             size: int = 18, anchor: str = "left", bold: bool = False):
        arcade.draw_text(text, x, self._y(y), color, size,
                         anchor_x=anchor, anchor_y="baseline", bold=bold)


class ShooterWindow(arcade.Window):
    """Arcade window presenting one ShooterGame"""

    def __init__(self, game: ShooterGame, title: str = "", interactive: bool = True):
        width, height = game.engine.width, game.engine.height
        super().__init__(width, height, title or game.theme.title)
        self.game = game
        # False when something else (an agent) drives the session
        self.interactive = interactive
        self.surface = ArcadeSurface(width, height)

    def on_draw(self):
        """Draw the current game state plus the menu chrome"""
        self.clear()
        self.game.render(self.surface)
        draw_ui(self.surface, self.game.ui_elements(), self.game.theme)

    def on_key_press(self, symbol: int, modifiers: int):
        if not self.interactive:
            return
        if symbol in START_KEYS and self.game.state is not GameState.PLAYING:
            self._trigger("start" if self.game.state is GameState.MENU else "restart")
            return
        code = ARCADE_KEY_CODES.get(symbol)
        if code is not None:
            self.game.on_key_down(code)

    def on_key_release(self, symbol: int, modifiers: int):
        if not self.interactive:
            return
        code = ARCADE_KEY_CODES.get(symbol)
        if code is not None:
            self.game.on_key_up(code)

    def on_deactivate(self):
        # Key-up events are lost while unfocused
        self.game.keys.release_all()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if not self.interactive:
            return
        element = element_at(self.game.ui_elements(), x, self.height - y)
        if element is not None:
            self._trigger(element.action)

    def _trigger(self, action: str):
        logger.debug("UI action %s", action)
        if action == "restart":
            self.game.on_restart()
        else:
            self.game.on_start()

    def on_close(self):
        self.game.stop()
        super().on_close()


def play(game: ShooterGame):
    """Open a window for game and run Arcade's event loop until it closes"""
    ShooterWindow(game)
    arcade.run()
