"""
Frame rendering onto an abstract drawing surface
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, Tuple

from .state_machine import GameState

if TYPE_CHECKING:
    from .engine import SimulationEngine
    from .entities import Player
    from .themes import Theme

Color = Tuple[int, ...]  # RGB or RGBA
Point = Tuple[float, float]


class Surface(Protocol):
    """
    Drawing target in field coordinates: origin top-left, y grows downward.
    Text y is the baseline; anchor is "left", "center" or "right".
    """

    def clear(self, color: Color) -> None: ...

    def circle(self, x: float, y: float, radius: float, color: Color) -> None: ...

    def ellipse(self, x: float, y: float, rx: float, ry: float, color: Color) -> None: ...

    def polygon(self, points: Sequence[Point], color: Color) -> None: ...

    def rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def text(self, text: str, x: float, y: float, color: Color,
             size: int = 18, anchor: str = "left", bold: bool = False) -> None: ...


def render(engine: "SimulationEngine", surface: Surface, theme: "Theme"):
    """Draw the current snapshot of engine; reads state, never writes it"""
    palette = theme.palette
    width, height = engine.width, engine.height

    surface.clear(palette["clear"])
    theme.draw_background(surface, width, height)

    if engine.state is not GameState.GAMEOVER:
        draw_player(surface, engine.player, theme)

    for b in engine.bullets:
        surface.circle(b.x, b.y, b.radius + 3, palette["bullet_glow"])
        surface.circle(b.x, b.y, b.radius, palette["bullet"])

    for e in engine.enemies:
        theme.draw_enemy(surface, e)

    # HUD
    surface.text(f"Score: {engine.score}", 16, 28, palette["hud"], 18, "left", bold=True)
    surface.text(f"Lives: {engine.lives}", width - 16, 28, palette["hud"], 18, "right", bold=True)

    if engine.state is GameState.MENU:
        draw_menu_overlay(surface, width, height, theme)


def draw_player(surface: Surface, player: "Player", theme: "Theme"):
    palette = theme.palette
    x, y, w, h = player.x, player.y, player.w, player.h

    def hull(grow: float):
        return [
            (x, y - h / 2 - 6 - grow),
            (x - w / 2 - grow, y + h / 2 + grow),
            (x, y + h / 2 - 4),
            (x + w / 2 + grow, y + h / 2 + grow),
        ]

    surface.polygon(hull(4), palette["player_glow"])
    surface.polygon(hull(0), palette["player"])
    surface.ellipse(x, y - 6, 7, 4, palette["cockpit"])


def draw_menu_overlay(surface: Surface, width: float, height: float, theme: "Theme"):
    palette = theme.palette
    cx, cy = width / 2, height / 2

    surface.rect(0, 0, width, height, palette["overlay"])
    surface.text(theme.title.upper(), cx, cy - 50, palette["title"], 40, "center", bold=True)
    surface.text("Arrow keys: Move", cx, cy + 10, palette["text"], 20, "center")
    surface.text("Space/Z: Shoot", cx, cy + 44, palette["text"], 20, "center")
    surface.text("Click Start to Play!", cx, cy + 94, palette["call_to_action"], 16, "center")
