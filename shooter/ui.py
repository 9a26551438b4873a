"""
Menu chrome as a projection of the session state
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from .config import GAME_CONFIG
from .state_machine import GameState

if TYPE_CHECKING:
    from .render import Surface
    from .themes import Theme

BUTTON_W = 180
BUTTON_H = 44


@dataclass(frozen=True)
class UiElement:
    """One visible element; buttons carry the trigger they fire"""
    id: str
    kind: str  # "title", "text", "banner" or "button"
    text: str
    x: float  # centre
    y: float  # centre
    width: float = 0.0
    height: float = 0.0
    action: Optional[str] = None

    def contains(self, px: float, py: float) -> bool:
        return (abs(px - self.x) <= self.width / 2
                and abs(py - self.y) <= self.height / 2)


def project_ui(state: GameState, score: int, theme: "Theme",
               width: float = GAME_CONFIG["width"],
               height: float = GAME_CONFIG["height"]) -> List[UiElement]:
    """Elements the UI layer shows for the given state"""
    cx = width / 2
    if state is GameState.MENU:
        return [
            UiElement("gameTitle", "title", theme.title, cx, 80),
            UiElement("startBtn", "button", "Start Game", cx, height - 120,
                      BUTTON_W, BUTTON_H, action="start"),
        ]
    if state is GameState.GAMEOVER:
        return [
            UiElement("gameOverText", "banner", "GAME OVER", cx, height / 2 - 60),
            UiElement("scoreText", "text", f"Score: {score}", cx, height / 2),
            UiElement("restartBtn", "button", "Restart", cx, height / 2 + 80,
                      BUTTON_W, BUTTON_H, action="restart"),
        ]
    return []


def element_at(elements: Sequence[UiElement], x: float, y: float) -> Optional[UiElement]:
    """Topmost button under the point, if any"""
    for element in reversed(elements):
        if element.kind == "button" and element.contains(x, y):
            return element
    return None


def draw_ui(surface: "Surface", elements: Sequence[UiElement], theme: "Theme"):
    palette = theme.palette
    for el in elements:
        if el.kind == "button":
            surface.rect(el.x - el.width / 2, el.y - el.height / 2,
                         el.width, el.height, palette["button"])
            surface.text(el.text, el.x, el.y + 7, palette["button_text"], 20, "center", bold=True)
        elif el.kind == "banner":
            surface.text(el.text, el.x, el.y, palette["banner"], 48, "center", bold=True)
        elif el.kind == "title":
            surface.text(el.text, el.x, el.y, palette["title"], 32, "center", bold=True)
        else:
            surface.text(el.text, el.x, el.y, palette["hud"], 24, "center")
