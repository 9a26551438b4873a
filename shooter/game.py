"""
ShooterGame - the surface the UI layer talks to
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .controls import KeyState
from .engine import SimulationEngine
from .loop import FrameLoop
from .render import Surface, render
from .spawner import Spawner
from .state_machine import GameState
from .themes import Theme, SPACE_THEME
from .ui import UiElement, project_ui

logger = logging.getLogger(__name__)


class ShooterGame:
    """
    Couples one engine with its input state, theme and frame loop.

    Without a loop the host is expected to call advance() itself once per
    frame (the agent environment does this).
    """

    def __init__(
        self,
        theme: Theme = SPACE_THEME,
        engine: Optional[SimulationEngine] = None,
        loop: Optional[FrameLoop] = None,
        keys: Optional[KeyState] = None,
    ):
        self.theme = theme
        if engine is None:
            engine = SimulationEngine(spawner=Spawner(choose_variant=theme.choose_variant))
        self.engine = engine
        self.loop = loop
        self.keys = keys if keys is not None else KeyState()

    # ----------------------------
    # Observable state
    # ----------------------------

    @property
    def score(self) -> int:
        return self.engine.score

    @property
    def lives(self) -> int:
        return self.engine.lives

    @property
    def state(self) -> GameState:
        return self.engine.state

    # ----------------------------
    # Triggers
    # ----------------------------

    def on_start(self):
        self.engine.start()
        self._begin()

    def on_restart(self):
        self.engine.restart()
        self._begin()

    def _begin(self):
        logger.info("Session started (%s theme)", self.theme.name)
        if self.loop is not None:
            self.loop.schedule(self._frame)

    def on_key_down(self, code: str):
        self.keys.on_key_down(code)

    def on_key_up(self, code: str):
        self.keys.on_key_up(code)

    def stop(self):
        if self.loop is not None:
            self.loop.cancel()

    # ----------------------------
    # Frame loop
    # ----------------------------

    def advance(self):
        """Run one tick with the keys held right now"""
        was_playing = self.state is GameState.PLAYING
        self.engine.tick(self.keys.snapshot())
        if was_playing and self.state is GameState.GAMEOVER:
            logger.info("Game over, final score %d", self.score)

    def _frame(self):
        if self.state is GameState.PLAYING:
            self.advance()
        if self.state is GameState.PLAYING:
            self.loop.schedule(self._frame)
        else:
            self.loop.cancel()

    # ----------------------------
    # Presentation
    # ----------------------------

    def render(self, surface: Surface, theme: Optional[Theme] = None):
        render(self.engine, surface, theme or self.theme)

    def ui_elements(self) -> List[UiElement]:
        return project_ui(self.state, self.score, self.theme,
                          self.engine.width, self.engine.height)
