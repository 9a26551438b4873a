"""
Session state machine: menu -> playing -> gameover -> playing
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Tuple

logger = logging.getLogger(__name__)


class GameState(str, Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAMEOVER = "gameover"


class InvalidTransition(RuntimeError):
    """Raised when a trigger is not allowed from the current state"""


# trigger -> (allowed source states, target state)
TRANSITIONS: Dict[str, Tuple[Tuple[GameState, ...], GameState]] = {
    "start": ((GameState.MENU, GameState.PLAYING, GameState.GAMEOVER), GameState.PLAYING),
    "restart": ((GameState.MENU, GameState.PLAYING, GameState.GAMEOVER), GameState.PLAYING),
    "lives_exhausted": ((GameState.PLAYING,), GameState.GAMEOVER),
}


class GameStateMachine:
    """Tracks the session state; gates whether the simulation may run"""

    def __init__(self, initial: GameState = GameState.MENU):
        self.state = initial

    @property
    def is_playing(self) -> bool:
        return self.state is GameState.PLAYING

    def fire(self, trigger: str) -> GameState:
        """
        Apply a trigger and return the new state.

        Raises InvalidTransition for unknown triggers or ones not allowed
        from the current state.
        """
        if trigger not in TRANSITIONS:
            raise InvalidTransition(f"Unknown trigger: {trigger}")
        sources, target = TRANSITIONS[trigger]
        if self.state not in sources:
            raise InvalidTransition(f"Cannot {trigger} from {self.state.value}")
        logger.info("State %s --%s--> %s", self.state.value, trigger, target.value)
        self.state = target
        return target
