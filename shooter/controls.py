"""
Held-key tracking and the per-tick input snapshot
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Sequence

from .config import KEY_CODES


@dataclass(frozen=True)
class InputSnapshot:
    """Controls sampled once per tick"""
    left: bool = False
    right: bool = False
    fire: bool = False


class KeyState:
    """
    Mapping of recognized key codes to their held state.

    Key events may arrive at any time between ticks; they only touch this
    mapping, and the engine reads it through snapshot().
    """

    def __init__(self, bindings: Mapping[str, Sequence[str]] = KEY_CODES):
        self.bindings = {action: tuple(codes) for action, codes in bindings.items()}
        self._known = {code for codes in self.bindings.values() for code in codes}
        self.held: Dict[str, bool] = {}

    def on_key_down(self, code: str) -> bool:
        """Mark a key held; returns False for codes the game ignores"""
        if code not in self._known:
            return False
        self.held[code] = True
        return True

    def on_key_up(self, code: str) -> bool:
        if code not in self._known:
            return False
        self.held[code] = False
        return True

    def release_all(self):
        self.held.clear()

    def _any(self, action: str) -> bool:
        return any(self.held.get(code, False) for code in self.bindings.get(action, ()))

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(
            left=self._any("left"),
            right=self._any("right"),
            fire=self._any("fire"),
        )
