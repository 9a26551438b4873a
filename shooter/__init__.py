"""Arcade shooter - simulation core, themes and hosts"""

from .controls import InputSnapshot, KeyState
from .engine import SimulationEngine
from .game import ShooterGame
from .loop import FrameLoop
from .spawner import Spawner
from .state_machine import GameState, InvalidTransition
from .themes import Theme, SPACE_THEME, TROPICAL_THEME, get_theme

__all__ = [
    'InputSnapshot',
    'KeyState',
    'SimulationEngine',
    'ShooterGame',
    'FrameLoop',
    'Spawner',
    'GameState',
    'InvalidTransition',
    'Theme',
    'SPACE_THEME',
    'TROPICAL_THEME',
    'get_theme',
]
