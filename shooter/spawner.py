"""
Randomized enemy generator
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional, Tuple

from .config import GAME_CONFIG, SPAWN_CONFIG
from .entities import Enemy

logger = logging.getLogger(__name__)

VariantChooser = Callable[[random.Random], str]


def single_variant(tag: str) -> VariantChooser:
    """Chooser that always yields the same variant tag"""
    return lambda rng: tag


class Spawner:
    """Creates enemies just above the field at random x, size, speed and sway"""

    def __init__(
        self,
        width: float = GAME_CONFIG["width"],
        margin: float = SPAWN_CONFIG["margin"],
        spawn_y: float = SPAWN_CONFIG["spawn_y"],
        radius_range: Tuple[float, float] = SPAWN_CONFIG["radius_range"],
        speed_range: Tuple[float, float] = SPAWN_CONFIG["speed_range"],
        sway_range: Tuple[float, float] = SPAWN_CONFIG["sway_range"],
        choose_variant: Optional[VariantChooser] = None,
        rng: Optional[random.Random] = None,
    ):
        self.width = width
        self.margin = margin
        self.spawn_y = spawn_y
        self.radius_range = radius_range
        self.speed_range = speed_range
        self.sway_range = sway_range
        self.choose_variant = choose_variant or single_variant("saucer")
        self.rng = rng if rng is not None else random.Random()

    def spawn_enemy(self) -> Enemy:
        x = self.rng.uniform(self.margin, self.width - self.margin)
        enemy = Enemy(
            x=x,
            y=self.spawn_y,
            radius=self.rng.uniform(*self.radius_range),
            speed=self.rng.uniform(*self.speed_range),
            sway=self.rng.uniform(*self.sway_range),
            variant=self.choose_variant(self.rng),
        )
        logger.debug("Spawned %s at x=%.1f r=%.1f", enemy.variant, enemy.x, enemy.radius)
        return enemy
