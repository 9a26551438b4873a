"""
Game entity dataclasses
"""

from dataclasses import dataclass


@dataclass
class Player:
    """Player craft; y stays where it spawned"""
    x: float
    y: float
    w: float = 36.0
    h: float = 18.0
    speed: float = 6.0
    cooldown: int = 0  # ticks until the next shot is allowed


@dataclass
class Bullet:
    """Bullet projectile travelling straight up"""
    x: float
    y: float
    radius: float = 4.0
    speed: float = 10.0
    alive: bool = True


@dataclass
class Enemy:
    """Enemy descending with a sine sway"""
    x: float
    y: float
    radius: float
    speed: float
    sway: float
    variant: str = "saucer"  # only read by the theme renderer
    alive: bool = True
