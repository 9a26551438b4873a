"""
SimulationEngine - the per-tick core of the arcade shooter
----------------------------------------------------------
- One player craft sliding along the bottom edge, firing straight up
- Enemies spawned at a fixed cadence, falling with a sine sway
- Bullet/enemy hits score points, enemy/player hits cost lives
- Drives the menu/playing/gameover state machine

The engine knows nothing about drawing or key codes: the host feeds it an
InputSnapshot per tick and reads the entity lists back for rendering.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional

from .config import GAME_CONFIG
from .controls import InputSnapshot
from .entities import Player, Bullet, Enemy
from .spawner import Spawner
from .state_machine import GameState, GameStateMachine
from .utils import circle_collide, box_overlap

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Owns the entities, score, lives and session state"""

    def __init__(
        self,
        width: int = GAME_CONFIG["width"],
        height: int = GAME_CONFIG["height"],
        lives: int = GAME_CONFIG["lives"],
        points_per_kill: int = GAME_CONFIG["points_per_kill"],
        spawn_interval: int = GAME_CONFIG["spawn_interval"],
        player_w: float = GAME_CONFIG["player_w"],
        player_h: float = GAME_CONFIG["player_h"],
        player_speed: float = GAME_CONFIG["player_speed"],
        player_offset: float = GAME_CONFIG["player_offset"],
        fire_cooldown: int = GAME_CONFIG["fire_cooldown"],
        bullet_radius: float = GAME_CONFIG["bullet_radius"],
        bullet_speed: float = GAME_CONFIG["bullet_speed"],
        bullet_muzzle: float = GAME_CONFIG["bullet_muzzle"],
        bullet_exit_y: float = GAME_CONFIG["bullet_exit_y"],
        enemy_exit_margin: float = GAME_CONFIG["enemy_exit_margin"],
        hit_inset: float = GAME_CONFIG["hit_inset"],
        sway_period: float = GAME_CONFIG["sway_period"],
        spawner: Optional[Spawner] = None,
    ):
        # Arena
        self.width = width
        self.height = height

        # Gameplay config
        self.max_lives = lives
        self.points_per_kill = points_per_kill
        self.spawn_interval = spawn_interval
        self.player_w = player_w
        self.player_h = player_h
        self.player_speed = player_speed
        self.player_offset = player_offset
        self.fire_cooldown = fire_cooldown
        self.bullet_radius = bullet_radius
        self.bullet_speed = bullet_speed
        self.bullet_muzzle = bullet_muzzle
        self.bullet_exit_y = bullet_exit_y
        self.enemy_exit_margin = enemy_exit_margin
        self.hit_inset = hit_inset
        self.sway_period = sway_period

        self.spawner = spawner if spawner is not None else Spawner(width=width)
        self.machine = GameStateMachine()

        # World state
        self.player: Player = self._new_player()
        self.bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []
        self.score = 0
        self.lives = lives
        self.spawn_timer = 0
        self.tick_count = 0

        # Per-tick event counters
        self.events: Dict[str, int] = self._empty_events()

    # ----------------------------
    # Session control
    # ----------------------------

    @property
    def state(self) -> GameState:
        return self.machine.state

    def start(self, trigger: str = "start"):
        """Begin a fresh session from any state"""
        self.machine.fire(trigger)
        self.score = 0
        self.lives = self.max_lives
        self.bullets = []
        self.enemies = []
        self.spawn_timer = 0
        self.tick_count = 0
        self.player = self._new_player()
        self.events = self._empty_events()

    def restart(self):
        self.start("restart")

    def _new_player(self) -> Player:
        return Player(
            x=self.width / 2,
            y=self.height - self.player_offset,
            w=self.player_w,
            h=self.player_h,
            speed=self.player_speed,
        )

    @staticmethod
    def _empty_events() -> Dict[str, int]:
        return {"shots": 0, "kills": 0, "hits": 0}

    # ----------------------------
    # Tick
    # ----------------------------

    def tick(self, inp: InputSnapshot):
        """Advance the world by one frame; ignored unless playing"""
        self.events = self._empty_events()
        if not self.machine.is_playing:
            return

        self._move_player(inp)
        self._apply_fire(inp)
        self._update_bullets()
        self._spawn_logic()
        self._update_enemies()
        self._resolve_bullet_hits()
        self._resolve_player_hits()

        self.tick_count += 1

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def _move_player(self, inp: InputSnapshot):
        p = self.player
        # Both directions may apply in the same tick
        if inp.left and p.x - p.w / 2 > 0:
            p.x -= p.speed
        if inp.right and p.x + p.w / 2 < self.width:
            p.x += p.speed

    def _apply_fire(self, inp: InputSnapshot):
        p = self.player
        if inp.fire and p.cooldown <= 0:
            self.bullets.append(Bullet(
                x=p.x,
                y=p.y - p.h / 2 - self.bullet_muzzle,
                radius=self.bullet_radius,
                speed=self.bullet_speed,
            ))
            p.cooldown = self.fire_cooldown
            self.events["shots"] += 1
        if p.cooldown > 0:
            p.cooldown -= 1

    def _update_bullets(self):
        for b in self.bullets:
            b.y -= b.speed
            if b.y <= self.bullet_exit_y:
                b.alive = False

        self.bullets = [b for b in self.bullets if b.alive]

    def _spawn_logic(self):
        self.spawn_timer += 1
        if self.spawn_timer >= self.spawn_interval:
            self._spawn_enemy()
            self.spawn_timer = 0

    def _spawn_enemy(self) -> Enemy:
        enemy = self.spawner.spawn_enemy()
        self.enemies.append(enemy)
        return enemy

    def _update_enemies(self):
        for e in self.enemies:
            e.y += e.speed
            # Sway is a function of the new y only
            e.x += math.sin(e.y / self.sway_period) * e.sway

    def _resolve_bullet_hits(self):
        # Newest enemies first, each bullet and enemy consumed at most once
        for e in reversed(self.enemies):
            for b in reversed(self.bullets):
                if not b.alive:
                    continue
                if circle_collide(e.x, e.y, e.radius, b.x, b.y, b.radius):
                    e.alive = False
                    b.alive = False
                    self.score += self.points_per_kill
                    self.events["kills"] += 1
                    logger.debug("Enemy down at (%.1f, %.1f), score %d", e.x, e.y, self.score)
                    break

        self.enemies = [e for e in self.enemies if e.alive]
        self.bullets = [b for b in self.bullets if b.alive]

    def _resolve_player_hits(self):
        p = self.player
        reach_x = p.w / 2 - self.hit_inset
        reach_y = p.h / 2 - self.hit_inset

        for e in reversed(self.enemies):
            if e.y > self.height + self.enemy_exit_margin:
                # Escaped, no penalty
                e.alive = False
                continue
            if not self.machine.is_playing:
                # Last life already gone this tick
                continue
            if box_overlap(e.x, e.y, e.radius + reach_x, p.x, p.y, e.radius + reach_y):
                e.alive = False
                self.lives -= 1
                self.events["hits"] += 1
                logger.debug("Player hit, %d lives left", self.lives)
                if self.lives <= 0:
                    self.lives = 0
                    self.machine.fire("lives_exhausted")

        self.enemies = [e for e in self.enemies if e.alive]
