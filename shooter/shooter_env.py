"""
ShooterEnv - the arcade shooter as a Gymnasium environment
----------------------------------------------------------
- Same SimulationEngine the window plays, one tick per step
- MultiDiscrete action space: [left(2), right(2), fire(2)]
- Vector observation: player state + top-K nearest enemies
- Reward from kills, lives lost, shots fired and survival time

Quick test:
    python -m shooter --random-episode
"""

from __future__ import annotations

import logging
from typing import List, Optional, Dict, Any

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ENV_CONFIG, REWARD_CONFIG
from .controls import InputSnapshot
from .engine import SimulationEngine
from .game import ShooterGame
from .spawner import Spawner
from .state_machine import GameState
from .themes import get_theme
from .utils import clamp, seed_everything

logger = logging.getLogger(__name__)


class ShooterEnv(gym.Env):
    """Arcade shooter environment rendered with Arcade"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        theme: str = ENV_CONFIG["theme"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_enemies: int = ENV_CONFIG["k_enemies"],
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        assert k_enemies >= 0, "k_enemies must be non-negative"
        self.render_mode = render_mode

        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.rewards = dict(REWARD_CONFIG)
        if reward_config:
            self.rewards.update(reward_config)

        theme_obj = get_theme(theme)
        self.engine = SimulationEngine(spawner=Spawner(choose_variant=theme_obj.choose_variant))
        self.game = ShooterGame(theme=theme_obj, engine=self.engine)

        # Action space: left 0/1, right 0/1, fire 0/1
        self.action_space = spaces.MultiDiscrete([2, 2, 2])

        # Observation space (vector)
        # Player: x(1) cooldown(1) lives(1)
        # Each enemy: rel pos(2) radius(1) speed(1)
        obs_dim = 3 + self.k_enemies * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        # Arcade rendering state
        self._window = None

        self._step_count = 0
        self._last_state = GameState.MENU

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        if seed is not None:
            self.engine.spawner.rng.seed(seed)

        self._step_count = 0
        self.engine.start()
        self._last_state = self.engine.state

        return self._get_obs(), self._get_info()

    def step(self, action):
        left, right, fire = (bool(int(a)) for a in action[:3])
        self.engine.tick(InputSnapshot(left=left, right=right, fire=fire))

        reward = self._compute_reward()
        self._last_state = self.engine.state

        terminated = self.engine.state is GameState.GAMEOVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        eng = self.engine
        p = eng.player

        obs_parts: List[float] = [
            (p.x / eng.width) * 2 - 1,
            clamp(p.cooldown / max(1, eng.fire_cooldown) * 2 - 1, -1, 1),
            (eng.lives / max(1, eng.max_lives)) * 2 - 1,
        ]

        spawner = eng.spawner
        max_radius = max(1e-6, spawner.radius_range[1])
        max_speed = max(1e-6, spawner.speed_range[1])

        # Enemies: top-K nearest
        enemies_sorted = sorted(
            eng.enemies,
            key=lambda e: (e.x - p.x) ** 2 + (e.y - p.y) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.x - p.x) / eng.width, -1, 1),
                    clamp((e.y - p.y) / eng.height, -1, 1),
                    clamp(e.radius / max_radius, -1, 1),
                    clamp(e.speed / max_speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        events = self.engine.events
        r = self.rewards

        reward = 0.0
        reward += r["R_KILL"] * events["kills"]
        reward -= r["R_HIT"] * events["hits"]
        reward -= r["R_SHOT"] * events["shots"]
        reward += r["R_TIME"]

        # Charged once, on the tick that lost the last life
        if self._last_state is GameState.PLAYING and self.engine.state is GameState.GAMEOVER:
            reward -= r["R_GAME_OVER"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.engine.score,
            "lives": self.engine.lives,
            "cooldown": self.engine.player.cooldown,
            "num_enemies": len(self.engine.enemies),
            "num_bullets": len(self.engine.bullets),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # Imported here so headless use never needs a display
            from .window import ShooterWindow
            self._window = ShooterWindow(self.game, interactive=False)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42,
                       theme: str = ENV_CONFIG["theme"]) -> Dict[str, Any]:
    """Play one episode with random actions and return the final info"""
    env = ShooterEnv(render_mode="human" if render else None, theme=theme)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    logger.info("Running random episode (%s theme)", theme)
    try:
        while not (terminated or truncated):
            action = env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
            total += reward
    finally:
        env.close()

    logger.info("Random episode return %.3f, score %d after %d steps",
                total, info["score"], info["step"])
    info["return"] = total
    return info
