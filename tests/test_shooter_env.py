import numpy as np
import pytest

from shooter.shooter_env import ShooterEnv, run_random_episode
from shooter.state_machine import GameState

from conftest import make_enemy


@pytest.fixture
def env():
    env = ShooterEnv(k_enemies=3)
    yield env
    env.close()


def test_reset(env):
    obs, info = env.reset(seed=0)
    assert obs.shape == (3 + 3 * 4,)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0 and info["lives"] == 3
    assert env.engine.state is GameState.PLAYING


def test_step_fire(env):
    env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(np.array([0, 0, 1]))
    assert info["num_bullets"] == 1
    assert not terminated and not truncated
    assert reward == pytest.approx(env.rewards["R_TIME"] - env.rewards["R_SHOT"])


def test_kill_reward(env):
    env.reset(seed=0)
    env.engine.enemies.append(make_enemy(240, 553))
    _, reward, _, _, info = env.step([0, 0, 1])
    assert info["score"] == 10
    assert reward == pytest.approx(
        env.rewards["R_KILL"] - env.rewards["R_SHOT"] + env.rewards["R_TIME"])


def test_gameover_terminates(env):
    env.reset(seed=0)
    env.engine.lives = 1
    env.engine.enemies.append(make_enemy(240, 580))
    _, reward, terminated, _, info = env.step([0, 0, 0])
    assert terminated
    assert info["lives"] == 0
    assert reward == pytest.approx(
        env.rewards["R_TIME"] - env.rewards["R_HIT"] - env.rewards["R_GAME_OVER"])


def test_truncation():
    env = ShooterEnv(max_steps=5)
    env.reset(seed=1)
    truncated = False
    for _ in range(5):
        _, _, _, truncated, _ = env.step([0, 0, 0])
    assert truncated


def test_observation_sees_nearest_enemies(env):
    env.reset(seed=0)
    env.engine.enemies = [make_enemy(240, 100, speed=0.0), make_enemy(300, 500, speed=0.0)]
    obs, _, _, _, _ = env.step([0, 0, 0])
    # nearest first: the one at (300, 500)
    assert obs[3] == pytest.approx(60 / 480)
    assert obs[4] == pytest.approx(-80 / 640)
    assert np.all(obs[11:] == 0)


def test_seeded_resets_repeat(env):
    env.reset(seed=3)
    for _ in range(100):
        env.step([0, 0, 0])
    first = [(e.x, e.radius) for e in env.engine.enemies]
    env.reset(seed=3)
    for _ in range(100):
        env.step([0, 0, 0])
    assert [(e.x, e.radius) for e in env.engine.enemies] == first


def test_bad_render_mode():
    with pytest.raises(AssertionError):
        ShooterEnv(render_mode="rgb_array")


def test_random_episode_headless():
    info = run_random_episode(render=False, seed=0, theme="tropical")
    assert info["step"] > 0
    assert info["lives"] >= 0
    assert "return" in info


def test_gameover_penalty_charged_once(env):
    env.reset(seed=0)
    env.engine.lives = 1
    env.engine.enemies.append(make_enemy(240, 580))
    _, first, terminated, _, _ = env.step([0, 0, 0])
    assert terminated
    _, second, terminated, _, info = env.step([0, 0, 0])
    assert terminated
    assert second == pytest.approx(env.rewards["R_TIME"])
    assert first < second


def test_game_over_penalty_again_after_reset(env):
    for _ in range(2):
        env.reset(seed=0)
        env.engine.lives = 1
        env.engine.enemies.append(make_enemy(240, 580))
        _, reward, _, _, _ = env.step([0, 0, 0])
        assert reward == pytest.approx(
            env.rewards["R_TIME"] - env.rewards["R_HIT"] - env.rewards["R_GAME_OVER"])
