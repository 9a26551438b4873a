"""
Game configuration for the arcade shooter
Plain dicts, splatted into the engine / env constructors
"""

# Playfield and gameplay constants
GAME_CONFIG = {
    "width": 480,
    "height": 640,
    "lives": 3,
    "points_per_kill": 10,
    "spawn_interval": 48,  # ticks between enemy spawns
    # Player
    "player_w": 36.0,
    "player_h": 18.0,
    "player_speed": 6.0,
    "player_offset": 60.0,  # distance of the player from the bottom edge
    "fire_cooldown": 13,  # ticks
    # Bullets
    "bullet_radius": 4.0,
    "bullet_speed": 10.0,
    "bullet_muzzle": 8.0,  # spawn gap above the player's nose
    "bullet_exit_y": -20.0,
    # Enemies
    "enemy_exit_margin": 30.0,  # below the field
    "hit_inset": 4.0,  # player hitbox forgiveness
    "sway_period": 32.0,
}

# Spawner ranges
SPAWN_CONFIG = {
    "margin": 30.0,
    "spawn_y": -16.0,
    "radius_range": (16.0, 24.0),
    "speed_range": (2.2, 3.7),
    "sway_range": (1.0, 3.5),
}

# Key codes understood by the input layer
KEY_CODES = {
    "left": ("ArrowLeft",),
    "right": ("ArrowRight",),
    "fire": ("Space", "KeyZ"),
}

# Frame rate the host schedules ticks at
FPS = 60

# ==============================================================================
# AGENT ENVIRONMENT
# ==============================================================================

ENV_CONFIG = {
    "theme": "space",
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
}

REWARD_CONFIG = {
    "R_KILL": 1.0,       # Reward per enemy shot down
    "R_HIT": 1.0,        # Penalty per life lost
    "R_SHOT": 0.01,      # Penalty per shot fired
    "R_TIME": 0.001,     # Small survival bonus per tick
    "R_GAME_OVER": 5.0,  # Penalty when the last life is lost
}
