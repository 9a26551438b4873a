"""
Visual themes: palette, backdrop and enemy artwork

Themes only change how things look. Every theme runs on the same engine; the
one hook into the simulation is choose_variant, which tags new enemies so the
renderer knows which drawer to use.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Tuple

if TYPE_CHECKING:
    from .entities import Enemy
    from .render import Surface, Color

BackgroundDrawer = Callable[["Surface", float, float], None]
EnemyDrawer = Callable[["Surface", "Enemy", Dict[str, "Color"]], None]


@dataclass(frozen=True)
class Theme:
    """Bundle of rendering assets for one skin"""
    name: str
    title: str
    palette: Dict[str, "Color"]
    variants: Tuple[str, ...]
    draw_background: BackgroundDrawer
    enemy_drawers: Dict[str, EnemyDrawer] = field(default_factory=dict)

    def choose_variant(self, rng: random.Random) -> str:
        if len(self.variants) == 1:
            return self.variants[0]
        return rng.choice(self.variants)

    def draw_enemy(self, surface: "Surface", enemy: "Enemy"):
        drawer = self.enemy_drawers.get(enemy.variant)
        if drawer is None:
            # Unknown tag, fall back to the first kind
            drawer = self.enemy_drawers[self.variants[0]]
        drawer(surface, enemy, self.palette)


# ----------------------------
# Space
# ----------------------------

SPACE_PALETTE = {
    "clear": (8, 8, 20),
    "star": (179, 224, 255),
    "player": (50, 170, 255),
    "player_glow": (0, 216, 255, 70),
    "cockpit": (226, 250, 255, 230),
    "bullet": (255, 251, 167),
    "bullet_glow": (255, 238, 96, 90),
    "enemy": (255, 50, 100),
    "enemy_mid": (255, 187, 187),
    "enemy_core": (255, 255, 255),
    "enemy_glow": (255, 50, 100, 70),
    "eye": (255, 255, 255),
    "hud": (233, 243, 255),
    "overlay": (24, 24, 40, 192),
    "title": (50, 170, 255),
    "text": (255, 255, 255),
    "call_to_action": (0, 240, 250),
    "banner": (255, 50, 100),
    "button": (50, 170, 255),
    "button_text": (255, 255, 255),
}


def draw_star_field(surface: "Surface", width: float, height: float):
    color = SPACE_PALETTE["star"]
    for i in range(40):
        x = (i * 71) % width + (i % 3) * 15
        y = (i * 53) % height + (i % 5) * 9
        alpha = int(255 * (0.45 + 0.1 * (i % 3)))
        surface.circle(x, y, 1.2 + (i % 2), color + (alpha,))


def draw_saucer(surface: "Surface", enemy: "Enemy", palette: Dict[str, "Color"]):
    x, y, r = enemy.x, enemy.y, enemy.radius
    surface.circle(x, y, r + 5, palette["enemy_glow"])
    surface.circle(x, y, r, palette["enemy"])
    surface.circle(x, y, r * 0.6, palette["enemy_mid"])
    surface.circle(x, y, r * 0.2, palette["enemy_core"])
    surface.circle(x - 6, y - 2, 2, palette["eye"])
    surface.circle(x + 6, y - 2, 2, palette["eye"])


SPACE_THEME = Theme(
    name="space",
    title="Space Shooter",
    palette=SPACE_PALETTE,
    variants=("saucer",),
    draw_background=draw_star_field,
    enemy_drawers={"saucer": draw_saucer},
)


# ----------------------------
# Tropical
# ----------------------------

TROPICAL_PALETTE = {
    "clear": (255, 196, 120),
    "sky_top": (255, 140, 90),
    "sky_bottom": (255, 214, 150),
    "sun": (255, 236, 140),
    "sea": (30, 150, 190),
    "wave": (190, 240, 250, 160),
    "palm": (40, 70, 40),
    "player": (46, 196, 182),
    "player_glow": (255, 255, 255, 70),
    "cockpit": (255, 250, 230, 230),
    "bullet": (255, 90, 60),
    "bullet_glow": (255, 200, 80, 90),
    "crab": (230, 70, 40),
    "crab_claw": (200, 50, 30),
    "coconut": (120, 80, 40),
    "coconut_dot": (60, 35, 20),
    "eye": (255, 255, 255),
    "pupil": (20, 20, 20),
    "hud": (40, 30, 60),
    "overlay": (255, 240, 200, 200),
    "title": (230, 90, 40),
    "text": (60, 40, 40),
    "call_to_action": (20, 120, 150),
    "banner": (230, 70, 40),
    "button": (46, 196, 182),
    "button_text": (255, 255, 255),
}


def _blend(a: "Color", b: "Color", t: float) -> "Color":
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


def draw_beach(surface: "Surface", width: float, height: float):
    palette = TROPICAL_PALETTE
    sea_top = height - 140
    bands = 12
    band_h = sea_top / bands
    for i in range(bands):
        color = _blend(palette["sky_top"], palette["sky_bottom"], i / (bands - 1))
        surface.rect(0, i * band_h, width, band_h + 1, color)

    surface.circle(width * 0.72, sea_top - 40, 46, palette["sun"])
    surface.rect(0, sea_top, width, height - sea_top, palette["sea"])
    for row in range(4):
        y = sea_top + 20 + row * 30
        for i in range(6):
            x = (i * 97 + row * 41) % width
            surface.ellipse(x, y, 22, 2, palette["wave"])

    # Palm trunks on both edges
    for base_x, lean in ((26, 1), (width - 26, -1)):
        surface.polygon([
            (base_x - 6, height),
            (base_x + 6, height),
            (base_x + 6 + lean * 30, sea_top - 120),
            (base_x - 2 + lean * 30, sea_top - 120),
        ], palette["palm"])
        top_x, top_y = base_x + lean * 32, sea_top - 122
        for dx, dy in ((-34, 10), (34, 10), (-22, -14), (22, -14)):
            surface.ellipse(top_x + dx / 2, top_y + dy / 2, 24, 6, palette["palm"])


def draw_crab(surface: "Surface", enemy: "Enemy", palette: Dict[str, "Color"]):
    x, y, r = enemy.x, enemy.y, enemy.radius
    surface.circle(x - r, y - r * 0.3, r * 0.35, palette["crab_claw"])
    surface.circle(x + r, y - r * 0.3, r * 0.35, palette["crab_claw"])
    surface.ellipse(x, y, r, r * 0.75, palette["crab"])
    for dx in (-6, 6):
        surface.circle(x + dx, y - r * 0.6, 3, palette["eye"])
        surface.circle(x + dx, y - r * 0.6, 1.5, palette["pupil"])


def draw_coconut(surface: "Surface", enemy: "Enemy", palette: Dict[str, "Color"]):
    x, y, r = enemy.x, enemy.y, enemy.radius
    surface.circle(x, y, r, palette["coconut"])
    for dx, dy in ((-5, -4), (5, -4), (0, 4)):
        surface.circle(x + dx, y + dy, 2.5, palette["coconut_dot"])


TROPICAL_THEME = Theme(
    name="tropical",
    title="Tropical Shooter",
    palette=TROPICAL_PALETTE,
    variants=("crab", "coconut"),
    draw_background=draw_beach,
    enemy_drawers={"crab": draw_crab, "coconut": draw_coconut},
)


THEMES = {
    "space": SPACE_THEME,
    "tropical": TROPICAL_THEME,
}


def get_theme(name: str) -> Theme:
    if name not in THEMES:
        raise ValueError(f"Unknown theme: {name}")
    return THEMES[name]
