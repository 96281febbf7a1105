"""Pytest fixtures for sprite_sheet tests."""
from __future__ import annotations

from typing import List

import pytest

from sprite_sheet import Color, Config, Seed, Sprite

SEED_HEX = "04ed394c85de2fe0f1b778d37cc029b6a1366f1aa26498fb123b4ac75d955e08"

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


@pytest.fixture
def default_config() -> Config:
    """Return a default Config instance."""
    return Config()


@pytest.fixture
def small_config() -> Config:
    """Return a config for a small 3x2 sheet of 12x12 sprites."""
    return Config(sprite_width=12, sprite_height=12, columns=3, lines=2, margin=2)


@pytest.fixture
def fixed_seed() -> Seed:
    """Return a known seed."""
    return Seed.from_hex(SEED_HEX)


@pytest.fixture
def palettes() -> List[List[Color]]:
    """Return a small palette set with two palettes."""
    return [
        [RED, GREEN],
        [BLUE, Color(255, 255, 0), Color(255, 255, 255)],
    ]


@pytest.fixture
def palette_file(tmp_path) -> str:
    """Write a two-palette file and return its path."""
    path = tmp_path / "palettes.txt"
    path.write_text("255 0 0\n0 255 0\n\n0 0 255\n255 255 0\n")
    return str(path)


@pytest.fixture
def lone_pixel_sprite() -> Sprite:
    """Create a 5x5 background sprite with one red pixel in the center."""
    sprite = Sprite.from_color(5, 5)
    sprite.set_at(2, 2, RED)
    return sprite
