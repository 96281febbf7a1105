"""Configuration and validation for sprite sheet generation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class SpriteSheetError(Exception):
    """Base exception for sprite sheet errors."""

    pass


@dataclass
class Config:
    """Configuration for the sprite sheet pipeline."""

    sprite_width: int = 16
    sprite_height: int = 16
    columns: int = 8
    lines: int = 8
    margin: int = 2

    # Hex seed; a random one is drawn when None
    seed: Optional[str] = None
    palettes: str = "default"
    output_path: str = ""

    # Nearest-neighbor upscale factor applied when rendering
    scale: int = 10
    timing: bool = False


def validate_layout(
    sprite_width: int,
    sprite_height: int,
    columns: int,
    lines: int,
    margin: int,
) -> None:
    """Validate sheet layout parameters.

    Args:
        sprite_width: Width of one sprite in pixels.
        sprite_height: Height of one sprite in pixels.
        columns: Number of sprite columns in the sheet.
        lines: Number of sprite lines in the sheet.
        margin: Background pixels between and around sprites.

    Raises:
        SpriteSheetError: If any parameter is out of range.
    """
    if sprite_width <= 0 or sprite_height <= 0:
        raise SpriteSheetError("Sprite dimensions must be positive")
    if columns <= 0 or lines <= 0:
        raise SpriteSheetError("Sheet columns and lines must be positive")
    if margin < 0:
        raise SpriteSheetError("Margin cannot be negative")
