"""Lonely pixel removal."""
from __future__ import annotations

import logging

import numpy as np

from .sprite import BACKGROUND, Color, Sprite

logger = logging.getLogger("sprite_sheet")

# Sprites must exceed this size on both axes to be denoised
DENOISE_MIN_SIZE = 9

DENOISE_PASSES = (
    (2, 8),
    (2, 4),
)


def neighbor_counts(arr: np.ndarray, margin: int, background: Color) -> np.ndarray:
    """Count non-background pixels in each pixel's neighborhood.

    The neighborhood is the square of radius ``margin`` around the pixel,
    clipped to the image bounds, and includes the pixel itself.

    Args:
        arr: Array of shape (H, W, 3).
        margin: Neighborhood radius.
        background: Background color.

    Returns:
        Integer array of shape (H, W) with neighbor counts.
    """
    height, width = arr.shape[:2]
    mask = np.any(arr != np.array(background, dtype=arr.dtype), axis=2)

    # Summed-area table with a leading row and column of zeros
    table = np.zeros((height + 1, width + 1), dtype=np.int64)
    table[1:, 1:] = mask.astype(np.int64).cumsum(axis=0).cumsum(axis=1)

    lines = np.arange(height)
    columns = np.arange(width)
    top = np.maximum(lines - margin, 0)
    bottom = np.minimum(lines + margin + 1, height)
    left = np.maximum(columns - margin, 0)
    right = np.minimum(columns + margin + 1, width)

    return (
        table[np.ix_(bottom, right)]
        - table[np.ix_(top, right)]
        - table[np.ix_(bottom, left)]
        + table[np.ix_(top, left)]
    )


def remove_lonely_pixels(
    sprite: Sprite,
    margin: int,
    min_count: int,
    background: Color = BACKGROUND,
) -> Sprite:
    """Clear pixels whose neighborhood holds too few colored pixels.

    Counts are taken on the input sprite only, so the result does not
    depend on scan order. The input sprite is left untouched.

    Args:
        sprite: Sprite to clean.
        margin: Neighborhood radius.
        min_count: Minimum number of non-background pixels (self included)
            a pixel needs to survive.
        background: Background color.

    Returns:
        New denoised sprite.
    """
    arr = sprite.to_array()
    counts = neighbor_counts(arr, margin, background)
    lonely = counts < min_count

    out = arr.copy()
    out[lonely] = background
    return Sprite.from_array(out)


def denoise_sprite(sprite: Sprite, background: Color = BACKGROUND) -> Sprite:
    """Apply the two-pass denoising policy to a generated sprite.

    Sprites not larger than ``DENOISE_MIN_SIZE`` on both axes are returned
    unchanged.
    """
    if sprite.width <= DENOISE_MIN_SIZE or sprite.height <= DENOISE_MIN_SIZE:
        logger.debug(f"Skipping denoise for {sprite.width}x{sprite.height} sprite")
        return sprite

    for margin, min_count in DENOISE_PASSES:
        before = sum(1 for c in sprite.data if c != background)
        sprite = remove_lonely_pixels(sprite, margin, min_count, background)
        after = sum(1 for c in sprite.data if c != background)
        logger.debug(
            f"Denoise pass r={margin} min={min_count}: removed {before - after} pixels"
        )
    return sprite
