"""Mirror-symmetric stochastic sprite synthesis."""
from __future__ import annotations

import logging
import random
from typing import List, Sequence

from .config import SpriteSheetError
from .sheet import SheetLayout
from .sprite import Color, Sprite

logger = logging.getLogger("sprite_sheet")


def _weighted_index(weights: Sequence[float], rng: random.Random) -> int:
    """Sample an index with probability proportional to its weight.

    Consumes exactly one ``rng.random()`` draw.
    """
    total = float(sum(weights))
    r = rng.random() * total
    cumulative = 0.0
    for idx, weight in enumerate(weights):
        cumulative += weight
        if r < cumulative:
            return idx
    return len(weights) - 1


def _uniform_index(count: int, rng: random.Random) -> int:
    """Pick an index in [0, count) uniformly with one ``rng.random()`` draw.

    Only ``random()`` output is stable across Python versions for a given
    seed, so integer choices are derived from it rather than ``randrange``.
    """
    return min(int(rng.random() * count), count - 1)


def paint_weights(column: int, width: int) -> List[float]:
    """Return the [paint, skip] weights for a column and its mirror.

    The factor grows with the distance between the column and its mirror,
    from 0 next to the center to almost 1 at the outer edges.
    """
    mirror = width - 1 - column
    factor = (mirror - column) / width
    return [0.5 - 0.5 * factor, 0.5 + 0.5 * factor]


def generate_sprite(
    width: int,
    height: int,
    background: Color,
    palette: Sequence[Color],
    rng: random.Random,
) -> Sprite:
    """Generate one left-right symmetric sprite.

    Rows are generated top to bottom. For each column pair from the left
    edge to the center, one weighted draw decides whether to paint; when it
    does, a second draw picks the palette color written to both the column
    and its mirror.

    Args:
        width: Sprite width in pixels.
        height: Sprite height in pixels.
        background: Color of unpainted pixels.
        palette: Non-empty list of candidate colors.
        rng: Random generator, advanced in place.

    Returns:
        Generated sprite.

    Raises:
        SpriteSheetError: If dimensions are not positive or palette is empty.
    """
    if width <= 0 or height <= 0:
        raise SpriteSheetError(
            f"Sprite dimensions must be positive, got {width}x{height}"
        )
    if not palette:
        raise SpriteSheetError("Palette must contain at least one color")

    weights = [paint_weights(column, width) for column in range((width + 1) // 2)]
    data: List[Color] = []

    for _ in range(height):
        row = [background] * width
        for column, column_weights in enumerate(weights):
            mirror = width - 1 - column
            if _weighted_index(column_weights, rng) == 0:
                color = palette[_uniform_index(len(palette), rng)]
                row[column] = color
                row[mirror] = color
        data.extend(row)

    return Sprite(width, height, data)


def generate_sprite_matrix(
    layout: SheetLayout,
    background: Color,
    palettes: Sequence[Sequence[Color]],
    rng: random.Random,
) -> List[Sprite]:
    """Generate sprites for every sheet cell in row-major order.

    Each cell first draws its palette, then generates its sprite from it,
    so the whole sheet is a single deterministic sequence of draws.

    Args:
        layout: Sheet geometry.
        background: Color of unpainted pixels.
        palettes: Non-empty palette set.
        rng: Random generator, advanced in place.

    Returns:
        List of ``layout.cell_count`` sprites.

    Raises:
        SpriteSheetError: If the palette set is empty.
    """
    if not palettes:
        raise SpriteSheetError("At least one palette is required")

    sprites: List[Sprite] = []
    for index in range(layout.cell_count):
        palette_idx = _uniform_index(len(palettes), rng)
        logger.debug(f"Sprite {index}: palette {palette_idx}")
        sprites.append(
            generate_sprite(
                layout.sprite_width,
                layout.sprite_height,
                background,
                palettes[palette_idx],
                rng,
            )
        )
    return sprites
