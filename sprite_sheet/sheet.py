"""Sheet layout and sprite compositing."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .config import SpriteSheetError, validate_layout
from .sprite import BACKGROUND, Color, Sprite, vec_index_to_matrix

logger = logging.getLogger("sprite_sheet")


@dataclass(frozen=True)
class SheetLayout:
    """Grid geometry of a sprite sheet."""

    sprite_width: int
    sprite_height: int
    columns: int
    lines: int
    margin: int = 2

    def __post_init__(self) -> None:
        validate_layout(
            self.sprite_width, self.sprite_height, self.columns, self.lines, self.margin
        )

    @property
    def width(self) -> int:
        return self.sprite_width * self.columns + (self.columns + 1) * self.margin

    @property
    def height(self) -> int:
        return self.sprite_height * self.lines + (self.lines + 1) * self.margin

    @property
    def cell_count(self) -> int:
        return self.columns * self.lines

    def cell_origin(self, index: int) -> Tuple[int, int]:
        """Return the (line, column) pixel position of a cell's top-left corner."""
        line, column = vec_index_to_matrix(self.columns)(index)
        start_line = line * (self.sprite_height + self.margin) + self.margin
        start_column = column * (self.sprite_width + self.margin) + self.margin
        return start_line, start_column


@dataclass
class Sheet:
    """Composited sheet pixels stored as a (height, width, 3) uint8 array."""

    width: int
    height: int
    pixels: np.ndarray

    def get_at(self, line: int, column: int) -> Color:
        return Color(*(int(v) for v in self.pixels[line, column]))


def compose_sheet(
    layout: SheetLayout,
    sprites: Sequence[Sprite],
    background: Color = BACKGROUND,
) -> Sheet:
    """Copy sprites into a background-filled sheet.

    Sprite ``i`` goes to grid cell ``divmod(i, layout.columns)``. Pixels that
    would fall outside the sheet are dropped and a warning is logged.

    Args:
        layout: Sheet geometry.
        sprites: Sprites in row-major cell order.
        background: Color of margins and empty cells.

    Returns:
        Composited sheet.

    Raises:
        SpriteSheetError: If a sprite does not match the layout dimensions.
    """
    width, height = layout.width, layout.height
    pixels = np.empty((height, width, 3), dtype=np.uint8)
    pixels[:, :] = background

    for index, sprite in enumerate(sprites):
        if sprite.width != layout.sprite_width or sprite.height != layout.sprite_height:
            raise SpriteSheetError(
                f"Sprite {index} is {sprite.width}x{sprite.height}, layout expects "
                f"{layout.sprite_width}x{layout.sprite_height}"
            )
        start_line, start_column = layout.cell_origin(index)
        end_line = min(start_line + sprite.height, height)
        end_column = min(start_column + sprite.width, width)

        if end_line - start_line < sprite.height or end_column - start_column < sprite.width:
            logger.warning(
                f"Sprite {index} clipped at ({start_line}, {start_column}); "
                f"sheet is {width}x{height}"
            )
        if end_line <= start_line or end_column <= start_column:
            continue

        arr = sprite.to_array()
        pixels[start_line:end_line, start_column:end_column] = arr[
            : end_line - start_line, : end_column - start_column
        ]

    logger.debug(f"Composited {len(sprites)} sprites into {width}x{height} sheet")
    return Sheet(width=width, height=height, pixels=pixels)
