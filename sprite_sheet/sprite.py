"""Sprite pixel buffers."""
from __future__ import annotations

from typing import Callable, List, NamedTuple, Sequence, Tuple

import numpy as np

from .config import SpriteSheetError


class Color(NamedTuple):
    """An RGB color with 8-bit channels."""

    r: int
    g: int
    b: int


BACKGROUND = Color(0, 0, 0)


def matrix_index_to_vec(width: int) -> Callable[[int, int], int]:
    """Return a converter from (line, column) to a row-major index."""
    if width <= 0:
        raise SpriteSheetError("Width must be positive")
    return lambda line, column: width * line + column


def vec_index_to_matrix(width: int) -> Callable[[int], Tuple[int, int]]:
    """Return a converter from a row-major index to (line, column)."""
    if width <= 0:
        raise SpriteSheetError("Width must be positive")
    return lambda index: divmod(index, width)


def _checked_color(value: Sequence[int]) -> Color:
    """Convert a channel triple to a Color, enforcing the 8-bit range."""
    color = Color(*value)
    for channel in color:
        if not isinstance(channel, int) or not 0 <= channel <= 255:
            raise SpriteSheetError(f"Invalid color {tuple(color)}: channels must be 0-255")
    return color


class Sprite:
    """Fixed-size sprite with row-major pixel storage."""

    def __init__(self, width: int, height: int, data: Sequence[Color]) -> None:
        if width <= 0 or height <= 0:
            raise SpriteSheetError(
                f"Sprite dimensions must be positive, got {width}x{height}"
            )
        if len(data) != width * height:
            raise SpriteSheetError(
                f"Sprite data holds {len(data)} pixels, "
                f"expected {width * height}"
            )
        self.width = width
        self.height = height
        self.data: List[Color] = [_checked_color(c) for c in data]
        self._to_vec = matrix_index_to_vec(width)

    @classmethod
    def from_color(cls, width: int, height: int, color: Color = BACKGROUND) -> "Sprite":
        """Create a sprite filled with a single color."""
        return cls(width, height, [color] * (width * height))

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Sprite":
        """Create a sprite from a (height, width, 3) uint8 array."""
        height, width = arr.shape[:2]
        flat = arr.reshape(-1, 3).tolist()
        return cls(width, height, [Color(*px) for px in flat])

    def _index(self, line: int, column: int) -> int:
        if not (0 <= line < self.height and 0 <= column < self.width):
            raise IndexError(
                f"Pixel ({line}, {column}) outside {self.width}x{self.height} sprite"
            )
        return self._to_vec(line, column)

    def get_at(self, line: int, column: int) -> Color:
        return self.data[self._index(line, column)]

    def set_at(self, line: int, column: int, color: Color) -> None:
        self.data[self._index(line, column)] = _checked_color(color)

    def to_array(self) -> np.ndarray:
        """Return a (height, width, 3) uint8 copy of the pixels."""
        arr = np.array(self.data, dtype=np.uint8)
        return arr.reshape(self.height, self.width, 3)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sprite):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.data == other.data
        )

    def __repr__(self) -> str:
        return f"Sprite(width={self.width}, height={self.height})"
