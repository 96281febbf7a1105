"""Tests for render module."""
from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from sprite_sheet.config import SpriteSheetError
from sprite_sheet.render import encode_png, sheet_to_image, upscale
from sprite_sheet.sheet import SheetLayout, compose_sheet
from sprite_sheet.sprite import BACKGROUND, Color, Sprite

RED = Color(255, 0, 0)


@pytest.fixture
def red_sheet():
    """A 6x6 sheet holding one 2x2 red sprite."""
    layout = SheetLayout(2, 2, columns=1, lines=1, margin=2)
    return compose_sheet(layout, [Sprite.from_color(2, 2, RED)], BACKGROUND)


class TestSheetToImage:
    """Tests for sheet_to_image function."""

    def test_size_and_mode(self, red_sheet) -> None:
        img = sheet_to_image(red_sheet)
        assert img.mode == "RGB"
        assert img.size == (6, 6)

    def test_pixels(self, red_sheet) -> None:
        img = sheet_to_image(red_sheet)
        assert img.getpixel((2, 2)) == (255, 0, 0)
        assert img.getpixel((0, 0)) == (0, 0, 0)


class TestUpscale:
    """Tests for upscale function."""

    def test_scales_dimensions(self, red_sheet) -> None:
        img = upscale(sheet_to_image(red_sheet), 10)
        assert img.size == (60, 60)

    def test_nearest_neighbor(self, red_sheet) -> None:
        """Each source pixel becomes a solid scale x scale block."""
        arr = np.array(upscale(sheet_to_image(red_sheet), 3))
        block = arr[6:12, 6:12]
        assert np.all(block == (255, 0, 0))
        assert np.all(arr[0:6, :] == 0)

    def test_scale_one(self, red_sheet) -> None:
        img = sheet_to_image(red_sheet)
        assert upscale(img, 1) is img

    def test_invalid_scale(self, red_sheet) -> None:
        with pytest.raises(SpriteSheetError, match="positive"):
            upscale(sheet_to_image(red_sheet), 0)


class TestEncodePng:
    """Tests for encode_png function."""

    def test_png_signature(self, red_sheet) -> None:
        data = encode_png(red_sheet)
        assert data[:8] == b'\x89PNG\r\n\x1a\n'

    def test_decodes_to_scaled_sheet(self, red_sheet) -> None:
        img = Image.open(io.BytesIO(encode_png(red_sheet, 4)))
        assert img.size == (24, 24)
        assert img.convert("RGB").getpixel((8, 8)) == (255, 0, 0)
        assert img.convert("RGB").getpixel((7, 7)) == (0, 0, 0)
