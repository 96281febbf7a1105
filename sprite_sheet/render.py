"""Rasterize composited sheets to images."""
from __future__ import annotations

import io

from PIL import Image

from .config import SpriteSheetError
from .sheet import Sheet


def sheet_to_image(sheet: Sheet) -> Image.Image:
    """Convert a sheet pixel buffer into an RGB image."""
    # uint8 (H, W, 3) arrays map to RGB
    return Image.fromarray(sheet.pixels)


def upscale(img: Image.Image, scale: int) -> Image.Image:
    """Enlarge an image by an integer factor, keeping pixel edges sharp.

    Args:
        img: Image to enlarge.
        scale: Positive scale factor.

    Returns:
        Resized image (the input itself when scale is 1).

    Raises:
        SpriteSheetError: If scale is not positive.
    """
    if scale <= 0:
        raise SpriteSheetError("Scale must be a positive integer")
    if scale == 1:
        return img
    width, height = img.size
    return img.resize((width * scale, height * scale), resample=Image.NEAREST)


def encode_png(sheet: Sheet, scale: int = 1) -> bytes:
    """Render a sheet as PNG bytes.

    Args:
        sheet: Composited sheet.
        scale: Nearest-neighbor upscale factor.

    Returns:
        PNG image bytes.
    """
    img = upscale(sheet_to_image(sheet), scale)
    out_buf = io.BytesIO()
    img.save(out_buf, format="PNG")
    return out_buf.getvalue()
