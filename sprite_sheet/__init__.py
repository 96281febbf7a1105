"""Sprite Sheet - Procedurally generate symmetric pixel-art sprite sheets.

This package generates grids of small mirror-symmetric sprites drawn from
color palettes, removes isolated pixels, and composites them into a single
sheet. Every sheet is reproducible from its 32-byte seed.

Example:
    from sprite_sheet import Config, Seed, generate_sheet_bytes, load_palettes

    config = Config(sprite_width=16, sprite_height=16, columns=8, lines=8)
    palettes = load_palettes("default")
    seed = Seed.random()

    png_bytes = generate_sheet_bytes(config, palettes, seed)

    with open(f"image_{seed}.png", "wb") as f:
        f.write(png_bytes)

To work with the pixel buffer directly, use generate_sheet:

    from sprite_sheet import generate_sheet

    result = generate_sheet(config, palettes, seed)
    print(f"Sheet: {result.sheet.width}x{result.sheet.height} pixels")

For debug logging, enable with:

    import logging
    logging.getLogger("sprite_sheet").setLevel(logging.DEBUG)
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

# Package logger - disabled by default, enable with logging.getLogger("sprite_sheet").setLevel(logging.DEBUG)
logger = logging.getLogger("sprite_sheet")
logger.addHandler(logging.NullHandler())
from .cli import (
    GenerationResult,
    generate_sheet,
    generate_sheet_bytes,
    main,
    process_config,
)
from .config import Config, SpriteSheetError
from .denoise import denoise_sprite, remove_lonely_pixels
from .generator import generate_sprite, generate_sprite_matrix
from .palette import PaletteParseError, load_palettes, parse_palettes
from .seed import InvalidSeedByte, InvalidSeedSize, Seed, SeedParseError
from .sheet import Sheet, SheetLayout, compose_sheet
from .sprite import BACKGROUND, Color, Sprite

__all__ = [
    "Config",
    "SpriteSheetError",
    "GenerationResult",
    "main",
    "process_config",
    "generate_sheet",
    "generate_sheet_bytes",
    # Seeds
    "Seed",
    "SeedParseError",
    "InvalidSeedSize",
    "InvalidSeedByte",
    # Palettes
    "PaletteParseError",
    "load_palettes",
    "parse_palettes",
    # Sprites and sheets
    "BACKGROUND",
    "Color",
    "Sprite",
    "generate_sprite",
    "generate_sprite_matrix",
    "remove_lonely_pixels",
    "denoise_sprite",
    "Sheet",
    "SheetLayout",
    "compose_sheet",
]

__version__ = "1.0.0"
