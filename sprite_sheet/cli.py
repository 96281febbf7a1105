"""Command-line interface for sprite sheet generation."""
from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

logger = logging.getLogger("sprite_sheet")

from .config import Config, SpriteSheetError, validate_layout
from .denoise import denoise_sprite
from .generator import generate_sprite_matrix
from .palette import Palette, load_palettes
from .render import encode_png
from .seed import Seed
from .sheet import Sheet, SheetLayout, compose_sheet
from .sprite import BACKGROUND, Sprite


@dataclass
class GenerationResult:
    """Result of sheet generation."""

    seed: Seed
    sprites: List[Sprite]
    sheet: Sheet


def layout_from_config(config: Config) -> SheetLayout:
    return SheetLayout(
        sprite_width=config.sprite_width,
        sprite_height=config.sprite_height,
        columns=config.columns,
        lines=config.lines,
        margin=config.margin,
    )


def generate_sheet(
    config: Config, palettes: Sequence[Palette], seed: Seed
) -> GenerationResult:
    """Run the generation pipeline without any file I/O.

    Args:
        config: Layout configuration.
        palettes: Non-empty palette set.
        seed: Seed driving every random draw.

    Returns:
        GenerationResult with the denoised sprites and the composited sheet.
    """
    layout = layout_from_config(config)
    rng = seed.make_rng()

    sprites = generate_sprite_matrix(layout, BACKGROUND, palettes, rng)
    sprites = [denoise_sprite(sprite, BACKGROUND) for sprite in sprites]
    sheet = compose_sheet(layout, sprites, BACKGROUND)

    return GenerationResult(seed=seed, sprites=sprites, sheet=sheet)


def generate_sheet_bytes(
    config: Config, palettes: Sequence[Palette], seed: Seed
) -> bytes:
    """Generate a sheet and return it as PNG bytes."""
    result = generate_sheet(config, palettes, seed)
    return encode_png(result.sheet, config.scale)


def default_output_path(seed: Seed) -> str:
    return f"image_{seed.to_hex()}.png"


def process_config(config: Config) -> str:
    """Generate a sheet and write it to disk.

    The PNG is fully encoded before the output file is opened.

    Args:
        config: Configuration with layout, seed and output options.

    Returns:
        Path of the written image.
    """
    seed = Seed.from_hex(config.seed) if config.seed else Seed.random()
    print(f"Seed: {seed}")

    t0 = time.perf_counter()
    palettes = load_palettes(config.palettes)
    t1 = time.perf_counter()

    result = generate_sheet(config, palettes, seed)
    t2 = time.perf_counter()

    png_bytes = encode_png(result.sheet, config.scale)
    t3 = time.perf_counter()

    output_path = config.output_path or default_output_path(seed)
    with open(output_path, "wb") as f:
        f.write(png_bytes)
    t4 = time.perf_counter()

    if config.timing:
        print(
            "Timing (s): "
            f"palettes={t1 - t0:.4f}, "
            f"generate={t2 - t1:.4f}, "
            f"encode={t3 - t2:.4f}, "
            f"write={t4 - t3:.4f}, "
            f"total={t4 - t0:.4f}"
        )

    print(f"Saved to: {output_path}")
    return output_path


def _parse_int(name: str, value: str, minimum: int = 1) -> int:
    try:
        number = int(value)
    except ValueError:
        raise SpriteSheetError(f"Invalid {name} value: '{value}'")
    if number < minimum:
        if minimum == 1:
            raise SpriteSheetError(f"{name} must be a positive integer")
        raise SpriteSheetError(f"{name} must be at least {minimum}")
    return number


def parse_args(argv: Sequence[str]) -> Config:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments (including program name).

    Returns:
        Configured Config instance.

    Raises:
        SpriteSheetError: If arguments are invalid.
    """
    args = list(argv[1:])
    timing = False
    debug = False
    margin = 2
    scale = 10
    seed: Optional[str] = None
    palettes = "default"
    output_path = ""
    positional: List[str] = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--timing":
            timing = True
            i += 1
        elif arg == "--debug":
            debug = True
            i += 1
        elif arg in ("-m", "--margin", "-s", "--seed", "--palettes", "--scale", "-o", "--output"):
            if i + 1 >= len(args):
                raise SpriteSheetError(_usage_message())
            value = args[i + 1]
            if arg in ("-m", "--margin"):
                margin = _parse_int("margin", value, minimum=0)
            elif arg in ("-s", "--seed"):
                # Fail on a malformed seed before any work is done
                seed = Seed.from_hex(value).to_hex()
            elif arg == "--palettes":
                palettes = value
            elif arg == "--scale":
                scale = _parse_int("scale", value)
            else:
                output_path = value
            i += 2
        else:
            positional.append(arg)
            i += 1

    if len(positional) != 4:
        raise SpriteSheetError(_usage_message())

    sprite_width = _parse_int("sprite-width", positional[0])
    sprite_height = _parse_int("sprite-height", positional[1])
    columns = _parse_int("sprite-columns", positional[2])
    lines = _parse_int("sprite-lines", positional[3])
    validate_layout(sprite_width, sprite_height, columns, lines, margin)

    config = Config(
        sprite_width=sprite_width,
        sprite_height=sprite_height,
        columns=columns,
        lines=lines,
        margin=margin,
        seed=seed,
        palettes=palettes,
        output_path=output_path,
        scale=scale,
        timing=timing,
    )

    # Enable debug logging if requested
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s"
        )
        logging.getLogger("sprite_sheet").setLevel(logging.DEBUG)

    return config


def _usage_message() -> str:
    """Return usage message string."""
    return (
        "Usage: python sprite_sheet.py SPRITE_WIDTH SPRITE_HEIGHT "
        "SPRITE_COLUMNS SPRITE_LINES [-m|--margin N] [-s|--seed HEX] "
        "[--palettes NAME] [--scale N] [-o|--output PATH] [--timing] [--debug]"
    )


def main(argv: Sequence[str]) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        config = parse_args(argv)
        process_config(config)
        return 0
    except SpriteSheetError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Generation error: {exc}", file=sys.stderr)
        return 1


def console_main() -> int:
    """Entry point for the installed ``sprite-sheet`` script."""
    return main(sys.argv)
