"""Palette file parsing and resolution utilities."""
from __future__ import annotations

import logging
import os
from typing import List

from .config import SpriteSheetError
from .sprite import Color

logger = logging.getLogger("sprite_sheet")

Palette = List[Color]

PALETTES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "palettes")


class PaletteParseError(SpriteSheetError):
    """Raised when palette data cannot be parsed or found."""

    pass


def _parse_channel(token: str, line_no: int) -> int:
    # int() would also accept signs, underscores and non-ASCII digits
    if not (token.isascii() and token.isdigit()):
        raise PaletteParseError(
            f"Invalid color channel '{token}' on line {line_no}"
        )
    value = int(token)
    if not 0 <= value <= 255:
        raise PaletteParseError(
            f"Color channel {value} out of range 0-255 on line {line_no}"
        )
    return value


def parse_palettes(text: str) -> List[Palette]:
    """Parse a palette set from text.

    Blank lines separate palettes. Every other line holds three
    whitespace-separated integers (R G B) in the range 0-255.

    Args:
        text: Palette file contents.

    Returns:
        List of palettes in file order. Empty if the text holds no colors.

    Raises:
        PaletteParseError: If a line does not hold three valid channels.
    """
    palettes: List[Palette] = []
    current: Palette = []

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            if current:
                palettes.append(current)
                current = []
            continue

        tokens = line.split()
        if len(tokens) != 3:
            raise PaletteParseError(
                f"Expected 3 color channels on line {line_no}, got {len(tokens)}"
            )
        r, g, b = (_parse_channel(t, line_no) for t in tokens)
        current.append(Color(r, g, b))

    if current:
        palettes.append(current)

    return palettes


def resolve_palette_path(palette_name: str) -> str:
    """Resolve a palette name to its file path.

    Args:
        palette_name: Bundled palette name or path to a palette file.

    Returns:
        Path to the palette file.

    Raises:
        PaletteParseError: If the palette is not found.
    """
    if os.path.isfile(palette_name):
        return palette_name

    candidate = palette_name
    if not candidate.lower().endswith(".txt"):
        candidate = f"{candidate}.txt"
    candidate_path = os.path.join(PALETTES_DIR, candidate)

    if os.path.isfile(candidate_path):
        return candidate_path

    available: List[str] = []
    if os.path.isdir(PALETTES_DIR):
        for name in os.listdir(PALETTES_DIR):
            if name.lower().endswith(".txt"):
                available.append(os.path.splitext(name)[0])
    available.sort()
    hint = f" Available palettes: {', '.join(available)}" if available else ""
    raise PaletteParseError(f"Palette not found: {palette_name}.{hint}")


def load_palettes(palette_name: str) -> List[Palette]:
    """Load a palette set from a file.

    Args:
        palette_name: Bundled palette name or path to a palette file.

    Returns:
        Non-empty list of palettes.

    Raises:
        PaletteParseError: If the file is missing, malformed or empty.
    """
    palette_path = resolve_palette_path(palette_name)
    with open(palette_path, encoding="utf-8") as f:
        text = f.read()

    try:
        palettes = parse_palettes(text)
    except PaletteParseError as exc:
        raise PaletteParseError(f"{palette_path}: {exc}") from exc

    if not palettes:
        raise PaletteParseError(f"No palettes found in: {palette_path}")
    logger.debug(f"Loaded {len(palettes)} palettes from {palette_path}")
    return palettes
