"""Seed values driving all sprite sheet randomness."""
from __future__ import annotations

import os
import random
import string

from .config import SpriteSheetError

SEED_SIZE = 32
SEED_HEX_LENGTH = SEED_SIZE * 2

_HEX_DIGITS = frozenset(string.hexdigits)


class SeedParseError(SpriteSheetError):
    """Base exception for malformed seed strings."""

    pass


class InvalidSeedSize(SeedParseError):
    """Raised when a seed does not hold exactly 32 bytes."""

    def __init__(self, length: int) -> None:
        super().__init__(
            f"Invalid seed size: expected {SEED_HEX_LENGTH} hex characters, "
            f"got {length}"
        )
        self.length = length


class InvalidSeedByte(SeedParseError):
    """Raised when a two-character chunk of a seed is not hexadecimal."""

    def __init__(self, pair: str) -> None:
        super().__init__(f"Invalid seed byte: '{pair}'")
        self.pair = pair


class Seed:
    """A 32-byte seed with a 64-character lowercase hex representation."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        if len(data) != SEED_SIZE:
            raise InvalidSeedSize(len(data) * 2)
        self._data = bytes(data)

    @property
    def data(self) -> bytes:
        return self._data

    @classmethod
    def from_hex(cls, value: str) -> "Seed":
        """Parse a seed from its hex representation.

        Args:
            value: Exactly 64 hexadecimal characters (any case).

        Returns:
            Parsed seed.

        Raises:
            InvalidSeedSize: If the string is not 64 characters long.
            InvalidSeedByte: If a two-character chunk is not hexadecimal.
        """
        if len(value) != SEED_HEX_LENGTH:
            raise InvalidSeedSize(len(value))

        data = bytearray(SEED_SIZE)
        for i in range(SEED_SIZE):
            pair = value[2 * i:2 * i + 2]
            # int(..., 16) would also accept signs, whitespace and underscores
            if not all(ch in _HEX_DIGITS for ch in pair):
                raise InvalidSeedByte(pair)
            data[i] = int(pair, 16)
        return cls(bytes(data))

    @classmethod
    def random(cls) -> "Seed":
        """Draw a fresh seed from the operating system entropy source."""
        return cls(os.urandom(SEED_SIZE))

    def to_hex(self) -> str:
        return self._data.hex()

    def make_rng(self) -> random.Random:
        """Create the pseudo-random generator for this seed.

        The generator is seeded with the big-endian integer value of the
        seed bytes. Integer seeding and ``random()`` output are stable across
        platforms and Python versions, so the same seed always yields the
        same draw sequence.
        """
        return random.Random(int.from_bytes(self._data, "big"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seed):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"Seed('{self.to_hex()}')"
