"""Tests for config module."""
from __future__ import annotations

import pytest

from sprite_sheet.config import Config, SpriteSheetError, validate_layout


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self, default_config: Config) -> None:
        """Config should have sensible defaults."""
        config = default_config
        assert config.margin == 2
        assert config.scale == 10
        assert config.seed is None
        assert config.palettes == "default"
        assert config.output_path == ""
        assert config.timing is False

    def test_custom_values(self) -> None:
        """Config should accept custom values."""
        config = Config(sprite_width=8, sprite_height=12, columns=3, lines=4, margin=0)
        assert config.sprite_width == 8
        assert config.sprite_height == 12
        assert config.columns == 3
        assert config.lines == 4
        assert config.margin == 0


class TestValidateLayout:
    """Tests for validate_layout function."""

    def test_valid_layout(self) -> None:
        """Should accept valid layouts."""
        validate_layout(16, 16, 8, 8, 2)
        validate_layout(1, 1, 1, 1, 0)

    def test_zero_width(self) -> None:
        with pytest.raises(SpriteSheetError, match="Sprite dimensions"):
            validate_layout(0, 16, 8, 8, 2)

    def test_zero_height(self) -> None:
        with pytest.raises(SpriteSheetError, match="Sprite dimensions"):
            validate_layout(16, 0, 8, 8, 2)

    def test_zero_columns(self) -> None:
        with pytest.raises(SpriteSheetError, match="columns and lines"):
            validate_layout(16, 16, 0, 8, 2)

    def test_zero_lines(self) -> None:
        with pytest.raises(SpriteSheetError, match="columns and lines"):
            validate_layout(16, 16, 8, 0, 2)

    def test_negative_margin(self) -> None:
        with pytest.raises(SpriteSheetError, match="Margin"):
            validate_layout(16, 16, 8, 8, -1)


class TestSpriteSheetError:
    """Tests for SpriteSheetError exception."""

    def test_is_exception(self) -> None:
        """Should be a proper Exception subclass."""
        assert issubclass(SpriteSheetError, Exception)

    def test_message(self) -> None:
        """Should preserve error message."""
        error = SpriteSheetError("test message")
        assert str(error) == "test message"
