"""Unit tests for theme module.

Tests for theme validation and Rich theme generation.
"""

import pytest
from nextclean.core.theme import ThemeColors, get_rich_theme, get_theme
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.success == "#03b971"
        assert colors.error == "#f53263"

    def test_valid_short_hex(self) -> None:
        """ThemeColors accepts #RGB codes."""
        assert ThemeColors(muted="#abc").muted == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects non-hex digits."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(text="#gggggg")


class TestRichTheme:
    """Tests for Rich theme generation."""

    def test_contains_semantic_styles(self) -> None:
        """Generated theme defines the styles used by the CLI."""
        theme = get_rich_theme()
        for name in ("info", "warning", "error", "success", "path", "size_large"):
            assert name in theme.styles

    def test_get_theme_cached(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        first = get_theme()
        assert isinstance(first, Theme)
        assert get_theme() is first
