"""Color palette for nextclean output.

Every Rich console in the application shares the theme built here, so
tables and status lines use the same style names.
"""

import re
from functools import cache

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from rich.theme import Theme

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for the nextclean styles."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Report tables color cache sizes by magnitude
    size_large: str = "#f53263"
    size_medium: str = "#faf870"
    size_small: str = "#03b971"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: ValidationInfo) -> str:
        if not isinstance(v, str):
            raise ValueError(f"{info.field_name}: color must be a string")
        color = v.strip()
        if not color.startswith("#"):
            raise ValueError(f"{info.field_name}: color must start with '#'")
        digits = color[1:]
        if len(digits) not in (3, 6):
            raise ValueError(f"{info.field_name}: color must be #RGB or #RRGGBB format")
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"{info.field_name}: invalid hex color '{color}'")
        return color


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme from a palette.

    Args:
        colors: Palette to use; the defaults when None.

    Returns:
        Theme defining the semantic, size and table styles.
    """
    palette = colors or ThemeColors()
    return Theme(
        {
            "text": palette.text,
            "muted": palette.muted,
            "dim": palette.muted,
            "header": palette.header,
            "bold_header": f"bold {palette.header}",
            "border": palette.border,
            "path": f"bold {palette.text}",
            "success": palette.success,
            "warning": palette.warning,
            "error": f"bold {palette.error}",
            "info": palette.info,
            "size_large": f"bold {palette.size_large}",
            "size_medium": palette.size_medium,
            "size_small": palette.size_small,
        }
    )


@cache
def get_theme() -> Theme:
    """Return the shared theme, built on first use."""
    return get_rich_theme()
