"""Colour maths and the appearance palette derived from Settings."""

import colorsys

from models.settings import Settings

BASE_COLORS = {
    "dark": {"background": "#313338", "surface": "#2b2d31", "text": "#dbdee1"},
    "light": {"background": "#ffffff", "surface": "#f2f3f5", "text": "#313338"},
}

# Vertical gap between messages in px
COMPACT_SPACING = 2
COZY_SPACING = 16


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Convert #rrggbb (or #rgb) to an (r, g, b) tuple of 0-255 ints."""
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Not a hex colour: {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = (max(0, min(255, round(c))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def _shift_lightness(color: str, amount: float) -> str:
    r, g, b = (c / 255 for c in hex_to_rgb(color))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    l = max(0.0, min(1.0, l + amount))
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return rgb_to_hex((r * 255, g * 255, b * 255))


def lighten(color: str, amount: float) -> str:
    """Raise HLS lightness by amount (0-1), clamped to white."""
    return _shift_lightness(color, abs(amount))


def darken(color: str, amount: float) -> str:
    """Lower HLS lightness by amount (0-1), clamped to black."""
    return _shift_lightness(color, -abs(amount))


def with_alpha(color: str, alpha: float) -> str:
    """Render color as a CSS rgba() string with the given opacity."""
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be between 0 and 1, got {alpha}")
    r, g, b = hex_to_rgb(color)
    return f"rgba({r}, {g}, {b}, {alpha:g})"


def blend(foreground: str, background: str, alpha: float) -> str:
    """Alpha-composite foreground over background into an opaque colour."""
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be between 0 and 1, got {alpha}")
    fg = hex_to_rgb(foreground)
    bg = hex_to_rgb(background)
    return rgb_to_hex(tuple(f * alpha + b * (1 - alpha) for f, b in zip(fg, bg)))


def build_palette(settings: Settings) -> dict[str, str]:
    """Compute the tokens the view applies before anything is fetched.

    Args:
        settings: Current preferences.

    Returns:
        Mapping of palette token to CSS-style value.
    """
    base = BASE_COLORS[settings.theme]
    accent = settings.accent_color
    spacing = COMPACT_SPACING if settings.compact_mode else COZY_SPACING

    return {
        "accent": accent,
        "accent_hover": darken(accent, 0.08),
        "accent_active": darken(accent, 0.16),
        "accent_soft": lighten(accent, 0.15),
        "accent_muted": blend(accent, base["background"], 0.2),
        "accent_overlay": with_alpha(accent, 0.1),
        "background": base["background"],
        "surface": base["surface"],
        "text": base["text"],
        "font_size": f"{settings.font_size}px",
        "message_spacing": f"{spacing}px",
    }
