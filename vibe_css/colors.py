"""Color token resolution.

Resolves tokens such as ``red-500``, ``primary/50`` or ``white`` to CSS
color expressions using the palette and semantic aliases from
``DesignTokens``.
"""

from .config.models import DesignTokens

# Keyword -> CSS value; hex values accept an opacity suffix
SPECIAL_COLORS = {
    "transparent": "transparent",
    "current": "currentColor",
    "currentColor": "currentColor",
    "inherit": "inherit",
    "black": "#000000",
    "white": "#ffffff",
}


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert ``#rgb`` or ``#rrggbb`` to an ``(r, g, b)`` tuple.

    Raises:
        ValueError: If the value is not a 3 or 6 digit hex color.
    """
    digits = hex_color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex color: {hex_color}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def percent_to_decimal(percent: int) -> str:
    """Format a percentage as a decimal with at most two places (50 -> 0.5)."""
    return f"{percent / 100:.2f}".rstrip("0").rstrip(".")


def split_opacity(token: str) -> tuple[str, int | None]:
    """Split ``color/NN`` into the color part and an opacity percentage.

    A non-numeric or out-of-range opacity is dropped (full opacity), as is
    ``100`` since it is the same as no opacity.
    """
    slash = token.rfind("/")
    if slash <= 0:
        return token, None

    color_part, raw = token[:slash], token[slash + 1 :]
    if not (raw.isascii() and raw.isdigit()):
        return color_part, None
    percent = int(raw)
    if percent >= 100:
        return color_part, None
    return color_part, percent


class ColorResolver:
    """Resolve color tokens against a palette and semantic aliases."""

    def __init__(self, tokens: DesignTokens):
        self.tokens = tokens
        self._semantic = set(tokens.semantic_colors)

    def resolve(self, token: str) -> str | None:
        """Resolve a color token to a CSS color expression.

        Resolution order: special keyword, semantic alias, ``{alias}-foreground``,
        then ``{family}-{shade}`` palette lookup.

        Args:
            token: Color token, optionally suffixed with ``/<0-100>``.

        Returns:
            CSS color value, or None if the token is not a color.
        """
        color, percent = split_opacity(token)
        if not color:
            return None

        special = SPECIAL_COLORS.get(color)
        if special is not None:
            if percent is not None and special.startswith("#"):
                return self._rgb_with_alpha(special, percent)
            return special

        alias = self._semantic_alias(color)
        if alias is not None:
            var = f"var(--{self.tokens.variable_namespace}-{alias})"
            if percent is None:
                return var
            return f"color-mix(in srgb, {var} {percent}%, transparent)"

        hex_value = self._palette_hex(color)
        if hex_value is None:
            return None
        if percent is None:
            return hex_value
        return self._rgb_with_alpha(hex_value, percent)

    def _semantic_alias(self, color: str) -> str | None:
        if color in self._semantic:
            return color
        if color.endswith("-foreground") and color[: -len("-foreground")] in self._semantic:
            return color
        return None

    def _palette_hex(self, color: str) -> str | None:
        family, sep, shade = color.rpartition("-")
        if not sep or not family or not (shade.isascii() and shade.isdigit()):
            return None
        shades = self.tokens.colors.get(family.lower())
        if shades is None:
            return None
        return shades.get(int(shade))

    @staticmethod
    def _rgb_with_alpha(hex_value: str, percent: int) -> str:
        r, g, b = hex_to_rgb(hex_value)
        return f"rgb({r} {g} {b} / {percent_to_decimal(percent)})"
