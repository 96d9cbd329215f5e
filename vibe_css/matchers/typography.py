"""Font, text, line-height, tracking, wrapping and clamping utilities."""

from ..rule import CascadeOrder, CssRule
from .base import BaseMatcher, declare, parse_int

FONT_FAMILIES = {
    "sans": 'ui-sans-serif, system-ui, sans-serif, "Apple Color Emoji", '
    '"Segoe UI Emoji", "Segoe UI Symbol", "Noto Color Emoji"',
    "serif": 'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif',
    "mono": 'ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, '
    '"Liberation Mono", "Courier New", monospace',
}

TEXT_ALIGN = ("left", "center", "right", "justify", "start", "end")

TEXT_TRANSFORM = {
    "uppercase": "uppercase",
    "lowercase": "lowercase",
    "capitalize": "capitalize",
    "normal-case": "none",
}

TEXT_DECORATION = {
    "underline": "underline",
    "overline": "overline",
    "line-through": "line-through",
    "no-underline": "none",
}

TEXT_WRAP = ("wrap", "nowrap", "balance", "pretty")

TEXT_OVERFLOW = {"ellipsis": "ellipsis", "clip": "clip"}

LEADING = {
    "none": "1",
    "tight": "1.25",
    "snug": "1.375",
    "normal": "1.5",
    "relaxed": "1.625",
    "loose": "2",
}

TRACKING = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

WHITESPACE = ("normal", "nowrap", "pre", "pre-line", "pre-wrap", "break-spaces")

KEYWORDS = {
    "text-transparent": "color: transparent; -webkit-text-fill-color: transparent;",
    "truncate": "overflow: hidden; text-overflow: ellipsis; white-space: nowrap;",
    "italic": "font-style: italic;",
    "not-italic": "font-style: normal;",
    "font-italic": "font-style: italic;",
    "font-not-italic": "font-style: normal;",
    "break-normal": "overflow-wrap: normal; word-break: normal;",
    "break-words": "overflow-wrap: break-word;",
    "break-all": "word-break: break-all;",
    "break-keep": "word-break: keep-all;",
}


class TypographyMatcher(BaseMatcher):
    """Typography utilities.

    ``text-*`` names that are not font sizes or text keywords fall through
    to the color matcher.
    """

    @property
    def name(self) -> str:
        return "typography"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.TYPOGRAPHY

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        if name in KEYWORDS:
            return self.rule(selector, KEYWORDS[name])
        if name in TEXT_TRANSFORM:
            return self.rule(selector, declare("text-transform", TEXT_TRANSFORM[name]))
        if name in TEXT_DECORATION:
            return self.rule(
                selector, declare("text-decoration-line", TEXT_DECORATION[name])
            )

        if name.startswith("text-"):
            return self._text(name[5:], selector)
        if name.startswith("font-"):
            return self._font(name[5:], selector)
        if name.startswith("leading-"):
            key = name[8:]
            value = LEADING.get(key) or self.tokens.spacing.get(key)
            return None if value is None else self.rule(selector, declare("line-height", value))
        if name.startswith("tracking-"):
            return self.lookup(name[9:], TRACKING, "letter-spacing", selector)
        if name.startswith("whitespace-"):
            key = name[11:]
            return self.rule(selector, declare("white-space", key)) if key in WHITESPACE else None
        if name.startswith("line-clamp-"):
            return self._line_clamp(name[11:], selector)
        return None

    def _text(self, key: str, selector: str) -> list[CssRule] | None:
        font_size = self.tokens.font_sizes.get(key)
        if font_size is not None:
            size, line_height = font_size
            return self.rule(selector, f"font-size: {size}; line-height: {line_height};")
        if key in TEXT_ALIGN:
            return self.rule(selector, declare("text-align", key))
        if key in TEXT_TRANSFORM:
            return self.rule(selector, declare("text-transform", TEXT_TRANSFORM[key]))
        if key in TEXT_DECORATION:
            return self.rule(selector, declare("text-decoration-line", TEXT_DECORATION[key]))
        if key in TEXT_WRAP:
            return self.rule(selector, declare("text-wrap", key))
        if key in TEXT_OVERFLOW:
            return self.rule(selector, declare("text-overflow", TEXT_OVERFLOW[key]))
        return None

    def _font(self, key: str, selector: str) -> list[CssRule] | None:
        weight = self.tokens.font_weights.get(key)
        if weight is not None:
            return self.rule(selector, declare("font-weight", weight))
        family = FONT_FAMILIES.get(key)
        if family is not None:
            return self.rule(selector, declare("font-family", family))
        return None

    def _line_clamp(self, key: str, selector: str) -> list[CssRule] | None:
        if key == "none":
            return self.rule(
                selector,
                "overflow: visible; display: block; -webkit-box-orient: horizontal; "
                "-webkit-line-clamp: none;",
            )
        lines = parse_int(key)
        if lines is None or lines == 0:
            return None
        return self.rule(
            selector,
            "display: -webkit-box; -webkit-box-orient: vertical; "
            f"-webkit-line-clamp: {lines}; overflow: hidden;",
        )
