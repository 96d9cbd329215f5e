"""Padding, margin, space-between and sizing utilities."""

from ..rule import CascadeOrder, CssRule
from .base import BaseMatcher, declare, negate

# Checked in order; the bare "p-"/"m-" prefixes cannot shadow the others
PADDING_PREFIXES = (
    ("p-", ("padding",)),
    ("px-", ("padding-left", "padding-right")),
    ("py-", ("padding-top", "padding-bottom")),
    ("pt-", ("padding-top",)),
    ("pr-", ("padding-right",)),
    ("pb-", ("padding-bottom",)),
    ("pl-", ("padding-left",)),
    ("ps-", ("padding-inline-start",)),
    ("pe-", ("padding-inline-end",)),
)

MARGIN_PREFIXES = tuple(
    ("m" + prefix[1:], tuple(prop.replace("padding", "margin") for prop in props))
    for prefix, props in PADDING_PREFIXES
)

SIZING_PREFIXES = (
    ("min-w-", ("min-width",), False),
    ("min-h-", ("min-height",), True),
    ("max-h-", ("max-height",), True),
    ("size-", ("width", "height"), False),
    ("w-", ("width",), False),
    ("h-", ("height",), True),
)

MAX_WIDTHS = {
    "none": "none",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
    "prose": "65ch",
    "screen-sm": "640px",
    "screen-md": "768px",
    "screen-lg": "1024px",
    "screen-xl": "1280px",
    "screen-2xl": "1536px",
}


class SpacingMatcher(BaseMatcher):
    """Padding and margin (with negatives and ``auto``) and space-x/y."""

    @property
    def name(self) -> str:
        return "spacing"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.SPACING

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        for prefix, properties in PADDING_PREFIXES:
            if name.startswith(prefix):
                value = self.tokens.spacing.get(name[len(prefix) :])
                if value is None:
                    return None
                return self.rule(selector, declare(properties, value))

        negative = name.startswith("-")
        base = name[1:] if negative else name
        for prefix, properties in MARGIN_PREFIXES:
            if base.startswith(prefix):
                value = self._margin_value(base[len(prefix) :], negative)
                if value is None:
                    return None
                return self.rule(selector, declare(properties, value))

        if name.startswith(("space-x-", "space-y-")):
            return self._space_between(name[6], name[8:], selector)
        return None

    def _margin_value(self, key: str, negative: bool) -> str | None:
        if key == "auto":
            return None if negative else "auto"
        value = self.tokens.spacing.get(key)
        if value is None:
            return None
        return negate(value) if negative else value

    def _space_between(self, axis: str, key: str, selector: str) -> list[CssRule] | None:
        size = self.tokens.spacing.get(key)
        if size is None:
            return None
        if axis == "x":
            end, start = "margin-right", "margin-left"
        else:
            end, start = "margin-bottom", "margin-top"
        reverse = f"--tw-space-{axis}-reverse"
        declarations = (
            f"{reverse}: 0; "
            f"{end}: calc({size} * var({reverse})); "
            f"{start}: calc({size} * calc(1 - var({reverse})));"
        )
        return self.rule(f"{selector} > :not([hidden]) ~ :not([hidden])", declarations)


class SizingMatcher(BaseMatcher):
    """Width, height, min/max and ``size-`` utilities."""

    @property
    def name(self) -> str:
        return "sizing"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.SIZING

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        if name.startswith("max-w-"):
            key = name[len("max-w-") :]
            value = MAX_WIDTHS.get(key) or self._size_value(key, is_height=False)
            return None if value is None else self.rule(selector, declare("max-width", value))

        for prefix, properties, is_height in SIZING_PREFIXES:
            if name.startswith(prefix):
                value = self._size_value(name[len(prefix) :], is_height)
                if value is None:
                    return None
                return self.rule(selector, declare(properties, value))
        return None

    def _size_value(self, key: str, is_height: bool) -> str | None:
        if is_height and key in self.tokens.height_overrides:
            return self.tokens.height_overrides[key]
        value = self.tokens.sizing.get(key)
        if value is not None:
            return value
        return self.tokens.spacing.get(key)
