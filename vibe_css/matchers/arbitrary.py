"""Arbitrary-value utilities such as ``w-[500px]`` or ``px-[3px]``."""

import re

from ..rule import CascadeOrder, CssRule
from .base import BaseMatcher, declare

ARBITRARY_VALUE = re.compile(r"^(.+)-\[(.+)\]$")

# key -> ("prop|prop", bucket); "|" fans one value out to several properties
ARBITRARY_PROPERTIES: dict[str, tuple[str, CascadeOrder]] = {
    "w": ("width", CascadeOrder.SIZING),
    "h": ("height", CascadeOrder.SIZING),
    "min-w": ("min-width", CascadeOrder.SIZING),
    "min-h": ("min-height", CascadeOrder.SIZING),
    "max-w": ("max-width", CascadeOrder.SIZING),
    "max-h": ("max-height", CascadeOrder.SIZING),
    "size": ("width|height", CascadeOrder.SIZING),
    "p": ("padding", CascadeOrder.SPACING),
    "pt": ("padding-top", CascadeOrder.SPACING),
    "pr": ("padding-right", CascadeOrder.SPACING),
    "pb": ("padding-bottom", CascadeOrder.SPACING),
    "pl": ("padding-left", CascadeOrder.SPACING),
    "px": ("padding-left|padding-right", CascadeOrder.SPACING),
    "py": ("padding-top|padding-bottom", CascadeOrder.SPACING),
    "m": ("margin", CascadeOrder.SPACING),
    "mt": ("margin-top", CascadeOrder.SPACING),
    "mr": ("margin-right", CascadeOrder.SPACING),
    "mb": ("margin-bottom", CascadeOrder.SPACING),
    "ml": ("margin-left", CascadeOrder.SPACING),
    "mx": ("margin-left|margin-right", CascadeOrder.SPACING),
    "my": ("margin-top|margin-bottom", CascadeOrder.SPACING),
    "gap": ("gap", CascadeOrder.FLEXBOX),
    "gap-x": ("column-gap", CascadeOrder.FLEXBOX),
    "gap-y": ("row-gap", CascadeOrder.FLEXBOX),
    "text": ("font-size", CascadeOrder.TYPOGRAPHY),
    "leading": ("line-height", CascadeOrder.TYPOGRAPHY),
    "tracking": ("letter-spacing", CascadeOrder.TYPOGRAPHY),
    "bg": ("background-color", CascadeOrder.BACKGROUND),
    "border": ("border-width", CascadeOrder.BORDER),
    "rounded": ("border-radius", CascadeOrder.BORDER),
    "top": ("top", CascadeOrder.LAYOUT),
    "right": ("right", CascadeOrder.LAYOUT),
    "bottom": ("bottom", CascadeOrder.LAYOUT),
    "left": ("left", CascadeOrder.LAYOUT),
    "inset": ("inset", CascadeOrder.LAYOUT),
    "z": ("z-index", CascadeOrder.LAYOUT),
    "opacity": ("opacity", CascadeOrder.EFFECTS),
    "grid-cols": ("grid-template-columns", CascadeOrder.GRID),
    "grid-rows": ("grid-template-rows", CascadeOrder.GRID),
    "col-span": ("grid-column", CascadeOrder.GRID),
    "row-span": ("grid-row", CascadeOrder.GRID),
}


class ArbitraryValueMatcher(BaseMatcher):
    """Catch-all ``{key}-[{value}]`` matcher with a whitelisted key set.

    The bracket value is emitted verbatim.
    """

    @property
    def name(self) -> str:
        return "arbitrary"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.BASE

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        m = ARBITRARY_VALUE.match(name)
        if not m:
            return None
        entry = ARBITRARY_PROPERTIES.get(m.group(1))
        if entry is None:
            return None
        properties, order = entry
        return self.rule(
            selector, declare(tuple(properties.split("|")), m.group(2)), order=order
        )
