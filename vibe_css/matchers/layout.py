"""Display, position, inset, z-index, overflow and visibility utilities."""

from ..rule import CascadeOrder, CssRule
from .base import BaseMatcher, declare, negate

DISPLAY = {
    "hidden": "none",
    "block": "block",
    "inline": "inline",
    "inline-block": "inline-block",
    "flex": "flex",
    "inline-flex": "inline-flex",
    "grid": "grid",
    "inline-grid": "inline-grid",
    "contents": "contents",
    "flow-root": "flow-root",
    "table": "table",
    "table-row": "table-row",
    "table-cell": "table-cell",
}

POSITION = ("static", "fixed", "absolute", "relative", "sticky")

OVERFLOW_VALUES = ("auto", "hidden", "clip", "visible", "scroll")

OBJECT_FIT = {
    "object-contain": "contain",
    "object-cover": "cover",
    "object-fill": "fill",
    "object-none": "none",
    "object-scale-down": "scale-down",
}

VISIBILITY = {
    "visible": "visible",
    "invisible": "hidden",
    "collapse": "collapse",
}

# Longest prefixes first so inset-x- is not read as inset-
INSET_PROPERTIES = (
    ("inset-x-", ("left", "right")),
    ("inset-y-", ("top", "bottom")),
    ("inset-", ("inset",)),
    ("top-", ("top",)),
    ("right-", ("right",)),
    ("bottom-", ("bottom",)),
    ("left-", ("left",)),
)


class DisplayMatcher(BaseMatcher):
    """``display`` keywords: block, flex, grid, hidden, ..."""

    @property
    def name(self) -> str:
        return "display"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.LAYOUT

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        return self.lookup(name, DISPLAY, "display", selector)


class LayoutMatcher(BaseMatcher):
    """Positioning and box layout utilities."""

    @property
    def name(self) -> str:
        return "layout"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.LAYOUT

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        # Marker class for group-* variants; carries no declarations
        if name == "group":
            return self.rule(selector, "")

        if name in POSITION:
            return self.rule(selector, declare("position", name))

        if name in VISIBILITY:
            return self.rule(selector, declare("visibility", VISIBILITY[name]))

        if name in OBJECT_FIT:
            return self.rule(selector, declare("object-fit", OBJECT_FIT[name]))

        if name.startswith("overflow-"):
            return self._overflow(name[len("overflow-") :], selector)

        if name.startswith("z-"):
            return self.lookup(name[2:], self.tokens.z_index, "z-index", selector)

        return self._inset(name, selector)

    def _overflow(self, rest: str, selector: str) -> list[CssRule] | None:
        prop = "overflow"
        if rest.startswith(("x-", "y-")):
            prop = f"overflow-{rest[0]}"
            rest = rest[2:]
        if rest not in OVERFLOW_VALUES:
            return None
        return self.rule(selector, declare(prop, rest))

    def _inset(self, name: str, selector: str) -> list[CssRule] | None:
        negative = name.startswith("-")
        base = name[1:] if negative else name
        for prefix, properties in INSET_PROPERTIES:
            if not base.startswith(prefix):
                continue
            key = base[len(prefix) :]
            value = self._inset_value(key)
            if value is None or (negative and value == "auto"):
                return None
            if negative:
                value = negate(value)
            return self.rule(selector, declare(properties, value))
        return None

    def _inset_value(self, key: str) -> str | None:
        if key == "auto":
            return "auto"
        if key == "full":
            return "100%"
        sizing = self.tokens.sizing.get(key)
        if sizing is not None and sizing.endswith("%"):
            return sizing
        return self.tokens.spacing.get(key)
