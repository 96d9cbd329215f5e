"""Flexbox and grid utilities."""

import re

from ..rule import CascadeOrder, CssRule
from .base import BaseMatcher, declare, parse_int

FLEX_KEYWORDS = {
    "flex-row": "flex-direction: row;",
    "flex-row-reverse": "flex-direction: row-reverse;",
    "flex-col": "flex-direction: column;",
    "flex-col-reverse": "flex-direction: column-reverse;",
    "flex-wrap": "flex-wrap: wrap;",
    "flex-wrap-reverse": "flex-wrap: wrap-reverse;",
    "flex-nowrap": "flex-wrap: nowrap;",
    "flex-1": "flex: 1 1 0%;",
    "flex-auto": "flex: 1 1 auto;",
    "flex-initial": "flex: 0 1 auto;",
    "flex-none": "flex: none;",
    "grow": "flex-grow: 1;",
    "grow-0": "flex-grow: 0;",
    "shrink": "flex-shrink: 1;",
    "shrink-0": "flex-shrink: 0;",
}

ALIGN_ITEMS = {
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "baseline": "baseline",
    "stretch": "stretch",
}

JUSTIFY_CONTENT = {
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "between": "space-between",
    "around": "space-around",
    "evenly": "space-evenly",
    "stretch": "stretch",
}

ALIGN_SELF = {
    "auto": "auto",
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "stretch": "stretch",
    "baseline": "baseline",
}

GAP_PROPERTIES = (
    ("gap-x-", "column-gap"),
    ("gap-y-", "row-gap"),
    ("gap-", "gap"),
)

GRID_COLS = re.compile(r"^grid-cols-(.+)$")
GRID_ROWS = re.compile(r"^grid-rows-(.+)$")
COL_SPAN = re.compile(r"^col-span-(.+)$")
ROW_SPAN = re.compile(r"^row-span-(.+)$")


class FlexboxMatcher(BaseMatcher):
    """Flex direction/wrap/grow, alignment and gap utilities."""

    @property
    def name(self) -> str:
        return "flexbox"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.FLEXBOX

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        if name in FLEX_KEYWORDS:
            return self.rule(selector, FLEX_KEYWORDS[name])

        if name.startswith("items-"):
            return self.lookup(name[6:], ALIGN_ITEMS, "align-items", selector)
        if name.startswith("justify-"):
            return self.lookup(name[8:], JUSTIFY_CONTENT, "justify-content", selector)
        if name.startswith("self-"):
            return self.lookup(name[5:], ALIGN_SELF, "align-self", selector)

        for prefix, prop in GAP_PROPERTIES:
            if name.startswith(prefix):
                return self.lookup(name[len(prefix) :], self.tokens.spacing, prop, selector)
        return None


class GridMatcher(BaseMatcher):
    """Grid template and span utilities bounded by ``max_grid_columns``."""

    @property
    def name(self) -> str:
        return "grid"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.GRID

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        for pattern, prop in (
            (GRID_COLS, "grid-template-columns"),
            (GRID_ROWS, "grid-template-rows"),
        ):
            m = pattern.match(name)
            if m:
                value = self._template(m.group(1))
                return None if value is None else self.rule(selector, declare(prop, value))

        for pattern, prop in ((COL_SPAN, "grid-column"), (ROW_SPAN, "grid-row")):
            m = pattern.match(name)
            if m:
                value = self._span(m.group(1))
                return None if value is None else self.rule(selector, declare(prop, value))
        return None

    def _template(self, key: str) -> str | None:
        if key in ("none", "subgrid"):
            return key
        count = parse_int(key)
        if count is None or not 1 <= count <= self.tokens.max_grid_columns:
            return None
        return f"repeat({count}, minmax(0, 1fr))"

    def _span(self, key: str) -> str | None:
        if key == "auto":
            return "auto"
        if key == "full":
            return "1 / -1"
        count = parse_int(key)
        if count is None or not 1 <= count <= self.tokens.max_grid_columns:
            return None
        return f"span {count} / span {count}"
