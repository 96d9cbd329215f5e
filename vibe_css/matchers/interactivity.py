"""Cursor, pointer, selection, touch, scroll and accessibility utilities."""

from ..rule import CascadeOrder, CssRule
from .base import BaseMatcher, declare

CURSORS = (
    "auto",
    "default",
    "pointer",
    "wait",
    "text",
    "move",
    "help",
    "not-allowed",
    "none",
    "context-menu",
    "progress",
    "cell",
    "crosshair",
    "vertical-text",
    "alias",
    "copy",
    "no-drop",
    "grab",
    "grabbing",
    "all-scroll",
    "col-resize",
    "row-resize",
    "n-resize",
    "e-resize",
    "s-resize",
    "w-resize",
    "ne-resize",
    "nw-resize",
    "se-resize",
    "sw-resize",
    "ew-resize",
    "ns-resize",
    "nesw-resize",
    "nwse-resize",
    "zoom-in",
    "zoom-out",
)

TOUCH_ACTIONS = {
    "touch-auto": "auto",
    "touch-none": "none",
    "touch-pan-x": "pan-x",
    "touch-pan-left": "pan-left",
    "touch-pan-right": "pan-right",
    "touch-pan-y": "pan-y",
    "touch-pan-up": "pan-up",
    "touch-pan-down": "pan-down",
    "touch-pinch-zoom": "pinch-zoom",
    "touch-manipulation": "manipulation",
}

KEYWORDS = {
    "pointer-events-none": "pointer-events: none;",
    "pointer-events-auto": "pointer-events: auto;",
    "select-none": "user-select: none;",
    "select-text": "user-select: text;",
    "select-all": "user-select: all;",
    "select-auto": "user-select: auto;",
    "resize-none": "resize: none;",
    "resize-y": "resize: vertical;",
    "resize-x": "resize: horizontal;",
    "resize": "resize: both;",
    "scroll-auto": "scroll-behavior: auto;",
    "scroll-smooth": "scroll-behavior: smooth;",
    "outline-none": "outline: 2px solid transparent; outline-offset: 2px;",
    "appearance-none": "-webkit-appearance: none; appearance: none;",
    "appearance-auto": "-webkit-appearance: auto; appearance: auto;",
    "sr-only": "position: absolute; width: 1px; height: 1px; padding: 0; "
    "margin: -1px; overflow: hidden; clip: rect(0, 0, 0, 0); white-space: nowrap; "
    "border-width: 0;",
    "not-sr-only": "position: static; width: auto; height: auto; padding: 0; "
    "margin: 0; overflow: visible; clip: auto; white-space: normal;",
}


class InteractivityMatcher(BaseMatcher):
    """User interaction and accessibility utilities."""

    @property
    def name(self) -> str:
        return "interactivity"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.INTERACTIVITY

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        if name in KEYWORDS:
            return self.rule(selector, KEYWORDS[name])
        if name in TOUCH_ACTIONS:
            return self.rule(selector, declare("touch-action", TOUCH_ACTIONS[name]))
        if name.startswith("cursor-") and name[7:] in CURSORS:
            return self.rule(selector, declare("cursor", name[7:]))
        return None
