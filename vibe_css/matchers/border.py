"""Border width/style/radius, divide and ring utilities."""

from ..rule import CascadeOrder, CssRule
from .base import BaseMatcher, declare

BORDER_WIDTHS = {"0": "0px", "2": "2px", "4": "4px", "8": "8px"}

BORDER_SIDES = {
    "t": "border-top-width",
    "r": "border-right-width",
    "b": "border-bottom-width",
    "l": "border-left-width",
}

BORDER_STYLES = ("solid", "dashed", "dotted", "double", "hidden", "none")

RADIUS_CORNERS = {
    "t": ("border-top-left-radius", "border-top-right-radius"),
    "r": ("border-top-right-radius", "border-bottom-right-radius"),
    "b": ("border-bottom-right-radius", "border-bottom-left-radius"),
    "l": ("border-top-left-radius", "border-bottom-left-radius"),
    "tl": ("border-top-left-radius",),
    "tr": ("border-top-right-radius",),
    "br": ("border-bottom-right-radius",),
    "bl": ("border-bottom-left-radius",),
}

RING_WIDTHS = {"": "3px", "0": "0px", "1": "1px", "2": "2px", "4": "4px", "8": "8px"}


class BorderMatcher(BaseMatcher):
    """Border, radius, divide and ring width utilities."""

    @property
    def name(self) -> str:
        return "border"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.BORDER

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        if name == "border" or name.startswith("border-"):
            return self._border(name[len("border-") :] if name != "border" else "", selector)
        if name == "rounded" or name.startswith("rounded-"):
            return self._rounded(name[len("rounded-") :] if name != "rounded" else "", selector)
        if name.startswith(("divide-x", "divide-y")):
            return self._divide(name, selector)
        if name == "ring" or name.startswith("ring-"):
            return self._ring(name[len("ring-") :] if name != "ring" else "", selector)
        return None

    def _border(self, rest: str, selector: str) -> list[CssRule] | None:
        if rest == "":
            return self.rule(selector, declare("border-width", "1px"))
        if rest in BORDER_WIDTHS:
            return self.rule(selector, declare("border-width", BORDER_WIDTHS[rest]))
        if rest in BORDER_STYLES:
            return self.rule(selector, declare("border-style", rest))

        side, _, width_key = rest.partition("-")
        prop = BORDER_SIDES.get(side)
        if prop is None:
            return None
        if not width_key:
            return self.rule(selector, declare(prop, "1px"))
        width = BORDER_WIDTHS.get(width_key)
        return None if width is None else self.rule(selector, declare(prop, width))

    def _rounded(self, rest: str, selector: str) -> list[CssRule] | None:
        radii = self.tokens.border_radius
        if rest in radii:
            return self.rule(selector, declare("border-radius", radii[rest]))

        corner, _, key = rest.partition("-")
        properties = RADIUS_CORNERS.get(corner)
        if properties is None or key not in radii:
            return None
        return self.rule(selector, declare(properties, radii[key]))

    def _divide(self, name: str, selector: str) -> list[CssRule] | None:
        axis = name[7]
        width_key = name[8:]
        if width_key == "":
            width = "1px"
        elif width_key.startswith("-") and width_key[1:] in BORDER_WIDTHS:
            width = BORDER_WIDTHS[width_key[1:]]
        else:
            return None

        start, end = ("left", "right") if axis == "x" else ("top", "bottom")
        ns = self.tokens.variable_namespace
        declarations = (
            f"border-{start}-width: {width}; border-{end}-width: 0px; "
            f"border-style: solid; border-color: var(--{ns}-divide-color, currentColor);"
        )
        return self.rule(f"{selector} > :not([hidden]) ~ :not([hidden])", declarations)

    def _ring(self, rest: str, selector: str) -> list[CssRule] | None:
        if rest == "inset":
            return self.rule(selector, "--tw-ring-inset: inset;", order=CascadeOrder.EFFECTS)

        if rest.startswith("offset-"):
            width = RING_WIDTHS.get(rest[len("offset-") :]) if rest != "offset-" else None
            if width is None:
                return None
            return self.rule(
                selector, f"--tw-ring-offset-width: {width};", order=CascadeOrder.EFFECTS
            )

        width = RING_WIDTHS.get(rest)
        if width is None:
            return None
        return self.rule(
            selector,
            f"box-shadow: var(--tw-ring-inset) 0 0 0 calc({width} + "
            "var(--tw-ring-offset-width)) var(--tw-ring-color);",
            order=CascadeOrder.EFFECTS,
        )
