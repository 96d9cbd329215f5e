"""Color utilities: text/background/border/ring colors and gradients."""

from ..colors import ColorResolver
from ..config.models import DesignTokens
from ..rule import CascadeOrder, CssRule
from .base import BaseMatcher

GRADIENT_DIRECTIONS = {
    "t": "top",
    "tr": "top right",
    "r": "right",
    "br": "bottom right",
    "b": "bottom",
    "bl": "bottom left",
    "l": "left",
    "tl": "top left",
}

_TRANSPARENT_WHITE = "rgb(255 255 255 / 0)"


class ColorMatcher(BaseMatcher):
    """Strips a color property prefix and resolves the rest as a color."""

    # prefix -> (declaration template, cascade bucket, excluded sub-prefixes)
    PROPERTIES = (
        ("text-", "color: {c};", CascadeOrder.BACKGROUND, ()),
        ("bg-", "background-color: {c};", CascadeOrder.BACKGROUND, ()),
        (
            "border-",
            "border-color: {c};",
            CascadeOrder.BORDER,
            ("border-t-", "border-r-", "border-b-", "border-l-"),
        ),
        ("ring-", "--tw-ring-color: {c};", CascadeOrder.BORDER, ("ring-offset-",)),
        ("accent-", "accent-color: {c};", CascadeOrder.BACKGROUND, ()),
        ("caret-", "caret-color: {c};", CascadeOrder.BACKGROUND, ()),
        ("divide-", "--{ns}-divide-color: {c};", CascadeOrder.BORDER, ()),
        (
            "from-",
            "--tw-gradient-from: {c}; --tw-gradient-stops: var(--tw-gradient-from), "
            f"var(--tw-gradient-to, {_TRANSPARENT_WHITE});",
            CascadeOrder.BACKGROUND,
            (),
        ),
        (
            "via-",
            "--tw-gradient-stops: var(--tw-gradient-from), {c}, "
            f"var(--tw-gradient-to, {_TRANSPARENT_WHITE});",
            CascadeOrder.BACKGROUND,
            (),
        ),
        ("to-", "--tw-gradient-to: {c};", CascadeOrder.BACKGROUND, ()),
    )

    def __init__(self, tokens: DesignTokens):
        super().__init__(tokens)
        self.resolver = ColorResolver(tokens)

    @property
    def name(self) -> str:
        return "color"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.BACKGROUND

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        if name.startswith("bg-gradient-to-"):
            direction = GRADIENT_DIRECTIONS.get(name[len("bg-gradient-to-") :])
            if direction is None:
                return None
            return self.rule(
                selector,
                f"background-image: linear-gradient(to {direction}, var(--tw-gradient-stops));",
            )

        for prefix, template, order, excluded in self.PROPERTIES:
            if not name.startswith(prefix) or name.startswith(excluded):
                continue
            color = self.resolver.resolve(name[len(prefix) :])
            if color is None:
                return None
            declarations = template.format(c=color, ns=self.tokens.variable_namespace)
            return self.rule(selector, declarations, order=order)
        return None
