"""CSS rule model and cascade ordering buckets."""

from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any


class CascadeOrder(IntEnum):
    """Sort buckets that decide emission order of generated rules.

    All generated selectors share the same specificity, so a stable sort
    on ``order`` is what makes later buckets win the cascade.
    """

    BASE = 0
    LAYOUT = 100
    FLEXBOX = 200
    GRID = 300
    SPACING = 400
    SIZING = 500
    TYPOGRAPHY = 600
    BACKGROUND = 700
    BORDER = 800
    EFFECTS = 900
    INTERACTIVITY = 1000

    # Variant offsets, added on top of a category bucket
    STATE_VARIANTS = 2000
    RESPONSIVE_VARIANTS = 3000


@dataclass(frozen=True)
class CssRule:
    """A single generated CSS rule.

    Attributes:
        selector: CSS selector, or ``@keyframes name`` for keyframe blocks.
        declarations: Declaration block body, e.g. ``"display: flex;"``.
        media_query: Optional wrapping at-rule, e.g. ``"@media (min-width: 640px)"``.
        order: Cascade sort key (category bucket plus variant offsets).
    """

    selector: str
    declarations: str
    media_query: str | None = None
    order: int = CascadeOrder.BASE

    @property
    def is_keyframes(self) -> bool:
        """Check if this rule is a ``@keyframes`` block."""
        return self.selector.startswith("@keyframes")

    def to_css(self) -> str:
        """Render the rule as CSS text."""
        rule = f"{self.selector} {{ {self.declarations} }}"
        if self.media_query:
            return f"{self.media_query} {{ {rule} }}"
        return rule

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = asdict(self)
        data["order"] = int(self.order)
        return data


def keyframes(name: str, body: str) -> CssRule:
    """Build a ``@keyframes`` rule sorted into the base bucket."""
    return CssRule(
        selector=f"@keyframes {name}",
        declarations=body,
        order=CascadeOrder.BASE,
    )
