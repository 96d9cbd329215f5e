"""Utility matchers, one per utility family.

``default_matchers`` returns them in dispatch order: many utility names
are prefixes of others (``border``, ``border-t-2``, ``border-red-500``),
so the order of the chain is part of the behavior.
"""

from ..config.models import DesignTokens
from .arbitrary import ArbitraryValueMatcher
from .base import BaseMatcher, declare, negate, parse_int
from .border import BorderMatcher
from .color import ColorMatcher
from .decorative import DecorativeMatcher, ProseMatcher
from .effects import EffectsMatcher
from .flexbox import FlexboxMatcher, GridMatcher
from .interactivity import InteractivityMatcher
from .layout import DisplayMatcher, LayoutMatcher
from .spacing import SizingMatcher, SpacingMatcher
from .typography import TypographyMatcher

DEFAULT_MATCHER_CLASSES: tuple[type[BaseMatcher], ...] = (
    DisplayMatcher,
    FlexboxMatcher,
    GridMatcher,
    SpacingMatcher,
    SizingMatcher,
    TypographyMatcher,
    ColorMatcher,
    BorderMatcher,
    EffectsMatcher,
    LayoutMatcher,
    InteractivityMatcher,
    ArbitraryValueMatcher,
    DecorativeMatcher,
    ProseMatcher,
)


def default_matchers(tokens: DesignTokens) -> list[BaseMatcher]:
    """Instantiate the default matchers in dispatch order."""
    return [matcher_class(tokens) for matcher_class in DEFAULT_MATCHER_CLASSES]


__all__ = [
    "BaseMatcher",
    "declare",
    "negate",
    "parse_int",
    "default_matchers",
    "DEFAULT_MATCHER_CLASSES",
    "ArbitraryValueMatcher",
    "BorderMatcher",
    "ColorMatcher",
    "DecorativeMatcher",
    "DisplayMatcher",
    "EffectsMatcher",
    "FlexboxMatcher",
    "GridMatcher",
    "InteractivityMatcher",
    "LayoutMatcher",
    "ProseMatcher",
    "SizingMatcher",
    "SpacingMatcher",
    "TypographyMatcher",
]
