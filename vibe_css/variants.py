"""Variant extraction and application.

A class name such as ``sm:hover:vibe-bg-primary`` carries an ordered list
of variant prefixes. They are peeled off left to right and later folded
onto the generated rules right to left, so the leftmost variant ends up
as the outermost condition.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum

from .config.models import DesignTokens
from .rule import CascadeOrder, CssRule


class VariantKind(Enum):
    """Kinds of class-name variant prefixes."""

    STATE = "state"
    STRUCTURAL = "structural"
    GROUP = "group"
    PLACEHOLDER = "placeholder"
    DARK = "dark"
    BREAKPOINT = "breakpoint"


STATE_VARIANTS = (
    "hover",
    "focus",
    "active",
    "disabled",
    "visited",
    "focus-visible",
    "focus-within",
)

STRUCTURAL_VARIANTS = {
    "first": ":first-child",
    "last": ":last-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
}

# group-X -> pseudo-class on the group ancestor
GROUP_VARIANTS = {
    "group-hover": "hover",
    "group-focus": "focus",
    "group-focus-within": "focus-within",
}

# Split selector lists on commas that are not part of an escaped class name
_SELECTOR_SPLIT = re.compile(r"(?<!\\),")


@dataclass(frozen=True)
class Variant:
    """A single extracted variant prefix."""

    kind: VariantKind
    token: str


def classify_variant(token: str, tokens: DesignTokens) -> Variant | None:
    """Classify a prefix token, honoring the feature flags.

    Returns:
        The variant, or None if the token is not an enabled variant.
    """
    if token == "dark":
        return Variant(VariantKind.DARK, token) if tokens.enable_dark_mode else None

    if token in tokens.breakpoints:
        if not tokens.enable_responsive:
            return None
        return Variant(VariantKind.BREAKPOINT, token)

    if not tokens.enable_state_variants:
        return None
    if token in STATE_VARIANTS:
        return Variant(VariantKind.STATE, token)
    if token in STRUCTURAL_VARIANTS:
        return Variant(VariantKind.STRUCTURAL, token)
    if token in GROUP_VARIANTS:
        return Variant(VariantKind.GROUP, token)
    if token == "placeholder":
        return Variant(VariantKind.PLACEHOLDER, token)
    return None


def extract_variants(class_name: str, tokens: DesignTokens) -> tuple[list[Variant], str]:
    """Peel leading ``token:`` variant segments off a class name.

    Scanning stops at the first segment that is not a recognized variant.
    Colons inside bracket values are not treated specially.

    Args:
        class_name: Full class name as written in markup.
        tokens: Design tokens providing breakpoints and feature flags.

    Returns:
        Tuple of (variants in written order, remaining base name).
    """
    variants: list[Variant] = []
    name = class_name
    while True:
        idx = name.find(":")
        if idx <= 0:
            break
        variant = classify_variant(name[:idx], tokens)
        if variant is None:
            break
        variants.append(variant)
        name = name[idx + 1 :]
    return variants, name


def map_selectors(selector: str, transform) -> str:
    """Apply ``transform`` to each selector of a comma-separated list."""
    parts = [part.strip() for part in _SELECTOR_SPLIT.split(selector)]
    return ", ".join(transform(part) for part in parts if part)


def apply_variant(rule: CssRule, variant: Variant, tokens: DesignTokens) -> CssRule:
    """Apply one variant to a rule, returning a new rule."""
    if rule.is_keyframes:
        return rule

    kind = variant.kind
    if kind is VariantKind.BREAKPOINT:
        condition = f"(min-width: {tokens.breakpoints[variant.token]})"
        if rule.media_query:
            media_query = f"{rule.media_query} and {condition}"
        else:
            media_query = f"@media {condition}"
        return replace(
            rule,
            media_query=media_query,
            order=rule.order + CascadeOrder.RESPONSIVE_VARIANTS,
        )

    if kind is VariantKind.STATE:
        selector = map_selectors(rule.selector, lambda s: f"{s}:{variant.token}")
    elif kind is VariantKind.STRUCTURAL:
        pseudo = STRUCTURAL_VARIANTS[variant.token]
        selector = map_selectors(rule.selector, lambda s: f"{s}{pseudo}")
    elif kind is VariantKind.PLACEHOLDER:
        selector = map_selectors(rule.selector, lambda s: f"{s}::placeholder")
    elif kind is VariantKind.DARK:
        selector = map_selectors(rule.selector, lambda s: f".dark {s}")
    else:
        pseudo = GROUP_VARIANTS[variant.token]
        selector = map_selectors(rule.selector, lambda s: f".group:{pseudo} {s}")
        if tokens.prefix:
            namespaced = map_selectors(
                rule.selector, lambda s: f".{tokens.prefix}-group:{pseudo} {s}"
            )
            selector = f"{selector}, {namespaced}"

    return replace(
        rule,
        selector=selector,
        order=rule.order + CascadeOrder.STATE_VARIANTS,
    )


def apply_variants(
    rules: list[CssRule], variants: list[Variant], tokens: DesignTokens
) -> list[CssRule]:
    """Fold variants onto every rule, last-extracted variant first."""
    result = list(rules)
    for variant in reversed(variants):
        result = [apply_variant(rule, variant, tokens) for rule in result]
    return result
