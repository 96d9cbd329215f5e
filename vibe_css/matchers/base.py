"""Base matcher class for utility-name dispatch.

A matcher recognizes one family of utilities (display, spacing, color, ...)
and turns a bare utility name into CSS rules. Matchers are chained by
``MatcherChain``; the first one returning a non-None result wins.
"""

from abc import ABC, abstractmethod

from ..config.models import DesignTokens
from ..rule import CascadeOrder, CssRule


def declare(properties: str | tuple[str, ...], value: str) -> str:
    """Build a declaration block setting every property to ``value``.

    Example:
        >>> declare(("padding-left", "padding-right"), "1rem")
        'padding-left: 1rem; padding-right: 1rem;'
    """
    if isinstance(properties, str):
        properties = (properties,)
    return " ".join(f"{prop}: {value};" for prop in properties)


def parse_int(text: str) -> int | None:
    """Parse an unsigned ASCII integer, returning None on failure."""
    if text.isascii() and text.isdigit():
        return int(text)
    return None


def negate(value: str) -> str:
    """Negate a CSS length, leaving zero untouched."""
    if value == "0":
        return value
    return value[1:] if value.startswith("-") else f"-{value}"


class BaseMatcher(ABC):
    """Abstract base class for utility matchers.

    Subclasses define their identifier and default cascade bucket and
    implement ``match``.
    """

    def __init__(self, tokens: DesignTokens):
        self.tokens = tokens

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique matcher identifier (e.g. 'spacing')."""

    @property
    @abstractmethod
    def category(self) -> CascadeOrder:
        """Default cascade bucket for rules this matcher emits."""

    @abstractmethod
    def match(self, name: str, selector: str) -> list[CssRule] | None:
        """Try to turn a bare utility name into rules.

        Args:
            name: Utility name with variants and namespace prefix removed.
            selector: Escaped class selector for the full class name.

        Returns:
            Generated rules, or None if this matcher does not recognize
            the name.
        """

    def rule(
        self,
        selector: str,
        declarations: str,
        order: CascadeOrder | None = None,
    ) -> list[CssRule]:
        """Build a single-rule result in this matcher's bucket."""
        return [
            CssRule(
                selector=selector,
                declarations=declarations,
                order=self.category if order is None else order,
            )
        ]

    def lookup(
        self,
        name: str,
        table: dict[str, str],
        properties: str | tuple[str, ...],
        selector: str,
    ) -> list[CssRule] | None:
        """Exact-keyword lookup: ``table[name]`` assigned to ``properties``."""
        value = table.get(name)
        if value is None:
            return None
        return self.rule(selector, declare(properties, value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
