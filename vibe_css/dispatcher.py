"""Ordered matcher chain that dispatches a utility name to its rules.

The first matcher returning a non-None result wins, so registration order
decides precedence between overlapping utility prefixes.
"""

from dataclasses import dataclass, field

from .config.models import DesignTokens
from .matchers import BaseMatcher, default_matchers
from .rule import CssRule


@dataclass
class DispatchResult:
    """Outcome of dispatching one utility name."""

    rules: list[CssRule] = field(default_factory=list)
    matcher: str | None = None

    @property
    def matched(self) -> bool:
        """Check if any matcher recognized the name."""
        return self.matcher is not None


class MatcherChain:
    """Chain-of-responsibility over ``BaseMatcher`` instances."""

    def __init__(self, matchers: list[BaseMatcher] | None = None):
        self._matchers: dict[str, BaseMatcher] = {}
        for matcher in matchers or []:
            self.register(matcher)

    @classmethod
    def default(cls, tokens: DesignTokens) -> "MatcherChain":
        """Build the default chain for the given tokens."""
        return cls(default_matchers(tokens))

    def register(self, matcher: BaseMatcher) -> None:
        """Append a matcher to the end of the chain.

        Raises:
            ValueError: If a matcher with the same name is already registered.
        """
        if matcher.name in self._matchers:
            raise ValueError(f"Matcher {matcher.name} is already registered")
        self._matchers[matcher.name] = matcher

    def unregister(self, name: str) -> None:
        """Remove a matcher by name; unknown names are ignored."""
        self._matchers.pop(name, None)

    def get_matcher(self, name: str) -> BaseMatcher | None:
        return self._matchers.get(name)

    @property
    def names(self) -> list[str]:
        """Matcher names in dispatch order."""
        return list(self._matchers)

    def __len__(self) -> int:
        return len(self._matchers)

    def __iter__(self):
        return iter(self._matchers.values())

    def dispatch(self, name: str, selector: str) -> DispatchResult:
        """Run matchers in order until one recognizes ``name``.

        Args:
            name: Bare utility name (no variants, no namespace prefix).
            selector: Escaped selector for the full class name.

        Returns:
            DispatchResult; empty with ``matcher=None`` if nothing matched.
        """
        for matcher in self._matchers.values():
            rules = matcher.match(name, selector)
            if rules is not None:
                return DispatchResult(rules=rules, matcher=matcher.name)
        return DispatchResult()
