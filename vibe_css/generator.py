"""Just-in-time utility generator.

Control flow for one class name::

    class name -> extract variants -> namespace prefix check
               -> matcher chain -> apply variants -> rules

Generation is pure: no I/O, no shared mutable state, and an unrecognized
class name yields an empty list rather than an error.
"""

from .config.models import DesignTokens
from .css_logging import LogCategory, get_category_logger
from .dispatcher import MatcherChain
from .escape import class_selector
from .rule import CssRule
from .variants import apply_variants, extract_variants

logger = get_category_logger(LogCategory.GENERATOR)


class UtilityGenerator:
    """Turns utility class names into CSS rules.

    Example:
        >>> generator = UtilityGenerator()
        >>> [r.to_css() for r in generator.generate("hover:vibe-p-4")]
        ['.hover\\\\:vibe-p-4:hover { padding: 1rem; }']
    """

    def __init__(
        self,
        tokens: DesignTokens | None = None,
        chain: MatcherChain | None = None,
    ):
        """Initialize the generator.

        Args:
            tokens: Design tokens; defaults are used when omitted.
            chain: Matcher chain; the default chain for ``tokens`` when omitted.
        """
        self.tokens = tokens or DesignTokens()
        self.chain = chain or MatcherChain.default(self.tokens)

    def strip_prefix(self, name: str) -> str | None:
        """Remove the namespace prefix from a variant-free name.

        Returns:
            The bare utility name, or None if the name is outside the
            namespace and unprefixed utilities are disabled.
        """
        prefix = self.tokens.prefix
        if not prefix:
            return name
        if name.startswith(f"{prefix}-"):
            return name[len(prefix) + 1 :]
        if self.tokens.allow_unprefixed_utilities:
            return name
        return None

    def generate(self, class_name: str) -> list[CssRule]:
        """Generate every rule for a class name, variants applied.

        Args:
            class_name: One whitespace-free class token as written in markup.

        Returns:
            Rules in emission order; empty if the name is not a utility.
        """
        if not class_name or any(ch.isspace() for ch in class_name):
            return []

        variants, after_variants = extract_variants(class_name, self.tokens)
        name = self.strip_prefix(after_variants)
        if not name:
            return []

        result = self.chain.dispatch(name, class_selector(class_name))
        if not result.matched:
            logger.debug(
                f"No matcher recognized '{class_name}'", extra={"class_name": class_name}
            )
            return []

        rules = apply_variants(result.rules, variants, self.tokens)
        logger.debug(
            f"'{class_name}' matched {result.matcher} "
            f"({len(rules)} rules, {len(variants)} variants)",
            extra={"class_name": class_name, "rule_count": len(rules)},
        )
        return rules

    def generate_first(self, class_name: str) -> CssRule | None:
        """Return the first generated rule, or None if not recognized."""
        rules = self.generate(class_name)
        return rules[0] if rules else None

    def is_recognized(self, class_name: str) -> bool:
        return bool(self.generate(class_name))


_default_generator: UtilityGenerator | None = None


def generate(class_name: str) -> list[CssRule]:
    """Generate rules for ``class_name`` using default design tokens."""
    global _default_generator
    if _default_generator is None:
        _default_generator = UtilityGenerator()
    return _default_generator.generate(class_name)
