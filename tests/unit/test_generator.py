"""Unit tests for the utility generator."""

import pytest

from vibe_css import generate
from vibe_css.config.models import DesignTokens
from vibe_css.generator import UtilityGenerator
from vibe_css.rule import CascadeOrder


class TestGeneratorProperties:
    """End-to-end properties of class name to rule generation."""

    def test_generation_is_pure(self, generator):
        """Test repeated calls give identical output."""
        name = "sm:hover:vibe-bg-primary/50"
        assert generator.generate(name) == generator.generate(name)

    @pytest.mark.parametrize("key", list(DesignTokens().spacing))
    def test_padding_for_every_spacing_key(self, generator, tokens, key):
        """Test padding is generated for every spacing key."""
        rules = generator.generate(f"vibe-p-{key}")

        assert len(rules) == 1
        assert rules[0].declarations == f"padding: {tokens.spacing[key]};"
        assert rules[0].order == CascadeOrder.SPACING

    @pytest.mark.parametrize("breakpoint", list(DesignTokens().breakpoints))
    def test_breakpoint_media_query(self, generator, tokens, breakpoint):
        """Test every breakpoint wraps the rule in a min-width query."""
        [rule] = generator.generate(f"{breakpoint}:vibe-flex")

        assert rule.media_query == f"@media (min-width: {tokens.breakpoints[breakpoint]})"
        assert rule.order == CascadeOrder.LAYOUT + CascadeOrder.RESPONSIVE_VARIANTS

    @pytest.mark.parametrize(
        "breakpoint,selector",
        [("sm", ".sm\\:vibe-flex"), ("2xl", ".\\32 xl\\:vibe-flex")],
    )
    def test_breakpoint_selector_is_valid_identifier(self, generator, breakpoint, selector):
        """Test breakpoint keys starting with a digit are escaped in the selector."""
        [rule] = generator.generate(f"{breakpoint}:vibe-flex")

        assert rule.selector == selector
        assert rule.to_css() == (
            f"@media (min-width: {DesignTokens().breakpoints[breakpoint]}) "
            f"{{ {selector} {{ display: flex; }} }}"
        )

    def test_stacked_variants(self, generator):
        """Test breakpoint plus state variants nest and accumulate."""
        [rule] = generator.generate("sm:hover:vibe-bg-primary")

        assert rule.selector == ".sm\\:hover\\:vibe-bg-primary:hover"
        assert rule.media_query == "@media (min-width: 640px)"
        assert rule.order == (
            CascadeOrder.BACKGROUND
            + CascadeOrder.STATE_VARIANTS
            + CascadeOrder.RESPONSIVE_VARIANTS
        )
        assert rule.to_css() == (
            "@media (min-width: 640px) { .sm\\:hover\\:vibe-bg-primary:hover "
            "{ background-color: var(--vibe-primary); } }"
        )

    def test_color_with_opacity(self, generator):
        """Test palette colors with an opacity suffix."""
        [rule] = generator.generate("vibe-bg-red-500/50")

        assert rule.declarations == "background-color: rgb(239 68 68 / 0.5);"
        assert rule.selector == ".vibe-bg-red-500\\/50"

    def test_arbitrary_value(self, generator):
        """Test arbitrary bracket values."""
        [rule] = generator.generate("vibe-w-[500px]")
        assert rule.declarations == "width: 500px;"

    def test_unknown_class(self, generator):
        """Test unknown classes give an empty result."""
        assert generator.generate("totally-unknown-class") == []
        assert generator.generate("vibe-totally-unknown") == []

    def test_escaped_selector(self, generator):
        """Test the selector is the escaped full class name."""
        [rule] = generator.generate("hover:vibe-p-4")

        assert rule.selector == ".hover\\:vibe-p-4:hover"
        assert rule.declarations == "padding: 1rem;"
        assert rule.order == CascadeOrder.SPACING + CascadeOrder.STATE_VARIANTS


class TestPrefixHandling:
    """Tests for namespace prefix enforcement."""

    def test_unprefixed_rejected(self, generator):
        """Test unprefixed utilities are ignored by default."""
        assert generator.generate("flex") == []
        assert len(generator.generate("vibe-flex")) == 1

    def test_unprefixed_allowed(self):
        """Test allow_unprefixed_utilities accepts both forms."""
        generator = UtilityGenerator(DesignTokens(allow_unprefixed_utilities=True))

        assert generator.generate_first("flex").selector == ".flex"
        assert generator.generate_first("vibe-flex").selector == ".vibe-flex"

    def test_empty_prefix(self, bare_generator):
        """Test an empty prefix makes every name a candidate."""
        [rule] = bare_generator.generate("md:p-4")

        assert rule.selector == ".md\\:p-4"
        assert rule.media_query == "@media (min-width: 768px)"

    def test_custom_prefix(self):
        """Test a custom prefix replaces the default one."""
        generator = UtilityGenerator(DesignTokens(prefix="ui"))

        assert generator.is_recognized("ui-flex")
        assert not generator.is_recognized("vibe-flex")

    def test_prefix_only(self, generator):
        """Test the bare prefix is not a utility."""
        assert generator.generate("vibe-") == []
        assert generator.strip_prefix("vibe-p-4") == "p-4"
        assert generator.strip_prefix("p-4") is None

    def test_variant_before_prefix(self, generator):
        """Test variants come before the prefix."""
        assert generator.generate("vibe-hover:p-4") == []


class TestVariantGeneration:
    """Tests for variants applied during generation."""

    def test_dark_variant(self, generator):
        """Test dark prefixes a .dark ancestor."""
        [rule] = generator.generate("dark:vibe-bg-gray-900")

        assert rule.selector == ".dark .dark\\:vibe-bg-gray-900"
        assert rule.order == CascadeOrder.BACKGROUND + CascadeOrder.STATE_VARIANTS

    def test_group_hover(self, generator):
        """Test group-hover emits bare and namespaced group selectors."""
        [rule] = generator.generate("group-hover:vibe-opacity-100")

        assert rule.selector == (
            ".group:hover .group-hover\\:vibe-opacity-100, "
            ".vibe-group:hover .group-hover\\:vibe-opacity-100"
        )
        assert rule.declarations == "opacity: 1;"

    def test_placeholder_and_structural(self, generator):
        """Test placeholder and structural variants."""
        assert generator.generate_first("placeholder:vibe-text-gray-400").selector == (
            ".placeholder\\:vibe-text-gray-400::placeholder"
        )
        assert generator.generate_first("first:vibe-mt-0").selector == (
            ".first\\:vibe-mt-0:first-child"
        )

    def test_variants_on_multi_rule_bundle(self, generator):
        """Test variants reach every rule but leave keyframes alone."""
        frames, rule = generator.generate("hover:vibe-animate-spin")

        assert frames.selector == "@keyframes spin"
        assert frames.order == CascadeOrder.BASE
        assert rule.selector == ".hover\\:vibe-animate-spin:hover"
        assert rule.order == CascadeOrder.EFFECTS + CascadeOrder.STATE_VARIANTS

    def test_dark_prose_selector_lists(self, generator):
        """Test selector lists are rewritten member by member."""
        rules = generator.generate("dark:vibe-prose")
        selectors = [r.selector for r in rules]

        assert ".dark .dark\\:vibe-prose ul, .dark .dark\\:vibe-prose ol" in selectors

    def test_unknown_variant(self, generator):
        """Test an unknown variant leaves the name unrecognized."""
        assert generator.generate("print:vibe-p-4") == []

    def test_disabled_variant_flags(self):
        """Test disabled feature flags make variant names unrecognized."""
        generator = UtilityGenerator(
            DesignTokens(
                enable_responsive=False,
                enable_state_variants=False,
                enable_dark_mode=False,
            )
        )

        assert generator.generate("sm:vibe-flex") == []
        assert generator.generate("hover:vibe-flex") == []
        assert generator.generate("dark:vibe-flex") == []
        assert generator.is_recognized("vibe-flex")


class TestInputHandling:
    """Tests for malformed input."""

    @pytest.mark.parametrize("name", ["", " ", "vibe-p-4 vibe-m-4", "vibe-p-4\n"])
    def test_empty_or_whitespace(self, generator, name):
        """Test empty names and names containing whitespace are rejected."""
        assert generator.generate(name) == []

    def test_generate_first(self, generator):
        """Test generate_first returns None for unknown names."""
        assert generator.generate_first("nope") is None


class TestModuleGenerate:
    """Tests for the module-level generate function."""

    def test_uses_default_tokens(self):
        """Test generate uses default design tokens."""
        [rule] = generate("vibe-p-4")
        assert rule.to_css() == ".vibe-p-4 { padding: 1rem; }"
