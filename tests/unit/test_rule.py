"""Unit tests for the CSS rule model."""

import pytest

from vibe_css.rule import CascadeOrder, CssRule, keyframes


class TestCascadeOrder:
    """Tests for CascadeOrder buckets."""

    def test_category_buckets(self):
        """Test category buckets are spaced by 100."""
        assert CascadeOrder.BASE == 0
        assert CascadeOrder.LAYOUT == 100
        assert CascadeOrder.SPACING == 400
        assert CascadeOrder.BACKGROUND == 700
        assert CascadeOrder.INTERACTIVITY == 1000

    def test_variant_offsets_exceed_categories(self):
        """Test variant offsets sit above every category bucket."""
        assert CascadeOrder.STATE_VARIANTS == 2000
        assert CascadeOrder.RESPONSIVE_VARIANTS == 3000
        assert CascadeOrder.STATE_VARIANTS > CascadeOrder.INTERACTIVITY


class TestCssRule:
    """Tests for CssRule."""

    def test_defaults(self):
        """Test CssRule defaults to no media query and base order."""
        rule = CssRule(selector=".a", declarations="display: flex;")

        assert rule.media_query is None
        assert rule.order == CascadeOrder.BASE
        assert not rule.is_keyframes

    def test_to_css(self):
        """Test rendering a plain rule."""
        rule = CssRule(selector=".vibe-flex", declarations="display: flex;")
        assert rule.to_css() == ".vibe-flex { display: flex; }"

    def test_to_css_with_media_query(self):
        """Test rendering wraps the rule in its media query."""
        rule = CssRule(
            selector=".sm\\:vibe-flex",
            declarations="display: flex;",
            media_query="@media (min-width: 640px)",
        )
        assert rule.to_css() == (
            "@media (min-width: 640px) { .sm\\:vibe-flex { display: flex; } }"
        )

    def test_rule_is_immutable(self):
        """Test CssRule cannot be modified after creation."""
        rule = CssRule(selector=".a", declarations="display: block;")
        with pytest.raises(AttributeError):
            rule.selector = ".b"

    def test_rules_compare_by_value(self):
        """Test equal fields make equal rules."""
        a = CssRule(".a", "display: flex;", None, 100)
        b = CssRule(".a", "display: flex;", None, 100)
        assert a == b

    def test_to_dict(self):
        """Test dictionary serialization uses a plain int order."""
        rule = CssRule(".a", "padding: 1rem;", order=CascadeOrder.SPACING)
        data = rule.to_dict()

        assert data == {
            "selector": ".a",
            "declarations": "padding: 1rem;",
            "media_query": None,
            "order": 400,
        }
        assert type(data["order"]) is int


class TestKeyframes:
    """Tests for the keyframes helper."""

    def test_keyframes_rule(self):
        """Test keyframes builds a base-bucket @keyframes rule."""
        rule = keyframes("spin", "to { transform: rotate(360deg); }")

        assert rule.selector == "@keyframes spin"
        assert rule.order == CascadeOrder.BASE
        assert rule.is_keyframes
        assert rule.to_css() == "@keyframes spin { to { transform: rotate(360deg); } }"
