"""Unit tests for design tokens and token loading."""

import json

import pytest
from pydantic import ValidationError

from vibe_css.cli.errors import ConfigNotFoundError, ConfigurationError
from vibe_css.config import (
    DEFAULT_PALETTE,
    SEMANTIC_COLORS,
    SHADES,
    DesignTokens,
    TokensLoader,
    load_tokens,
)
from vibe_css.config.models import TABLE_FIELDS
from vibe_css.generator import UtilityGenerator


class TestPalette:
    """Tests for the default palette tables."""

    def test_every_family_has_every_shade(self):
        """Test each palette family defines all shades."""
        for family, shades in DEFAULT_PALETTE.items():
            assert tuple(shades) == SHADES, family

    def test_reference_values(self):
        """Test well-known palette entries."""
        assert DEFAULT_PALETTE["red"][500] == "#ef4444"
        assert DEFAULT_PALETTE["slate"][50] == "#f8fafc"

    def test_semantic_aliases(self):
        """Test semantic aliases include the core set."""
        assert {"primary", "secondary", "muted", "destructive"} <= set(SEMANTIC_COLORS)


class TestDesignTokens:
    """Tests for the DesignTokens model."""

    def test_defaults(self):
        """Test default namespacing and feature flags."""
        tokens = DesignTokens()

        assert tokens.prefix == "vibe"
        assert tokens.variable_namespace == "vibe"
        assert tokens.max_grid_columns == 12
        assert tokens.allow_unprefixed_utilities is False
        assert tokens.enable_responsive is True
        assert tokens.enable_state_variants is True
        assert tokens.enable_dark_mode is True

    def test_default_spacing_scale(self):
        """Test the spacing scale is quarter-rem based."""
        spacing = DesignTokens().spacing

        assert spacing["0"] == "0"
        assert spacing["px"] == "1px"
        assert spacing["0.5"] == "0.125rem"
        assert spacing["3.5"] == "0.875rem"
        assert spacing["4"] == "1rem"
        assert spacing["96"] == "24rem"

    def test_default_sizing_extends_spacing(self):
        """Test sizing includes spacing plus fractions and keywords."""
        sizing = DesignTokens().sizing

        assert sizing["4"] == "1rem"
        assert sizing["1/2"] == "50%"
        assert sizing["full"] == "100%"
        assert sizing["screen"] == "100vw"

    def test_default_tables(self):
        """Test representative entries of the other scales."""
        tokens = DesignTokens()

        assert tokens.font_sizes["sm"] == ("0.875rem", "1.25rem")
        assert tokens.font_weights["bold"] == "700"
        assert tokens.border_radius[""] == "0.25rem"
        assert tokens.opacity["50"] == "0.5"
        assert tokens.opacity["100"] == "1"
        assert tokens.z_index["auto"] == "auto"
        assert tokens.breakpoints["sm"] == "640px"
        assert tokens.height_overrides["screen"] == "100vh"

    def test_tokens_are_frozen(self):
        """Test tokens cannot be reassigned after construction."""
        tokens = DesignTokens()
        with pytest.raises(ValidationError):
            tokens.prefix = "other"

    @pytest.mark.parametrize("field_name", TABLE_FIELDS)
    def test_tables_are_read_only(self, field_name):
        """Test token tables reject in-place changes."""
        tokens = DesignTokens()
        with pytest.raises(TypeError):
            getattr(tokens, field_name)["new"] = "value"

    def test_color_families_are_read_only(self):
        """Test individual color families reject in-place changes."""
        tokens = DesignTokens()
        with pytest.raises(TypeError):
            tokens.colors["red"][500] = "#000000"
        with pytest.raises(AttributeError):
            tokens.semantic_colors.append("brand")

    def test_generator_unaffected_by_caller_tables(self):
        """Test a caller's dict is copied rather than shared."""
        spacing = {"4": "1rem"}
        tokens = DesignTokens(spacing=spacing)
        generator = UtilityGenerator(tokens)

        spacing["4"] = "99rem"

        assert generator.generate_first("vibe-p-4").declarations == "padding: 1rem;"

    def test_unknown_field_rejected(self):
        """Test misspelled fields are rejected."""
        with pytest.raises(ValidationError):
            DesignTokens(prefx="vibe")

    def test_prefix_validation(self):
        """Test prefixes with whitespace or colons are rejected."""
        with pytest.raises(ValidationError):
            DesignTokens(prefix="my app")
        with pytest.raises(ValidationError):
            DesignTokens(prefix="a:b")

    def test_empty_prefix_allowed(self):
        """Test an empty prefix disables namespacing."""
        assert DesignTokens(prefix="").prefix == ""

    def test_breakpoints_must_be_px(self):
        """Test non-pixel breakpoints are rejected."""
        with pytest.raises(ValidationError):
            DesignTokens(breakpoints={"sm": "40em"})

    def test_max_grid_columns_bounds(self):
        """Test the grid column limit is bounded."""
        with pytest.raises(ValidationError):
            DesignTokens(max_grid_columns=0)
        with pytest.raises(ValidationError):
            DesignTokens(max_grid_columns=25)

    def test_color_families_lowercased(self):
        """Test color family names are normalized to lowercase."""
        tokens = DesignTokens(colors={"Brand": {500: "#123456"}})
        assert tokens.colors == {"brand": {500: "#123456"}}

    def test_to_dict_is_json_serializable(self):
        """Test to_dict output can be dumped as JSON."""
        data = DesignTokens().to_dict()

        restored = json.loads(json.dumps(data))
        assert restored["font_sizes"]["sm"] == ["0.875rem", "1.25rem"]
        assert restored["colors"]["red"]["500"] == "#ef4444"
        assert restored["prefix"] == "vibe"


class TestTokensLoader:
    """Tests for TokensLoader precedence and file handling."""

    def test_defaults_without_sources(self):
        """Test loading with no sources gives default tokens."""
        assert TokensLoader().load() == DesignTokens()

    def test_file_values(self, tmp_path):
        """Test scalar values are read from the config file."""
        config_file = tmp_path / "tokens.json"
        config_file.write_text(json.dumps({"prefix": "ui", "max_grid_columns": 16}))

        tokens = TokensLoader(config_file).load()

        assert tokens.prefix == "ui"
        assert tokens.max_grid_columns == 16

    def test_file_tables_merge_over_defaults(self, tmp_path):
        """Test file tables extend the default tables."""
        config_file = tmp_path / "tokens.json"
        config_file.write_text(json.dumps({"spacing": {"18": "4.5rem"}}))

        tokens = TokensLoader(config_file).load()

        assert tokens.spacing["18"] == "4.5rem"
        assert tokens.spacing["4"] == "1rem"

    def test_file_tables_replace(self, tmp_path):
        """Test replace mode uses file tables as-is."""
        config_file = tmp_path / "tokens.json"
        config_file.write_text(
            json.dumps({"replace": True, "spacing": {"18": "4.5rem"}})
        )

        tokens = TokensLoader(config_file).load()

        assert tokens.spacing == {"18": "4.5rem"}

    def test_replace_must_be_boolean(self, tmp_path):
        """Test a non-boolean replace flag is rejected instead of guessed."""
        config_file = tmp_path / "tokens.json"
        config_file.write_text(json.dumps({"replace": "false", "spacing": {"18": "4.5rem"}}))

        with pytest.raises(ConfigurationError) as exc_info:
            TokensLoader(config_file).load()

        assert "'replace' must be true or false" in exc_info.value.message

    def test_replace_false_merges(self, tmp_path):
        """Test an explicit false replace flag keeps the default tables."""
        config_file = tmp_path / "tokens.json"
        config_file.write_text(json.dumps({"replace": False, "spacing": {"18": "4.5rem"}}))

        tokens = TokensLoader(config_file).load()

        assert tokens.spacing["18"] == "4.5rem"
        assert tokens.spacing["4"] == "1rem"

    def test_file_colors_with_string_shades(self, tmp_path):
        """Test JSON shade keys are coerced to integers."""
        config_file = tmp_path / "tokens.json"
        config_file.write_text(json.dumps({"colors": {"brand": {"500": "#123456"}}}))

        tokens = TokensLoader(config_file).load()

        assert tokens.colors["brand"][500] == "#123456"
        assert tokens.colors["red"][500] == "#ef4444"

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        """Test environment variables take precedence over the file."""
        config_file = tmp_path / "tokens.json"
        config_file.write_text(json.dumps({"prefix": "ui"}))
        monkeypatch.setenv("VIBE_CSS_PREFIX", "env")
        monkeypatch.setenv("VIBE_CSS_NAMESPACE", "brand")

        tokens = TokensLoader(config_file).load()

        assert tokens.prefix == "env"
        assert tokens.variable_namespace == "brand"

    @pytest.mark.parametrize("value,expected", [("1", True), ("yes", True), ("0", False)])
    def test_environment_boolean(self, monkeypatch, value, expected):
        """Test boolean environment values."""
        monkeypatch.setenv("VIBE_CSS_ALLOW_UNPREFIXED", value)
        assert TokensLoader().load().allow_unprefixed_utilities is expected

    def test_explicit_overrides_win(self, monkeypatch):
        """Test explicit overrides beat the environment."""
        monkeypatch.setenv("VIBE_CSS_PREFIX", "env")
        assert TokensLoader().load(prefix="cli").prefix == "cli"

    def test_none_overrides_ignored(self, monkeypatch):
        """Test None overrides do not mask lower sources."""
        monkeypatch.setenv("VIBE_CSS_PREFIX", "env")
        assert TokensLoader().load(prefix=None).prefix == "env"

    def test_missing_file(self, tmp_path):
        """Test a missing config file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError) as exc_info:
            TokensLoader(tmp_path / "missing.json").load()
        assert "missing.json" in exc_info.value.message

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises ConfigurationError."""
        config_file = tmp_path / "tokens.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError) as exc_info:
            TokensLoader(config_file).load()
        assert "Invalid JSON" in exc_info.value.message

    def test_non_object_json(self, tmp_path):
        """Test a JSON array is rejected."""
        config_file = tmp_path / "tokens.json"
        config_file.write_text("[1, 2]")

        with pytest.raises(ConfigurationError):
            TokensLoader(config_file).load()

    def test_invalid_values(self, tmp_path):
        """Test schema violations become ConfigurationError."""
        config_file = tmp_path / "tokens.json"
        config_file.write_text(json.dumps({"breakpoints": {"sm": "40em"}}))

        with pytest.raises(ConfigurationError) as exc_info:
            TokensLoader(config_file).load()
        assert exc_info.value.details == {"config_file": str(config_file)}

    def test_load_tokens_wrapper(self):
        """Test the convenience wrapper forwards overrides."""
        assert load_tokens(prefix="x").prefix == "x"
