"""Unit tests for structured CLI errors."""

from vibe_css.cli.errors import (
    CLIError,
    ConfigNotFoundError,
    ConfigurationError,
    ErrorCategory,
    ValidationError,
    handle_exception,
)


class TestCLIError:
    """Tests for CLIError formatting."""

    def test_format_plain(self):
        """Test formatting without color."""
        error = CLIError(
            category=ErrorCategory.RUNTIME,
            message="Something broke",
            suggestion="Try again",
            details={"class_name": "vibe-p-4"},
        )

        assert error.format(use_color=False) == (
            "Error: Something broke\nSuggestion: Try again\n  class_name: vibe-p-4"
        )
        assert str(error) == error.format(use_color=False)

    def test_format_with_color(self):
        """Test color codes are added when requested."""
        error = CLIError(category=ErrorCategory.RUNTIME, message="boom")
        assert "\033[91m" in error.format(use_color=True)

    def test_is_exception(self):
        """Test CLIError carries its message as exception args."""
        error = CLIError(category=ErrorCategory.RUNTIME, message="boom")
        assert error.args == ("boom",)


class TestErrorSubclasses:
    """Tests for the specific error types."""

    def test_config_not_found(self):
        """Test ConfigNotFoundError is a file system error."""
        error = ConfigNotFoundError("tokens.json")

        assert error.category is ErrorCategory.FILE_SYSTEM
        assert "tokens.json" in error.message
        assert error.details == {"path": "tokens.json"}
        assert error.exit_code == 1

    def test_configuration_error(self):
        """Test ConfigurationError keeps the config file path."""
        error = ConfigurationError("bad value", config_file="tokens.json")

        assert error.category is ErrorCategory.CONFIGURATION
        assert error.details == {"config_file": "tokens.json"}
        assert error.suggestion

    def test_validation_error_exit_code(self):
        """Test ValidationError uses exit code 2."""
        error = ValidationError("No class names given")

        assert error.category is ErrorCategory.VALIDATION
        assert error.exit_code == 2


class TestHandleException:
    """Tests for handle_exception."""

    def test_cli_error(self):
        """Test CLI errors keep their exit code."""
        message, exit_code = handle_exception(ValidationError("bad"), use_color=False)

        assert message.startswith("Error: bad")
        assert exit_code == 2

    def test_generic_error(self):
        """Test other exceptions exit with 1."""
        message, exit_code = handle_exception(OSError("disk full"), use_color=False)

        assert message == "Error: disk full"
        assert exit_code == 1
