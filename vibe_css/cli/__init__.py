"""Command line interface for the vibe-css generator.

Modules:
    output: OutputManager for consistent CLI output with color/quiet support
    errors: Structured error types with recovery suggestions
    main: click command group (``vibe-css``)
"""

from .errors import (
    CLIError,
    ConfigNotFoundError,
    ConfigurationError,
    ErrorCategory,
    ValidationError,
    handle_exception,
)
from .output import OutputConfig, OutputManager, should_use_color

__all__ = [
    # Output
    "OutputConfig",
    "OutputManager",
    "should_use_color",
    # Errors
    "CLIError",
    "ErrorCategory",
    "ConfigNotFoundError",
    "ConfigurationError",
    "ValidationError",
    "handle_exception",
]
