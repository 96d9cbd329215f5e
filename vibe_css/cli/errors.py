"""Structured error types with recovery suggestions.

Generation never raises for unrecognized class names; these errors cover
configuration loading and command-line input only.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_RED = "\033[91m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_RESET = "\033[0m"


def _paint(text: str, code: str, use_color: bool) -> str:
    return f"{code}{text}{_RESET}" if use_color else text


class ErrorCategory(Enum):
    """Where an error came from."""

    CONFIGURATION = "configuration"  # token file or override values
    FILE_SYSTEM = "file_system"  # missing or unreadable paths
    VALIDATION = "validation"  # bad command-line input
    RUNTIME = "runtime"


@dataclass
class CLIError(Exception):
    """An error the CLI reports to the user and exits on.

    Attributes:
        category: Source of the error.
        message: One-line description shown after ``Error:``.
        suggestion: What the user can do about it, if anything.
        details: Extra key/value context printed below the message.
        exit_code: Process exit status.
    """

    category: ErrorCategory
    message: str
    suggestion: str | None = None
    details: dict[str, Any] | None = field(default_factory=dict)
    exit_code: int = 1

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def format(self, use_color: bool = True) -> str:
        """Render message, suggestion and details as terminal text."""
        lines = [f"{_paint('Error:', _RED, use_color)} {self.message}"]
        if self.suggestion:
            lines.append(f"{_paint('Suggestion:', _CYAN, use_color)} {self.suggestion}")
        lines.extend(
            _paint(f"  {key}: {value}", _DIM, use_color)
            for key, value in (self.details or {}).items()
        )
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format(use_color=False)


class ConfigNotFoundError(CLIError):
    """A ``--config`` path that does not exist."""

    def __init__(self, path: str):
        super().__init__(
            category=ErrorCategory.FILE_SYSTEM,
            message=f"Token config file not found: {path}",
            suggestion="Verify the --config path exists and is readable",
            details={"path": path},
        )


class ConfigurationError(CLIError):
    """Token config that cannot be read or fails validation."""

    def __init__(
        self,
        message: str,
        config_file: str | None = None,
        suggestion: str | None = None,
    ):
        super().__init__(
            category=ErrorCategory.CONFIGURATION,
            message=message,
            suggestion=suggestion
            or "Check the config file is valid JSON and values match the token schema",
            details={"config_file": config_file} if config_file else None,
        )


class ValidationError(CLIError):
    """Unusable command-line input; exits with status 2 like click usage errors."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            category=ErrorCategory.VALIDATION,
            message=message,
            suggestion=suggestion or "Run the command with --help for usage",
            exit_code=2,
        )


def handle_exception(
    error: Exception,
    use_color: bool = True,
    verbose: bool = False,
) -> tuple[str, int]:
    """Turn an exception into a printable message and an exit code.

    Args:
        error: The exception raised by a command.
        use_color: Emit ANSI colors.
        verbose: Append the current traceback.

    Returns:
        Tuple of (message, exit_code).
    """
    if isinstance(error, CLIError):
        message, exit_code = error.format(use_color=use_color), error.exit_code
    else:
        message, exit_code = f"{_paint('Error:', _RED, use_color)} {error}", 1

    if verbose:
        message = f"{message}\n\nTraceback:\n{traceback.format_exc()}"
    return message, exit_code
