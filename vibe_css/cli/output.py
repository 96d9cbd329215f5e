"""Terminal output for the CLI commands.

Status messages go to stderr, except ``success`` and ``plain`` which go to
stdout. Color follows the NO_COLOR convention (https://no-color.org/) and
the ``--no-color`` flag; without color, symbols become bracketed words.
Generated CSS is written with ``force=True`` so ``--quiet`` never hides it.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import TextIO

import click


def should_use_color(
    explicit_flag: bool | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Decide whether to emit ANSI colors.

    An explicit flag wins, then NO_COLOR, then FORCE_COLOR; otherwise
    color is used only when ``stream`` (stdout by default) is a TTY.
    """
    if explicit_flag is not None:
        return explicit_flag
    if "NO_COLOR" in os.environ:
        return False
    if "FORCE_COLOR" in os.environ:
        return True
    isatty = getattr(stream or sys.stdout, "isatty", None)
    return bool(isatty and isatty())


@dataclass
class OutputConfig:
    """Flags and streams shared by every command."""

    use_color: bool = True
    quiet: bool = False
    verbose: bool = False
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    err_stream: TextIO = field(default_factory=lambda: sys.stderr)

    @classmethod
    def from_flags(
        cls,
        verbose: bool = False,
        quiet: bool = False,
        no_color: bool = False,
    ) -> OutputConfig:
        return cls(
            use_color=should_use_color(explicit_flag=False if no_color else None),
            quiet=quiet,
            verbose=verbose,
        )


class OutputManager:
    """Prints status lines, summaries and raw text for the CLI."""

    COLORS = {
        "green": "\033[92m",
        "red": "\033[91m",
        "yellow": "\033[93m",
        "dim": "\033[2m",
    }
    RESET = "\033[0m"

    # kind -> (color, symbol, plain-text symbol)
    SYMBOLS = {
        "success": ("green", "✓", "[OK]"),
        "error": ("red", "✗", "[FAIL]"),
        "warning": ("yellow", "⚠", "[WARN]"),
    }

    def __init__(self, config: OutputConfig | None = None):
        self.config = config or OutputConfig()

    def colorize(self, text: str, color: str) -> str:
        """Wrap text in a named color when color output is on."""
        if not self.config.use_color or color not in self.COLORS:
            return text
        return f"{self.COLORS[color]}{text}{self.RESET}"

    def _symbol(self, kind: str) -> str:
        color, symbol, plain = self.SYMBOLS[kind]
        return self.colorize(symbol, color) if self.config.use_color else plain

    def _emit(
        self,
        message: str,
        kind: str | None = None,
        to_stderr: bool = False,
        force: bool = False,
    ) -> None:
        # --quiet only silences stdout chatter
        if self.config.quiet and not (to_stderr or force):
            return
        if kind is not None:
            message = f"{self._symbol(kind)} {message}"
        stream = self.config.err_stream if to_stderr else self.config.stream
        click.echo(message, file=stream)

    def success(self, message: str, force: bool = False) -> None:
        self._emit(message, "success", force=force)

    def error(self, message: str) -> None:
        self._emit(message, "error", to_stderr=True)

    def warning(self, message: str) -> None:
        self._emit(message, "warning", to_stderr=True)

    def plain(self, message: str, force: bool = False) -> None:
        """Print text to stdout with no symbol."""
        self._emit(message, force=force)

    def summary(self, total: int, recognized: int, unknown: int, rules: int) -> None:
        """Print a one-line generation summary to stderr.

        Args:
            total: Distinct class names processed.
            recognized: Class names that produced at least one rule.
            unknown: Class names no matcher recognized.
            rules: Rules in the assembled stylesheet.
        """
        parts = [f"{total} classes", f"{recognized} recognized"]
        if unknown:
            parts.append(f"{unknown} unknown")
        parts.append(f"{rules} rules")
        self._emit(" | ".join(parts), "warning" if unknown else "success", to_stderr=True)
