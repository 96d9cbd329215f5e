"""Stylesheet assembly from a collection of class names.

Deduplicates class names, generates their rules, drops identical rules
(shared ``@keyframes`` blocks, for instance) and stable-sorts the result by
cascade order. Ties keep first-seen order, which is what gives later
utilities precedence within a bucket.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .css_logging import LogCategory, get_category_logger
from .generator import UtilityGenerator
from .rule import CssRule

logger = get_category_logger(LogCategory.STYLESHEET)

HEADER = "/* Generated by vibe-css */"


@dataclass
class Stylesheet:
    """Assembled rules plus recognition statistics."""

    rules: list[CssRule] = field(default_factory=list)
    recognized: list[str] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)

    def render(self, header: bool = True) -> str:
        """Render the stylesheet as CSS text, one rule per line.

        Rules without declarations (marker classes such as ``group``) are
        not written out.
        """
        lines = [HEADER] if header else []
        lines.extend(rule.to_css() for rule in self.rules if rule.declarations)
        return "\n".join(lines) + "\n" if lines else ""

    def stats(self) -> dict[str, Any]:
        """Return counts for reporting."""
        return {
            "total_classes": len(self.recognized) + len(self.unknown),
            "recognized": len(self.recognized),
            "unknown": len(self.unknown),
            "rules": len(self.rules),
        }


class StylesheetAssembler:
    """Collects class names and builds a sorted, deduplicated stylesheet."""

    def __init__(self, generator: UtilityGenerator | None = None):
        self.generator = generator or UtilityGenerator()
        self._class_names: dict[str, None] = {}

    def add(self, class_name: str) -> None:
        """Queue a class name; blanks and repeats are ignored."""
        class_name = class_name.strip()
        if class_name:
            self._class_names.setdefault(class_name, None)

    def add_many(self, class_names: Iterable[str]) -> None:
        for class_name in class_names:
            self.add(class_name)

    @property
    def class_names(self) -> list[str]:
        """Queued class names in first-seen order."""
        return list(self._class_names)

    def build(self) -> Stylesheet:
        """Generate, deduplicate and stable-sort all queued class names."""
        sheet = Stylesheet()
        seen: set[tuple[str, str, str | None]] = set()
        collected: list[CssRule] = []

        for class_name in self._class_names:
            rules = self.generator.generate(class_name)
            if not rules:
                sheet.unknown.append(class_name)
                continue
            sheet.recognized.append(class_name)
            for rule in rules:
                key = (rule.selector, rule.declarations, rule.media_query)
                if key in seen:
                    continue
                seen.add(key)
                collected.append(rule)

        # sorted() is stable, so equal orders keep first-seen order
        sheet.rules = sorted(collected, key=lambda rule: rule.order)
        logger.debug(
            f"Assembled {len(sheet.rules)} rules from {len(sheet.recognized)} "
            f"recognized classes ({len(sheet.unknown)} unknown)"
        )
        return sheet


def build_stylesheet(
    class_names: Iterable[str], generator: UtilityGenerator | None = None
) -> Stylesheet:
    """Convenience wrapper: assemble a stylesheet for ``class_names``."""
    assembler = StylesheetAssembler(generator)
    assembler.add_many(class_names)
    return assembler.build()
