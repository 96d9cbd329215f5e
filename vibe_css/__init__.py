"""vibe-css: just-in-time utility class to CSS rule generator.

Given a utility class name such as ``sm:hover:vibe-bg-primary/50`` the
generator produces the CSS rules for it, using immutable design tokens
for scales, colors and breakpoints.
"""

__version__ = "0.1.0"

from .config import DesignTokens, TokensLoader, load_tokens
from .escape import class_selector, escape_class_name
from .generator import UtilityGenerator, generate
from .rule import CascadeOrder, CssRule
from .stylesheet import Stylesheet, StylesheetAssembler, build_stylesheet

__all__ = [
    "__version__",
    "CascadeOrder",
    "CssRule",
    "DesignTokens",
    "TokensLoader",
    "load_tokens",
    "UtilityGenerator",
    "generate",
    "Stylesheet",
    "StylesheetAssembler",
    "build_stylesheet",
    "class_selector",
    "escape_class_name",
]
