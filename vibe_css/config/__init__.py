"""Design token configuration."""

from .loader import TokensLoader, load_tokens
from .models import DesignTokens
from .palette import DEFAULT_PALETTE, SEMANTIC_COLORS, SHADES

__all__ = [
    "DesignTokens",
    "TokensLoader",
    "load_tokens",
    "DEFAULT_PALETTE",
    "SEMANTIC_COLORS",
    "SHADES",
]
