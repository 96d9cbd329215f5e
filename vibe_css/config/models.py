"""Design token model consumed by the generator.

Every table is stored as a read-only mapping after validation, so one
``DesignTokens`` instance can be shared by any number of generators.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, validator

from .palette import DEFAULT_PALETTE, SEMANTIC_COLORS

# Lookup tables; a config file merges these over the defaults
TABLE_FIELDS = (
    "spacing",
    "sizing",
    "height_overrides",
    "font_sizes",
    "font_weights",
    "border_radius",
    "opacity",
    "z_index",
    "breakpoints",
    "colors",
)


def _default_spacing() -> dict[str, str]:
    scale = {"0": "0", "px": "1px"}
    steps = [0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 5, 6, 7, 8, 9, 10, 11, 12, 14, 16]
    steps += [20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 64, 72, 80, 96]
    for step in steps:
        key = f"{step:g}"
        scale[key] = f"{step / 4:g}rem"
    return scale


def _default_sizing() -> dict[str, str]:
    sizing = _default_spacing()
    sizing.update(
        {
            "1/2": "50%",
            "1/3": "33.333333%",
            "2/3": "66.666667%",
            "1/4": "25%",
            "2/4": "50%",
            "3/4": "75%",
            "1/5": "20%",
            "2/5": "40%",
            "3/5": "60%",
            "4/5": "80%",
            "1/6": "16.666667%",
            "5/6": "83.333333%",
            "1/12": "8.333333%",
            "full": "100%",
            "screen": "100vw",
            "svw": "100svw",
            "lvw": "100lvw",
            "dvw": "100dvw",
            "min": "min-content",
            "max": "max-content",
            "fit": "fit-content",
            "auto": "auto",
        }
    )
    return sizing


def _default_font_sizes() -> dict[str, tuple[str, str]]:
    return {
        "xs": ("0.75rem", "1rem"),
        "sm": ("0.875rem", "1.25rem"),
        "base": ("1rem", "1.5rem"),
        "lg": ("1.125rem", "1.75rem"),
        "xl": ("1.25rem", "1.75rem"),
        "2xl": ("1.5rem", "2rem"),
        "3xl": ("1.875rem", "2.25rem"),
        "4xl": ("2.25rem", "2.5rem"),
        "5xl": ("3rem", "1"),
        "6xl": ("3.75rem", "1"),
        "7xl": ("4.5rem", "1"),
        "8xl": ("6rem", "1"),
        "9xl": ("8rem", "1"),
    }


def _default_opacity() -> dict[str, str]:
    return {str(n): f"{n / 100:g}" for n in range(0, 101, 5)}


class DesignTokens(BaseModel):
    """Immutable design tokens and feature flags for rule generation.

    Loaded once (see ``TokensLoader``) and shared read-only by every
    generation call.
    """

    # Namespacing
    prefix: str = Field(default="vibe")
    variable_namespace: str = Field(default="vibe")

    # Scales
    spacing: dict[str, str] = Field(default_factory=_default_spacing)
    sizing: dict[str, str] = Field(default_factory=_default_sizing)
    height_overrides: dict[str, str] = Field(
        default_factory=lambda: {
            "screen": "100vh",
            "svh": "100svh",
            "lvh": "100lvh",
            "dvh": "100dvh",
        }
    )
    font_sizes: dict[str, tuple[str, str]] = Field(default_factory=_default_font_sizes)
    font_weights: dict[str, str] = Field(
        default_factory=lambda: {
            "thin": "100",
            "extralight": "200",
            "light": "300",
            "normal": "400",
            "medium": "500",
            "semibold": "600",
            "bold": "700",
            "extrabold": "800",
            "black": "900",
        }
    )
    border_radius: dict[str, str] = Field(
        default_factory=lambda: {
            "none": "0",
            "sm": "0.125rem",
            "": "0.25rem",
            "md": "0.375rem",
            "lg": "0.5rem",
            "xl": "0.75rem",
            "2xl": "1rem",
            "3xl": "1.5rem",
            "full": "9999px",
        }
    )
    opacity: dict[str, str] = Field(default_factory=_default_opacity)
    z_index: dict[str, str] = Field(
        default_factory=lambda: {
            "0": "0",
            "10": "10",
            "20": "20",
            "30": "30",
            "40": "40",
            "50": "50",
            "auto": "auto",
        }
    )
    breakpoints: dict[str, str] = Field(
        default_factory=lambda: {
            "sm": "640px",
            "md": "768px",
            "lg": "1024px",
            "xl": "1280px",
            "2xl": "1536px",
        }
    )
    max_grid_columns: int = Field(default=12, ge=1, le=24)

    # Colors
    colors: dict[str, dict[int, str]] = Field(
        default_factory=lambda: {
            family: dict(shades) for family, shades in DEFAULT_PALETTE.items()
        }
    )
    semantic_colors: tuple[str, ...] = Field(default=SEMANTIC_COLORS)

    # Feature flags
    allow_unprefixed_utilities: bool = Field(default=False)
    enable_responsive: bool = Field(default=True)
    enable_state_variants: bool = Field(default=True)
    enable_dark_mode: bool = Field(default=True)

    class Config:
        frozen = True
        extra = "forbid"

    @validator("prefix", "variable_namespace")
    def validate_identifier(cls, v: str) -> str:
        if any(ch.isspace() for ch in v) or ":" in v:
            raise ValueError("must not contain whitespace or ':'")
        return v

    @validator(
        "spacing",
        "sizing",
        "height_overrides",
        "font_sizes",
        "font_weights",
        "border_radius",
        "opacity",
        "z_index",
        always=True,
    )
    def freeze_table(cls, v: dict[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    @validator("breakpoints", always=True)
    def validate_breakpoints(cls, v: dict[str, str]) -> Mapping[str, str]:
        for name, width in v.items():
            if not width.endswith("px"):
                raise ValueError(f"breakpoint '{name}' must be a px width, got '{width}'")
        return MappingProxyType(dict(v))

    @validator("colors", always=True)
    def validate_colors(
        cls, v: dict[str, dict[int, str]]
    ) -> Mapping[str, Mapping[int, str]]:
        # Lookups are case-insensitive on the family name
        return MappingProxyType(
            {family.lower(): MappingProxyType(dict(shades)) for family, shades in v.items()}
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary of plain containers."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        for name in TABLE_FIELDS:
            data[name] = dict(data[name])
        data["font_sizes"] = {k: list(v) for k, v in self.font_sizes.items()}
        data["colors"] = {
            family: {str(shade): value for shade, value in shades.items()}
            for family, shades in self.colors.items()
        }
        data["semantic_colors"] = list(self.semantic_colors)
        return data
