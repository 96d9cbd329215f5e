"""Shadows, opacity, transitions, animations, transforms and filters."""

from ..colors import percent_to_decimal
from ..rule import CascadeOrder, CssRule, keyframes
from .base import BaseMatcher, negate, parse_int

SHADOWS = {
    "shadow-sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "shadow": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "shadow-md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "shadow-lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "shadow-xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "shadow-2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "shadow-inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "shadow-none": "0 0 #0000",
}

_EASE_DEFAULT = "transition-timing-function: cubic-bezier(0.4, 0, 0.2, 1); transition-duration: 150ms;"

TRANSITIONS = {
    "transition-none": "transition-property: none;",
    "transition-all": f"transition-property: all; {_EASE_DEFAULT}",
    "transition": "transition-property: color, background-color, border-color, "
    "text-decoration-color, fill, stroke, opacity, box-shadow, transform, filter, "
    f"backdrop-filter; {_EASE_DEFAULT}",
    "transition-colors": "transition-property: color, background-color, border-color, "
    f"text-decoration-color, fill, stroke; {_EASE_DEFAULT}",
    "transition-opacity": f"transition-property: opacity; {_EASE_DEFAULT}",
    "transition-shadow": f"transition-property: box-shadow; {_EASE_DEFAULT}",
    "transition-transform": f"transition-property: transform; {_EASE_DEFAULT}",
}

EASINGS = {
    "ease-linear": "linear",
    "ease-in": "cubic-bezier(0.4, 0, 1, 1)",
    "ease-out": "cubic-bezier(0, 0, 0.2, 1)",
    "ease-in-out": "cubic-bezier(0.4, 0, 0.2, 1)",
}

# animate-X -> (animation shorthand, keyframes body or None)
ANIMATIONS = {
    "animate-none": ("none", None),
    "animate-spin": (
        "spin 1s linear infinite",
        "to { transform: rotate(360deg); }",
    ),
    "animate-ping": (
        "ping 1s cubic-bezier(0, 0, 0.2, 1) infinite",
        "75%, 100% { transform: scale(2); opacity: 0; }",
    ),
    "animate-pulse": (
        "pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite",
        "50% { opacity: 0.5; }",
    ),
    "animate-bounce": (
        "bounce 1s infinite",
        "0%, 100% { transform: translateY(-25%); animation-timing-function: "
        "cubic-bezier(0.8, 0, 1, 1); } 50% { transform: none; "
        "animation-timing-function: cubic-bezier(0, 0, 0.2, 1); }",
    ),
}

BACKDROP_BLUR = {
    "none": "0",
    "sm": "4px",
    "": "8px",
    "md": "12px",
    "lg": "16px",
    "xl": "24px",
    "2xl": "40px",
    "3xl": "64px",
}

TRANSFORM = (
    "transform: translate(var(--tw-translate-x, 0), var(--tw-translate-y, 0)) "
    "rotate(var(--tw-rotate, 0)) scaleX(var(--tw-scale-x, 1)) "
    "scaleY(var(--tw-scale-y, 1));"
)


class EffectsMatcher(BaseMatcher):
    """Visual effects utilities."""

    @property
    def name(self) -> str:
        return "effects"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.EFFECTS

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        if name == "bg-clip-text":
            return self.rule(
                selector,
                "-webkit-background-clip: text; background-clip: text;",
                order=CascadeOrder.BACKGROUND,
            )
        if name in SHADOWS:
            return self.rule(selector, f"box-shadow: {SHADOWS[name]};")
        if name.startswith("opacity-"):
            value = self.tokens.opacity.get(name[8:])
            return None if value is None else self.rule(selector, f"opacity: {value};")
        if name in TRANSITIONS:
            return self.rule(selector, TRANSITIONS[name])
        if name.startswith("duration-"):
            ms = parse_int(name[9:])
            return None if ms is None else self.rule(selector, f"transition-duration: {ms}ms;")
        if name in EASINGS:
            return self.rule(selector, f"transition-timing-function: {EASINGS[name]};")
        if name in ANIMATIONS:
            return self._animation(name, selector)
        if name == "backdrop-blur" or name.startswith("backdrop-blur-"):
            blur = BACKDROP_BLUR.get(name[len("backdrop-blur-") :] if name != "backdrop-blur" else "")
            if blur is None:
                return None
            return self.rule(
                selector,
                f"-webkit-backdrop-filter: blur({blur}); backdrop-filter: blur({blur});",
            )
        return self._transform(name, selector)

    def _animation(self, name: str, selector: str) -> list[CssRule]:
        shorthand, frames = ANIMATIONS[name]
        rules = self.rule(selector, f"animation: {shorthand};")
        if frames is None:
            return rules
        frames_name = shorthand.split(" ", 1)[0]
        return [keyframes(frames_name, frames)] + rules

    def _transform(self, name: str, selector: str) -> list[CssRule] | None:
        negative = name.startswith("-")
        base = name[1:] if negative else name

        if base.startswith(("translate-x-", "translate-y-")):
            axis = base[10]
            value = self._translate_value(base[12:])
            if value is None:
                return None
            if negative:
                value = negate(value)
            return self.rule(selector, f"--tw-translate-{axis}: {value}; {TRANSFORM}")

        if base.startswith("rotate-"):
            degrees = parse_int(base[7:])
            if degrees is None:
                return None
            sign = "-" if negative and degrees else ""
            return self.rule(selector, f"--tw-rotate: {sign}{degrees}deg; {TRANSFORM}")

        if base.startswith("scale-") and not negative:
            percent = parse_int(base[6:])
            if percent is None:
                return None
            value = percent_to_decimal(percent)
            return self.rule(
                selector, f"--tw-scale-x: {value}; --tw-scale-y: {value}; {TRANSFORM}"
            )
        return None

    def _translate_value(self, key: str) -> str | None:
        if key == "full":
            return "100%"
        sizing = self.tokens.sizing.get(key)
        if sizing is not None and sizing.endswith("%"):
            return sizing
        return self.tokens.spacing.get(key)
