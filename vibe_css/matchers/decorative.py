"""Multi-rule decorative bundles: entrance animations, backgrounds and prose.

These utilities may emit several rules for one class name, including a
companion ``@keyframes`` block named after the variable namespace
(``vibe-float`` by default).
"""

from ..rule import CascadeOrder, CssRule, keyframes
from .base import BaseMatcher

_FADE_UP = "from { opacity: 0; transform: translateY({dy}); } to { opacity: 1; transform: translateY(0); }"
_FLOAT = "0%, 100% { transform: translateY(0); } 50% { transform: translateY(-20px); }"
_SPRING = "cubic-bezier(0.34, 1.56, 0.64, 1)"

# name -> (keyframes suffix, keyframes body, animation template)
# "{kf}" in the animation template is replaced by the namespaced keyframes name
ANIMATED_BUNDLES = {
    "page-enter": (
        "pageEnter",
        _FADE_UP.replace("{dy}", "12px"),
        "animation: {kf} 0.4s ease-out forwards;",
    ),
    "overlay-enter": (
        "overlayEnter",
        "from { opacity: 0; } to { opacity: 1; }",
        "animation: {kf} 0.2s ease-out forwards;",
    ),
    "modal-enter": (
        "modalEnter",
        "from { opacity: 0; transform: scale(0.95) translateY(-10px); } "
        "to { opacity: 1; transform: scale(1) translateY(0); }",
        f"animation: {{kf}} 0.25s {_SPRING} forwards;",
    ),
    "animate-float": ("float", _FLOAT, "animation: {kf} 6s ease-in-out infinite;"),
    "animate-float-delayed": (
        "float",
        _FLOAT,
        "animation: {kf} 6s ease-in-out 3s infinite;",
    ),
    "pulse-dot": (
        "pulseDot",
        "0%, 100% { opacity: 1; transform: scale(1); } "
        "50% { opacity: 0.6; transform: scale(1.25); }",
        "animation: {kf} 1.5s ease-in-out infinite;",
    ),
    "copy-success-icon": (
        "checkBounceIn",
        "0% { opacity: 0; transform: scale(0); } 50% { transform: scale(1.2); } "
        "100% { opacity: 1; transform: scale(1); }",
        f"animation: {{kf}} 0.3s {_SPRING} forwards;",
    ),
}

# name -> (declarations, bucket)
STATIC_BUNDLES = {
    "gradient-orb": (
        "border-radius: 9999px; filter: blur(80px); pointer-events: none;",
        CascadeOrder.EFFECTS,
    ),
    "gradient-orb-teal": (
        "background: radial-gradient(circle at 30% 30%, rgb(6 84 101 / 0.9), rgb(6 84 101 / 0));",
        CascadeOrder.BACKGROUND,
    ),
    "gradient-orb-lilac": (
        "background: radial-gradient(circle at 30% 30%, rgb(170 152 169 / 0.9), "
        "rgb(170 152 169 / 0));",
        CascadeOrder.BACKGROUND,
    ),
}

_GRID_LINES = (
    "background-image: linear-gradient(to right, {c} 1px, transparent 1px), "
    "linear-gradient(to bottom, {c} 1px, transparent 1px);"
)

# descendant suffix -> declarations; "" targets the element itself
PROSE_RULES = (
    ("", "line-height: 1.75;"),
    (" > :first-child", "margin-top: 0;"),
    (" > :last-child", "margin-bottom: 0;"),
    (" p", "margin: 1rem 0;"),
    (" h2", "margin: 2.25rem 0 1rem; font-size: 1.5rem; font-weight: 700; letter-spacing: -0.01em;"),
    (" h3", "margin: 1.75rem 0 0.75rem; font-size: 1.25rem; font-weight: 700; letter-spacing: -0.01em;"),
    ((" ul", " ol"), "margin: 1rem 0; padding-left: 1.25rem;"),
    (" li", "margin: 0.5rem 0;"),
    (" a", "text-decoration: underline; text-underline-offset: 3px;"),
    (" code", "padding: 0.15rem 0.35rem; border-radius: 0.375rem; background: rgb(244 244 245);"),
    (" blockquote", "margin: 1rem 0; padding-left: 1rem; border-left: 3px solid rgb(161 161 170);"),
    (" table", "width: 100%; border-collapse: collapse;"),
    (
        " thead th",
        "text-align: left; font-size: 0.875rem; font-weight: 600; padding: 0.5rem 0.75rem; "
        "border-bottom: 1px solid rgb(228 228 231);",
    ),
    (
        " tbody td",
        "padding: 0.5rem 0.75rem; border-bottom: 1px solid rgb(244 244 245); vertical-align: top;",
    ),
)

PROSE_INVERT_RULES = (
    (" code", "background: rgb(39 39 42);"),
    (" blockquote", "border-left-color: rgb(82 82 91);"),
    (" thead th", "border-bottom-color: rgb(63 63 70);"),
    (" tbody td", "border-bottom-color: rgb(39 39 42);"),
)


class DecorativeMatcher(BaseMatcher):
    """Animation and background bundles used by documentation-style pages."""

    @property
    def name(self) -> str:
        return "decorative"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.EFFECTS

    def _frames_name(self, suffix: str) -> str:
        return f"{self.tokens.variable_namespace}-{suffix}"

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        if name in ANIMATED_BUNDLES:
            suffix, body, animation = ANIMATED_BUNDLES[name]
            frames_name = self._frames_name(suffix)
            return [keyframes(frames_name, body)] + self.rule(
                selector, animation.replace("{kf}", frames_name)
            )

        if name in STATIC_BUNDLES:
            declarations, order = STATIC_BUNDLES[name]
            return self.rule(selector, declarations, order=order)

        if name == "stagger-children":
            frames_name = self._frames_name("staggerFadeUp")
            return [keyframes(frames_name, _FADE_UP.replace("{dy}", "20px"))] + self.rule(
                f"{selector} > *",
                f"opacity: 0; animation: {frames_name} 0.6s ease-out forwards; "
                "animation-delay: calc(var(--stagger-index, 0) * 80ms);",
            )

        if name == "press-effect":
            return self.rule(
                f"{selector}:active",
                "transform: scale(0.98); transition: transform 0.1s ease;",
                order=CascadeOrder.INTERACTIVITY,
            )

        if name == "bg-grid-pattern":
            light = _GRID_LINES.replace("{c}", "rgb(228 228 231 / 0.6)")
            dark = _GRID_LINES.replace("{c}", "rgb(63 63 70 / 0.35)")
            return self.rule(
                selector, f"{light} background-size: 64px 64px;", CascadeOrder.BACKGROUND
            ) + self.rule(f".dark {selector}", dark, CascadeOrder.BACKGROUND)

        if name == "text-gradient-animated":
            frames_name = self._frames_name("gradientShift")
            return [
                keyframes(
                    frames_name,
                    "0%, 100% { background-position: 0% 50%; } "
                    "50% { background-position: 100% 50%; }",
                )
            ] + self.rule(
                selector,
                "background-size: 200% 100%; -webkit-background-clip: text; "
                "background-clip: text; -webkit-text-fill-color: transparent; "
                f"color: transparent; animation: {frames_name} 3s ease infinite;",
                CascadeOrder.TYPOGRAPHY,
            )
        return None


class ProseMatcher(BaseMatcher):
    """``prose`` typography bundle and its ``prose-invert`` dark companion."""

    @property
    def name(self) -> str:
        return "prose"

    @property
    def category(self) -> CascadeOrder:
        return CascadeOrder.TYPOGRAPHY

    def match(self, name: str, selector: str) -> list[CssRule] | None:
        if name == "prose":
            table = PROSE_RULES
        elif name == "prose-invert":
            table = PROSE_INVERT_RULES
        else:
            return None

        rules = []
        for suffixes, declarations in table:
            if isinstance(suffixes, str):
                suffixes = (suffixes,)
            target = ", ".join(f"{selector}{suffix}" for suffix in suffixes)
            rules.extend(self.rule(target, declarations))
        return rules
