"""Selector escaping for raw class names."""

import re

# Characters that are legal in a class attribute but special in a selector
_SPECIAL_CHARS = re.compile(r"([:/\[\].#(),%])")

# An identifier cannot start with a digit, or with a hyphen and a digit
_LEADING_DIGIT = re.compile(r"^(-?)(\d)")


def _escape_code_point(match: re.Match) -> str:
    return f"{match.group(1)}\\{ord(match.group(2)):x} "


def escape_class_name(class_name: str) -> str:
    """Backslash-escape selector-special characters in a class name.

    Must be applied once, to the literal class name as it appears in
    markup (variant prefixes and bracket values included). A leading
    digit becomes a code point escape, so ``2xl:x`` gives ``\\32 xl\\:x``.

    Args:
        class_name: Raw class name, e.g. ``"hover:vibe-w-[50%]"``.

    Returns:
        Escaped name, e.g. ``"hover\\:vibe-w-\\[50\\%\\]"``.
    """
    escaped = _SPECIAL_CHARS.sub(r"\\\1", class_name)
    return _LEADING_DIGIT.sub(_escape_code_point, escaped)


def class_selector(class_name: str) -> str:
    """Return the class selector matching ``class_name`` exactly."""
    return f".{escape_class_name(class_name)}"
