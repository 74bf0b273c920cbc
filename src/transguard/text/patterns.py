"""Removal of printf placeholders and hex color literals from text."""

import re

# The % command (not following another % or \), up to 4 flags, optional
# width/precision, and the specifier. Y, H and M cover datetime formatting.
_PRINTF_RE = re.compile(
    r"([^%\\]|^|\b)%[-+0 #]{0,4}[.0-9]*"
    r"(?:c|C|d|i|o|u|lu|ld|lx|lX|lo|llu|lld|x|X|e|E|f|g|G|a|A|n|p|s|S|Z|zu|Y|H|M)"
)

_HEX_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")


def remove_printf_commands(text: str) -> str:
    """Strip printf placeholders ("%d", "%-5.06f", "%lu", ...) from text.

    Escaped percents ("%%", "\\%") are left alone.
    """
    if not text:
        return text or ""
    return _PRINTF_RE.sub(r"\1", text)


def remove_hex_color_values(text: str) -> str:
    """Strip hex color values such as "#FF00AA" from text."""
    if not text:
        return text or ""
    return _HEX_COLOR_RE.sub("", text)
