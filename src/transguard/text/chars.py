"""Character predicates used by the classifier, decoder, and comparator.

All predicates accept a single character. An empty string (used as the
end-of-text sentinel) is never a member of any class.
"""

from transguard.core.constants import APOSTROPHES

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_numeric(ch: str) -> bool:
    """Narrow [0-9] digits only (no full-width or other script digits)."""
    return "0" <= ch <= "9" and len(ch) == 1


def is_alpha(ch: str) -> bool:
    return len(ch) == 1 and ch.isalpha()


def is_upper(ch: str) -> bool:
    return len(ch) == 1 and ch.isupper()


def is_hex_digit(ch: str) -> bool:
    return ch in _HEX_DIGITS


def is_space(ch: str) -> bool:
    return len(ch) == 1 and ch.isspace()


def is_apostrophe(ch: str) -> bool:
    """Straight single quote or one of its typographic variants."""
    return ch in APOSTROPHES


def is_either(ch: str, first: str, second: str) -> bool:
    return ch == first or ch == second
