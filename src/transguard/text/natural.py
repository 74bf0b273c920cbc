"""Natural-order ("human") string comparison.

Embedded runs of digits compare by numeric value, so "item2" sorts before
"item12". Numbers may carry thousands separators ("1,000" == "1000").
"""

import functools
import math
import re
from typing import Callable, Iterable, NamedTuple, Optional

from transguard.core.constants import NUMERIC_SCRATCH_CAPACITY
from transguard.text.chars import is_numeric

# What strtod() accepts for a decimal number in ASCII digits (no hex, inf or nan)
_DECIMAL_RE = re.compile(r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

_THOUSANDS_SEPARATORS = frozenset(",.")
_NUMBER_RUN_CHARS = frozenset("0123456789,.+-")


class NumericToken(NamedTuple):
    """A number read from text and the index one past its last character."""
    value: float
    end: int


def _parse_decimal(text: str, start: int = 0) -> NumericToken:
    """Locale-free strtod(): 0.0 with no progress if nothing is readable."""
    match = _DECIMAL_RE.match(text, start)
    if match is None:
        return NumericToken(0.0, start)
    value = float(match.group(1))
    if math.isinf(value):
        value = 0.0
    return NumericToken(value, match.end())


def parse_numeric_with_separators(text: str, start: int = 0) -> NumericToken:
    """Read a number from ``text`` at ``start``, allowing thousands separators.

    Reads like strtod(). If that stops on a ',' or '.' that is followed by
    another digit, the whole run of digits, signs, and separators is re-read
    with that separator removed, so "1,000,000" gives 1000000.0.

    The cleaned copy holds at most ``NUMERIC_SCRATCH_CAPACITY`` characters;
    longer runs are truncated before re-reading (a known limitation).

    Only decimal forms in ASCII digits are read. Hex ("0x1A"), "inf" and
    "nan" are not numbers here, so "0x1A" reads as 0 and stops at the "x".

    Args:
        text: Text to read from
        start: Index to start reading at

    Returns:
        NumericToken with the value (0.0 if nothing could be read) and the
        index just past the number, measured in the original text
    """
    if not text or start >= len(text):
        return NumericToken(0.0, start)

    value, end = _parse_decimal(text, start)

    number_start = start
    while number_start < end and text[number_start].isspace():
        number_start += 1

    if (end > number_start and
            end + 1 < len(text) and
            text[end] in _THOUSANDS_SEPARATORS and
            is_numeric(text[end + 1])):
        separator = text[end]
        run_end = number_start
        while run_end < len(text) and text[run_end] in _NUMBER_RUN_CHARS:
            run_end += 1

        cleaned = [ch for ch in text[number_start:run_end] if ch != separator]
        value = _parse_decimal("".join(cleaned[:NUMERIC_SCRATCH_CAPACITY])).value
        end = run_end

    return NumericToken(value, end)


def natural_order_compare(
    first: Optional[str],
    second: Optional[str],
    case_insensitive: bool = False,
) -> int:
    """Compare two strings, treating runs of digits as numbers.

    Whitespace is skipped on both sides. A string that runs out first sorts
    lower. ``None`` sorts before any string.

    Args:
        first: First string
        second: Second string
        case_insensitive: Whether letters compare without regard to case

    Returns:
        -1 if first is less, 1 if first is greater, 0 if they are equal
    """
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1

    first_len, second_len = len(first), len(second)
    i = j = 0

    while True:
        while i < first_len and first[i].isspace():
            i += 1
        while j < second_len and second[j].isspace():
            j += 1

        ch1 = first[i] if i < first_len else ""
        ch2 = second[j] if j < second_len else ""

        if is_numeric(ch1) and is_numeric(ch2):
            first_number = parse_numeric_with_separators(first, i)
            second_number = parse_numeric_with_separators(second, j)

            if first_number.value < second_number.value:
                return -1
            if first_number.value > second_number.value:
                return 1

            first_done = first_number.end >= first_len
            second_done = second_number.end >= second_len
            if first_done and second_done:
                return 0
            if first_done:
                return -1
            if second_done:
                return 1
            # stuck on something the parser cannot read past
            if first_number.end == i and second_number.end == j:
                return 0
            i, j = first_number.end, second_number.end
            continue

        if not ch1 and not ch2:
            return 0
        if not ch1:
            return -1
        if not ch2:
            return 1

        if case_insensitive:
            ch1, ch2 = ch1.lower(), ch2.lower()

        if ch1 < ch2:
            return -1
        if ch1 > ch2:
            return 1

        i += 1
        j += 1


def natural_sort_key(case_insensitive: bool = False) -> Callable[[str], object]:
    """Key function for ``sorted()``/``list.sort()`` using natural order."""
    return functools.cmp_to_key(
        functools.partial(natural_order_compare, case_insensitive=case_insensitive)
    )


def natural_sorted(
    items: Iterable[str],
    *,
    case_insensitive: bool = False,
    reverse: bool = False,
) -> list[str]:
    """Return ``items`` sorted in natural order."""
    return sorted(items, key=natural_sort_key(case_insensitive), reverse=reverse)
