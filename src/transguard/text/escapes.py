"""Decoding of escaped Unicode values and control characters.

Source strings pulled out of code often still carry their escape syntax
("\\u266f", "\\x0440", "\\n"). These helpers turn that syntax back into
text before natural-language analysis.

An escape is only recognized when its backslash is not itself escaped,
i.e. the character before it is not another backslash. For the Unicode
decoder, "before it" means the previous character of the already rewritten
text, exactly as if the string were being edited in place.
"""

from transguard.text.chars import is_hex_digit

_CONTROL_LETTERS = frozenset("nrt")


def _hex_run(text: str, start: int, limit: int | None = None) -> int:
    """Number of consecutive hex digits in ``text`` from ``start``."""
    end = len(text) if limit is None else min(len(text), start + limit)
    position = start
    while position < end and is_hex_digit(text[position]):
        position += 1
    return position - start


def decode_escaped_unicode_values(text: str) -> str:
    """Replace escaped Unicode code points with the characters they encode.

    - ``\\uXXXX`` (exactly 4 hex digits) becomes that character.
    - ``\\UXXXXXXXX`` (8 hex digits) is removed. 32-bit values are outside
      the 16-bit range this decoder produces, so they are dropped rather
      than mis-encoded.
    - ``\\x`` followed by two or more hex digits consumes the whole hex run;
      the value is truncated to 16 bits.

    Anything else, including escapes with too few digits, is left as is.

    Args:
        text: Text to decode

    Returns:
        The decoded text (never longer than the input)
    """
    if not text:
        return text or ""

    decoded: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\" and (not decoded or decoded[-1] != "\\") and i + 1 < len(text):
            introducer = text[i + 1]
            # "\u266F"
            if introducer == "u" and _hex_run(text, i + 2, 4) == 4:
                decoded.append(chr(int(text[i + 2:i + 6], 16)))
                i += 6
                continue
            # "\U000FF254"
            if introducer == "U" and _hex_run(text, i + 2, 8) == 8:
                i += 10
                continue
            # "\xFF", "\x043F" (variable number of digits, at least two)
            if introducer == "x":
                digits = _hex_run(text, i + 2)
                if digits >= 2:
                    value = int(text[i + 2:i + 2 + digits], 16)
                    decoded.append(chr(value & 0xFFFF))
                    i += 2 + digits
                    continue
        decoded.append(ch)
        i += 1

    return "".join(decoded)


def replace_escaped_control_chars(text: str) -> str:
    """Blank out escaped newlines, carriage returns, and tabs.

    Each unescaped ``\\n``, ``\\r`` or ``\\t`` pair is replaced by two
    spaces, so the length of the text never changes.
    """
    if not text:
        return text or ""

    chars = list(text)
    for i in range(len(chars) - 1):
        if (chars[i] == "\\" and
                chars[i + 1] in _CONTROL_LETTERS and
                (i == 0 or chars[i - 1] != "\\")):
            chars[i] = chars[i + 1] = " "
    return "".join(chars)
