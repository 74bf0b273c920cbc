"""Lexical detection of Internet addresses, file paths, and email addresses.

Both checks work on a span (a string plus an optional explicit length) and
apply an ordered list of heuristics where the first matching rule decides.
Nothing is validated against the network or the filesystem.

Rule order matters: several rules overlap (e.g. a 3-letter extension that
also looks like a capitalized word), and the earlier rule's guard wins.
"""

from typing import Optional

from transguard.core.constants import (
    KNOWN_WEB_EXTENSIONS,
    MAX_FILE_ADDRESS_LENGTH,
    MIN_ADDRESS_LENGTH,
    TRANSLATION_FILE_EXTENSIONS,
    UNIX_ROOT_DIRECTORIES,
    URL_PROTOCOLS,
)
from transguard.text.chars import (
    is_alpha,
    is_apostrophe,
    is_either,
    is_space,
    is_upper,
)
from transguard.text.scan import (
    contains_space,
    find_char,
    rfind_char,
    span_of,
    starts_with_nocase,
)


def is_url(text: Optional[str], length: Optional[int] = None) -> bool:
    """Determine whether a span is an Internet address.

    Args:
        text: Text to review
        length: Number of characters of ``text`` to review (defaults to all)

    Returns:
        True if the span looks like a URL (protocol-prefixed, a bare domain
        followed by a path, or a bare domain with a well-known suffix)
    """
    span = span_of(text, length)
    length = len(span)
    if length < MIN_ADDRESS_LENGTH:
        return False

    # protocols
    for protocol in URL_PROTOCOLS:
        if starts_with_nocase(span, protocol):
            return True

    # domain missing the "www" prefix, followed by a path (e.g. "ibm.com/index.html")
    first_slash = find_char(span, "/")
    if first_slash != -1:
        last_dot = rfind_char(span, ".", first_slash)
        if (last_dot > 0 and
                last_dot + 4 == first_slash and
                span[last_dot - 1].isalnum() and
                is_alpha(span[last_dot + 1]) and
                is_alpha(span[last_dot + 2]) and
                is_alpha(span[last_dot + 3])):
            return True

    length = _without_possessive(span, length)

    # a sentence that happens to end with a domain name
    if contains_space(span[:length]):
        return False

    period = rfind_char(span, ".", length)
    if period != -1 and period < length - 1:
        if span[period + 1:length] in KNOWN_WEB_EXTENSIONS:
            return True

    return False


def is_file_address(text: Optional[str], length: Optional[int] = None) -> bool:
    """Determine whether a span is a URL, local file path, file name, or email.

    Args:
        text: Text to review
        length: Number of characters of ``text`` to review (defaults to all)

    Returns:
        True if the span looks like any kind of file or network address
    """
    span = span_of(text, length)
    length = len(span)
    if length < MIN_ADDRESS_LENGTH:
        return False

    if is_url(span):
        return True

    # UNC path
    if span[0] == "\\" and span[1] == "\\":
        return True

    # Windows drive (either separator)
    if is_alpha(span[0]) and span[1] == ":" and is_either(span[2], "\\", "/"):
        return True

    # UNIX path with at least two folders
    if span[0] == "/" and find_char(span, "/", 2) != -1:
        return True

    # UNIX path missing the leading '/'
    if find_char(span, "/") != -1 and span.startswith(UNIX_ROOT_DIRECTORIES):
        return True

    if _is_email(span, length):
        return True

    # Long fragments are sentences that may happen to end with a file name.
    if length > MAX_FILE_ADDRESS_LENGTH:
        return False

    length = _without_possessive(span, length)
    return _has_file_extension(span[:length])


def _is_email(span: str, length: int) -> bool:
    """An '@' after the first character, no spaces, and a dot-separated domain."""
    space = find_char(span, " ", 1, length)
    at_sign = find_char(span, "@", 1, length)
    if at_sign == -1 or space != -1:
        return False
    dot = find_char(span, ".", at_sign, length)
    return dot != -1 and dot < length - 1


def _without_possessive(span: str, length: int) -> int:
    """Shorten the effective length by 2 if the span ends with "'s"."""
    if (length >= 3 and
            is_apostrophe(span[length - 2]) and
            is_either(span[length - 1], "s", "S")):
        return length - 2
    return length


def _is_typo(first: str, second: str) -> bool:
    """A capitalized word right after a period, e.g. "file.Robert".

    Missing space after a sentence rather than an extension.
    """
    return is_upper(first) and not is_upper(second)


def _is_wildcard(name: str, dot: int) -> bool:
    """A file filter such as "*.txt" rather than a path."""
    return dot >= 1 and name[dot - 1] == "*"


def _is_bare_extension(name: str, dot: int) -> bool:
    """An extension mentioned on its own in a sentence ("Insert .tga")."""
    return dot >= 1 and is_space(name[dot - 1])


def _has_file_extension(name: str) -> bool:
    length = len(name)

    # 3-letter extension
    if (length >= 4 and name[length - 4] == "." and
            is_alpha(name[length - 3]) and
            is_alpha(name[length - 2]) and
            is_alpha(name[length - 1])):
        dot = length - 4
        if _is_typo(name[length - 3], name[length - 2]):
            return False
        if _is_wildcard(name, dot) or _is_bare_extension(name, dot):
            return False
        return True

    # 4-letter Microsoft XML-based extension (.docx, .xlsx, ...)
    if (length >= 5 and name[length - 5] == "." and
            is_alpha(name[length - 4]) and
            is_alpha(name[length - 3]) and
            is_alpha(name[length - 2]) and
            is_either(name[length - 1], "x", "X")):
        dot = length - 5
        if _is_typo(name[length - 4], name[length - 3]):
            return False
        if _is_wildcard(name, dot) or _is_bare_extension(name, dot):
            return False
        return True

    # HTML
    if length >= 5 and name[length - 5] == "." and starts_with_nocase(name, "html", length - 4):
        dot = length - 5
        if _is_wildcard(name, dot) or _is_bare_extension(name, dot):
            return False
        return True

    # translation catalogs
    if length >= 3 and name[length - 3] == ".":
        extension = name[length - 2:].lower()
        if extension in TRANSLATION_FILE_EXTENSIONS:
            return True

    # tarball (.tar.gz, .tar.xz, ...)
    if length >= 7 and starts_with_nocase(name, ".tar.", length - 7):
        if _is_typo(name[length - 2], name[length - 1]):
            return False
        return True

    # C source/header, common in documentation
    if length >= 3 and name[length - 2] == "." and is_either(name[length - 1], "h", "c"):
        return True

    return False
