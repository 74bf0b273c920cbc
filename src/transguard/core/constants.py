"""Constants used throughout transguard.

This module contains enums, lookup tables, and default values shared by the
classifier, the text helpers, and the review stage.
"""

from enum import Enum


class ArtifactKind(Enum):
    """What a reviewed fragment turned out to be."""
    URL = "url"
    EMAIL = "email"
    UNC_PATH = "unc_path"
    WINDOWS_PATH = "windows_path"
    UNIX_PATH = "unix_path"
    FILE_NAME = "file_name"
    EMPTY = "empty"
    PROSE = "prose"


# Protocol prefixes that make a span an address on their own (compared
# case-insensitively against the start of the span)
URL_PROTOCOLS = (
    "http:",
    "https:",
    "ftp:",
    "www.",
    "mailto:",
    "file:",
    # relic from the '90s
    "gopher:",
)

# Last-resort signal for bare domains such as "amazon.com"
KNOWN_WEB_EXTENSIONS = frozenset({
    "com", "org", "edu", "gov", "biz",
    "ca", "au", "ly", "uk",
})

# Well-known UNIX root folders, recognized even without the leading '/'
UNIX_ROOT_DIRECTORIES = (
    "usr/", "var/", "tmp/", "sys/", "srv/", "mnt/", "etc/", "dev/", "bin/",
    "sbin/", "root/", "proc/", "boot/", "home/",
)

# Translation catalogs (".po" and ".mo")
TRANSLATION_FILE_EXTENSIONS = ("mo", "po")

APOSTROPHES = frozenset({
    "'",
    "\u0092",  # apostrophe (Windows-1252 slot)
    "´",  # acute accent used as an apostrophe
    "＇",  # full-width apostrophe
    "’",  # right single quotation mark
})

# Fragments longer than this are assumed to be prose even if they end
# with something that looks like a file extension
MAX_FILE_ADDRESS_LENGTH = 128

# Spans shorter than this are never addresses
MIN_ADDRESS_LENGTH = 5

# Scratch capacity for the thousands-separator cleanup in numeric parsing;
# longer numeric runs are truncated
NUMERIC_SCRATCH_CAPACITY = 64


# Review defaults
DEFAULTS = {
    "decode_escapes": True,
    "strip_printf": True,
    "strip_hex_colors": True,
    "natural_sort_ignore_case": True,
    "max_fragment_length": 0,
}
