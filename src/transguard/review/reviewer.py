"""Review of extracted text fragments for untranslatable code artifacts.

The reviewer cleans a fragment the way a localization review would before
looking at it (escaped control characters, hex colors, printf placeholders
and escaped Unicode values are dealt with first) and then decides whether
what remains is an address or real prose.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from transguard.classifier.address import is_file_address, is_url
from transguard.core.constants import ArtifactKind, UNIX_ROOT_DIRECTORIES, URL_PROTOCOLS
from transguard.core.exceptions import FragmentSourceError
from transguard.core.models import FragmentReview, ReviewSettings
from transguard.text.chars import is_alpha
from transguard.text.escapes import (
    decode_escaped_unicode_values,
    replace_escaped_control_chars,
)
from transguard.text.natural import natural_sort_key
from transguard.text.patterns import remove_hex_color_values, remove_printf_commands
from transguard.text.scan import starts_with_nocase

logger = logging.getLogger(__name__)


class FragmentReviewer:
    """Decide which extracted fragments should be hidden from translators.

    Fragments are classified into:
    - url / email: Internet and mail addresses
    - unc_path / windows_path / unix_path: local and network paths
    - file_name: bare file names ("readme.txt", "stdafx.h")
    - empty: nothing left after removing formatting syntax
    - prose: anything else (should be translated)
    """

    def __init__(self, settings: Optional[ReviewSettings] = None):
        """Initialize FragmentReviewer.

        Args:
            settings: Review switches (defaults if None)
        """
        self.settings = settings or ReviewSettings()

    def clean(self, text: str) -> str:
        """Strip formatting syntax and decode escapes in a fragment.

        Args:
            text: Raw fragment as extracted from source

        Returns:
            Cleaned fragment
        """
        cleaned = replace_escaped_control_chars(text or "").strip()

        if self.settings.strip_hex_colors:
            cleaned = remove_hex_color_values(cleaned)
        if self.settings.strip_printf:
            cleaned = remove_printf_commands(cleaned)
        if self.settings.decode_escapes:
            cleaned = decode_escaped_unicode_values(cleaned)

        for control in ("\n", "\r", "\t"):
            cleaned = cleaned.replace(control, " ")
        return cleaned.strip()

    def classify_kind(self, text: str) -> ArtifactKind:
        """Classify an already cleaned fragment.

        Args:
            text: Fragment to classify

        Returns:
            ArtifactKind of the fragment
        """
        if not text:
            return ArtifactKind.EMPTY

        if is_url(text):
            if "@" in text and not any(starts_with_nocase(text, p) for p in URL_PROTOCOLS):
                return ArtifactKind.EMAIL
            return ArtifactKind.URL

        if not is_file_address(text):
            return ArtifactKind.PROSE

        if text.startswith("\\\\"):
            return ArtifactKind.UNC_PATH
        if is_alpha(text[0]) and text[1:2] == ":" and text[2:3] in ("\\", "/"):
            return ArtifactKind.WINDOWS_PATH
        if text.startswith("/") or text.startswith(UNIX_ROOT_DIRECTORIES):
            return ArtifactKind.UNIX_PATH
        if "@" in text[1:] and " " not in text:
            return ArtifactKind.EMAIL
        return ArtifactKind.FILE_NAME

    def review(self, text: str, *, line: Optional[int] = None) -> FragmentReview:
        """Review a single fragment.

        Paths are checked before cleanup as well, since blanking escaped
        control characters would mangle "C:\\temp\\new".

        Args:
            text: Raw fragment
            line: Line number the fragment came from (optional)

        Returns:
            FragmentReview for the fragment
        """
        original = text or ""
        cleaned = self.clean(original)
        notes: list[str] = []

        if not self.settings.allows_length(len(cleaned)):
            logger.warning(
                f"Fragment of {len(cleaned)} characters exceeds "
                f"max_fragment_length={self.settings.max_fragment_length}; treating as prose"
            )
            notes.append("too long to classify")
            return FragmentReview(original, cleaned, ArtifactKind.PROSE, line=line, notes=notes)

        kind = self.classify_kind(original.strip())
        if kind in (ArtifactKind.PROSE, ArtifactKind.EMPTY):
            kind = self.classify_kind(cleaned)
            if cleaned != original.strip():
                notes.append("classified after cleanup")

        if kind not in (ArtifactKind.PROSE, ArtifactKind.EMPTY):
            logger.debug(f"Code artifact ({kind.value}): {original!r}")

        return FragmentReview(original, cleaned, kind, line=line, notes=notes)

    def review_batch(self, texts: Iterable[str]) -> list[FragmentReview]:
        """Review a batch of fragments.

        Args:
            texts: Fragments to review

        Returns:
            List of FragmentReview objects, in input order
        """
        return [self.review(text) for text in texts]

    def review_file(
        self,
        path: Path | str,
        *,
        artifacts_only: bool = False,
        sort: bool = False,
    ) -> list[FragmentReview]:
        """Review a text file holding one fragment per line.

        Blank lines are skipped.

        Args:
            path: File to read
            artifacts_only: Only return fragments that are code artifacts
            sort: Return results in natural order of the fragment text

        Returns:
            List of FragmentReview objects

        Raises:
            FragmentSourceError: If the file cannot be read
        """
        source = Path(path)
        logger.info(f"Reviewing fragments in {source}")

        try:
            with source.open("r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise FragmentSourceError(f"Failed to read fragments from {source}: {e}") from e

        reviews = [
            self.review(line, line=number)
            for number, line in enumerate(lines, start=1)
            if line.strip()
        ]

        if artifacts_only:
            reviews = [r for r in reviews if r.is_code_artifact]

        if sort:
            reviews = self.sort_reviews(reviews)

        stats = self.get_statistics(reviews)
        logger.info(
            f"Reviewed {stats['total']} fragments from {source}: "
            f"{stats['artifacts']} code artifacts"
        )
        return reviews

    def sort_reviews(self, reviews: Iterable[FragmentReview]) -> list[FragmentReview]:
        """Sort reviews by fragment text in natural order."""
        key = natural_sort_key(self.settings.natural_sort_ignore_case)
        return sorted(reviews, key=lambda r: key(r.original))

    def get_statistics(self, reviews: list[FragmentReview]) -> dict[str, int]:
        """Count reviews per kind.

        Args:
            reviews: Reviews to count

        Returns:
            Dictionary with totals and a "<kind>_count" entry per kind
        """
        stats = {
            "total": len(reviews),
            "artifacts": sum(1 for r in reviews if r.is_code_artifact),
        }
        for kind in ArtifactKind:
            stats[f"{kind.value}_count"] = sum(1 for r in reviews if r.kind is kind)
        return stats
