"""Core data models for transguard.

This module defines the small data structures passed between the review
stage, the configuration loader, and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from transguard.core.constants import ArtifactKind, DEFAULTS


# ============================================================================
# Review Settings
# ============================================================================

@dataclass
class ReviewSettings:
    """Switches for the fragment review stage."""
    decode_escapes: bool = DEFAULTS["decode_escapes"]
    strip_printf: bool = DEFAULTS["strip_printf"]
    strip_hex_colors: bool = DEFAULTS["strip_hex_colors"]
    natural_sort_ignore_case: bool = DEFAULTS["natural_sort_ignore_case"]
    max_fragment_length: int = DEFAULTS["max_fragment_length"]  # 0 = unlimited

    def allows_length(self, length: int) -> bool:
        """Check whether a fragment of this length should be classified."""
        return self.max_fragment_length <= 0 or length <= self.max_fragment_length


# ============================================================================
# Review Result
# ============================================================================

@dataclass
class FragmentReview:
    """Outcome of reviewing a single text fragment."""
    original: str
    cleaned: str
    kind: ArtifactKind
    line: Optional[int] = None              # 1-based line number when read from a file
    notes: list[str] = field(default_factory=list)

    @property
    def is_code_artifact(self) -> bool:
        """True if the fragment should not be shown to translators."""
        return self.kind not in (ArtifactKind.PROSE, ArtifactKind.EMPTY)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "original": self.original,
            "cleaned": self.cleaned,
            "kind": self.kind.value,
            "is_code_artifact": self.is_code_artifact,
            "line": self.line,
            "notes": list(self.notes),
        }
