"""Review of extracted fragments before they reach translators.

- FragmentReviewer: Clean fragments and classify them as code artifacts or prose
"""

from transguard.review.reviewer import FragmentReviewer

__all__ = [
    "FragmentReviewer",
]
