"""Unit tests for fragment reviewer module.

Tests for FragmentReviewer including cleanup, artifact classification,
file review, natural-order sorting, and statistics.
"""

import sys
import tempfile
import unittest
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from transguard.core.constants import ArtifactKind
from transguard.core.exceptions import FragmentSourceError
from transguard.core.models import FragmentReview, ReviewSettings
from transguard.review.reviewer import FragmentReviewer


class TestFragmentReviewer(unittest.TestCase):
    """Test suite for FragmentReviewer class."""

    def setUp(self):
        """Set up test fixtures."""
        self.reviewer = FragmentReviewer()

    def test_clean_strips_formatting(self):
        """Test that control escapes, colors, and placeholders are removed."""
        cleaned = self.reviewer.clean("  Color #FF00AA for %s\\n ")
        self.assertEqual(cleaned, "Color  for")

    def test_clean_decodes_escapes(self):
        """Test that escaped Unicode values are decoded."""
        self.assertEqual(self.reviewer.clean("\\u266f major"), "♯ major")

    def test_review_url(self):
        """Test that URLs are code artifacts."""
        result = self.reviewer.review("https://example.com/page")
        self.assertIsInstance(result, FragmentReview)
        self.assertEqual(result.kind, ArtifactKind.URL)
        self.assertTrue(result.is_code_artifact)

    def test_review_email(self):
        """Test that a bare email is reported as email, not URL."""
        self.assertEqual(self.reviewer.review("blake@mail.com").kind, ArtifactKind.EMAIL)
        self.assertEqual(self.reviewer.review("mailto:blake").kind, ArtifactKind.URL)

    def test_review_paths(self):
        """Test the different kinds of paths."""
        self.assertEqual(self.reviewer.review("\\\\server\\share").kind, ArtifactKind.UNC_PATH)
        self.assertEqual(self.reviewer.review("C:\\users").kind, ArtifactKind.WINDOWS_PATH)
        self.assertEqual(self.reviewer.review("/usr/local/bin").kind, ArtifactKind.UNIX_PATH)
        self.assertEqual(self.reviewer.review("usr/local").kind, ArtifactKind.UNIX_PATH)

    def test_review_path_with_control_letters(self):
        """Test that "\\t" and "\\n" inside a Windows path do not hide it."""
        result = self.reviewer.review("C:\\temp\\new")
        self.assertEqual(result.kind, ArtifactKind.WINDOWS_PATH)

    def test_review_file_name(self):
        """Test bare file names."""
        self.assertEqual(self.reviewer.review("readme.txt").kind, ArtifactKind.FILE_NAME)
        self.assertEqual(self.reviewer.review("stdafx.h").kind, ArtifactKind.FILE_NAME)

    def test_review_prose(self):
        """Test that ordinary sentences are left for translation."""
        result = self.reviewer.review("Open the file and save it.")
        self.assertEqual(result.kind, ArtifactKind.PROSE)
        self.assertFalse(result.is_code_artifact)

    def test_review_formatting_only(self):
        """Test that a placeholder or color alone leaves nothing to translate."""
        self.assertEqual(self.reviewer.review("%s").kind, ArtifactKind.EMPTY)
        self.assertEqual(self.reviewer.review("#FF00AA").kind, ArtifactKind.EMPTY)
        self.assertFalse(self.reviewer.review("%s").is_code_artifact)

    def test_review_after_decoding(self):
        """Test that escaped paths are detected once decoded."""
        result = self.reviewer.review("\\x2Fusr\\x2Flib")
        self.assertEqual(result.cleaned, "/usr/lib")
        self.assertEqual(result.kind, ArtifactKind.UNIX_PATH)
        self.assertIn("classified after cleanup", result.notes)

    def test_review_without_decoding(self):
        """Test that decoding can be switched off."""
        reviewer = FragmentReviewer(ReviewSettings(decode_escapes=False))
        result = reviewer.review("\\x2Fusr\\x2Flib")
        self.assertEqual(result.kind, ArtifactKind.PROSE)

    def test_review_too_long(self):
        """Test that fragments past max_fragment_length are not classified."""
        reviewer = FragmentReviewer(ReviewSettings(max_fragment_length=10))
        with self.assertLogs("transguard.review.reviewer", level="WARNING"):
            result = reviewer.review("https://example.com/long")
        self.assertEqual(result.kind, ArtifactKind.PROSE)
        self.assertIn("too long to classify", result.notes)

    def test_review_batch(self):
        """Test that batches keep input order."""
        results = self.reviewer.review_batch(["ibm.com/", "Hello there"])
        self.assertEqual([r.kind for r in results], [ArtifactKind.URL, ArtifactKind.PROSE])

    def test_to_dict(self):
        """Test dictionary conversion for JSON output."""
        data = self.reviewer.review("ibm.com/", line=3).to_dict()
        self.assertEqual(data["kind"], "url")
        self.assertTrue(data["is_code_artifact"])
        self.assertEqual(data["line"], 3)

    def test_get_statistics(self):
        """Test per-kind counts."""
        results = self.reviewer.review_batch(["ibm.com/", "readme.txt", "Hello there", "%d"])
        stats = self.reviewer.get_statistics(results)
        self.assertEqual(stats["total"], 4)
        self.assertEqual(stats["artifacts"], 2)
        self.assertEqual(stats["url_count"], 1)
        self.assertEqual(stats["file_name_count"], 1)
        self.assertEqual(stats["prose_count"], 1)
        self.assertEqual(stats["empty_count"], 1)


class TestFragmentReviewerFiles(unittest.TestCase):
    """Test suite for FragmentReviewer.review_file."""

    def setUp(self):
        """Set up a temporary fragments file."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = Path(self.temp_dir.name) / "strings.txt"
        self.path.write_text(
            "Save the file\n"
            "\n"
            "file12.txt\n"
            "http://example.com\n"
            "File2.txt\n",
            encoding="utf-8",
        )
        self.reviewer = FragmentReviewer()

    def tearDown(self):
        """Clean up the temporary directory."""
        self.temp_dir.cleanup()

    def test_review_file_skips_blank_lines(self):
        """Test that each non-blank line is reviewed with its line number."""
        results = self.reviewer.review_file(self.path)
        self.assertEqual([r.line for r in results], [1, 3, 4, 5])
        self.assertEqual(results[0].kind, ArtifactKind.PROSE)

    def test_review_file_artifacts_only(self):
        """Test filtering down to code artifacts."""
        results = self.reviewer.review_file(self.path, artifacts_only=True)
        self.assertEqual([r.original for r in results], ["file12.txt", "http://example.com", "File2.txt"])

    def test_review_file_sorted(self):
        """Test natural, case-insensitive ordering of results."""
        results = self.reviewer.review_file(self.path, artifacts_only=True, sort=True)
        self.assertEqual([r.original for r in results], ["File2.txt", "file12.txt", "http://example.com"])

    def test_review_missing_file(self):
        """Test that an unreadable file raises FragmentSourceError."""
        with self.assertRaises(FragmentSourceError):
            self.reviewer.review_file(Path(self.temp_dir.name) / "missing.txt")


if __name__ == "__main__":
    unittest.main()
