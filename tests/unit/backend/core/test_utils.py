"""
Unit Tests for Core Utilities.

Tests tag name normalization and the UTC clock helper.
"""

from datetime import datetime, timezone

from learning_journal.backend.core.utils import (
    normalize_tag_name,
    normalize_tag_names,
    utc_now,
)


class TestNormalizeTagName:
    """Tests for single tag name normalization."""

    def test_trims_and_lowercases(self):
        """Should strip surrounding whitespace and lowercase."""
        assert normalize_tag_name("  Python ") == "python"

    def test_keeps_inner_whitespace(self):
        """Inner spaces are part of the name."""
        assert normalize_tag_name(" Machine Learning ") == "machine learning"

    def test_whitespace_only_becomes_empty(self):
        assert normalize_tag_name("   ") == ""


class TestNormalizeTagNames:
    """Tests for tag list normalization."""

    def test_collapses_case_and_space_variants(self):
        """'Python', ' python ' and 'PYTHON' are one tag."""
        assert normalize_tag_names(["Python", " python ", "PYTHON"]) == ["python"]

    def test_drops_empty_names(self):
        assert normalize_tag_names(["", "  ", "rust"]) == ["rust"]

    def test_keeps_first_seen_order(self):
        assert normalize_tag_names(["b", "A", "c", "a"]) == ["b", "a", "c"]

    def test_empty_input(self):
        assert normalize_tag_names([]) == []


class TestUtcNow:
    """Tests for the clock helper."""

    def test_returns_naive_utc(self):
        """Timestamps are stored naive, in UTC."""
        now = utc_now()
        assert now.tzinfo is None

    def test_matches_aware_utc_clock(self):
        before = datetime.now(timezone.utc).replace(tzinfo=None)
        now = utc_now()
        assert abs((now - before).total_seconds()) < 5
