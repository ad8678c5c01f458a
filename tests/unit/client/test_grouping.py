"""
Unit Tests for Entry Groupings.
"""

from datetime import datetime

from learning_journal.client.grouping import group_by_tag, neighbours


class TestGroupByTag:
    """Tests for the tag page grouping."""

    def test_most_used_first(self, entry_builder, tag_builder):
        entries = [
            entry_builder(3, datetime(2024, 3, 3), tags=["python", "web"]),
            entry_builder(2, datetime(2024, 3, 2), tags=["python"]),
            entry_builder(1, datetime(2024, 3, 1), tags=["web", "python"]),
        ]
        tags = [tag_builder("python"), tag_builder("rust"), tag_builder("web")]

        groups = group_by_tag(entries, tags)

        assert [(g.tag.name, g.count) for g in groups] == [("python", 3), ("web", 2)]
        assert [e.id for e in groups[1].entries] == [3, 1]

    def test_unused_tags_left_out(self, entry_builder, tag_builder):
        groups = group_by_tag(
            [entry_builder(1, datetime(2024, 3, 1))],
            [tag_builder("orphan")],
        )
        assert groups == []

    def test_ties_keep_tag_order(self, entry_builder, tag_builder):
        entries = [entry_builder(1, datetime(2024, 3, 1), tags=["beta", "alpha"])]
        groups = group_by_tag(entries, [tag_builder("alpha"), tag_builder("beta")])
        assert [g.tag.name for g in groups] == ["alpha", "beta"]


class TestNeighbours:
    """Tests for previous/next navigation."""

    def test_middle_entry(self, entry_builder):
        entries = [entry_builder(i, datetime(2024, 3, i)) for i in (3, 2, 1)]
        assert neighbours(entries, 2) == (3, 1)

    def test_edges(self, entry_builder):
        entries = [entry_builder(i, datetime(2024, 3, i)) for i in (3, 2, 1)]
        assert neighbours(entries, 3) == (None, 2)
        assert neighbours(entries, 1) == (2, None)

    def test_unknown_entry(self, entry_builder):
        entries = [entry_builder(1, datetime(2024, 3, 1))]
        assert neighbours(entries, 42) == (None, None)
