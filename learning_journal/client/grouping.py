"""
Entry Groupings.

Pure views over fetched entries and tags used by the terminal front end.
"""

from dataclasses import dataclass

from learning_journal.backend.schemas.entry import EntryResponse, TagResponse


@dataclass
class TagGroup:
    tag: TagResponse
    entries: list[EntryResponse]

    @property
    def count(self) -> int:
        return len(self.entries)


def group_by_tag(
    entries: list[EntryResponse],
    tags: list[TagResponse],
) -> list[TagGroup]:
    """
    Group entries under each tag, most used tag first.

    Tags without entries are left out. Ties keep the order of `tags`.
    """
    groups = [
        TagGroup(
            tag=tag,
            entries=[e for e in entries if any(t.id == tag.id for t in e.tags)],
        )
        for tag in tags
    ]
    groups = [group for group in groups if group.count > 0]
    return sorted(groups, key=lambda group: group.count, reverse=True)


def neighbours(entries: list[EntryResponse], entry_id: int) -> tuple[int | None, int | None]:
    """
    Ids of the entries before and after `entry_id` in `entries`.

    Returns (None, None) when the entry is not in the list.
    """
    ids = [entry.id for entry in entries]
    if entry_id not in ids:
        return None, None
    index = ids.index(entry_id)
    previous_id = ids[index - 1] if index > 0 else None
    next_id = ids[index + 1] if index < len(ids) - 1 else None
    return previous_id, next_id
