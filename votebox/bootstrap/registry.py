"""Immutable poll lookup table built once at startup."""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class PollRegistry:
    """
    Maps poll titles to their database ids and poll ids to their category.

    Built from the rows of the polls table after seeding and shared
    read-only with every request.
    """

    ids_by_title: Mapping[str, int]
    categories: Mapping[int, Optional[str]]

    @classmethod
    def from_rows(cls, rows: Iterable[Tuple[int, str, Optional[str]]]) -> "PollRegistry":
        """Build a registry from ``(id, title, category)`` rows."""
        ids_by_title = {}
        categories = {}
        for poll_id, title, category in rows:
            ids_by_title[title] = poll_id
            categories[poll_id] = category
        return cls(MappingProxyType(ids_by_title), MappingProxyType(categories))

    def poll_id(self, title: str) -> Optional[int]:
        return self.ids_by_title.get(title)

    def category_of(self, poll_id: int) -> Optional[str]:
        return self.categories.get(poll_id)

    def poll_id_for_category(self, category: str) -> Optional[int]:
        """Return the id of the poll offering ``category`` options, if any."""
        for poll_id, poll_category in self.categories.items():
            if poll_category == category:
                return poll_id
        return None

    def __len__(self) -> int:
        return len(self.categories)
