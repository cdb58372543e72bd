"""
Navigation path state.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..models import Record


@dataclass
class NavigationPath:
    """
    Ordered stack of the records the user has drilled into.

    The length of the path is the navigation depth: an empty path is the
    root screen, and element ``n - 1`` is the record shown at depth ``n``.
    """

    records: List[Record] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self.records)

    @property
    def top(self) -> Optional[Record]:
        """The record shown on the active screen, or None at the root."""
        return self.records[-1] if self.records else None

    @property
    def is_root(self) -> bool:
        return not self.records

    def push(self, record: Record) -> int:
        """Append a record and return the new depth."""
        self.records.append(record)
        return self.depth

    def pop(self) -> Optional[Record]:
        """Remove and return the top record. Returns None at the root."""
        if not self.records:
            return None
        return self.records.pop()

    def truncate(self, depth: int) -> List[Record]:
        """
        Shorten the path to ``depth`` elements.

        Args:
            depth: Target depth. Values at or above the current depth leave
                the path untouched.

        Returns:
            The removed records, top of the stack first.

        Raises:
            ValueError: If ``depth`` is negative.
        """
        if depth < 0:
            raise ValueError(f"Navigation depth cannot be negative: {depth}")
        removed = self.records[depth:]
        del self.records[depth:]
        removed.reverse()
        return removed

    def clear(self) -> List[Record]:
        """Return to the root, returning the removed records."""
        return self.truncate(0)

    def snapshot(self) -> List[Record]:
        """Copy of the path from root to top."""
        return self.records.copy()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]
