"""Custom Textual messages for event-driven navigation."""

from typing import List

from textual.message import Message

from .models import Record


class RecordSelected(Message):
    """Posted when a list row is selected."""
    def __init__(self, record: Record):
        super().__init__()
        self.record = record


class NavigateBack(Message):
    """Posted to request one step of back navigation."""


class NavigateToRoot(Message):
    """Posted to request a return to the root list."""


class PathChanged(Message):
    """Posted after the navigation path changed."""
    def __init__(self, depth: int, breadcrumbs: List[str]):
        super().__init__()
        self.depth = depth
        self.breadcrumbs = breadcrumbs
