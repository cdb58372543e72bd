"""
Navigation manager: keeps the navigation path and the screen stack in step.
"""

from typing import List, Optional, TYPE_CHECKING

from loguru import logger

from ..destinations import Destination, resolve_destination
from ..messages import PathChanged
from ..models import Record
from ..screens.destination_screen import DestinationScreen
from ..state.navigation_path import NavigationPath

if TYPE_CHECKING:
    from textual.app import App


class NavigationManager:
    """
    Owns the :class:`NavigationPath` and mirrors every change to it onto the
    app's screen stack.

    The root screen sits at the bottom of the stack; above it there is one
    :class:`DestinationScreen` per path element, so truncating the path to
    depth ``k`` uncovers exactly the screen that was shown at depth ``k``.
    """

    def __init__(self, app: 'App', root_label: str = "Home"):
        self.app = app
        self.root_label = root_label
        self.path = NavigationPath()
        # One pushed screen per path element, bottom first.
        self._screens: List[DestinationScreen] = []

    @property
    def depth(self) -> int:
        return self.path.depth

    @property
    def current_record(self) -> Optional[Record]:
        return self.path.top

    @property
    def current_destination(self) -> Optional[Destination]:
        """Destination for the top of the path, or None at the root."""
        record = self.path.top
        return resolve_destination(record) if record is not None else None

    def breadcrumbs(self) -> List[str]:
        """Display text of every path element, root first."""
        return [record.display_text for record in self.path]

    def can_go_back(self) -> bool:
        return not self.path.is_root

    def push(self, record: Record) -> int:
        """
        Navigate into a record.

        Args:
            record: Record whose destination should be shown

        Returns:
            The new navigation depth
        """
        destination = resolve_destination(record)
        depth = self.path.push(record)
        screen = DestinationScreen(destination, breadcrumbs=self.breadcrumbs(), root_label=self.root_label)
        self._screens.append(screen)
        self.app.push_screen(screen)
        logger.info(f"Navigated to {record.kind} '{record.display_text}' (depth {depth})")
        self._notify()
        return depth

    def owns_active_screen(self) -> bool:
        """
        True when the active screen is the one this manager pushed last
        (or any screen at the root). False while e.g. a modal sits on top.
        """
        if not self._screens:
            return True
        return self.app.screen is self._screens[-1]

    def pop(self) -> Optional[Record]:
        """
        Go back one level.

        Returns:
            The record that was removed, or None if already at the root or
            another screen is covering the current destination
        """
        if self.path.is_root:
            logger.debug("Already at root, nothing to pop")
            return None
        if not self.owns_active_screen():
            logger.debug(f"Active screen {self.app.screen!r} is not ours, not popping")
            return None
        record = self.path.pop()
        self._pop_own_screen()
        logger.info(f"Navigated back from '{record.display_text}' (depth {self.depth})")
        self._notify()
        return record

    def pop_to(self, depth: int) -> List[Record]:
        """
        Go back until the path has ``depth`` elements.

        Args:
            depth: Target depth; at or above the current depth nothing happens

        Returns:
            The removed records, most recent first

        Raises:
            ValueError: If ``depth`` is negative
        """
        if depth < 0:
            raise ValueError(f"Navigation depth cannot be negative: {depth}")
        if depth >= self.depth:
            logger.debug(f"Already at depth {self.depth}, nothing to pop")
            return []
        if not self.owns_active_screen():
            logger.debug(f"Active screen {self.app.screen!r} is not ours, not popping")
            return []
        removed = self.path.truncate(depth)
        for _ in removed:
            self._pop_own_screen()
        logger.info(f"Navigated back {len(removed)} level(s) to depth {self.depth}")
        self._notify()
        return removed

    def pop_to_root(self) -> List[Record]:
        """Go back to the root list."""
        return self.pop_to(0)

    def _pop_own_screen(self) -> None:
        # Callers check owns_active_screen() first, so the top is ours.
        self._screens.pop()
        self.app.pop_screen()

    def _notify(self) -> None:
        self.app.post_message(PathChanged(self.depth, self.breadcrumbs()))
