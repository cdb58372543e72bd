"""Base screen class for all navstack screens."""

from typing import List, Optional

from loguru import logger
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Footer

from ..widgets.breadcrumb_bar import BreadcrumbBar


class BaseNavScreen(Screen):
    """
    Base screen class for every level of the navigation stack.
    Provides the breadcrumb bar and footer; subclasses supply the content.
    """

    DEFAULT_CSS = """
    BaseNavScreen {
        background: $background;
    }

    #screen-content {
        width: 100%;
        height: 1fr;
    }
    """

    # Inactive while a modal (e.g. the command palette) covers the screen.
    BINDINGS = [
        Binding("escape", "app.back", "Back"),
        Binding("backspace", "app.back", "Back", show=False),
        Binding("home", "app.root", "Root"),
    ]

    def __init__(self, breadcrumbs: Optional[List[str]] = None, root_label: str = "Home", **kwargs):
        super().__init__(**kwargs)
        self.breadcrumbs = list(breadcrumbs or [])
        self.root_label = root_label

    @property
    def depth(self) -> int:
        """Navigation depth this screen was built for."""
        return len(self.breadcrumbs)

    def compose(self) -> ComposeResult:
        yield BreadcrumbBar(self.breadcrumbs, root_label=self.root_label)
        with Container(id="screen-content"):
            yield from self.compose_content()
        yield Footer()

    def compose_content(self) -> ComposeResult:
        """Override in subclasses to provide screen-specific content."""
        yield Container()

    def on_mount(self) -> None:
        logger.debug(f"Screen {self.__class__.__name__} mounted at depth {self.depth}")
