"""Main navstack application following Textual patterns."""

from typing import Optional

from loguru import logger
from textual.app import App
from textual.binding import Binding

from .messages import NavigateBack, NavigateToRoot, PathChanged, RecordSelected
from .navigation.navigation_manager import NavigationManager
from .screens.root_screen import RootScreen
from .widgets.breadcrumb_bar import BREADCRUMB_SEPARATOR


class NavStackApp(App):
    """
    Root list of sample records with drill-down navigation.

    Selecting a row pushes its record onto the navigation path; back
    navigation truncates the path. The :class:`NavigationManager` keeps the
    screen stack matching the path.
    """

    CSS = """
    NavStackApp {
        background: $surface;
    }
    """

    TITLE = "Navigation Stack"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, title: Optional[str] = None, show_breadcrumbs: bool = True, **kwargs):
        super().__init__(**kwargs)
        if title:
            self.title = title
        self.base_title = self.title
        self.show_breadcrumbs = show_breadcrumbs
        self.navigation = NavigationManager(self)

    def on_mount(self) -> None:
        """Apps push screens, not compose them."""
        self.push_screen(RootScreen(root_label=self.navigation.root_label))
        logger.info("NavStackApp started at root")

    def on_record_selected(self, message: RecordSelected) -> None:
        self.navigation.push(message.record)

    def on_navigate_back(self, message: NavigateBack) -> None:
        self.navigation.pop()

    def on_navigate_to_root(self, message: NavigateToRoot) -> None:
        self.navigation.pop_to_root()

    def on_path_changed(self, message: PathChanged) -> None:
        if self.show_breadcrumbs and message.breadcrumbs:
            self.title = f"{self.base_title} - {BREADCRUMB_SEPARATOR.join(message.breadcrumbs)}"
        else:
            self.title = self.base_title

    def action_back(self) -> None:
        self.navigation.pop()

    def action_root(self) -> None:
        self.navigation.pop_to_root()
