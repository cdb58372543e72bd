"""Breadcrumb bar docked at the top of every screen."""

from typing import List, Optional

from loguru import logger
from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Static

from ..messages import NavigateBack, NavigateToRoot

BREADCRUMB_SEPARATOR = " › "


class BreadcrumbBar(Container):
    """
    Shows the path from the root to the current screen, with back and
    root buttons. The buttons are disabled on the root screen.
    """

    DEFAULT_CSS = """
    BreadcrumbBar {
        height: 3;
        width: 100%;
        dock: top;
        background: $panel;
        border-bottom: solid $primary;
    }

    .breadcrumb-nav {
        height: 100%;
        width: 100%;
        align: left middle;
        padding: 0 1;
    }

    .breadcrumb-button {
        margin: 0 1 0 0;
        min-width: 8;
        height: 3;
        border: none;
    }

    #breadcrumb-trail {
        width: 1fr;
        content-align: left middle;
        text-style: bold;
    }
    """

    def __init__(self, breadcrumbs: Optional[List[str]] = None, root_label: str = "Home", **kwargs):
        super().__init__(**kwargs)
        self.breadcrumbs = list(breadcrumbs or [])
        self.root_label = root_label

    @property
    def trail(self) -> str:
        return BREADCRUMB_SEPARATOR.join([self.root_label, *self.breadcrumbs])

    def compose(self) -> ComposeResult:
        at_root = not self.breadcrumbs
        with Horizontal(classes="breadcrumb-nav"):
            yield Button("Back", id="nav-back", classes="breadcrumb-button", disabled=at_root)
            yield Button(self.root_label, id="nav-root", classes="breadcrumb-button", disabled=at_root)
            yield Static(self.trail, id="breadcrumb-trail")

    @on(Button.Pressed, "#nav-back")
    def handle_back(self, event: Button.Pressed) -> None:
        event.stop()
        logger.debug("Back requested from breadcrumb bar")
        self.post_message(NavigateBack())

    @on(Button.Pressed, "#nav-root")
    def handle_root(self, event: Button.Pressed) -> None:
        event.stop()
        logger.debug("Root requested from breadcrumb bar")
        self.post_message(NavigateToRoot())
