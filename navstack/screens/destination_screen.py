"""Screen that renders a resolved :class:`Destination`."""

from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Static

from ..destinations import Destination
from .base_screen import BaseNavScreen


class DestinationScreen(BaseNavScreen):
    """
    One level of the stack above the root.

    Fills the content area with the destination's colour (if any) and
    centres its text (if any) on top.
    """

    DEFAULT_CSS = """
    DestinationScreen #destination-body {
        width: 100%;
        height: 1fr;
        align: center middle;
    }

    DestinationScreen #destination-text {
        width: auto;
        text-style: bold;
    }
    """

    def __init__(
        self,
        destination: Destination,
        breadcrumbs: Optional[List[str]] = None,
        root_label: str = "Home",
        **kwargs
    ):
        super().__init__(breadcrumbs=breadcrumbs, root_label=root_label, **kwargs)
        self.destination = destination

    def compose_content(self) -> ComposeResult:
        with Container(id="destination-body"):
            if self.destination.text:
                yield Static(Text(self.destination.text), id="destination-text")

    def on_mount(self) -> None:
        if self.destination.color is not None:
            body = self.query_one("#destination-body", Container)
            body.styles.background = self.destination.color.value
