"""Root screen: the manufacturer and car lists."""

from textual.app import ComposeResult

from ..sample_data import INTRO_LINK, MANUFACTURERS, VEHICLES
from ..widgets.record_list import RecordList
from .base_screen import BaseNavScreen


class RootScreen(BaseNavScreen):
    """Depth 0 of the navigation stack."""

    def __init__(self, root_label: str = "Home", **kwargs):
        super().__init__(breadcrumbs=[], root_label=root_label, **kwargs)

    def compose_content(self) -> ComposeResult:
        yield RecordList(MANUFACTURERS, VEHICLES, INTRO_LINK, id="record-list")
