"""Root list of selectable records, grouped into labelled sections."""

from typing import Sequence

from loguru import logger
from textual import on
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Label, ListItem, ListView

from ..messages import RecordSelected
from ..models import LinkPage, Manufacturer, Record, VehicleEntry


class RecordItem(ListItem):
    """A list row that carries the record it stands for."""

    def __init__(self, record: Record, **kwargs):
        super().__init__(Label(record.display_text), **kwargs)
        self.record = record


class RecordList(VerticalScroll):
    """
    The root screen's lists: an intro link, then one section per record set.

    Selecting any row posts :class:`RecordSelected` with the row's record.
    """

    DEFAULT_CSS = """
    RecordList {
        padding: 1 2;
    }

    RecordList .section-title {
        margin-top: 1;
        color: $text-muted;
        text-style: bold;
    }

    RecordList ListView {
        height: auto;
        background: $panel;
    }
    """

    def __init__(
        self,
        manufacturers: Sequence[Manufacturer],
        vehicles: Sequence[VehicleEntry],
        intro_link: LinkPage,
        **kwargs
    ):
        super().__init__(**kwargs)
        self.manufacturers = manufacturers
        self.vehicles = vehicles
        self.intro_link = intro_link

    def compose(self) -> ComposeResult:
        yield ListView(RecordItem(self.intro_link, id="intro-link"), id="links")

        yield Label("Manufacturers", classes="section-title")
        yield ListView(
            *(
                RecordItem(brand, id=f"manufacturer-{index}")
                for index, brand in enumerate(self.manufacturers)
            ),
            id="manufacturers",
        )

        yield Label("Cars", classes="section-title")
        yield ListView(
            *(
                RecordItem(car, id=f"vehicle-{index}")
                for index, car in enumerate(self.vehicles)
            ),
            id="vehicles",
        )

    @on(ListView.Selected)
    def handle_selection(self, event: ListView.Selected) -> None:
        """Turn a row selection into a navigation request."""
        event.stop()
        item = event.item
        if not isinstance(item, RecordItem):
            return
        logger.debug(f"Row selected: {item.record.kind} '{item.record.display_text}'")
        self.post_message(RecordSelected(item.record))
