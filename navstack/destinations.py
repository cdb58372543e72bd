"""
Destination resolver.

Maps a selected record to the description of the view shown for it. The
mapping is a pure function: no state, no side effects.
"""

from enum import Enum
from typing import Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict

from .models import LinkPage, Manufacturer, Record, VehicleEntry


class DestinationColor(str, Enum):
    """Background colours used by destination views (Textual colour names)."""

    BLUE = "blue"
    INDIGO = "indigo"
    YELLOW = "yellow"
    PURPLE = "purple"
    GRAY = "gray"
    RED = "red"


class Destination(BaseModel):
    """What a destination screen shows: a title, a background and some text."""

    model_config = ConfigDict(frozen=True)

    title: str
    color: Optional[DestinationColor] = None
    text: Optional[str] = None


# Manufacturer name -> background. Case-sensitive.
MANUFACTURER_COLORS: Dict[str, DestinationColor] = {
    "Ford": DestinationColor.BLUE,
    "GM": DestinationColor.INDIGO,
    "Toyota": DestinationColor.YELLOW,
    "Chrysler": DestinationColor.PURPLE,
}
FALLBACK_COLOR = DestinationColor.GRAY
VEHICLE_COLOR = DestinationColor.RED


def resolve_manufacturer_color(name: str) -> DestinationColor:
    """Return the colour for a manufacturer name, or the gray fallback."""
    return MANUFACTURER_COLORS.get(name, FALLBACK_COLOR)


def _manufacturer_destination(record: Manufacturer) -> Destination:
    return Destination(title=record.name, color=resolve_manufacturer_color(record.name))


def _vehicle_destination(record: VehicleEntry) -> Destination:
    return Destination(title=record.label, color=VEHICLE_COLOR, text=record.label)


def _link_destination(record: LinkPage) -> Destination:
    return Destination(title=record.title, text=record.body)


_RESOLVERS: Dict[str, Callable[..., Destination]] = {
    "manufacturer": _manufacturer_destination,
    "vehicle": _vehicle_destination,
    "link": _link_destination,
}


def resolve_destination(record: Record) -> Destination:
    """
    Resolve the destination view for a record.

    Dispatches on the record's ``kind`` tag. Manufacturers get a colour keyed
    by name (gray for unknown names), vehicles a fixed red background with
    their label, links a plain text page.
    """
    return _RESOLVERS[record.kind](record)
