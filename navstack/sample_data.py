"""
Fixed sample data for the root screen.

Built once at import time and exposed as tuples.
"""

from typing import Tuple

from .models import LinkPage, Manufacturer, VehicleEntry

MANUFACTURERS: Tuple[Manufacturer, ...] = (
    Manufacturer(name="Ford"),
    Manufacturer(name="GM"),
    Manufacturer(name="Toyota"),
    Manufacturer(name="Chrysler"),
)

VEHICLES: Tuple[VehicleEntry, ...] = (
    VehicleEntry(make="Ford", model="Escape", year=2022),
    VehicleEntry(make="GM", model="Trailblazer", year=1996),
    VehicleEntry(make="Chrysler", model="SeaBreeze", year=2002),
)

INTRO_LINK = LinkPage(
    title="I am a NavigationLink.",
    body="I'm the view you navigate to.",
)
