"""Screens making up the navigation stack."""

from .base_screen import BaseNavScreen
from .destination_screen import DestinationScreen
from .root_screen import RootScreen

__all__ = [
    'BaseNavScreen',
    'DestinationScreen',
    'RootScreen',
]
