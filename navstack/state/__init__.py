"""
State containers for the navstack application.
"""

from .navigation_path import NavigationPath

__all__ = [
    'NavigationPath',
]
