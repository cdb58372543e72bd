"""
Navigation management module.
"""

from .navigation_manager import NavigationManager

__all__ = [
    'NavigationManager',
]
