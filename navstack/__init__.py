"""
navstack - a drill-down navigation demo for the terminal.
"""

__version__ = "0.1.0"
