"""Widgets for the navstack application."""

from .breadcrumb_bar import BreadcrumbBar
from .record_list import RecordItem, RecordList

__all__ = ['BreadcrumbBar', 'RecordItem', 'RecordList']
