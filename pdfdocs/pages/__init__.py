"""
Page types

Base page with the header/body/footer render contract, the paginated list
page, and the registry mapping page keys to page classes.
"""

from .items import ItemsPage
from .layout import ListSlice, slice_items
from .page import Page
from .registry import register_page

__all__ = [
    'ItemsPage',
    'ListSlice',
    'Page',
    'register_page',
    'slice_items',
]
