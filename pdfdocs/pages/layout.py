"""
List layout

Pure helper deciding which items of a list fit between a cursor position and
the end of a page body.
"""

import math
from dataclasses import dataclass

from pdfdocs.exceptions import PaginationError


@dataclass(frozen=True)
class ListSlice:
    """Items placed on one page, the items left over, and the cursor after them"""
    
    items: list
    rest: list
    end_y: float
    
    @property
    def is_last(self) -> bool:
        return not self.rest


def page_capacity(cursor_y: float, body_end_y: float, item_height: float) -> int:
    """
    Number of whole rows that fit between the cursor and the body end.
    
    Raises:
        PaginationError: If item_height is not positive
    """
    if item_height <= 0:
        raise PaginationError(f"Item height must be positive, got {item_height}")
    
    return max(0, math.floor((body_end_y - cursor_y) / item_height))


def slice_items(items: list, cursor_y: float, body_end_y: float, item_height: float) -> ListSlice:
    """
    Split items into the run that fits on the current page and the remainder.
    
    Args:
        items: Items still to place, in order
        cursor_y: Current vertical position
        body_end_y: Lowest usable position of the page body
        item_height: Fixed height of one row
        
    Returns:
        ListSlice with the placed prefix, the remainder and the cursor
        position after the placed rows
    """
    capacity = page_capacity(cursor_y, body_end_y, item_height)
    placed = list(items[:capacity])
    
    return ListSlice(
        items=placed,
        rest=list(items[capacity:]),
        end_y=cursor_y + len(placed) * item_height,
    )
