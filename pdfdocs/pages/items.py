"""
Paginated list page

Lays out fixed-height items in the body of a page and spawns continuation
pages of the same kind until every item is placed, then renders a totals
block wherever it first fits.
"""

from abc import abstractmethod
import logging
from typing import Any, Callable, Optional

from pdfdocs.exceptions import PaginationError
from pdfdocs.printing.interfaces import IPdfCanvas

from .layout import slice_items
from .page import Page


logger = logging.getLogger(__name__)


class ItemsPage(Page):
    """
    Page rendering a run of list items.
    
    Subclasses provide the list header, one row per item and the totals
    block. Continuation pages are built by continuation_factory when set,
    otherwise by calling the page's own class with the remaining items.
    """
    
    item_height: float = 20
    list_total_height: float = 30
    
    # Callable(items) -> ItemsPage, assigned on instances
    continuation_factory: Optional[Callable[[list], 'ItemsPage']] = None
    
    def __init__(self, items: Optional[list] = None):
        super().__init__()
        self.items = list(items or [])
        self.is_continuation = False
        # Remaining items (or [] for a totals-only page) to render once this page is finished
        self.pending_items: Optional[list] = None
    
    def get_items(self) -> list:
        return self.items
    
    def render(self, canvas: IPdfCanvas) -> None:
        """
        Render the page, then the continuation page it scheduled, if any.
        
        The continuation starts a new canvas page, so it only runs after this
        page's footer has been drawn.
        """
        self.pending_items = None
        super().render(canvas)
        
        if self.pending_items is not None:
            items, self.pending_items = self.pending_items, None
            self.render_continuation(canvas, items)
    
    def render_body(self, canvas: IPdfCanvas) -> None:
        items = self.get_items()
        
        if items:
            self.render_list_header(canvas)
        
        list_slice = slice_items(items, self.y, self.get_body_end_y(), self.item_height)
        
        if items and not list_slice.items and self.is_continuation:
            raise PaginationError(
                f"{type(self).__name__} cannot fit a single item of height "
                f"{self.item_height} on a continuation page"
            )
        
        # Item height does not vary; render_item may move the cursor
        top = self.y
        for index, item in enumerate(list_slice.items):
            self.render_item(canvas, item, top + index * self.item_height)
        self.y = list_slice.end_y
        
        logger.debug(
            f"{type(self).__name__}: placed {len(list_slice.items)} item(s) "
            f"on page {canvas.page_number()}, {len(list_slice.rest)} remaining"
        )
        
        if not list_slice.is_last:
            self.pending_items = list_slice.rest
        elif self.y > self.get_body_end_y(self.list_total_height):
            if self.is_continuation and not items:
                raise PaginationError(
                    f"{type(self).__name__} has no room for its totals block "
                    f"of height {self.list_total_height} on an empty page"
                )
            self.pending_items = []
        else:
            self.render_total_block(canvas)
    
    def make_continuation(self, items: list) -> 'ItemsPage':
        """Build a page of the same kind holding the remaining items"""
        if self.continuation_factory is not None:
            page = self.continuation_factory(items)
        else:
            page = type(self)(items)
        
        page.item_height = self.item_height
        page.list_total_height = self.list_total_height
        page.continuation_factory = self.continuation_factory
        page.is_continuation = True
        
        return page
    
    def render_continuation(self, canvas: IPdfCanvas, items: list) -> 'ItemsPage':
        """Render the remaining items (or the totals alone) on a new page"""
        page = self.make_continuation(items)
        page.set_document(self.document)
        self.document.render_page(page, canvas)
        return page
    
    @abstractmethod
    def render_list_header(self, canvas: IPdfCanvas) -> None:
        """Render column labels above the rows"""
        pass
    
    @abstractmethod
    def render_item(self, canvas: IPdfCanvas, item: Any, y: float) -> None:
        """Render one row whose top edge is y. Must stay within item_height."""
        pass
    
    @abstractmethod
    def render_total_block(self, canvas: IPdfCanvas) -> None:
        """Render the totals block at the cursor"""
        pass
