"""
Interfaces for the Printing layer

Defines the drawing capability pages render onto. Coordinates and sizes are
millimetres measured from the top-left corner of the page.
"""

from abc import ABC, abstractmethod


class IPdfCanvas(ABC):
    """
    Interface for PDF drawing backends.
    
    Implementations start pages, place markup cells and simple vector shapes,
    and serialize the finished document.
    """
    
    @abstractmethod
    def add_page(self) -> None:
        """Start a new page. Later drawing calls target this page."""
        pass
    
    @abstractmethod
    def page_number(self) -> int:
        """Return the 1-based number of the current page (0 before any page)"""
        pass
    
    @abstractmethod
    def set_metadata(self, *, title: str = '', subject: str = '', creator: str = '', author: str = '') -> None:
        """Set document information fields"""
        pass
    
    @abstractmethod
    def write_html_cell(
        self,
        w: float,
        h: float,
        x: float,
        y: float,
        html: str,
        border: int = 0,
        align: str = ''
    ) -> None:
        """
        Write a rectangular cell holding rendered markup.
        
        Args:
            w: Cell width
            h: Cell height
            x: Left edge
            y: Top edge
            html: Markup produced by a template
            border: Draw the cell boundary when non-zero
            align: '', 'left', 'center', 'right' or 'justify'
        """
        pass
    
    @abstractmethod
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a straight line with the current draw color"""
        pass
    
    @abstractmethod
    def rect(self, x: float, y: float, w: float, h: float) -> None:
        """Draw an unfilled rectangle with the current draw color"""
        pass
    
    @abstractmethod
    def set_draw_color(self, r: int, g: int, b: int) -> None:
        """Set the stroke color from 0-255 components"""
        pass
    
    @abstractmethod
    def image(self, path: str, x: float, y: float, w: float, h: float) -> None:
        """Draw an image file scaled into the given box"""
        pass
    
    @abstractmethod
    def output(self) -> bytes:
        """
        Finish the document.
        
        Returns:
            PDF content as bytes
        """
        pass
