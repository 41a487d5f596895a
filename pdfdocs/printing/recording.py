"""
Recording Canvas

Canvas that keeps every drawing call in memory instead of producing PDF. Used
to count pages ahead of the real render pass and to inspect layouts in tests.
"""

from dataclasses import dataclass, field
from typing import Optional

from .interfaces import IPdfCanvas


@dataclass
class RecordedCell:
    """A markup cell written to a page"""
    
    x: float
    y: float
    w: float
    h: float
    html: str
    border: int = 0
    align: str = ''


@dataclass
class RecordedPage:
    """Everything drawn on one page"""
    
    number: int
    cells: list = field(default_factory=list)
    lines: list = field(default_factory=list)
    rects: list = field(default_factory=list)
    images: list = field(default_factory=list)


class RecordingCanvas(IPdfCanvas):
    """Canvas that records drawing calls per page"""
    
    def __init__(self):
        self.pages: list[RecordedPage] = []
        self.metadata: dict = {}
        self.draw_color = (0, 0, 0)
    
    @property
    def page_count(self) -> int:
        return len(self.pages)
    
    @property
    def current(self) -> Optional[RecordedPage]:
        return self.pages[-1] if self.pages else None
    
    def add_page(self) -> None:
        self.pages.append(RecordedPage(number=len(self.pages) + 1))
    
    def page_number(self) -> int:
        return len(self.pages)
    
    def set_metadata(self, *, title: str = '', subject: str = '', creator: str = '', author: str = '') -> None:
        self.metadata = {
            'title': title,
            'subject': subject,
            'creator': creator,
            'author': author,
        }
    
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
        self.current.cells.append(RecordedCell(x, y, w, h, html, border, align))
    
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.current.lines.append((x1, y1, x2, y2, self.draw_color))
    
    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self.current.rects.append((x, y, w, h, self.draw_color))
    
    def set_draw_color(self, r: int, g: int, b: int) -> None:
        self.draw_color = (r, g, b)
    
    def image(self, path: str, x: float, y: float, w: float, h: float) -> None:
        self.current.images.append((path, x, y, w, h))
    
    def output(self) -> bytes:
        return b''
