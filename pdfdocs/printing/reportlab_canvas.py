"""
ReportLab Canvas Implementation

Adapter for drawing pages with the ReportLab PDF library.
"""

from io import BytesIO
import logging

from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas as pdf_canvas
from reportlab.platypus import Frame, KeepInFrame, Paragraph

from .interfaces import IPdfCanvas
from .sanitizer import sanitize_markup


logger = logging.getLogger(__name__)


ALIGNMENTS = {
    '': TA_LEFT,
    'left': TA_LEFT,
    'center': TA_CENTER,
    'right': TA_RIGHT,
    'justify': TA_JUSTIFY,
}


class ReportLabCanvas(IPdfCanvas):
    """
    PDF canvas backed by reportlab.pdfgen.
    
    Page objects work in millimetres from the top-left corner; this adapter
    converts to ReportLab points from the bottom-left corner.
    
    Supports:
    - Markup cells drawn as Paragraphs, shrunk to fit their box
    - Lines and rectangles for borders and separators
    - Full-page background images
    """
    
    def __init__(
        self,
        page_width: float = 210,
        page_height: float = 297,
        *,
        font_name: str = 'Helvetica',
        font_size: float = 12
    ):
        """
        Initialize the canvas.
        
        Args:
            page_width: Page width in millimetres
            page_height: Page height in millimetres
            font_name: Registered ReportLab font used for cell text
            font_size: Default cell font size in points
        """
        self.page_width = page_width
        self.page_height = page_height
        self.base_style = ParagraphStyle(
            'PdfCell',
            fontName=font_name,
            fontSize=font_size,
            leading=font_size * 1.2,
            autoLeading='max',
        )
        
        self._buffer = BytesIO()
        self._canvas = pdf_canvas.Canvas(
            self._buffer,
            pagesize=(page_width * mm, page_height * mm),
        )
        self._page_count = 0
    
    @classmethod
    def for_document(cls, document) -> 'ReportLabCanvas':
        """Build a canvas matching a document's geometry and font"""
        return cls(
            document.page_width,
            document.page_height,
            font_name=document.font_family,
            font_size=document.font_size,
        )
    
    def _bottom(self, y: float, h: float = 0) -> float:
        """Convert a top-edge position in mm to a ReportLab bottom edge in points"""
        return (self.page_height - y - h) * mm
    
    def add_page(self) -> None:
        # ReportLab opens the first page implicitly
        if self._page_count:
            self._canvas.showPage()
        self._page_count += 1
    
    def page_number(self) -> int:
        return self._page_count
    
    def set_metadata(self, *, title: str = '', subject: str = '', creator: str = '', author: str = '') -> None:
        self._canvas.setTitle(title)
        self._canvas.setSubject(subject)
        self._canvas.setCreator(creator)
        self._canvas.setAuthor(author)
    
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
        style = self.base_style
        if align:
            style = ParagraphStyle(
                f"PdfCell-{align}",
                parent=self.base_style,
                alignment=ALIGNMENTS[align],
            )
        
        paragraph = Paragraph(sanitize_markup(html), style)
        
        frame = Frame(
            x * mm,
            self._bottom(y, h),
            w * mm,
            h * mm,
            leftPadding=0,
            bottomPadding=0,
            rightPadding=0,
            topPadding=0,
            showBoundary=1 if border else 0,
        )
        frame.addFromList(
            [KeepInFrame(w * mm, h * mm, [paragraph], mode='shrink')],
            self._canvas
        )
    
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._canvas.line(x1 * mm, self._bottom(y1), x2 * mm, self._bottom(y2))
    
    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._canvas.rect(x * mm, self._bottom(y, h), w * mm, h * mm, stroke=1, fill=0)
    
    def set_draw_color(self, r: int, g: int, b: int) -> None:
        self._canvas.setStrokeColorRGB(r / 255.0, g / 255.0, b / 255.0)
    
    def image(self, path: str, x: float, y: float, w: float, h: float) -> None:
        self._canvas.drawImage(path, x * mm, self._bottom(y, h), w * mm, h * mm)
    
    def output(self) -> bytes:
        """
        Finish the document and return its bytes.
        
        Returns:
            PDF content as bytes
        """
        self._canvas.save()
        pdf_bytes = self._buffer.getvalue()
        self._buffer.close()
        
        logger.debug(f"Serialized {self._page_count} page(s), {len(pdf_bytes)} bytes")
        return pdf_bytes
