"""
Page base class

A page owns a vertical cursor ``y`` and renders itself in three phases:
header, body and footer. All content placement goes through render_block(),
which writes a template-rendered cell and moves the cursor below it.
"""

from abc import ABC, abstractmethod
import logging
from pathlib import Path
from typing import Optional

from django.utils.translation import pgettext

from pdfdocs.printing.interfaces import IPdfCanvas


logger = logging.getLogger(__name__)

NBSP = '\u00a0'

SPAN_TEMPLATE = 'pdfdocs/partials/span.html'
TITLE_TEMPLATE = 'pdfdocs/partials/page-title.html'


class Page(ABC):
    """
    One page of a PDF document.
    
    Subclasses implement render_body(). Font defaults below apply to every
    span the page renders unless overridden per call.
    """
    
    font_size: float = 12
    font_weight: str = ''
    text_align: str = ''
    letter_spacing: int = 0
    capitalize: bool = False
    
    # Fixed end of the body area; computed from document geometry when None
    y_list_end: Optional[float] = None
    
    title_height: float = 7
    
    def __init__(self):
        self.y: float = 0
        self.document = None
    
    def set_document(self, document) -> None:
        """Attach the page to its document and move the cursor to the page top"""
        self.document = document
        self.y = self.get_top_y()
    
    def get_top_y(self) -> float:
        return self.document.margin
    
    def render(self, canvas: IPdfCanvas) -> None:
        """
        Render the page on a new canvas page.
        
        Args:
            canvas: Drawing canvas shared by all pages of the document
        """
        self.y = self.get_top_y()
        canvas.add_page()
        
        self.render_header(canvas)
        self.render_body(canvas)
        self.render_footer(canvas)
    
    def render_header(self, canvas: IPdfCanvas) -> None:
        background = self.get_background_image_path()
        if background and Path(background).is_file():
            canvas.image(
                str(background),
                0,
                0,
                self.document.page_width,
                self.document.page_height
            )
    
    def get_background_image_path(self) -> Optional[str]:
        return None
    
    @abstractmethod
    def render_body(self, canvas: IPdfCanvas) -> None:
        pass
    
    def render_footer(self, canvas: IPdfCanvas) -> None:
        # To override
        pass
    
    def page_number_args(self, canvas: IPdfCanvas) -> dict:
        """
        Arguments for "page X of Y" strings.
        
        page_total is only known when the document counts its pages.
        """
        return {
            'page_num': canvas.page_number(),
            'page_total': self.document.page_total or '',
        }
    
    def get_body_end_y(self, extra_height: float = 0) -> float:
        """
        Lowest position usable by body content.
        
        Args:
            extra_height: Space to keep free above the footer (e.g. a totals block)
        """
        if self.y_list_end:
            return self.y_list_end
        
        document = self.document
        return document.page_height - document.footer_height - extra_height
    
    def render_block(
        self,
        canvas: IPdfCanvas,
        template: str,
        variables: dict,
        w: float,
        h: float,
        x: Optional[float] = None,
        y: Optional[float] = None,
        border: int = 0,
        align: str = ''
    ) -> float:
        """
        Render a template into a cell and move the cursor below it.
        
        Args:
            canvas: Drawing canvas
            template: Django template name
            variables: Template context
            w: Cell width
            h: Cell height
            x: Left edge (defaults to the document margin)
            y: Top edge (defaults to the cursor)
            border: Draw the cell boundary when non-zero
            align: Horizontal text alignment of the cell
            
        Returns:
            The new cursor position, y + h
        """
        document = self.document
        html = document.render_template(template, variables)
        
        x = document.margin if x is None else x
        y = self.y if y is None else y
        border = 1 if document.debug_borders else border
        
        canvas.write_html_cell(w, h, x, y, html, border=border, align=align)
        
        self.y = y + h
        return self.y
    
    def render_span(
        self,
        canvas: IPdfCanvas,
        content: str,
        w: float,
        h: float,
        x: Optional[float] = None,
        y: Optional[float] = None,
        *,
        font_size: Optional[float] = None,
        font_weight: Optional[str] = None,
        text_align: Optional[str] = None,
        letter_spacing: Optional[int] = None,
        capitalize: Optional[bool] = None,
        start: Optional[int] = None,
        length: Optional[int] = None,
        nbsp: bool = False,
        border: bool = False,
        border_color: tuple = (0, 0, 0)
    ) -> float:
        """
        Render a single text span.
        
        Options left as None fall back to the page's font defaults.
        
        Args:
            canvas: Drawing canvas
            content: Text to render (escaped by the template)
            w, h, x, y: Cell box, as for render_block()
            font_size: Size in points
            font_weight: 'bold' for bold text
            text_align: '', 'left', 'center', 'right' or 'justify'
            letter_spacing: Non-breaking spaces inserted between characters
            capitalize: Upper-case the content
            start, length: Render only this slice of the content
            nbsp: Replace spaces with non-breaking spaces
            border: Draw a rectangle around the span and inset the text by 1
            border_color: RGB color of that rectangle
            
        Returns:
            The new cursor position
        """
        x = self.document.margin if x is None else x
        y = self.y if y is None else y
        bottom = y + h
        
        if border:
            canvas.set_draw_color(*border_color)
            canvas.rect(x, y, w, h)
            canvas.set_draw_color(0, 0, 0)
            x += 1
            y += 1
            w -= 2
            h -= 2
        
        content = content or ''
        
        if self.capitalize if capitalize is None else capitalize:
            content = content.upper()
        
        if start is not None and length is not None:
            content = content[start:start + length]
        
        spacing = self.letter_spacing if letter_spacing is None else letter_spacing
        if spacing:
            content = (NBSP * spacing).join(content)
        
        if nbsp:
            content = content.replace(' ', NBSP)
        
        weight = self.font_weight if font_weight is None else font_weight
        
        self.render_block(
            canvas,
            SPAN_TEMPLATE,
            {
                'content': content,
                'font_size': self.font_size if font_size is None else font_size,
                'font_name': self.document.font_family,
                'bold': weight == 'bold',
            },
            w,
            h,
            x,
            y,
            align=self.text_align if text_align is None else text_align
        )
        
        self.y = bottom
        return self.y
    
    def render_template_large(
        self,
        canvas: IPdfCanvas,
        template: str,
        variables: dict,
        height: float,
        y: Optional[float] = None
    ) -> float:
        """Render a template across the full inner width of the page"""
        document = self.document
        
        return self.render_block(
            canvas,
            template,
            variables,
            document.inner_width,
            height,
            document.margin,
            y
        )
    
    def render_title(
        self,
        canvas: IPdfCanvas,
        title: str,
        num: int = 1,
        y: Optional[float] = None,
        args: Optional[dict] = None
    ) -> float:
        """Render a translated, numbered section title"""
        return self.render_template_large(
            canvas,
            TITLE_TEMPLATE,
            {
                'page_title': self.trans(title, args),
                'num': num,
            },
            self.title_height,
            y
        )
    
    def render_separator(self, canvas: IPdfCanvas, margin_before: float, margin_after: float) -> float:
        """
        Draw a light horizontal rule across the inner width.
        
        Returns:
            Total vertical space consumed
        """
        document = self.document
        
        self.y += margin_before
        canvas.set_draw_color(200, 200, 200)
        canvas.line(
            document.margin,
            self.y,
            document.inner_width + document.margin,
            self.y
        )
        canvas.set_draw_color(0, 0, 0)
        self.y += margin_after
        
        return margin_before + margin_after
    
    def trans(self, message: str, args: Optional[dict] = None) -> str:
        """Translate a message in the document's translation context"""
        text = pgettext(self.document.translation_context, message)
        return text % args if args else text
