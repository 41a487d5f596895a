"""
PDF Document

Base class for PDF documents: page geometry, page composition, the render
pass, output to HTTP responses or files, and lifecycle of the generated file
and its preview image.
"""

from abc import ABC, abstractmethod
from contextlib import nullcontext
import inspect
import logging
import re
from pathlib import Path
from typing import Callable, Optional, Union

from django.http import HttpResponse
from django.template.loader import render_to_string
from django.utils import translation
from django.utils.module_loading import import_string

from . import conf
from .pages.page import Page
from .pages.registry import get_page_class
from .printing.dto import OutputAction, PdfResult
from .printing.fonts import register_font, register_fonts_dir
from .printing.interfaces import IPdfCanvas
from .printing.recording import RecordingCanvas
from .printing.reportlab_canvas import ReportLabCanvas
from .storage import (
    PDF_EXTENSION,
    delete_file,
    ensure_dir,
    generate_preview,
    preview_filename,
    unique_filename_in_dir,
)


logger = logging.getLogger(__name__)

CONTENT_DISPOSITIONS = {
    OutputAction.PRINT: 'inline',
    OutputAction.DOWNLOAD: 'attachment',
}


class AbstractPdfDocument(ABC):
    """
    Base class for PDF documents.
    
    A document is composed by adding pages, then rendered in one pass where
    each page draws itself on a shared canvas. Sizes are millimetres.
    
    Usage:
        document = InvoicePdfDocument(invoice)
        document.add_page('invoice.summary')
        document.add_page(InvoiceItemsPage)
        return document.emit(OutputAction.DOWNLOAD)
    """
    
    margin: float = 15
    page_width: float = 210
    page_height: float = 297
    footer_height: float = 35
    
    font_family: str = 'Helvetica'
    font_size: float = 12
    font_dirs: list = []
    
    # Language to render in; the active language is used when None
    language: Optional[str] = None
    
    # Run a counting pass first so pages can print "page X of Y"
    count_pages: bool = False
    
    preview_enabled: bool = False
    
    def __init__(self, canvas_factory: Optional[Callable[['AbstractPdfDocument'], IPdfCanvas]] = None):
        """
        Initialize the document.
        
        Args:
            canvas_factory: Builds the drawing canvas for a render pass.
                If None, uses ReportLabCanvas.
                
        Raises:
            FontNotFound: If a configured font directory or file is missing
        """
        self.margin_double = self.margin * 2
        self.margin_footer = self.margin / 2
        self.inner_width = self.page_width - self.margin_double
        
        self.debug_borders: bool = conf.get_setting('DEBUG_BORDERS')
        
        self.pages: list[Page] = []
        self.current_page: Optional[Page] = None
        self.rendered_pages: list[Page] = []
        self.page_total: Optional[int] = None
        self.rendered_pdf: Optional[PdfResult] = None
        
        self.canvas_factory = canvas_factory or ReportLabCanvas.for_document
        
        for font_dir in [*conf.get_setting('FONT_DIRS'), *self.font_dirs]:
            self.use_fonts_dir(font_dir)
    
    def use_fonts_dir(self, directory: Union[str, Path]) -> list[str]:
        """Register every TrueType font of a directory"""
        return register_fonts_dir(directory)
    
    def use_font(self, ttf: Union[str, Path], name: Optional[str] = None) -> str:
        """Register one TrueType font file"""
        return register_font(ttf, name)
    
    @property
    def translation_context(self) -> str:
        """
        Context used to translate page strings.
        
        Derived from the class name, e.g. InvoicePdfDocument -> 'invoice'.
        """
        name = re.sub(r'(?<!^)(?=[A-Z])', '_', type(self).__name__).lower()
        return re.sub(r'_pdf_document$', '', name)
    
    # Abstract document metadata
    
    @abstractmethod
    def get_title(self) -> str:
        pass
    
    @abstractmethod
    def get_pdf_creator(self) -> str:
        pass
    
    @abstractmethod
    def get_pdf_author(self) -> str:
        pass
    
    @abstractmethod
    def get_file_name(self) -> str:
        """Name of the stored PDF file, including its extension"""
        pass
    
    # Composition
    
    def resolve_page_class(self, page_type) -> Optional[type]:
        """
        Resolve a page class, a registered page key or a dotted path.
        
        Returns:
            A concrete Page subclass, or None if page_type does not name one
        """
        page_class = page_type
        
        if isinstance(page_type, str):
            try:
                page_class = get_page_class(page_type)
            except KeyError:
                try:
                    page_class = import_string(page_type)
                except ImportError:
                    return None
        
        if not inspect.isclass(page_class) or not issubclass(page_class, Page):
            return None
        if inspect.isabstract(page_class):
            return None
        
        return page_class
    
    def add_page(self, page_type, *args, **kwargs) -> Optional[Page]:
        """
        Instantiate a page and append it to the document.
        
        Args:
            page_type: Page subclass, registered page key or dotted path
            *args, **kwargs: Passed to the page constructor
            
        Returns:
            The new page, or None if page_type cannot be resolved
        """
        page_class = self.resolve_page_class(page_type)
        
        if page_class is None:
            logger.warning(f"{type(self).__name__}: unknown page type {page_type!r}")
            return None
        
        page = page_class(*args, **kwargs)
        page.set_document(self)
        self.pages.append(page)
        
        return page
    
    # Rendering
    
    def render_template(self, template: str, variables: Optional[dict] = None) -> str:
        """
        Render a Django template with the document context injected.
        
        Adds 'document', 'page' (the page being rendered) and 'base_dir';
        'content' defaults to an empty string.
        """
        context = dict(variables or {})
        context['document'] = self
        context['page'] = self.current_page
        context['base_dir'] = conf.get_base_dir()
        context.setdefault('content', '')
        
        return render_to_string(template, context)
    
    def render_page(self, page: Page, canvas: IPdfCanvas) -> None:
        """Make page current and render it, then restore the previous current page"""
        previous = self.current_page
        self.current_page = page
        self.rendered_pages.append(page)
        try:
            page.render(canvas)
        finally:
            self.current_page = previous
    
    def _language_override(self):
        if self.language:
            return translation.override(self.language)
        return nullcontext()

    def _render_pages(self, canvas: IPdfCanvas) -> None:
        self.rendered_pages = []
        
        canvas.set_metadata(
            title=self.get_title(),
            subject=self.get_title(),
            creator=self.get_pdf_creator(),
            author=self.get_pdf_author(),
        )
        
        for page in self.pages:
            self.render_page(page, canvas)
    
    def render_pdf(self) -> PdfResult:
        """
        Render all pages and return the PDF.
        
        The result is cached in rendered_pdf.
        
        Returns:
            PdfResult with PDF bytes and the download file name
        """
        try:
            with self._language_override():
                if self.count_pages:
                    counter = RecordingCanvas()
                    self._render_pages(counter)
                    self.page_total = counter.page_count
                
                canvas = self.canvas_factory(self)
                logger.debug(f"Rendering {type(self).__name__} with {len(self.pages)} page(s)")
                self._render_pages(canvas)
                pdf_bytes = canvas.output()
            
            result = PdfResult(
                pdf_bytes=pdf_bytes,
                filename=self.add_file_extension(self.get_download_file_name()),
                page_count=canvas.page_number(),
            )
            
            logger.info(
                f"Successfully generated PDF: {result.filename} "
                f"({result.page_count} pages, {len(result.pdf_bytes)} bytes)"
            )
            
        except Exception as e:
            logger.error(f"Failed to render {type(self).__name__}: {e}", exc_info=True)
            raise
        
        self.rendered_pdf = result
        return result
    
    def get_rendered_pdf(self) -> PdfResult:
        return self.rendered_pdf or self.render_pdf()
    
    # Output
    
    def add_file_extension(self, filename: str) -> str:
        if filename.lower().endswith(f".{PDF_EXTENSION}"):
            return filename
        return f"{filename}.{PDF_EXTENSION}"
    
    def get_download_file_name(self) -> str:
        return self.get_file_name()
    
    def emit(
        self,
        action: OutputAction = OutputAction.PRINT,
        destination: Optional[Union[str, Path]] = None
    ) -> Union[HttpResponse, Path]:
        """
        Emit the rendered PDF.
        
        Args:
            action: PRINT for an inline response shown by the browser viewer,
                DOWNLOAD for an attachment response, SAVE to write a file
            destination: File path for SAVE (defaults to the download file name)
            
        Returns:
            HttpResponse for PRINT and DOWNLOAD, the written Path for SAVE
            
        Raises:
            OSError: If the file cannot be written
        """
        action = OutputAction(action)
        result = self.get_rendered_pdf()
        
        if action == OutputAction.SAVE:
            path = Path(destination or result.filename)
            path.write_bytes(result.pdf_bytes)
            logger.info(f"Saved {result.filename} to {path}")
            return path
        
        response = HttpResponse(result.pdf_bytes, content_type=result.content_type)
        response['Content-Disposition'] = (
            f'{CONTENT_DISPOSITIONS[action]}; filename="{result.filename}"'
        )
        return response
    
    # File lifecycle
    
    def generate_dir(self) -> Path:
        """Directory holding this document type's files"""
        return conf.get_output_dir() / self.translation_context
    
    def generate_file_name(self) -> str:
        return unique_filename_in_dir(self.generate_dir(), PDF_EXTENSION)
    
    def get_file_absolute_path(self) -> Path:
        return self.generate_dir() / self.get_file_name()
    
    def has_existing_pdf(self) -> bool:
        return self.get_file_absolute_path().is_file()
    
    def render_to_dir(self) -> Path:
        """
        Write the PDF under generate_dir() with a new unique file name.
        
        Any previously stored file and its preview are deleted first.
        
        Returns:
            Absolute path of the written file
        """
        self.pdf_delete_file_and_preview()
        
        directory = ensure_dir(self.generate_dir(), conf.get_setting('DIR_MODE'))
        path = directory / self.generate_file_name()
        
        path.write_bytes(self.get_rendered_pdf().pdf_bytes)
        logger.info(f"Stored {type(self).__name__} at {path}")
        
        return path
    
    def pdf_delete_file_and_preview(self) -> None:
        if self.has_existing_pdf():
            self.pdf_delete_preview()
            self.pdf_delete()
    
    def pdf_delete(self) -> bool:
        return delete_file(self.get_file_absolute_path())
    
    def pdf_delete_preview(self) -> bool:
        return delete_file(self.generate_preview_absolute_path())
    
    def has_pdf_preview_path(self) -> bool:
        return self.preview_enabled
    
    def generate_preview_dir(self) -> Path:
        return self.generate_dir() / 'previews'
    
    def generate_preview_file_name(self) -> str:
        return preview_filename(self.get_file_name(), conf.get_setting('PREVIEW_EXTENSION'))
    
    def generate_preview_absolute_path(self) -> Path:
        return self.generate_preview_dir() / self.generate_preview_file_name()
    
    def create_and_get_pdf_preview_path(self) -> Optional[Path]:
        """
        Return the preview image path, creating the image if needed.
        
        Returns:
            Path of the preview, or None if there is no stored PDF
            
        Raises:
            PreviewError: If the PDF cannot be rasterised
        """
        preview_path = self.generate_preview_absolute_path()
        
        if not preview_path.is_file():
            pdf_path = self.get_file_absolute_path()
            
            if not pdf_path.is_file():
                # No pdf
                return None
            
            ensure_dir(preview_path.parent, conf.get_setting('DIR_MODE'))
            generate_preview(pdf_path, preview_path, dpi=conf.get_setting('PREVIEW_DPI'))
        
        return preview_path
