"""
PDF-generation exceptions for consistent error handling across pdfdocs.
"""


class PdfError(Exception):
    """Base exception for all pdfdocs errors."""
    pass


class FontNotFound(PdfError):
    """
    Raised when a declared font file or font directory does not exist.
    
    A document cannot be constructed without its declared fonts.
    """
    pass


class PaginationError(PdfError):
    """
    Raised when a list page cannot make progress.
    
    Example:
        A continuation page whose body is shorter than a single item row.
    """
    pass


class PreviewError(PdfError):
    """Raised when a raster preview cannot be extracted from a PDF"""
    pass
