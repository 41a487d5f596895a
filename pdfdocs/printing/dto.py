"""
Data Transfer Objects for the Printing layer
"""

from dataclasses import dataclass
from enum import Enum


class OutputAction(str, Enum):
    """Targets a rendered PDF can be emitted to"""
    
    PRINT = 'print'
    DOWNLOAD = 'download'
    SAVE = 'save'


@dataclass
class PdfResult:
    """
    Result of a document render pass.
    
    Contains the PDF bytes and metadata for HTTP responses.
    """
    
    pdf_bytes: bytes
    filename: str
    content_type: str = "application/pdf"
    page_count: int = 0
    
    def __len__(self) -> int:
        """Return the size of PDF in bytes"""
        return len(self.pdf_bytes)
