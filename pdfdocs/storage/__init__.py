"""
PDF file storage

Filesystem helpers for generated PDF files and their raster previews.
"""

from .paths import (
    PDF_EXTENSION,
    delete_file,
    ensure_dir,
    preview_filename,
    unique_filename_in_dir,
)
from .preview import generate_preview

__all__ = [
    'PDF_EXTENSION',
    'delete_file',
    'ensure_dir',
    'generate_preview',
    'preview_filename',
    'unique_filename_in_dir',
]
