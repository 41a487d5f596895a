"""
Raster previews for generated PDF files.
Uses pdf2image (backed by Poppler's pdftoppm).
"""

import logging
from pathlib import Path
from typing import Union

from pdf2image import convert_from_path
from PIL import Image

from pdfdocs.exceptions import PreviewError


logger = logging.getLogger(__name__)

IMAGE_FORMATS = {
    'jpg': 'JPEG',
    'jpeg': 'JPEG',
    'png': 'PNG',
}


def generate_preview(
    pdf_path: Union[str, Path],
    preview_path: Union[str, Path],
    *,
    dpi: int = 72,
    page: int = 1
) -> Path:
    """
    Rasterise one page of a PDF into an image file.
    
    Args:
        pdf_path: Existing PDF file
        preview_path: Image file to write; its extension selects the format
        dpi: Rendering resolution
        page: 1-based page number to rasterise
        
    Returns:
        Path of the written image
        
    Raises:
        FileNotFoundError: If pdf_path does not exist
        PreviewError: If Poppler fails or the page does not exist
    """
    pdf_path = Path(pdf_path)
    preview_path = Path(preview_path)
    
    if not pdf_path.is_file():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")
    
    image_format = IMAGE_FORMATS.get(preview_path.suffix.lstrip('.').lower(), 'JPEG')
    
    logger.info(f"Rendering preview of '{pdf_path.name}' page {page} at {dpi} DPI")
    
    try:
        images: list[Image.Image] = convert_from_path(
            str(pdf_path),
            dpi=dpi,
            first_page=page,
            last_page=page,
        )
    except Exception as exc:
        raise PreviewError(
            f"pdf2image failed on '{pdf_path.name}': {exc}"
        ) from exc
    
    if not images:
        raise PreviewError(f"Page {page} not found in '{pdf_path.name}'")
    
    image = images[0]
    if image_format == 'JPEG' and image.mode != 'RGB':
        image = image.convert('RGB')
    image.save(preview_path, image_format)
    
    return preview_path
