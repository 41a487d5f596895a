"""
Path generation and cleanup for generated PDF files
"""

import logging
import uuid
from pathlib import Path
from typing import Union


logger = logging.getLogger(__name__)

PDF_EXTENSION = 'pdf'


def unique_filename_in_dir(directory: Union[str, Path], extension: str = PDF_EXTENSION) -> str:
    """
    Generate a random file name that does not exist yet in a directory.
    
    Args:
        directory: Directory the file will be written to
        extension: File extension without the leading dot
        
    Returns:
        File name (not a path), e.g. '3f2a...c1.pdf'
    """
    directory = Path(directory)
    
    while True:
        filename = f"{uuid.uuid4().hex}.{extension}"
        if not (directory / filename).exists():
            return filename


def preview_filename(filename: str, extension: str = 'jpg') -> str:
    """
    Derive a preview image name from a PDF file name.
    
    Args:
        filename: PDF file name, e.g. 'invoice-42.pdf'
        extension: Raster extension without the leading dot
        
    Returns:
        File name with the extension replaced, e.g. 'invoice-42.jpg'
    """
    return f"{Path(filename).stem}.{extension}"


def ensure_dir(directory: Union[str, Path], mode: int = 0o755) -> Path:
    """
    Create a directory and its parents if needed.
    
    Raises:
        OSError: If the directory cannot be created
    """
    directory = Path(directory)
    if not directory.is_dir():
        directory.mkdir(mode=mode, parents=True, exist_ok=True)
        logger.debug(f"Created directory {directory}")
    return directory


def delete_file(path: Union[str, Path]) -> bool:
    """
    Delete a file if it exists.
    
    Args:
        path: File to delete
        
    Returns:
        True if a file was deleted, False if there was nothing to delete
        
    Raises:
        OSError: If an existing file cannot be deleted
    """
    path = Path(path)
    if not path.is_file():
        return False
    
    path.unlink()
    logger.debug(f"Deleted {path}")
    return True
