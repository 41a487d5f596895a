"""
Font registration

Registers TrueType fonts with ReportLab so cells can reference them by name.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from pdfdocs.exceptions import FontNotFound


logger = logging.getLogger(__name__)


def register_font(ttf: Union[str, Path], name: Optional[str] = None) -> str:
    """
    Register a TrueType font file.
    
    Args:
        ttf: Path to the .ttf file
        name: Font name to register (defaults to the file stem)
        
    Returns:
        The registered font name
        
    Raises:
        FontNotFound: If the file does not exist
    """
    ttf = Path(ttf)
    if not ttf.is_file():
        raise FontNotFound(f"Unable to find TTF font for PDF creation: {ttf}")
    
    name = name or ttf.stem
    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, str(ttf)))
        logger.debug(f"Registered font {name} from {ttf}")
    
    return name


def register_fonts_dir(directory: Union[str, Path]) -> list[str]:
    """
    Register every .ttf file found in a directory.
    
    Args:
        directory: Directory to scan (not recursive)
        
    Returns:
        Registered font names, sorted by file name
        
    Raises:
        FontNotFound: If the directory does not exist
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FontNotFound(f"Font directory not found: {directory}")
    
    return [
        register_font(path)
        for path in sorted(directory.iterdir())
        if path.suffix.lower() == '.ttf'
    ]
