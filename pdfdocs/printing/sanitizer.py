"""
Markup Sanitizer for the Printing layer

Template output is written into cells as ReportLab paragraph markup. ReportLab
only understands a small set of inline tags, so everything else is stripped
before drawing.
"""

import logging

import bleach


logger = logging.getLogger(__name__)


# Inline tags understood by reportlab.platypus.Paragraph
ALLOWED_TAGS = [
    'para', 'font', 'b', 'strong', 'i', 'em', 'u', 'strike', 's',
    'sup', 'sub', 'a', 'span', 'br',
]

ALLOWED_ATTRIBUTES = {
    'para': ['align', 'leading', 'spaceb', 'spacea'],
    'font': ['face', 'name', 'size', 'color'],
    'a': ['href', 'color'],
    'span': ['color', 'backcolor', 'fontname', 'fontsize'],
}


def sanitize_markup(html: str) -> str:
    """
    Reduce rendered HTML to ReportLab paragraph markup.
    
    Unsupported tags are stripped but their text is kept, attributes outside
    the allowlist are dropped, and bare ampersands are escaped.
    
    Args:
        html: Markup string rendered by a template
        
    Returns:
        Markup safe to pass to a ReportLab Paragraph
    """
    clean_markup = bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        strip=True,
        strip_comments=True,
    )
    
    # Paragraph expects XHTML-style empty elements
    clean_markup = clean_markup.replace('<br>', '<br/>')
    
    return clean_markup.strip()
