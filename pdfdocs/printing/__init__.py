"""
Printing layer

Drawing canvases the page objects render onto, the markup sanitizer for
template output, and the result objects of a render pass.
"""

from .dto import OutputAction, PdfResult
from .interfaces import IPdfCanvas
from .recording import RecordingCanvas
from .reportlab_canvas import ReportLabCanvas

__all__ = [
    'IPdfCanvas',
    'OutputAction',
    'PdfResult',
    'RecordingCanvas',
    'ReportLabCanvas',
]
