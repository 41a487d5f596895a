"""
Tests for the Page base class
"""

import tempfile
from pathlib import Path

from django.test import TestCase, override_settings

from pdfdocs.document import AbstractPdfDocument
from pdfdocs.pages import Page
from pdfdocs.pages.page import NBSP, SPAN_TEMPLATE
from pdfdocs.printing import RecordingCanvas


class NotesPdfDocument(AbstractPdfDocument):
    
    def get_title(self):
        return 'Notes'
    
    def get_pdf_creator(self):
        return 'tests'
    
    def get_pdf_author(self):
        return 'tests'
    
    def get_file_name(self):
        return 'notes.pdf'


class NotePage(Page):
    background = None
    
    def get_background_image_path(self):
        return self.background
    
    def render_body(self, canvas):
        self.render_span(canvas, 'note', 50, 10)


class PageTestCase(TestCase):
    """Test cases for block layout on a page"""
    
    def setUp(self):
        self.document = NotesPdfDocument(canvas_factory=lambda document: RecordingCanvas())
        self.page = self.document.add_page(NotePage)
        self.canvas = RecordingCanvas()
        self.canvas.add_page()
    
    def last_cell(self):
        return self.canvas.current.cells[-1]
    
    def test_cursor_starts_at_margin(self):
        self.assertEqual(self.page.y, 15)
    
    def test_render_block_advances_cursor(self):
        """Test that a block moves the cursor to its bottom edge"""
        new_y = self.page.render_block(self.canvas, SPAN_TEMPLATE, {'content': 'x'}, 100, 12)
        
        self.assertEqual(new_y, 27)
        self.assertEqual(self.page.y, 27)
        cell = self.last_cell()
        self.assertEqual((cell.x, cell.y, cell.w, cell.h), (15, 15, 100, 12))
    
    def test_render_block_at_explicit_position(self):
        new_y = self.page.render_block(self.canvas, SPAN_TEMPLATE, {}, 10, 5, x=40, y=100)
        
        self.assertEqual(new_y, 105)
        self.assertEqual(self.last_cell().x, 40)
    
    @override_settings(PDFDOCS_DEBUG_BORDERS=True)
    def test_debug_borders(self):
        """Test that debug mode draws every cell boundary"""
        document = NotesPdfDocument()
        page = document.add_page(NotePage)
        page.render_block(self.canvas, SPAN_TEMPLATE, {}, 10, 5)
        
        self.assertEqual(self.last_cell().border, 1)
    
    def test_span_escapes_content(self):
        self.page.render_span(self.canvas, 'Fish & Chips', 50, 8)
        
        self.assertIn('Fish &amp; Chips', self.last_cell().html)
    
    def test_span_capitalize(self):
        self.page.render_span(self.canvas, 'hello', 50, 8, capitalize=True)
        
        self.assertIn('HELLO', self.last_cell().html)
    
    def test_span_page_default_capitalize(self):
        self.page.capitalize = True
        self.page.render_span(self.canvas, 'hello', 50, 8)
        
        self.assertIn('HELLO', self.last_cell().html)
    
    def test_span_substring(self):
        self.page.render_span(self.canvas, 'abcdef', 50, 8, start=1, length=3)
        
        html = self.last_cell().html
        self.assertIn('>bcd<', html)
    
    def test_span_letter_spacing(self):
        """Test that letter spacing inserts non-breaking spaces between characters"""
        self.page.render_span(self.canvas, 'abc', 50, 8, letter_spacing=2)
        
        self.assertIn(f'a{NBSP * 2}b{NBSP * 2}c', self.last_cell().html)
    
    def test_span_nbsp(self):
        self.page.render_span(self.canvas, 'a b', 50, 8, nbsp=True)
        
        self.assertIn(f'a{NBSP}b', self.last_cell().html)
    
    def test_span_bold_and_alignment(self):
        self.page.render_span(self.canvas, 'x', 50, 8, font_weight='bold', text_align='right', font_size=9)
        
        cell = self.last_cell()
        self.assertIn('<b>x</b>', cell.html)
        self.assertIn('size="9"', cell.html)
        self.assertEqual(cell.align, 'right')
    
    def test_span_border(self):
        """Test that a bordered span draws a box and insets its text"""
        new_y = self.page.render_span(
            self.canvas, 'x', 50, 10, x=20, y=30, border=True, border_color=(255, 0, 0)
        )
        
        self.assertEqual(self.canvas.current.rects, [(20, 30, 50, 10, (255, 0, 0))])
        cell = self.last_cell()
        self.assertEqual((cell.x, cell.y, cell.w, cell.h), (21, 31, 48, 8))
        self.assertEqual(new_y, 40)
        self.assertEqual(self.canvas.draw_color, (0, 0, 0))
    
    def test_render_title(self):
        new_y = self.page.render_title(self.canvas, 'Summary', num=2)
        
        cell = self.last_cell()
        self.assertIn('2. Summary', cell.html)
        self.assertEqual(cell.w, self.document.inner_width)
        self.assertEqual(new_y, 15 + 7)
    
    def test_render_separator(self):
        """Test that a separator spans the inner width between its margins"""
        used = self.page.render_separator(self.canvas, 3, 4)
        
        self.assertEqual(used, 7)
        self.assertEqual(self.page.y, 22)
        self.assertEqual(self.canvas.current.lines, [(15, 18, 195, 18, (200, 200, 200))])
    
    def test_body_end_from_geometry(self):
        self.assertEqual(self.page.get_body_end_y(), 297 - 35)
        self.assertEqual(self.page.get_body_end_y(30), 297 - 35 - 30)
    
    def test_body_end_override(self):
        self.page.y_list_end = 200
        
        self.assertEqual(self.page.get_body_end_y(), 200)
    
    def test_trans_interpolates_arguments(self):
        text = self.page.trans('Page %(page_num)s of %(page_total)s', {'page_num': 1, 'page_total': 3})
        
        self.assertEqual(text, 'Page 1 of 3')
    
    def test_render_phases(self):
        """Test that render starts a page and resets the cursor"""
        self.page.y = 120
        canvas = RecordingCanvas()
        self.page.render(canvas)
        
        self.assertEqual(canvas.page_count, 1)
        self.assertEqual(canvas.current.cells[0].y, 15)
        self.assertEqual(self.page.y, 25)
    
    def test_background_image(self):
        """Test that an existing background image covers the whole page"""
        with tempfile.NamedTemporaryFile(suffix='.png') as background:
            self.page.background = background.name
            canvas = RecordingCanvas()
            self.page.render(canvas)
        
        self.assertEqual(canvas.current.images, [(background.name, 0, 0, 210, 297)])
    
    def test_missing_background_image_is_skipped(self):
        self.page.background = str(Path(tempfile.gettempdir()) / 'missing-background.png')
        canvas = RecordingCanvas()
        self.page.render(canvas)
        
        self.assertEqual(canvas.current.images, [])
