"""
Tests for PDF file storage helpers
"""

import shutil
import tempfile
import uuid
from pathlib import Path
from unittest.mock import patch

from django.test import TestCase
from PIL import Image

from pdfdocs.exceptions import PreviewError
from pdfdocs.storage import (
    delete_file,
    ensure_dir,
    generate_preview,
    preview_filename,
    unique_filename_in_dir,
)


class StoragePathsTestCase(TestCase):
    """Test file naming and cleanup helpers."""
    
    def setUp(self):
        self.tmp_dir = Path(tempfile.mkdtemp())
    
    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)
    
    def test_unique_filename_has_extension(self):
        filename = unique_filename_in_dir(self.tmp_dir)
        
        self.assertTrue(filename.endswith('.pdf'))
        self.assertFalse((self.tmp_dir / filename).exists())
    
    def test_unique_filename_skips_existing(self):
        """Test that a name already present in the directory is not reused"""
        taken = uuid.UUID('00000000000000000000000000000001')
        free = uuid.UUID('00000000000000000000000000000002')
        (self.tmp_dir / f"{taken.hex}.pdf").write_bytes(b'')
        
        with patch('pdfdocs.storage.paths.uuid.uuid4', side_effect=[taken, free]):
            filename = unique_filename_in_dir(self.tmp_dir, 'pdf')
        
        self.assertEqual(filename, f"{free.hex}.pdf")
    
    def test_preview_filename(self):
        self.assertEqual(preview_filename('invoice-42.pdf'), 'invoice-42.jpg')
        self.assertEqual(preview_filename('report.v2.pdf', 'png'), 'report.v2.png')
    
    def test_ensure_dir_creates_parents(self):
        directory = ensure_dir(self.tmp_dir / 'a' / 'b')
        
        self.assertTrue(directory.is_dir())
        # Existing directories are fine
        self.assertEqual(ensure_dir(directory), directory)
    
    def test_delete_file(self):
        path = self.tmp_dir / 'old.pdf'
        path.write_bytes(b'%PDF')
        
        self.assertTrue(delete_file(path))
        self.assertFalse(path.exists())
    
    def test_delete_missing_file(self):
        """Test that deleting a missing file is a no-op"""
        self.assertFalse(delete_file(self.tmp_dir / 'missing.pdf'))


class GeneratePreviewTestCase(TestCase):
    """Test raster preview generation."""
    
    def setUp(self):
        self.tmp_dir = Path(tempfile.mkdtemp())
        self.pdf_path = self.tmp_dir / 'doc.pdf'
        self.pdf_path.write_bytes(b'%PDF-1.4')
    
    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)
    
    def test_missing_pdf(self):
        with self.assertRaises(FileNotFoundError):
            generate_preview(self.tmp_dir / 'missing.pdf', self.tmp_dir / 'missing.jpg')
    
    def test_first_page_saved_as_jpeg(self):
        """Test that the first page is rasterised and written as JPEG"""
        preview_path = self.tmp_dir / 'doc.jpg'
        
        with patch('pdfdocs.storage.preview.convert_from_path', return_value=[Image.new('RGBA', (20, 30))]) as convert:
            result = generate_preview(self.pdf_path, preview_path, dpi=50)
        
        self.assertEqual(result, preview_path)
        convert.assert_called_once_with(str(self.pdf_path), dpi=50, first_page=1, last_page=1)
        with Image.open(preview_path) as image:
            self.assertEqual(image.format, 'JPEG')
            self.assertEqual(image.size, (20, 30))
    
    def test_png_preview(self):
        preview_path = self.tmp_dir / 'doc.png'
        
        with patch('pdfdocs.storage.preview.convert_from_path', return_value=[Image.new('RGB', (5, 5))]):
            generate_preview(self.pdf_path, preview_path)
        
        with Image.open(preview_path) as image:
            self.assertEqual(image.format, 'PNG')
    
    def test_converter_failure(self):
        with patch('pdfdocs.storage.preview.convert_from_path', side_effect=RuntimeError('poppler missing')):
            with self.assertRaises(PreviewError):
                generate_preview(self.pdf_path, self.tmp_dir / 'doc.jpg')
    
    def test_no_page(self):
        with patch('pdfdocs.storage.preview.convert_from_path', return_value=[]):
            with self.assertRaises(PreviewError):
                generate_preview(self.pdf_path, self.tmp_dir / 'doc.jpg')
