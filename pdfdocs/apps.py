from django.apps import AppConfig


class PdfDocsConfig(AppConfig):
    name = 'pdfdocs'
    verbose_name = 'PDF documents'
    
    def ready(self):
        """Register page types declared by installed apps."""
        from django.utils.module_loading import autodiscover_modules
        
        autodiscover_modules('pdf_pages')
