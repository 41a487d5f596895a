"""
Page types provided by the reports app
"""

from pdfdocs.pages import register_page

from .invoice import InvoiceItemsPage, InvoiceSummaryPage


def register_all_pages():
    """Register all available page types"""
    register_page('invoice.summary', InvoiceSummaryPage)
    register_page('invoice.items', InvoiceItemsPage)


register_all_pages()
