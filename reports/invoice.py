"""
Invoice PDF document

A summary page followed by the paginated list of invoice lines, with the
invoice total rendered after the last line.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from pdfdocs.document import AbstractPdfDocument
from pdfdocs.pages import ItemsPage, Page


@dataclass
class InvoiceLine:
    label: str
    quantity: Decimal
    unit_price: Decimal
    
    @property
    def total(self) -> Decimal:
        return self.quantity * self.unit_price


@dataclass
class Invoice:
    number: str
    customer: str
    issued_on: str
    issuer: str = ''
    currency: str = 'EUR'
    lines: list = field(default_factory=list)
    file_name: str = ''
    
    @property
    def total(self) -> Decimal:
        return sum((line.total for line in self.lines), Decimal('0'))


def format_amount(amount: Decimal, currency: str) -> str:
    return f"{amount:.2f} {currency}"


class InvoicePdfDocument(AbstractPdfDocument):
    """Invoice with a summary page and a paginated line list"""
    
    count_pages = True
    preview_enabled = True
    
    def __init__(self, invoice: Invoice, canvas_factory=None):
        self.invoice = invoice
        super().__init__(canvas_factory)
    
    def compose(self) -> 'InvoicePdfDocument':
        """Add the standard invoice pages"""
        self.add_page('invoice.summary')
        self.add_page('invoice.items', self.invoice.lines)
        return self
    
    def get_title(self) -> str:
        return f"Invoice {self.invoice.number}"
    
    def get_pdf_creator(self) -> str:
        return 'pdfdocs'
    
    def get_pdf_author(self) -> str:
        return self.invoice.issuer
    
    def get_file_name(self) -> str:
        return self.invoice.file_name or f"invoice-{self.invoice.number}.pdf"


class InvoicePageMixin:
    """Footer shared by every invoice page"""
    
    def render_footer(self, canvas):
        document = self.document
        
        self.render_span(
            canvas,
            self.trans('Page %(page_num)s of %(page_total)s', self.page_number_args(canvas)),
            document.inner_width,
            6,
            y=document.page_height - document.footer_height + document.margin_footer,
            font_size=8,
            text_align='right'
        )


class InvoiceSummaryPage(InvoicePageMixin, Page):
    
    def render_body(self, canvas):
        invoice = self.document.invoice
        width = self.document.inner_width
        
        self.render_title(canvas, 'Invoice', num=0)
        self.render_separator(canvas, 2, 4)
        
        self.render_span(canvas, f"{self.trans('Number')}: {invoice.number}", width, 7)
        self.render_span(canvas, f"{self.trans('Customer')}: {invoice.customer}", width, 7)
        self.render_span(canvas, f"{self.trans('Date')}: {invoice.issued_on}", width, 7)
        self.render_span(
            canvas,
            f"{self.trans('Amount due')}: {format_amount(invoice.total, invoice.currency)}",
            width,
            9,
            font_size=14,
            font_weight='bold'
        )


class InvoiceItemsPage(InvoicePageMixin, ItemsPage):
    """One row per invoice line"""
    
    item_height = 8
    list_total_height = 20
    header_height = 8
    
    # (label, width, alignment); widths add up to the inner width
    columns = [
        ('Description', 100, ''),
        ('Quantity', 20, 'right'),
        ('Unit price', 30, 'right'),
        ('Total', 30, 'right'),
    ]
    
    def _render_row(self, canvas, values: list, y: float, **options: Any) -> None:
        x = self.document.margin
        for (_, width, align), value in zip(self.columns, values):
            self.render_span(canvas, value, width, self.item_height, x, y, text_align=align, **options)
            x += width
    
    def render_list_header(self, canvas):
        y = self.y
        self._render_row(
            canvas,
            [self.trans(label) for label, _, _ in self.columns],
            y,
            font_weight='bold',
            font_size=10
        )
        self.y = y + self.header_height
        self.render_separator(canvas, 0, 1)
    
    def render_item(self, canvas, item: InvoiceLine, y: float):
        currency = self.document.invoice.currency
        self._render_row(
            canvas,
            [
                item.label,
                f"{item.quantity:g}",
                format_amount(item.unit_price, currency),
                format_amount(item.total, currency),
            ],
            y,
            font_size=10
        )
    
    def render_total_block(self, canvas):
        invoice = self.document.invoice
        
        self.render_separator(canvas, 2, 2)
        self.render_span(
            canvas,
            f"{self.trans('Total')}: {format_amount(invoice.total, invoice.currency)}",
            self.document.inner_width,
            10,
            font_size=12,
            font_weight='bold',
            text_align='right'
        )
