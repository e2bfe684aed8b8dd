from ._meta import config, logger  # isort: skip
from .constant import PDF_HEADER_HTML
from .datadef import HeaderOptions, HeaderRepeat, PageNumbers, PdfDocument, PdfOptions
from .wkhtml import WkHtml2PdfPackager

# Layout applied to every application document.
APPLICATION_PDF_OPTIONS = PdfOptions(
    page_numbers=PageNumbers.NUMERIC,
    header_options=HeaderOptions(
        header_repeat=HeaderRepeat.FIRST_PAGE_ONLY,
        header_html=PDF_HEADER_HTML,
    ),
)

__all__ = (
    "APPLICATION_PDF_OPTIONS",
    "PDF_HEADER_HTML",
    "HeaderOptions",
    "HeaderRepeat",
    "PageNumbers",
    "PdfDocument",
    "PdfOptions",
    "WkHtml2PdfPackager",
    "config",
    "logger",
)
