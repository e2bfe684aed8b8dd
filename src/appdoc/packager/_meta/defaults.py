# Path to the wkhtmltopdf binary. None lets pdfkit look it up on PATH.
WKHTMLTOPDF_PATH = None

PDF_PAGE_SIZE = "A4"
PDF_MARGIN = "1.5cm"
PDF_HEADER_SPACING = 5
PDF_FOOTER_FONT_SIZE = "9"
