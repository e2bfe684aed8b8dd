import os
import tempfile

import pdfkit

from appdoc.error import PackagingError

from ._meta import config, logger
from .constant import FIRST_PAGE_ONLY_SCRIPT, HEADER_DOCUMENT, PAGE_NUMBER_FORMAT
from .datadef import HeaderRepeat, PageNumbers, PdfDocument


class WkHtml2PdfPackager(object):
    """Convert HTML markup into a PDF document using wkhtmltopdf (pdfkit)"""

    def __init__(self, wkhtmltopdf=None, **options):
        self._wkhtmltopdf = wkhtmltopdf or config.WKHTMLTOPDF_PATH
        self.setup_options(options)

    def setup_options(self, opts):
        self._options = {
            "disable-smart-shrinking": "",
            "enable-local-file-access": None,
            "encoding": "UTF-8",
            "footer-font-size": config.PDF_FOOTER_FONT_SIZE,
            "load-error-handling": "ignore",
            "load-media-error-handling": "ignore",
            "margin-bottom": config.PDF_MARGIN,
            "margin-left": config.PDF_MARGIN,
            "margin-right": config.PDF_MARGIN,
            "margin-top": config.PDF_MARGIN,
            "page-size": config.PDF_PAGE_SIZE,
            "quiet": "",
        }
        self._options.update(opts)

    @property
    def options(self):
        return self._options

    def configuration(self):
        if self._wkhtmltopdf:
            return pdfkit.configuration(wkhtmltopdf=self._wkhtmltopdf)

        return pdfkit.configuration()

    def header_document(self, header_options):
        if header_options.header_repeat == HeaderRepeat.FIRST_PAGE_ONLY:
            script, onload = FIRST_PAGE_ONLY_SCRIPT, "firstPageOnly()"
        else:
            script, onload = "", ""

        return HEADER_DOCUMENT.format(
            script=script, onload=onload, header_html=header_options.header_html
        )

    def build_options(self, pdf_options, header_file=None):
        options = dict(self._options)

        if pdf_options.page_numbers == PageNumbers.NUMERIC:
            options["footer-center"] = PAGE_NUMBER_FORMAT

        if header_file is not None:
            options["header-html"] = header_file
            options["header-spacing"] = config.PDF_HEADER_SPACING

        return options

    def from_markup(self, markup, pdf_options):
        header_file = None

        try:
            if pdf_options.header_options is not None:
                fd, header_file = tempfile.mkstemp(suffix=".html", prefix="appdoc-header-")
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(self.header_document(pdf_options.header_options))

            content = pdfkit.from_string(
                markup,
                False,
                options=self.build_options(pdf_options, header_file),
                configuration=self.configuration(),
            )
        except OSError as e:
            logger.exception("PDF packaging failed")
            raise PackagingError("Unable to convert markup to PDF.", details=str(e)) from e
        finally:
            if header_file is not None:
                os.unlink(header_file)

        return PdfDocument(content=content)
