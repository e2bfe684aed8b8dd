import os

import pdfkit
import pytest

from appdoc.error import PackagingError
from appdoc.packager import (
    APPLICATION_PDF_OPTIONS,
    PDF_HEADER_HTML,
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
    WkHtml2PdfPackager,
)


@pytest.fixture
def pdfkit_calls(monkeypatch):
    calls = []

    def fake_from_string(markup, output_path, options=None, configuration=None):
        header = options.get("header-html")
        header_content = None
        if header:
            with open(header, encoding="utf-8") as f:
                header_content = f.read()

        calls.append({
            "markup": markup,
            "output_path": output_path,
            "options": options,
            "header_content": header_content,
        })
        return b"%PDF-1.4 fake"

    monkeypatch.setattr(pdfkit, "from_string", fake_from_string)
    monkeypatch.setattr(pdfkit, "configuration", lambda **kwargs: kwargs)
    return calls


def test_application_layout(pdfkit_calls):
    document = WkHtml2PdfPackager().from_markup("<p>hello</p>", APPLICATION_PDF_OPTIONS)

    assert document.to_bytes() == b"%PDF-1.4 fake"
    (call,) = pdfkit_calls
    assert call["markup"] == "<p>hello</p>"
    assert call["output_path"] is False
    assert call["options"]["footer-center"] == "[page]"
    assert PDF_HEADER_HTML in call["header_content"]
    assert "firstPageOnly()" in call["header_content"]


def test_header_file_is_removed(pdfkit_calls):
    WkHtml2PdfPackager().from_markup("<p/>", APPLICATION_PDF_OPTIONS)

    assert not os.path.exists(pdfkit_calls[0]["options"]["header-html"])


def test_header_on_all_pages(pdfkit_calls):
    options = PdfOptions(header_options=HeaderOptions(header_repeat=HeaderRepeat.ALL_PAGES, header_html="<b>H</b>"))

    WkHtml2PdfPackager().from_markup("<p/>", options)

    (call,) = pdfkit_calls
    assert "<b>H</b>" in call["header_content"]
    assert "firstPageOnly" not in call["header_content"]
    assert "footer-center" not in call["options"]


def test_no_header_no_page_numbers(pdfkit_calls):
    WkHtml2PdfPackager().from_markup("<p/>", PdfOptions())

    (call,) = pdfkit_calls
    assert "header-html" not in call["options"]
    assert "footer-center" not in call["options"]


def test_custom_options_override_defaults(pdfkit_calls):
    packager = WkHtml2PdfPackager(**{"page-size": "Letter"})

    packager.from_markup("<p/>", PdfOptions(page_numbers=PageNumbers.NUMERIC))

    assert pdfkit_calls[0]["options"]["page-size"] == "Letter"


def test_wkhtmltopdf_path(monkeypatch, pdfkit_calls):
    captured = []
    monkeypatch.setattr(pdfkit, "configuration", lambda **kwargs: captured.append(kwargs) or kwargs)

    WkHtml2PdfPackager(wkhtmltopdf="/opt/bin/wkhtmltopdf").from_markup("<p/>", PdfOptions())

    assert captured == [{"wkhtmltopdf": "/opt/bin/wkhtmltopdf"}]


def test_packaging_failure(monkeypatch):
    def failing_from_string(*args, **kwargs):
        raise OSError("wkhtmltopdf exited with non-zero code 1")

    monkeypatch.setattr(pdfkit, "from_string", failing_from_string)
    monkeypatch.setattr(pdfkit, "configuration", lambda **kwargs: kwargs)

    with pytest.raises(PackagingError) as excinfo:
        WkHtml2PdfPackager().from_markup("<p/>", APPLICATION_PDF_OPTIONS)

    assert "non-zero" in excinfo.value.details


def test_missing_binary(monkeypatch):
    def missing_binary(**kwargs):
        raise OSError("No wkhtmltopdf executable found")

    monkeypatch.setattr(pdfkit, "configuration", missing_binary)

    with pytest.raises(PackagingError):
        WkHtml2PdfPackager().from_markup("<p/>", PdfOptions())
