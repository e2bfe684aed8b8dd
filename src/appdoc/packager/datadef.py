import enum

from pyrsistent import PClass, field


class PageNumbers(enum.Enum):
    NONE = "NONE"
    NUMERIC = "NUMERIC"


class HeaderRepeat(enum.Enum):
    ALL_PAGES = "ALL_PAGES"
    FIRST_PAGE_ONLY = "FIRST_PAGE_ONLY"


class HeaderOptions(PClass):
    header_repeat = field(type=HeaderRepeat, factory=HeaderRepeat, initial=HeaderRepeat.ALL_PAGES)
    header_html = field(type=str, mandatory=True)


class PdfOptions(PClass):
    page_numbers = field(type=PageNumbers, factory=PageNumbers, initial=PageNumbers.NONE)
    header_options = field(type=(HeaderOptions, type(None)), initial=None)


class PdfDocument(PClass):
    content = field(type=bytes, mandatory=True)

    def to_bytes(self):
        return self.content
