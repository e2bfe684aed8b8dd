from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from dateutil import parser

from appdoc import config

from .jinja2render import jinja2renderer

DEFAULT_VALUE = ""
CENTS = Decimal("0.01")


def default_data(value):
    return DEFAULT_VALUE if value is None else value


def format_date(value, fmt="%d %B %Y"):
    if isinstance(value, (date, datetime)):
        return value.strftime(fmt)
    if not value:
        return DEFAULT_VALUE
    return parser.parse(value).strftime(fmt)


def format_currency(value, symbol=None):
    if value is None:
        return DEFAULT_VALUE

    symbol = config.CURRENCY_SYMBOL if symbol is None else symbol

    amount = Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {abs(amount):,.2f}"


jinja2renderer.add_filter("default_data", default_data)
jinja2renderer.add_filter("format_date", format_date)
jinja2renderer.add_filter("format_currency", format_currency)
