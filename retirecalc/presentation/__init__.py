"""Presentation adapters: currency symbols, number formatting and report renderers."""

from retirecalc.presentation.currency import DEFAULT_CURRENCY_SYMBOLS, currency_symbol
from retirecalc.presentation.formatting import format_currency, format_rate, frequency_label
from retirecalc.presentation.renderers import (
    RENDERERS,
    HtmlReportRenderer,
    ReportRenderer,
    TextReportRenderer,
    get_renderer,
)

__all__ = [
    "DEFAULT_CURRENCY_SYMBOLS",
    "RENDERERS",
    "HtmlReportRenderer",
    "ReportRenderer",
    "TextReportRenderer",
    "currency_symbol",
    "format_currency",
    "format_rate",
    "frequency_label",
    "get_renderer",
]
