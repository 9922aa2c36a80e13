"""Currency code to display symbol lookup."""

from __future__ import annotations

from typing import Mapping, Optional

DEFAULT_CURRENCY_SYMBOLS = {
    "GBP": "£",
    "USD": "$",
    "EUR": "€",
    "JPY": "¥",
    "CAD": "C$",
    "AUD": "A$",
    "CHF": "CHF ",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr",
}


def currency_symbol(code: str, symbols: Optional[Mapping[str, str]] = None) -> str:
    """Symbol for ``code``; unknown codes are shown as the code plus a space."""
    table = DEFAULT_CURRENCY_SYMBOLS if symbols is None else symbols
    return table.get(code, f"{code} ")
