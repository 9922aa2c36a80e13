from __future__ import annotations

from retirecalc.schemas.projection import CompoundingFrequency


def format_currency(amount: float, symbol: str) -> str:
    return f"{symbol}{amount:,.2f}"


def format_rate(rate: float) -> str:
    return f"{rate * 100:.1f}%"


def frequency_label(frequency: CompoundingFrequency) -> str:
    return f"{frequency.label} ({frequency.periods_per_year}x/year)"
