from __future__ import annotations

import pytest

from retirecalc.core.analysis import INCOME_UNDEFINED, build_report
from retirecalc.core.projection import project_params
from retirecalc.presentation import (
    HtmlReportRenderer,
    TextReportRenderer,
    currency_symbol,
    format_currency,
    format_rate,
    frequency_label,
    get_renderer,
)
from retirecalc.schemas.projection import CompoundingFrequency


@pytest.mark.parametrize(
    "code, expected",
    [("GBP", "£"), ("USD", "$"), ("EUR", "€"), ("CHF", "CHF "), ("NOK", "kr"), ("XYZ", "XYZ ")],
)
def test_currency_symbol_lookup(code, expected):
    assert currency_symbol(code) == expected


def test_currency_symbol_uses_supplied_table():
    assert currency_symbol("INR", {"INR": "₹"}) == "₹"
    assert currency_symbol("USD", {"INR": "₹"}) == "USD "


def test_formatting_helpers():
    assert format_currency(1234567.891, "$") == "$1,234,567.89"
    assert format_currency(0, "£") == "£0.00"
    assert format_rate(0.07) == "7.0%"
    assert format_rate(0.005) == "0.5%"
    assert frequency_label(CompoundingFrequency.DAILY) == "Daily (365x/year)"
    assert frequency_label(CompoundingFrequency.MONTHLY) == "Monthly (12x/year)"


def test_text_report_with_band(usd_params):
    report = build_report(project_params(usd_params))
    text = TextReportRenderer().render(report, "$")

    assert "=== RETIREMENT CALCULATOR RESULTS ===" in text
    assert "Compounding Frequency: Daily (365x/year)" in text
    assert "Interest Rate Range: 6.0% - 8.0%" in text
    assert "Base Rate (7.0%): $" in text
    assert "Conservative (6.0%): $" in text
    assert "Optimistic (8.0%): $" in text
    assert "Potential Variation: $" in text
    assert "Retirement Goal: $500,000.00" in text
    assert text.count("Exceeds goal by") == 3
    assert "Annual Income Range: $" in text
    assert "Monthly Income Range: $" in text
    assert "in 40 years might have the purchasing power" in text


def test_text_report_without_band(gbp_params):
    report = build_report(project_params(gbp_params))
    text = TextReportRenderer().render(report, "£")

    assert "Total saved at 3.0%: £" in text
    assert "Interest Rate Range" not in text
    assert "You still need £" in text
    assert "Annual Income: £" in text
    assert "Monthly Income: £" in text


def test_text_report_reports_undefined_income(gbp_params):
    gbp_params["retirementAge"] = 85
    text = TextReportRenderer().render(build_report(project_params(gbp_params)), "£")

    assert INCOME_UNDEFINED in text
    assert "Annual Income" not in text


def test_html_report_with_band(usd_params):
    report = build_report(project_params(usd_params))
    html = HtmlReportRenderer().render(report, "$")

    assert '<section id="projectionResults">' in html
    assert html.count('class="scenario-card"') == 3
    assert "Conservative (6.0%)" in html
    assert "Optimistic (8.0%)" in html
    assert "Annual Income Range" in html
    assert 'id="inflationInfo"' in html


def test_html_report_without_band(gbp_params):
    html = HtmlReportRenderer().render(build_report(project_params(gbp_params)), "£")

    assert "scenario-card" not in html
    assert "Total at 3.0%" in html
    assert "Goal Status" in html
    assert "⏳ Needed: £" in html
    assert "Monthly Income" in html


def test_html_report_escapes_currency_symbol(gbp_params):
    gbp_params["currencyLabel"] = "<b>"
    report = build_report(project_params(gbp_params))
    html = HtmlReportRenderer().render(report, currency_symbol(report.result.currencyLabel))

    assert "<b>" not in html
    assert "&lt;b&gt; " in html


def test_get_renderer():
    assert get_renderer("TEXT").media_type == "text/plain"
    assert get_renderer("html").media_type == "text/html"
    with pytest.raises(ValueError):
        get_renderer("pdf")
