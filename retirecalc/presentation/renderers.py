"""Render a RetirementReport as console text or as HTML result fragments."""

from __future__ import annotations

from typing import Dict, List, Protocol

from jinja2 import Environment, StrictUndefined

from retirecalc.presentation.formatting import format_currency, format_rate, frequency_label
from retirecalc.schemas.analysis import RetirementReport
from retirecalc.schemas.projection import ScenarioKind


class ReportRenderer(Protocol):
    media_type: str

    def render(self, report: RetirementReport, symbol: str) -> str:
        ...


def _inflation_note(report: RetirementReport, symbol: str) -> str:
    return (
        f"Your {format_currency(report.result.baseScenario.futureValue, symbol)} in {report.years} years "
        f"might have the purchasing power of roughly {format_currency(report.purchasingPower, symbol)} "
        "in today's money (assuming 2-3% annual inflation)."
    )


class TextReportRenderer:
    media_type = "text/plain"

    def render(self, report: RetirementReport, symbol: str) -> str:
        result = report.result
        money = lambda amount: format_currency(amount, symbol)  # noqa: E731
        lines: List[str] = ["=== RETIREMENT CALCULATOR RESULTS ==="]
        lines.append(f"Compounding Frequency: {frequency_label(result.compoundingFrequency)}")

        if result.hasVariation:
            low, base, high = result.scenarios()
            lines.append(f"Interest Rate Range: {format_rate(low.rate)} - {format_rate(high.rate)}")
            lines.append(f"Base Rate ({format_rate(base.rate)}): {money(base.futureValue)}")
            lines.append(f"Conservative ({format_rate(low.rate)}): {money(low.futureValue)}")
            lines.append(f"Optimistic ({format_rate(high.rate)}): {money(high.futureValue)}")
            lines.append(f"Potential Variation: {money(report.potentialVariation)}")
        else:
            base = result.baseScenario
            lines.append(f"Total saved at {format_rate(base.rate)}: {money(base.futureValue)}")

        lines += ["", "=== GOAL ANALYSIS ===", f"Retirement Goal: {money(result.goalAmount)}"]
        if result.hasVariation:
            for gap in report.goalGaps:
                prefix = f"{gap.kind.label} ({format_rate(gap.rate)})"
                if gap.met:
                    lines.append(f"{prefix}: 🎯 Exceeds goal by {money(gap.amount)}")
                else:
                    lines.append(f"{prefix}: ⏳ Short by {money(gap.amount)}")
        else:
            gap = report.goalGaps[0]
            if gap.met:
                lines.append(f"🎯 You've met your goal! Surplus: {money(gap.amount)}")
            else:
                lines.append(f"⏳ You still need {money(gap.amount)} to reach your goal")

        lines += ["", "=== RETIREMENT INCOME ANALYSIS ==="]
        income = report.income
        if not income.available:
            lines.append(income.message)
        elif result.hasVariation:
            low = income.for_kind(ScenarioKind.LOW)
            high = income.for_kind(ScenarioKind.HIGH)
            lines.append(f"Annual Income Range: {money(low.annualIncome)} - {money(high.annualIncome)}")
            lines.append(f"Monthly Income Range: {money(low.monthlyIncome)} - {money(high.monthlyIncome)}")
        else:
            base = income.for_kind(ScenarioKind.BASE)
            lines.append(f"Annual Income: {money(base.annualIncome)}")
            lines.append(f"Monthly Income: {money(base.monthlyIncome)}")

        lines += ["", "=== INFLATION NOTE ===", _inflation_note(report, symbol)]
        return "\n".join(lines) + "\n"


HTML_TEMPLATE = """\
<section id="projectionResults">
  <div class="result-item">
    <span class="result-label">Compounding Frequency</span>
    <span class="result-value neutral">{{ frequency }}</span>
  </div>
{%- if result.hasVariation %}
  <div class="scenario-grid">
  {%- for scenario in result.scenarios() %}
    <div class="scenario-card">
      <div class="scenario-title">{{ scenario.kind.label }} ({{ scenario.rate | rate }})</div>
      <div class="scenario-amount">{{ scenario.futureValue | money(symbol) }}</div>
    </div>
  {%- endfor %}
  </div>
{%- else %}
  <div class="result-item">
    <span class="result-label">Total at {{ result.baseScenario.rate | rate }}</span>
    <span class="result-value positive">{{ result.baseScenario.futureValue | money(symbol) }}</span>
  </div>
{%- endif %}
</section>
<section id="goalResults">
  <div class="result-item">
    <span class="result-label">Retirement Goal</span>
    <span class="result-value neutral">{{ result.goalAmount | money(symbol) }}</span>
  </div>
{%- if result.hasVariation %}
{%- for gap in report.goalGaps %}
  <div class="result-item">
    <span class="result-label">{{ gap.kind.label }} Scenario</span>
    <span class="result-value {{ 'positive' if gap.met else 'negative' }}">{{ '🎯 +' if gap.met else '⏳ -' }}{{ gap.amount | money(symbol) }}</span>
  </div>
{%- endfor %}
{%- else %}
{%- set gap = report.goalGaps[0] %}
  <div class="result-item">
    <span class="result-label">Goal Status</span>
    <span class="result-value {{ 'positive' if gap.met else 'negative' }}">{{ '🎯 Surplus: ' if gap.met else '⏳ Needed: ' }}{{ gap.amount | money(symbol) }}</span>
  </div>
{%- endif %}
</section>
<section id="incomeResults">
{%- if not income.available %}
  <p>{{ income.message }}</p>
{%- elif result.hasVariation %}
  <div class="result-item">
    <span class="result-label">Annual Income Range</span>
    <span class="result-value neutral">{{ low_income.annualIncome | money(symbol) }} - {{ high_income.annualIncome | money(symbol) }}</span>
  </div>
  <div class="result-item">
    <span class="result-label">Monthly Income Range</span>
    <span class="result-value neutral">{{ low_income.monthlyIncome | money(symbol) }} - {{ high_income.monthlyIncome | money(symbol) }}</span>
  </div>
{%- else %}
  <div class="result-item">
    <span class="result-label">Annual Income</span>
    <span class="result-value positive">{{ base_income.annualIncome | money(symbol) }}</span>
  </div>
  <div class="result-item">
    <span class="result-label">Monthly Income</span>
    <span class="result-value positive">{{ base_income.monthlyIncome | money(symbol) }}</span>
  </div>
{%- endif %}
</section>
<p id="inflationInfo">{{ inflation_note }}</p>
"""


class HtmlReportRenderer:
    media_type = "text/html"

    def __init__(self) -> None:
        env = Environment(autoescape=True, undefined=StrictUndefined)
        env.filters["money"] = format_currency
        env.filters["rate"] = format_rate
        self._template = env.from_string(HTML_TEMPLATE)

    def render(self, report: RetirementReport, symbol: str) -> str:
        income = report.income
        return self._template.render(
            report=report,
            result=report.result,
            income=income,
            symbol=symbol,
            frequency=frequency_label(report.result.compoundingFrequency),
            low_income=income.for_kind(ScenarioKind.LOW),
            high_income=income.for_kind(ScenarioKind.HIGH),
            base_income=income.for_kind(ScenarioKind.BASE),
            inflation_note=_inflation_note(report, symbol),
        )


RENDERERS: Dict[str, ReportRenderer] = {
    "text": TextReportRenderer(),
    "html": HtmlReportRenderer(),
}


def get_renderer(name: str) -> ReportRenderer:
    try:
        return RENDERERS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown report format: {name}") from None
