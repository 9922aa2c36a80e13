from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from retirecalc.core.validation import parse_request
from retirecalc.schemas.projection import (
    MONTHS_PER_YEAR,
    ProjectionRequest,
    ProjectionResult,
    ScenarioKind,
    ScenarioResult,
)


@dataclass(frozen=True)
class TimeBase:
    years: int
    months: int
    periods_per_year: int
    total_periods: int

    @classmethod
    def for_request(cls, request: ProjectionRequest) -> "TimeBase":
        n = request.compoundingFrequency.periods_per_year
        years = request.retirementAge - request.currentAge
        return cls(
            years=years,
            months=years * MONTHS_PER_YEAR,
            periods_per_year=n,
            total_periods=n * years,
        )


def _monthly_annuity(contribution: float, periodic_rate: float, periods: int) -> float:
    # zero-rate limit of ((1 + r)^n - 1) / r is n
    if periodic_rate == 0:
        return contribution * periods
    return contribution * (((1.0 + periodic_rate) ** periods - 1.0) / periodic_rate)


def _summed_contributions(contribution: float, periodic_rate: float, time_base: TimeBase) -> float:
    """
    Contributions land monthly but interest compounds n times a year, so each
    month's deposit grows for its own remaining exposure of
    n * (months - m) / 12 periods. Exponents may be fractional; this is an
    estimate, not an actuarial schedule.
    """
    total = 0.0
    for month in range(time_base.months):
        remaining_periods = time_base.periods_per_year * (time_base.months - month) / MONTHS_PER_YEAR
        total += contribution * (1.0 + periodic_rate) ** remaining_periods
    return total


def future_value(request: ProjectionRequest, rate: float) -> float:
    """
    Projected balance at retirement for one annual rate.

    Lump sum:      initialBalance * (1 + rate/n)^(n * years)
    Contributions: closed-form annuity when compounding is monthly,
                   otherwise a per-month sum (see _summed_contributions).
    """
    time_base = TimeBase.for_request(request)
    periodic_rate = rate / time_base.periods_per_year if rate else 0.0

    future_initial = request.initialBalance * (1.0 + periodic_rate) ** time_base.total_periods

    if time_base.periods_per_year == MONTHS_PER_YEAR:
        future_contrib = _monthly_annuity(
            request.monthlyContribution, periodic_rate, time_base.total_periods
        )
    else:
        future_contrib = _summed_contributions(request.monthlyContribution, periodic_rate, time_base)

    return future_initial + future_contrib


def _scenario(request: ProjectionRequest, kind: ScenarioKind, rate: float) -> ScenarioResult:
    return ScenarioResult(kind=kind, rate=rate, futureValue=future_value(request, rate))


def project(request: ProjectionRequest) -> ProjectionResult:
    """
    Evaluate the base rate and, when a variation band is set, the
    conservative (rate - band) and optimistic (rate + band) rates.
    """
    base = _scenario(request, ScenarioKind.BASE, request.annualRate)
    low = high = None
    if request.rateVariationBand > 0:
        low = _scenario(request, ScenarioKind.LOW, request.annualRate - request.rateVariationBand)
        high = _scenario(request, ScenarioKind.HIGH, request.annualRate + request.rateVariationBand)

    return ProjectionResult(
        baseScenario=base,
        lowScenario=low,
        highScenario=high,
        goalAmount=request.goalAmount,
        retirementAge=request.retirementAge,
        currentAge=request.currentAge,
        compoundingFrequency=request.compoundingFrequency,
        currencyLabel=request.currencyLabel,
        annualRate=request.annualRate,
        rateVariationBand=request.rateVariationBand,
    )


def project_params(raw: Mapping[str, Any]) -> ProjectionResult:
    """Validate raw input and project it; raises ProjectionValidationError."""
    return project(parse_request(raw))


__all__ = [
    "TimeBase",
    "future_value",
    "project",
    "project_params",
]
