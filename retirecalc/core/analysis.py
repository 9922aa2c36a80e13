"""Goal, income and purchasing-power views derived from a projection."""

from __future__ import annotations

from typing import List, Optional

from retirecalc.schemas.analysis import (
    GoalGap,
    GoalStatus,
    IncomeAnalysis,
    IncomeEstimate,
    RetirementReport,
)
from retirecalc.schemas.projection import MONTHS_PER_YEAR, ProjectionResult, ScenarioResult

LIFE_EXPECTANCY = 85
# illustrative placeholder, not an inflation model
PURCHASING_POWER_FACTOR = 0.5
INCOME_UNDEFINED = "Life expectancy is not greater than retirement age."


def goal_gap(goal_amount: float, scenario: ScenarioResult) -> GoalGap:
    gap = goal_amount - scenario.futureValue
    return GoalGap(
        kind=scenario.kind,
        rate=scenario.rate,
        futureValue=scenario.futureValue,
        goalAmount=goal_amount,
        gap=gap,
        status=GoalStatus.SHORTFALL if gap > 0 else GoalStatus.MET,
    )


def goal_analysis(result: ProjectionResult) -> List[GoalGap]:
    return [goal_gap(result.goalAmount, scenario) for scenario in result.scenarios()]


def retirement_income(result: ProjectionResult, life_expectancy: int = LIFE_EXPECTANCY) -> IncomeAnalysis:
    """
    Spread each scenario's balance evenly over the years between retirement
    and life expectancy. When there are no such years the analysis comes back
    with available=False and a message instead of any figures.
    """
    retirement_years = life_expectancy - result.retirementAge
    if retirement_years <= 0:
        return IncomeAnalysis(
            available=False,
            lifeExpectancy=life_expectancy,
            retirementYears=retirement_years,
            message=INCOME_UNDEFINED,
        )

    incomes = []
    for scenario in result.scenarios():
        annual = scenario.futureValue / retirement_years
        incomes.append(
            IncomeEstimate(
                kind=scenario.kind,
                rate=scenario.rate,
                annualIncome=annual,
                monthlyIncome=annual / MONTHS_PER_YEAR,
            )
        )
    return IncomeAnalysis(
        available=True,
        lifeExpectancy=life_expectancy,
        retirementYears=retirement_years,
        incomes=incomes,
    )


def potential_variation(result: ProjectionResult) -> Optional[float]:
    if not result.hasVariation:
        return None
    return result.highScenario.futureValue - result.lowScenario.futureValue


def adjusted_purchasing_power(result: ProjectionResult) -> float:
    return result.baseScenario.futureValue * PURCHASING_POWER_FACTOR


def build_report(result: ProjectionResult, life_expectancy: int = LIFE_EXPECTANCY) -> RetirementReport:
    return RetirementReport(
        result=result,
        years=result.years,
        goalGaps=goal_analysis(result),
        income=retirement_income(result, life_expectancy),
        potentialVariation=potential_variation(result),
        purchasingPower=adjusted_purchasing_power(result),
    )
