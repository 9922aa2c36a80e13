"""Data contracts for goal, income and report views of a projection."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from retirecalc.schemas.projection import ProjectionResult, ScenarioKind


class GoalStatus(str, Enum):
    SHORTFALL = "shortfall"
    MET = "met"


class GoalGap(BaseModel):
    """Distance between the retirement goal and one scenario's balance.

    ``gap`` is ``goalAmount - futureValue``: positive means the scenario falls
    short, zero or negative means the goal is met with ``amount`` to spare.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ScenarioKind
    rate: float
    futureValue: float
    goalAmount: float
    gap: float
    status: GoalStatus

    @property
    def amount(self) -> float:
        return abs(self.gap)

    @property
    def met(self) -> bool:
        return self.status is GoalStatus.MET


class IncomeEstimate(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ScenarioKind
    rate: float
    annualIncome: float
    monthlyIncome: float


class IncomeAnalysis(BaseModel):
    """Post-retirement income, or the reason it cannot be derived."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    available: bool
    lifeExpectancy: int
    retirementYears: int
    incomes: List[IncomeEstimate] = Field(default_factory=list)
    message: Optional[str] = None

    def for_kind(self, kind: ScenarioKind) -> Optional[IncomeEstimate]:
        for income in self.incomes:
            if income.kind == kind:
                return income
        return None


class RetirementReport(BaseModel):
    """Everything the renderers and the JSON API hand to the caller."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    result: ProjectionResult
    years: int
    goalGaps: List[GoalGap]
    income: IncomeAnalysis
    potentialVariation: Optional[float] = None
    purchasingPower: float
