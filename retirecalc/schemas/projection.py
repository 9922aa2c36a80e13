"""Data contracts for retirement projections."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

MIN_AGE = 12
MAX_AGE = 116
MAX_ANNUAL_RATE = 0.20
MONTHS_PER_YEAR = 12


class CompoundingFrequency(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @property
    def periods_per_year(self) -> int:
        return COMPOUNDING_PERIODS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


COMPOUNDING_PERIODS: Dict[CompoundingFrequency, int] = {
    CompoundingFrequency.DAILY: 365,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.YEARLY: 1,
}


class ScenarioKind(str, Enum):
    LOW = "low"
    BASE = "base"
    HIGH = "high"

    @property
    def label(self) -> str:
        return SCENARIO_LABELS[self]


SCENARIO_LABELS: Dict[ScenarioKind, str] = {
    ScenarioKind.LOW: "Conservative",
    ScenarioKind.BASE: "Base",
    ScenarioKind.HIGH: "Optimistic",
}


class ProjectionRequest(BaseModel):
    """Validated inputs for one projection run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    currentAge: int = Field(ge=MIN_AGE, le=MAX_AGE)
    retirementAge: int = Field(ge=MIN_AGE, le=MAX_AGE)
    monthlyContribution: float = Field(ge=0, allow_inf_nan=False)
    initialBalance: float = Field(ge=0, allow_inf_nan=False)
    goalAmount: float = Field(ge=0, allow_inf_nan=False)
    annualRate: float = Field(ge=0, le=MAX_ANNUAL_RATE, allow_inf_nan=False)
    rateVariationBand: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    compoundingFrequency: CompoundingFrequency = CompoundingFrequency.MONTHLY
    currencyLabel: str = "USD"

    @model_validator(mode="after")
    def ensure_validity(self) -> "ProjectionRequest":
        if self.retirementAge <= self.currentAge:
            raise ValueError("retirementAge must be greater than currentAge")
        if self.rateVariationBand > self.annualRate:
            raise ValueError("rateVariationBand must not exceed annualRate")
        return self

    @property
    def years(self) -> int:
        return self.retirementAge - self.currentAge

    @property
    def months(self) -> int:
        return self.years * MONTHS_PER_YEAR


class ScenarioResult(BaseModel):
    """Projected balance at retirement for a single annual rate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ScenarioKind
    rate: float
    futureValue: float = Field(ge=0)


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    baseScenario: ScenarioResult
    # low/high only exist when a sensitivity band was requested
    lowScenario: Optional[ScenarioResult] = None
    highScenario: Optional[ScenarioResult] = None

    goalAmount: float
    retirementAge: int
    currentAge: int
    compoundingFrequency: CompoundingFrequency
    currencyLabel: str
    annualRate: float
    rateVariationBand: float = 0.0

    @property
    def hasVariation(self) -> bool:
        return self.lowScenario is not None and self.highScenario is not None

    @property
    def years(self) -> int:
        return self.retirementAge - self.currentAge

    def scenarios(self) -> List[ScenarioResult]:
        """Populated scenarios ordered conservative to optimistic."""
        if not self.hasVariation:
            return [self.baseScenario]
        return [self.lowScenario, self.baseScenario, self.highScenario]
