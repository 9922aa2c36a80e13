"""Turn raw caller input into a ProjectionRequest, or say why it can't be."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from retirecalc.schemas.projection import (
    MAX_AGE,
    MAX_ANNUAL_RATE,
    MIN_AGE,
    CompoundingFrequency,
    ProjectionRequest,
)

INVALID_INPUTS = "inputs must be non-negative numbers"
AGE_ORDER = "retirement age must exceed current age"
AGE_RANGE = "age out of supported range"
RATE_TOO_HIGH = "interest rate too high"
BAND_INVALID = "rate variation band invalid"
UNSUPPORTED_FREQUENCY = "unsupported compounding frequency"

CORE_FIELDS = (
    "currentAge",
    "retirementAge",
    "monthlyContribution",
    "initialBalance",
    "goalAmount",
    "annualRate",
)
AGE_FIELDS = ("currentAge", "retirementAge")

DEFAULT_CURRENCY = "USD"


class ProjectionValidationError(ValueError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class ValidationResult:
    request: Optional[ProjectionRequest]
    error: Optional[ProjectionValidationError]

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ProjectionRequest:
        if self.error is not None:
            raise self.error
        return self.request


def _as_number(value: Any) -> Optional[float]:
    """Finite float for ints, floats and numeric strings; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        text = None
    elif isinstance(value, str):
        text = value.strip()
    else:
        return None
    try:
        number = float(value if text is None else text)
    except (ValueError, OverflowError):
        # OverflowError: ints beyond float range, e.g. a long JSON digit string
        return None
    if not math.isfinite(number):
        return None
    return number


def _as_frequency(value: Any) -> Optional[CompoundingFrequency]:
    if isinstance(value, CompoundingFrequency):
        return value
    if not isinstance(value, str):
        return None
    try:
        return CompoundingFrequency(value.strip().lower())
    except ValueError:
        return None


def _checked_fields(raw: Mapping[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name in CORE_FIELDS:
        number = _as_number(raw.get(name))
        if number is None or number < 0:
            raise ProjectionValidationError(INVALID_INPUTS)
        if name in AGE_FIELDS:
            if not number.is_integer():
                raise ProjectionValidationError(INVALID_INPUTS)
            values[name] = int(number)
        else:
            values[name] = number

    if values["currentAge"] >= values["retirementAge"]:
        raise ProjectionValidationError(AGE_ORDER)

    if values["currentAge"] < MIN_AGE or values["retirementAge"] > MAX_AGE:
        raise ProjectionValidationError(AGE_RANGE)

    if values["annualRate"] > MAX_ANNUAL_RATE:
        raise ProjectionValidationError(RATE_TOO_HIGH)

    raw_band = raw.get("rateVariationBand")
    band = 0.0 if raw_band is None else _as_number(raw_band)
    if band is None or band < 0 or band > values["annualRate"]:
        raise ProjectionValidationError(BAND_INVALID)
    values["rateVariationBand"] = band

    raw_frequency = raw.get("compoundingFrequency")
    frequency = (
        CompoundingFrequency.MONTHLY
        if raw_frequency is None
        else _as_frequency(raw_frequency)
    )
    if frequency is None:
        raise ProjectionValidationError(UNSUPPORTED_FREQUENCY)
    values["compoundingFrequency"] = frequency

    currency = raw.get("currencyLabel")
    values["currencyLabel"] = str(currency).strip() if currency else DEFAULT_CURRENCY
    return values


def parse_request(raw: Mapping[str, Any]) -> ProjectionRequest:
    """Build a request from raw input, raising ProjectionValidationError.

    Checks run in a fixed order and the first failing one decides the reason:
    numeric inputs, age ordering, age range, rate ceiling, variation band,
    compounding frequency.
    """
    if not isinstance(raw, Mapping):
        raise ProjectionValidationError(INVALID_INPUTS)
    return ProjectionRequest(**_checked_fields(raw))


def validate(raw: Mapping[str, Any]) -> ValidationResult:
    try:
        request = parse_request(raw)
    except ProjectionValidationError as exc:
        return ValidationResult(request=None, error=exc)
    return ValidationResult(request=request, error=None)
