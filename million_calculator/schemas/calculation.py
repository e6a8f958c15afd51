"""Data contracts for the million calculator."""

from __future__ import annotations

import math
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from million_calculator.presentation.formatting import parse_currency


class RiskProfile(str, Enum):
    CONSERVATIVE = "conservative"
    AGGRESSIVE = "aggressive"


class ScenarioTier(str, Enum):
    ENTRY = "iniciante"
    INVESTOR = "investidor"


class RatePair(BaseModel):
    """Baseline ("real") and optimized annual returns for one profile."""

    model_config = ConfigDict(frozen=True)

    baseline: float = Field(..., ge=0)
    optimized: float = Field(..., ge=0)


class ProjectionResult(BaseModel):
    """Output of one evaluation. Horizons may be ``math.inf``."""

    model_config = ConfigDict(frozen=True)

    name: str
    baseline_years: float
    optimized_years: float
    tier: ScenarioTier


class CalculationRequest(BaseModel):
    """Raw form payload. Currency fields arrive masked ("1.500") or numeric."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(..., min_length=2)
    age: int = Field(..., ge=18, le=100)
    currentInvestment: Union[int, float, str] = "0"
    monthlyInvestment: Union[int, float, str] = "0"
    profile: RiskProfile
    email: Optional[str] = None
    whatsapp: Optional[str] = None

    @field_validator("currentInvestment", "monthlyInvestment", mode="after")
    @classmethod
    def parse_currency_field(cls, value: Union[int, float, str]) -> float:
        try:
            amount = float(parse_currency(value)) if isinstance(value, str) else float(value)
        except OverflowError as exc:
            raise ValueError("amount is too large") from exc
        # NaN slips past a plain "< 0" check
        if not math.isfinite(amount):
            raise ValueError("amount must be a finite number")
        if amount < 0:
            raise ValueError("amount must be non-negative")
        return amount

    @property
    def starting_capital(self) -> float:
        return float(self.currentInvestment)

    @property
    def monthly_contribution(self) -> float:
        return float(self.monthlyInvestment)


class Narrative(BaseModel):
    headline: str
    body: List[str]
    highlight: str
    cta_label: str
    cta_href: str
    disclaimer: str


class DisplayBlock(BaseModel):
    currentInvestment: str
    monthlyInvestment: str
    yearsReal: str
    yearsOptimized: str
    narrative: Narrative


class CalculationResponse(BaseModel):
    """Result view returned to the frontend.

    ``yearsReal``/``yearsOptimized`` are ``None`` when the target is
    unreachable, since JSON has no representation for infinity.
    """

    name: str
    scenario: ScenarioTier
    yearsReal: Optional[float]
    yearsOptimized: Optional[float]
    rates: RatePair
    display: DisplayBlock
    leadId: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)


class RatesResponse(BaseModel):
    target: float
    investorThreshold: float
    profiles: dict[RiskProfile, RatePair]
