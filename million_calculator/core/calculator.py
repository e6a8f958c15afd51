from __future__ import annotations

import math

from million_calculator.core.constants import (
    INVESTOR_CAPITAL_THRESHOLD,
    MILLION_TARGET,
    MONTHS_PER_YEAR,
    RATE_TABLE,
)
from million_calculator.schemas.calculation import (
    ProjectionResult,
    RatePair,
    RiskProfile,
    ScenarioTier,
)


def select_rates(profile: RiskProfile) -> RatePair:
    """Return the (baseline, optimized) annual returns for a risk profile."""
    return RATE_TABLE[RiskProfile(profile)]


def effective_monthly_rate(annual_rate: float) -> float:
    return (1.0 + annual_rate) ** (1.0 / MONTHS_PER_YEAR) - 1.0


def years_to_target(
    starting_capital: float,
    monthly_contribution: float,
    annual_rate: float,
    target: float = MILLION_TARGET,
) -> float:
    """
    Years until capital reaches ``target`` with monthly contributions.

    Solves the annuity future-value equation for the number of months:

        n = ln((FV * i + PMT) / (PV * i + PMT)) / ln(1 + i)

    where ``i`` is the effective monthly rate. Returns 0 when the target is
    already met and ``math.inf`` when it can never be reached; never raises.
    """
    pv = starting_capital
    pmt = monthly_contribution

    if pv >= target:
        return 0.0
    if pmt <= 0 and pv <= 0 and annual_rate <= 0:
        return math.inf
    # (1 + r) ** (1/12) is complex for r <= -1
    if annual_rate <= -1:
        return math.inf

    i = effective_monthly_rate(annual_rate)

    if i == 0:
        if pmt == 0:
            return math.inf
        return (target - pv) / pmt / MONTHS_PER_YEAR

    numerator = target * i + pmt
    denominator = pv * i + pmt
    # with a negative rate both can be negative: the balance decays away from the target
    if numerator <= 0 or denominator <= 0:
        return math.inf

    months = math.log(numerator / denominator) / math.log(1.0 + i)
    return max(0.0, months / MONTHS_PER_YEAR)


def classify(starting_capital: float, profile: RiskProfile) -> ScenarioTier:
    if starting_capital < INVESTOR_CAPITAL_THRESHOLD or RiskProfile(profile) == RiskProfile.CONSERVATIVE:
        return ScenarioTier.ENTRY
    return ScenarioTier.INVESTOR


def evaluate(
    name: str,
    starting_capital: float,
    monthly_contribution: float,
    profile: RiskProfile,
    target: float = MILLION_TARGET,
) -> ProjectionResult:
    """Run the full projection for one submission."""
    rates = select_rates(profile)
    return ProjectionResult(
        name=name,
        baseline_years=years_to_target(starting_capital, monthly_contribution, rates.baseline, target),
        optimized_years=years_to_target(starting_capital, monthly_contribution, rates.optimized, target),
        tier=classify(starting_capital, profile),
    )


__all__ = [
    "select_rates",
    "effective_monthly_rate",
    "years_to_target",
    "classify",
    "evaluate",
]
