"""Business constants for the projection policy."""

from million_calculator.schemas.calculation import RatePair, RiskProfile

MILLION_TARGET = 1_000_000.0

# Starting capital below this is always an "iniciante" case.
INVESTOR_CAPITAL_THRESHOLD = 5_000.0

MONTHS_PER_YEAR = 12

RATE_TABLE = {
    RiskProfile.CONSERVATIVE: RatePair(baseline=0.04, optimized=0.08),
    RiskProfile.AGGRESSIVE: RatePair(baseline=0.08, optimized=0.10),
}
