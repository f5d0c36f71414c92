import math
from types import MappingProxyType
from typing import Literal

LoanType = Literal["interest_only", "principal_and_interest"]
RepaymentFrequency = Literal["weekly", "fortnightly", "monthly"]

PERIODS_PER_YEAR = MappingProxyType({
    "weekly": 52,
    "fortnightly": 26,
    "monthly": 12,
})


def round_currency(x: float) -> float:
    # half-up to whole units; round() would bank 0.5 to even
    return float(math.floor(x + 0.5))


def annuity_payment(rate_per_period: float, n_periods: int, principal: float) -> float:
    """
    Fixed payment that retires `principal` over `n_periods`:
    M = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    A zero rate degrades to straight-line principal / n.
    """
    r = rate_per_period
    growth = (1 + r) ** n_periods
    # r too small to register in 1 + r behaves as zero
    if r == 0 or growth == 1:
        return principal / n_periods
    return principal * (r * growth) / (growth - 1)


def periods_per_year(frequency: RepaymentFrequency) -> int:
    try:
        return PERIODS_PER_YEAR[frequency]
    except KeyError:
        raise ValueError(f"unknown repayment frequency: {frequency!r}") from None
