from types import MappingProxyType
from typing import Literal

GrowthTier = Literal["low", "medium", "high"]

# Annual capital-growth assumption per tier
GROWTH_RATES = MappingProxyType({
    "low": 0.03,
    "medium": 0.05,
    "high": 0.07,
})


def growth_rate(tier: GrowthTier) -> float:
    try:
        return GROWTH_RATES[tier]
    except KeyError:
        raise ValueError(f"unknown growth tier: {tier!r}") from None
