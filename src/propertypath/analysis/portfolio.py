from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from propertypath.domain.finance import round_currency
from propertypath.domain.growth import growth_rate
from propertypath.domain.projection import (
    PortfolioProjection,
    PortfolioYearSnapshot,
    PropertySpec,
    PropertyYearState,
)


@dataclass
class _Holding:
    """Working state for one property; the caller's PropertySpec is never touched."""
    spec: PropertySpec
    acquired: Optional[int]
    debt: float = 0.0

    def held_by(self, year: int) -> bool:
        return self.acquired is not None and self.acquired <= year


def _acquisition_debt(value: float, deposit_fraction: float, fees_fraction: float) -> float:
    # deposit shortfall plus fees rolled into the loan
    return value * (1 - deposit_fraction) + value * fees_fraction


def _releasable(value: float, debt: float, refinance_limit: float) -> float:
    return max(0.0, value * refinance_limit - debt)


def simulate_portfolio(
    properties: Sequence[PropertySpec],
    horizon_years: int = 30,
    initial_deposit_fraction: float = 0.10,
    acquisition_fees_fraction: float = 0.05,
    refinance_limit_fraction: float = 0.80,
) -> PortfolioProjection:
    """
    Grow a portfolio by releasing equity from what is already owned.

    Every year:
      1. value each held property at value0 * (1 + g)^(years held); debt is
         interest-only and only moves when the property is refinanced
      2. record the snapshot
      3. (year >= 1) if the releasable equity across held properties
         (value * refinance_limit - debt, floored at 0) covers the next
         unacquired property's deposit, buy it next year and draw the deposit
         from held properties in input order

    Per-property figures are reported rounded to whole units; decisions use
    the unrounded state.
    """
    if not properties:
        return PortfolioProjection(snapshots=(), acquisition_years={})

    holdings: List[_Holding] = [_Holding(spec=p, acquired=p.acquisition_year) for p in properties]

    # nothing marked at year 0 -> first property is the starting purchase
    if not any(h.acquired == 0 for h in holdings):
        holdings[0].acquired = 0

    for h in holdings:
        if h.acquired is not None:
            h.debt = _acquisition_debt(
                h.spec.property_value, initial_deposit_fraction, acquisition_fees_fraction
            )

    snapshots: List[PortfolioYearSnapshot] = []

    for year in range(horizon_years + 1):
        values: List[float] = []
        states: List[PropertyYearState] = []

        for h in holdings:
            if h.held_by(year):
                years_held = year - h.acquired
                value = h.spec.property_value * (1 + growth_rate(h.spec.growth_tier)) ** years_held
                values.append(value)
                value_out = round_currency(value)
                debt_out = round_currency(h.debt)
                states.append(
                    PropertyYearState(id=h.spec.id, value=value_out, debt=debt_out, equity=value_out - debt_out)
                )
            else:
                values.append(0.0)
                states.append(PropertyYearState(id=h.spec.id, value=0.0, debt=0.0, equity=0.0))

        total_value = sum(s.value for s in states)
        total_debt = sum(s.debt for s in states)
        snapshots.append(
            PortfolioYearSnapshot(
                year=year,
                total_value=total_value,
                total_debt=total_debt,
                total_equity=total_value - total_debt,
                properties=tuple(states),
            )
        )

        if year == 0:
            continue

        next_idx = next((i for i, h in enumerate(holdings) if h.acquired is None), None)
        if next_idx is None:
            continue

        available = sum(
            _releasable(values[i], h.debt, refinance_limit_fraction)
            for i, h in enumerate(holdings)
            if h.held_by(year)
        )

        target = holdings[next_idx]
        required_deposit = target.spec.property_value * initial_deposit_fraction
        if available < required_deposit:
            continue

        target.acquired = year + 1
        target.debt = _acquisition_debt(
            target.spec.property_value, initial_deposit_fraction, acquisition_fees_fraction
        )

        # refinance draw: earlier properties in the list are tapped first
        remaining = required_deposit
        for i, h in enumerate(holdings):
            if remaining <= 0:
                break
            if not h.held_by(year):
                continue
            draw = min(_releasable(values[i], h.debt, refinance_limit_fraction), remaining)
            if draw > 0:
                h.debt += draw
                remaining -= draw

    acquisition_years: Dict[str, int] = {
        h.spec.id: h.acquired
        for h in holdings
        if h.acquired is not None and h.acquired <= horizon_years
    }
    return PortfolioProjection(snapshots=tuple(snapshots), acquisition_years=acquisition_years)
