from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Literal, Optional, Tuple

from propertypath.domain.finance import LoanType, RepaymentFrequency
from propertypath.domain.growth import GrowthTier

MaritalStatus = Literal["single", "married", "de_facto", "divorced", "widowed"]
PropertyType = Literal["apartment", "townhouse", "house", "dual_key"]


@dataclass(frozen=True)
class YearSnapshot:
    year: int
    property_value: float
    debt: float
    equity: float           # property_value - debt


@dataclass(frozen=True)
class PropertySpec:
    id: str
    property_value: float              # value at acquisition
    growth_tier: GrowthTier
    acquisition_year: Optional[int] = None   # None until acquired


@dataclass(frozen=True)
class PropertyYearState:
    id: str
    value: float
    debt: float
    equity: float


@dataclass(frozen=True)
class PortfolioYearSnapshot:
    year: int
    total_value: float
    total_debt: float
    total_equity: float
    properties: Tuple[PropertyYearState, ...]


@dataclass(frozen=True)
class PortfolioProjection:
    snapshots: Tuple[PortfolioYearSnapshot, ...]
    acquisition_years: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class RepaymentResult:
    loan_type: LoanType
    frequency: RepaymentFrequency
    periodic_payment: float
    total_repayments: float
    total_interest: float
    payoff_date: date
    periods_to_payoff: int
    additional_repayment: float = 0.0
    time_saved_months: float = 0.0
    interest_saved: float = 0.0
    comparison_rate: float = 0.0   # annual, fraction


@dataclass(frozen=True)
class TaxImpactResult:
    # scaled by ownership share
    rental_income: float
    total_income: float
    rental_deductions: float
    new_taxable_income: float
    current_tax: float
    new_tax: float
    tax_savings: float      # negative = more tax payable

    # whole-property breakdown
    annual_rent: float
    weekly_rent: float
    depreciation: float
    other_expenses: float
    interest_expense: float
    current_effective_rate_pct: float
    new_effective_rate_pct: float
