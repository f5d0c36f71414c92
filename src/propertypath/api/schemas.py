# src/propertypath/api/schemas.py
from __future__ import annotations

from datetime import date
from typing import Optional, Union

from pydantic import BaseModel
from pydantic import ConfigDict

# Numbers may arrive as strings ("650,000", "5.5%"); services.validation
# owns the coercion and range checks so errors name the offending field.
Numeric = Union[float, int, str]


# --------------------------------------------
# Projections
# --------------------------------------------

class SingleProjectionRequest(BaseModel):
    """
    Rates are percentages: interest_rate=5.5 means 5.5% p.a.
    """
    model_config = ConfigDict(extra="allow")

    property_value: Numeric
    growth_tier: str = "medium"
    loan_type: str = "principal_and_interest"
    interest_rate: Optional[Numeric] = None
    horizon_years: Optional[Numeric] = None
    apply_guarantee_scheme: bool = True


class YearSnapshotItem(BaseModel):
    year: int
    property_value: float
    debt: float
    equity: float


class PortfolioPropertyItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    property_value: Numeric
    growth_tier: str = "medium"
    acquisition_year: Optional[int] = None


class PortfolioRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    properties: list[PortfolioPropertyItem]
    horizon_years: Optional[Numeric] = None

    # percentages, e.g. 10 = 10% deposit
    initial_deposit_pct: Optional[Numeric] = None
    acquisition_fees_pct: Optional[Numeric] = None
    refinance_limit_pct: Optional[Numeric] = None


class PropertyYearItem(BaseModel):
    id: str
    value: float
    debt: float
    equity: float


class PortfolioYearItem(BaseModel):
    year: int
    total_value: float
    total_debt: float
    total_equity: float
    properties: list[PropertyYearItem]


class PortfolioResponse(BaseModel):
    snapshots: list[PortfolioYearItem]
    acquisition_years: dict[str, int]


# --------------------------------------------
# Calculators
# --------------------------------------------

class MortgageRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    loan_amount: Numeric
    interest_rate: Numeric
    term_years: Numeric = 30
    frequency: str = "monthly"
    loan_type: str = "principal_and_interest"
    additional_repayment: Numeric = 0.0


class MortgageResponse(BaseModel):
    loan_type: str
    frequency: str
    periodic_payment: float
    total_repayments: float
    total_interest: float
    payoff_date: date
    periods_to_payoff: int
    additional_repayment: float
    time_saved_months: float
    interest_saved: float
    comparison_rate: float


class BorrowingCapacityRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    gross_income: Numeric
    marital_status: str
    partner_income: Optional[Numeric] = None
    dependants: Numeric = 0
    existing_loans: Numeric = 0.0


class BorrowingCapacityResponse(BaseModel):
    borrowing_capacity: float


class NegativeGearingRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    property_type: str = "house"
    property_price: Numeric
    ownership_percentage: Numeric = 100.0
    current_taxable_income: Numeric
    depreciation_year: Numeric = 1


class NegativeGearingResponse(BaseModel):
    rental_income: float
    total_income: float
    rental_deductions: float
    new_taxable_income: float
    current_tax: float
    new_tax: float
    tax_savings: float
    annual_rent: float
    weekly_rent: float
    depreciation: float
    other_expenses: float
    interest_expense: float
    current_effective_rate_pct: float
    new_effective_rate_pct: float


class TaxRequest(BaseModel):
    taxable_income: Numeric


class TaxSummaryResponse(BaseModel):
    taxable_income: float
    tax: float
    net_income: float
    effective_rate_pct: float
