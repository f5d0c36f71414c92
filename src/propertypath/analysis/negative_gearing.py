from types import MappingProxyType
from typing import Dict

from propertypath.domain.finance import round_currency
from propertypath.domain.projection import PropertyType, TaxImpactResult
from propertypath.domain.tax import calculate_tax, effective_tax_rate

# Depreciation claim per year of ownership (years 1-10), percent of price
DEPRECIATION_RATES = MappingProxyType({
    "apartment": (2.7, 2.2, 2.0, 1.8, 1.5, 1.4, 1.4, 1.3, 1.3, 1.4),
    "townhouse": (2.75, 2.35, 2.1, 2.0, 1.6, 1.45, 1.45, 1.5, 1.6, 1.35),
    "house": (2.45, 2.0, 1.7, 1.45, 1.45, 1.4, 1.35, 1.35, 1.35, 1.2),
    "dual_key": (2.45, 2.0, 1.7, 1.45, 1.45, 1.4, 1.35, 1.35, 1.35, 1.2),
})

RENTAL_YIELD = 0.025
OTHER_EXPENSES_RATE = 0.015     # insurance, maintenance, rates, agent fees
ASSUMED_LVR = 0.80
ASSUMED_INTEREST_RATE = 0.055


def _property_cashflow(property_type: PropertyType, property_price: float, depreciation_year: int) -> Dict[str, float]:
    """
    Whole-property annual figures, before any ownership split.
    Rent is rounded to the nearest $100, everything else to whole dollars.
    """
    try:
        schedule = DEPRECIATION_RATES[property_type]
    except KeyError:
        raise ValueError(f"unknown property type: {property_type!r}") from None

    annual_rent = round_currency(property_price * RENTAL_YIELD / 100) * 100
    depreciation = round_currency(property_price * schedule[depreciation_year - 1] / 100)
    other_expenses = round_currency(property_price * OTHER_EXPENSES_RATE)
    interest_expense = round_currency(property_price * ASSUMED_LVR * ASSUMED_INTEREST_RATE)

    return {
        "annual_rent": annual_rent,
        "weekly_rent": round_currency(annual_rent / 52),
        "depreciation": depreciation,
        "other_expenses": other_expenses,
        "interest_expense": interest_expense,
        "total_deductions": depreciation + other_expenses + interest_expense,
    }


def calculate_negative_gearing(
    property_type: PropertyType,
    property_price: float,
    ownership_percentage: float,
    current_taxable_income: float,
    depreciation_year: int,
) -> TaxImpactResult:
    cf = _property_cashflow(property_type, property_price, depreciation_year)

    share = ownership_percentage / 100
    rental_income = cf["annual_rent"] * share
    deductions = cf["total_deductions"] * share

    new_taxable_income = current_taxable_income + rental_income - deductions
    current_tax = calculate_tax(current_taxable_income)
    new_tax = calculate_tax(new_taxable_income)

    return TaxImpactResult(
        rental_income=rental_income,
        total_income=current_taxable_income + rental_income,
        rental_deductions=deductions,
        new_taxable_income=new_taxable_income,
        current_tax=current_tax,
        new_tax=new_tax,
        tax_savings=current_tax - new_tax,
        annual_rent=cf["annual_rent"],
        weekly_rent=cf["weekly_rent"],
        depreciation=cf["depreciation"],
        other_expenses=cf["other_expenses"],
        interest_expense=cf["interest_expense"],
        current_effective_rate_pct=effective_tax_rate(current_taxable_income),
        new_effective_rate_pct=effective_tax_rate(new_taxable_income),
    )
