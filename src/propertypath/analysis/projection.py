from typing import List

from propertypath.domain.finance import LoanType, annuity_payment, round_currency
from propertypath.domain.growth import GrowthTier, growth_rate
from propertypath.domain.projection import YearSnapshot

INITIAL_DEPOSIT_PCT = 0.05      # 95% LVR purchase
GUARANTEE_SCHEME_PCT = 0.15     # year-1 debt write-down, share of original value


def project_single_property(
    property_value: float,
    growth_tier: GrowthTier,
    loan_type: LoanType,
    annual_interest_rate: float,
    horizon_years: int = 30,
    apply_guarantee_scheme: bool = True,
) -> List[YearSnapshot]:
    """
    Year-by-year value / debt / equity for one property bought with a 5% deposit.

    - Value compounds at the tier's growth rate.
    - Interest-only debt never moves (apart from the guarantee write-down).
    - Principal & interest debt falls by (12 x monthly payment - annual interest),
      where the monthly payment is fixed up front on the opening debt.

    Returns horizon_years + 1 snapshots, year 0 first.
    """
    rate = growth_rate(growth_tier)

    deposit = property_value * INITIAL_DEPOSIT_PCT
    current_debt = property_value - deposit
    current_value = property_value

    snapshots = [
        YearSnapshot(
            year=0,
            property_value=current_value,
            debt=current_debt,
            equity=current_value - current_debt,
        )
    ]
    if horizon_years <= 0:
        return snapshots

    monthly_payment = 0.0
    if loan_type == "principal_and_interest":
        monthly_payment = annuity_payment(
            annual_interest_rate / 12.0, horizon_years * 12, current_debt
        )

    for year in range(1, horizon_years + 1):
        if year == 1 and apply_guarantee_scheme:
            current_debt -= property_value * GUARANTEE_SCHEME_PCT

        current_value *= 1 + rate

        if loan_type == "principal_and_interest":
            annual_interest = current_debt * annual_interest_rate
            principal_repaid = monthly_payment * 12 - annual_interest
            current_debt = max(0.0, current_debt - principal_repaid)

        value_out = round_currency(current_value)
        debt_out = round_currency(current_debt)
        snapshots.append(
            YearSnapshot(
                year=year,
                property_value=value_out,
                debt=debt_out,
                equity=value_out - debt_out,
            )
        )

    return snapshots
