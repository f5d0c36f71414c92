from __future__ import annotations

import math
from datetime import date
from typing import Optional, Tuple

import pandas as pd

from propertypath.domain.finance import (
    LoanType,
    RepaymentFrequency,
    annuity_payment,
    periods_per_year,
)
from propertypath.domain.projection import RepaymentResult

# Headline comparison rate = nominal + 0.5 percentage points
COMPARISON_RATE_LOADING = 0.005

# Balances below a cent count as repaid
_PAID_OFF_EPSILON = 0.005


def _add_months(start: date, months: int) -> date:
    return (pd.Timestamp(start) + pd.DateOffset(months=months)).date()


def _simulate_payoff(
    loan_amount: float,
    rate_per_period: float,
    payment: float,
    max_periods: int,
) -> Tuple[int, float]:
    """
    Run the loan forward one period at a time with a fixed payment.

    Returns (periods until the balance first reaches zero, interest paid).
    The last period only pays what is left.
    """
    balance = loan_amount
    interest_paid = 0.0
    periods = 0
    while balance > _PAID_OFF_EPSILON and periods < max_periods:
        interest = balance * rate_per_period
        interest_paid += interest
        balance = balance + interest - min(payment, balance + interest)
        periods += 1
    return periods, interest_paid


def calculate_mortgage(
    loan_amount: float,
    annual_interest_rate: float,
    term_years: int,
    frequency: RepaymentFrequency,
    loan_type: LoanType,
    additional_repayment: float = 0.0,
    start_date: Optional[date] = None,
) -> RepaymentResult:
    """
    Repayment figures for a loan at the chosen repayment frequency.

    Principal & interest uses the standard annuity payment; interest-only pays
    loan * periodic rate and never retires principal. Additional repayments
    (per period, P&I only) are run forward period by period to find the real
    payoff point and the interest they save.
    """
    start = start_date or date.today()
    per_year = periods_per_year(frequency)
    n_periods = term_years * per_year
    rate_per_period = annual_interest_rate / per_year
    comparison_rate = annual_interest_rate + COMPARISON_RATE_LOADING

    # --- interest-only ---
    if loan_type == "interest_only":
        payment = loan_amount * rate_per_period
        total = payment * n_periods
        return RepaymentResult(
            loan_type=loan_type,
            frequency=frequency,
            periodic_payment=payment,
            total_repayments=total,
            total_interest=total,
            payoff_date=_add_months(start, term_years * 12),
            periods_to_payoff=n_periods,
            additional_repayment=additional_repayment,
            comparison_rate=comparison_rate,
        )

    # --- principal & interest ---
    payment = annuity_payment(rate_per_period, n_periods, loan_amount)
    total = payment * n_periods
    baseline_interest = max(0.0, total - loan_amount)

    if additional_repayment <= 0:
        return RepaymentResult(
            loan_type=loan_type,
            frequency=frequency,
            periodic_payment=payment,
            total_repayments=total,
            total_interest=baseline_interest,
            payoff_date=_add_months(start, term_years * 12),
            periods_to_payoff=n_periods,
            comparison_rate=comparison_rate,
        )

    actual_periods, actual_interest = _simulate_payoff(
        loan_amount, rate_per_period, payment + additional_repayment, n_periods
    )
    months_to_payoff = actual_periods * 12 / per_year
    time_saved_months = (n_periods - actual_periods) * 12 / per_year

    return RepaymentResult(
        loan_type=loan_type,
        frequency=frequency,
        periodic_payment=payment,
        total_repayments=total,
        total_interest=baseline_interest,
        payoff_date=_add_months(start, int(math.floor(months_to_payoff + 0.5))),
        periods_to_payoff=actual_periods,
        additional_repayment=additional_repayment,
        time_saved_months=time_saved_months,
        interest_saved=max(0.0, baseline_interest - actual_interest),
        comparison_rate=comparison_rate,
    )
