from datetime import date

import pytest

from propertypath.analysis.mortgage import calculate_mortgage

START = date(2024, 1, 15)


def test_zero_interest_is_straight_line():
    r = calculate_mortgage(500_000, 0.0, 30, "monthly", "principal_and_interest", start_date=START)

    assert r.periodic_payment == pytest.approx(1388.89, abs=0.01)
    assert r.total_interest == pytest.approx(0.0, abs=1e-6)
    assert r.total_repayments == pytest.approx(500_000)
    assert r.periods_to_payoff == 360


def test_principal_and_interest_monthly():
    r = calculate_mortgage(500_000, 0.06, 30, "monthly", "principal_and_interest", start_date=START)

    assert r.periodic_payment == pytest.approx(2997.75, abs=0.01)
    assert r.total_interest == pytest.approx(r.periodic_payment * 360 - 500_000)
    assert r.payoff_date == date(2054, 1, 15)
    assert r.time_saved_months == 0.0
    assert r.interest_saved == 0.0
    assert r.comparison_rate == pytest.approx(0.065)


def test_frequency_changes_period_count():
    weekly = calculate_mortgage(400_000, 0.055, 25, "weekly", "principal_and_interest", start_date=START)
    fortnightly = calculate_mortgage(400_000, 0.055, 25, "fortnightly", "principal_and_interest", start_date=START)
    monthly = calculate_mortgage(400_000, 0.055, 25, "monthly", "principal_and_interest", start_date=START)

    assert weekly.periods_to_payoff == 25 * 52
    assert fortnightly.periods_to_payoff == 25 * 26
    assert weekly.periodic_payment < fortnightly.periodic_payment < monthly.periodic_payment


def test_interest_only_never_reduces_principal():
    r = calculate_mortgage(500_000, 0.06, 30, "monthly", "interest_only", additional_repayment=200, start_date=START)

    assert r.periodic_payment == pytest.approx(2500.0)
    assert r.total_interest == pytest.approx(900_000.0)
    assert r.total_repayments == pytest.approx(900_000.0)
    assert r.payoff_date == date(2054, 1, 15)
    assert r.time_saved_months == 0.0
    assert r.interest_saved == 0.0


def test_additional_repayments_shorten_the_loan():
    base = calculate_mortgage(500_000, 0.06, 30, "monthly", "principal_and_interest", start_date=START)
    extra = calculate_mortgage(
        500_000, 0.06, 30, "monthly", "principal_and_interest", additional_repayment=500, start_date=START
    )

    assert extra.periods_to_payoff < 360
    assert extra.time_saved_months == pytest.approx(360 - extra.periods_to_payoff)
    assert extra.interest_saved > 0
    assert extra.interest_saved < base.total_interest
    assert extra.payoff_date < base.payoff_date


def test_bigger_additional_repayment_saves_more():
    small = calculate_mortgage(600_000, 0.065, 30, "fortnightly", "principal_and_interest", additional_repayment=100, start_date=START)
    large = calculate_mortgage(600_000, 0.065, 30, "fortnightly", "principal_and_interest", additional_repayment=400, start_date=START)

    assert large.time_saved_months > small.time_saved_months > 0
    assert large.interest_saved > small.interest_saved > 0


def test_additional_repayment_at_zero_interest_saves_time_not_interest():
    r = calculate_mortgage(
        120_000, 0.0, 10, "monthly", "principal_and_interest", additional_repayment=1_000, start_date=START
    )

    # 1,000 + 1,000 a month clears 120k in 60 months
    assert r.periods_to_payoff == 60
    assert r.time_saved_months == pytest.approx(60)
    assert r.interest_saved == 0.0
    assert r.payoff_date == date(2029, 1, 15)


def test_weekly_time_saved_is_reported_in_months():
    r = calculate_mortgage(
        52_000, 0.0, 2, "weekly", "principal_and_interest", additional_repayment=500, start_date=START
    )

    # 500 + 500 a week clears 52k in 52 weeks: one year of the two saved
    assert r.periods_to_payoff == 52
    assert r.time_saved_months == pytest.approx(12)


def test_repeat_calls_are_identical():
    args = (450_000, 0.059, 30, "weekly", "principal_and_interest", 75.0, START)
    assert calculate_mortgage(*args) == calculate_mortgage(*args)
