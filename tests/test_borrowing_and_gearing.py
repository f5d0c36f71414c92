import pytest

from propertypath.analysis.borrowing import estimate_borrowing_capacity
from propertypath.analysis.negative_gearing import DEPRECIATION_RATES, calculate_negative_gearing


# ---------------------------------------------------------------------
# Borrowing capacity
# ---------------------------------------------------------------------

def test_single_income_multiple():
    assert estimate_borrowing_capacity(40_000, "single", 0, 0, 0) == 240_000
    # reproducible
    assert estimate_borrowing_capacity(40_000, "single", 0, 0, 0) == 240_000


def test_couple_with_dependants_and_loans():
    capacity = estimate_borrowing_capacity(100_000, "married", 60_000, 2, 100_000)
    # (100k + 60k - 2 * 5k) * 6 - 100k
    assert capacity == 800_000


def test_partner_income_ignored_when_single():
    assert estimate_borrowing_capacity(40_000, "single", 60_000) == 240_000
    assert estimate_borrowing_capacity(40_000, "de_facto", 60_000) == 600_000


def test_capacity_floors_at_zero():
    assert estimate_borrowing_capacity(30_000, "widowed", 0, 8, 0) == 0.0
    assert estimate_borrowing_capacity(50_000, "single", 0, 0, 1_000_000) == 0.0


# ---------------------------------------------------------------------
# Negative gearing
# ---------------------------------------------------------------------

def test_house_year_one_full_ownership():
    r = calculate_negative_gearing("house", 600_000, 100, 77_000, 1)

    assert r.annual_rent == 15_000
    assert r.weekly_rent == 288
    assert r.depreciation == 14_700
    assert r.other_expenses == 9_000
    assert r.interest_expense == 26_400

    assert r.rental_income == pytest.approx(15_000)
    assert r.rental_deductions == pytest.approx(50_100)
    assert r.total_income == pytest.approx(92_000)
    assert r.new_taxable_income == pytest.approx(41_900)
    assert r.current_tax == pytest.approx(13_888)
    assert r.new_tax == pytest.approx(3_792)
    assert r.tax_savings == pytest.approx(10_096)


def test_ownership_share_scales_rental_figures():
    r = calculate_negative_gearing("house", 600_000, 50, 77_000, 1)

    assert r.rental_income == pytest.approx(7_500)
    assert r.rental_deductions == pytest.approx(25_050)
    assert r.new_taxable_income == pytest.approx(59_450)
    assert r.new_tax == pytest.approx(8_623)
    assert r.tax_savings == pytest.approx(5_265)


def test_zero_ownership_changes_nothing():
    r = calculate_negative_gearing("apartment", 500_000, 0, 120_000, 3)
    assert r.new_taxable_income == pytest.approx(120_000)
    assert r.tax_savings == pytest.approx(0.0)


@pytest.mark.parametrize("property_type", sorted(DEPRECIATION_RATES))
def test_depreciation_follows_schedule(property_type):
    schedule = DEPRECIATION_RATES[property_type]
    assert len(schedule) == 10
    for year, pct in enumerate(schedule, start=1):
        r = calculate_negative_gearing(property_type, 800_000, 100, 90_000, year)
        assert r.depreciation == pytest.approx(round(800_000 * pct / 100), abs=1)


def test_tax_savings_sign_matches_taxable_income_change():
    r = calculate_negative_gearing("townhouse", 450_000, 100, 150_000, 5)
    assert r.new_taxable_income < 150_000
    assert r.tax_savings > 0
    assert r.new_effective_rate_pct < r.current_effective_rate_pct


def test_unknown_property_type_is_rejected():
    with pytest.raises(ValueError):
        calculate_negative_gearing("castle", 600_000, 100, 77_000, 1)
