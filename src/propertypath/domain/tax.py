from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxBracket:
    lower: float            # first dollar taxed at `rate`
    upper: float | None     # inclusive; None = no ceiling
    rate: float


# Resident marginal rates, lowest bracket first.
TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(0.0, 18_200.0, 0.0),
    TaxBracket(18_200.0, 45_000.0, 0.16),
    TaxBracket(45_000.0, 135_000.0, 0.30),
    TaxBracket(135_000.0, 190_000.0, 0.37),
    TaxBracket(190_000.0, None, 0.45),
)


@dataclass(frozen=True)
class TaxSummary:
    taxable_income: float
    tax: float
    net_income: float
    effective_rate_pct: float


def calculate_tax(taxable_income: float) -> float:
    """
    Progressive tax: each bracket taxes only the slice of income that
    falls between its lower and upper bound.
    """
    if taxable_income <= 0:
        return 0.0

    total = 0.0
    for bracket in TAX_BRACKETS:
        if taxable_income <= bracket.lower:
            break
        top = taxable_income if bracket.upper is None else min(taxable_income, bracket.upper)
        total += (top - bracket.lower) * bracket.rate
    return total


def effective_tax_rate(taxable_income: float) -> float:
    """Tax as a percentage of income (0 when there is no income)."""
    if taxable_income <= 0:
        return 0.0
    return calculate_tax(taxable_income) / taxable_income * 100.0


def summarize_tax(taxable_income: float) -> TaxSummary:
    tax = calculate_tax(taxable_income)
    return TaxSummary(
        taxable_income=taxable_income,
        tax=tax,
        net_income=taxable_income - tax,
        effective_rate_pct=effective_tax_rate(taxable_income),
    )
