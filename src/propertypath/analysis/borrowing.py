from propertypath.domain.projection import MaritalStatus

INCOME_MULTIPLE = 6.0
DEPENDANT_ALLOWANCE = 5_000.0   # income set aside per dependant

_COUPLED_STATUSES = {"married", "de_facto"}


def estimate_borrowing_capacity(
    gross_income: float,
    marital_status: MaritalStatus,
    partner_income: float = 0.0,
    dependants: int = 0,
    existing_loans: float = 0.0,
) -> float:
    """
    Six times household income (less a per-dependant allowance), minus
    existing loans, never below zero. Partner income only counts for
    married / de facto applicants.
    """
    household_income = gross_income
    if marital_status in _COUPLED_STATUSES:
        household_income += partner_income
    household_income -= DEPENDANT_ALLOWANCE * dependants

    capacity = household_income * INCOME_MULTIPLE - existing_loans
    return max(0.0, capacity)
