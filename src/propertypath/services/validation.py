# src/propertypath/services/validation.py
"""
Boundary checks for calculator inputs.

Every rate or percentage arrives here as a percent (5.5 means 5.5%, "5.5%"
is accepted too) and leaves as a fraction (0.055). This is the only place
that conversion happens; the analysis functions only ever see fractions.
"""
import math
from typing import Any

from propertypath.adapters.config import config
from propertypath.domain.finance import PERIODS_PER_YEAR
from propertypath.domain.growth import GROWTH_RATES

LOAN_TYPE_ALIASES = {
    "interest_only": "interest_only",
    "interestonly": "interest_only",
    "io": "interest_only",
    "principal_and_interest": "principal_and_interest",
    "principalandinterest": "principal_and_interest",
    "p&i": "principal_and_interest",
    "pi": "principal_and_interest",
}

PROPERTY_TYPE_ALIASES = {
    "apartment": "apartment",
    "townhouse": "townhouse",
    "house": "house",
    "dual_key": "dual_key",
    "dualkey": "dual_key",
}

MARITAL_STATUS_ALIASES = {
    "single": "single",
    "married": "married",
    "de_facto": "de_facto",
    "defacto": "de_facto",
    "divorced": "divorced",
    "widowed": "widowed",
}

MAX_HORIZON_YEARS = 100
MAX_DEPRECIATION_YEAR = 10


class InputValidationError(ValueError):
    """A calculator input is outside its domain. `field` names the culprit."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


def _to_num(val: Any, field_name: str) -> float:
    """
    Coerce values like:
      - 250000
      - "250000"
      - "6.5"
      - "6.5%"
    into float.
    """
    if val is None:
        raise InputValidationError(field_name, "missing required numeric field")
    if isinstance(val, bool):
        raise InputValidationError(field_name, f"invalid type {type(val).__name__}")
    if isinstance(val, (int, float)):
        try:
            f = float(val)
        except OverflowError:
            raise InputValidationError(field_name, "must be a finite number") from None
    elif isinstance(val, str):
        s = val.strip().replace(",", "")
        if s.endswith("%"):
            s = s[:-1]
        try:
            f = float(s)
        except ValueError:
            raise InputValidationError(field_name, f"not a number: {val!r}") from None
    else:
        raise InputValidationError(field_name, f"invalid type {type(val).__name__}")
    # "nan", "inf" and overflowing literals like "1e400" parse as floats
    if not math.isfinite(f):
        raise InputValidationError(field_name, "must be a finite number")
    return f


def _to_int(val: Any, field_name: str) -> int:
    f = _to_num(val, field_name)
    if f != int(f):
        raise InputValidationError(field_name, "must be a whole number")
    return int(f)


def _positive(val: Any, field_name: str) -> float:
    f = _to_num(val, field_name)
    if f <= 0:
        raise InputValidationError(field_name, "must be greater than 0")
    return f


def _non_negative(val: Any, field_name: str) -> float:
    f = _to_num(val, field_name)
    if f < 0:
        raise InputValidationError(field_name, "must not be negative")
    return f


def _percent_to_fraction(val: Any, field_name: str, upper: float = 100.0) -> float:
    f = _to_num(val, field_name)
    if f < 0 or f > upper:
        raise InputValidationError(field_name, f"must be between 0 and {upper:g} percent")
    return f / 100.0


def _choice(val: Any, field_name: str, aliases: dict) -> str:
    key = str(val or "").strip().lower().replace("-", "_").replace(" ", "_")
    if key in aliases:
        return aliases[key]
    # camelCase spellings from the web client, e.g. "principalAndInterest"
    squashed = key.replace("_", "")
    if squashed in aliases:
        return aliases[squashed]
    raise InputValidationError(field_name, f"unrecognised value {val!r}")


def _horizon(val: Any, field_name: str = "horizon_years") -> int:
    if val is None:
        return config.DEFAULT_HORIZON_YEARS
    n = _to_int(val, field_name)
    if n < 0 or n > MAX_HORIZON_YEARS:
        raise InputValidationError(field_name, f"must be between 0 and {MAX_HORIZON_YEARS}")
    return n


def _require(raw: dict[str, Any], field: str) -> Any:
    if raw.get(field) is None:
        raise InputValidationError(field, "missing required field")
    return raw[field]


# ---------------------------------------------------------------------
# Per-calculator preparation
# ---------------------------------------------------------------------

def prepare_projection_input(raw: dict[str, Any]) -> dict[str, Any]:
    interest_raw = raw.get("interest_rate")
    return {
        "property_value": _positive(_require(raw, "property_value"), "property_value"),
        "growth_tier": _choice(_require(raw, "growth_tier"), "growth_tier", {k: k for k in GROWTH_RATES}),
        "loan_type": _choice(_require(raw, "loan_type"), "loan_type", LOAN_TYPE_ALIASES),
        "annual_interest_rate": (
            config.DEFAULT_INTEREST_RATE
            if interest_raw is None
            else _percent_to_fraction(interest_raw, "interest_rate")
        ),
        "horizon_years": _horizon(raw.get("horizon_years")),
        "apply_guarantee_scheme": raw.get("apply_guarantee_scheme") is not False,
    }


def prepare_portfolio_input(raw: dict[str, Any]) -> dict[str, Any]:
    items = raw.get("properties")
    if not isinstance(items, list) or not items:
        raise InputValidationError("properties", "at least one property is required")

    horizon = _horizon(raw.get("horizon_years"))
    seen: set[str] = set()
    properties: list[dict[str, Any]] = []
    for i, item in enumerate(items):
        prefix = f"properties[{i}]"
        if not isinstance(item, dict):
            raise InputValidationError(prefix, "must be an object")
        pid = str(item["id"]) if item.get("id") is not None else f"property-{i + 1}"
        if pid in seen:
            raise InputValidationError(f"{prefix}.id", f"duplicate id {pid!r}")
        seen.add(pid)

        acquired = item.get("acquisition_year")
        if acquired is not None:
            acquired = _to_int(acquired, f"{prefix}.acquisition_year")
            if acquired < 0:
                raise InputValidationError(f"{prefix}.acquisition_year", "must not be negative")

        properties.append(
            {
                "id": pid,
                "property_value": _positive(item.get("property_value"), f"{prefix}.property_value"),
                "growth_tier": _choice(
                    item.get("growth_tier"), f"{prefix}.growth_tier", {k: k for k in GROWTH_RATES}
                ),
                "acquisition_year": acquired,
            }
        )

    def _fraction(field: str, default: float, upper: float = 100.0) -> float:
        v = raw.get(field)
        return default if v is None else _percent_to_fraction(v, field, upper)

    return {
        "properties": properties,
        "horizon_years": horizon,
        "initial_deposit_fraction": _fraction("initial_deposit_pct", config.PORTFOLIO_DEPOSIT_FRACTION),
        "acquisition_fees_fraction": _fraction("acquisition_fees_pct", config.PORTFOLIO_FEES_FRACTION),
        "refinance_limit_fraction": _fraction("refinance_limit_pct", config.PORTFOLIO_REFINANCE_LIMIT),
    }


def prepare_mortgage_input(raw: dict[str, Any]) -> dict[str, Any]:
    term = _to_int(_require(raw, "term_years"), "term_years")
    if term <= 0:
        raise InputValidationError("term_years", "must be greater than 0")

    return {
        "loan_amount": _positive(_require(raw, "loan_amount"), "loan_amount"),
        "annual_interest_rate": _percent_to_fraction(_require(raw, "interest_rate"), "interest_rate"),
        "term_years": term,
        "frequency": _choice(
            raw.get("frequency", "monthly"), "frequency", {k: k for k in PERIODS_PER_YEAR}
        ),
        "loan_type": _choice(raw.get("loan_type", "principal_and_interest"), "loan_type", LOAN_TYPE_ALIASES),
        "additional_repayment": _non_negative(raw.get("additional_repayment", 0.0), "additional_repayment"),
    }


def prepare_borrowing_input(raw: dict[str, Any]) -> dict[str, Any]:
    dependants = _to_int(raw.get("dependants", 0), "dependants")
    if dependants < 0:
        raise InputValidationError("dependants", "must not be negative")

    return {
        "gross_income": _non_negative(_require(raw, "gross_income"), "gross_income"),
        "marital_status": _choice(_require(raw, "marital_status"), "marital_status", MARITAL_STATUS_ALIASES),
        "partner_income": _non_negative(raw.get("partner_income") or 0.0, "partner_income"),
        "dependants": dependants,
        "existing_loans": _non_negative(raw.get("existing_loans", 0.0), "existing_loans"),
    }


def prepare_negative_gearing_input(raw: dict[str, Any]) -> dict[str, Any]:
    year = _to_int(_require(raw, "depreciation_year"), "depreciation_year")
    if year < 1 or year > MAX_DEPRECIATION_YEAR:
        raise InputValidationError("depreciation_year", f"must be between 1 and {MAX_DEPRECIATION_YEAR}")

    ownership = _to_num(raw.get("ownership_percentage", 100.0), "ownership_percentage")
    if ownership < 0 or ownership > 100:
        raise InputValidationError("ownership_percentage", "must be between 0 and 100")

    return {
        "property_type": _choice(_require(raw, "property_type"), "property_type", PROPERTY_TYPE_ALIASES),
        "property_price": _positive(_require(raw, "property_price"), "property_price"),
        # stays a percentage: the calculator splits by ownership / 100
        "ownership_percentage": ownership,
        "current_taxable_income": _non_negative(_require(raw, "current_taxable_income"), "current_taxable_income"),
        "depreciation_year": year,
    }


def prepare_tax_input(raw: dict[str, Any]) -> dict[str, Any]:
    return {"taxable_income": _non_negative(_require(raw, "taxable_income"), "taxable_income")}
