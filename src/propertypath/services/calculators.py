from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from propertypath.adapters.logging_utils import get_logger
from propertypath.analysis.borrowing import estimate_borrowing_capacity
from propertypath.analysis.mortgage import calculate_mortgage
from propertypath.analysis.negative_gearing import calculate_negative_gearing
from propertypath.analysis.portfolio import simulate_portfolio
from propertypath.analysis.projection import project_single_property
from propertypath.domain.projection import PortfolioProjection, PropertySpec, YearSnapshot
from propertypath.domain.tax import summarize_tax
from propertypath.services.validation import (
    InputValidationError,
    prepare_borrowing_input,
    prepare_mortgage_input,
    prepare_negative_gearing_input,
    prepare_portfolio_input,
    prepare_projection_input,
    prepare_tax_input,
)

logger = get_logger(__name__)


def _prepare(name: str, prepare: Callable[[dict[str, Any]], dict[str, Any]], raw: dict[str, Any]) -> dict[str, Any]:
    try:
        return prepare(raw)
    except InputValidationError as e:
        logger.warning(
            "calculator_input_rejected",
            extra={"context": {"calculator": name, "field": e.field, "error": e.message}},
        )
        raise


def build_single_projection(raw_payload: dict[str, Any]) -> List[YearSnapshot]:
    """Validate a single-property payload and run the projection (typed result)."""
    args = _prepare("single_projection", prepare_projection_input, raw_payload)
    snapshots = project_single_property(**args)
    logger.info(
        "single_projection_computed",
        extra={"context": {"years": len(snapshots) - 1, "final_equity": snapshots[-1].equity}},
    )
    return snapshots


def run_single_projection(raw_payload: dict[str, Any]) -> list[dict[str, Any]]:
    return [asdict(s) for s in build_single_projection(raw_payload)]


def build_portfolio(raw_payload: dict[str, Any]) -> PortfolioProjection:
    """Validate a portfolio payload and run the simulation (typed result)."""
    args = _prepare("portfolio", prepare_portfolio_input, raw_payload)
    specs = [PropertySpec(**p) for p in args.pop("properties")]
    projection = simulate_portfolio(specs, **args)
    logger.info(
        "portfolio_simulated",
        extra={
            "context": {
                "properties": len(specs),
                "acquired": len(projection.acquisition_years),
                "final_equity": projection.snapshots[-1].total_equity if projection.snapshots else 0.0,
            }
        },
    )
    return projection


def run_portfolio(raw_payload: dict[str, Any]) -> dict[str, Any]:
    projection = build_portfolio(raw_payload)
    return {
        "snapshots": [asdict(s) for s in projection.snapshots],
        "acquisition_years": dict(projection.acquisition_years),
    }


def run_mortgage(raw_payload: dict[str, Any], start_date: Optional[date] = None) -> dict[str, Any]:
    args = _prepare("mortgage", prepare_mortgage_input, raw_payload)
    result = calculate_mortgage(**args, start_date=start_date)
    logger.info(
        "mortgage_calculated",
        extra={
            "context": {
                "frequency": result.frequency,
                "loan_type": result.loan_type,
                "periodic_payment": result.periodic_payment,
                "time_saved_months": result.time_saved_months,
            }
        },
    )
    return asdict(result)


def run_borrowing_capacity(raw_payload: dict[str, Any]) -> Dict[str, float]:
    args = _prepare("borrowing_capacity", prepare_borrowing_input, raw_payload)
    capacity = estimate_borrowing_capacity(**args)
    logger.info("borrowing_capacity_estimated", extra={"context": {"borrowing_capacity": capacity}})
    return {"borrowing_capacity": capacity}


def run_negative_gearing(raw_payload: dict[str, Any]) -> dict[str, Any]:
    args = _prepare("negative_gearing", prepare_negative_gearing_input, raw_payload)
    result = calculate_negative_gearing(**args)
    logger.info(
        "negative_gearing_calculated",
        extra={"context": {"property_type": args["property_type"], "tax_savings": result.tax_savings}},
    )
    return asdict(result)


def run_tax_summary(raw_payload: dict[str, Any]) -> dict[str, Any]:
    args = _prepare("tax_summary", prepare_tax_input, raw_payload)
    return asdict(summarize_tax(args["taxable_income"]))
