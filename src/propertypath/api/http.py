# src/propertypath/api/http.py
from __future__ import annotations

from typing import Any, Callable

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from propertypath.adapters.config import config
from propertypath.services.calculators import (
    build_portfolio,
    build_single_projection,
    run_borrowing_capacity,
    run_mortgage,
    run_negative_gearing,
    run_portfolio,
    run_single_projection,
    run_tax_summary,
)
from propertypath.services.export import portfolio_csv, projection_csv
from propertypath.services.validation import InputValidationError
from .schemas import (
    BorrowingCapacityRequest,
    BorrowingCapacityResponse,
    MortgageRequest,
    MortgageResponse,
    NegativeGearingRequest,
    NegativeGearingResponse,
    PortfolioRequest,
    PortfolioResponse,
    SingleProjectionRequest,
    TaxRequest,
    TaxSummaryResponse,
    YearSnapshotItem,
)

app = FastAPI(title="propertypath")


def _run(fn: Callable[[dict[str, Any]], Any], payload: dict[str, Any]) -> Any:
    """
    Rejected inputs come back as 400 with the field that failed, so the
    form can flag it and leave the current charts alone.
    """
    try:
        return fn(payload)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail={"field": e.field, "message": e.message}) from e


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "env": config.ENV}


@app.post("/projections/single", response_model=list[YearSnapshotItem])
def single_projection_endpoint(payload: SingleProjectionRequest) -> list[dict]:
    return _run(run_single_projection, payload.model_dump())


@app.post("/projections/single/export", response_class=PlainTextResponse)
def single_projection_export_endpoint(payload: SingleProjectionRequest) -> PlainTextResponse:
    snapshots = _run(build_single_projection, payload.model_dump())
    return PlainTextResponse(projection_csv(snapshots), media_type="text/csv")


@app.post("/projections/portfolio", response_model=PortfolioResponse)
def portfolio_endpoint(payload: PortfolioRequest) -> dict:
    return _run(run_portfolio, payload.model_dump())


@app.post("/projections/portfolio/export", response_class=PlainTextResponse)
def portfolio_export_endpoint(payload: PortfolioRequest) -> PlainTextResponse:
    projection = _run(build_portfolio, payload.model_dump())
    return PlainTextResponse(portfolio_csv(projection), media_type="text/csv")


@app.post("/mortgage", response_model=MortgageResponse)
def mortgage_endpoint(payload: MortgageRequest) -> dict:
    return _run(run_mortgage, payload.model_dump())


@app.post("/borrowing-capacity", response_model=BorrowingCapacityResponse)
def borrowing_capacity_endpoint(payload: BorrowingCapacityRequest) -> dict:
    return _run(run_borrowing_capacity, payload.model_dump())


@app.post("/negative-gearing", response_model=NegativeGearingResponse)
def negative_gearing_endpoint(payload: NegativeGearingRequest) -> dict:
    return _run(run_negative_gearing, payload.model_dump())


@app.post("/tax", response_model=TaxSummaryResponse)
def tax_endpoint(payload: TaxRequest) -> dict:
    return _run(run_tax_summary, payload.model_dump())
