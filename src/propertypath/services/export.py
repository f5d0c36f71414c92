from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

import pandas as pd

from propertypath.domain.projection import PortfolioProjection, YearSnapshot

PROJECTION_COLUMNS = ["year", "property_value", "debt", "equity"]
PORTFOLIO_COLUMNS = ["year", "property_id", "value", "debt", "equity"]


def projection_frame(snapshots: Sequence[YearSnapshot]) -> pd.DataFrame:
    return pd.DataFrame(
        [asdict(s) for s in snapshots],
        columns=PROJECTION_COLUMNS,
    )


def portfolio_frame(projection: PortfolioProjection, include_totals: bool = True) -> pd.DataFrame:
    """
    Long format: one row per (year, property), in input order within a year.
    With include_totals a 'TOTAL' row closes each year.
    """
    rows = []
    for snap in projection.snapshots:
        for p in snap.properties:
            rows.append(
                {"year": snap.year, "property_id": p.id, "value": p.value, "debt": p.debt, "equity": p.equity}
            )
        if include_totals:
            rows.append(
                {
                    "year": snap.year,
                    "property_id": "TOTAL",
                    "value": snap.total_value,
                    "debt": snap.total_debt,
                    "equity": snap.total_equity,
                }
            )
    return pd.DataFrame(rows, columns=PORTFOLIO_COLUMNS)


def projection_csv(snapshots: Sequence[YearSnapshot]) -> str:
    return projection_frame(snapshots).to_csv(index=False)


def portfolio_csv(projection: PortfolioProjection) -> str:
    return portfolio_frame(projection).to_csv(index=False)
