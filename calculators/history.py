"""
Trip History Filtering and Period Summaries

Date filters compare YYYY-MM-DD strings. The format is fixed-width and
zero-padded, so string order equals date order.

Copyright (c) 2026 Andre. All rights reserved.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from calculators.trip_models import TripRecord
from calculators.trip_calculator import resolve_revenue

HISTORY_COLUMNS = [
    'Date', 'Distance (km)', 'Revenue Mode', 'Revenue',
    'Revenue Currency', 'Tax Residency', 'Net Profit (PLN)', 'Saved In', 'ID',
]


@dataclass(frozen=True)
class PeriodSummary:
    """Totals over a set of trips."""
    total_profit: float = 0.0
    total_distance_km: float = 0.0
    trip_count: int = 0


def effective_date(record: TripRecord) -> str:
    """The trip date, or the UTC creation date for trips saved without one."""
    if record.trip_date:
        return record.trip_date
    return record.created_at.strftime('%Y-%m-%d')


def filter_trips(
    records: Sequence[TripRecord],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> List[TripRecord]:
    """
    Keep trips whose effective date lies in [start_date, end_date].

    Either bound may be None or "" (open). Order is preserved.
    """
    if not start_date and not end_date:
        return list(records)

    filtered = []
    for record in records:
        trip_date = effective_date(record)
        if start_date and trip_date < start_date:
            continue
        if end_date and trip_date > end_date:
            continue
        filtered.append(record)
    return filtered


def summarize(records: Sequence[TripRecord]) -> PeriodSummary:
    """Sum net profit (PLN) and distance over the given trips."""
    total_profit = 0.0
    total_distance = 0.0

    for record in records:
        total_profit += record.summary.total_net_profit
        total_distance += record.inputs.distance_km or 0.0

    return PeriodSummary(
        total_profit=total_profit,
        total_distance_km=total_distance,
        trip_count=len(records),
    )


def trips_to_dataframe(records: Sequence[TripRecord]) -> pd.DataFrame:
    """
    Tabular view of the history for display and charts.

    Returns:
        DataFrame with HISTORY_COLUMNS, one row per trip, in input order
    """
    if not records:
        return pd.DataFrame(columns=HISTORY_COLUMNS)

    rows = []
    for record in records:
        inputs = record.inputs
        rows.append({
            'Date': effective_date(record),
            'Distance (km)': inputs.distance_km or 0.0,
            'Revenue Mode': 'per km' if inputs.is_rate_per_km_mode else 'flat',
            'Revenue': resolve_revenue(inputs),
            'Revenue Currency': inputs.revenue_currency.value,
            'Tax Residency': inputs.tax_residency,
            'Net Profit (PLN)': record.summary.total_net_profit,
            'Saved In': record.summary.currency.value,
            'ID': record.id,
        })

    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)
