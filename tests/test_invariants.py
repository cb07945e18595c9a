"""
Property-Based Tests - The Hypothesis

Uses hypothesis to check the arithmetic invariants of the calculator and
the history summaries for arbitrary inputs.

Invariants:
1. Operational cost = fuel + toll + service
2. Net profit = EBT - tax
3. Tax is zero whenever EBT <= 0, and never negative
4. Net profit per km * distance = net profit (distance > 0)
5. EUR -> PLN -> EUR round trip returns the original amount
6. Summaries of disjoint date ranges add up

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import pytest
from hypothesis import given, strategies as st, settings

from calculators.trip_models import TripInputs, FlatAmount, PerKmRate, TripRecord, TripSummary, Currency
from calculators.trip_calculator import compute
from calculators.currency import to_base, to_display
from calculators.history import filter_trips, summarize


amount_strategy = st.floats(min_value=0, max_value=1_000_000, allow_nan=False, allow_infinity=False)
distance_strategy = st.one_of(st.just(0.0), st.floats(min_value=0.1, max_value=20_000, allow_nan=False, allow_infinity=False))
unit_cost_strategy = st.floats(min_value=0, max_value=50, allow_nan=False, allow_infinity=False)
tax_rate_strategy = st.floats(min_value=0, max_value=0.99, allow_nan=False, allow_infinity=False)
exchange_rate_strategy = st.floats(min_value=0.01, max_value=100, allow_nan=False, allow_infinity=False)


@st.composite
def trip_inputs(draw):
    per_km = draw(st.booleans())
    revenue = PerKmRate(draw(unit_cost_strategy)) if per_km else FlatAmount(draw(amount_strategy))
    return TripInputs(
        distance_km=draw(distance_strategy),
        revenue=revenue,
        is_euro_mode=draw(st.booleans()),
        exchange_rate=draw(exchange_rate_strategy),
        fuel_consumption_l_per_100km=draw(st.floats(min_value=1, max_value=60, allow_nan=False)),
        fuel_price_per_liter=draw(unit_cost_strategy),
        toll_cost_per_km=draw(unit_cost_strategy),
        service_cost_per_km=draw(unit_cost_strategy),
    )


@given(inputs=trip_inputs(), tax_rate=tax_rate_strategy)
@settings(max_examples=200)
def test_invariant_cost_and_profit_decomposition(inputs, tax_rate):
    """Invariants 1 and 2."""
    r = compute(inputs, tax_rate)

    assert r.total_operational_cost == pytest.approx(
        r.total_fuel_cost + r.total_toll_cost + r.total_service_cost
    )
    assert r.earnings_before_tax == pytest.approx(r.total_revenue - r.total_operational_cost)
    assert r.total_net_profit == pytest.approx(r.earnings_before_tax - r.tax_cost)
    assert r.suggested_price == r.total_operational_cost


@given(inputs=trip_inputs(), tax_rate=tax_rate_strategy)
@settings(max_examples=200)
def test_invariant_loss_never_taxed(inputs, tax_rate):
    """Invariant 3."""
    r = compute(inputs, tax_rate)

    assert r.tax_cost >= 0
    if r.earnings_before_tax <= 0:
        assert r.tax_cost == 0
        assert r.total_net_profit == r.earnings_before_tax


@given(inputs=trip_inputs(), tax_rate=tax_rate_strategy)
@settings(max_examples=100)
def test_invariant_profit_per_km(inputs, tax_rate):
    """Invariant 4."""
    r = compute(inputs, tax_rate)

    if r.distance_km > 0:
        assert r.net_profit_per_km * r.distance_km == pytest.approx(r.total_net_profit, rel=1e-9, abs=1e-6)
    else:
        assert r.net_profit_per_km == 0


@given(amount=amount_strategy, rate=exchange_rate_strategy)
@settings(max_examples=100)
def test_invariant_currency_round_trip(amount, rate):
    """Invariant 5."""
    assert to_display(to_base(amount, rate), Currency.EUR, rate) == pytest.approx(amount, rel=1e-9, abs=1e-9)


@given(
    profits=st.lists(st.floats(min_value=-10_000, max_value=10_000, allow_nan=False), min_size=0, max_size=20),
    days=st.lists(st.integers(min_value=1, max_value=28), min_size=20, max_size=20),
)
@settings(max_examples=100)
def test_invariant_disjoint_ranges_add_up(profits, days):
    """Invariant 6: January + February == January..February."""
    records = []
    for i, profit in enumerate(profits):
        month = 1 + i % 2
        records.append(TripRecord(
            id=f"trip-{i}",
            created_at_epoch_ms=0,
            trip_date=f"2024-{month:02d}-{days[i]:02d}",
            inputs=TripInputs(distance_km=float(i)),
            summary=TripSummary(total_net_profit=profit),
        ))

    january = summarize(filter_trips(records, "2024-01-01", "2024-01-31"))
    february = summarize(filter_trips(records, "2024-02-01", "2024-02-29"))
    both = summarize(filter_trips(records, "2024-01-01", "2024-02-29"))

    assert january.trip_count + february.trip_count == both.trip_count
    assert january.total_profit + february.total_profit == pytest.approx(both.total_profit, abs=1e-6)
    assert january.total_distance_km + february.total_distance_km == pytest.approx(both.total_distance_km)
