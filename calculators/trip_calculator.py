"""
Trip Profitability Calculator

Turns a TripInputs snapshot into CalculationResults:

    revenue       = freight amount, or distance x rate per km
    revenue (PLN) = revenue x exchange rate in EUR mode
    fuel          = distance x consumption / 100 x fuel price
    toll          = distance x toll per km
    service       = distance x service per km
    EBT           = revenue - (fuel + toll + service)
    tax           = EBT x tax rate, only when EBT > 0
    net profit    = EBT - tax

The calculation is pure: no rounding, no I/O, no state. Rounding is a
display concern (app/ui/utils.py).

Copyright (c) 2026 Andre. All rights reserved.
"""

from calculators.trip_models import TripInputs, CalculationResults
from calculators.currency import to_base
from calculators.tax_calculators import get_tax_rate


def resolve_revenue(inputs: TripInputs) -> float:
    """Revenue in the currency it was entered in (before conversion)."""
    return inputs.revenue.resolve(inputs.distance_km or 0.0)


def compute(inputs: TripInputs, tax_rate: float) -> CalculationResults:
    """
    Calculate costs, tax and profit for one trip.

    Args:
        inputs: Trip inputs; absent numeric values count as 0
        tax_rate: Tax rate fraction in [0, 1)

    Returns:
        CalculationResults with every amount in PLN
    """
    distance = inputs.distance_km or 0.0

    revenue_raw = resolve_revenue(inputs)
    total_revenue = to_base(revenue_raw, inputs.exchange_rate) if inputs.is_euro_mode else revenue_raw

    total_fuel_cost = distance * (inputs.fuel_consumption_l_per_100km / 100) * inputs.fuel_price_per_liter
    total_toll_cost = distance * inputs.toll_cost_per_km
    total_service_cost = distance * inputs.service_cost_per_km
    total_operational_cost = total_fuel_cost + total_toll_cost + total_service_cost

    earnings_before_tax = total_revenue - total_operational_cost

    # A loss is never taxed
    tax_cost = earnings_before_tax * tax_rate if earnings_before_tax > 0 else 0.0
    total_net_profit = earnings_before_tax - tax_cost

    return CalculationResults(
        total_fuel_cost=total_fuel_cost,
        total_toll_cost=total_toll_cost,
        total_service_cost=total_service_cost,
        total_operational_cost=total_operational_cost,
        total_revenue=total_revenue,
        earnings_before_tax=earnings_before_tax,
        tax_cost=tax_cost,
        total_net_profit=total_net_profit,
        net_profit_per_km=total_net_profit / distance if distance > 0 else 0.0,
        suggested_price=total_operational_cost,  # Breakeven revenue
        distance_km=distance,
        fuel_price_per_liter=inputs.fuel_price_per_liter,
        toll_cost_per_km=inputs.toll_cost_per_km,
        service_cost_per_km=inputs.service_cost_per_km,
    )


def compute_for_jurisdiction(inputs: TripInputs) -> CalculationResults:
    """
    Calculate with the tax rate of inputs.tax_residency.

    Raises:
        UnknownJurisdictionError: If the tax residency is not in the tax table
    """
    return compute(inputs, get_tax_rate(inputs.tax_residency))
