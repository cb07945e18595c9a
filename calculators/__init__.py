"""
Calculators Package

Business logic of the freight trip calculator:
- trip_models: Inputs, results and saved-trip records
- trip_calculator: Profitability calculation engine
- currency: PLN/EUR conversion
- tax_calculators: Tax residencies and rates
- trip_validator: Pre-save input checks
- trip_store: Persistent trip history
- history: Date-range filtering and period summaries

Copyright (c) 2026 Andre. All rights reserved.
"""

__all__ = [
    'trip_models',
    'trip_calculator',
    'currency',
    'tax_calculators',
    'trip_validator',
    'trip_store',
    'history',
]
