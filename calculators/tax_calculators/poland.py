"""
Poland (Podatek dochodowy od osób prawnych - CIT)

- 19% standard corporate income tax rate
- Charged on the positive result of the trip only; a loss is not taxed

The reduced 9% rate for small taxpayers is not modelled; carriers that
qualify for it are expected to pick it explicitly once it is added as a
separate jurisdiction entry.

References:
- Ustawa o podatku dochodowym od osób prawnych, art. 19

Copyright (c) 2026 Andre. All rights reserved.
"""

from calculators.tax_calculators.base import TaxJurisdiction, register_jurisdiction


@register_jurisdiction("PL")
class PolandJurisdiction(TaxJurisdiction):
    """Polish tax residency (default for the calculator)."""

    CORPORATE_TAX_RATE = 0.19  # 19%

    def get_jurisdiction_name(self) -> str:
        return "Polska"

    def get_jurisdiction_code(self) -> str:
        return "PL"

    def get_tax_rate(self) -> float:
        return self.CORPORATE_TAX_RATE
