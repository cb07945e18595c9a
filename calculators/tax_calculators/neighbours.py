"""
Neighbouring EU Jurisdictions

Flat corporate tax rates for the countries Polish carriers most often
register in. Rates as of 2024.

Copyright (c) 2026 Andre. All rights reserved.
"""

from calculators.tax_calculators.base import TaxJurisdiction, register_jurisdiction


@register_jurisdiction("DE")
class GermanyJurisdiction(TaxJurisdiction):
    """
    Germany (Körperschaftsteuer).

    15% corporate tax plus 5.5% solidarity surcharge on the tax amount.
    Municipal trade tax (Gewerbesteuer) varies by city and is not included.
    """

    CORPORATE_TAX_RATE = 0.15
    SOLIDARITY_SURCHARGE_RATE = 0.055  # 5.5% of tax

    def get_jurisdiction_name(self) -> str:
        return "Niemcy"

    def get_jurisdiction_code(self) -> str:
        return "DE"

    def get_tax_rate(self) -> float:
        return self.CORPORATE_TAX_RATE * (1 + self.SOLIDARITY_SURCHARGE_RATE)


@register_jurisdiction("CZ")
class CzechiaJurisdiction(TaxJurisdiction):
    """Czech Republic (daň z příjmů právnických osob), 21% since 2024."""

    CORPORATE_TAX_RATE = 0.21

    def get_jurisdiction_name(self) -> str:
        return "Czechy"

    def get_jurisdiction_code(self) -> str:
        return "CZ"

    def get_tax_rate(self) -> float:
        return self.CORPORATE_TAX_RATE


@register_jurisdiction("SK")
class SlovakiaJurisdiction(TaxJurisdiction):
    """Slovakia, 21% standard rate."""

    CORPORATE_TAX_RATE = 0.21

    def get_jurisdiction_name(self) -> str:
        return "Słowacja"

    def get_jurisdiction_code(self) -> str:
        return "SK"

    def get_tax_rate(self) -> float:
        return self.CORPORATE_TAX_RATE


@register_jurisdiction("LT")
class LithuaniaJurisdiction(TaxJurisdiction):
    """Lithuania (pelno mokestis), 15% standard rate."""

    CORPORATE_TAX_RATE = 0.15

    def get_jurisdiction_name(self) -> str:
        return "Litwa"

    def get_jurisdiction_code(self) -> str:
        return "LT"

    def get_tax_rate(self) -> float:
        return self.CORPORATE_TAX_RATE


@register_jurisdiction("NL")
class NetherlandsJurisdiction(TaxJurisdiction):
    """
    Netherlands (vennootschapsbelasting).

    Top bracket rate of 25.8%; the 19% bracket for the first
    EUR 200,000 of profit is not modelled per trip.
    """

    CORPORATE_TAX_RATE = 0.258

    def get_jurisdiction_name(self) -> str:
        return "Holandia"

    def get_jurisdiction_code(self) -> str:
        return "NL"

    def get_tax_rate(self) -> float:
        return self.CORPORATE_TAX_RATE
