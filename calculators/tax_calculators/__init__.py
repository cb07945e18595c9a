"""
Tax Jurisdictions

Registry of tax residencies and their corporate tax rates.

Copyright (c) 2026 Andre. All rights reserved.
"""

from .base import (
    TaxJurisdiction,
    TaxRate,
    UnknownJurisdictionError,
    get_jurisdiction,
    get_tax_rate,
    get_tax_table,
    list_available_jurisdictions,
)
from .poland import PolandJurisdiction
from .neighbours import (
    GermanyJurisdiction,
    CzechiaJurisdiction,
    SlovakiaJurisdiction,
    LithuaniaJurisdiction,
    NetherlandsJurisdiction,
)

__all__ = [
    "TaxJurisdiction",
    "TaxRate",
    "UnknownJurisdictionError",
    "get_jurisdiction",
    "get_tax_rate",
    "get_tax_table",
    "list_available_jurisdictions",
    "PolandJurisdiction",
    "GermanyJurisdiction",
    "CzechiaJurisdiction",
    "SlovakiaJurisdiction",
    "LithuaniaJurisdiction",
    "NetherlandsJurisdiction",
]
