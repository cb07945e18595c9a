"""
Tax Jurisdictions - Base Class and Registry

Every country a carrier can be tax-resident in is a TaxJurisdiction
subclass registered under its ISO code. The registry is the tax table of
the calculator: it maps the jurisdiction name stored with a trip
("Polska", "Niemcy", ...) to the corporate income tax rate applied to
positive earnings.

Copyright (c) 2026 Andre. All rights reserved.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Type


class UnknownJurisdictionError(ValueError):
    """Raised when a tax residency is not in the tax table."""


@dataclass(frozen=True)
class TaxRate:
    """Entry of the tax table."""
    rate: float
    flag: str


class TaxJurisdiction(ABC):
    """
    Abstract base class for a tax jurisdiction.

    Subclasses only describe the jurisdiction; the trip calculator applies
    the rate (tax is charged on positive earnings only).
    """

    @abstractmethod
    def get_jurisdiction_name(self) -> str:
        """
        Return the name used as the tax table key.

        Returns:
            Jurisdiction name (e.g., "Polska")
        """
        pass

    @abstractmethod
    def get_jurisdiction_code(self) -> str:
        """
        Return the ISO-style code for this jurisdiction.

        Returns:
            Jurisdiction code (e.g., "PL")
        """
        pass

    @abstractmethod
    def get_tax_rate(self) -> float:
        """
        Return the effective corporate tax rate as a fraction in [0, 1).
        """
        pass

    def get_flag(self) -> str:
        """Flag emoji built from the ISO code."""
        return "".join(chr(0x1F1E6 + ord(c) - ord("A")) for c in self.get_jurisdiction_code().upper())

    def format_rate(self) -> str:
        """Rate as shown in labels, e.g. "19%" or "15.825%"."""
        percent = round(self.get_tax_rate() * 100, 4)
        return f"{percent:g}%"


# Registry of available jurisdictions (ISO code -> class), in registration order
_JURISDICTION_REGISTRY: Dict[str, Type[TaxJurisdiction]] = {}


def register_jurisdiction(jurisdiction_code: str):
    """
    Decorator to register a tax jurisdiction class.

    Usage:
        @register_jurisdiction("PL")
        class PolandJurisdiction(TaxJurisdiction):
            ...
    """
    def decorator(cls: Type[TaxJurisdiction]):
        _JURISDICTION_REGISTRY[jurisdiction_code.upper()] = cls
        return cls
    return decorator


def get_jurisdiction(name: str) -> TaxJurisdiction:
    """
    Factory method to get a jurisdiction instance.

    Lookups go by tax table key only; ISO codes are not keys.

    Args:
        name: Tax table key (e.g. "Polska")

    Returns:
        Instance of the matching TaxJurisdiction subclass

    Raises:
        UnknownJurisdictionError: If the jurisdiction is not registered
    """
    for jurisdiction_class in _JURISDICTION_REGISTRY.values():
        jurisdiction = jurisdiction_class()
        if jurisdiction.get_jurisdiction_name() == name:
            return jurisdiction

    available = ", ".join(list_available_jurisdictions())
    raise UnknownJurisdictionError(
        f"Tax residency '{name}' not found. "
        f"Available: {available}"
    )


def get_tax_rate(tax_residency: str) -> float:
    """Resolve a tax table key to its rate fraction."""
    return get_jurisdiction(tax_residency).get_tax_rate()


def list_available_jurisdictions() -> List[str]:
    """
    Get the names of all supported jurisdictions, in registration order.

    Returns:
        List of tax table keys (e.g., ["Polska", "Niemcy"])
    """
    return [cls().get_jurisdiction_name() for cls in _JURISDICTION_REGISTRY.values()]


def get_tax_table() -> Dict[str, TaxRate]:
    """The whole tax table: name -> (rate, flag)."""
    table = {}
    for cls in _JURISDICTION_REGISTRY.values():
        jurisdiction = cls()
        table[jurisdiction.get_jurisdiction_name()] = TaxRate(
            rate=jurisdiction.get_tax_rate(),
            flag=jurisdiction.get_flag(),
        )
    return table
