"""
Trip Data Models

Defines the core data structures of the trip calculator:
- TripInputs: Immutable snapshot of everything the calculation needs
- Revenue: Tagged revenue source (flat freight amount or rate per km)
- CalculationResults: Derived costs, tax and profit for one trip
- TripRecord: A saved trip in the history

Persisted records use the JSON shape written by earlier releases of the
calculator (camelCase keys, "" for an empty numeric field). Records saved
before per-km pricing and configurable fuel consumption existed are
normalised here, once, when they are read.

Copyright (c) 2026 Andre. All rights reserved.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Calculator defaults
DEFAULT_EXCHANGE_RATE = 4.30
DEFAULT_FUEL_PRICE_PER_LITER = 5.00
DEFAULT_TOLL_COST_PER_KM = 0.40
DEFAULT_SERVICE_COST_PER_KM = 0.65
DEFAULT_FUEL_CONSUMPTION_L_PER_100KM = 30.0
DEFAULT_TAX_RESIDENCY = "Polska"

# Stored dates are compared as strings, so only this exact form is kept
ISO_DATE_RE = re.compile(r'\d{4}-\d{2}-\d{2}')

# 9999-12-31T23:59:59.999Z, the last instant datetime can represent
MAX_TIMESTAMP_MS = 253402300799999


class Currency(str, Enum):
    """Supported currencies. PLN is the base currency of every calculation."""
    PLN = "PLN"
    EUR = "EUR"


BASE_CURRENCY = Currency.PLN
SECONDARY_CURRENCY = Currency.EUR


@dataclass(frozen=True)
class FlatAmount:
    """Revenue given as a single freight amount for the whole trip."""
    amount: Optional[float] = None

    def resolve(self, distance_km: float) -> float:
        return self.amount or 0.0


@dataclass(frozen=True)
class PerKmRate:
    """Revenue given as a rate per kilometre."""
    rate: Optional[float] = None

    def resolve(self, distance_km: float) -> float:
        return distance_km * (self.rate or 0.0)


Revenue = Union[FlatAmount, PerKmRate]


@dataclass(frozen=True)
class TripInputs:
    """
    Raw inputs of one trip calculation.

    Key Invariant: instances are never mutated. The UI builds a new
    TripInputs on every change and passes it to the calculator.

    Monetary inputs are in PLN except the revenue figure, which is in EUR
    when is_euro_mode is set (EUR x exchange_rate = PLN).
    """

    distance_km: Optional[float] = None
    revenue: Revenue = field(default_factory=FlatAmount)
    is_euro_mode: bool = False
    exchange_rate: float = DEFAULT_EXCHANGE_RATE
    fuel_consumption_l_per_100km: float = DEFAULT_FUEL_CONSUMPTION_L_PER_100KM
    fuel_price_per_liter: float = DEFAULT_FUEL_PRICE_PER_LITER
    toll_cost_per_km: float = DEFAULT_TOLL_COST_PER_KM
    service_cost_per_km: float = DEFAULT_SERVICE_COST_PER_KM
    tax_residency: str = DEFAULT_TAX_RESIDENCY

    @property
    def is_rate_per_km_mode(self) -> bool:
        return isinstance(self.revenue, PerKmRate)

    @property
    def freight_amount(self) -> Optional[float]:
        return self.revenue.amount if isinstance(self.revenue, FlatAmount) else None

    @property
    def rate_per_km(self) -> Optional[float]:
        return self.revenue.rate if isinstance(self.revenue, PerKmRate) else None

    @property
    def revenue_currency(self) -> Currency:
        return SECONDARY_CURRENCY if self.is_euro_mode else BASE_CURRENCY

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted (camelCase) shape."""
        return {
            "distance": _to_stored(self.distance_km),
            "freightAmount": _to_stored(self.freight_amount),
            "ratePerKm": _to_stored(self.rate_per_km),
            "isRatePerKmMode": self.is_rate_per_km_mode,
            "customFuelPrice": self.fuel_price_per_liter,
            "customTollCost": self.toll_cost_per_km,
            "customServiceCost": self.service_cost_per_km,
            "fuelConsumption": self.fuel_consumption_l_per_100km,
            "taxResidency": self.tax_residency,
            "isEuroMode": self.is_euro_mode,
            "exchangeRate": self.exchange_rate,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TripInputs":
        """
        Deserialize a persisted inputs snapshot.

        Older records lack ratePerKm, isRatePerKmMode and fuelConsumption.
        They load as flat-amount trips with the default fuel consumption.
        Missing cost fields fall back to the calculator defaults.

        Raises:
            ValueError: If a present field cannot be read as a number
                (pydantic.ValidationError is a ValueError)
        """
        return StoredTripInputs.model_validate(data).to_inputs()


@dataclass(frozen=True)
class CalculationResults:
    """
    Derived values of one trip. All money is in PLN.

    Key Invariants:
    - total_operational_cost == fuel + toll + service
    - total_net_profit == earnings_before_tax - tax_cost
    - tax_cost == 0 whenever earnings_before_tax <= 0
    """

    total_fuel_cost: float
    total_toll_cost: float
    total_service_cost: float
    total_operational_cost: float
    total_revenue: float
    earnings_before_tax: float
    tax_cost: float
    total_net_profit: float
    net_profit_per_km: float
    suggested_price: float

    # Echo of the inputs, shown next to the cost lines
    distance_km: float = 0.0
    fuel_price_per_liter: float = 0.0
    toll_cost_per_km: float = 0.0
    service_cost_per_km: float = 0.0

    @property
    def is_profitable(self) -> bool:
        return self.total_net_profit >= 0


@dataclass(frozen=True)
class TripSummary:
    """The part of the results that is stored with a trip."""
    total_net_profit: float
    currency: Currency = BASE_CURRENCY

    def to_dict(self) -> Dict[str, Any]:
        return {"totalNetProfit": self.total_net_profit, "currency": self.currency.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TripSummary":
        return StoredTripSummary.model_validate(data).to_summary()


@dataclass(frozen=True)
class TripRecord:
    """
    A saved trip.

    Identity is the id; records are immutable and only ever created by an
    explicit save or removed as a whole.
    """

    id: str
    created_at_epoch_ms: int
    inputs: TripInputs
    summary: TripSummary
    trip_date: Optional[str] = None  # YYYY-MM-DD

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.created_at_epoch_ms / 1000, tz=timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.created_at_epoch_ms,
            "date": self.trip_date or "",
            "inputs": self.inputs.to_dict(),
            "summary": self.summary.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TripRecord":
        """
        Deserialize a persisted record.

        Raises:
            ValueError: If required fields are missing or malformed
        """
        return StoredTripRecord.model_validate(data).to_record()


def _to_stored(value: Optional[float]) -> Union[float, str]:
    return "" if value is None else value


# ==========================================
# PERSISTED SHAPE
# ==========================================

class StoredTripInputs(BaseModel):
    """
    Inputs snapshot as written to storage.

    Empty numeric fields are stored as "". Fields added in later releases
    (ratePerKm, isRatePerKmMode, fuelConsumption) may be missing entirely.
    """

    model_config = ConfigDict(extra='ignore')

    distance: Optional[float] = None
    freightAmount: Optional[float] = None
    ratePerKm: Optional[float] = None
    isRatePerKmMode: bool = False
    customFuelPrice: Optional[float] = None
    customTollCost: Optional[float] = None
    customServiceCost: Optional[float] = None
    fuelConsumption: Optional[float] = None
    taxResidency: Optional[str] = None
    isEuroMode: bool = False
    exchangeRate: Optional[float] = None

    @field_validator(
        'distance', 'freightAmount', 'ratePerKm', 'customFuelPrice', 'customTollCost',
        'customServiceCost', 'fuelConsumption', 'exchangeRate',
        mode='before',
    )
    @classmethod
    def empty_is_none(cls, v):
        """An empty string means the field was left empty; booleans are not numbers."""
        if v == "" or v is None:
            return None
        if isinstance(v, bool):
            raise ValueError(f"Expected a number, got {v!r}")
        return v

    def to_inputs(self) -> TripInputs:
        if self.isRatePerKmMode:
            revenue: Revenue = PerKmRate(rate=self.ratePerKm)
        else:
            revenue = FlatAmount(amount=self.freightAmount)

        return TripInputs(
            distance_km=self.distance,
            revenue=revenue,
            is_euro_mode=self.isEuroMode,
            # 0 is as unusable as a missing value for both
            exchange_rate=self.exchangeRate or DEFAULT_EXCHANGE_RATE,
            fuel_consumption_l_per_100km=self.fuelConsumption or DEFAULT_FUEL_CONSUMPTION_L_PER_100KM,
            fuel_price_per_liter=_or_default(self.customFuelPrice, DEFAULT_FUEL_PRICE_PER_LITER),
            toll_cost_per_km=_or_default(self.customTollCost, DEFAULT_TOLL_COST_PER_KM),
            service_cost_per_km=_or_default(self.customServiceCost, DEFAULT_SERVICE_COST_PER_KM),
            tax_residency=self.taxResidency or DEFAULT_TAX_RESIDENCY,
        )


class StoredTripSummary(BaseModel):
    model_config = ConfigDict(extra='ignore')

    totalNetProfit: float = 0.0
    currency: Currency = BASE_CURRENCY

    @field_validator('totalNetProfit', 'currency', mode='before')
    @classmethod
    def empty_is_default(cls, v, info):
        if v == "" or v is None:
            return cls.model_fields[info.field_name].default
        return v

    def to_summary(self) -> TripSummary:
        return TripSummary(total_net_profit=self.totalNetProfit, currency=self.currency)


class StoredTripRecord(BaseModel):
    """One entry of the stored history list."""

    model_config = ConfigDict(extra='ignore')

    id: str = Field(min_length=1)
    timestamp: int = Field(default=0, ge=0, le=MAX_TIMESTAMP_MS)
    date: Optional[str] = None
    inputs: StoredTripInputs = Field(default_factory=StoredTripInputs)
    summary: StoredTripSummary = Field(default_factory=StoredTripSummary)

    @field_validator('id', mode='before')
    @classmethod
    def id_as_string(cls, v):
        # Ids written by the first release were bare numbers
        return str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v

    @field_validator('date', mode='before')
    @classmethod
    def iso_date_or_none(cls, v):
        """Anything but a real YYYY-MM-DD date falls back to the creation day."""
        if not isinstance(v, str) or not ISO_DATE_RE.fullmatch(v):
            return None
        try:
            datetime.strptime(v, '%Y-%m-%d')
        except ValueError:
            return None
        return v

    @field_validator('timestamp', 'inputs', 'summary', mode='before')
    @classmethod
    def empty_is_default(cls, v, info):
        if v == "" or v is None:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)
        return v

    def to_record(self) -> TripRecord:
        return TripRecord(
            id=self.id,
            created_at_epoch_ms=self.timestamp,
            trip_date=self.date or None,
            inputs=self.inputs.to_inputs(),
            summary=self.summary.to_summary(),
        )


def _or_default(value: Optional[float], default: float) -> float:
    return default if value is None else value
