from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import SurchargeRule


class PricingConfig(BaseModel):
    """Rates and rule boundaries for one pricing jurisdiction.

    Amounts suffixed ``_cents`` are minor currency units, every other rate is
    a fraction (0.21 means 21%).
    """

    model_config = ConfigDict(frozen=True)

    urgent_rate: Decimal = Decimal("0.5")
    included_km: Decimal = Decimal("10")
    per_km_rate_cents: Decimal = Decimal("60")
    platform_rate: Decimal = Decimal("0.25")
    tax_rate: Decimal = Decimal("0.21")
    processor_pct_rate: Decimal = Decimal("0.015")
    processor_fixed_cents: int = 25

    evening_factor: Decimal = Decimal("1.3")
    night_factor: Decimal = Decimal("2.0")
    saturday_factor: Decimal = Decimal("1.3")
    sunday_or_holiday_factor: Decimal = Decimal("1.5")

    evening_start_hour: int = Field(18, ge=0, le=23)
    night_start_hour: int = Field(23, ge=0, le=23)
    night_end_hour: int = Field(7, ge=0, le=23)

    timezone: str = "Europe/Brussels"

    provider_commission_rate: Decimal = Decimal("0.15")


DEFAULT_PRICING = PricingConfig()

# request ceilings; within them every intermediate product fits the pricing decimal context
MAX_RATE_PER_HOUR = Decimal("1000000")
MAX_HOURS = Decimal("10000")
MAX_DISTANCE_KM = Decimal("100000")
MAX_FLAT_AMOUNT = Decimal("100000000")
MAX_DIGITS = 20


class PricingRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_rate_per_hour: Decimal = Field(Decimal("0"), ge=0, le=MAX_RATE_PER_HOUR, max_digits=MAX_DIGITS, allow_inf_nan=False)
    hours: Decimal = Field(Decimal("1"), ge=0, le=MAX_HOURS, max_digits=MAX_DIGITS, allow_inf_nan=False)
    is_urgent: bool = False
    distance_km: Decimal = Field(Decimal("0"), ge=0, le=MAX_DISTANCE_KM, max_digits=MAX_DIGITS, allow_inf_nan=False)
    request_timestamp: datetime
    is_flat_rate: bool = False
    flat_amount: Decimal = Field(Decimal("0"), ge=0, le=MAX_FLAT_AMOUNT, max_digits=MAX_DIGITS, allow_inf_nan=False)


class FeeStack(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_amount: int
    adjusted_base: int
    urgent_fee: int
    travel_fee: int
    subtotal: int
    platform_fee: int
    total_before_tax: int
    tax: int
    total_with_tax: int
    processor_fee: int
    final_total: int


class PricingBreakdown(FeeStack):
    multiplier: Decimal
    surcharges: List[SurchargeRule] = []
    formatted: Dict[str, str]


class MultiplierOut(BaseModel):
    at: datetime
    local_time: datetime
    surcharges: List[SurchargeRule]
    multiplier: Decimal


class HolidayOut(BaseModel):
    day: date
    name: str


class EarningsRequest(BaseModel):
    gross_cents: int = Field(ge=0)


class ProviderEarnings(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross: int
    commission: int
    net: int
    formatted: Dict[str, str]
