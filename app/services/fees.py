"""Layered fee stack in integer minor currency units.

Each step rounds half away from zero before the next one reads it, so the
order below must not change: an authoritative recomputation has to land on
the same cents.

Inputs are not validated here; negative or non-finite amounts are rejected
by ``PricingRequest`` before a price is computed.
"""
from decimal import Context, Decimal, ROUND_HALF_UP, localcontext
from typing import Union

from app.schemas.pricing import DEFAULT_PRICING, FeeStack, PricingConfig

Number = Union[int, float, Decimal]

# wide enough that no product of bounded request values is rounded before quantize
PRICING_CONTEXT = Context(prec=60, rounding=ROUND_HALF_UP)


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_half_away(value: Number) -> int:
    with localcontext(PRICING_CONTEXT):
        return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_fees(
    base_minor_units: int,
    multiplier: Number,
    is_urgent: bool = False,
    distance_km: Number = 0,
    config: PricingConfig = DEFAULT_PRICING,
) -> FeeStack:
    with localcontext(PRICING_CONTEXT):
        adjusted_base = round_half_away(base_minor_units * to_decimal(multiplier))

        urgent_fee = round_half_away(adjusted_base * config.urgent_rate) if is_urgent else 0

        extra_km = max(Decimal("0"), to_decimal(distance_km) - config.included_km)
        travel_fee = round_half_away(extra_km * config.per_km_rate_cents)

        subtotal = adjusted_base + urgent_fee + travel_fee
        platform_fee = round_half_away(subtotal * config.platform_rate)
        total_before_tax = subtotal + platform_fee

        tax = round_half_away(total_before_tax * config.tax_rate)
        total_with_tax = total_before_tax + tax

        processor_fee = round_half_away(total_with_tax * config.processor_pct_rate) + config.processor_fixed_cents
        final_total = total_with_tax + processor_fee

    return FeeStack(
        base_amount=base_minor_units,
        adjusted_base=adjusted_base,
        urgent_fee=urgent_fee,
        travel_fee=travel_fee,
        subtotal=subtotal,
        platform_fee=platform_fee,
        total_before_tax=total_before_tax,
        tax=tax,
        total_with_tax=total_with_tax,
        processor_fee=processor_fee,
        final_total=final_total,
    )
