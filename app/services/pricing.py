import logging
from decimal import Decimal, localcontext
from typing import Dict

from app.core.enums import BreakdownField
from app.core.metrics import price_computations
from app.schemas.pricing import DEFAULT_PRICING, FeeStack, PricingBreakdown, PricingConfig, PricingRequest
from app.services.fees import PRICING_CONTEXT, Number, compute_fees, round_half_away, to_decimal
from app.services.multiplier import applicable_rules, local_wall_clock, multiplier_for

logger = logging.getLogger(__name__)

CENTS_PER_UNIT = Decimal("100")


def to_minor_units(amount: Number) -> int:
    with localcontext(PRICING_CONTEXT):
        return round_half_away(to_decimal(amount) * CENTS_PER_UNIT)


def format_minor_units(cents: int) -> str:
    return str((Decimal(cents) / CENTS_PER_UNIT).quantize(Decimal("0.01")))


def format_fee_stack(stack: FeeStack) -> Dict[str, str]:
    amounts = stack.model_dump()
    return {str(field): format_minor_units(amounts[field.value]) for field in BreakdownField}


def resolve_base_minor_units(request: PricingRequest) -> int:
    if request.is_flat_rate:
        return to_minor_units(request.flat_amount)
    with localcontext(PRICING_CONTEXT):
        return to_minor_units(request.base_rate_per_hour * request.hours)


def compute_price(request: PricingRequest, config: PricingConfig = DEFAULT_PRICING) -> PricingBreakdown:
    """Advisory price for a service request.

    Pure function of ``request`` and ``config``: the request carries its own
    timestamp, so identical input always yields the identical breakdown. The
    binding amount is recomputed server-side before any charge.
    """
    base_minor_units = resolve_base_minor_units(request)

    local = local_wall_clock(request.request_timestamp, config)
    surcharges = applicable_rules(local, config)
    multiplier = multiplier_for(surcharges, config)

    stack = compute_fees(
        base_minor_units,
        multiplier,
        is_urgent=request.is_urgent,
        distance_km=request.distance_km,
        config=config,
    )

    price_computations.labels(urgent=str(request.is_urgent).lower()).inc()
    logger.debug(f"Priced request at {local.isoformat()}: multiplier={multiplier} final_total={stack.final_total}")

    return PricingBreakdown(
        **stack.model_dump(),
        multiplier=multiplier,
        surcharges=surcharges,
        formatted=format_fee_stack(stack),
    )
