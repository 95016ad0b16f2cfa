from app.schemas.pricing import DEFAULT_PRICING, PricingConfig, ProviderEarnings
from app.services.fees import round_half_away
from app.services.pricing import format_minor_units


def compute_provider_earnings(gross_cents: int, config: PricingConfig = DEFAULT_PRICING) -> ProviderEarnings:
    """Split a mission's gross price into platform commission and provider net."""
    commission = round_half_away(gross_cents * config.provider_commission_rate)
    net = gross_cents - commission
    return ProviderEarnings(
        gross=gross_cents,
        commission=commission,
        net=net,
        formatted={
            "gross": format_minor_units(gross_cents),
            "commission": format_minor_units(commission),
            "net": format_minor_units(net),
        },
    )
