from datetime import datetime
from decimal import Decimal
from typing import Iterable, List
from zoneinfo import ZoneInfo

from app.core.enums import SurchargeRule
from app.schemas.pricing import DEFAULT_PRICING, PricingConfig
from app.services.holidays import is_holiday

SATURDAY = 5
SUNDAY = 6


def local_wall_clock(timestamp: datetime, config: PricingConfig = DEFAULT_PRICING) -> datetime:
    """Naive timestamps are already local; aware ones are converted once to the pricing zone."""
    if timestamp.tzinfo is None:
        return timestamp
    return timestamp.astimezone(ZoneInfo(config.timezone)).replace(tzinfo=None)


def _is_evening(hour: int, config: PricingConfig) -> bool:
    return config.evening_start_hour <= hour < config.night_start_hour


def _is_night(hour: int, config: PricingConfig) -> bool:
    return hour >= config.night_start_hour or hour < config.night_end_hour


def applicable_rules(timestamp: datetime, config: PricingConfig = DEFAULT_PRICING) -> List[SurchargeRule]:
    local = local_wall_clock(timestamp, config)
    hour = local.hour
    weekday = local.weekday()

    rules = []
    if _is_evening(hour, config):
        rules.append(SurchargeRule.EVENING)
    if _is_night(hour, config):
        rules.append(SurchargeRule.NIGHT)
    if weekday == SATURDAY:
        rules.append(SurchargeRule.SATURDAY)
    if weekday == SUNDAY or is_holiday(local.date()):
        rules.append(SurchargeRule.SUNDAY_OR_HOLIDAY)
    return rules


def rule_factor(rule: SurchargeRule, config: PricingConfig = DEFAULT_PRICING) -> Decimal:
    return {
        SurchargeRule.EVENING: config.evening_factor,
        SurchargeRule.NIGHT: config.night_factor,
        SurchargeRule.SATURDAY: config.saturday_factor,
        SurchargeRule.SUNDAY_OR_HOLIDAY: config.sunday_or_holiday_factor,
    }[rule]


def multiplier_for(rules: Iterable[SurchargeRule], config: PricingConfig = DEFAULT_PRICING) -> Decimal:
    multiplier = Decimal("1")
    for rule in rules:
        multiplier *= rule_factor(rule, config)
    return multiplier


def resolve_multiplier(timestamp: datetime, config: PricingConfig = DEFAULT_PRICING) -> Decimal:
    """Product of the factors of every rule that applies at ``timestamp`` (1 when none do)."""
    return multiplier_for(applicable_rules(timestamp, config), config)
