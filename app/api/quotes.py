"""Pricing quote endpoints with Redis caching"""
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List

from app.core.config import settings, get_pricing_config
from app.core.metrics import cache_hits, cache_misses
from app.core.redis import get_redis
from app.schemas.pricing import (
    EarningsRequest,
    HolidayOut,
    MultiplierOut,
    PricingBreakdown,
    PricingConfig,
    PricingRequest,
    ProviderEarnings,
)
from app.services.earnings import compute_provider_earnings
from app.services.holidays import holidays_for_year
from app.services.multiplier import applicable_rules, local_wall_clock, resolve_multiplier
from app.services.pricing import compute_price
from app.utils.hashing import quote_cache_key

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/quotes", tags=["quotes"])

MIN_YEAR = 1583  # first full Gregorian year
MAX_YEAR = 9999


def _cache_key(req: PricingRequest, config: PricingConfig) -> str:
    return quote_cache_key("price", {
        "request": req.model_dump(mode="json"),
        "config": config.model_dump(mode="json"),
    })


@router.post("/calc", response_model=PricingBreakdown)
async def calc_quote(req: PricingRequest, config: PricingConfig = Depends(get_pricing_config)):

    cache_key = _cache_key(req, config)
    redis = get_redis()

    if redis is not None:
        try:
            cached = await redis.get(cache_key)
            if cached:
                cache_hits.labels(cache="price").inc()
                return PricingBreakdown.model_validate_json(cached)
            cache_misses.labels(cache="price").inc()
        except Exception as e:
            logger.warning(f"Cache retrieval failed: {e}")

    result = compute_price(req, config)

    if redis is not None:
        try:
            await redis.set(
                cache_key,
                result.model_dump_json(),
                ex=settings.PRICE_CACHE_TTL
            )
        except Exception as e:
            logger.warning(f"Cache write failed: {e}")

    return result


@router.get("/multiplier", response_model=MultiplierOut)
async def get_multiplier(
    at: datetime = Query(..., description="Request time; naive values are local wall-clock time"),
    config: PricingConfig = Depends(get_pricing_config)
):
    return MultiplierOut(
        at=at,
        local_time=local_wall_clock(at, config),
        surcharges=applicable_rules(at, config),
        multiplier=resolve_multiplier(at, config),
    )


@router.get("/holidays/{year}", response_model=List[HolidayOut])
async def list_holidays(year: int):
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise HTTPException(status_code=422, detail=f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
    return [HolidayOut(day=day, name=name) for day, name in holidays_for_year(year).items()]


@router.post("/earnings", response_model=ProviderEarnings)
async def calc_earnings(payload: EarningsRequest, config: PricingConfig = Depends(get_pricing_config)):
    return compute_provider_earnings(payload.gross_cents, config)
