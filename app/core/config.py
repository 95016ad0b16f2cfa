from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.schemas.pricing import PricingConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_nested_delimiter="__",
        extra="ignore",
    )

    REDIS_URL: Optional[str] = None

    PRICE_CACHE_TTL: int = 60   # 60 seconds

    # override single rates with e.g. PRICING__tax_rate=0.06
    PRICING: PricingConfig = PricingConfig()

    API_TITLE: str = "Service Pricing Engine"
    API_DESCRIPTION: str = "Advisory price quotes for service requests"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

settings = Settings()


def get_pricing_config() -> PricingConfig:
    return settings.PRICING
