# app/core/config.py
from pydantic_settings import BaseSettings
from pydantic import AnyHttpUrl, field_validator # AnyHttpUrl stays in pydantic core
from functools import lru_cache
from typing import Dict, Optional
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "ZeroPay Gateway"
    PORT: int = 9001
    APIKEY: str # shared credential for the payment service, required
    SERVICE: AnyHttpUrl = "https://api.zpaynow.com" # validates that it's a URL

    # Product id -> price in minor currency units (cents). JSON object in env.
    PRODUCTS: Dict[int, int] = {
        1: 200,   # $2
        2: 1000,  # $10
    }

    # Seconds; None leaves the requests default in place
    UPSTREAM_TIMEOUT: Optional[float] = None
    LOG_LEVEL: str = "INFO"

    @field_validator("PRODUCTS")
    @classmethod
    def validate_prices(cls, v: Dict[int, int]) -> Dict[int, int]:
        for product_id, price in v.items():
            if price <= 0:
                raise ValueError(f"Price for product {product_id} must be positive, got {price}")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        frozen = True
        extra = "ignore"  # Ignore extra fields from .env

@lru_cache() # Cache the settings object for performance
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
