from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "AgriHub API"
    database_url: str = "sqlite:///./agrihub.db"

    # Session tokens
    jwt_secret: str = "fallback_secret"  # Change this in production
    jwt_algorithm: str = "HS256"
    access_token_expire_days: int = 7

    # OTP challenges
    otp_ttl_seconds: int = 300
    otp_length: int = 6

    cors_origins: List[str] = ["*"]
    seed_demo_data: bool = True
    log_level: str = "INFO"
    default_currency: str = "INR"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
