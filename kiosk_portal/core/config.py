"""Application configuration using environment-aware settings."""

from __future__ import annotations

import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime configuration pulled from environment variables."""

    db_url: str = os.environ.get("KP_DB_URL", "sqlite:///./kiosk_portal.db")
    db_timeout: int = int(os.environ.get("KP_DB_TIMEOUT", "15"))
    log_level: str = os.environ.get("KP_LOG_LEVEL", "INFO")

    support_duration_seconds: int = int(os.environ.get("KP_SUPPORT_DURATION_SECONDS", "3600"))
    default_time_zone: str = os.environ.get("KP_DEFAULT_TIME_ZONE", "CST")

    heartland_admin_account_id: int = int(os.environ.get("KP_HEARTLAND_ADMIN_ACCOUNT_ID", "1"))
    global_restaurant_admin_account_id: int = int(
        os.environ.get("KP_GLOBAL_RESTAURANT_ADMIN_ACCOUNT_ID", "2")
    )
    mobilebytes_demo_account_id: int = int(os.environ.get("KP_MOBILEBYTES_DEMO_ACCOUNT_ID", "3"))
    platform_dealer_id: int = int(os.environ.get("KP_PLATFORM_DEALER_ID", "-8888"))

    # Off reproduces the legacy quota check, where special accounts never bypass.
    special_account_bypass: bool = os.environ.get("KP_SPECIAL_ACCOUNT_BYPASS", "false").lower() in {
        "1",
        "true",
        "yes",
    }


settings = Settings()
