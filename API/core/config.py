"""
Application configuration.

All values come from environment variables (a local .env file is loaded
first). Import the shared instance:

    from core.config import settings
"""

import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Application
    app_name = os.getenv("APP_NAME", "ISP Billing API")
    app_version = os.getenv("APP_VERSION", "1.0.0")
    debug = _as_bool(os.getenv("DEBUG", "false"))

    # Database
    database_url = os.getenv("DATABASE_URL", "sqlite:///./isp_billing.db")

    # JWT
    secret_key = os.getenv("SECRET_KEY", "change-me-in-production")
    algorithm = os.getenv("ALGORITHM", "HS256")
    access_token_expire_minutes = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

    # CORS
    cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")

    # Business clock (hours from UTC)
    tz_offset_hours = int(os.getenv("APP_TZ_OFFSET_HOURS", "3"))

    # First-run manager account
    default_admin_username = os.getenv("DEFAULT_ADMIN_USERNAME", "admin")
    default_admin_email = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@example.com")
    default_admin_password = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")

    @property
    def cors_origins_list(self) -> List[str]:
        return [x.strip() for x in self.cors_origins.split(",") if x.strip()]


settings = Settings()
