"""
Application Configuration
All settings loaded from environment variables
"""
from pydantic import BaseModel
from typing import List, Optional
import os


class Settings(BaseModel):
    # ==================== Application ====================
    APP_NAME: str = os.getenv("APP_NAME", "50Hertz Advisory API")
    SECRET_KEY: str = os.getenv("SECRET_KEY", os.getenv("JWT_SECRET_KEY", ""))
    PORT: int = int(os.getenv("PORT", "5000"))

    # ==================== Development ====================
    DEV_MODE: bool = os.getenv("DEV_MODE", "false").lower() in ("true", "1", "yes")

    # ==================== API ====================
    API_VERSION: str = os.getenv("API_VERSION", "v1")
    API_PREFIX: str = os.getenv("API_PREFIX", f"/api/{os.getenv('API_VERSION', 'v1')}")

    # ==================== Database ====================
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "fiftyhertz")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "fiftyhertz")
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "db")
    POSTGRES_PORT: int = int(os.getenv("POSTGRES_PORT", "5432"))
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "20"))
    DB_POOL_TIMEOUT: int = int(os.getenv("DB_POOL_TIMEOUT", "30"))
    DB_CONNECT_TIMEOUT: int = int(os.getenv("DB_CONNECT_TIMEOUT", "10"))
    DB_STATEMENT_TIMEOUT_MS: int = int(os.getenv("DB_STATEMENT_TIMEOUT_MS", "15000"))

    # ==================== Auth ====================
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_DAYS: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "30"))

    # ==================== OTP ====================
    OTP_LENGTH: int = int(os.getenv("OTP_LENGTH", "4"))
    OTP_EXPIRY: int = int(os.getenv("OTP_EXPIRY", "900"))  # 15 minutes
    OTP_RETURN_IN_RESPONSE: bool = os.getenv("OTP_RETURN_IN_RESPONSE", "true").lower() in ("true", "1", "yes")

    # ==================== Phone Validation ====================
    PHONE_REGEX: str = os.getenv("PHONE_REGEX", r"^\+?\d{7,15}$")

    # ==================== Languages ====================
    SUPPORTED_LANGUAGES: List[str] = [
        code.strip()
        for code in os.getenv("SUPPORTED_LANGUAGES", "en,pa,bgc_in,hi,raj_in").split(",")
        if code.strip()
    ]

    # ==================== SMS ====================
    SMS_GATEWAY_DEFAULT: str = os.getenv("SMS_GATEWAY_DEFAULT", "msg91")
    SMS_API_KEY: str = os.getenv("SMS_API_KEY", "")
    SMS_API_URL: str = os.getenv("SMS_API_URL", "https://control.msg91.com/api/v5")
    SMS_SENDER_ID: str = os.getenv("SMS_SENDER_ID", "FHERTZ")
    SMS_TIMEOUT: int = int(os.getenv("SMS_TIMEOUT", "10"))

    # ==================== Celery ====================
    CELERY_BROKER_URL: str = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/0")
    CELERY_RESULT_BACKEND: str = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/0")
    CELERY_TIMEZONE: str = os.getenv("CELERY_TIMEZONE", "Asia/Kolkata")

    # ==================== Timezone ====================
    TIMEZONE: str = os.getenv("TIMEZONE", "Asia/Kolkata")

    # ==================== Rate Limiting ====================
    RATE_LIMIT_REQUESTS: int = int(os.getenv("RATE_LIMIT_REQUESTS", "100"))
    RATE_LIMIT_WINDOW: int = int(os.getenv("RATE_LIMIT_WINDOW", "900"))  # 15 minutes

    # ==================== Logging ====================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")
    LOG_FILE: str = os.getenv("LOG_FILE", "")
    LOG_MAX_SIZE: int = int(os.getenv("LOG_MAX_SIZE", "10485760"))  # 10MB
    LOG_BACKUP_COUNT: int = int(os.getenv("LOG_BACKUP_COUNT", "5"))

    # ==================== CORS ====================
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    CORS_ALLOW_CREDENTIALS: bool = os.getenv("CORS_ALLOW_CREDENTIALS", "false").lower() == "true"

    @property
    def database_url(self) -> str:
        return self.DATABASE_URL or (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()
