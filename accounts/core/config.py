"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
(prefix ``ACCOUNTS_``). Settings are frozen: built once at startup and
passed into every component by the container.

Usage:
    from accounts.core.config import get_settings

    settings = get_settings()
    secret = settings.token_secret

    # Explicit construction (tests, embedding applications)
    settings = Settings(token_secret="x" * 32, site_url="https://app.local")
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from accounts.core.enums import Environment


class Settings(BaseSettings):
    """
    Accounts settings (flat structure, immutable).

    Configuration precedence:
        1. Explicit keyword arguments
        2. Environment variables (ACCOUNTS_*)
        3. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Token signing
    token_secret: str = Field(
        description="Secret key for access/refresh token signing (must be kept secure)",
    )
    token_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    access_token_expire_minutes: int = Field(
        default=90,
        description="Access token expiration time in minutes",
    )
    refresh_token_expire_days: int = Field(
        default=1,
        description="Refresh token expiration time in days",
    )

    # Password hashing
    bcrypt_rounds: int = Field(
        default=12,
        description="Number of bcrypt hashing rounds (10-14 recommended, 12 = ~300ms)",
    )

    # Single-use token lifetimes
    email_verification_token_expire_hours: int = Field(
        default=24,
        description="Lifetime of email verification links in hours",
    )
    password_reset_token_expire_minutes: int = Field(
        default=60,
        description="Lifetime of password reset links in minutes",
    )
    enrollment_token_expire_hours: int = Field(
        default=72,
        description="Lifetime of enrollment (initial password) links in hours",
    )

    # Links and mail
    site_url: str = Field(
        default="http://localhost:3000",
        description="Base URL used to build verification/reset/enrollment links",
    )
    email_from: str = Field(
        default="accounts@localhost",
        description="Sender address for outgoing account emails",
    )

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNTS_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within safe range.

        Raises:
            ValueError: If rounds are not between 4 and 31.
        """
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator(
        "access_token_expire_minutes",
        "refresh_token_expire_days",
        "email_verification_token_expire_hours",
        "password_reset_token_expire_minutes",
        "enrollment_token_expire_hours",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Reject zero or negative lifetimes."""
        if v <= 0:
            raise ValueError("token lifetimes must be positive")
        return v

    @field_validator("site_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache()
def get_settings() -> Settings:
    """
    Return the process-wide settings singleton.

    Loaded from the environment on first call; later calls return the
    same instance.
    """
    return Settings()  # type: ignore[call-arg]
