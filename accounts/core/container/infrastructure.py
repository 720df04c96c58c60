"""Infrastructure service factories.

Application-scoped singletons via ``lru_cache``. Each factory takes the
settings explicitly (frozen, hashable) and falls back to ``get_settings()``
when called bare, so components never read ambient globals themselves.
"""

from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING

from accounts.core.config import Settings, get_settings

if TYPE_CHECKING:
    from accounts.domain.protocols.email_protocol import EmailProtocol
    from accounts.domain.protocols.logger_protocol import LoggerProtocol
    from accounts.domain.protocols.password_hashing_protocol import (
        PasswordHashingProtocol,
    )
    from accounts.domain.protocols.single_use_token_protocol import (
        SingleUseTokenProtocol,
    )
    from accounts.domain.protocols.token_generation_protocol import (
        TokenGenerationProtocol,
    )


@lru_cache()
def get_logger(settings: Settings | None = None) -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from accounts.infrastructure.logging import ConsoleAdapter

    settings = settings or get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_password_service(settings: Settings | None = None) -> "PasswordHashingProtocol":
    """Return the bcrypt password service at the configured cost factor."""
    from accounts.infrastructure.security import BcryptPasswordService

    settings = settings or get_settings()
    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service(settings: Settings | None = None) -> "TokenGenerationProtocol":
    """Return the JWT access/refresh token codec."""
    from accounts.infrastructure.security import JWTService

    settings = settings or get_settings()
    return JWTService(
        secret_key=settings.token_secret,
        algorithm=settings.token_algorithm,
        access_token_expire_minutes=settings.access_token_expire_minutes,
        refresh_token_expire_days=settings.refresh_token_expire_days,
    )


@lru_cache()
def get_single_use_token_service(
    settings: Settings | None = None,
) -> "SingleUseTokenProtocol":
    """Return the single-use token generator with configured lifetimes."""
    from accounts.infrastructure.security import SingleUseTokenService

    settings = settings or get_settings()
    return SingleUseTokenService(
        verification_lifetime=timedelta(
            hours=settings.email_verification_token_expire_hours
        ),
        reset_lifetime=timedelta(minutes=settings.password_reset_token_expire_minutes),
        enrollment_lifetime=timedelta(hours=settings.enrollment_token_expire_hours),
    )


@lru_cache()
def get_email_service(settings: Settings | None = None) -> "EmailProtocol":
    """Return the email service.

    Only the stub (log-and-record) service ships with this package; real
    delivery is supplied by passing an ``EmailProtocol`` implementation to
    ``build_accounts_server``.
    """
    from accounts.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger(settings).bind(component="email"))
