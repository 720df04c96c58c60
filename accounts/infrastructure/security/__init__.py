"""Security adapters: token codec, password hashing, single-use tokens."""

from accounts.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from accounts.infrastructure.security.jwt_service import JWTService
from accounts.infrastructure.security.single_use_token_service import (
    SingleUseTokenService,
)

__all__ = ["BcryptPasswordService", "JWTService", "SingleUseTokenService"]
