"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Security:
    - Adaptive cost factor (default 12, ~250ms per hash)
    - Constant-time verification (bcrypt.checkpw)
    - Salt generated per hash
"""

import bcrypt

from accounts.core.constants import BCRYPT_ROUNDS_DEFAULT


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        password_service = BcryptPasswordService(cost_factor=settings.bcrypt_rounds)
        password_hash = password_service.hash_password("Secret1!")
        password_service.verify_password("Secret1!", password_hash)  # True
    """

    def __init__(self, cost_factor: int = BCRYPT_ROUNDS_DEFAULT) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor. Each +1 doubles computation
                time. Values below 10 are only meant for tests.

        Raises:
            ValueError: If cost_factor is outside bcrypt's 4..31 range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> service.hash_password("Secret1!") != service.hash_password("Secret1!")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise. Invalid hash
            formats return False instead of raising.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            # Invalid hash format or encoding error
            return False
