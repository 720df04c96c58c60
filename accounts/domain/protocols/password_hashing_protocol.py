"""Password hashing protocol for domain layer.

Infrastructure layer provides concrete implementations (bcrypt).
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt with configurable cost factor
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hash string suitable for storage.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash.

        Returns:
            True if the password matches, False otherwise (never raises).
        """
        ...
