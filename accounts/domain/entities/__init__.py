"""Domain entities."""

from accounts.domain.entities.session import Session
from accounts.domain.entities.user import EmailRecord, SingleUseToken, User

__all__ = ["EmailRecord", "Session", "SingleUseToken", "User"]
