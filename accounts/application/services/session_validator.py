"""Default resume-session validator."""

from accounts.core.result import Result, Success
from accounts.domain.entities.session import Session
from accounts.domain.entities.user import User


class AcceptAllSessionValidator:
    """Accept every valid session; used when no validator is configured."""

    async def validate(self, user: User, session: Session) -> Result[None, str]:
        return Success(value=None)
