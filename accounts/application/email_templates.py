"""Plain-text account email templates.

Each template builds a subject and a body from the user and the link.
The embedding application can pass its own ``EmailTemplates`` to the
server to override wording or sender.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from accounts.domain.entities.user import User
from accounts.domain.enums import TokenPurpose


def _greeting(user: User) -> str:
    return f"Hello {user.username}," if user.username else "Hello,"


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailTemplate:
    """Subject/body builders for one kind of account email.

    Attributes:
        subject: Builds the subject line from the user.
        text: Builds the body from the user and the link URL.
        from_address: Sender override; falls back to the configured sender.
    """

    subject: Callable[[User], str]
    text: Callable[[User, str], str]
    from_address: str | None = None


def _verify_email_template() -> EmailTemplate:
    return EmailTemplate(
        subject=lambda user: "Verify your account email",
        text=lambda user, url: (
            f"{_greeting(user)}\n\n"
            f"To verify your account email please click on this link: {url}\n"
        ),
    )


def _reset_password_template() -> EmailTemplate:
    return EmailTemplate(
        subject=lambda user: "Reset your password",
        text=lambda user, url: (
            f"{_greeting(user)}\n\n"
            f"To reset your password please click on this link: {url}\n"
        ),
    )


def _enroll_account_template() -> EmailTemplate:
    return EmailTemplate(
        subject=lambda user: "Set your password",
        text=lambda user, url: (
            f"{_greeting(user)}\n\n"
            f"To set your password please click on this link: {url}\n"
        ),
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailTemplates:
    """Templates keyed by single-use token purpose."""

    verify_email: EmailTemplate = field(default_factory=_verify_email_template)
    reset_password: EmailTemplate = field(default_factory=_reset_password_template)
    enroll_account: EmailTemplate = field(default_factory=_enroll_account_template)

    def for_purpose(self, purpose: TokenPurpose) -> EmailTemplate:
        """Return the template used for ``purpose``."""
        match purpose:
            case TokenPurpose.VERIFY_EMAIL:
                return self.verify_email
            case TokenPurpose.RESET_PASSWORD:
                return self.reset_password
            case TokenPurpose.ENROLL:
                return self.enroll_account
