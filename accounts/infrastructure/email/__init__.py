"""Email service implementations.

- StubEmailService: logs and records messages (development/testing)
"""

from accounts.infrastructure.email.stub_email_service import StubEmailService

__all__ = ["StubEmailService"]
