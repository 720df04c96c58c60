"""Stub email service (development/testing).

Logs messages instead of delivering them and keeps them in ``sent`` so
tests can read the links back out.
"""

from accounts.domain.protocols.logger_protocol import LoggerProtocol
from accounts.domain.value_objects.email_message import EmailMessage


class StubEmailService:
    """Email adapter that records messages instead of sending them.

    Attributes:
        sent: Every message passed to ``send``, in order.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        """Record and log ``message``.

        The body is not logged because it contains a live single-use link.
        """
        self.sent.append(message)
        self._logger.info(
            "email_sent_stub",
            to=message.to,
            from_address=message.from_address,
            subject=message.subject,
        )
