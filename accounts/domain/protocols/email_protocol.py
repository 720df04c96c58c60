"""EmailProtocol - Port for the mail collaborator.

Only the orchestrator talks to the mail collaborator. Failures raised by
``send`` propagate to the caller unchanged.
"""

from typing import Protocol

from accounts.domain.value_objects.email_message import EmailMessage


class EmailProtocol(Protocol):
    """Mail transport protocol (port).

    Example Implementation:
        >>> class StubEmailService:
        ...     async def send(self, message: EmailMessage) -> None:
        ...         print(f"[STUB] {message.subject} -> {message.to}")
    """

    async def send(self, message: EmailMessage) -> None:
        """Deliver a fully formed message.

        Args:
            message: Sender, recipient, subject and plain-text body.
        """
        ...
