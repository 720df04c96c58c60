"""Outgoing email message handed to the mail collaborator."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailMessage:
    """Fully formed plain-text message.

    Attributes:
        from_address: Sender address.
        to: Recipient address.
        subject: Subject line.
        text: Plain-text body.
    """

    from_address: str
    to: str
    subject: str
    text: str
