"""Application layer: the accounts server and the services it composes."""

from accounts.application.accounts_server import AccountsServer
from accounts.application.commands import CreateUser
from accounts.application.dtos import LoginResult
from accounts.application.email_templates import EmailTemplate, EmailTemplates

__all__ = [
    "AccountsServer",
    "CreateUser",
    "EmailTemplate",
    "EmailTemplates",
    "LoginResult",
]
