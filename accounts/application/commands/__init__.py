"""Application commands."""

from accounts.application.commands.account_commands import CreateUser

__all__ = ["CreateUser"]
