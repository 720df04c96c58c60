"""Core enums package.

Usage:
    from accounts.core.enums import ErrorCode, Environment
"""

from accounts.core.enums.environment import Environment
from accounts.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
