"""Core enums package.

Usage:
    from storyspoiler.core.enums import ErrorCode, Environment
"""

from storyspoiler.core.enums.environment import Environment
from storyspoiler.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
