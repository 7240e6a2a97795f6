"""Core enums package.

Usage:
    from lifelog_auth.core.enums import Environment
"""

from lifelog_auth.core.enums.environment import Environment

__all__ = ["Environment"]
