"""Domain enums.

Usage:
    from lifelog_auth.domain.enums import ProtectedResourceType
"""

from lifelog_auth.domain.enums.resource_type import ProtectedResourceType

__all__ = ["ProtectedResourceType"]
