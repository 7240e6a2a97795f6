"""Domain entities.

Usage:
    from lifelog_auth.domain.entities import RefreshTokenRecord, User
"""

from lifelog_auth.domain.entities.refresh_token import RefreshTokenRecord
from lifelog_auth.domain.entities.user import User

__all__ = ["RefreshTokenRecord", "User"]
