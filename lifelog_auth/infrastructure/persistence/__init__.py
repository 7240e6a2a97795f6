"""Database persistence infrastructure.

- Declarative base for all tables
- Async engine and session management
- SQLAlchemy adapters for the domain repository protocols
"""

from lifelog_auth.infrastructure.persistence.base import BaseModel
from lifelog_auth.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
