"""Application environment types.

Used by Settings to pick environment-specific behavior (log rendering,
secure defaults).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"
