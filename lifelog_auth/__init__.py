"""Authentication core for the Life Event Logger API.

Google sign-in, short-lived JWT access tokens and rotating, database-backed
refresh tokens.
"""

__version__ = "0.1.0"
