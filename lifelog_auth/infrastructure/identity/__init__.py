"""External identity verification adapters."""

from lifelog_auth.infrastructure.identity.google_identity_verifier import (
    GoogleIdentityVerifier,
)

__all__ = ["GoogleIdentityVerifier"]
