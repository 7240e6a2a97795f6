"""Verified identity returned by an external identity provider."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class IdentityClaims:
    """Profile extracted from a verified Google ID token.

    Attributes:
        subject_id: Provider subject identifier (Google ``sub``).
        email: Email address.
        display_name: Full name shown to the user.
    """

    subject_id: str
    email: str
    display_name: str
