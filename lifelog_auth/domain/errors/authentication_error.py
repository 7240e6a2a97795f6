"""Authentication domain errors.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    result = codec.verify_access_token(token, secret, now=clock.now())
    match result:
        case Success(value=claims):
            ...
        case Failure(error=AuthenticationError.INVALID_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants.

    Error Categories:
        - Token errors: INVALID_TOKEN
        - Identity errors: INVALID_IDENTITY_TOKEN
        - Session errors: REAUTHENTICATION_REQUIRED

    REAUTHENTICATION_REQUIRED is the only refresh failure surfaced to
    callers. Whether the refresh token was unknown, expired, rotated by a
    concurrent request or orphaned is logged, never returned, so callers
    cannot enumerate token states.
    """

    # Token validation errors
    INVALID_TOKEN = "Invalid token"

    # Identity provider errors
    INVALID_IDENTITY_TOKEN = "Invalid identity token"

    # Session errors
    REAUTHENTICATION_REQUIRED = "Reauthentication required"
