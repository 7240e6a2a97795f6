"""Refresh token lifecycle errors."""


class RefreshTokenError:
    """Refresh token error constants.

    TOKEN_NOT_FOUND is an integrity violation, distinct from the silent
    ``None`` returned by validation: the caller already proved possession of
    a valid secret, so a missing row means a concurrent rotation won or the
    id was tampered with. Callers must force re-authentication.
    """

    TOKEN_NOT_FOUND = "refresh_token_not_found"
