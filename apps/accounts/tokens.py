"""
Session token issue / verify on top of SimpleJWT access tokens.

A token carries the user's identity (``id``) plus ``username``, ``email``
and ``role`` claims, and is valid for ``SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]``
(30 days by default).
"""

from datetime import datetime, timezone

from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.tokens import AccessToken

from apps.core.exceptions import TokenExpired


def issue_token(user):
    """Return a signed access token string for ``user``."""
    token = AccessToken.for_user(user)
    token["username"] = user.username
    token["email"] = user.email
    token["role"] = user.role
    return str(token)


def verify_token(raw_token):
    """
    Verify signature and expiry of ``raw_token`` and return the token.

    Raises
    ------
    TokenExpired
        If the token is well-formed but past its ``exp`` claim.
    InvalidToken
        For any other failure (bad signature, malformed, wrong type).
    """
    try:
        return AccessToken(raw_token)
    except TokenError as exc:
        if _is_expired(raw_token):
            raise TokenExpired() from exc
        raise InvalidToken("Unauthorized, Invalid Token") from exc


def _is_expired(raw_token):
    """Inspect the unverified ``exp`` claim of a token that failed verification."""
    try:
        payload = AccessToken(raw_token, verify=False).payload
    except TokenError:
        return False
    exp = payload.get("exp")
    if exp is None:
        return False
    return datetime.fromtimestamp(exp, tz=timezone.utc) <= datetime.now(tz=timezone.utc)
