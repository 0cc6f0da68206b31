"""
Bearer-token authentication: the first half of the access guard.

Builds on SimpleJWT's ``JWTAuthentication``: a request without an
``Authorization: Bearer …`` header is left anonymous (DRF then answers 401
on protected routes); a present but invalid, expired, or orphaned token
fails with 401 straight away.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.settings import api_settings

from .models import User
from .tokens import verify_token


class BearerTokenAuthentication(JWTAuthentication):
    """Resolve ``Authorization: Bearer <token>`` to a live ``User``."""

    def get_validated_token(self, raw_token):
        if isinstance(raw_token, bytes):
            raw_token = raw_token.decode("utf-8")
        return verify_token(raw_token)

    def get_user(self, validated_token):
        user_id = validated_token.get(api_settings.USER_ID_CLAIM)
        if not user_id:
            raise InvalidToken("Unauthorized, Invalid Token")

        try:
            user = User.objects.get(pk=user_id)
        except (User.DoesNotExist, DjangoValidationError, ValueError):
            raise AuthenticationFailed("Unauthorized, User Not Found")

        if not user.is_active:
            raise AuthenticationFailed("Unauthorized, User Inactive")
        return user
