"""
Views for registration, login, the current account, account self-service,
and the password-reset flow.

Views stay thin: serializers validate the body, ``AccountService`` applies
the business rules and raises typed errors, and tokens come from
``apps.accounts.tokens``.  Public endpoints run with no authenticators so
a stale token sent by the client is simply ignored.
"""

import logging

from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from apps.core.permissions import IsSelf
from apps.core.responses import envelope
from apps.media.storage import MediaStore
from apps.media.validators import IMAGE

from .serializers import (
    AccountUpdateSerializer,
    ForgotPasswordSerializer,
    LoginSerializer,
    RegisterSerializer,
    ResetPasswordSerializer,
    UserSerializer,
)
from .services import AccountService, profile_picture_folder
from .tokens import issue_token

logger = logging.getLogger(__name__)


class AccountServiceMixin:
    def get_service(self):
        return AccountService(store=MediaStore())


def store_profile_picture(service, request, role):
    """Save an optional ``profilePicture`` upload; returns its reference or None."""
    upload = request.FILES.get("profilePicture")
    if not upload:
        return None
    return service.store.save_upload(profile_picture_folder(role), upload, IMAGE)


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------
class RegisterView(AccountServiceMixin, APIView):
    """
    POST /api/auth/register

    Creates an account.  The client logs in separately to get a token.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        user = self.get_service().register(
            username=data["username"],
            email=data["email"],
            password=data["password"],
            role=data["role"],
        )
        return envelope(
            UserSerializer(user).data,
            message="User registered successfully",
            status=status.HTTP_201_CREATED,
        )


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------
class LoginView(AccountServiceMixin, APIView):
    """
    POST /api/auth/login

    Checks email + password and returns ``{token, user}``.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = self.get_service().verify_credentials(
            serializer.validated_data["email"],
            serializer.validated_data["password"],
        )
        return envelope(
            {"token": issue_token(user), "user": UserSerializer(user).data},
            message="Login successful",
        )


# ---------------------------------------------------------------------------
# Current account
# ---------------------------------------------------------------------------
class MeView(APIView):
    """GET /api/auth/me → the account behind the bearer token."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return envelope(UserSerializer(request.user).data)


class AccountProfileView(AccountServiceMixin, APIView):
    """
    PUT /api/auth/profile/<id>

    Self-service update of username, email, password and (multipart)
    ``profilePicture``.  Only the account owner may call it.
    """

    permission_classes = [IsAuthenticated, IsSelf]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def put(self, request, pk):
        serializer = AccountUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        service = self.get_service()
        picture = store_profile_picture(service, request, request.user.role)
        user = service.update_user(
            request.user, serializer.validated_data, profile_picture=picture
        )
        return envelope(UserSerializer(user).data, message="Profile updated successfully")


# ---------------------------------------------------------------------------
# Password reset
# ---------------------------------------------------------------------------
class ForgotPasswordView(AccountServiceMixin, APIView):
    """
    POST /api/auth/forgot-password

    Emails a reset link when the address is registered.  The answer is
    the same either way so accounts cannot be enumerated.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = ForgotPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.get_service().request_password_reset(serializer.validated_data["email"])
        return envelope(
            message="If the email is registered, a reset link has been sent."
        )


class ResetPasswordView(AccountServiceMixin, APIView):
    """
    POST /api/auth/reset-password/<token>

    The token is single-use: Django's token generator hashes in the
    password, so it stops validating once the password changes.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request, token):
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.get_service().reset_password(token, serializer.validated_data["password"])
        return envelope(message="Password reset successful")
