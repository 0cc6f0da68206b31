"""
Account service: registration, credential checks, self-service and admin
user management, and the password-reset flow.

``AccountService`` is built with the ``MediaStore`` that holds account
pictures and the profile services it cascades into when an account is
deleted, so removing a user never orphans a profile or its files.
"""

import logging
from functools import partial

from django.conf import settings
from django.contrib.auth.tokens import default_token_generator
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils.encoding import force_bytes, force_str
from django.utils.http import urlsafe_base64_decode, urlsafe_base64_encode
from rest_framework.exceptions import NotFound, ValidationError

from apps.core.exceptions import Conflict, InvalidCredentials
from apps.media.storage import MediaStore
from apps.profiles.services import MusicianService, OrganizerService

from .emails import send_password_reset_email, send_welcome_email
from .models import User

logger = logging.getLogger(__name__)

RESET_TOKEN_SEPARATOR = "."


def profile_picture_folder(role):
    """Upload folder for account pictures, one per role (``musicians/profile``)."""
    return f"{role}s/profile"


class AccountService:
    """Credential store operations over the ``User`` model."""

    def __init__(self, store=None, profile_services=None):
        self.store = store if store is not None else MediaStore()
        if profile_services is None:
            profile_services = (
                MusicianService(store=self.store),
                OrganizerService(store=self.store),
            )
        self.profile_services = tuple(profile_services)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get_user(self, user_id):
        user = User.objects.filter(pk=user_id).first()
        if user is None:
            raise NotFound("User not found")
        return user

    def _ensure_unique(self, *, email=None, username=None, exclude=None,
                       email_message, username_message):
        users = User.objects.all()
        if exclude is not None:
            users = users.exclude(pk=exclude.pk)
        if email and users.filter(email__iexact=email).exists():
            raise Conflict(email_message)
        if username and users.filter(username=username).exists():
            raise Conflict(username_message)

    # ------------------------------------------------------------------
    # Registration & login
    # ------------------------------------------------------------------
    def register(self, *, username, email, password, role=User.Role.MUSICIAN):
        """Create an account; ``Conflict`` if the email or username is taken."""
        email = email.lower().strip()
        self._ensure_unique(
            email=email,
            username=username,
            email_message="Email already registered.",
            username_message="Username already registered.",
        )
        user = User.objects.create_user(
            username=username, email=email, password=password, role=role,
        )
        logger.info("Registered %s account %s", role, user.pk)

        # Fire-and-forget welcome email (failures are logged, not raised)
        send_welcome_email(user)
        return user

    def verify_credentials(self, email, password):
        """
        Return the user owning ``email`` if ``password`` matches.

        An unknown email is reported as ``NotFound`` rather than folded into
        the bad-password error.
        """
        user = User.objects.filter(email__iexact=email.strip()).first()
        if user is None:
            raise NotFound("User not found.")
        if not user.check_password(password):
            raise InvalidCredentials("Invalid credentials")
        if not user.is_active:
            raise InvalidCredentials("This account has been deactivated.")
        return user

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------
    def update_user(self, user, data, *, profile_picture=None):
        """
        Apply a partial update to ``user``.

        Email/username uniqueness is re-checked only when they change, a
        new password is re-hashed, and a replaced picture file is deleted
        once the update has been saved.  If the update fails, the freshly
        uploaded ``profile_picture`` is deleted instead.
        """
        try:
            email = data.get("email")
            if email is not None:
                email = email.lower().strip()
            self._ensure_unique(
                email=email if email and email != user.email else None,
                username=(
                    data.get("username")
                    if data.get("username") and data["username"] != user.username
                    else None
                ),
                exclude=user,
                email_message="Email already in use",
                username_message="Username already in use",
            )

            previous_picture = user.profile_picture
            for field in ("username", "role"):
                if data.get(field) is not None:
                    setattr(user, field, data[field])
            if email is not None:
                user.email = email
            if data.get("password"):
                user.set_password(data["password"])
            if profile_picture:
                user.profile_picture = profile_picture
            user.save()
        except Exception:
            if profile_picture:
                self.store.delete(profile_picture)
            raise

        if profile_picture and previous_picture and previous_picture != profile_picture:
            self.store.delete(previous_picture)
        return user

    def create_user(self, data, *, profile_picture=None):
        """Admin creation with the same uniqueness rules and an optional picture."""
        try:
            email = data["email"].lower().strip()
            self._ensure_unique(
                email=email,
                username=data["username"],
                email_message="Email already registered.",
                username_message="Username already registered.",
            )
            user = User.objects.create_user(
                username=data["username"],
                email=email,
                password=data["password"],
                role=data.get("role", User.Role.MUSICIAN),
                profile_picture=profile_picture or "",
            )
        except Exception:
            if profile_picture:
                self.store.delete(profile_picture)
            raise

        logger.info("Admin created %s account %s", user.role, user.pk)
        return user

    # ------------------------------------------------------------------
    # Deletion
    # ------------------------------------------------------------------
    def delete_user(self, user_id):
        """
        Delete an account together with everything it owns.

        Each role profile goes through its service's own delete path, then
        the row is removed.  Every file, the account picture included, is
        deleted only after the transaction commits.
        """
        user = self.get_user(user_id)
        with transaction.atomic():
            for service in self.profile_services:
                if service.find_own_profile(user) is not None:
                    service.delete_profile(user)
            picture = user.profile_picture
            user.delete()
            if picture:
                transaction.on_commit(partial(self.store.delete, picture))
        logger.info("Deleted account %s", user_id)

    # ------------------------------------------------------------------
    # Password reset
    # ------------------------------------------------------------------
    def make_reset_token(self, user):
        uid = urlsafe_base64_encode(force_bytes(user.pk))
        token = default_token_generator.make_token(user)
        return f"{uid}{RESET_TOKEN_SEPARATOR}{token}"

    def request_password_reset(self, email):
        """
        Email a reset link if ``email`` belongs to an active account.

        Callers answer the same way whether or not the account exists.
        """
        user = User.objects.filter(email__iexact=email.strip(), is_active=True).first()
        if user is None:
            logger.info("Password reset requested for unknown email")
            return False

        reset_url = (
            f"{settings.FRONTEND_BASE_URL}/reset-password/{self.make_reset_token(user)}"
        )
        send_password_reset_email(user, reset_url)
        return True

    def reset_password(self, token, password):
        """Set ``password`` if ``token`` is a valid, unused reset token."""
        invalid = ValidationError("Invalid or expired reset token")
        uid, _, check = token.partition(RESET_TOKEN_SEPARATOR)
        if not uid or not check:
            raise invalid

        try:
            user = User.objects.filter(pk=force_str(urlsafe_base64_decode(uid))).first()
        except (TypeError, ValueError, OverflowError, DjangoValidationError):
            raise invalid
        if user is None or not default_token_generator.check_token(user, check):
            raise invalid

        user.set_password(password)
        user.save(update_fields=["password", "updated_at"])
        logger.info("Password reset for account %s", user.pk)
        return user
