"""
Profile services: the business rules behind the musician and organizer
endpoints.

Both services share ``ProfileService``: one profile per owner, lookups by
owner or by public id, partial updates, deletion that cleans up every
stored file, and capped media collections delegated to
``MediaAttachmentManager``.  Errors are raised as typed API exceptions and
rendered by the envelope exception handler.

Services are constructed explicitly with the ``MediaStore`` they write
through; views build one per request.
"""

import logging
from functools import partial

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound

from apps.core.exceptions import Conflict
from apps.media.manager import MediaAttachmentManager
from apps.media.storage import MediaStore

from .models import Musician, Organizer

logger = logging.getLogger(__name__)


class ProfileService:
    """Lifecycle of one role profile type, keyed by its owning user."""

    model = None
    kind = "Profile"

    def __init__(self, store=None):
        self.store = store if store is not None else MediaStore()
        self.media = MediaAttachmentManager(
            self.model,
            not_found_message=self.not_found_message,
            store=self.store,
        )

    @property
    def not_found_message(self):
        return f"{self.kind} profile not found"

    @property
    def conflict_message(self):
        return f"{self.kind} profile already exists for this user"

    def queryset(self):
        return self.model.objects.select_related("user")

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def create_profile(self, user, data):
        """Create the owner's profile; ``Conflict`` if one already exists."""
        if self.model.objects.filter(user=user).exists():
            raise Conflict(self.conflict_message)

        # The one-to-one index catches a concurrent create that slipped
        # past the check above.
        try:
            with transaction.atomic():
                profile = self.model.objects.create(user=user, **data)
        except IntegrityError:
            raise Conflict(self.conflict_message)

        logger.info("%s profile %s created for user %s", self.kind, profile.pk, user.pk)
        return profile

    def find_own_profile(self, user):
        return self.queryset().filter(user=user).first()

    def get_own_profile(self, user):
        profile = self.find_own_profile(user)
        if profile is None:
            raise NotFound(self.not_found_message)
        return profile

    def get_profile_by_id(self, profile_id):
        profile = self.queryset().filter(pk=profile_id).first()
        if profile is None:
            raise NotFound(self.not_found_message)
        return profile

    def update_profile(self, user, data):
        """Apply only the provided fields to the owner's profile."""
        profile = self.get_own_profile(user)
        for field, value in data.items():
            setattr(profile, field, value)
        profile.save()
        return profile

    def delete_profile(self, user):
        """
        Delete the owner's profile and, best-effort, every file it references.

        Files are removed once the deletion commits, so a rolled-back delete
        leaves the profile and its files intact.  A file that is already
        missing or cannot be removed is logged and skipped.
        """
        profile = self.get_own_profile(user)
        references = self.media.all_references(profile)
        profile_id = profile.pk
        profile.delete()
        transaction.on_commit(partial(self._purge_files, profile_id, references))

    def _purge_files(self, profile_id, references):
        removed = self.store.delete_many(references)
        logger.info(
            "Deleted %s profile %s (%d of %d files removed)",
            self.kind.lower(), profile_id, removed, len(references),
        )

    # ------------------------------------------------------------------
    # Media
    # ------------------------------------------------------------------
    def upload_profile_picture(self, user, reference):
        """Replace the profile picture; the previous file is deleted."""
        profile = self.find_own_profile(user)
        if profile is None:
            self.store.delete(reference)
            raise NotFound(self.not_found_message)

        previous = profile.profile_picture
        profile.profile_picture = reference
        profile.save(update_fields=["profile_picture", "updated_at"])
        if previous and previous != reference:
            self.store.delete(previous)
        return profile

    def add_media(self, user, collection, references):
        return self.media.add_many(user, collection, references)

    def remove_media(self, user, collection, reference):
        return self.media.remove_one(user, collection, reference)

    def collection(self, name):
        return self.media.collection(name)


class MusicianService(ProfileService):
    model = Musician
    kind = "Musician"

    def update_availability(self, user, is_available):
        profile = self.get_own_profile(user)
        profile.is_available = is_available
        profile.save(update_fields=["is_available", "updated_at"])
        return profile


class OrganizerService(ProfileService):
    model = Organizer
    kind = "Organizer"

    def update_active_status(self, user, is_active):
        profile = self.get_own_profile(user)
        profile.is_active = is_active
        profile.save(update_fields=["is_active", "updated_at"])
        return profile

    def update_verification(self, target_user_id, is_verified):
        """Admin action: set ``is_verified`` on another user's profile."""
        profile = self.queryset().filter(user_id=target_user_id).first()
        if profile is None:
            raise NotFound(self.not_found_message)
        profile.is_verified = is_verified
        profile.save(update_fields=["is_verified", "updated_at"])
        logger.info(
            "Organizer %s verification set to %s", profile.pk, is_verified
        )
        return profile
