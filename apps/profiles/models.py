"""Musician and Organizer profiles: one of each at most per user."""

import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from apps.media.manager import MediaCollection
from apps.media.validators import AUDIO, DOCUMENT, IMAGE, VIDEO

TAG_SEPARATOR = "|"


def normalize_tag(tag):
    return tag.replace(TAG_SEPARATOR, " ").strip().casefold()


def search_token(field, tag):
    """The substring of ``search_tags`` that marks ``tag`` in list ``field``."""
    return f"{TAG_SEPARATOR}{field}={normalize_tag(tag)}{TAG_SEPARATOR}"


class Profile(models.Model):
    """
    Fields shared by both role profiles.

    The owning user is a one-to-one key, so the database itself rejects a
    second profile of the same type.  Media collections are JSON lists of
    references and only change through ``MediaAttachmentManager``.

    ``search_tags`` is derived on every save from the lists named in
    ``TAG_FIELDS``, case-folded and delimited as ``|genres=rock|genres=jazz|``,
    so tag search is a plain substring match on every database backend.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="%(class)s_profile",
    )
    profile_picture = models.CharField(max_length=500, blank=True, default="")
    bio = models.TextField(max_length=1000, blank=True, default="")
    phone = models.CharField(max_length=30)
    location_city = models.CharField(max_length=100)
    location_state = models.CharField(max_length=100)
    location_country = models.CharField(max_length=100)
    photos = models.JSONField(default=list, blank=True)
    videos = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    search_tags = models.TextField(blank=True, default="", editable=False)

    MEDIA_COLLECTIONS = {}
    TAG_FIELDS = ()

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def build_search_tags(self):
        tokens = [
            f"{field}={normalize_tag(tag)}"
            for field in self.TAG_FIELDS
            for tag in getattr(self, field) or []
        ]
        if not tokens:
            return ""
        return TAG_SEPARATOR + TAG_SEPARATOR.join(tokens) + TAG_SEPARATOR

    def save(self, *args, **kwargs):
        self.search_tags = self.build_search_tags()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and set(update_fields) & set(self.TAG_FIELDS):
            kwargs["update_fields"] = {*update_fields, "search_tags"}
        super().save(*args, **kwargs)


class Musician(Profile):
    """A performer's public profile with audio samples and availability."""

    stage_name = models.CharField(max_length=100)
    genres = models.JSONField(default=list)
    instruments = models.JSONField(default=list)
    experience_years = models.PositiveSmallIntegerField(default=0)
    hourly_rate = models.FloatField(
        null=True, blank=True, validators=[MinValueValidator(0)]
    )
    audio_samples = models.JSONField(default=list, blank=True)
    is_available = models.BooleanField(default=True)

    MEDIA_COLLECTIONS = {
        "photos": MediaCollection(
            field="photos", cap=10, folder="musicians/photos", rule=IMAGE,
            label="photos", item_label="Photo",
        ),
        "videos": MediaCollection(
            field="videos", cap=5, folder="musicians/videos", rule=VIDEO,
            label="videos", item_label="Video",
        ),
        "audio_samples": MediaCollection(
            field="audio_samples", cap=10, folder="musicians/audio", rule=AUDIO,
            label="audio samples", item_label="Audio sample",
        ),
    }
    TAG_FIELDS = ("genres", "instruments")
    PROFILE_PICTURE_FOLDER = "musicians/profile"

    class Meta(Profile.Meta):
        indexes = [
            models.Index(
                fields=["location_city", "location_country"],
                name="musician_location_idx",
            ),
            models.Index(fields=["is_available"], name="musician_available_idx"),
        ]

    def __str__(self):
        return self.stage_name


class Organizer(Profile):
    """An event organizer; verification is granted by admins only."""

    organization_name = models.CharField(max_length=200)
    contact_person = models.CharField(max_length=100)
    email = models.EmailField()
    website = models.URLField(blank=True, default="")
    organization_type = models.CharField(max_length=100)
    event_types = models.JSONField(default=list)
    verification_documents = models.JSONField(default=list, blank=True)
    is_verified = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    MEDIA_COLLECTIONS = {
        "photos": MediaCollection(
            field="photos", cap=20, folder="organizers/photos", rule=IMAGE,
            label="photos", item_label="Photo",
        ),
        "videos": MediaCollection(
            field="videos", cap=10, folder="organizers/videos", rule=VIDEO,
            label="videos", item_label="Video",
        ),
        "verification_documents": MediaCollection(
            field="verification_documents", cap=5, folder="organizers/documents",
            rule=DOCUMENT, label="verification documents", item_label="Document",
        ),
    }
    TAG_FIELDS = ("event_types",)
    PROFILE_PICTURE_FOLDER = "organizers/profile"

    class Meta(Profile.Meta):
        indexes = [
            models.Index(
                fields=["location_city", "location_country"],
                name="organizer_location_idx",
            ),
            models.Index(fields=["organization_type"], name="organizer_type_idx"),
            models.Index(
                fields=["is_verified", "is_active"], name="organizer_status_idx"
            ),
        ]

    def __str__(self):
        return self.organization_name
