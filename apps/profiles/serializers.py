"""
Serializers for musician and organizer profiles.

The wire format is camelCase with a nested ``location`` object, mapped onto
the flat model columns through ``source``.  Media collections and the
profile picture are read-only here: they change only through the media
endpoints, which enforce the collection caps.
"""

from rest_framework import serializers

from apps.media.fields import MediaReferenceField, MediaReferenceListField

from .models import Musician, Organizer


# ---------------------------------------------------------------------------
# Shared pieces
# ---------------------------------------------------------------------------
class StrictBooleanField(serializers.BooleanField):
    """Accept only JSON ``true`` / ``false``; ``"yes"`` or ``1`` are rejected."""

    default_error_messages = {"invalid": "{field} must be a boolean"}

    def __init__(self, *, label_name, **kwargs):
        self.label_name = label_name
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail("invalid", field=self.label_name)
        return data


class LocationSerializer(serializers.Serializer):
    """``{city, state, country}`` stored as ``location_*`` columns."""

    city = serializers.CharField(
        source="location_city", max_length=100,
        error_messages={"blank": "City is required", "required": "City is required"},
    )
    state = serializers.CharField(
        source="location_state", max_length=100,
        error_messages={"blank": "State is required", "required": "State is required"},
    )
    country = serializers.CharField(
        source="location_country", max_length=100,
        error_messages={"blank": "Country is required", "required": "Country is required"},
    )


def tag_list(label, **kwargs):
    """A non-empty list of short strings, e.g. genres or event types."""
    return serializers.ListField(
        child=serializers.CharField(max_length=100),
        min_length=1,
        error_messages={
            "min_length": f"At least one {label} is required",
            "empty": f"At least one {label} is required",
        },
        **kwargs,
    )


def unique_in_order(values):
    return list(dict.fromkeys(values))


class ProfileSerializer(serializers.ModelSerializer):
    """Fields shared by both role profiles."""

    userId = serializers.CharField(source="user_id", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    profilePicture = MediaReferenceField(source="profile_picture")
    bio = serializers.CharField(
        max_length=1000, required=False, allow_blank=True,
        error_messages={"max_length": "Bio cannot exceed 1000 characters"},
    )
    phone = serializers.CharField(
        min_length=10, max_length=30,
        error_messages={"min_length": "Phone number must be at least 10 characters"},
    )
    location = LocationSerializer(source="*")
    photos = MediaReferenceListField()
    videos = MediaReferenceListField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    common_fields = [
        "id",
        "userId",
        "username",
        "profilePicture",
        "bio",
        "phone",
        "location",
        "photos",
        "videos",
        "createdAt",
        "updatedAt",
    ]


# ---------------------------------------------------------------------------
# Musician
# ---------------------------------------------------------------------------
class MusicianSerializer(ProfileSerializer):
    stageName = serializers.CharField(
        source="stage_name", max_length=100,
        error_messages={
            "blank": "Stage name is required",
            "max_length": "Stage name too long",
        },
    )
    genres = tag_list("genre")
    instruments = tag_list("instrument")
    experienceYears = serializers.IntegerField(
        source="experience_years", min_value=0, max_value=100,
        error_messages={"min_value": "Experience years cannot be negative"},
    )
    hourlyRate = serializers.FloatField(
        source="hourly_rate", min_value=0, required=False, allow_null=True,
        error_messages={"min_value": "Hourly rate cannot be negative"},
    )
    audioSamples = MediaReferenceListField(source="audio_samples")
    isAvailable = StrictBooleanField(
        source="is_available", label_name="isAvailable", required=False
    )

    class Meta:
        model = Musician
        fields = ProfileSerializer.common_fields + [
            "stageName",
            "genres",
            "instruments",
            "experienceYears",
            "hourlyRate",
            "audioSamples",
            "isAvailable",
        ]
        read_only_fields = ["id"]

    def validate_genres(self, value):
        return unique_in_order(value)

    def validate_instruments(self, value):
        return unique_in_order(value)


class AvailabilitySerializer(serializers.Serializer):
    isAvailable = StrictBooleanField(source="is_available", label_name="isAvailable")


# ---------------------------------------------------------------------------
# Organizer
# ---------------------------------------------------------------------------
class OrganizerSerializer(ProfileSerializer):
    organizationName = serializers.CharField(
        source="organization_name", max_length=200,
        error_messages={
            "blank": "Organization name is required",
            "max_length": "Organization name too long",
        },
    )
    contactPerson = serializers.CharField(
        source="contact_person", max_length=100,
        error_messages={
            "blank": "Contact person name is required",
            "max_length": "Name too long",
        },
    )
    email = serializers.EmailField(
        error_messages={"invalid": "Invalid email address"},
    )
    website = serializers.URLField(
        required=False, allow_blank=True,
        error_messages={"invalid": "Invalid URL"},
    )
    organizationType = serializers.CharField(
        source="organization_type", max_length=100,
        error_messages={"blank": "Organization type is required"},
    )
    eventTypes = tag_list("event type", source="event_types")
    verificationDocuments = MediaReferenceListField(source="verification_documents")
    isVerified = serializers.BooleanField(source="is_verified", read_only=True)
    isActive = StrictBooleanField(
        source="is_active", label_name="isActive", required=False
    )

    class Meta:
        model = Organizer
        fields = ProfileSerializer.common_fields + [
            "organizationName",
            "contactPerson",
            "email",
            "website",
            "organizationType",
            "eventTypes",
            "verificationDocuments",
            "isVerified",
            "isActive",
        ]
        read_only_fields = ["id"]

    def validate_email(self, value):
        return value.lower().strip()

    def validate_eventTypes(self, value):
        return unique_in_order(value)


class ActiveStatusSerializer(serializers.Serializer):
    isActive = StrictBooleanField(source="is_active", label_name="isActive")


class VerificationSerializer(serializers.Serializer):
    """Admin body for ``PATCH /organizers/verify``."""

    userId = serializers.UUIDField(
        error_messages={
            "required": "User ID is required",
            "null": "User ID is required",
            "invalid": "User ID must be a valid UUID",
        },
    )
    isVerified = StrictBooleanField(source="is_verified", label_name="isVerified")
