"""
Musician URL configuration, mounted under /api/musicians/ by the root URL
config.  Owner routes require a token with the ``musician`` role.
"""

from django.urls import path
from rest_framework.permissions import IsAuthenticated

from apps.core.permissions import role_required

from .filters import MusicianFilter
from .models import Musician
from .serializers import AvailabilitySerializer, MusicianSerializer
from .services import MusicianService
from .views import (
    OwnProfileView,
    ProfileFlagView,
    ProfileMediaView,
    ProfilePictureView,
    ProfileSearchView,
    PublicProfileView,
)

owner = {
    "service_class": MusicianService,
    "serializer_class": MusicianSerializer,
    "permission_classes": [IsAuthenticated, role_required("musician")],
}
public = {"service_class": MusicianService, "serializer_class": MusicianSerializer}

urlpatterns = [
    # Profile
    path(
        "profile",
        OwnProfileView.as_view(
            created_message="Musician profile created successfully", **owner
        ),
        name="musician-profile",
    ),
    path("profile/<uuid:pk>", PublicProfileView.as_view(**public), name="musician-detail"),
    path(
        "search",
        ProfileSearchView.as_view(
            model=Musician,
            serializer_class=MusicianSerializer,
            filterset_class=MusicianFilter,
        ),
        name="musician-search",
    ),
    path(
        "availability",
        ProfileFlagView.as_view(
            flag_serializer_class=AvailabilitySerializer,
            flag_field="is_available",
            service_method="update_availability",
            success_message="Availability updated successfully",
            **owner,
        ),
        name="musician-availability",
    ),

    # Media
    path("profile-picture", ProfilePictureView.as_view(**owner), name="musician-profile-picture"),
    path(
        "photos",
        ProfileMediaView.as_view(
            collection="photos",
            upload_field="photos",
            reference_field="photoUrl",
            added_message="Photos added successfully",
            removed_message="Photo removed successfully",
            missing_reference_message="Photo URL is required",
            **owner,
        ),
        name="musician-photos",
    ),
    path(
        "videos",
        ProfileMediaView.as_view(
            collection="videos",
            upload_field="videos",
            reference_field="videoUrl",
            added_message="Videos added successfully",
            removed_message="Video removed successfully",
            missing_reference_message="Video URL is required",
            **owner,
        ),
        name="musician-videos",
    ),
    path(
        "audio",
        ProfileMediaView.as_view(
            collection="audio_samples",
            upload_field="audioSamples",
            reference_field="audioUrl",
            added_message="Audio samples added successfully",
            removed_message="Audio sample removed successfully",
            missing_reference_message="Audio URL is required",
            **owner,
        ),
        name="musician-audio",
    ),
]
