"""
Organizer URL configuration, mounted under /api/organizers/ by the root URL
config.  Owner routes require a token with the ``organizer`` role;
verification is reserved for admins.
"""

from django.urls import path
from rest_framework.permissions import IsAuthenticated

from apps.core.permissions import role_required

from .filters import OrganizerFilter
from .models import Organizer
from .serializers import (
    ActiveStatusSerializer,
    OrganizerSerializer,
    VerificationSerializer,
)
from .services import OrganizerService
from .views import (
    OwnProfileView,
    ProfileFlagView,
    ProfileMediaView,
    ProfilePictureView,
    ProfileSearchView,
    PublicProfileView,
    VerifyOrganizerView,
)

owner = {
    "service_class": OrganizerService,
    "serializer_class": OrganizerSerializer,
    "permission_classes": [IsAuthenticated, role_required("organizer")],
}
public = {"service_class": OrganizerService, "serializer_class": OrganizerSerializer}

urlpatterns = [
    # Profile
    path(
        "profile",
        OwnProfileView.as_view(
            created_message="Organizer profile created successfully", **owner
        ),
        name="organizer-profile",
    ),
    path("profile/<uuid:pk>", PublicProfileView.as_view(**public), name="organizer-detail"),
    path(
        "search",
        ProfileSearchView.as_view(
            model=Organizer,
            serializer_class=OrganizerSerializer,
            filterset_class=OrganizerFilter,
        ),
        name="organizer-search",
    ),
    path(
        "active-status",
        ProfileFlagView.as_view(
            flag_serializer_class=ActiveStatusSerializer,
            flag_field="is_active",
            service_method="update_active_status",
            success_message="Active status updated successfully",
            **owner,
        ),
        name="organizer-active-status",
    ),
    path(
        "verify",
        VerifyOrganizerView.as_view(
            verification_serializer_class=VerificationSerializer,
            service_class=OrganizerService,
            serializer_class=OrganizerSerializer,
            permission_classes=[IsAuthenticated, role_required("admin")],
        ),
        name="organizer-verify",
    ),

    # Media
    path("profile-picture", ProfilePictureView.as_view(**owner), name="organizer-profile-picture"),
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
        name="organizer-photos",
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
        name="organizer-videos",
    ),
    path(
        "verification-documents",
        ProfileMediaView.as_view(
            collection="verification_documents",
            upload_field="verificationDocuments",
            reference_field="documentUrl",
            added_message="Verification documents added successfully",
            removed_message="Verification document removed successfully",
            missing_reference_message="Document URL is required",
            **owner,
        ),
        name="organizer-documents",
    ),
]
