"""
Views for musician and organizer profiles.

Every view is generic over a profile service class and its serializer;
``musician_urls`` and ``organizer_urls`` bind them to a role.  Owner routes
require a bearer token carrying that role; profile detail and search are
public.

Views stay thin: the request body is validated by a serializer, the work
is done by a service constructed per request with its ``MediaStore``, and
typed service errors are rendered by the envelope exception handler.
"""

import logging

from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from django_filters.rest_framework import DjangoFilterBackend

from apps.core.responses import envelope
from apps.media.storage import MediaStore
from apps.media.validators import IMAGE

logger = logging.getLogger(__name__)


class ProfileServiceMixin:
    """Builds the role's profile service for the current request."""

    service_class = None
    serializer_class = None

    def get_service(self):
        return self.service_class(store=MediaStore())

    def render(self, profile):
        return self.serializer_class(profile).data


# ---------------------------------------------------------------------------
# Own profile: GET / POST / PUT / DELETE
# ---------------------------------------------------------------------------
class OwnProfileView(ProfileServiceMixin, APIView):
    """
    GET    /<role>s/profile  → the caller's profile
    POST   /<role>s/profile  → create it (409 if one exists)
    PUT    /<role>s/profile  → partial update
    DELETE /<role>s/profile  → delete it with all its files
    """

    created_message = "Profile created successfully"

    def get(self, request):
        profile = self.get_service().get_own_profile(request.user)
        return envelope(self.render(profile))

    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = self.get_service().create_profile(
            request.user, serializer.validated_data
        )
        return envelope(
            self.render(profile),
            message=self.created_message,
            status=status.HTTP_201_CREATED,
        )

    def put(self, request):
        serializer = self.serializer_class(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        profile = self.get_service().update_profile(
            request.user, serializer.validated_data
        )
        return envelope(self.render(profile), message="Profile updated successfully")

    def delete(self, request):
        self.get_service().delete_profile(request.user)
        return envelope(message="Profile deleted successfully")


# ---------------------------------------------------------------------------
# Public read / search
# ---------------------------------------------------------------------------
class PublicProfileView(ProfileServiceMixin, APIView):
    """GET /<role>s/profile/<id>: any profile by its id, no token needed."""

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, pk):
        profile = self.get_service().get_profile_by_id(pk)
        return envelope(self.render(profile))


class ProfileSearchView(generics.ListAPIView):
    """
    GET /<role>s/search: filtered, paginated profile listing.

    Query parameters come from ``filterset_class``; ``?page`` and
    ``?limit`` are handled by ``PageLimitPagination``.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    filter_backends = [DjangoFilterBackend]
    filterset_class = None
    model = None

    def get_queryset(self):
        return self.model.objects.select_related("user").order_by("-created_at")


# ---------------------------------------------------------------------------
# Status flags
# ---------------------------------------------------------------------------
class ProfileFlagView(ProfileServiceMixin, APIView):
    """
    PATCH a single boolean flag on the caller's profile.

    ``flag_serializer_class`` validates the body and ``service_method``
    names the service call that applies it.
    """

    flag_serializer_class = None
    flag_field = None
    service_method = None
    success_message = None

    def patch(self, request):
        serializer = self.flag_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        update = getattr(self.get_service(), self.service_method)
        profile = update(request.user, serializer.validated_data[self.flag_field])
        return envelope(self.render(profile), message=self.success_message)


class VerifyOrganizerView(ProfileServiceMixin, APIView):
    """PATCH /organizers/verify: admin sets ``isVerified`` on any organizer."""

    verification_serializer_class = None

    def patch(self, request):
        serializer = self.verification_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = self.get_service().update_verification(
            serializer.validated_data["userId"],
            serializer.validated_data["is_verified"],
        )
        return envelope(
            self.render(profile),
            message="Verification status updated successfully",
        )


# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------
class ProfilePictureView(ProfileServiceMixin, APIView):
    """POST /<role>s/profile-picture: multipart field ``profilePicture``."""

    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        upload = request.FILES.get("profilePicture")
        if not upload:
            raise ValidationError("No file uploaded")

        service = self.get_service()
        reference = service.store.save_upload(
            service.model.PROFILE_PICTURE_FOLDER, upload, IMAGE
        )
        profile = service.upload_profile_picture(request.user, reference)
        return envelope(
            self.render(profile), message="Profile picture uploaded successfully"
        )


class ProfileMediaView(ProfileServiceMixin, APIView):
    """
    POST stores every file sent in ``upload_field`` and appends them
    to ``collection``, all or nothing.
    DELETE removes the file named by ``reference_field`` in the body.

    Configured per route through ``as_view(...)`` keyword arguments.
    """

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    collection = None
    upload_field = None
    reference_field = None
    added_message = None
    removed_message = None
    missing_reference_message = None

    def post(self, request):
        uploads = request.FILES.getlist(self.upload_field)
        if not uploads:
            raise ValidationError("No files uploaded")

        service = self.get_service()
        collection = service.collection(self.collection)
        references = service.store.save_uploads(
            collection.folder, uploads, collection.rule
        )
        profile = service.add_media(request.user, self.collection, references)
        return envelope(self.render(profile), message=self.added_message)

    def delete(self, request):
        reference = request.data.get(self.reference_field)
        if not reference or not isinstance(reference, str):
            raise ValidationError(self.missing_reference_message)

        profile = self.get_service().remove_media(
            request.user, self.collection, reference
        )
        return envelope(self.render(profile), message=self.removed_message)
