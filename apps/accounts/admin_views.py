"""
Admin user management under /api/admin/users.

Every route needs a bearer token with the ``admin`` role.  Creation and
update accept an optional multipart ``profilePicture``; deletion cascades
into the user's role profiles and their files.
"""

from rest_framework import generics, status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.core.permissions import role_required
from apps.core.responses import envelope

from .models import User
from .serializers import (
    AdminUserCreateSerializer,
    AdminUserUpdateSerializer,
    UserSerializer,
)
from .views import AccountServiceMixin, store_profile_picture

admin_only = [IsAuthenticated, role_required("admin")]


class AdminUserListView(AccountServiceMixin, generics.ListAPIView):
    """
    GET  /api/admin/users  → paginated ``{items, total, page, totalPages}``
    POST /api/admin/users  → create an account with any role
    """

    serializer_class = UserSerializer
    permission_classes = admin_only
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    filter_backends = []

    def get_queryset(self):
        return User.objects.order_by("-date_joined")

    def post(self, request):
        serializer = AdminUserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = self.get_service()
        picture = store_profile_picture(
            service, request, serializer.validated_data["role"]
        )
        user = service.create_user(serializer.validated_data, profile_picture=picture)
        return envelope(
            UserSerializer(user).data,
            message="User created successfully",
            status=status.HTTP_201_CREATED,
        )


class AdminUserDetailView(AccountServiceMixin, APIView):
    """GET / PUT / DELETE /api/admin/users/<id>."""

    permission_classes = admin_only
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get(self, request, pk):
        user = self.get_service().get_user(pk)
        return envelope(UserSerializer(user).data)

    def put(self, request, pk):
        serializer = AdminUserUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        service = self.get_service()
        user = service.get_user(pk)
        role = serializer.validated_data.get("role", user.role)
        picture = store_profile_picture(service, request, role)
        user = service.update_user(
            user, serializer.validated_data, profile_picture=picture
        )
        return envelope(UserSerializer(user).data, message="User updated successfully")

    def delete(self, request, pk):
        self.get_service().delete_user(pk)
        return envelope(message="User deleted successfully")
