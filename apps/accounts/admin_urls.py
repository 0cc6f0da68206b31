"""Admin user-management routes, mounted under /api/admin/."""

from django.urls import path

from .admin_views import AdminUserDetailView, AdminUserListView

urlpatterns = [
    path("users", AdminUserListView.as_view(), name="admin-users"),
    path("users/<uuid:pk>", AdminUserDetailView.as_view(), name="admin-user-detail"),
]
