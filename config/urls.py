"""Root URL configuration: all API routes live under /api/."""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("apps.accounts.urls")),
    path("api/admin/", include("apps.accounts.admin_urls")),
    path("api/musicians/", include("apps.profiles.musician_urls")),
    path("api/organizers/", include("apps.profiles.organizer_urls")),
]

# Uploaded media is served by Django only in development
urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

# JSON envelope for requests no view handles (unknown path, malformed id)
handler404 = "apps.core.views.not_found"
handler500 = "apps.core.views.server_error"
