"""Requests that never reach a DRF view still get the JSON envelope."""

import pytest
from rest_framework import status

from apps.core.views import server_error


@pytest.mark.django_db
class TestNotFoundHandler:

    def test_malformed_profile_id(self, api_client):
        r = api_client.get("/api/musicians/profile/not-a-uuid")
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r["Content-Type"] == "application/json"
        assert r.json() == {"success": False, "message": "Not found."}

    def test_malformed_organizer_id(self, api_client):
        r = api_client.get("/api/organizers/profile/1234")
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r.json()["success"] is False

    def test_malformed_admin_user_id(self, site_admin_client):
        r = site_admin_client.delete("/api/admin/users/not-a-uuid")
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r.json()["success"] is False

    def test_unknown_path(self, api_client):
        r = api_client.get("/api/nowhere")
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r.json()["success"] is False


def test_server_error_envelope(rf):
    r = server_error(rf.get("/api/musicians/search"))
    assert r.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert r["Content-Type"] == "application/json"
