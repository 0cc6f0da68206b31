"""Unit tests for the role and ownership permissions."""

from types import SimpleNamespace

from apps.core.permissions import HasRole, IsSelf, role_required


def make_request(role=None, authenticated=True, pk="1"):
    user = SimpleNamespace(is_authenticated=authenticated, role=role, pk=pk)
    return SimpleNamespace(user=user)


class TestRoleRequired:

    def test_allows_listed_role(self):
        permission = role_required("musician")()
        assert permission.has_permission(make_request("musician"), view=None)

    def test_denies_other_role(self):
        permission = role_required("musician")()
        assert not permission.has_permission(make_request("organizer"), view=None)

    def test_denies_anonymous(self):
        permission = role_required("admin")()
        assert not permission.has_permission(
            make_request("admin", authenticated=False), view=None
        )

    def test_message_lists_exactly_the_allowed_roles(self):
        permission = role_required("organizer", "admin")()
        assert permission.message == (
            "Forbidden: This action requires one of the following roles: "
            "organizer, admin"
        )

    def test_builds_hasrole_subclass(self):
        cls = role_required("admin")
        assert issubclass(cls, HasRole)
        assert cls.allowed_roles == ("admin",)


class TestIsSelf:

    def test_same_id(self):
        view = SimpleNamespace(kwargs={"pk": "abc"})
        assert IsSelf().has_permission(make_request(pk="abc"), view)

    def test_other_id(self):
        view = SimpleNamespace(kwargs={"pk": "abc"})
        assert not IsSelf().has_permission(make_request(pk="xyz"), view)
