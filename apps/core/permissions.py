"""Role and ownership permissions: the authorization half of the access guard."""

from rest_framework.permissions import BasePermission


class HasRole(BasePermission):
    """
    Allow the request only when ``request.user.role`` is in ``allowed_roles``.

    Always list this after ``IsAuthenticated``: DRF turns a denied
    permission into 401 whenever no authenticator succeeded, so a bad token
    is reported as unauthenticated even on role-gated routes.
    """

    allowed_roles = ()

    @property
    def message(self):
        return (
            "Forbidden: This action requires one of the following roles: "
            + ", ".join(self.allowed_roles)
        )

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and getattr(user, "role", None) in self.allowed_roles
        )


def role_required(*roles):
    """Build a ``HasRole`` permission class bound to ``roles``."""
    name = "Requires" + "Or".join(role.title() for role in roles)
    return type(name, (HasRole,), {"allowed_roles": tuple(roles)})


class IsSelf(BasePermission):
    """
    Only the user identified by the ``pk`` URL kwarg may act on it.

    Used for account self-service routes such as ``PUT /auth/profile/<id>``.
    """

    message = "You can only update your own profile"

    def has_permission(self, request, view):
        return str(view.kwargs.get("pk")) == str(request.user.pk)
