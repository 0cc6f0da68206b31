"""
Typed API errors and the single boundary that renders them.

Services raise these (or DRF's built-in ``APIException`` subclasses);
``envelope_exception_handler`` is configured as DRF's ``EXCEPTION_HANDLER``
and maps every error kind to its status code and the response envelope::

    {"success": false, "message": "...", "errors": [{"path": ..., "message": ...}]}
"""

import logging

from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    AuthenticationFailed,
    NotFound,
    ValidationError,
)
from rest_framework.response import Response

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error kinds
# ---------------------------------------------------------------------------
class Conflict(APIException):
    """Uniqueness violation: duplicate email/username or duplicate profile."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


class CapacityExceeded(APIException):
    """A media collection would grow past its cap."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Media collection limit exceeded."
    default_code = "capacity_exceeded"


class ReferenceNotFound(NotFound):
    """A media reference is not part of the profile's collection."""

    default_detail = "Media reference not found in profile."
    default_code = "reference_not_found"


class InvalidCredentials(APIException):
    """
    Wrong password or a deactivated account at login.

    Raised from views without authenticators, so it carries its own 401
    instead of relying on ``AuthenticationFailed``.
    """

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"
    default_code = "invalid_credentials"


class TokenExpired(AuthenticationFailed):
    default_detail = "Unauthorized, Token Expired"
    default_code = "token_expired"


# ---------------------------------------------------------------------------
# Envelope rendering
# ---------------------------------------------------------------------------
def flatten_errors(detail, path=""):
    """
    Flatten DRF's nested error detail into ``[{"path", "message"}]``.

    Dict keys and list indexes are joined with dots, so a bad city inside
    the nested location object is reported at ``location.city``.
    """
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            key = "" if key == "non_field_errors" else str(key)
            child = f"{path}.{key}" if path and key else (key or path)
            errors.extend(flatten_errors(value, child))
        return errors

    if isinstance(detail, list):
        # A list of plain messages belongs to ``path`` itself; a list of
        # containers is indexed (ListField children, nested many=True).
        if all(not isinstance(item, (dict, list)) for item in detail):
            return [{"path": path, "message": str(item)} for item in detail]
        errors = []
        for index, item in enumerate(detail):
            if item:
                child = f"{path}.{index}" if path else str(index)
                errors.extend(flatten_errors(item, child))
        return errors

    return [{"path": path, "message": str(detail)}]


def envelope_exception_handler(exc, context):
    """
    DRF exception handler producing the ``{success, message, errors}`` envelope.

    Known API errors keep their status code.  Anything DRF does not
    recognise is logged with its traceback and reported as a bare 500 so
    internals never reach the client.
    """
    # Imported here: rest_framework.views resolves the authentication
    # classes, which import this module.
    from rest_framework.views import exception_handler

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "Unhandled error in %s", type(view).__name__ if view else "request"
        )
        return Response(
            {"success": False, "message": "Internal Server Error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        errors = flatten_errors(exc.detail)
        if isinstance(exc.detail, dict):
            message = "Validation failed"
        else:
            message = errors[0]["message"] if errors else "Validation failed"
        response.data = {"success": False, "message": message, "errors": errors}
        return response

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    response.data = {
        "success": False,
        "message": str(detail) if detail is not None else str(exc),
    }
    return response
