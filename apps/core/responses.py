"""Success-envelope helper shared by every API view."""

from rest_framework import status as http_status
from rest_framework.response import Response


def envelope(data=None, *, message=None, status=http_status.HTTP_200_OK):
    """
    Wrap a payload in the ``{success, message?, data?}`` envelope.

    ``message`` and ``data`` are omitted from the body when not given, so
    delete endpoints answer with just ``success`` and ``message``.
    """
    body = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return Response(body, status=status)
