"""Serializer fields that render stored media references as public URLs."""

from rest_framework import serializers

from .storage import media_url


class MediaReferenceField(serializers.CharField):
    """Read a storage-relative reference and render it under MEDIA_URL."""

    def __init__(self, **kwargs):
        kwargs.setdefault("read_only", True)
        super().__init__(**kwargs)

    def to_representation(self, value):
        return media_url(value)


class MediaReferenceListField(serializers.ListField):
    """A read-only media collection, rendered in stored order."""

    def __init__(self, **kwargs):
        kwargs.setdefault("read_only", True)
        kwargs.setdefault("child", MediaReferenceField())
        super().__init__(**kwargs)
