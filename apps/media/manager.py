"""
Media attachment manager: keeps a profile's reference lists and the files
on disk consistent.

A profile model declares its collections in ``MEDIA_COLLECTIONS``::

    MEDIA_COLLECTIONS = {
        "photos": MediaCollection("photos", cap=10, folder="musicians/photos", ...),
    }

``add_many`` appends freshly stored references under a row lock so two
concurrent uploads cannot both pass the capacity check; whenever it fails
(missing profile, cap exceeded, database error) the new files are deleted
before the error propagates.  ``remove_one`` matches the caller's reference
against the stored ones after normalising both, then deletes the file and
drops the reference.
"""

from dataclasses import dataclass

from django.db import transaction
from rest_framework.exceptions import NotFound

from apps.core.exceptions import CapacityExceeded, ReferenceNotFound

from .storage import MediaStore, normalize_reference
from .validators import UploadRule


@dataclass(frozen=True)
class MediaCollection:
    """A capped, ordered list of media references on a profile."""

    field: str
    cap: int
    folder: str
    rule: UploadRule
    label: str
    item_label: str

    @property
    def capacity_message(self):
        return f"Cannot exceed {self.cap} {self.label} limit"

    @property
    def missing_message(self):
        return f"{self.item_label} not found in profile"


class MediaAttachmentManager:
    """Capacity-checked add / normalised remove for one profile model."""

    def __init__(self, model, *, not_found_message, store=None):
        self.model = model
        self.not_found_message = not_found_message
        self.store = store if store is not None else MediaStore()

    def collection(self, name):
        try:
            return self.model.MEDIA_COLLECTIONS[name]
        except KeyError:
            raise ValueError(
                f"{self.model.__name__} has no media collection '{name}'"
            ) from None

    def add_many(self, owner, collection_name, references):
        """
        Append ``references`` to the owner's collection, all or nothing.

        Raises
        ------
        NotFound
            If ``owner`` has no profile.
        CapacityExceeded
            If the collection would exceed its cap.
        """
        collection = self.collection(collection_name)
        references = list(references)

        try:
            with transaction.atomic():
                profile = (
                    self.model.objects.select_for_update()
                    .filter(user=owner)
                    .first()
                )
                if profile is None:
                    raise NotFound(self.not_found_message)

                current = list(getattr(profile, collection.field))
                if len(current) + len(references) > collection.cap:
                    raise CapacityExceeded(collection.capacity_message)

                setattr(profile, collection.field, current + references)
                profile.save(update_fields=[collection.field, "updated_at"])
        except Exception:
            self.store.delete_many(references)
            raise

        return profile

    def remove_one(self, owner, collection_name, reference):
        """
        Delete one stored file and drop its reference from the collection.

        Raises
        ------
        NotFound
            If ``owner`` has no profile.
        ReferenceNotFound
            If no stored reference matches ``reference`` once normalised.
        """
        collection = self.collection(collection_name)
        wanted = normalize_reference(reference)

        with transaction.atomic():
            profile = (
                self.model.objects.select_for_update().filter(user=owner).first()
            )
            if profile is None:
                raise NotFound(self.not_found_message)

            current = list(getattr(profile, collection.field))
            match = next(
                (ref for ref in current if wanted and normalize_reference(ref) == wanted),
                None,
            )
            if match is None:
                raise ReferenceNotFound(collection.missing_message)

            current.remove(match)
            setattr(profile, collection.field, current)
            profile.save(update_fields=[collection.field, "updated_at"])

        self.store.delete(match)
        return profile

    def all_references(self, profile):
        """Profile picture plus every reference in every collection."""
        references = [profile.profile_picture] if profile.profile_picture else []
        for collection in self.model.MEDIA_COLLECTIONS.values():
            references.extend(getattr(profile, collection.field))
        return references
