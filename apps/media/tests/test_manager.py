"""Tests for capacity-checked adds and normalised removal of media references."""

import pytest
from rest_framework.exceptions import NotFound

from apps.core.exceptions import CapacityExceeded, ReferenceNotFound
from apps.media.manager import MediaAttachmentManager
from apps.media.storage import MediaStore
from apps.media.validators import IMAGE
from apps.profiles.models import Musician, Organizer
from conftest import UserFactory, image_upload


@pytest.fixture
def store():
    return MediaStore()


@pytest.fixture
def manager(store):
    return MediaAttachmentManager(
        Musician, not_found_message="Musician profile not found", store=store
    )


def stored(store, count, folder="musicians/photos"):
    return store.save_uploads(folder, [image_upload() for _ in range(count)], IMAGE)


@pytest.mark.django_db
class TestAddMany:

    def test_appends_in_order(self, manager, store, musician):
        first = stored(store, 2)
        second = stored(store, 1)
        manager.add_many(musician.user, "photos", first)
        profile = manager.add_many(musician.user, "photos", second)
        assert profile.photos == first + second

    def test_reaching_the_cap_exactly_is_allowed(self, manager, store, musician):
        musician.photos = [f"musicians/photos/{i}.jpg" for i in range(8)]
        musician.save()
        profile = manager.add_many(musician.user, "photos", stored(store, 2))
        assert len(profile.photos) == 10

    def test_over_cap_rejected_and_new_files_purged(self, manager, store, musician):
        existing = [f"musicians/photos/{i}.jpg" for i in range(9)]
        musician.photos = existing
        musician.save()
        new = stored(store, 2)

        with pytest.raises(CapacityExceeded, match="Cannot exceed 10 photos limit"):
            manager.add_many(musician.user, "photos", new)

        musician.refresh_from_db()
        assert musician.photos == existing
        assert not any(store.exists(ref) for ref in new)

    def test_missing_profile_purges_files(self, manager, store, db):
        new = stored(store, 1)
        with pytest.raises(NotFound, match="Musician profile not found"):
            manager.add_many(UserFactory(), "photos", new)
        assert not store.exists(new[0])

    def test_caps_differ_per_collection(self, store, organizer):
        manager = MediaAttachmentManager(
            Organizer, not_found_message="Organizer profile not found", store=store
        )
        docs = stored(store, 6, folder="organizers/documents")
        with pytest.raises(CapacityExceeded, match="Cannot exceed 5 verification documents limit"):
            manager.add_many(organizer.user, "verification_documents", docs)

    def test_unknown_collection(self, manager):
        with pytest.raises(ValueError):
            manager.collection("posters")


@pytest.mark.django_db
class TestRemoveOne:

    def test_removes_by_public_url(self, manager, store, musician):
        refs = stored(store, 2)
        manager.add_many(musician.user, "photos", refs)

        profile = manager.remove_one(
            musician.user, "photos", f"http://localhost:8000/uploads/{refs[0]}"
        )
        assert profile.photos == [refs[1]]
        assert not store.exists(refs[0])
        assert store.exists(refs[1])

    def test_unknown_reference(self, manager, store, musician):
        manager.add_many(musician.user, "photos", stored(store, 1))
        with pytest.raises(ReferenceNotFound, match="Photo not found in profile"):
            manager.remove_one(musician.user, "photos", "musicians/photos/other.jpg")

    def test_file_name_alone_does_not_match(self, manager, store, musician):
        refs = stored(store, 1)
        manager.add_many(musician.user, "photos", refs)
        with pytest.raises(ReferenceNotFound):
            manager.remove_one(musician.user, "photos", refs[0].rsplit("/", 1)[1])
        assert store.exists(refs[0])

    def test_missing_file_still_drops_reference(self, manager, musician):
        musician.photos = ["musicians/photos/vanished.jpg"]
        musician.save()
        profile = manager.remove_one(
            musician.user, "photos", "/uploads/musicians/photos/vanished.jpg"
        )
        assert profile.photos == []


@pytest.mark.django_db
def test_all_references_includes_picture_and_collections(manager, musician):
    musician.profile_picture = "musicians/profile/p.jpg"
    musician.photos = ["musicians/photos/a.jpg"]
    musician.audio_samples = ["musicians/audio/a.mp3"]
    assert manager.all_references(musician) == [
        "musicians/profile/p.jpg",
        "musicians/photos/a.jpg",
        "musicians/audio/a.mp3",
    ]
