"""
Root conftest: shared pytest fixtures and factory-boy factories.

Authenticated clients send a real ``Authorization: Bearer`` token issued by
``apps.accounts.tokens`` so the access guard runs end to end.  Every test
writes uploads into its own temporary MEDIA_ROOT.
"""

import pytest
from rest_framework.test import APIClient

import factory
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.accounts.tokens import issue_token
from apps.profiles.models import Musician, Organizer

User = get_user_model()

PASSWORD = "Secret123"


# ===================================================================
# Factories
# ===================================================================

class UserFactory(factory.django.DjangoModelFactory):
    """Create a User with a hashed password and unique username/email."""

    class Meta:
        model = User
        skip_postgeneration_save = True

    username = factory.Sequence(lambda n: f"testuser{n}")
    email = factory.LazyAttribute(lambda o: f"{o.username}@example.com")
    role = User.Role.MUSICIAN
    password = factory.PostGeneration(
        lambda obj, create, extracted, **kw: obj.set_password(extracted or PASSWORD)
        or obj.save()
    )


class MusicianFactory(factory.django.DjangoModelFactory):
    """Create a Musician profile owned by a musician-role user."""

    class Meta:
        model = Musician

    user = factory.SubFactory(UserFactory, role=User.Role.MUSICIAN)
    stage_name = factory.Sequence(lambda n: f"Stage Name {n}")
    phone = "9800000000"
    location_city = "Kathmandu"
    location_state = "Bagmati"
    location_country = "Nepal"
    genres = factory.LazyFunction(lambda: ["Rock"])
    instruments = factory.LazyFunction(lambda: ["Guitar"])
    experience_years = 3


class OrganizerFactory(factory.django.DjangoModelFactory):
    """Create an Organizer profile owned by an organizer-role user."""

    class Meta:
        model = Organizer

    user = factory.SubFactory(UserFactory, role=User.Role.ORGANIZER)
    organization_name = factory.Sequence(lambda n: f"Org {n}")
    contact_person = "Sita Sharma"
    phone = "9811111111"
    email = factory.LazyAttribute(lambda o: f"{o.user.username}@events.example.com")
    location_city = "Pokhara"
    location_state = "Gandaki"
    location_country = "Nepal"
    organization_type = "Venue"
    event_types = factory.LazyFunction(lambda: ["Concert"])


# ===================================================================
# Helpers
# ===================================================================

def bearer_client(user):
    """DRF client that authenticates ``user`` with a real bearer token."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")
    return client


def image_upload(name="photo.jpg", size=16):
    return SimpleUploadedFile(name, b"\xff\xd8\xff" + b"0" * size, content_type="image/jpeg")


def audio_upload(name="sample.mp3"):
    return SimpleUploadedFile(name, b"ID3" + b"0" * 16, content_type="audio/mpeg")


def document_upload(name="licence.pdf"):
    return SimpleUploadedFile(name, b"%PDF-1.4" + b"0" * 16, content_type="application/pdf")


# ===================================================================
# Fixtures
# ===================================================================

@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Isolated MEDIA_ROOT for every test."""
    settings.MEDIA_ROOT = str(tmp_path / "uploads")
    return tmp_path / "uploads"


@pytest.fixture
def api_client():
    """Unauthenticated DRF test client."""
    return APIClient()


@pytest.fixture
def musician_user(db):
    return UserFactory(role=User.Role.MUSICIAN)


@pytest.fixture
def organizer_user(db):
    return UserFactory(role=User.Role.ORGANIZER)


@pytest.fixture
def site_admin(db):
    return UserFactory(role=User.Role.ADMIN)


@pytest.fixture
def musician_client(musician_user):
    return bearer_client(musician_user)


@pytest.fixture
def organizer_client(organizer_user):
    return bearer_client(organizer_user)


@pytest.fixture
def site_admin_client(site_admin):
    """Bearer client for an ``admin``-role account (not a Django superuser)."""
    return bearer_client(site_admin)


@pytest.fixture
def musician(musician_user):
    """A Musician profile owned by ``musician_user``."""
    return MusicianFactory(user=musician_user)


@pytest.fixture
def organizer(organizer_user):
    """An Organizer profile owned by ``organizer_user``."""
    return OrganizerFactory(user=organizer_user)
