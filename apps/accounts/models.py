"""Custom User model with UUID primary key, marketplace role, and picture."""

import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom User model extending Django's AbstractUser.

    Uses UUID as primary key (avoids sequential ID enumeration).  Every
    account carries a marketplace ``role`` that drives route access.
    Email is required, unique, and stored lower-cased: it is the login
    identifier.  ``profile_picture`` holds a media reference relative to
    MEDIA_ROOT.
    """

    class Role(models.TextChoices):
        MUSICIAN = "musician", "Musician"
        ORGANIZER = "organizer", "Organizer"
        ADMIN = "admin", "Admin"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, blank=False)
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.MUSICIAN,
    )
    profile_picture = models.CharField(
        max_length=500,
        blank=True,
        default="",
        help_text="Media reference relative to MEDIA_ROOT.",
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date_joined"]

    def __str__(self):
        return f"{self.username} ({self.email})"

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.lower().strip()
        super().save(*args, **kwargs)
