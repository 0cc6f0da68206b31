import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Musician",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("profile_picture", models.CharField(blank=True, default="", max_length=500)),
                ("bio", models.TextField(blank=True, default="", max_length=1000)),
                ("phone", models.CharField(max_length=30)),
                ("location_city", models.CharField(max_length=100)),
                ("location_state", models.CharField(max_length=100)),
                ("location_country", models.CharField(max_length=100)),
                ("photos", models.JSONField(blank=True, default=list)),
                ("videos", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("stage_name", models.CharField(max_length=100)),
                ("genres", models.JSONField(default=list)),
                ("instruments", models.JSONField(default=list)),
                ("experience_years", models.PositiveSmallIntegerField(default=0)),
                (
                    "hourly_rate",
                    models.FloatField(
                        blank=True,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("audio_samples", models.JSONField(blank=True, default=list)),
                ("is_available", models.BooleanField(default=True)),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="musician_profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["location_city", "location_country"], name="musician_location_idx"),
                    models.Index(fields=["is_available"], name="musician_available_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Organizer",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("profile_picture", models.CharField(blank=True, default="", max_length=500)),
                ("bio", models.TextField(blank=True, default="", max_length=1000)),
                ("phone", models.CharField(max_length=30)),
                ("location_city", models.CharField(max_length=100)),
                ("location_state", models.CharField(max_length=100)),
                ("location_country", models.CharField(max_length=100)),
                ("photos", models.JSONField(blank=True, default=list)),
                ("videos", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("organization_name", models.CharField(max_length=200)),
                ("contact_person", models.CharField(max_length=100)),
                ("email", models.EmailField(max_length=254)),
                ("website", models.URLField(blank=True, default="")),
                ("organization_type", models.CharField(max_length=100)),
                ("event_types", models.JSONField(default=list)),
                ("verification_documents", models.JSONField(blank=True, default=list)),
                ("is_verified", models.BooleanField(default=False)),
                ("is_active", models.BooleanField(default=True)),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="organizer_profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["location_city", "location_country"], name="organizer_location_idx"),
                    models.Index(fields=["organization_type"], name="organizer_type_idx"),
                    models.Index(fields=["is_verified", "is_active"], name="organizer_status_idx"),
                ],
            },
        ),
    ]
