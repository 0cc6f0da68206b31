"""Admin configuration for the profiles app."""

from django.contrib import admin

from .models import Musician, Organizer


@admin.register(Musician)
class MusicianAdmin(admin.ModelAdmin):
    list_display = ("stage_name", "user", "location_city", "is_available", "created_at")
    list_filter = ("is_available", "location_country")
    search_fields = ("stage_name", "user__username", "location_city")
    readonly_fields = ("created_at", "updated_at")


@admin.register(Organizer)
class OrganizerAdmin(admin.ModelAdmin):
    list_display = (
        "organization_name", "user", "organization_type",
        "is_verified", "is_active", "created_at",
    )
    list_filter = ("is_verified", "is_active", "organization_type")
    search_fields = ("organization_name", "contact_person", "user__username")
    readonly_fields = ("created_at", "updated_at")
