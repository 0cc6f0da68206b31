"""
django-filter FilterSets for the public profile search endpoints.

Supports filtering by:
  - city / country (case-insensitive substring)
  - tag lists such as genres or event types (comma-separated, any-of)
  - status flags (isAvailable, isVerified, isActive)
"""

from django.db.models import Q
from django_filters import rest_framework as filters

from .models import Musician, Organizer, search_token


def filter_any_tag(queryset, name, value):
    """
    Keep profiles whose JSON list ``name`` holds any of the CSV ``value``.

    Each wanted tag is matched as a whole list element, ignoring case
    (Unicode case folding), so ``?genres=rock`` matches ``["Rock"]`` but
    not ``["Rockabilly"]``.  Matching runs against ``search_tags``.
    """
    tags = [tag.strip() for tag in value.split(",") if tag.strip()]
    if not tags:
        return queryset
    match = Q()
    for tag in tags:
        match |= Q(search_tags__contains=search_token(name, tag))
    return queryset.filter(match)


class MusicianFilter(filters.FilterSet):
    """
    Query parameters for GET /musicians/search.

    Examples:
        ?city=kathmandu&country=nepal
        ?genres=rock,jazz&instruments=guitar
        ?isAvailable=true
    """

    city = filters.CharFilter(field_name="location_city", lookup_expr="icontains")
    country = filters.CharFilter(field_name="location_country", lookup_expr="icontains")
    genres = filters.CharFilter(method="filter_tags")
    instruments = filters.CharFilter(method="filter_tags")
    isAvailable = filters.BooleanFilter(field_name="is_available")

    class Meta:
        model = Musician
        fields = ["city", "country", "genres", "instruments", "isAvailable"]

    def filter_tags(self, queryset, name, value):
        return filter_any_tag(queryset, name, value)


class OrganizerFilter(filters.FilterSet):
    """
    Query parameters for GET /organizers/search.

    Examples:
        ?organizationType=venue&eventTypes=wedding,concert
        ?isVerified=true&isActive=true
    """

    city = filters.CharFilter(field_name="location_city", lookup_expr="icontains")
    country = filters.CharFilter(field_name="location_country", lookup_expr="icontains")
    organizationType = filters.CharFilter(
        field_name="organization_type", lookup_expr="iexact"
    )
    eventTypes = filters.CharFilter(field_name="event_types", method="filter_tags")
    isVerified = filters.BooleanFilter(field_name="is_verified")
    isActive = filters.BooleanFilter(field_name="is_active")

    class Meta:
        model = Organizer
        fields = [
            "city",
            "country",
            "organizationType",
            "eventTypes",
            "isVerified",
            "isActive",
        ]

    def filter_tags(self, queryset, name, value):
        return filter_any_tag(queryset, name, value)
