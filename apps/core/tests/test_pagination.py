"""Tests for page/limit pagination."""

import pytest
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from apps.accounts.models import User
from apps.core.pagination import PageLimitPagination
from conftest import UserFactory


def paginate(query):
    request = Request(APIRequestFactory().get("/", query))
    paginator = PageLimitPagination()
    page = paginator.paginate_queryset(User.objects.order_by("username"), request)
    return paginator.get_paginated_data([u.username for u in page])


@pytest.mark.django_db
class TestPageLimitPagination:

    @pytest.fixture(autouse=True)
    def users(self):
        return UserFactory.create_batch(12)

    def test_defaults(self):
        data = paginate({})
        assert data["page"] == 1
        assert data["total"] == 12
        assert data["totalPages"] == 2
        assert len(data["items"]) == 10

    def test_second_page(self):
        data = paginate({"page": 2, "limit": 5})
        assert len(data["items"]) == 5
        assert data["totalPages"] == 3

    def test_page_past_the_end_is_empty(self):
        data = paginate({"page": 9})
        assert data["items"] == []
        assert data["total"] == 12

    @pytest.mark.parametrize("query", [{"page": "abc"}, {"page": 0}, {"limit": "-3"}])
    def test_invalid_values_fall_back_to_defaults(self, query):
        data = paginate(query)
        assert data["page"] == 1
        assert len(data["items"]) == 10

    def test_limit_is_capped(self):
        data = paginate({"limit": 1000})
        assert data["totalPages"] == 1
        assert len(data["items"]) == 12
