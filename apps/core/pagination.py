"""
Page/limit pagination for listing endpoints.

Query parameters:
  ?page=1    1-indexed page (default 1)
  ?limit=10  page size (default PAGE_SIZE, capped at ``max_limit``)

Unparseable or non-positive values fall back to the defaults, and a page
past the end yields an empty ``items`` list rather than a 404.
"""

import math

from rest_framework.pagination import BasePagination

from .responses import envelope


def _positive_int(raw, default):
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


class PageLimitPagination(BasePagination):
    """Slice a queryset into ``{items, total, page, totalPages}``."""

    default_limit = 10
    max_limit = 100

    def paginate_queryset(self, queryset, request, view=None):
        self.page = _positive_int(request.query_params.get("page"), 1)
        self.limit = min(
            _positive_int(request.query_params.get("limit"), self.default_limit),
            self.max_limit,
        )
        self.total = queryset.count()
        offset = (self.page - 1) * self.limit
        return list(queryset[offset:offset + self.limit])

    def get_paginated_data(self, items):
        return {
            "items": items,
            "total": self.total,
            "page": self.page,
            "totalPages": math.ceil(self.total / self.limit),
        }

    def get_paginated_response(self, data):
        return envelope(self.get_paginated_data(data))
