"""Pagination for list endpoints."""

from rest_framework.pagination import PageNumberPagination


class StandardPagination(PageNumberPagination):
    """Page number pagination that lets clients pick a page size."""

    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100


def paginated_response(request, view, items, serializer_class):
    """Serialize one page of ``items`` with count/next/previous links."""
    paginator = StandardPagination()
    page = paginator.paginate_queryset(items, request, view=view)
    return paginator.get_paginated_response(serializer_class(page, many=True).data)
