"""
Pagination for resource lists.

Works with standardized response format:
{
    "status": "success",
    "message": "",
    "data": {"count": ..., "next": ..., "previous": ..., "results": [...], "resource": {...}}
}
"""
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class ResourcePagination(PageNumberPagination):
    """
    Page number pagination sized by the resource.

    Query Parameters:
    - page: Page number (default: 1)
    - page_size: Items per page (default: resource.per_page(), max: 100)
    """
    page_size_query_param = 'page_size'
    max_page_size = 100

    def __init__(self, resource):
        self.resource = resource
        self.page_size = resource.per_page()

    def get_paginated_response(self, data, screen=None):
        """
        Wrap the page in the standard response format.

        ``screen`` carries the list screen's labels, columns, filters and
        actions next to the rows.
        """
        return Response({
            'status': 'success',
            'message': '',
            'data': {
                'count': self.page.paginator.count,
                'next': self.get_next_link(),
                'previous': self.get_previous_link(),
                'results': data,
                'resource': screen,
            }
        })
