"""
Pagination for function-based list views.

List views return every row in a success envelope; @auto_paginate slices the
"data" list of GET responses into a page:
{
    "status": "success",
    "message": "...",
    "data": {"count": ..., "next": ..., "previous": ..., "results": [...]}
}
"""
from functools import wraps

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardResultsSetPagination(PageNumberPagination):
    """?page=N&page_size=M, 20 per page by default, at most 100."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data, message=''):
        return Response({
            'status': 'success',
            'message': message,
            'data': {
                'count': self.page.paginator.count,
                'next': self.get_next_link(),
                'previous': self.get_previous_link(),
                'results': data
            }
        })


def _list_payload(response):
    """Return (rows, message) when the response carries a list, else (None, '')."""
    if not isinstance(response, Response):
        return None, ''
    data = response.data
    if isinstance(data, list):
        return data, ''
    if isinstance(data, dict) and isinstance(data.get('data'), list):
        return data['data'], data.get('message', '')
    return None, ''


def auto_paginate(view_func):
    """
    Paginate list responses of GET requests.

        @api_view(['GET', 'POST'])
        @auto_paginate
        def planning_list(request):
            ...
            return success_response(data=serializer.data)

    Detail responses and non-GET requests pass through untouched.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        response = view_func(request, *args, **kwargs)

        if request.method != 'GET' or response.status_code >= 400:
            return response

        rows, message = _list_payload(response)
        if rows is None:
            return response

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(rows, request)
        if page is None:
            return response
        return paginator.get_paginated_response(page, message=message)

    return wrapper
