"""
HTTP headers for API responses.

GET requests under /api/ may be cached by shared caches for a minute and
served stale while revalidating. Every API response gets the same set of
security headers. The middleware never short-circuits a request.
"""

from django.utils.cache import patch_vary_headers

API_PREFIX = '/api/'

CACHE_CONTROL = 'public, s-maxage=60, stale-while-revalidate=300'

SECURITY_HEADERS = {
    'Vary': 'Accept-Encoding',
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'DENY',
    'X-XSS-Protection': '1; mode=block',
}


def api_response_headers(method, path):
    """Header set for a request; empty for non-API paths."""
    if not path.startswith(API_PREFIX):
        return {}
    headers = {}
    if method == 'GET':
        headers['Cache-Control'] = CACHE_CONTROL
    headers.update(SECURITY_HEADERS)
    return headers


class ResponseHeadersMiddleware:
    """Apply api_response_headers() to every outgoing response."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        for name, value in api_response_headers(request.method, request.path).items():
            if name == 'Vary':
                # keep Accept/Cookie added by DRF and the session middleware
                patch_vary_headers(response, [value])
            else:
                response[name] = value
        return response
