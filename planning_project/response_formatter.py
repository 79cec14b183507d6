"""
Standard API response envelope.

Every JSON body produced by the planning API has the shape:
{
    "status": "success" | "error",
    "message": "human readable message, may be empty",
    "data": {...} | [...] | null
}
Views build it explicitly with success_response()/error_response(); the
renderer wraps anything else (DRF errors, plain Response objects).
"""
from rest_framework.response import Response
from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer


ENVELOPE_KEYS = ('status', 'message', 'data')


def custom_exception_handler(exc, context):
    """Let DRF build the error response, then put it in the envelope."""
    # rest_framework.views loads DEFAULT_RENDERER_CLASSES, which is this module
    from rest_framework.views import exception_handler

    response = exception_handler(exc, context)
    if response is not None:
        response.data = format_error_response(response.data, response.status_code)
    return response


def flatten_errors(errors):
    """
    Turn DRF error structures into one readable line.

    {"items": [{"qty": ["Required"]}]} -> "items: qty: Required"
    """
    if isinstance(errors, dict):
        parts = []
        for field, value in errors.items():
            if field in ('detail', 'non_field_errors'):
                parts.append(flatten_errors(value))
            else:
                parts.append(f"{field}: {flatten_errors(value)}")
        return "; ".join(p for p in parts if p)
    if isinstance(errors, (list, tuple)):
        return ", ".join(flatten_errors(e) for e in errors if e)
    return str(errors)


def format_error_response(errors, status_code):
    """Wrap an error payload; field errors stay available under data."""
    data = errors if isinstance(errors, dict) and 'detail' not in errors else None
    return {
        "status": "error",
        "message": flatten_errors(errors),
        "data": data,
    }


class StandardizedJSONRenderer(JSONRenderer):
    """JSON renderer that wraps bodies not already in the envelope."""

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data, response.status_code)
            else:
                data = self.format_success_response(data)
        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        return isinstance(data, dict) and all(key in data for key in ENVELOPE_KEYS)

    def format_success_response(self, data):
        if isinstance(data, dict) and 'detail' in data:
            return {"status": "success", "message": str(data['detail']), "data": None}
        if data is None or (isinstance(data, dict) and not data):
            return {"status": "success", "message": "", "data": None}
        return {"status": "success", "message": "", "data": data}


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK):
    """
    Build a success envelope.

        return success_response(
            data=serializer.data,
            message="Planning copied successfully",
            status_code=status.HTTP_201_CREATED
        )
    """
    return Response({
        "status": "success",
        "message": message,
        "data": data
    }, status=status_code)


def error_response(message, data=None, status_code=http_status.HTTP_400_BAD_REQUEST):
    """
    Build an error envelope.

        return error_response(
            message="Planning not found",
            status_code=status.HTTP_404_NOT_FOUND
        )
    """
    return Response({
        "status": "error",
        "message": message,
        "data": data
    }, status=status_code)
