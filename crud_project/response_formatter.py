"""
Custom Response Formatter for Standardized API Responses

Ensures all API responses follow the format:
{
    "status": "success" | "error",
    "message": "string message or empty",
    "data": {...} | [] | null
}

Error responses also carry "code", the APIException code of the failure
(e.g. "not_found", "not_implemented", "permission_denied").
"""
import logging

from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status as http_status
from rest_framework.exceptions import APIException
from rest_framework.renderers import JSONRenderer

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Format every error handled by DRF consistently.

    {
        "status": "error",
        "message": "Error message",
        "code": "not_found",
        "data": null | {"field": ["error"]}
    }
    """
    response = exception_handler(exc, context)

    if response is not None:
        code = exc.get_codes() if isinstance(exc, APIException) else None
        if not isinstance(code, str):
            code = 'invalid' if response.status_code == http_status.HTTP_400_BAD_REQUEST else None
        if response.status_code >= 500:
            logger.error(f"{exc.__class__.__name__}: {exc}")
        response.data = format_error_response(response.data, response.status_code, code)

    return response


def format_error_response(errors, status_code, code=None):
    """
    Format error responses into standard format.

    Handles various error formats:
    - {"detail": "message"} -> message, data null
    - {"field": ["error1", "error2"]} -> "field: error1, error2", data keeps the field errors
    - ["error1", "error2"] -> "error1, error2"
    """
    data = None

    if isinstance(errors, dict):
        if 'detail' in errors:
            message = str(errors['detail'])
        else:
            data = errors
            message = "; ".join(
                f"{field}: {format_field_errors(field_errors)}"
                for field, field_errors in errors.items()
            )
    elif isinstance(errors, list):
        message = ", ".join(str(e) for e in errors)
    else:
        message = str(errors)

    formatted = {
        "status": "error",
        "message": message,
        "data": data,
    }
    if code:
        formatted["code"] = code
    return formatted


def format_field_errors(field_errors):
    """Format the errors of one field (list, nested dict or single value)."""
    if isinstance(field_errors, list):
        return ', '.join(str(e) for e in field_errors)
    if isinstance(field_errors, dict):
        return "; ".join(
            f"{key}: {format_field_errors(value)}" for key, value in field_errors.items()
        )
    return str(field_errors)


class StandardizedJSONRenderer(JSONRenderer):
    """
    JSON renderer that wraps responses not already in the standard format.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        # 204 No Content has no body
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data, response.status_code)
            else:
                data = {"status": "success", "message": "", "data": data}

        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        """Check if response is already in our standard format."""
        return isinstance(data, dict) and {'status', 'message', 'data'} <= data.keys()


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK):
    """
    Helper function to create standardized success responses.

    Usage:
        return success_response(
            data=values,
            message=resource.create_toast_message(),
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
    Helper function to create standardized error responses.

    Usage:
        return error_response(
            message=resource.traffic_cop_message(),
            status_code=status.HTTP_409_CONFLICT
        )
    """
    return Response({
        "status": "error",
        "message": message,
        "data": data
    }, status=status_code)
