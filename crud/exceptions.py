"""
Dashboard errors.

Both derive from DRF's APIException so the project exception handler turns
them into the standard error payload with a fixed status code.
"""
from django.core.exceptions import ImproperlyConfigured
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound


class ConfigurationError(ImproperlyConfigured, APIException):
    """
    A resource is misconfigured (wrong model type or missing capability).

    Raised at registration time; never recoverable.
    """
    status_code = status.HTTP_501_NOT_IMPLEMENTED
    default_detail = 'The resource is not configured correctly.'
    default_code = 'not_implemented'


class ResourceNotFound(NotFound):
    """No registered resource matches the requested URI key."""
    default_detail = 'Resource not found.'
    default_code = 'not_found'
