"""
Settings for the CRUD dashboard.

Configured through the ``CRUD`` dict in Django settings:

    CRUD = {
        'RESOURCES': ['blog.resources.PostResource'],
        'PERMISSION_GROUP': 'CRUD',
    }

Missing keys fall back to DEFAULTS.
"""
from django.conf import settings


DEFAULTS = {
    # Resource classes or dotted paths registered on crud.sites.site at startup
    'RESOURCES': [],
    # Group under which resource permissions are registered
    'PERMISSION_GROUP': 'CRUD',
    # Title of the navigation group for resources without navigation_title()
    'NAVIGATION_TITLE': 'Resources',
    'DEFAULT_SORT': 2000,
    'DEFAULT_ICON': 'folder',
    'DEFAULT_PER_PAGE': 20,
    # Reject two resource classes sharing a URI key
    'UNIQUE_URI_KEYS': True,
}


def crud_settings():
    """Return DEFAULTS overlaid with settings.CRUD."""
    return {**DEFAULTS, **getattr(settings, 'CRUD', {})}
