"""
Permission checks for dashboard resources.
"""
from rest_framework.exceptions import PermissionDenied


def user_has_access(user, permission):
    """
    Check if a user may use a permission slug.

    Args:
        user: The current actor (UserAccount, AnonymousUser or any object
              exposing has_access(slug) or has_perm(slug))
        permission: Slug such as 'platform.posts', or None

    Returns:
        bool: True when permission is None or the user holds it
    """
    if permission is None:
        return True
    if user is None or not getattr(user, 'is_authenticated', False):
        return False
    if hasattr(user, 'has_access'):
        return bool(user.has_access(permission))
    return bool(user.has_perm(permission))


def check_resource_access(user, resource):
    """Raise PermissionDenied (403) unless the user holds the resource's permission."""
    if not user_has_access(user, resource.permission()):
        raise PermissionDenied(
            f"You do not have permission to access {resource.label()}."
        )
