from django.contrib.auth import get_user_model

from core.user_accounts.models import Role


def create_test_user(email='user@example.com', permissions=None, user_type_name='user', roles=None):
    """Create a user holding the given permission slugs (list or slug -> bool dict)"""
    if isinstance(permissions, (list, tuple)):
        permissions = {slug: True for slug in permissions}

    user = get_user_model().objects.create_user(
        email=email,
        name=email.split('@')[0].title(),
        password='TestPass123',
        user_type_name=user_type_name,
        permissions=permissions or {},
    )
    for slug, granted in (roles or {}).items():
        role, _ = Role.objects.get_or_create(slug=slug, defaults={'name': slug.title(), 'permissions': granted})
        user.roles.add(role)
    return user


def create_admin_user(email='admin@example.com'):
    """Helper to create an admin, who bypasses every permission check"""
    return create_test_user(email=email, user_type_name='admin')
