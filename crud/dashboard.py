"""
Menu and permission store of the dashboard.

The Arbitrator publishes into a Dashboard:
    - menu elements, per surface (Dashboard.MENU_MAIN is the sidebar)
    - permission groups, as ItemPermission objects

Menus are rendered per request for the current user; permissions live for
the whole application.
"""
from fnmatch import fnmatch

from django.urls import reverse

from crud.permissions import user_has_access


class ItemPermission:
    """
    A named group of permissions.

    Usage:
        ItemPermission.group('CRUD').add_permission('platform.posts', 'Posts')
    """

    def __init__(self, group_name):
        self.group_name = group_name
        self.items = []

    @classmethod
    def group(cls, name):
        return cls(name)

    def add_permission(self, slug, description):
        self.items.append({'slug': slug, 'description': description})
        return self


class Menu:
    """
    Fluent menu element.

    A Menu with only a title acts as a group header; one with a route is a
    link. ``active`` holds URL patterns (fnmatch syntax) for which the link
    is highlighted.
    """

    def __init__(self, name=None):
        self.name = name
        self._title = None
        self._icon = None
        self._url = None
        self._active = []
        self._permission = None
        self._sort = 0
        self._can_see = True

    @classmethod
    def make(cls, name=None):
        return cls(name)

    def title(self, title):
        self._title = title
        return self

    def icon(self, icon):
        self._icon = icon
        return self

    def url(self, url):
        self._url = url
        return self

    def route(self, name, **params):
        self._url = reverse(name, kwargs=params)
        return self

    def active(self, patterns):
        if isinstance(patterns, str):
            patterns = [patterns]
        self._active = list(patterns)
        return self

    def permission(self, permission):
        self._permission = permission
        return self

    def sort(self, sort):
        self._sort = sort
        return self

    def can_see(self, visible=True):
        self._can_see = bool(visible)
        return self

    @property
    def is_visible(self):
        return self._can_see

    def get_url(self):
        return self._url

    def get_permission(self):
        return self._permission

    def get_sort(self):
        return self._sort

    def get_title(self):
        return self._title

    def is_active(self, path):
        if not path:
            return False
        return any(fnmatch(path, pattern) for pattern in self._active)

    def to_dict(self, path=None):
        return {
            'name': self.name,
            'title': self._title,
            'icon': self._icon,
            'url': self._url,
            'permission': self._permission,
            'sort': self._sort,
            'active': self.is_active(path),
        }

    def __repr__(self):
        return f"Menu(name={self.name!r}, title={self._title!r}, url={self._url!r})"


class Dashboard:
    MENU_MAIN = 'Main'
    MENU_PROFILE = 'Profile'

    def __init__(self, permissions=None):
        self._menus = {}
        # Shared by forks, see fork()
        self._permissions = permissions if permissions is not None else {}

    def fork(self):
        """
        A Dashboard sharing this one's permission store with an empty menu tree.

        Used to render navigation for a single request.
        """
        return Dashboard(permissions=self._permissions)

    # Menus

    def register_menu_element(self, surface, menu):
        self._menus.setdefault(surface, []).append(menu)
        return self

    def menu_elements(self, surface):
        return list(self._menus.get(surface, []))

    def render_menu(self, surface, user=None, path=None):
        """
        Visible elements of a surface, in registration order.

        An element is kept when it can be seen and the user holds its
        permission (elements without permission are always kept).
        """
        rendered = []
        for menu in self._menus.get(surface, []):
            if not menu.is_visible:
                continue
            permission = menu.get_permission()
            if permission is not None and (user is None or not user_has_access(user, permission)):
                continue
            rendered.append(menu.to_dict(path))
        return rendered

    # Permissions

    def register_permissions(self, item_permission):
        group = self._permissions.setdefault(item_permission.group_name, [])
        group.extend(item_permission.items)
        return self

    def get_permission(self):
        """All permissions grouped by group name."""
        return {name: list(items) for name, items in self._permissions.items()}

    def permission_slugs(self):
        """Permission slugs of every group, flattened one level."""
        return [
            permission['slug']
            for items in self._permissions.values()
            for permission in items
        ]

