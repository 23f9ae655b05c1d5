"""
Registry of dashboard resources.

The Arbitrator holds the registered resources, rejects misconfigured ones at
registration time, publishes their menu entries and permissions on boot and
resolves a resource from its URI key for each request.

Lifetime: one Arbitrator per application (see crud.sites.site). Tests build
their own.
"""
import logging
from collections import defaultdict

from django.db import models
from django.urls import reverse
from django.utils.module_loading import import_string
from django.utils.translation import gettext as _

from core.base.models import FilterableMixin
from crud.conf import crud_settings
from crud.dashboard import Dashboard, ItemPermission, Menu
from crud.exceptions import ConfigurationError, ResourceNotFound
from crud.permissions import user_has_access
from crud.resource import Resource
from crud.text import natural_key

logger = logging.getLogger(__name__)


def resolve_resource(entry):
    """
    Default resolver: turn a registration entry into a Resource instance.

    Accepts an instance, a Resource subclass or a dotted path to one.
    """
    if isinstance(entry, str):
        entry = import_string(entry)
    if isinstance(entry, type):
        entry = entry()
    return entry


def _group_sort_key(title):
    # Default group first, named groups by title, hidden resources last
    if title is None:
        return (0, '')
    if title is False:
        return (2, '')
    return (1, str(title))


class Arbitrator:

    def __init__(self, dashboard=None, resolver=None, unique_uri_keys=None):
        """
        Args:
            dashboard: Menu/permission store to publish into
            resolver: Callable turning a registration entry into a Resource
            unique_uri_keys: Reject two resource classes sharing a URI key.
                             Defaults to CRUD['UNIQUE_URI_KEYS'].
        """
        self.dashboard = dashboard if dashboard is not None else Dashboard()
        self.resolver = resolver or resolve_resource
        if unique_uri_keys is None:
            unique_uri_keys = crud_settings()['UNIQUE_URI_KEYS']
        self.unique_uri_keys = unique_uri_keys
        self.resources = []

    def register(self, resources):
        """
        Register the given resources.

        Repeated calls accumulate. Every entry is validated before any of
        them is added.

        Args:
            resources: Resource instances, classes or dotted paths

        Returns:
            Arbitrator (for chaining)

        Raises:
            ConfigurationError: A resource is misconfigured
        """
        resolved = [self.validate(self.resolver(entry)) for entry in resources]

        if self.unique_uri_keys:
            self._check_uri_keys(resolved)

        self.resources.extend(resolved)
        logger.debug(f"Registered resources: {[resource.uri_key() for resource in resolved]}")
        return self

    def validate(self, resource):
        """
        Check a resource's model before it is registered.

        Raises:
            ConfigurationError: The object is not a Resource, its model is not
                a Django model, or the model lacks FilterableMixin
        """
        if not isinstance(resource, Resource):
            raise ConfigurationError(
                f'"{resource!r}" is not a dashboard resource.'
            )

        model = resource.model
        is_model = isinstance(model, type) and issubclass(model, models.Model) and model is not models.Model
        if not is_model:
            logger.error(f"Resource {resource.__class__.__name__} has no Django model")
            raise ConfigurationError(
                f'The resource "{resource.__class__.__name__}" must specify the Django model to generate.'
            )

        if not issubclass(model, FilterableMixin):
            logger.error(f"Model {model.__name__} of {resource.__class__.__name__} is not filterable")
            raise ConfigurationError(
                f'The model "{model.__module__}.{model.__name__}" must use FilterableMixin.'
            )

        return resource

    def _check_uri_keys(self, resolved):
        owners = {resource.uri_key(): type(resource) for resource in self.resources}
        for resource in resolved:
            key = resource.uri_key()
            owner = owners.setdefault(key, type(resource))
            if owner is not type(resource):
                raise ConfigurationError(
                    f'The URI key "{key}" of "{type(resource).__name__}" is already used by "{owner.__name__}".'
                )

    def boot(self, user, dashboard=None):
        """
        Publish menu entries and permissions of the resources visible to a user.

        Resources the user holds no permission for are left out. The rest are
        grouped by navigation title, groups are ordered by title and members
        by (sort, label). Safe to call repeatedly: permissions are registered
        once, menu entries are registered again on every call.

        Args:
            user: The current actor
            dashboard: Store to publish into (defaults to self.dashboard)
        """
        dashboard = dashboard if dashboard is not None else self.dashboard

        groups = defaultdict(list)
        for resource in self.resources:
            if user_has_access(user, resource.permission()):
                groups[resource.navigation_title()].append(resource)

        for group_index, title in enumerate(sorted(groups, key=_group_sort_key)):
            members = sorted(
                groups[title],
                key=lambda resource: (int(resource.sort()), natural_key(resource.label()))
            )
            for position, resource in enumerate(members):
                self.register_permission(resource, dashboard)
                self.register_menu(resource, group_index, position, dashboard)

    def find(self, key):
        """
        Get the first registered resource with the given URI key.

        Returns:
            Resource or None
        """
        for resource in self.resources:
            if resource.uri_key() == key:
                return resource
        return None

    def find_or_fail(self, key):
        """
        Like find(), but a missing resource raises ResourceNotFound (404).
        """
        resource = self.find(key)
        if resource is None:
            raise ResourceNotFound(f'Resource "{key}" not found.')
        return resource

    def register_menu(self, resource, group_index, position=0, dashboard=None):
        """
        Add a group header and a link for the resource to the main menu.

        Only the header emitted with the first entry of the first group is
        visible. Resources with navigation_title() False are skipped.
        """
        title = resource.navigation_title()
        if title is False:
            logger.debug(f"{resource.uri_key()} is hidden from navigation")
            return self

        dashboard = dashboard if dashboard is not None else self.dashboard
        if title is None:
            title = _(crud_settings()['NAVIGATION_TITLE'])

        header = (
            Menu.make()
            .can_see(group_index == 0 and position == 0)
            .title(title)
            .sort(resource.sort())
        )

        link = (
            Menu.make(resource.label())
            .icon(resource.icon())
            .route('crud:resource-list', resource=resource.uri_key())
            .active(self.active_menu(resource))
            .permission(resource.permission())
            .sort(resource.sort())
        )

        dashboard.register_menu_element(Dashboard.MENU_MAIN, header)
        dashboard.register_menu_element(Dashboard.MENU_MAIN, link)
        return self

    def register_permission(self, resource, dashboard=None):
        """
        Register the resource's permission unless it is already known.
        """
        permission = resource.permission()
        if permission is None:
            return self

        dashboard = dashboard if dashboard is not None else self.dashboard
        if permission in dashboard.permission_slugs():
            logger.debug(f"Permission '{permission}' already registered")
            return self

        dashboard.register_permissions(
            ItemPermission.group(crud_settings()['PERMISSION_GROUP'])
            .add_permission(permission, resource.label())
        )
        logger.info(f"Registered permission '{permission}' for {resource.uri_key()}")
        return self

    def active_menu(self, resource):
        """URL patterns of the list, create, view and edit screens of a resource."""
        key = resource.uri_key()
        return [
            reverse('crud:resource-list', kwargs={'resource': key}),
            reverse('crud:resource-create', kwargs={'resource': key}),
            reverse('crud:resource-view', kwargs={'resource': key, 'pk': '*'}),
            reverse('crud:resource-edit', kwargs={'resource': key, 'pk': '*'}),
        ]
