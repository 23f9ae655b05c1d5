"""
Dashboard endpoints.

Every resource endpoint resolves the resource from the URL's URI key on the
default site (404 if unknown) and checks the resource's permission (403)
before touching the model.
"""
import logging

from dateutil.parser import isoparse
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated

from core.base.managers import apply_filters
from core.base.models import StatusChoices
from crud.dashboard import Dashboard
from crud.permissions import check_resource_access
from crud.serializers import validate_input, validate_selection
from crud.sites import site
from crud_project.pagination import ResourcePagination
from crud_project.response_formatter import success_response, error_response

logger = logging.getLogger(__name__)


# ============================================================================
# HELPERS
# ============================================================================

def _get_resource(request, resource_key):
    resource = site.find_or_fail(resource_key)
    check_resource_access(request.user, resource)
    return resource


def _get_instance(resource, pk):
    try:
        return resource.model._default_manager.get(pk=pk)
    except (resource.model.DoesNotExist, ValueError, DjangoValidationError):
        raise NotFound(f"{resource.singular_label()} '{pk}' not found.")


def _display(value):
    """Make a column/legend value JSON friendly."""
    if isinstance(value, models.Model):
        return str(value)
    if hasattr(value, 'all') and callable(value.all):
        return [str(item) for item in value.all()]
    return value


def _list_queryset(resource, params):
    queryset = resource.model._default_manager.all()

    if resource.soft_deletes():
        trashed = params.get('trashed')
        if trashed == 'only':
            queryset = queryset.filter(status=StatusChoices.INACTIVE)
        elif trashed != 'with':
            queryset = queryset.filter(status=StatusChoices.ACTIVE)

    relations = resource.eager_load()
    if relations:
        queryset = queryset.prefetch_related(*relations)

    queryset = apply_filters(queryset, params)

    for resource_filter in resource.filters():
        queryset = resource_filter.apply(queryset, params)

    if not queryset.ordered:
        queryset = queryset.order_by('-pk')
    return queryset


def _row(resource, instance):
    row = {'id': instance.pk}
    for column in resource.columns():
        row[column.name] = _display(column.value(instance))
    if resource.soft_deletes():
        row['trashed'] = instance.trashed()
    return row


def _form(resource, instance=None):
    fields = []
    for field in resource.fields():
        entry = field.to_dict()
        entry['value'] = _display(field.value(instance))
        fields.append(entry)
    return fields


def _form_values(resource, instance):
    values = {'id': instance.pk}
    for field in resource.fields():
        values[field.name] = _display(field.value(instance))
    return values


def _has_traffic_cop_conflict(resource, instance, retrieved_at):
    """
    True when the instance changed after the edit form was retrieved.

    Only checked for resources with traffic_cop() enabled and when the
    client sent the retrieval time.
    """
    if not resource.traffic_cop() or not retrieved_at:
        return False

    updated_at = getattr(instance, 'updated_at', None)
    if updated_at is None:
        return False

    try:
        retrieved = isoparse(str(retrieved_at))
    except ValueError:
        raise ValidationError({'_retrieved_at': ['Enter a valid ISO 8601 date/time.']})

    if timezone.is_naive(retrieved):
        retrieved = timezone.make_aware(retrieved)
    return updated_at > retrieved


# ============================================================================
# NAVIGATION
# ============================================================================

@api_view(['GET'])
@permission_classes([IsAuthenticated])
def navigation(request):
    """
    Main menu of the dashboard for the current user.

    Query Params:
    - path: URL of the page being displayed, used to flag the active entry
    """
    dashboard = site.dashboard.fork()
    site.boot(request.user, dashboard)
    menu = dashboard.render_menu(
        Dashboard.MENU_MAIN,
        user=request.user,
        path=request.query_params.get('path'),
    )
    return success_response(data={'menu': menu})


# ============================================================================
# RESOURCE SCREENS
# ============================================================================

@api_view(['GET'])
@permission_classes([IsAuthenticated])
def resource_list(request, resource):
    """
    Paginated list of a resource.

    Query Params:
    - any filter allowed by the model or a resource filter
    - search: Search across the model's search_fields
    - sort: Comma separated sort fields ('-' for descending)
    - trashed: 'with' or 'only' for soft deleting resources
    - page, page_size
    """
    resource = _get_resource(request, resource)
    queryset = _list_queryset(resource, request.query_params)

    paginator = ResourcePagination(resource)
    page = paginator.paginate_queryset(queryset, request)
    rows = [_row(resource, instance) for instance in page]

    screen = {
        'label': resource.label(),
        'description': resource.description(),
        'breadcrumbs': resource.list_breadcrumbs_message(),
        'columns': [column.to_dict() for column in resource.columns()],
        'filters': [resource_filter.to_dict() for resource_filter in resource.filters()],
        'actions': [action.to_dict() for action in resource.actions()],
        'soft_deletes': resource.soft_deletes(),
        'labels': {
            'create': resource.create_button_label(),
            'actions': resource.list_screen_actions_label(),
            'actions_dropdown': resource.actions_dropdown_label(),
            'view': resource.list_screen_actions_view_label(),
            'edit': resource.list_screen_actions_edit_label(),
        },
    }
    return paginator.get_paginated_response(rows, screen=screen)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def resource_create(request, resource):
    """
    GET the empty create form or POST a new record.
    """
    resource = _get_resource(request, resource)

    if request.method == 'GET':
        return success_response(data={
            'title': resource.create_breadcrumbs_message(),
            'description': resource.description(),
            'fields': _form(resource),
            'button': resource.create_button_label(),
        })

    instance = resource.get_model()
    data = validate_input(resource, request.data, instance)
    resource.on_save(data, instance)
    logger.info(f"Created {resource.uri_key()} #{instance.pk}")

    return success_response(
        data=_form_values(resource, instance),
        message=resource.create_toast_message(),
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET', 'DELETE'])
@permission_classes([IsAuthenticated])
def resource_view(request, resource, pk):
    """
    GET the legend of a record or DELETE it.

    DELETE soft deletes records of soft deleting resources.
    """
    resource = _get_resource(request, resource)
    instance = _get_instance(resource, pk)

    if request.method == 'DELETE':
        resource.on_delete(instance)
        logger.info(f"Deleted {resource.uri_key()} #{pk}")
        return success_response(message=resource.delete_toast_message())

    data = {
        'id': instance.pk,
        'title': resource.singular_label(),
        'description': resource.description(),
        'legend': [
            {**sight.to_dict(), 'value': _display(sight.value(instance))}
            for sight in resource.legend()
        ],
        'labels': {
            'edit': resource.view_screen_edit_button_label(),
            'delete': resource.delete_button_label(),
        },
    }
    if resource.soft_deletes():
        data['trashed'] = instance.trashed()
        data['labels']['restore'] = resource.restore_button_label()
        data['labels']['force_delete'] = resource.force_delete_button_label()
    return success_response(data=data)


@api_view(['GET', 'PUT', 'PATCH', 'POST'])
@permission_classes([IsAuthenticated])
def resource_edit(request, resource, pk):
    """
    GET the edit form of a record or save it.

    The form carries 'retrieved_at'; send it back as '_retrieved_at'
    (query string or body). For traffic cop resources a record modified
    since then is not saved and 409 is returned with the current values.
    """
    resource = _get_resource(request, resource)
    instance = _get_instance(resource, pk)

    if request.method == 'GET':
        return success_response(data={
            'id': instance.pk,
            'title': resource.edit_breadcrumbs_message(),
            'description': resource.description(),
            'fields': _form(resource, instance),
            'retrieved_at': timezone.now().isoformat(),
            'button': resource.update_button_label(),
        })

    retrieved_at = request.query_params.get('_retrieved_at') or request.data.get('_retrieved_at')
    if _has_traffic_cop_conflict(resource, instance, retrieved_at):
        logger.warning(
            f"Traffic cop blocked update of {resource.uri_key()} #{pk}: "
            f"modified at {instance.updated_at.isoformat()}, retrieved at {retrieved_at}"
        )
        return error_response(
            message=resource.traffic_cop_message(),
            data={'fields': _form(resource, instance), 'retrieved_at': timezone.now().isoformat()},
            status_code=status.HTTP_409_CONFLICT
        )

    data = validate_input(resource, request.data, instance, partial=request.method == 'PATCH')
    resource.on_save(data, instance)
    logger.info(f"Updated {resource.uri_key()} #{pk}")

    return success_response(
        data=_form_values(resource, instance),
        message=resource.update_toast_message()
    )


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def resource_restore(request, resource, pk):
    """Restore a soft deleted record."""
    resource = _get_resource(request, resource)
    if not resource.soft_deletes():
        return error_response(message=f"{resource.label()} cannot be restored.")

    instance = _get_instance(resource, pk)
    resource.on_restore(instance)
    logger.info(f"Restored {resource.uri_key()} #{pk}")
    return success_response(message=resource.restore_toast_message())


@api_view(['DELETE', 'POST'])
@permission_classes([IsAuthenticated])
def resource_force_delete(request, resource, pk):
    """Permanently delete a record of a soft deleting resource."""
    resource = _get_resource(request, resource)
    if not resource.soft_deletes():
        return error_response(message=f"{resource.label()} cannot be force deleted.")

    instance = _get_instance(resource, pk)
    resource.on_force_delete(instance)
    logger.info(f"Force deleted {resource.uri_key()} #{pk}")
    return success_response(message=resource.force_delete_toast_message())


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def resource_action(request, resource, action):
    """
    Run a bulk action over the selected records.

    Request Body:
    - ids: Primary keys of the selected records
    """
    resource = _get_resource(request, resource)

    selected = next((item for item in resource.actions() if item.uri_key() == action), None)
    if selected is None:
        raise NotFound(f"Action '{action}' not found.")

    ids = validate_selection(resource, request.data)
    if not ids:
        return error_response(message=resource.empty_resource_for_action())

    queryset = resource.model._default_manager.filter(pk__in=ids)

    message = selected.handle(queryset)
    logger.info(f"Ran action {action} on {resource.uri_key()} ({len(ids)} selected)")
    return success_response(message=message or '')
