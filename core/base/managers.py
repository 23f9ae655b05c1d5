"""
Core Base Managers Module

Provides custom managers and querysets for base models.

**Architecture:**
- apply_filters: Query string filtering/sorting/search for FilterableMixin models
- FilterableQuerySet: Exposes apply_filters as queryset.filters()
- SoftDeleteQuerySet: For models with status field

Usage:
    from core.base import FilterableMixin, SoftDeleteMixin
    from core.base.managers import SoftDeleteManager

    class Post(FilterableMixin, SoftDeleteMixin, models.Model):
        objects = SoftDeleteManager()

    Post.objects.active().filters(request.query_params)
"""

from functools import reduce
import operator

from django.db import models
from django.db.models import Q
from core.base.models import StatusChoices


def apply_filters(queryset, query_params):
    """
    Apply filters from query parameters to any queryset of a FilterableMixin model.

    Args:
        queryset: QuerySet to narrow, whatever manager produced it
        query_params: QueryDict or dict. Recognised keys:
            - any name in model.allowed_filters: exact match
              (case-insensitive for strings)
            - search: Contains match across model.search_fields
            - sort: Comma separated names from model.allowed_sorts,
              '-' prefix for descending

    Returns:
        Filtered QuerySet

    Unknown keys are ignored.
    """
    model = queryset.model

    for name in getattr(model, 'allowed_filters', []):
        value = query_params.get(name)
        if value in (None, ''):
            continue
        if isinstance(value, str):
            queryset = queryset.filter(**{f'{name}__iexact': value})
        else:
            queryset = queryset.filter(**{name: value})

    search = query_params.get('search')
    search_fields = getattr(model, 'search_fields', [])
    if search and search_fields:
        queryset = queryset.filter(reduce(
            operator.or_,
            (Q(**{f'{field}__icontains': search}) for field in search_fields)
        ))

    sort = query_params.get('sort')
    if sort:
        allowed_sorts = getattr(model, 'allowed_sorts', [])
        ordering = [
            term for term in (part.strip() for part in sort.split(','))
            if term.lstrip('-') in allowed_sorts
        ]
        if ordering:
            queryset = queryset.order_by(*ordering)

    return queryset


class FilterableQuerySet(models.QuerySet):
    """
    QuerySet applying query parameters declared by a FilterableMixin model.

    Methods:
        - filters: Apply allowed filters, search and sort (see apply_filters)
    """

    def filters(self, query_params):
        return apply_filters(self, query_params)


class FilterableManager(models.Manager.from_queryset(FilterableQuerySet)):
    """
    Manager for FilterableMixin models.

    Usage:
        class Post(FilterableMixin, models.Model):
            objects = FilterableManager()

        Post.objects.filters({'search': 'django'})
    """
    pass


class SoftDeleteQuerySet(FilterableQuerySet):
    """
    QuerySet for SoftDeleteMixin models (models with status field).

    Methods:
        - active(): Return status=ACTIVE records
        - inactive(): Return status=INACTIVE records
    """

    def active(self):
        """Return only active records (status=ACTIVE)."""
        return self.filter(status=StatusChoices.ACTIVE)

    def inactive(self):
        """Return only inactive records (status=INACTIVE)."""
        return self.filter(status=StatusChoices.INACTIVE)


class SoftDeleteManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    """
    Manager for SoftDeleteMixin models.

    Usage:
        class Post(SoftDeleteMixin, models.Model):
            objects = SoftDeleteManager()

        Post.objects.active()
        Post.objects.inactive()
    """
    pass
